"""Tests for the SQLAlchemy repositories on a temporary SQLite database."""

from datetime import datetime
from decimal import Decimal

import pytest
from sqlalchemy import text

from payroll.database import models
from payroll.database.factories import create_sqlite_database
from payroll.domain import entities
from payroll.domain.errors import NotFoundError, RepositoryError, ValidationError


def make_user(position_id: int, name: str = "user") -> entities.User:
    return entities.User(
        secret_id="asdjksakdas",
        name=name,
        email=f"{name}@company.com",
        phone="0852121280",
        address="Now St.",
        position_id=position_id,
    )


class TestCompanyRepository:
    """Tests for the company repository."""

    def test_get_without_company_raises_not_found(self, temp_db):
        with pytest.raises(NotFoundError):
            temp_db.companies.get()

    def test_create_or_update_creates_once(self, temp_db):
        created = temp_db.companies.create_or_update(
            entities.Company(name="Acme", address="Cempaka St.", balance=Decimal("1000"))
        )
        updated = temp_db.companies.create_or_update(
            entities.Company(name="Acme Corp", address="Melati St.", balance=Decimal("2000"))
        )

        assert isinstance(created, entities.Company)
        assert updated.id == created.id
        assert updated.name == "Acme Corp"
        assert updated.address == "Melati St."
        assert updated.balance == Decimal("2000")
        assert isinstance(updated.created_at, datetime)
        assert temp_db.companies.get() == updated

    def test_add_balance_records_credit(self, temp_db, sample_company):
        company = temp_db.companies.add_balance(Decimal("250000"))

        assert company.balance == Decimal("750000")
        transactions = temp_db.transactions.fetch(0, 0)
        assert len(transactions) == 1
        assert transactions[0].type == entities.TransactionType.CREDIT
        assert transactions[0].amount == Decimal("250000")
        assert transactions[0].note == "topup balance"

    def test_add_balance_without_company(self, temp_db):
        with pytest.raises(NotFoundError):
            temp_db.companies.add_balance(Decimal("1"))

    def test_debit_balance_records_debit(self, temp_db, sample_company):
        temp_db.companies.debit_balance(Decimal("100000"), "user withdraw salary ")

        assert temp_db.companies.get().balance == Decimal("400000")
        transactions = temp_db.transactions.fetch(0, 0)
        assert len(transactions) == 1
        assert transactions[0].type == entities.TransactionType.DEBIT
        assert transactions[0].note == "user withdraw salary "

    def test_debit_balance_insufficient(self, temp_db, sample_company):
        with pytest.raises(ValidationError):
            temp_db.companies.debit_balance(Decimal("500001"), "too much")

        assert temp_db.companies.get().balance == Decimal("500000")
        assert temp_db.transactions.fetch(0, 0) == []

    @pytest.mark.parametrize("amount", [Decimal("-600000"), Decimal("0")])
    def test_add_balance_rejects_non_positive_amount(self, temp_db, sample_company, amount):
        with pytest.raises(ValidationError, match="Top-up amount must be positive"):
            temp_db.companies.add_balance(amount)

        assert temp_db.companies.get().balance == Decimal("500000")
        assert temp_db.transactions.fetch(0, 0) == []

    def test_create_or_update_rejects_negative_balance(self, temp_db, sample_company):
        with pytest.raises(ValidationError, match="cannot be negative"):
            temp_db.companies.create_or_update(entities.Company(name="A", address="", balance=Decimal("-5")))

        assert temp_db.companies.get().balance == Decimal("500000")

    def test_balance_check_constraint(self, temp_db, sample_company):
        session = temp_db.get_session()
        session.add(models.Company(name="Other", address="", balance=Decimal("-1")))

        with pytest.raises(RepositoryError):
            temp_db.commit()

        assert temp_db.companies.get().balance == Decimal("500000")


class TestPositionRepository:
    """Tests for the position repository."""

    def test_create_and_find(self, temp_db):
        created = temp_db.positions.create(entities.Position(name="Manager", salary=Decimal("200000")))

        found = temp_db.positions.find_by_id(created.id)

        assert isinstance(found, entities.Position)
        assert found == created
        assert found.salary == Decimal("200000")

    def test_find_missing(self, temp_db):
        with pytest.raises(NotFoundError, match="Position 999 not found"):
            temp_db.positions.find_by_id(999)

    def test_fetch_pages(self, temp_db):
        for i in range(5):
            temp_db.positions.create(entities.Position(name=f"P{i}", salary=Decimal(i)))

        assert [p.name for p in temp_db.positions.fetch(0, 0)] == ["P0", "P1", "P2", "P3", "P4"]
        assert [p.name for p in temp_db.positions.fetch(2, 1)] == ["P1", "P2"]
        assert [p.name for p in temp_db.positions.fetch(0, 3)] == ["P3", "P4"]

    def test_update_by_id(self, temp_db, sample_position):
        updated = temp_db.positions.update_by_id(
            sample_position.id, entities.Position(name="Director", salary=Decimal("300000"))
        )

        assert updated.id == sample_position.id
        assert updated.name == "Director"
        assert updated.created_at == sample_position.created_at

    def test_negative_salary_rejected(self, temp_db):
        with pytest.raises(RepositoryError):
            temp_db.positions.create(entities.Position(name="Bad", salary=Decimal("-1")))

    def test_delete(self, temp_db, sample_position):
        temp_db.positions.delete(sample_position.id)

        with pytest.raises(NotFoundError):
            temp_db.positions.find_by_id(sample_position.id)

    def test_delete_missing(self, temp_db):
        with pytest.raises(NotFoundError):
            temp_db.positions.delete(999)


class TestUserRepository:
    """Tests for the user repository."""

    def test_find_resolves_position(self, temp_db, sample_position):
        created = temp_db.users.create(make_user(sample_position.id))

        found = temp_db.users.find_by_id(created.id)

        assert isinstance(found, entities.User)
        assert found.position == sample_position
        assert found.secret_id == "asdjksakdas"

    def test_create_with_unknown_position_fails(self, temp_db):
        with pytest.raises(RepositoryError):
            temp_db.users.create(make_user(999))

    def test_update_by_id_replaces_fields(self, temp_db, sample_position):
        other = temp_db.positions.create(entities.Position(name="Staff", salary=Decimal("50000")))
        created = temp_db.users.create(make_user(sample_position.id))

        updated = temp_db.users.update_by_id(created.id, make_user(other.id, name="renamed"))

        assert updated.name == "renamed"
        assert updated.email == "renamed@company.com"
        assert updated.position_id == other.id
        assert updated.position.name == "Staff"

    def test_fetch_and_delete(self, temp_db, sample_position):
        first = temp_db.users.create(make_user(sample_position.id, name="a"))
        temp_db.users.create(make_user(sample_position.id, name="b"))

        assert [u.name for u in temp_db.users.fetch(10, 0)] == ["a", "b"]

        temp_db.users.delete(first.id)
        assert [u.name for u in temp_db.users.fetch(10, 0)] == ["b"]

    def test_position_in_use_cannot_be_deleted(self, temp_db, sample_position):
        temp_db.users.create(make_user(sample_position.id))

        with pytest.raises(RepositoryError):
            temp_db.positions.delete(sample_position.id)


class TestTransactionRepository:
    """Tests for the transaction repository."""

    def test_newest_first(self, temp_db, sample_company):
        temp_db.companies.add_balance(Decimal("10"))
        temp_db.companies.debit_balance(Decimal("5"), "second")

        transactions = temp_db.transactions.fetch(0, 0)

        assert [t.note for t in transactions] == ["second", "topup balance"]
        assert all(isinstance(t, entities.Transaction) for t in transactions)
        assert [t.note for t in temp_db.transactions.fetch(1, 0)] == ["second"]


class TestStorageErrors:
    """Tests for storage failures surfacing as RepositoryError."""

    def test_open_non_database_file(self, tmp_path):
        path = tmp_path / "bad.db"
        path.write_text("this is not a database file, just some text\n" * 100)

        with pytest.raises(RepositoryError, match="file is not a database"):
            create_sqlite_database(str(path))

    def test_read_failure(self, temp_db, sample_position):
        session = temp_db.get_session()
        session.execute(text("DROP TABLE transactions"))

        with pytest.raises(RepositoryError):
            temp_db.transactions.fetch(0, 0)

        # The session is usable again after the rollback
        assert temp_db.positions.find_by_id(sample_position.id) == sample_position

    def test_debit_failure(self, temp_db, sample_company):
        session = temp_db.get_session()
        session.execute(text("DROP TABLE transactions"))
        session.commit()

        with pytest.raises(RepositoryError):
            temp_db.companies.debit_balance(Decimal("100"), "note")

        assert temp_db.companies.get().balance == Decimal("500000")
