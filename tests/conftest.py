"""Shared pytest fixtures for payroll tests."""

import tempfile
import os
from decimal import Decimal
import pytest

from payroll.database.factories import create_sqlite_database
from payroll.domain.company import CompanyUsecase
from payroll.domain.position import PositionUsecase
from payroll.domain.user import UserUsecase
from payroll.domain.transaction import TransactionUsecase
from payroll.domain.requests import CompanyRequest, PositionRequest, UserRequest


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def company_usecase(temp_db):
    """Create a CompanyUsecase with a temporary database."""
    return CompanyUsecase(temp_db.companies)


@pytest.fixture
def position_usecase(temp_db):
    """Create a PositionUsecase with a temporary database."""
    return PositionUsecase(temp_db.positions)


@pytest.fixture
def user_usecase(temp_db):
    """Create a UserUsecase with a temporary database."""
    return UserUsecase(temp_db.users, temp_db.positions, temp_db.companies)


@pytest.fixture
def transaction_usecase(temp_db):
    """Create a TransactionUsecase with a temporary database."""
    return TransactionUsecase(temp_db.transactions)


@pytest.fixture
def sample_company(company_usecase):
    """Create the company with an opening balance."""
    company, _ = company_usecase.create_or_update_company(
        CompanyRequest(name="Test Company", address="Cempaka St.", balance=Decimal("500000"))
    )
    return company


@pytest.fixture
def sample_position(position_usecase):
    """Create a sample position."""
    return position_usecase.store_position(PositionRequest(name="Manager", salary=Decimal("100000")))


@pytest.fixture
def sample_user(user_usecase, sample_position):
    """Create a sample user holding the sample position."""
    return user_usecase.store_user(
        UserRequest(
            secret_id="asdjksakdas",
            name="user",
            email="x@company.com",
            phone="0852121280",
            address="Now St.",
            position_id=sample_position.id,
        )
    )


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
