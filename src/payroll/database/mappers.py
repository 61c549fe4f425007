"""Mapper functions to convert between domain models and SQLAlchemy models."""

from decimal import Decimal

from payroll.domain import entities as domain
from payroll.database.models import (
    Company as ORMCompany,
    Position as ORMPosition,
    User as ORMUser,
    Transaction as ORMTransaction,
)


def company_to_domain(orm_company: ORMCompany) -> domain.Company:
    """Convert SQLAlchemy Company model to domain Company entity."""
    return domain.Company(
        id=orm_company.id,
        name=orm_company.name,
        address=orm_company.address,
        balance=Decimal(orm_company.balance),
        created_at=orm_company.created_at,
        updated_at=orm_company.updated_at,
    )


def position_to_domain(orm_position: ORMPosition) -> domain.Position:
    """Convert SQLAlchemy Position model to domain Position entity."""
    return domain.Position(
        id=orm_position.id,
        name=orm_position.name,
        salary=Decimal(orm_position.salary),
        created_at=orm_position.created_at,
        updated_at=orm_position.updated_at,
    )


def user_to_domain(orm_user: ORMUser) -> domain.User:
    """Convert SQLAlchemy User model to domain User entity.

    The position is resolved only when the relationship is loaded.
    """
    position = None
    if orm_user.position is not None:
        position = position_to_domain(orm_user.position)

    return domain.User(
        id=orm_user.id,
        secret_id=orm_user.secret_id,
        name=orm_user.name,
        email=orm_user.email,
        phone=orm_user.phone,
        address=orm_user.address,
        position_id=orm_user.position_id,
        position=position,
        created_at=orm_user.created_at,
        updated_at=orm_user.updated_at,
    )


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    return domain.Transaction(
        id=orm_transaction.id,
        amount=Decimal(orm_transaction.amount),
        note=orm_transaction.note,
        type=domain.TransactionType(orm_transaction.type),
        created_at=orm_transaction.created_at,
        updated_at=orm_transaction.updated_at,
    )
