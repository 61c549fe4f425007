"""Database layer for payroll application."""

from payroll.database.base import (
    CompanyRepository,
    PositionRepository,
    UserRepository,
    TransactionRepository,
)
from payroll.database.factories import create_sqlite_database

__all__ = [
    "CompanyRepository",
    "PositionRepository",
    "UserRepository",
    "TransactionRepository",
    "create_sqlite_database",
]
