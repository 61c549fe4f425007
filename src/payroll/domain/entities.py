"""Domain model entities for payroll.

These are pure data classes representing business concepts, independent of
database schema. A value built from a request carries no identity and no
timestamps; the repository assigns those when it persists the record.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional


class TransactionType(str, Enum):
    """Direction of a balance mutation."""

    DEBIT = "debit"
    CREDIT = "credit"


@dataclass(frozen=True)
class Company:
    """Company domain entity. There is a single company per database."""

    id: Optional[int] = None
    name: str = ""
    address: str = ""
    balance: Decimal = Decimal("0")
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class Position:
    """Position domain entity."""

    id: Optional[int] = None
    name: str = ""
    salary: Decimal = Decimal("0")
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class User:
    """Employee domain entity.

    ``position`` is only populated when the repository resolved the
    association; ``position_id`` is always set.
    """

    id: Optional[int] = None
    secret_id: str = ""
    name: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    position_id: Optional[int] = None
    position: Optional[Position] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class Transaction:
    """Balance transaction domain entity."""

    id: Optional[int] = None
    amount: Decimal = Decimal("0")
    note: str = ""
    type: TransactionType = TransactionType.DEBIT
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
