"""Request objects accepted by the usecases and their domain mappings.

Field lists for each request type live here so the copy from request to
domain value can be audited in one place.
"""

from dataclasses import dataclass
from decimal import Decimal

from payroll.domain.entities import Company, Position, User


@dataclass(frozen=True)
class CompanyRequest:
    """Create-or-update payload for the company profile."""

    name: str
    address: str
    balance: Decimal = Decimal("0")


@dataclass(frozen=True)
class TopupCompanyBalance:
    """Top-up payload."""

    balance: Decimal


@dataclass(frozen=True)
class PositionRequest:
    """Create or edit payload for a position."""

    name: str
    salary: Decimal


@dataclass(frozen=True)
class UserRequest:
    """Create or edit payload for an employee."""

    secret_id: str
    name: str
    email: str
    phone: str
    address: str
    position_id: int


@dataclass(frozen=True)
class WithdrawRequest:
    """Salary withdrawal payload."""

    id: int
    secret_id: str


def company_from_request(request: CompanyRequest) -> Company:
    """Build an identity-less Company from a request."""
    return Company(
        name=request.name,
        address=request.address,
        balance=request.balance,
    )


def position_from_request(request: PositionRequest) -> Position:
    """Build an identity-less Position from a request."""
    return Position(name=request.name, salary=request.salary)


def user_from_request(request: UserRequest) -> User:
    """Build an identity-less User from a request.

    The resolved position is left unset; only the reference is copied.
    """
    return User(
        secret_id=request.secret_id,
        name=request.name,
        email=request.email,
        phone=request.phone,
        address=request.address,
        position_id=request.position_id,
    )
