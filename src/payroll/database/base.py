"""Abstract repository interfaces.

Usecases depend only on these classes. Every method may raise a
``DomainError``; a missing record is always reported as ``NotFoundError``.
"""

from abc import ABC, abstractmethod
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from payroll.domain.entities import Company, Position, User, Transaction


class CompanyRepository(ABC):
    """Persistence for the single company record and its balance."""

    @abstractmethod
    def get(self) -> Company:
        """Get the company."""
        pass

    @abstractmethod
    def create_or_update(self, company: Company) -> Company:
        """Create the company, or overwrite name, address and balance if it exists."""
        pass

    @abstractmethod
    def add_balance(self, amount: Decimal) -> Company:
        """Credit the balance and record a credit transaction."""
        pass

    @abstractmethod
    def debit_balance(self, amount: Decimal, note: str) -> None:
        """Debit the balance and record a debit transaction with the note."""
        pass


class PositionRepository(ABC):
    """Persistence for positions."""

    @abstractmethod
    def find_by_id(self, position_id: int) -> Position:
        """Get position by ID."""
        pass

    @abstractmethod
    def fetch(self, limit: int, offset: int) -> list[Position]:
        """List positions. A limit of 0 or less returns every row after offset."""
        pass

    @abstractmethod
    def create(self, position: Position) -> Position:
        """Create a position."""
        pass

    @abstractmethod
    def update_by_id(self, position_id: int, position: Position) -> Position:
        """Replace name and salary of a position."""
        pass

    @abstractmethod
    def delete(self, position_id: int) -> None:
        """Delete a position."""
        pass


class UserRepository(ABC):
    """Persistence for employees."""

    @abstractmethod
    def find_by_id(self, user_id: int) -> User:
        """Get user by ID with the position resolved."""
        pass

    @abstractmethod
    def fetch(self, limit: int, offset: int) -> list[User]:
        """List users. A limit of 0 or less returns every row after offset."""
        pass

    @abstractmethod
    def create(self, user: User) -> User:
        """Create a user."""
        pass

    @abstractmethod
    def update_by_id(self, user_id: int, user: User) -> User:
        """Replace every editable field of a user."""
        pass

    @abstractmethod
    def delete(self, user_id: int) -> None:
        """Delete a user."""
        pass


class TransactionRepository(ABC):
    """Read access to the balance transaction history."""

    @abstractmethod
    def fetch(self, limit: int, offset: int) -> list[Transaction]:
        """List transactions, newest first."""
        pass
