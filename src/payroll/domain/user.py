"""User usecase."""

import logging
from decimal import Decimal

from payroll.database.base import CompanyRepository, PositionRepository, UserRepository
from payroll.domain.entities import User
from payroll.domain.errors import (
    NotFoundError,
    ValidationError,
    position_id_not_valid,
    secret_id_not_valid,
)
from payroll.domain.requests import UserRequest, WithdrawRequest, user_from_request

logger = logging.getLogger(__name__)


def withdraw_note(user: User) -> str:
    """Return the transaction note recorded for a salary withdrawal."""
    return f"{user.name} withdraw salary "


class UserUsecase:
    """Usecase for managing employees and their salary withdrawals."""

    def __init__(
        self,
        user_repo: UserRepository,
        position_repo: PositionRepository,
        company_repo: CompanyRepository,
    ):
        """Initialize user usecase.

        Args:
            user_repo: User repository
            position_repo: Position repository, used to check position references
            company_repo: Company repository, debited on salary withdrawal
        """
        self.user_repo = user_repo
        self.position_repo = position_repo
        self.company_repo = company_repo

    def get_by_id(self, user_id: int) -> User:
        """Get user by ID with the position resolved."""
        return self.user_repo.find_by_id(user_id)

    def fetch_user(self, limit: int, offset: int) -> list[User]:
        """List users."""
        return self.user_repo.fetch(limit, offset)

    def destroy_user(self, user_id: int) -> None:
        """Delete a user."""
        self.user_repo.delete(user_id)
        logger.info("Deleted user %s", user_id)

    def edit_user(self, user_id: int, request: UserRequest) -> User:
        """Replace every editable field of an existing user.

        Raises:
            NotFoundError: If user does not exist (nothing is updated)
        """
        self.user_repo.find_by_id(user_id)

        user = self.user_repo.update_by_id(user_id, user_from_request(request))
        logger.info("Edited user %s", user_id)
        return user

    def store_user(self, request: UserRequest) -> User:
        """Create a user after checking that the referenced position exists.

        Args:
            request: User fields, including the position ID

        Returns:
            Created user

        Raises:
            ValidationError: If the position does not exist
        """
        try:
            self.position_repo.find_by_id(request.position_id)
        except NotFoundError as e:
            logger.warning("Rejected user %r: position %s does not exist", request.name, request.position_id)
            raise ValidationError(position_id_not_valid()) from e

        user = self.user_repo.create(user_from_request(request))
        logger.info("Created user %r in position %s", request.name, request.position_id)
        return user

    def withdraw_salary(self, request: WithdrawRequest) -> None:
        """Pay out the user's salary from the company balance.

        The secret id must match before anything is debited. The debit and
        its transaction record are a single repository operation.

        Args:
            request: User ID and the user's secret id

        Raises:
            NotFoundError: If user does not exist
            ValidationError: If the secret id does not match
        """
        user = self.user_repo.find_by_id(request.id)

        if request.secret_id != user.secret_id:
            logger.warning("Rejected salary withdrawal for user %s: secret id mismatch", user.id)
            raise ValidationError(secret_id_not_valid())

        salary = self._salary_of(user)
        self.company_repo.debit_balance(salary, withdraw_note(user))
        logger.info("User %s withdrew salary %s", user.id, salary)

    def _salary_of(self, user: User) -> Decimal:
        if user.position is not None:
            return user.position.salary
        return self.position_repo.find_by_id(user.position_id).salary
