"""Transaction usecase."""

import logging
from http import HTTPStatus

from payroll.database.base import TransactionRepository
from payroll.domain.entities import Transaction

logger = logging.getLogger(__name__)


class TransactionUsecase:
    """Usecase for reading the balance transaction history."""

    def __init__(self, transaction_repo: TransactionRepository):
        """Initialize transaction usecase.

        Args:
            transaction_repo: Transaction repository
        """
        self.transaction_repo = transaction_repo

    def fetch(self, limit: int, offset: int) -> tuple[list[Transaction], HTTPStatus]:
        """List transactions, newest first.

        Args:
            limit: Maximum number of rows, 0 for no limit
            offset: Number of rows to skip

        Returns:
            Transactions and status
        """
        transactions = self.transaction_repo.fetch(limit, offset)
        logger.debug("Fetched %d transactions", len(transactions))
        return transactions, HTTPStatus.OK
