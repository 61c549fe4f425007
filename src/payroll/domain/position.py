"""Position usecase."""

import logging

from payroll.database.base import PositionRepository
from payroll.domain.entities import Position
from payroll.domain.requests import PositionRequest, position_from_request

logger = logging.getLogger(__name__)


class PositionUsecase:
    """Usecase for managing positions."""

    def __init__(self, position_repo: PositionRepository):
        """Initialize position usecase.

        Args:
            position_repo: Position repository
        """
        self.position_repo = position_repo

    def get_by_id(self, position_id: int) -> Position:
        """Get position by ID.

        Raises:
            NotFoundError: If position does not exist
        """
        return self.position_repo.find_by_id(position_id)

    def fetch_position(self, limit: int, offset: int) -> list[Position]:
        """List positions.

        Args:
            limit: Maximum number of rows, 0 for no limit
            offset: Number of rows to skip

        Returns:
            Positions as returned by the repository
        """
        return self.position_repo.fetch(limit, offset)

    def destroy_position(self, position_id: int) -> None:
        """Delete a position."""
        self.position_repo.delete(position_id)
        logger.info("Deleted position %s", position_id)

    def edit_position(self, position_id: int, request: PositionRequest) -> Position:
        """Replace name and salary of an existing position.

        Args:
            position_id: Position ID to edit
            request: New name and salary

        Returns:
            Updated position

        Raises:
            NotFoundError: If position does not exist (nothing is updated)
        """
        self.position_repo.find_by_id(position_id)

        position = self.position_repo.update_by_id(position_id, position_from_request(request))
        logger.info("Edited position %s", position_id)
        return position

    def store_position(self, request: PositionRequest) -> Position:
        """Create a position.

        Args:
            request: Name and salary

        Returns:
            Created position
        """
        position = self.position_repo.create(position_from_request(request))
        logger.info("Created position %r with salary %s", request.name, request.salary)
        return position
