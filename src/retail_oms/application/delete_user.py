"""Application service: Delete User use case."""

from __future__ import annotations

import structlog

from retail_oms.domain.exceptions import EntityNotFoundError, InvalidStateError
from retail_oms.domain.repository.order_repository import OrderRepository
from retail_oms.domain.repository.user_repository import UserRepository

logger = structlog.get_logger(__name__)


class DeleteUserHandler:

    def __init__(
        self,
        user_repo: UserRepository,
        order_repo: OrderRepository,
    ) -> None:
        self._user_repo = user_repo
        self._order_repo = order_repo

    def handle(self, user_id: str) -> None:
        """Delete a user who owns no orders."""
        if self._user_repo.get_by_id(user_id) is None:
            raise EntityNotFoundError(f"User not found with id: {user_id}")

        orders = self._order_repo.find_by_user(user_id)
        if orders:
            raise InvalidStateError(
                f"Cannot delete user {user_id} — they still own {len(orders)} order(s)"
            )

        self._user_repo.delete_by_id(user_id)
        logger.info("User deleted", user_id=user_id)
