"""Application service: Create Order use case.

Resolves the owning user, lets the Order aggregate validate its creation
rules and persists the new, empty PENDING order.
"""

from __future__ import annotations

import structlog

from retail_oms.application.dto import OrderDTO, to_order_dto
from retail_oms.domain.exceptions import EntityNotFoundError
from retail_oms.domain.model.order import Order
from retail_oms.domain.repository.order_repository import OrderRepository
from retail_oms.domain.repository.user_repository import UserRepository

logger = structlog.get_logger(__name__)


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        user_repo: UserRepository,
    ) -> None:
        self._order_repo = order_repo
        self._user_repo = user_repo

    def handle(self, user_id: str, shipping_address: str) -> OrderDTO:
        user = self._user_repo.get_by_id(user_id)
        if user is None:
            raise EntityNotFoundError(f"User not found with id: {user_id}")

        order = Order.create(user=user, shipping_address=shipping_address)
        self._order_repo.save(order)

        logger.info("Order created", order_id=order.id, user_id=user.id)
        return to_order_dto(order)
