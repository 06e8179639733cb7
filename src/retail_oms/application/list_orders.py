"""Application service: List Orders use case (reporting queries).

None of these queries take part in the order lifecycle; they exist for
reporting on top of the same order store.
"""

from __future__ import annotations

from datetime import datetime, timezone

from retail_oms.application.dto import OrderDTO, to_order_dto
from retail_oms.domain.exceptions import EntityNotFoundError, ValidationError
from retail_oms.domain.model.order import Order, OrderStatus
from retail_oms.domain.repository.order_repository import OrderRepository
from retail_oms.domain.repository.user_repository import UserRepository


class ListOrdersHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        user_repo: UserRepository,
    ) -> None:
        self._order_repo = order_repo
        self._user_repo = user_repo

    def all(self) -> list[OrderDTO]:
        return self._to_dtos(self._order_repo.list_all())

    def by_user(self, user_id: str) -> list[OrderDTO]:
        if self._user_repo.get_by_id(user_id) is None:
            raise EntityNotFoundError(f"User not found with id: {user_id}")
        return self._to_dtos(self._order_repo.find_by_user(user_id))

    def by_status(self, status: OrderStatus) -> list[OrderDTO]:
        return self._to_dtos(self._order_repo.find_by_status(status))

    def by_date_range(self, start: datetime, end: datetime) -> list[OrderDTO]:
        """Orders placed between *start* and *end*, inclusive.

        Naive bounds are taken to be UTC, the zone order dates are kept in.
        """
        start, end = _as_utc(start), _as_utc(end)
        if start > end:
            raise ValidationError(
                f"Start date {start.isoformat()} is after end date {end.isoformat()}"
            )
        return self._to_dtos(self._order_repo.find_by_date_range(start, end))

    @staticmethod
    def _to_dtos(orders: list[Order]) -> list[OrderDTO]:
        return [to_order_dto(o) for o in sorted(orders, key=lambda o: o.id or 0)]


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
