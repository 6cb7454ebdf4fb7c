"""Application service: Remove Order use case."""

from __future__ import annotations

from northwind.domain.repository.order_repository import OrderRepository


class RemoveOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int) -> None:
        self._order_repo.remove_order(order_id)
