"""Application service: Update Order use case.

The incoming line items replace the stored set entirely. Lines left
out of ``dto.order_details`` are deleted, not kept.
"""

from __future__ import annotations

from northwind.application.add_order import order_from_brief
from northwind.application.dto import BriefOrderDTO
from northwind.domain.repository.order_repository import OrderRepository


class UpdateOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int, dto: BriefOrderDTO) -> None:
        # The id in the path wins over any id in the body.
        self._order_repo.update_order(order_from_brief(dto, order_id=order_id))
