"""Application service: List Orders use case (query)."""

from __future__ import annotations

from northwind.application.dto import BriefOrderDTO
from northwind.domain.model.order import Order
from northwind.domain.repository.order_repository import OrderRepository

DEFAULT_SKIP = 0
DEFAULT_COUNT = 10


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(
        self,
        skip: int | None = None,
        count: int | None = None,
    ) -> list[BriefOrderDTO]:
        """Return one page of orders, oldest id first.

        Missing paging arguments fall back to the first ten orders.
        """
        skip = DEFAULT_SKIP if skip is None else skip
        count = DEFAULT_COUNT if count is None else count
        orders = self._order_repo.list_orders(skip, count)
        return [self._to_dto(order) for order in orders]

    @staticmethod
    def _to_dto(order: Order) -> BriefOrderDTO:
        address = order.shipping_address
        return BriefOrderDTO(
            id=order.id,
            customer_id=order.customer.code.code,
            employee_id=order.employee.id,
            shipper_id=order.shipper.id,
            order_date=order.order_date,
            required_date=order.required_date,
            shipped_date=order.shipped_date,
            freight=order.freight,
            ship_name=order.ship_name,
            ship_address=address.address,
            ship_city=address.city,
            ship_region=address.region,
            ship_postal_code=address.postal_code,
            ship_country=address.country,
        )
