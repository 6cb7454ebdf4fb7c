"""Application service: Add Order use case.

Builds a transient Order from the flat input shape and hands it to the
repository. Reference projections are filled with ids only; the store
supplies their display fields on the next read.
"""

from __future__ import annotations

import logging

from northwind.application.dto import BriefOrderDTO
from northwind.domain.model.order import Order, OrderDetail
from northwind.domain.model.references import Customer, Employee, Product, Shipper
from northwind.domain.model.value_objects import CustomerCode, ShippingAddress
from northwind.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class AddOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, dto: BriefOrderDTO) -> int:
        """Create a new order and return its generated id."""
        order = order_from_brief(dto, order_id=0)
        order_id = self._order_repo.add_order(order)
        logger.debug("Order #%s created for customer %s", order_id, dto.customer_id)
        return order_id


def order_from_brief(dto: BriefOrderDTO, order_id: int) -> Order:
    """Map the flat input shape onto an Order with the given identity."""
    return Order(
        id=order_id,
        customer=Customer(code=CustomerCode(dto.customer_id)),
        employee=Employee(id=dto.employee_id),
        shipper=Shipper(id=dto.shipper_id),
        order_date=dto.order_date,
        required_date=dto.required_date,
        shipped_date=dto.shipped_date,
        freight=dto.freight,
        ship_name=dto.ship_name,
        shipping_address=ShippingAddress(
            address=dto.ship_address,
            city=dto.ship_city,
            region=dto.ship_region,
            postal_code=dto.ship_postal_code,
            country=dto.ship_country,
        ),
        order_details=[
            OrderDetail(
                product=Product(id=line.product_id),
                unit_price=line.unit_price,
                quantity=line.quantity,
                discount=line.discount,
            )
            for line in dto.order_details
        ],
    )
