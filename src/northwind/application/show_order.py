"""Application service: Show Order use case (query)."""

from __future__ import annotations

from northwind.application.dto import (
    CustomerDTO,
    EmployeeDTO,
    FullOrderDetailDTO,
    FullOrderDTO,
    ShipperDTO,
    ShippingAddressDTO,
)
from northwind.domain.model.order import Order
from northwind.domain.repository.order_repository import OrderRepository


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int) -> FullOrderDTO:
        return self._to_dto(self._order_repo.get_order(order_id))

    @staticmethod
    def _to_dto(order: Order) -> FullOrderDTO:
        address = order.shipping_address
        return FullOrderDTO(
            id=order.id,
            customer=CustomerDTO(
                code=order.customer.code.code,
                company_name=order.customer.company_name,
            ),
            employee=EmployeeDTO(
                id=order.employee.id,
                first_name=order.employee.first_name,
                last_name=order.employee.last_name,
                country=order.employee.country,
                full_name=order.employee.full_name,
            ),
            shipper=ShipperDTO(
                id=order.shipper.id,
                company_name=order.shipper.company_name,
            ),
            order_date=order.order_date,
            required_date=order.required_date,
            shipped_date=order.shipped_date,
            freight=order.freight,
            ship_name=order.ship_name,
            shipping_address=ShippingAddressDTO(
                address=address.address,
                city=address.city,
                region=address.region,
                postal_code=address.postal_code,
                country=address.country,
            ),
            order_details=[
                FullOrderDetailDTO(
                    product_id=detail.product.id,
                    product_name=detail.product.product_name,
                    category=detail.product.category,
                    supplier=detail.product.supplier,
                    unit_price=detail.unit_price,
                    quantity=detail.quantity,
                    discount=detail.discount,
                    line_total=detail.line_total,
                )
                for detail in order.order_details
            ],
            subtotal=order.subtotal,
        )
