"""Translation between persisted rows and the Order aggregate.

Reading denormalizes: customer, employee and shipper display fields are
copied onto the reference projections, and each line's product carries
its category and supplier names. Writing goes the other way and keeps
only foreign keys; display text on the incoming aggregate is ignored
because the store derives it from the referenced rows.
"""

from __future__ import annotations

from decimal import Decimal

from northwind.domain.model.order import Order, OrderDetail
from northwind.domain.model.references import Customer, Employee, Product, Shipper
from northwind.domain.model.value_objects import CustomerCode, ShippingAddress
from northwind.infrastructure.persistence.models import OrderDetailModel, OrderModel


class OrderMapper:

    # --- Rows -> domain -------------------------------------------------------

    @staticmethod
    def to_domain(model: OrderModel, include_details: bool) -> Order:
        """Build an Order from a loaded row.

        With ``include_details=False`` (brief projection) the line-item
        relationship is never touched, so it need not be loaded.
        """
        order = Order(
            id=model.id,
            customer=Customer(
                code=CustomerCode(model.customer.id),
                company_name=model.customer.company_name,
            ),
            employee=Employee(
                id=model.employee.id,
                first_name=model.employee.first_name,
                last_name=model.employee.last_name,
                country=model.employee.country or "",
            ),
            shipper=Shipper(
                id=model.shipper.id,
                company_name=model.shipper.company_name,
            ),
            order_date=model.order_date,
            required_date=model.required_date,
            shipped_date=model.shipped_date,
            freight=_as_decimal(model.freight),
            ship_name=model.ship_name,
            shipping_address=ShippingAddress(
                address=model.ship_address,
                city=model.ship_city,
                region=model.ship_region,
                postal_code=model.ship_postal_code,
                country=model.ship_country,
            ),
        )

        if include_details:
            for row in sorted(model.details, key=lambda d: d.product_id):
                order.add_detail(OrderMapper._detail_to_domain(row))

        return order

    @staticmethod
    def _detail_to_domain(row: OrderDetailModel) -> OrderDetail:
        product = row.product
        return OrderDetail(
            product=Product(
                id=product.id,
                product_name=product.name,
                category_id=product.category_id,
                category=product.category.name,
                supplier_id=product.supplier_id,
                supplier=product.supplier.company_name,
            ),
            unit_price=_as_decimal(row.unit_price),
            quantity=row.quantity,
            discount=row.discount,
        )

    # --- Domain -> rows -------------------------------------------------------

    @staticmethod
    def to_model(order: Order) -> OrderModel:
        """Build a new, unsaved order row with its line rows attached.

        ``order.id`` is ignored; the store generates the key.
        """
        model = OrderModel()
        OrderMapper.apply_scalars(order, model)
        model.details = OrderMapper.detail_models(order)
        return model

    @staticmethod
    def apply_scalars(order: Order, model: OrderModel) -> None:
        """Copy every non-key column from ``order`` onto ``model``."""
        model.customer_id = order.customer.code.code
        model.employee_id = order.employee.id
        model.ship_via = order.shipper.id
        model.order_date = order.order_date
        model.required_date = order.required_date
        model.shipped_date = order.shipped_date
        model.freight = _as_decimal(order.freight)
        model.ship_name = order.ship_name
        model.ship_address = order.shipping_address.address
        model.ship_city = order.shipping_address.city
        model.ship_region = order.shipping_address.region
        model.ship_postal_code = order.shipping_address.postal_code
        model.ship_country = order.shipping_address.country

    @staticmethod
    def detail_models(order: Order) -> list[OrderDetailModel]:
        return [
            OrderDetailModel(
                product_id=detail.product.id,
                unit_price=_as_decimal(detail.unit_price),
                quantity=detail.quantity,
                discount=float(detail.discount),
            )
            for detail in order.order_details
        ]


def _as_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))
