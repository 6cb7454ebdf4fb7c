"""Order aggregate, the core of the domain.

The Order is an aggregate root that owns its line items. A line item
has no identity of its own: it is identified by its product within the
owning order, mirroring the (order, product) key of the line-item table.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from northwind.domain.exceptions import ValidationError
from northwind.domain.model.references import Customer, Employee, Product, Shipper
from northwind.domain.model.value_objects import ShippingAddress


@dataclass
class OrderDetail:
    """A single line of an order.

    ``order`` points back at the owning aggregate. It is structural only:
    it is left out of ``repr`` and equality and is never serialized, so
    walking an order never recurses through its lines.
    """

    product: Product
    unit_price: Decimal
    quantity: int
    discount: float = 0.0
    order: Order | None = field(default=None, repr=False, compare=False)

    @property
    def line_total(self) -> Decimal:
        gross = Decimal(self.unit_price) * self.quantity
        return gross * (1 - Decimal(str(self.discount)))


@dataclass
class Order:
    """Aggregate root for sales orders.

    ``id`` is 0 for an order that has not been added yet; the repository
    assigns the store-generated identity on add. The ``__init__`` does
    not validate so that persisted orders can be reconstituted as-is;
    call ``validate_details()`` before writing.
    """

    id: int
    customer: Customer
    employee: Employee
    shipper: Shipper
    order_date: datetime
    required_date: datetime
    freight: Decimal
    ship_name: str
    shipping_address: ShippingAddress
    shipped_date: datetime | None = None
    order_details: list[OrderDetail] = field(default_factory=list)

    def __post_init__(self) -> None:
        for detail in self.order_details:
            detail.order = self

    # --- Line items -----------------------------------------------------------

    def add_detail(self, detail: OrderDetail) -> None:
        detail.order = self
        self.order_details.append(detail)

    def replace_details(self, details: list[OrderDetail]) -> None:
        """Swap the whole line-item set for ``details``."""
        for old in self.order_details:
            old.order = None
        self.order_details = []
        for detail in details:
            self.add_detail(detail)

    # --- Invariants -----------------------------------------------------------

    def validate_details(self) -> None:
        """Check every line item, raising ValidationError on the first violation.

        Runs over the whole set before anything is written, so a bad
        line anywhere in the order means nothing is persisted.
        """
        seen: set[int] = set()
        for detail in self.order_details:
            if detail.product is None or detail.product.id <= 0:
                raise ValidationError("Product id must be greater than zero.")
            price = Decimal(str(detail.unit_price))
            if not price.is_finite() or price < 0:
                raise ValidationError(
                    "Unit price must be greater than or equal to zero."
                )
            if isinstance(detail.quantity, bool) or not isinstance(detail.quantity, int):
                raise ValidationError(
                    f"Quantity must be an integer, got {type(detail.quantity).__name__}"
                )
            if detail.quantity <= 0:
                raise ValidationError("Quantity must be greater than zero.")
            if not 0 <= detail.discount <= 1:
                raise ValidationError("Discount must be between 0 and 1.")
            if detail.product.id in seen:
                raise ValidationError(
                    f"Product {detail.product.id} appears more than once in the order."
                )
            seen.add(detail.product.id)

    # --- Computed properties --------------------------------------------------

    @property
    def subtotal(self) -> Decimal:
        result = Decimal("0")
        for detail in self.order_details:
            result += detail.line_total
        return result
