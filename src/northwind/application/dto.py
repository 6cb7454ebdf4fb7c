"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals. None of them carries the line item's
back-reference to its order, so they can be walked and serialized
freely.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class BriefOrderDetailDTO:
    """A line item by product id only."""

    product_id: int
    unit_price: Decimal
    quantity: int
    discount: float = 0.0


@dataclass(frozen=True)
class BriefOrderDTO:
    """Flat order shape: foreign keys instead of nested references.

    Used both as input for add/update and as the row shape for listings
    (where ``order_details`` stays empty).
    """

    customer_id: str
    employee_id: int
    shipper_id: int
    order_date: datetime
    required_date: datetime
    freight: Decimal
    ship_name: str
    ship_address: str
    ship_city: str
    ship_postal_code: str
    ship_country: str
    ship_region: str | None = None
    shipped_date: datetime | None = None
    id: int = 0
    order_details: list[BriefOrderDetailDTO] = field(default_factory=list)


@dataclass(frozen=True)
class CustomerDTO:
    code: str
    company_name: str


@dataclass(frozen=True)
class EmployeeDTO:
    id: int
    first_name: str
    last_name: str
    country: str
    full_name: str


@dataclass(frozen=True)
class ShipperDTO:
    id: int
    company_name: str


@dataclass(frozen=True)
class ShippingAddressDTO:
    address: str
    city: str
    region: str | None
    postal_code: str
    country: str


@dataclass(frozen=True)
class FullOrderDetailDTO:
    """Output: a line item with its product's display names."""

    product_id: int
    product_name: str
    category: str
    supplier: str
    unit_price: Decimal
    quantity: int
    discount: float
    line_total: Decimal


@dataclass(frozen=True)
class FullOrderDTO:
    """Output: a complete order as displayed to the user."""

    id: int
    customer: CustomerDTO
    employee: EmployeeDTO
    shipper: ShipperDTO
    order_date: datetime
    required_date: datetime
    shipped_date: datetime | None
    freight: Decimal
    ship_name: str
    shipping_address: ShippingAddressDTO
    order_details: list[FullOrderDetailDTO]
    subtotal: Decimal
