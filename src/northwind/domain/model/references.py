"""Reference projections used inside an order.

These are read-only views of rows the order points at. When an order is
built for a write, only the identifier matters; the display fields may
be left empty and are never persisted.
"""

from __future__ import annotations

from dataclasses import dataclass

from northwind.domain.model.value_objects import CustomerCode


@dataclass
class Customer:
    code: CustomerCode
    company_name: str = ""


@dataclass
class Employee:
    id: int
    first_name: str = ""
    last_name: str = ""
    country: str = ""

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


@dataclass
class Shipper:
    id: int
    company_name: str = ""


@dataclass
class Product:
    """A product as seen from an order line.

    Category and supplier names are folded in at read time.
    """

    id: int
    product_name: str = ""
    category_id: int = 0
    category: str = ""
    supplier_id: int = 0
    supplier: str = ""
