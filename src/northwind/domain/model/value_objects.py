"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CustomerCode:
    """The textual key of a customer, e.g. ``"ALFKI"``."""

    code: str

    def __str__(self) -> str:
        return self.code


@dataclass(frozen=True)
class ShippingAddress:

    address: str
    city: str
    region: str | None
    postal_code: str
    country: str
