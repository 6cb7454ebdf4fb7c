"""Abstract repository for the Order aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. The SQL implementation lives in the infrastructure
layer; tests use an in-memory fake.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from northwind.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def get_order(self, order_id: int) -> Order:
        """Return the full order with its line items.

        Raises OrderNotFoundError if no order has this id.
        """

    @abstractmethod
    def list_orders(self, skip: int, count: int) -> list[Order]:
        """Return up to ``count`` orders after the first ``skip``, by ascending id.

        Orders come back without line items. Raises InvalidArgumentError
        if ``skip`` is negative or ``count`` is not positive.
        """

    @abstractmethod
    def add_order(self, order: Order) -> int:
        """Persist a new order with its line items and return its id."""

    @abstractmethod
    def remove_order(self, order_id: int) -> None:
        """Delete an order together with all of its line items."""

    @abstractmethod
    def update_order(self, order: Order) -> None:
        """Overwrite an existing order and replace its entire line-item set."""
