"""SQLAlchemy-backed implementation of OrderRepository."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import Select, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload, selectinload, sessionmaker

from northwind.domain.exceptions import (
    InvalidArgumentError,
    OrderNotFoundError,
    PersistenceError,
)
from northwind.domain.model.order import Order
from northwind.domain.repository.order_repository import OrderRepository
from northwind.infrastructure.persistence.mapper import OrderMapper
from northwind.infrastructure.persistence.models import (
    OrderDetailModel,
    OrderModel,
    ProductModel,
)

logger = logging.getLogger(__name__)


class SqlOrderRepository(OrderRepository):
    """Order repository over a relational store.

    Every call opens its own session from ``session_factory`` and closes
    it before returning. Each write runs in exactly one transaction:
    it commits as a whole or rolls back as a whole.
    """

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    # --- OrderRepository interface --------------------------------------------

    def get_order(self, order_id: int) -> Order:
        stmt = _with_references(select(OrderModel)).options(
            selectinload(OrderModel.details)
            .joinedload(OrderDetailModel.product)
            .joinedload(ProductModel.category),
            selectinload(OrderModel.details)
            .joinedload(OrderDetailModel.product)
            .joinedload(ProductModel.supplier),
        ).where(OrderModel.id == order_id)

        with self._session("getting an order") as session:
            model = session.scalars(stmt).first()
            if model is None:
                logger.warning("Order with id %s was not found.", order_id)
                raise OrderNotFoundError(order_id)
            return OrderMapper.to_domain(model, include_details=True)

    def list_orders(self, skip: int, count: int) -> list[Order]:
        if skip < 0:
            raise InvalidArgumentError(f"skip must not be negative, got {skip}")
        if count <= 0:
            raise InvalidArgumentError(f"count must be greater than zero, got {count}")

        stmt = (
            _with_references(select(OrderModel))
            .order_by(OrderModel.id)
            .offset(skip)
            .limit(count)
        )

        with self._session("listing orders") as session:
            return [
                OrderMapper.to_domain(model, include_details=False)
                for model in session.scalars(stmt)
            ]

    def add_order(self, order: Order) -> int:
        order.validate_details()
        model = OrderMapper.to_model(order)

        with self._transaction("adding an order") as session:
            session.add(model)
            session.flush()
            new_id = model.id

        order.id = new_id
        logger.info(
            "Added order %s with %d line item(s)", new_id, len(order.order_details)
        )
        return new_id

    def remove_order(self, order_id: int) -> None:
        with self._transaction("removing an order") as session:
            model = self._load_for_write(session, order_id)

            # Children first, then the parent row.
            model.details.clear()
            session.flush()
            session.delete(model)

        logger.info("Removed order %s", order_id)

    def update_order(self, order: Order) -> None:
        with self._transaction("updating an order") as session:
            model = self._load_for_write(session, order.id)
            order.validate_details()

            OrderMapper.apply_scalars(order, model)

            # Full replace: drop every existing line, then insert the new set.
            model.details.clear()
            session.flush()
            model.details.extend(OrderMapper.detail_models(order))

        logger.info(
            "Updated order %s, now %d line item(s)", order.id, len(order.order_details)
        )

    # --- Session helpers ------------------------------------------------------

    @staticmethod
    def _load_for_write(session: Session, order_id: int) -> OrderModel:
        stmt = (
            select(OrderModel)
            .options(selectinload(OrderModel.details))
            .where(OrderModel.id == order_id)
        )
        model = session.scalars(stmt).first()
        if model is None:
            logger.warning("Order with id %s was not found.", order_id)
            raise OrderNotFoundError(order_id)
        return model

    @contextmanager
    def _session(self, action: str) -> Iterator[Session]:
        try:
            with self._session_factory() as session:
                yield session
        except SQLAlchemyError as exc:
            raise PersistenceError(f"An error occurred while {action}.") from exc

    @contextmanager
    def _transaction(self, action: str) -> Iterator[Session]:
        try:
            with self._session_factory.begin() as session:
                yield session
        except SQLAlchemyError as exc:
            raise PersistenceError(f"An error occurred while {action}.") from exc


def _with_references(stmt: Select) -> Select:
    return stmt.options(
        joinedload(OrderModel.customer),
        joinedload(OrderModel.employee),
        joinedload(OrderModel.shipper),
    )
