"""Shared fixtures: an in-memory SQLite store seeded with reference rows."""

from decimal import Decimal

import pytest
from sqlalchemy import func, select

from northwind.infrastructure.persistence.database import (
    create_database_engine,
    create_schema,
    create_session_factory,
)
from northwind.infrastructure.persistence.models import (
    CategoryModel,
    CustomerModel,
    EmployeeModel,
    OrderDetailModel,
    OrderModel,
    ProductModel,
    ShipperModel,
    SupplierModel,
)
from northwind.infrastructure.persistence.sql_order_repository import (
    SqlOrderRepository,
)


def _reference_rows() -> list:
    return [
        CategoryModel(id=1, name="Beverages"),
        CategoryModel(id=2, name="Condiments"),
        CategoryModel(id=4, name="Dairy Products"),
        CategoryModel(id=7, name="Produce"),
        SupplierModel(id=1, company_name="Exotic Liquids", country="UK"),
        SupplierModel(id=2, company_name="New Orleans Cajun Delights", country="USA"),
        SupplierModel(id=3, company_name="Grandma Kelly's Homestead", country="USA"),
        SupplierModel(id=5, company_name="Cooperativa de Quesos 'Las Cabras'", country="Spain"),
        ProductModel(id=1, name="Chai", supplier_id=1, category_id=1, unit_price=Decimal("18")),
        ProductModel(id=2, name="Chang", supplier_id=1, category_id=1, unit_price=Decimal("19")),
        ProductModel(id=3, name="Aniseed Syrup", supplier_id=1, category_id=2, unit_price=Decimal("10")),
        ProductModel(id=4, name="Chef Anton's Cajun Seasoning", supplier_id=2, category_id=2, unit_price=Decimal("22")),
        ProductModel(id=7, name="Uncle Bob's Organic Dried Pears", supplier_id=3, category_id=7, unit_price=Decimal("30")),
        ProductModel(id=11, name="Queso Cabrales", supplier_id=5, category_id=4, unit_price=Decimal("21")),
        CustomerModel(id="ALFKI", company_name="Alfreds Futterkiste", country="Germany"),
        CustomerModel(id="VINET", company_name="Vins et alcools Chevalier", country="France"),
        EmployeeModel(id=1, first_name="Nancy", last_name="Davolio", country="USA"),
        EmployeeModel(id=5, first_name="Steven", last_name="Buchanan", country="UK"),
        EmployeeModel(id=9, first_name="Anne", last_name="Dodsworth", country=None),
        ShipperModel(id=1, company_name="Speedy Express"),
        ShipperModel(id=3, company_name="Federal Shipping"),
    ]


@pytest.fixture
def engine():
    engine = create_database_engine("sqlite://")
    create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    factory = create_session_factory(engine)
    with factory.begin() as session:
        session.add_all(_reference_rows())
    return factory


@pytest.fixture
def repository(session_factory) -> SqlOrderRepository:
    return SqlOrderRepository(session_factory)


@pytest.fixture
def row_counts(session_factory):
    """Return a callable giving (orders, order detail) row counts."""

    def _counts() -> tuple[int, int]:
        with session_factory() as session:
            orders = session.scalar(select(func.count()).select_from(OrderModel))
            details = session.scalar(select(func.count()).select_from(OrderDetailModel))
        return orders, details

    return _counts
