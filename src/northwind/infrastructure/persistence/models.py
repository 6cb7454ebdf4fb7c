"""SQLAlchemy ORM models for the normalized Northwind schema.

Table and column names follow the classic Northwind database so the
repository can run against an existing copy of it. These classes are
row shapes only; the domain never sees them (see ``mapper``).
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from sqlalchemy import (
    CheckConstraint,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    pass


class CategoryModel(Base):
    __tablename__ = "Categories"

    id: Mapped[int] = mapped_column("CategoryID", Integer, primary_key=True)
    name: Mapped[str] = mapped_column("CategoryName", String(15), nullable=False)
    description: Mapped[str | None] = mapped_column("Description", Text)


class SupplierModel(Base):
    __tablename__ = "Suppliers"

    id: Mapped[int] = mapped_column("SupplierID", Integer, primary_key=True)
    company_name: Mapped[str] = mapped_column("CompanyName", String(40), nullable=False)
    contact_name: Mapped[str | None] = mapped_column("ContactName", String(30))
    contact_title: Mapped[str | None] = mapped_column("ContactTitle", String(30))
    address: Mapped[str | None] = mapped_column("Address", String(60))
    city: Mapped[str | None] = mapped_column("City", String(15))
    region: Mapped[str | None] = mapped_column("Region", String(15))
    postal_code: Mapped[str | None] = mapped_column("PostalCode", String(10))
    country: Mapped[str | None] = mapped_column("Country", String(15))
    phone: Mapped[str | None] = mapped_column("Phone", String(24))
    fax: Mapped[str | None] = mapped_column("Fax", String(24))
    home_page: Mapped[str | None] = mapped_column("HomePage", Text)


class ProductModel(Base):
    __tablename__ = "Products"

    id: Mapped[int] = mapped_column("ProductID", Integer, primary_key=True)
    name: Mapped[str] = mapped_column("ProductName", String(40), nullable=False)
    supplier_id: Mapped[int] = mapped_column(
        "SupplierID", ForeignKey("Suppliers.SupplierID"), nullable=False
    )
    category_id: Mapped[int] = mapped_column(
        "CategoryID", ForeignKey("Categories.CategoryID"), nullable=False
    )
    quantity_per_unit: Mapped[str | None] = mapped_column("QuantityPerUnit", String(20))
    unit_price: Mapped[Decimal] = mapped_column(
        "UnitPrice", Numeric(10, 4), nullable=False, default=Decimal("0")
    )
    units_in_stock: Mapped[int] = mapped_column("UnitsInStock", Integer, default=0)
    units_on_order: Mapped[int] = mapped_column("UnitsOnOrder", Integer, default=0)
    reorder_level: Mapped[int] = mapped_column("ReorderLevel", Integer, default=0)
    discontinued: Mapped[int] = mapped_column("Discontinued", Integer, default=0)

    supplier: Mapped[SupplierModel] = relationship()
    category: Mapped[CategoryModel] = relationship()


class EmployeeModel(Base):
    __tablename__ = "Employees"

    id: Mapped[int] = mapped_column("EmployeeID", Integer, primary_key=True)
    last_name: Mapped[str] = mapped_column("LastName", String(20), nullable=False)
    first_name: Mapped[str] = mapped_column("FirstName", String(10), nullable=False)
    title: Mapped[str | None] = mapped_column("Title", String(30))
    title_of_courtesy: Mapped[str | None] = mapped_column("TitleOfCourtesy", String(25))
    birth_date: Mapped[datetime | None] = mapped_column("BirthDate", DateTime)
    hire_date: Mapped[datetime | None] = mapped_column("HireDate", DateTime)
    address: Mapped[str | None] = mapped_column("Address", String(60))
    city: Mapped[str | None] = mapped_column("City", String(15))
    region: Mapped[str | None] = mapped_column("Region", String(15))
    postal_code: Mapped[str | None] = mapped_column("PostalCode", String(10))
    country: Mapped[str | None] = mapped_column("Country", String(15))
    home_phone: Mapped[str | None] = mapped_column("HomePhone", String(24))
    extension: Mapped[str | None] = mapped_column("Extension", String(4))
    notes: Mapped[str | None] = mapped_column("Notes", Text)
    reports_to: Mapped[int | None] = mapped_column(
        "ReportsTo", ForeignKey("Employees.EmployeeID")
    )
    photo_path: Mapped[str | None] = mapped_column("PhotoPath", String(255))


class CustomerModel(Base):
    __tablename__ = "Customers"

    id: Mapped[str] = mapped_column("CustomerID", String(5), primary_key=True)
    company_name: Mapped[str] = mapped_column("CompanyName", String(40), nullable=False)
    contact_name: Mapped[str | None] = mapped_column("ContactName", String(30))
    contact_title: Mapped[str | None] = mapped_column("ContactTitle", String(30))
    address: Mapped[str | None] = mapped_column("Address", String(60))
    city: Mapped[str | None] = mapped_column("City", String(15))
    region: Mapped[str | None] = mapped_column("Region", String(15))
    postal_code: Mapped[str | None] = mapped_column("PostalCode", String(10))
    country: Mapped[str | None] = mapped_column("Country", String(15))
    phone: Mapped[str | None] = mapped_column("Phone", String(24))
    fax: Mapped[str | None] = mapped_column("Fax", String(24))


class ShipperModel(Base):
    __tablename__ = "Shippers"

    id: Mapped[int] = mapped_column("ShipperID", Integer, primary_key=True)
    company_name: Mapped[str] = mapped_column("CompanyName", String(40), nullable=False)
    phone: Mapped[str | None] = mapped_column("Phone", String(24))


class OrderModel(Base):
    __tablename__ = "Orders"

    id: Mapped[int] = mapped_column(
        "OrderID", Integer, primary_key=True, autoincrement=True
    )
    customer_id: Mapped[str] = mapped_column(
        "CustomerID", ForeignKey("Customers.CustomerID"), nullable=False
    )
    employee_id: Mapped[int] = mapped_column(
        "EmployeeID", ForeignKey("Employees.EmployeeID"), nullable=False
    )
    order_date: Mapped[datetime] = mapped_column("OrderDate", DateTime, nullable=False)
    required_date: Mapped[datetime] = mapped_column(
        "RequiredDate", DateTime, nullable=False
    )
    shipped_date: Mapped[datetime | None] = mapped_column("ShippedDate", DateTime)
    ship_via: Mapped[int] = mapped_column(
        "ShipVia", ForeignKey("Shippers.ShipperID"), nullable=False
    )
    freight: Mapped[Decimal] = mapped_column(
        "Freight", Numeric(10, 4), nullable=False, default=Decimal("0")
    )
    ship_name: Mapped[str] = mapped_column("ShipName", String(40), nullable=False)
    ship_address: Mapped[str] = mapped_column("ShipAddress", String(60), nullable=False)
    ship_city: Mapped[str] = mapped_column("ShipCity", String(15), nullable=False)
    ship_region: Mapped[str | None] = mapped_column("ShipRegion", String(15))
    ship_postal_code: Mapped[str] = mapped_column(
        "ShipPostalCode", String(10), nullable=False
    )
    ship_country: Mapped[str] = mapped_column("ShipCountry", String(15), nullable=False)

    customer: Mapped[CustomerModel] = relationship()
    employee: Mapped[EmployeeModel] = relationship()
    shipper: Mapped[ShipperModel] = relationship()
    details: Mapped[list[OrderDetailModel]] = relationship(
        back_populates="order",
        cascade="all, delete-orphan",
    )


class OrderDetailModel(Base):
    __tablename__ = "OrderDetails"

    order_id: Mapped[int] = mapped_column(
        "OrderID", ForeignKey("Orders.OrderID"), primary_key=True
    )
    product_id: Mapped[int] = mapped_column(
        "ProductID", ForeignKey("Products.ProductID"), primary_key=True
    )
    unit_price: Mapped[Decimal] = mapped_column("UnitPrice", Numeric(10, 4), nullable=False)
    quantity: Mapped[int] = mapped_column("Quantity", Integer, nullable=False)
    discount: Mapped[float] = mapped_column("Discount", Float, nullable=False, default=0.0)

    order: Mapped[OrderModel] = relationship(back_populates="details")
    product: Mapped[ProductModel] = relationship()

    __table_args__ = (
        CheckConstraint('"UnitPrice" >= 0', name="ck_order_details_unit_price"),
        CheckConstraint('"Quantity" > 0', name="ck_order_details_quantity"),
        CheckConstraint(
            '"Discount" >= 0 AND "Discount" <= 1', name="ck_order_details_discount"
        ),
    )
