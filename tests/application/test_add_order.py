"""Tests for the AddOrder use case.

Uses the in-memory fake repository, no database.
"""

from decimal import Decimal

import pytest

from northwind.application.add_order import AddOrderHandler, order_from_brief
from northwind.application.dto import BriefOrderDetailDTO
from northwind.domain.exceptions import ValidationError
from tests.builders import make_brief_dto
from tests.fakes import FakeOrderRepository


class TestOrderFromBrief:

    def test_references_carry_ids_only(self):
        order = order_from_brief(make_brief_dto(), order_id=0)
        assert order.customer.code.code == "ALFKI"
        assert order.customer.company_name == ""
        assert order.employee.id == 1
        assert order.employee.first_name == ""
        assert order.shipper.id == 1
        assert order.shipper.company_name == ""

    def test_lines_are_mapped_and_owned(self):
        order = order_from_brief(make_brief_dto(), order_id=42)
        assert order.id == 42
        [detail] = order.order_details
        assert detail.product.id == 7
        assert detail.product.product_name == ""
        assert detail.unit_price == Decimal("10.0")
        assert detail.quantity == 3
        assert detail.discount == 0.1
        assert detail.order is order

    def test_address_fields(self):
        order = order_from_brief(make_brief_dto(ship_region="BC"), order_id=0)
        assert order.shipping_address.city == "Berlin"
        assert order.shipping_address.region == "BC"
        assert order.shipped_date is None


class TestAddOrderHandler:

    def test_returns_generated_id(self):
        repo = FakeOrderRepository()
        handler = AddOrderHandler(repo)
        assert handler.handle(make_brief_dto()) == 1
        assert handler.handle(make_brief_dto()) == 2

    def test_persists_order(self):
        repo = FakeOrderRepository()
        order_id = AddOrderHandler(repo).handle(make_brief_dto())
        saved = repo.get_order(order_id)
        assert saved.freight == Decimal("8.53")
        assert [d.product.id for d in saved.order_details] == [7]

    def test_invalid_line_rejected(self):
        repo = FakeOrderRepository()
        bad = [BriefOrderDetailDTO(product_id=7, unit_price=Decimal("1"), quantity=0)]
        with pytest.raises(ValidationError):
            AddOrderHandler(repo).handle(make_brief_dto(details=bad))
        assert repo.list_orders(0, 10) == []
