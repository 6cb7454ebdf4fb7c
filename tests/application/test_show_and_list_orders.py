"""Tests for the ShowOrder and ListOrders queries."""

from decimal import Decimal

import pytest

from northwind.application.list_orders import ListOrdersHandler
from northwind.application.show_order import ShowOrderHandler
from northwind.domain.exceptions import InvalidArgumentError, OrderNotFoundError
from tests.builders import make_detail, make_order
from tests.fakes import FakeOrderRepository


class TestShowOrderHandler:

    def test_full_dto_includes_lines(self):
        order = make_order([make_detail(7), make_detail(1, unit_price="18.00", quantity=2, discount=0.0)])
        order.order_details[0].product.product_name = "Uncle Bob's Organic Dried Pears"
        repo = FakeOrderRepository([order])

        dto = ShowOrderHandler(repo).handle(1)

        assert dto.id == 1
        assert dto.customer.code == "VINET"
        assert dto.employee.id == 5
        assert dto.employee.full_name == ""
        assert dto.shipper.id == 3
        assert dto.freight == Decimal("32.38")
        assert dto.shipping_address.city == "Reims"
        assert [d.product_id for d in dto.order_details] == [7, 1]
        assert dto.order_details[0].product_name == "Uncle Bob's Organic Dried Pears"
        assert dto.order_details[0].line_total == Decimal("27")
        assert dto.subtotal == Decimal("63")

    def test_dto_has_no_back_reference(self):
        repo = FakeOrderRepository([make_order()])
        dto = ShowOrderHandler(repo).handle(1)
        assert not hasattr(dto.order_details[0], "order")

    def test_missing_order(self):
        with pytest.raises(OrderNotFoundError):
            ShowOrderHandler(FakeOrderRepository()).handle(10248)


class TestListOrdersHandler:

    def test_defaults_to_first_ten(self):
        repo = FakeOrderRepository([make_order() for _ in range(12)])
        result = ListOrdersHandler(repo).handle()
        assert [o.id for o in result] == list(range(1, 11))

    def test_brief_dto_shape(self):
        repo = FakeOrderRepository([make_order()])
        [dto] = ListOrdersHandler(repo).handle(0, 5)
        assert dto.customer_id == "VINET"
        assert dto.employee_id == 5
        assert dto.shipper_id == 3
        assert dto.ship_country == "France"
        assert dto.order_details == []

    def test_paging(self):
        repo = FakeOrderRepository([make_order() for _ in range(5)])
        assert [o.id for o in ListOrdersHandler(repo).handle(skip=3, count=10)] == [4, 5]

    @pytest.mark.parametrize("skip,count", [(-1, 5), (5, 0)])
    def test_invalid_page_rejected(self, skip, count):
        with pytest.raises(InvalidArgumentError):
            ListOrdersHandler(FakeOrderRepository()).handle(skip, count)
