"""Unit tests for domain value objects and reference projections."""

import dataclasses

import pytest

from northwind.domain.model.references import Employee
from northwind.domain.model.value_objects import CustomerCode, ShippingAddress


class TestCustomerCode:

    def test_equal_by_value(self):
        assert CustomerCode("ALFKI") == CustomerCode("ALFKI")
        assert CustomerCode("ALFKI") != CustomerCode("VINET")

    def test_hashable(self):
        assert len({CustomerCode("ALFKI"), CustomerCode("ALFKI")}) == 1

    def test_immutable(self):
        code = CustomerCode("ALFKI")
        with pytest.raises(dataclasses.FrozenInstanceError):
            code.code = "VINET"

    def test_str(self):
        assert str(CustomerCode("ALFKI")) == "ALFKI"


class TestShippingAddress:

    def test_region_is_optional(self):
        address = ShippingAddress("Obere Str. 57", "Berlin", None, "12209", "Germany")
        assert address.region is None

    def test_equal_by_value(self):
        a = ShippingAddress("Obere Str. 57", "Berlin", None, "12209", "Germany")
        b = ShippingAddress("Obere Str. 57", "Berlin", None, "12209", "Germany")
        assert a == b
        assert a != dataclasses.replace(b, postal_code="12210")


class TestEmployee:

    def test_full_name(self):
        assert Employee(5, "Steven", "Buchanan").full_name == "Steven Buchanan"

    def test_full_name_without_names_is_empty(self):
        assert Employee(5).full_name == ""
