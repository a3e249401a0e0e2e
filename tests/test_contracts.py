"""Tests for checkout contracts."""

import pytest
from pydantic import ValidationError

from checkout_gateway.contracts.checkout import SimulationData, SimulationItem
from checkout_gateway.contracts.errors import CheckoutResult, DomainError, ErrorKind


def test_simulation_payload_omits_unset_optionals():
    data = SimulationData(country="BR", items=[{"id": "sku1", "quantity": 2, "seller": "1"}])
    assert data.to_payload() == {"country": "BR", "items": [{"id": "sku1", "quantity": 2, "seller": "1"}]}


def test_simulation_accepts_python_names():
    data = SimulationData(country="BR", items=[], postal_code="01000", price_tables=["a"])
    assert data.to_payload() == {"country": "BR", "items": [], "postalCode": "01000", "priceTables": ["a"]}


def test_simulation_requires_country_and_items():
    with pytest.raises(ValidationError):
        SimulationData(items=[])
    with pytest.raises(ValidationError):
        SimulationData(country="BR")


def test_result_success_and_failure():
    ok = CheckoutResult.success({"a": 1})
    assert ok.ok and ok.unwrap() == {"a": 1}

    error = DomainError(ErrorKind.SERVER_ERROR, "down", status_code=502, payload="bad gateway")
    failed = CheckoutResult.failure(error)
    assert not failed.ok
    with pytest.raises(DomainError) as excinfo:
        failed.unwrap()
    assert excinfo.value.status_code == 502
    assert excinfo.value.payload == "bad gateway"
    assert "ServerError" in repr(excinfo.value)


def test_success_with_none_value_is_ok():
    assert CheckoutResult.success(None).ok


def test_simulation_forwards_unknown_fields():
    data = SimulationData(
        country="BR",
        items=[{"id": "1", "quantity": 1, "seller": "1", "price": 5}],
        geoCoordinates=[1.0, 2.0],
    )
    assert data.to_payload() == {
        "country": "BR",
        "items": [{"id": "1", "quantity": 1, "seller": "1", "price": 5}],
        "geoCoordinates": [1.0, 2.0],
    }


def test_simulation_item_quantity_is_kept_as_given():
    assert SimulationItem(id="1", quantity=1.5, seller="1").quantity == 1.5
    assert SimulationItem(id="1", quantity=2, seller="1").quantity == 2
    assert SimulationItem(id="1", quantity="3", seller="1").quantity == "3"
