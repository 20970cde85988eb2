import pytest

from solarquote.checks.validation import (
    ValidationError,
    require_consumption,
    require_customer,
    validate_customer,
    validate_load,
)
from solarquote.models import Customer, LoadResult


def test_validation_error_is_a_value_error():
    err = ValidationError({"email": "Email is required"})
    assert isinstance(err, ValueError)
    assert err.errors == {"email": "Email is required"}
    assert "email" in str(err)


def test_empty_customer_lists_required_fields():
    errors = validate_customer(Customer())
    assert set(errors) == {"firstName", "lastName", "email", "phone", "address", "city"}


def test_complete_customer_passes(customer):
    assert validate_customer(customer) == {}
    require_customer(customer)


def test_society_is_optional(customer):
    customer.society = ""
    assert validate_customer(customer) == {}


def test_load_validation():
    assert validate_load(LoadResult(total_watts=100)) == {}
    assert validate_load(LoadResult(total_watts=0)) == {"loadDemand": "Please specify at least one appliance"}


def test_zero_consumption_rejected():
    with pytest.raises(ValidationError) as exc:
        require_consumption(0)
    assert "dailyConsumption" in exc.value.errors
