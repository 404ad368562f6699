"""Pytest configuration for fluentknobs tests."""

import pytest

from fluentknobs import Validator

from models import Address, Customer, CustomerValidator


@pytest.fixture
def valid_customer() -> Customer:
    return Customer(address=Address(city="Budapest", zip_code="1011"))


@pytest.fixture
def customer_validator() -> CustomerValidator:
    return CustomerValidator()


@pytest.fixture
def make_validator():
    """Build a throwaway validator for one property and a rule chain."""

    def factory(property_name="value", configure=None, accessor=None) -> Validator:
        validator: Validator = Validator()
        builder = validator.rule_for(property_name, accessor)
        if configure is not None:
            configure(builder)
        return validator

    return factory
