"""Tests for the railway-style result adapter."""

from dataclasses import replace

import pytest

from fluentknobs import (
    Err,
    ErrorsResult,
    NullArgumentError,
    Ok,
    OperationError,
    ValidationError,
    ValidationResult,
    to_errors_result,
    to_result,
    to_value_result,
    validate_as_errors_result,
    validate_as_errors_result_async,
    validate_as_result,
    validate_as_result_async,
    validate_as_value_result,
    validate_as_value_result_async,
)
from fluentknobs.railway import format_error

TWO_ERRORS = ValidationResult.failure([
    ValidationError("Name", "Name must not be empty.", "NotEmpty"),
    ValidationError("Items[0]", "Item must be positive."),
])


class TestOkErr:
    """Test the result variants."""

    def test_ok(self):
        ok = Ok(5)
        assert ok.is_ok() and not ok.is_err()
        assert ok.unwrap() == 5
        assert ok.unwrap_or(0) == 5
        assert ok.map(lambda v: v * 2) == Ok(10)
        assert list(ok) == [5]

    def test_err(self):
        err = Err("boom")
        assert err.is_err() and not err.is_ok()
        assert err.unwrap_or(0) == 0
        assert err.map(lambda v: v * 2) is err
        with pytest.raises(OperationError, match="boom"):
            err.unwrap()


class TestConversions:
    """Test mapping validation results onto Ok/Err."""

    def test_format_error(self):
        assert format_error(TWO_ERRORS.errors[0]) == "NotEmpty: Name must not be empty."
        assert format_error(TWO_ERRORS.errors[1]) == "Items[0]: Item must be positive."

    def test_to_result(self):
        assert to_result(ValidationResult.success()) == Ok(None)
        assert to_result(TWO_ERRORS) == Err(
            "NotEmpty: Name must not be empty.; Items[0]: Item must be positive."
        )

    def test_to_value_result(self):
        assert to_value_result(ValidationResult.success(), "order") == Ok("order")
        assert to_value_result(TWO_ERRORS, "order").is_err()

    def test_to_errors_result(self):
        assert to_errors_result(ValidationResult.success()) == ErrorsResult.success()

        collected = to_errors_result(TWO_ERRORS)
        assert not collected.is_success
        assert collected.messages == [
            "NotEmpty: Name must not be empty.",
            "Items[0]: Item must be positive.",
        ]

    def test_collect_drops_successes(self):
        collected = ErrorsResult.collect([Ok(1), Err("a"), Ok(2), Err("b")])
        assert collected.messages == ["a", "b"]

    def test_none_rejected(self):
        with pytest.raises(NullArgumentError):
            to_result(None)
        with pytest.raises(NullArgumentError):
            validate_as_result(None, object())


class TestValidateAs:
    """Test the validate-and-convert shortcuts."""

    def test_valid_instance(self, customer_validator, valid_customer):
        assert validate_as_result(customer_validator, valid_customer) == Ok(None)
        assert validate_as_value_result(customer_validator, valid_customer).unwrap() is valid_customer
        assert validate_as_errors_result(customer_validator, valid_customer).is_success

    def test_invalid_instance(self, customer_validator, valid_customer):
        customer = replace(valid_customer, name="", age=80)

        outcome = validate_as_value_result(customer_validator, customer)
        assert outcome == Err("NotEmpty: name must not be empty.; Between: age must be between 18 and 65.")
        assert len(validate_as_errors_result(customer_validator, customer).failures) == 2

    @pytest.mark.asyncio
    async def test_async_variants(self, customer_validator, valid_customer):
        invalid = replace(valid_customer, email="nope")

        assert await validate_as_result_async(customer_validator, valid_customer) == Ok(None)
        assert await validate_as_value_result_async(customer_validator, valid_customer) == Ok(valid_customer)
        assert (await validate_as_errors_result_async(customer_validator, invalid)).messages == [
            "EmailAddress: email is not a valid email address."
        ]
