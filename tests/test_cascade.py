"""Tests for per-property cascade modes."""

import pytest

from fluentknobs import CascadeMode, ConfigurationError, ErrorCodes, PropertyValidator, Validator
from fluentknobs.rules import CustomRule, MaxLengthRule, MinLengthRule, NotEmptyRule

from models import Customer


def name_of(customer):
    return customer.name


class TestCascadeMode:
    """Test Continue and Stop on one property."""

    def test_continue_collects_every_failure(self, make_validator):
        validator = make_validator("name", lambda b: b.not_empty().min_length(3))

        result = validator.validate(Customer(name=""))
        assert [e.error_code for e in result.errors] == [ErrorCodes.NOT_EMPTY, ErrorCodes.MIN_LENGTH]

    def test_stop_reports_first_failure(self, make_validator):
        validator = make_validator(
            "name",
            lambda b: b.cascade(CascadeMode.STOP).not_empty().min_length(3),
        )

        result = validator.validate(Customer(name=""))
        assert [e.error_code for e in result.errors] == [ErrorCodes.NOT_EMPTY]

    def test_cascade_set_after_rules_applies_to_whole_property(self, make_validator):
        validator = make_validator(
            "name",
            lambda b: b.not_empty().min_length(3).cascade(CascadeMode.STOP),
        )

        assert len(validator.validate(Customer(name="")).errors) == 1

    def test_stop_skips_later_rules(self):
        calls = []

        def predicate(instance, value):
            calls.append(value)
            return True

        pv = PropertyValidator("name", name_of)
        pv.set_cascade_mode(CascadeMode.STOP)
        pv.add_rule(NotEmptyRule("name"))
        pv.add_rule(CustomRule("name", predicate))

        assert len(pv.validate(Customer(name=" "))) == 1
        assert calls == []

    def test_stop_passes_through_when_rules_succeed(self):
        pv = PropertyValidator("name", name_of)
        pv.set_cascade_mode(CascadeMode.STOP)
        pv.add_rule(NotEmptyRule("name"))
        pv.add_rule(MaxLengthRule("name", 2))

        errors = pv.validate(Customer(name="Ada"))
        assert [e.error_code for e in errors] == [ErrorCodes.MAX_LENGTH]

    def test_modes_are_per_property(self):
        """Test that a stop on one property does not affect another."""
        validator = Validator()
        validator.rule_for("name").cascade(CascadeMode.STOP).not_empty().min_length(3)
        validator.rule_for("email").not_empty().min_length(3)

        result = validator.validate(Customer(name="", email=""))
        assert [e.property_name for e in result.errors] == ["name", "email", "email"]

    @pytest.mark.asyncio
    async def test_stop_in_async_pipeline(self):
        calls = []

        async def predicate(instance, value):
            calls.append(value)
            return True

        pv = PropertyValidator("name", name_of)
        pv.set_cascade_mode(CascadeMode.STOP)
        pv.add_rule(MinLengthRule("name", 5))
        pv.add_rule(CustomRule("name", predicate, is_async=True))

        errors = await pv.validate_async(Customer(name="Ada"))
        assert [e.error_code for e in errors] == [ErrorCodes.MIN_LENGTH]
        assert calls == []

    def test_default_mode_is_continue(self):
        assert PropertyValidator("name", name_of).cascade_mode is CascadeMode.CONTINUE

    def test_replace_rule_out_of_range(self):
        pv = PropertyValidator("name", name_of)
        pv.add_rule(NotEmptyRule("name"))

        with pytest.raises(ConfigurationError):
            pv.replace_rule(1, NotEmptyRule("name"))
        with pytest.raises(ConfigurationError):
            pv.replace_rule(-1, NotEmptyRule("name"))

        pv.replace_rule(0, MaxLengthRule("name", 2))
        assert isinstance(pv.rule_at(0), MaxLengthRule)

    def test_invalid_mode_rejected(self):
        with pytest.raises(ConfigurationError):
            PropertyValidator("name", name_of).set_cascade_mode("stop")
