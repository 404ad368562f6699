"""Ordering rules for comparable values (numbers, dates, strings, ...)."""

from __future__ import annotations

from typing import Any, TypeVar

from ..codes import ErrorCodes
from ..exceptions import ConfigurationError, NullArgumentError
from ..result import ValidationError
from .base import RuleBase

T = TypeVar("T")


class GreaterThanRule(RuleBase[T, Any]):
    """Value must be strictly greater than a bound."""

    def __init__(self, property_name: str, minimum: Any, message: str | None = None):
        super().__init__(property_name, message)
        if minimum is None:
            raise NullArgumentError("minimum must not be None", context={"property_name": property_name})
        self.minimum = minimum

    def validate(self, instance: T, value: Any) -> list[ValidationError]:
        if value is None:
            return self.error(ErrorCodes.NOT_NULL)
        if value > self.minimum:
            return self.success()
        return self.error(ErrorCodes.GREATER_THAN, self.minimum)


class LessThanRule(RuleBase[T, Any]):
    """Value must be strictly less than a bound."""

    def __init__(self, property_name: str, maximum: Any, message: str | None = None):
        super().__init__(property_name, message)
        if maximum is None:
            raise NullArgumentError("maximum must not be None", context={"property_name": property_name})
        self.maximum = maximum

    def validate(self, instance: T, value: Any) -> list[ValidationError]:
        if value is None:
            return self.error(ErrorCodes.NOT_NULL)
        if value < self.maximum:
            return self.success()
        return self.error(ErrorCodes.LESS_THAN, self.maximum)


class BetweenRule(RuleBase[T, Any]):
    """Value must lie within ``[minimum, maximum]``, both bounds inclusive."""

    def __init__(self, property_name: str, minimum: Any, maximum: Any, message: str | None = None):
        """Initialize the rule.

        Args:
            property_name: Name reported on errors
            minimum: Inclusive lower bound
            maximum: Inclusive upper bound
            message: Optional custom message

        Raises:
            ConfigurationError: If ``minimum`` is greater than ``maximum``
        """
        super().__init__(property_name, message)
        if minimum is None or maximum is None:
            raise NullArgumentError(
                "minimum and maximum must not be None",
                context={"property_name": property_name},
            )
        if minimum > maximum:
            raise ConfigurationError(
                f"minimum ({minimum}) cannot be greater than maximum ({maximum})",
                context={"property_name": property_name},
            )
        self.minimum = minimum
        self.maximum = maximum

    def validate(self, instance: T, value: Any) -> list[ValidationError]:
        if value is None:
            return self.error(ErrorCodes.NOT_NULL)
        if self.minimum <= value <= self.maximum:
            return self.success()
        return self.error(ErrorCodes.BETWEEN, self.minimum, self.maximum)
