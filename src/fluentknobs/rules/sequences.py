"""Collection size rules."""

from __future__ import annotations

from typing import Any, TypeVar

from ..codes import ErrorCodes
from ..exceptions import ConfigurationError, NullArgumentError
from ..result import ValidationError
from .base import RuleBase

T = TypeVar("T")


def count_items(value: Any) -> int:
    """Count the elements of a sized or merely iterable value."""
    try:
        return len(value)
    except TypeError:
        return sum(1 for _ in value)


def _check_count_bound(name: str, bound: int, property_name: str) -> None:
    if bound is None:
        raise NullArgumentError(f"{name} must not be None", context={"property_name": property_name})
    if bound < 0:
        raise ConfigurationError(
            f"{name} cannot be negative: {bound}",
            context={"property_name": property_name},
        )


class MinCountRule(RuleBase[T, Any]):
    """Collection must hold at least ``min_count`` elements. None fails as NotNull."""

    def __init__(self, property_name: str, min_count: int, message: str | None = None):
        super().__init__(property_name, message)
        _check_count_bound("min_count", min_count, property_name)
        self.min_count = min_count

    def validate(self, instance: T, value: Any) -> list[ValidationError]:
        if value is None:
            return self.error(ErrorCodes.NOT_NULL)
        if count_items(value) < self.min_count:
            return self.error(ErrorCodes.MIN_COUNT, self.min_count)
        return self.success()


class MaxCountRule(RuleBase[T, Any]):
    """Collection must hold at most ``max_count`` elements. None passes."""

    def __init__(self, property_name: str, max_count: int, message: str | None = None):
        super().__init__(property_name, message)
        _check_count_bound("max_count", max_count, property_name)
        self.max_count = max_count

    def validate(self, instance: T, value: Any) -> list[ValidationError]:
        if value is None:
            return self.success()
        if count_items(value) > self.max_count:
            return self.error(ErrorCodes.MAX_COUNT, self.max_count)
        return self.success()
