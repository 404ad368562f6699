"""General-purpose rules: presence, equality, enum membership and custom predicates."""

from __future__ import annotations

import inspect
from collections.abc import Callable, Sized
from enum import Enum
from typing import Any, TypeVar

from ..codes import ErrorCodes
from ..exceptions import ConfigurationError, NullArgumentError, OperationError
from ..result import ValidationError
from .base import RuleBase

T = TypeVar("T")


class NotNullRule(RuleBase[T, Any]):
    """Value must not be None."""

    def validate(self, instance: T, value: Any) -> list[ValidationError]:
        if value is None:
            return self.error(ErrorCodes.NOT_NULL)
        return self.success()


class NotEmptyRule(RuleBase[T, Any]):
    """Value must be present and non-empty.

    Strings and byte strings must contain a non-whitespace character. Sized
    values (lists, dicts, sets, tuples, ...) must contain at least one element
    and report the ``CollectionNotEmpty`` code. Other non-None values pass.
    """

    def validate(self, instance: T, value: Any) -> list[ValidationError]:
        if value is None:
            return self.error(ErrorCodes.NOT_EMPTY)

        if isinstance(value, (str, bytes, bytearray)):
            if not value.strip():
                return self.error(ErrorCodes.NOT_EMPTY)
            return self.success()

        if isinstance(value, Sized) and len(value) == 0:
            return self.error(ErrorCodes.COLLECTION_NOT_EMPTY)

        return self.success()


class _ComparisonValueRule(RuleBase[T, Any]):
    """Shared setup for rules comparing against a value or a per-instance value."""

    def __init__(self, property_name: str, comparison: Any, message: str | None = None):
        """Initialize the rule.

        Args:
            property_name: Name reported on errors
            comparison: Fixed value, or a callable taking the instance and
                returning the value to compare against
            message: Optional custom message
        """
        super().__init__(property_name, message)
        self.comparison = comparison

    def comparison_value(self, instance: T) -> Any:
        if callable(self.comparison):
            return self.comparison(instance)
        return self.comparison


class EqualRule(_ComparisonValueRule[T]):
    """Value must equal the comparison value."""

    def validate(self, instance: T, value: Any) -> list[ValidationError]:
        expected = self.comparison_value(instance)
        if value == expected:
            return self.success()
        return self.error(ErrorCodes.EQUAL, expected)


class NotEqualRule(_ComparisonValueRule[T]):
    """Value must differ from the comparison value."""

    def validate(self, instance: T, value: Any) -> list[ValidationError]:
        unexpected = self.comparison_value(instance)
        if value != unexpected:
            return self.success()
        return self.error(ErrorCodes.NOT_EQUAL, unexpected)


class IsInEnumRule(RuleBase[T, Any]):
    """Value must be a member, or the value of a member, of an Enum type."""

    def __init__(self, property_name: str, enum_type: type[Enum], message: str | None = None):
        super().__init__(property_name, message)
        if enum_type is None:
            raise NullArgumentError("enum_type must not be None", context={"property_name": property_name})
        if not (isinstance(enum_type, type) and issubclass(enum_type, Enum)):
            raise ConfigurationError(
                f"enum_type must be an Enum subclass, got {enum_type!r}",
                context={"property_name": property_name},
            )
        self.enum_type = enum_type

    def validate(self, instance: T, value: Any) -> list[ValidationError]:
        if isinstance(value, self.enum_type):
            return self.success()
        try:
            self.enum_type(value)
        except ValueError:
            return self.error(ErrorCodes.IS_IN_ENUM, self.enum_type.__name__)
        return self.success()


class CustomRule(RuleBase[T, Any]):
    """Value must satisfy a caller-supplied predicate over ``(instance, value)``.

    With ``is_async=True`` the predicate is awaited and the rule can only run
    in the asynchronous pipeline. Faults raised by the predicate propagate to
    the caller unchanged.
    """

    def __init__(
        self,
        property_name: str,
        predicate: Callable[[T, Any], Any],
        message: str | None = None,
        is_async: bool = False,
    ):
        """Initialize the rule.

        Args:
            property_name: Name reported on errors
            predicate: ``(instance, value) -> bool`` or an async equivalent
            message: Optional custom message
            is_async: True when ``predicate`` must be awaited
        """
        super().__init__(property_name, message)
        if predicate is None:
            raise NullArgumentError("predicate must not be None", context={"property_name": property_name})
        if not callable(predicate):
            raise ConfigurationError(
                f"predicate must be callable, got {type(predicate).__name__}",
                context={"property_name": property_name},
            )
        self.predicate = predicate
        self.is_async = is_async

    def _unsupported(self) -> OperationError:
        return OperationError(
            "Use validate_async for async predicates",
            context={"property_name": self.property_name},
        )

    def validate(self, instance: T, value: Any) -> list[ValidationError]:
        if self.is_async:
            raise self._unsupported()

        outcome = self.predicate(instance, value)
        if inspect.isawaitable(outcome):
            if inspect.iscoroutine(outcome):
                outcome.close()
            raise self._unsupported()

        return self.success() if outcome else self.error(ErrorCodes.MUST)

    async def validate_async(self, instance: T, value: Any) -> list[ValidationError]:
        outcome = self.predicate(instance, value)
        if inspect.isawaitable(outcome):
            outcome = await outcome
        return self.success() if outcome else self.error(ErrorCodes.MUST)
