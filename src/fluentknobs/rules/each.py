"""Element-wise validation of a collection property."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from ..exceptions import ConfigurationError, NullArgumentError
from ..result import ValidationError
from .base import ValidationRule

T = TypeVar("T")
E = TypeVar("E")


class RuleForEachRule(ValidationRule[T, Any]):
    """Applies a predicate to every element of a collection.

    Every element is inspected, in enumeration order, even after a failure.
    Each failing element yields one error at ``"{property_name}[{index}]"``
    with the fixed message. A ``None`` collection has no elements to check.
    """

    def __init__(self, property_name: str, predicate: Callable[[E], bool], message: str):
        """Initialize the rule.

        Args:
            property_name: Collection property name used as the path prefix
            predicate: Element check; returning False reports the element
            message: Message for every failing element
        """
        if property_name is None:
            raise NullArgumentError("property_name must not be None")
        if predicate is None:
            raise NullArgumentError("predicate must not be None", context={"property_name": property_name})
        if not message:
            raise NullArgumentError(
                "message must be a non-empty string",
                context={"property_name": property_name},
            )
        if not callable(predicate):
            raise ConfigurationError(
                f"predicate must be callable, got {type(predicate).__name__}",
                context={"property_name": property_name},
            )
        self.property_name = property_name
        self.predicate = predicate
        self.message = message

    def validate(self, instance: T, value: Iterable[E] | None) -> list[ValidationError]:
        if value is None:
            return []

        return [
            ValidationError(f"{self.property_name}[{index}]", self.message)
            for index, element in enumerate(value)
            if not self.predicate(element)
        ]

    async def validate_async(self, instance: T, value: Iterable[E] | None) -> list[ValidationError]:
        # Indices need the full enumeration; elements are never awaited individually.
        return self.validate(instance, value)

    def __repr__(self) -> str:
        return f"RuleForEachRule(property_name={self.property_name!r})"

