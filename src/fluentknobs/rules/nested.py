"""Nested-object delegation: run a child validator against a property value."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from ..exceptions import NullArgumentError
from .base import ValidationRule

if TYPE_CHECKING:
    from ..result import ValidationError, ValidationResult
    from ..validator import Validator

T = TypeVar("T")


class SetValidatorRule(ValidationRule[T, Any]):
    """Delegates a nested value to a child validator.

    Child error paths are re-rooted under the parent property, so nesting
    validators arbitrarily deep yields paths such as ``"Order.Customer.Address.City"``.
    Error codes and messages are kept as the child produced them.

    A ``None`` nested value is skipped, not reported: register ``not_null()``
    on the property when the nested object is required.
    """

    def __init__(self, property_name: str, child_validator: Validator[Any]):
        """Initialize the rule.

        Args:
            property_name: Prefix for re-rooted child error paths
            child_validator: Validator applied to the nested value
        """
        if property_name is None:
            raise NullArgumentError("property_name must not be None")
        if child_validator is None:
            raise NullArgumentError(
                "child_validator must not be None",
                context={"property_name": property_name},
            )
        self.property_name = property_name
        self.child_validator = child_validator

    def _reroot(self, result: ValidationResult) -> list[ValidationError]:
        if result.is_valid:
            return []
        return [error.with_prefix(self.property_name) for error in result.errors]

    def validate(self, instance: T, value: Any) -> list[ValidationError]:
        if value is None:
            return []
        return self._reroot(self.child_validator.validate(value))

    async def validate_async(self, instance: T, value: Any) -> list[ValidationError]:
        if value is None:
            return []
        return self._reroot(await self.child_validator.validate_async(value))

    def __repr__(self) -> str:
        return (
            f"SetValidatorRule(property_name={self.property_name!r}, "
            f"child_validator={type(self.child_validator).__name__})"
        )
