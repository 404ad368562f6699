"""Per-property rule execution with cascade policy."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from enum import Enum
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from .exceptions import ConfigurationError, NullArgumentError

if TYPE_CHECKING:
    from .messages import MessageProvider
    from .result import ValidationError
    from .rules.base import ValidationRule

T = TypeVar("T")
P = TypeVar("P")


class CascadeMode(Enum):
    """Policy for the rules of one property after a rule fails."""

    CONTINUE = "continue"
    """Run every rule and report the union of their errors (default)."""

    STOP = "stop"
    """Halt at the first failing rule and report only its errors."""


class PropertyValidator(Generic[T, P]):
    """Owns the ordered rules bound to one property of ``T``.

    Rules run in registration order against the value selected by the
    accessor. The cascade mode applies identically to the synchronous and
    asynchronous pipelines.
    """

    def __init__(self, property_name: str, accessor: Callable[[T], P]):
        """Initialize the property validator.

        Args:
            property_name: Name reported on errors and used for nested paths
            accessor: Function selecting the property value from an instance
        """
        if property_name is None:
            raise NullArgumentError("property_name must not be None")
        if accessor is None:
            raise NullArgumentError("accessor must not be None", context={"property_name": property_name})
        if not callable(accessor):
            raise ConfigurationError(
                f"accessor must be callable, got {type(accessor).__name__}",
                context={"property_name": property_name},
            )
        self._property_name = property_name
        self._accessor = accessor
        self._rules: list[ValidationRule[T, P]] = []
        self._cascade_mode = CascadeMode.CONTINUE
        self._message_provider: MessageProvider | None = None

    @property
    def property_name(self) -> str:
        return self._property_name

    @property
    def cascade_mode(self) -> CascadeMode:
        return self._cascade_mode

    @property
    def rules(self) -> tuple[ValidationRule[T, P], ...]:
        """Registered rules, in execution order."""
        return tuple(self._rules)

    def set_cascade_mode(self, mode: CascadeMode) -> None:
        if not isinstance(mode, CascadeMode):
            raise ConfigurationError(
                f"cascade mode must be a CascadeMode, got {mode!r}",
                context={"property_name": self._property_name},
            )
        self._cascade_mode = mode

    def add_rule(self, rule: ValidationRule[T, P]) -> int:
        """Append a rule.

        The rule receives the current message provider, if one is set.

        Args:
            rule: Rule to append

        Returns:
            Slot index of the new rule
        """
        if rule is None:
            raise NullArgumentError("rule must not be None", context={"property_name": self._property_name})
        if self._message_provider is not None:
            rule.set_message_provider(self._message_provider)
        self._rules.append(rule)
        return len(self._rules) - 1

    def rule_at(self, slot: int) -> ValidationRule[T, P]:
        return self._rules[slot]

    def replace_rule(self, slot: int, rule: ValidationRule[T, P]) -> None:
        """Replace the rule in ``slot``, keeping its execution position.

        Args:
            slot: Slot index returned by ``add_rule``
            rule: Replacement rule
        """
        if rule is None:
            raise NullArgumentError("rule must not be None", context={"property_name": self._property_name})
        if not 0 <= slot < len(self._rules):
            raise ConfigurationError(
                f"No rule in slot {slot}",
                context={"property_name": self._property_name, "rule_count": len(self._rules)},
            )
        if self._message_provider is not None:
            rule.set_message_provider(self._message_provider)
        self._rules[slot] = rule

    def set_message_provider(self, provider: MessageProvider | None) -> None:
        """Attach ``provider`` to this property and push it to every rule."""
        self._message_provider = provider
        for rule in self._rules:
            rule.set_message_provider(provider)

    def get_value(self, instance: T) -> P:
        return self._accessor(instance)

    def validate(self, instance: T) -> list[ValidationError]:
        """Run the rules against ``instance`` in the synchronous pipeline.

        Args:
            instance: Object being validated

        Returns:
            Errors from the executed rules, in rule order
        """
        value = self.get_value(instance)
        errors: list[ValidationError] = []

        for rule in self._rules:
            rule_errors = rule.validate(instance, value)
            errors.extend(rule_errors)

            if rule_errors and self._cascade_mode is CascadeMode.STOP:
                break

        return errors

    async def validate_async(self, instance: T) -> list[ValidationError]:
        """Run the rules against ``instance`` in the asynchronous pipeline.

        Rules are awaited one at a time, in order.
        """
        value = self.get_value(instance)
        errors: list[ValidationError] = []

        for rule in self._rules:
            rule_errors = await rule.validate_async(instance, value)
            errors.extend(rule_errors)

            if rule_errors and self._cascade_mode is CascadeMode.STOP:
                break

        return errors

    def __repr__(self) -> str:
        return (
            f"PropertyValidator(property_name={self._property_name!r}, "
            f"rules={len(self._rules)}, cascade_mode={self._cascade_mode.name})"
        )


def default_accessor(property_name: str) -> Callable[[Any], Any]:
    """Build an accessor reading ``property_name`` from an object or mapping.

    Mappings use item access, with a missing key read as None, so plain
    dicts can be validated without writing an accessor. Other objects use
    attribute access.
    """
    def accessor(instance: Any) -> Any:
        if isinstance(instance, Mapping):
            return instance.get(property_name)
        return getattr(instance, property_name)

    accessor.__name__ = f"get_{property_name}"
    return accessor
