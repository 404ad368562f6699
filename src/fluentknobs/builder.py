"""Fluent rule-registration surface returned by ``Validator.rule_for``.

Each registration method appends one rule to the property and returns the
builder, so rules chain naturally:

    ```python
    self.rule_for("name").not_empty().max_length(100)
    self.rule_for("age").between(18, 65)
    self.rule_for("company").not_empty().when(lambda c: c.is_company)
    ```

``when()`` and ``unless()`` gate only the most recently registered rule of
the chain. The builder tracks that slot explicitly; calling either before
any rule was registered raises ``ConfigurationError`` immediately.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Iterable
from enum import Enum
from re import Pattern as RegexPattern
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from .exceptions import ConfigurationError
from .property_validator import CascadeMode, PropertyValidator
from .rules import (
    BetweenRule,
    ConditionalRule,
    CreditCardRule,
    CustomRule,
    EmailAddressRule,
    EqualRule,
    GreaterThanRule,
    IsInEnumRule,
    LengthRule,
    LessThanRule,
    MatchesRule,
    MaxCountRule,
    MaxLengthRule,
    MinCountRule,
    MinLengthRule,
    NotEmptyRule,
    NotEqualRule,
    NotNullRule,
    RuleForEachRule,
    SetValidatorRule,
    UrlRule,
    ValidationRule,
)

if TYPE_CHECKING:
    from .validator import Validator

logger = logging.getLogger(__name__)

T = TypeVar("T")
P = TypeVar("P")


class RuleBuilder(Generic[T, P]):
    """Registers rules against one property validator."""

    def __init__(self, property_validator: PropertyValidator[T, P]):
        """Initialize the builder.

        Args:
            property_validator: Property validator receiving the rules
        """
        self._property_validator = property_validator
        self._last_slot: int | None = None

    @property
    def property_name(self) -> str:
        return self._property_validator.property_name

    @property
    def property_validator(self) -> PropertyValidator[T, P]:
        """The property validator receiving the rules.

        Register rules through the builder. ``when()``/``unless()`` target the
        last rule this builder registered, so a rule appended directly to the
        property validator is never the one they wrap.
        """
        return self._property_validator

    @property
    def last_slot(self) -> int | None:
        """Slot of the most recently registered rule, or None before the first rule."""
        return self._last_slot

    def add_rule(self, rule: ValidationRule[T, P]) -> RuleBuilder[T, P]:
        """Register any rule and make it the target of ``when``/``unless``.

        Args:
            rule: Rule to register

        Returns:
            Self for chaining
        """
        self._last_slot = self._property_validator.add_rule(rule)
        return self

    def cascade(self, mode: CascadeMode) -> RuleBuilder[T, P]:
        """Set the cascade mode of the whole property (fluent API)."""
        self._property_validator.set_cascade_mode(mode)
        return self

    # Conditions

    def _wrap_last_rule(self, condition: Callable[[T], bool], execute_when_true: bool) -> RuleBuilder[T, P]:
        method = "when" if execute_when_true else "unless"
        if self._last_slot is None:
            raise ConfigurationError(
                f"{method}() must be called after a validation rule",
                context={"property_name": self.property_name},
            )

        inner = self._property_validator.rule_at(self._last_slot)
        wrapped = ConditionalRule(inner, condition, execute_when_true=execute_when_true)
        self._property_validator.replace_rule(self._last_slot, wrapped)
        logger.debug("Applied %s() to rule %r on '%s'", method, inner, self.property_name)
        return self

    def when(self, condition: Callable[[T], bool]) -> RuleBuilder[T, P]:
        """Run the last registered rule only when ``condition(instance)`` is true."""
        return self._wrap_last_rule(condition, execute_when_true=True)

    def unless(self, condition: Callable[[T], bool]) -> RuleBuilder[T, P]:
        """Run the last registered rule only when ``condition(instance)`` is false."""
        return self._wrap_last_rule(condition, execute_when_true=False)

    # Presence and equality

    def not_null(self, message: str | None = None) -> RuleBuilder[T, P]:
        return self.add_rule(NotNullRule(self.property_name, message))

    def not_empty(self, message: str | None = None) -> RuleBuilder[T, P]:
        """Require a non-blank string or a non-empty collection."""
        return self.add_rule(NotEmptyRule(self.property_name, message))

    def equal(self, comparison: Any, message: str | None = None) -> RuleBuilder[T, P]:
        """Require equality with a value, or with ``comparison(instance)`` when callable."""
        return self.add_rule(EqualRule(self.property_name, comparison, message))

    def not_equal(self, comparison: Any, message: str | None = None) -> RuleBuilder[T, P]:
        """Require inequality with a value, or with ``comparison(instance)`` when callable."""
        return self.add_rule(NotEqualRule(self.property_name, comparison, message))

    def is_in_enum(self, enum_type: type[Enum], message: str | None = None) -> RuleBuilder[T, P]:
        return self.add_rule(IsInEnumRule(self.property_name, enum_type, message))

    # Comparison

    def greater_than(self, minimum: Any, message: str | None = None) -> RuleBuilder[T, P]:
        return self.add_rule(GreaterThanRule(self.property_name, minimum, message))

    def less_than(self, maximum: Any, message: str | None = None) -> RuleBuilder[T, P]:
        return self.add_rule(LessThanRule(self.property_name, maximum, message))

    def between(self, minimum: Any, maximum: Any, message: str | None = None) -> RuleBuilder[T, P]:
        """Require ``minimum <= value <= maximum``."""
        return self.add_rule(BetweenRule(self.property_name, minimum, maximum, message))

    # Strings

    def min_length(self, min_length: int, message: str | None = None) -> RuleBuilder[T, P]:
        return self.add_rule(MinLengthRule(self.property_name, min_length, message))

    def max_length(self, max_length: int, message: str | None = None) -> RuleBuilder[T, P]:
        return self.add_rule(MaxLengthRule(self.property_name, max_length, message))

    def length(self, min_length: int, max_length: int, message: str | None = None) -> RuleBuilder[T, P]:
        return self.add_rule(LengthRule(self.property_name, min_length, max_length, message))

    def matches(self, pattern: str | RegexPattern, message: str | None = None) -> RuleBuilder[T, P]:
        return self.add_rule(MatchesRule(self.property_name, pattern, message))

    def email_address(self, message: str | None = None) -> RuleBuilder[T, P]:
        return self.add_rule(EmailAddressRule(self.property_name, message))

    def url(self, message: str | None = None) -> RuleBuilder[T, P]:
        return self.add_rule(UrlRule(self.property_name, message))

    def credit_card(self, message: str | None = None) -> RuleBuilder[T, P]:
        return self.add_rule(CreditCardRule(self.property_name, message))

    # Collections

    def min_count(self, min_count: int, message: str | None = None) -> RuleBuilder[T, P]:
        return self.add_rule(MinCountRule(self.property_name, min_count, message))

    def max_count(self, max_count: int, message: str | None = None) -> RuleBuilder[T, P]:
        return self.add_rule(MaxCountRule(self.property_name, max_count, message))

    def for_each(self, predicate: Callable[[Any], bool], message: str) -> RuleBuilder[T, P]:
        """Check every element; failures are reported at ``"{property}[{index}]"``."""
        return self.add_rule(RuleForEachRule(self.property_name, predicate, message))

    # Nesting

    def set_validator(self, validator: Validator[Any]) -> RuleBuilder[T, P]:
        """Validate the nested value with ``validator``; paths become ``"{property}.{child}"``."""
        return self.add_rule(SetValidatorRule(self.property_name, validator))

    # Custom predicates

    def must(self, predicate: Callable[[T, P], bool], message: str | None = None) -> RuleBuilder[T, P]:
        """Require ``predicate(instance, value)`` to be truthy."""
        return self.add_rule(CustomRule(self.property_name, predicate, message))

    def must_async(
        self,
        predicate: Callable[[T, P], Awaitable[bool]],
        message: str | None = None,
    ) -> RuleBuilder[T, P]:
        """Require the awaited ``predicate(instance, value)`` to be truthy.

        The rule only runs in the asynchronous pipeline; ``validate`` raises
        ``OperationError`` when it reaches it.
        """
        return self.add_rule(CustomRule(self.property_name, predicate, message, is_async=True))

    custom = must
    custom_async = must_async

    def add_rules(self, rules: Iterable[ValidationRule[T, P]]) -> RuleBuilder[T, P]:
        """Register several prebuilt rules in order."""
        for rule in rules:
            self.add_rule(rule)
        return self

    def __repr__(self) -> str:
        return f"RuleBuilder(property_name={self.property_name!r}, last_slot={self._last_slot})"
