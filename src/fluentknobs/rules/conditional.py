"""Conditional rule wrapper used by ``when()`` and ``unless()``."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, TypeVar

from ..exceptions import ConfigurationError, NullArgumentError
from .base import ValidationRule

if TYPE_CHECKING:
    from ..messages import MessageProvider
    from ..result import ValidationError

T = TypeVar("T")
P = TypeVar("P")


class ConditionalRule(ValidationRule[T, P]):
    """Gates an inner rule by a predicate over the whole instance.

    When the gate is closed the inner rule is not executed at all, so any
    side effects of a custom inner rule do not happen either.
    """

    def __init__(
        self,
        inner_rule: ValidationRule[T, P],
        condition: Callable[[T], bool],
        execute_when_true: bool = True,
    ):
        """Initialize the wrapper.

        Args:
            inner_rule: Rule to run when the gate is open
            condition: Predicate evaluated against the instance, not the value
            execute_when_true: Polarity; True for ``when``, False for ``unless``
        """
        if inner_rule is None:
            raise NullArgumentError("inner_rule must not be None")
        if condition is None:
            raise NullArgumentError("condition must not be None")
        if not callable(condition):
            raise ConfigurationError(
                f"condition must be callable, got {type(condition).__name__}"
            )
        self.inner_rule = inner_rule
        self.condition = condition
        self.execute_when_true = execute_when_true

    def should_execute(self, instance: T) -> bool:
        result = bool(self.condition(instance))
        return result if self.execute_when_true else not result

    def validate(self, instance: T, value: P) -> list[ValidationError]:
        if not self.should_execute(instance):
            return []
        return self.inner_rule.validate(instance, value)

    async def validate_async(self, instance: T, value: P) -> list[ValidationError]:
        if not self.should_execute(instance):
            return []
        return await self.inner_rule.validate_async(instance, value)

    def set_message_provider(self, provider: MessageProvider | None) -> None:
        self.inner_rule.set_message_provider(provider)

    def __repr__(self) -> str:
        polarity = "when" if self.execute_when_true else "unless"
        return f"ConditionalRule({polarity}, {self.inner_rule!r})"
