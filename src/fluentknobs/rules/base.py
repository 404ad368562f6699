"""Rule capability shared by every validation rule.

Every rule, atomic or composite, exposes the same three operations:

- ``validate(instance, value)`` for the synchronous pipeline
- ``validate_async(instance, value)`` for the asynchronous pipeline
- ``set_message_provider(provider)`` to receive the validator's provider

``validate_async`` defaults to the synchronous check, so any rule can be
used by either pipeline with identical results. Rules only override it when
they perform genuinely asynchronous work.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from ..exceptions import NullArgumentError
from ..messages import default_message
from ..result import ValidationError

if TYPE_CHECKING:
    from ..messages import MessageProvider

T = TypeVar("T")
P = TypeVar("P")


class ValidationRule(ABC, Generic[T, P]):
    """Base class for all validation rules.

    ``T`` is the type of the validated instance and ``P`` the type of the
    property value the rule inspects. Rules hold only configuration captured
    at registration time; they keep no per-call state and may be reused
    across any number of validation calls.
    """

    @abstractmethod
    def validate(self, instance: T, value: P) -> list[ValidationError]:
        """Check a property value.

        Args:
            instance: The object being validated
            value: The property value selected from ``instance``

        Returns:
            Errors produced by the check; empty when the value is valid
        """
        pass

    async def validate_async(self, instance: T, value: P) -> list[ValidationError]:
        """Check a property value in the asynchronous pipeline.

        Defaults to the synchronous check.
        """
        return self.validate(instance, value)

    def set_message_provider(self, provider: MessageProvider | None) -> None:
        """Attach a message provider. Rules without coded messages ignore it."""
        return None


class RuleBase(ValidationRule[T, P]):
    """Base class for rules that report coded, single-message errors.

    Message resolution follows a strict priority chain:

    1. the custom message given at registration, if any
    2. the attached message provider, if any
    3. the built-in English template for the error code
    """

    def __init__(self, property_name: str, message: str | None = None):
        """Initialize the rule.

        Args:
            property_name: Name reported on errors
            message: Optional custom message overriding any provider or default
        """
        if property_name is None:
            raise NullArgumentError(
                "property_name must not be None",
                context={"rule": type(self).__name__},
            )
        if message == "":
            raise NullArgumentError(
                "message must be non-empty when given",
                context={"property_name": property_name, "rule": type(self).__name__},
            )
        self.property_name = property_name
        self.message = message
        self._message_provider: MessageProvider | None = None

    @property
    def message_provider(self) -> MessageProvider | None:
        """The attached message provider, if any."""
        return self._message_provider

    def set_message_provider(self, provider: MessageProvider | None) -> None:
        self._message_provider = provider

    def resolve_message(self, error_code: str, *args: Any) -> str:
        """Resolve the message text for ``error_code``.

        Args:
            error_code: Code of the failed check
            *args: Rule arguments passed to the provider or template

        Returns:
            Message text
        """
        if self.message is not None:
            return self.message
        if self._message_provider is not None:
            return self._message_provider.get_message(error_code, self.property_name, *args)
        return default_message(error_code, self.property_name, *args)

    def error(self, error_code: str, *args: Any) -> list[ValidationError]:
        """Build the single-error failure list for ``error_code``."""
        return [ValidationError(self.property_name, self.resolve_message(error_code, *args), error_code)]

    @staticmethod
    def success() -> list[ValidationError]:
        """Build the empty, successful error list."""
        return []

    def __repr__(self) -> str:
        return f"{type(self).__name__}(property_name={self.property_name!r})"
