"""Validator engine: declares per-property rules and validates whole instances.

Validators are normally declared once, by subclassing and registering rules
in ``__init__``, and then reused for any number of calls:

    ```python
    from fluentknobs import CascadeMode, Validator


    class AddressValidator(Validator[Address]):
        def __init__(self):
            super().__init__()
            self.rule_for("city").not_empty()
            self.rule_for("zip_code").matches(r"^\\d{4}$")


    class CustomerValidator(Validator[Customer]):
        def __init__(self):
            super().__init__()
            self.rule_for("name").cascade(CascadeMode.STOP).not_empty().max_length(50)
            self.rule_for("age").between(18, 65)
            self.rule_for("company").not_empty().when(lambda c: c.is_company)
            self.rule_for("address").set_validator(AddressValidator())
            self.rule_for("tags").for_each(lambda tag: tag.islower(), "Tags must be lowercase.")


    result = CustomerValidator().validate(customer)
    if not result.is_valid:
        for error in result.errors:
            print(error.property_name, error.message, error.error_code)
    ```

Rules run property by property in declaration order, and rule by rule in
registration order, so the error order of a result is deterministic.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from .builder import RuleBuilder
from .exceptions import ConfigurationError, NullArgumentError
from .messages import MessageProvider
from .property_validator import PropertyValidator, default_accessor
from .result import ValidationError, ValidationResult

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Validator(Generic[T]):
    """Ordered collection of property validators for instances of ``T``.

    After the registration phase a validator holds no mutable per-call
    state, so one instance can serve concurrent calls on different objects.
    Setting a message provider mutates the registered rules and belongs to
    the single-threaded setup phase.
    """

    def __init__(self) -> None:
        self._property_validators: list[PropertyValidator[T, Any]] = []
        self._message_provider: MessageProvider | None = None

    @property
    def message_provider(self) -> MessageProvider | None:
        """The provider attached with ``use_message_provider``, if any."""
        return self._message_provider

    @property
    def property_names(self) -> list[str]:
        """Declared property names, in validation order."""
        return [pv.property_name for pv in self._property_validators]

    @property
    def property_validators(self) -> tuple[PropertyValidator[T, Any], ...]:
        return tuple(self._property_validators)

    def rule_for(
        self,
        property_name: str,
        accessor: Callable[[T], Any] | None = None,
    ) -> RuleBuilder[T, Any]:
        """Declare a property and return a builder for its rules.

        Args:
            property_name: Name reported on errors
            accessor: Function selecting the value from an instance. Defaults
                to reading the attribute (or mapping key) ``property_name``.

        Returns:
            RuleBuilder bound to the new property validator
        """
        if not property_name:
            raise NullArgumentError(
                "property_name must be a non-empty string",
                context={"validator": type(self).__name__},
            )
        if accessor is None:
            accessor = default_accessor(property_name)

        property_validator: PropertyValidator[T, Any] = PropertyValidator(property_name, accessor)
        if self._message_provider is not None:
            property_validator.set_message_provider(self._message_provider)

        self._property_validators.append(property_validator)
        logger.debug("Declared property '%s' on %s", property_name, type(self).__name__)
        return RuleBuilder(property_validator)

    def use_message_provider(self, provider: MessageProvider) -> Validator[T]:
        """Attach a message provider to every registered rule.

        The provider replaces any previous one on all existing rules, and
        rules registered afterwards receive it as well.

        Args:
            provider: Object with a ``get_message(error_code, property_name, *args)`` method

        Returns:
            Self for chaining
        """
        if provider is None:
            raise NullArgumentError("provider must not be None", context={"validator": type(self).__name__})
        if not callable(getattr(provider, "get_message", None)):
            raise ConfigurationError(
                f"Message provider {type(provider).__name__} has no get_message method",
                context={"validator": type(self).__name__},
            )

        self._message_provider = provider
        for property_validator in self._property_validators:
            property_validator.set_message_provider(provider)

        logger.debug(
            "Attached message provider %s to %d propert(ies) of %s",
            type(provider).__name__,
            len(self._property_validators),
            type(self).__name__,
        )
        return self

    def _check_instance(self, instance: T | None) -> None:
        if instance is None:
            raise NullArgumentError(
                "instance must not be None",
                context={"argument": "instance", "validator": type(self).__name__},
            )

    def _finish(self, errors: list[ValidationError]) -> ValidationResult:
        logger.debug("%s validation finished with %d error(s)", type(self).__name__, len(errors))
        return ValidationResult(errors)

    def validate(self, instance: T) -> ValidationResult:
        """Validate ``instance`` against every declared property.

        Args:
            instance: Object to validate

        Returns:
            ValidationResult with all errors, in declaration order

        Raises:
            NullArgumentError: If ``instance`` is None
        """
        self._check_instance(instance)

        errors: list[ValidationError] = []
        for property_validator in self._property_validators:
            errors.extend(property_validator.validate(instance))

        return self._finish(errors)

    async def validate_async(self, instance: T) -> ValidationResult:
        """Validate ``instance`` in the asynchronous pipeline.

        Properties are awaited strictly one after another, never
        concurrently, so error order matches ``validate``. Cancelling the
        awaiting task interrupts whichever async rule is suspended.

        Args:
            instance: Object to validate

        Returns:
            ValidationResult with all errors, in declaration order
        """
        self._check_instance(instance)

        errors: list[ValidationError] = []
        for property_validator in self._property_validators:
            errors.extend(await property_validator.validate_async(instance))

        return self._finish(errors)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(properties={self.property_names!r})"
