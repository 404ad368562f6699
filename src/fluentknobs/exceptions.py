"""Exception hierarchy for fluentknobs.

Exceptions in this package signal that a validator is *misconfigured* or
misused. They are never raised for invalid data: a value that fails a rule
is reported as a ``ValidationError`` record inside a ``ValidationResult``.

The hierarchy supports:
- Simple error messages for straightforward cases
- Context dictionaries for rich error information
- Details dictionaries as an alias for context

Example:
    ```python
    from fluentknobs.exceptions import ConfigurationError, FluentknobsError

    try:
        validator.rule_for("name").when(lambda c: c.active)
    except ConfigurationError as e:
        logger.error(f"Error: {e}")
        if e.context:
            logger.error(f"Context: {e.context}")
    ```
"""

from typing import TYPE_CHECKING, Any, Dict

if TYPE_CHECKING:
    from .result import ValidationError


class FluentknobsError(Exception):
    """Base exception for all fluentknobs errors.

    Attributes:
        context: Dictionary containing contextual information about the error
        details: Alias for context

    Args:
        message: Human-readable error message
        context: Optional dictionary with error context (property names, rule types, etc.)
        details: Alternative to context (both are supported for compatibility)

    Example:
        ```python
        error = FluentknobsError(
            "Rule registration failed",
            context={"property_name": "email", "rule": "MatchesRule"}
        )
        str(error)
        # 'Rule registration failed'
        error.context
        # {'property_name': 'email', 'rule': 'MatchesRule'}
        ```
    """

    def __init__(
        self,
        message: str,
        context: Dict[str, Any] | None = None,
        details: Dict[str, Any] | None = None,
    ):
        """Initialize the exception with optional context.

        Args:
            message: Error message
            context: Optional context dictionary
            details: Optional details dictionary (takes precedence over context)
        """
        super().__init__(message)
        self.context = details or context or {}
        self.details = self.context


class ConfigurationError(FluentknobsError):
    """Raised when a validator is configured incorrectly.

    Common scenarios include:
    - ``when()``/``unless()`` called before any rule was registered
    - Invalid rule arguments (negative lengths, inverted ranges, bad regex)
    - A message provider without a ``get_message`` method
    - A message catalog file that is missing or has an unsupported format

    Example:
        ```python
        raise ConfigurationError(
            "when() must be called after a validation rule",
            context={"property_name": "company"}
        )
        ```
    """

    pass


class NullArgumentError(FluentknobsError, ValueError):
    """Raised when a required argument is missing.

    Validating ``None`` instead of an instance, registering ``None`` as a
    rule, or nesting a ``None`` child validator all raise this error.

    Example:
        ```python
        raise NullArgumentError(
            "instance must not be None",
            context={"argument": "instance", "validator": "CustomerValidator"}
        )
        ```
    """

    pass


class OperationError(FluentknobsError):
    """Raised when an operation is not supported in the current execution mode.

    The typical case is a rule built around an asynchronous predicate being
    executed by the synchronous ``validate`` pipeline.

    Example:
        ```python
        raise OperationError(
            "Use validate_async for async predicates",
            context={"property_name": "username"}
        )
        ```
    """

    pass


class ValidationFailedError(FluentknobsError):
    """Raised by ``ValidationResult.raise_if_invalid`` for invalid data.

    The engine itself never raises this error; it exists for callers that
    prefer exception-based flow over inspecting a result.

    Attributes:
        errors: The validation error records that caused the failure

    Example:
        ```python
        try:
            validator.validate(order).raise_if_invalid()
        except ValidationFailedError as e:
            for error in e.errors:
                print(error.property_name, error.message)
        ```
    """

    def __init__(
        self,
        message: str,
        errors: "tuple[ValidationError, ...]" = (),
        context: Dict[str, Any] | None = None,
    ):
        """Initialize with the failing error records.

        Args:
            message: Error message
            errors: Validation error records
            context: Optional extra context
        """
        merged = dict(context or {})
        merged.setdefault("errors", [error.to_dict() for error in errors])
        super().__init__(message, context=merged)
        self.errors = tuple(errors)


__all__ = [
    "FluentknobsError",
    "ConfigurationError",
    "NullArgumentError",
    "OperationError",
    "ValidationFailedError",
]
