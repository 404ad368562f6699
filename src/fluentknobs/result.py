"""Validation error records and the aggregate validation result."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from .exceptions import NullArgumentError, ValidationFailedError


@dataclass(frozen=True)
class ValidationError:
    """A single validation failure.

    Errors are immutable values: two errors are equal when their property
    name, message and error code are equal.

    Attributes:
        property_name: Path of the failing property. Nested validators produce
            dotted paths (``"Address.City"``) and element-wise rules produce
            indexed paths (``"Items[2]"``).
        message: Human-readable failure message
        error_code: Stable identifier of the failed check, if the rule has one
    """

    property_name: str
    message: str
    error_code: str | None = None

    def __post_init__(self) -> None:
        if not self.property_name:
            raise NullArgumentError("property_name must be a non-empty string")
        if not self.message:
            raise NullArgumentError(
                "message must be a non-empty string",
                context={"property_name": self.property_name},
            )

    def with_prefix(self, prefix: str) -> ValidationError:
        """Return a copy re-rooted under ``prefix``.

        Args:
            prefix: Parent property path

        Returns:
            New error with path ``"{prefix}.{property_name}"``
        """
        return ValidationError(f"{prefix}.{self.property_name}", self.message, self.error_code)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dictionary."""
        return {
            "property_name": self.property_name,
            "message": self.message,
            "error_code": self.error_code,
        }


class ValidationResult:
    """Aggregate outcome of one validation call.

    A result is valid iff it carries no errors. The error sequence is fixed
    at construction; combining results produces a new result.
    """

    __slots__ = ("_errors",)

    def __init__(self, errors: Iterable[ValidationError] = ()):
        """Initialize with an ordered sequence of errors.

        Args:
            errors: Validation errors, in reporting order
        """
        if errors is None:
            raise NullArgumentError("errors must not be None")
        self._errors: tuple[ValidationError, ...] = tuple(errors)

    @property
    def errors(self) -> tuple[ValidationError, ...]:
        """Errors in reporting order."""
        return self._errors

    @property
    def is_valid(self) -> bool:
        """True when no errors were reported."""
        return not self._errors

    def __bool__(self) -> bool:
        """Allow 'if result:' usage to check validity."""
        return self.is_valid

    def __len__(self) -> int:
        return len(self._errors)

    def __iter__(self) -> Iterator[ValidationError]:
        return iter(self._errors)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidationResult):
            return NotImplemented
        return self._errors == other._errors

    def __hash__(self) -> int:
        return hash(self._errors)

    def __repr__(self) -> str:
        return f"ValidationResult(is_valid={self.is_valid}, errors={list(self._errors)!r})"

    @classmethod
    def success(cls) -> ValidationResult:
        """Create a successful validation result."""
        return cls()

    @classmethod
    def failure(cls, errors: Iterable[ValidationError]) -> ValidationResult:
        """Create a failed validation result.

        Args:
            errors: Validation errors

        Returns:
            ValidationResult holding the errors
        """
        return cls(errors)

    @classmethod
    def failure_for(cls, property_name: str, message: str) -> ValidationResult:
        """Create a failed result with a single, code-less error.

        Args:
            property_name: Failing property
            message: Failure message

        Returns:
            ValidationResult holding one error
        """
        return cls([ValidationError(property_name, message)])

    def merge(self, other: ValidationResult) -> ValidationResult:
        """Combine results for composite validation.

        Args:
            other: Another ValidationResult to merge with this one

        Returns:
            New ValidationResult with this result's errors followed by the other's
        """
        return ValidationResult(self._errors + other.errors)

    def errors_for(self, property_name: str) -> list[ValidationError]:
        """Return the errors reported for exactly ``property_name``."""
        return [error for error in self._errors if error.property_name == property_name]

    def raise_if_invalid(self) -> ValidationResult:
        """Raise ``ValidationFailedError`` when the result is invalid.

        Returns:
            Self, when valid

        Raises:
            ValidationFailedError: If any errors were reported
        """
        if not self.is_valid:
            summary = "; ".join(f"{e.property_name}: {e.message}" for e in self._errors)
            raise ValidationFailedError(f"Validation failed: {summary}", errors=self._errors)
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dictionary.

        Returns:
            Dictionary with ``is_valid`` and the list of error dictionaries
        """
        return {
            "is_valid": self.is_valid,
            "errors": [error.to_dict() for error in self._errors],
        }
