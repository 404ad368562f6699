"""Railway-style result adapter for validation results.

Maps a completed ``ValidationResult`` onto ``Ok``/``Err`` values for code
that composes operations as success/failure tracks instead of checking
``is_valid``. The adapter is a pure view: it never feeds back into rule
execution.

Each error is rendered as ``"{code}: {message}"`` when it carries an error
code and as ``"{property_name}: {message}"`` otherwise. ``to_result`` joins
the segments with ``"; "``; ``to_errors_result`` keeps one failure per error.

Example:
    ```python
    from fluentknobs.railway import validate_as_value_result

    outcome = validate_as_value_result(CustomerValidator(), customer)
    if outcome.is_ok():
        save(outcome.unwrap())
    else:
        print(outcome.error)
    # NotEmpty: name must not be empty.; Between: age must be between 18 and 65.
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Generic, NoReturn, TypeVar, Union, final

from .exceptions import NullArgumentError, OperationError

if TYPE_CHECKING:
    from .result import ValidationError, ValidationResult
    from .validator import Validator

T = TypeVar("T")
U = TypeVar("U")

SEPARATOR = "; "


@final
@dataclass(frozen=True)
class Ok(Generic[T]):
    """Success variant of Result."""

    value: T = None  # type: ignore[assignment]

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def map(self, f: Callable[[T], U]) -> Result[U]:
        """Transform the success value."""
        return Ok(f(self.value))

    def __iter__(self) -> Iterator[T]:
        yield self.value


@final
@dataclass(frozen=True)
class Err:
    """Failure variant of Result, holding the rendered error message."""

    error: str

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise OperationError(f"Called unwrap on Err: {self.error}", context={"error": self.error})

    def unwrap_or(self, default: T) -> T:
        return default

    def map(self, f: Callable[[Any], U]) -> Result[U]:
        """No-op for Err variant."""
        return self


Result = Union[Ok[T], Err]


@final
@dataclass(frozen=True)
class ErrorsResult:
    """Collected outcome: success, or one failure entry per validation error."""

    failures: tuple[Err, ...] = field(default_factory=tuple)

    @property
    def is_success(self) -> bool:
        return not self.failures

    @property
    def messages(self) -> list[str]:
        return [failure.error for failure in self.failures]

    @classmethod
    def success(cls) -> ErrorsResult:
        return cls()

    @classmethod
    def collect(cls, results: list[Result[Any]]) -> ErrorsResult:
        """Collect the failures of several results, dropping successes."""
        return cls(tuple(r for r in results if isinstance(r, Err)))


def format_error(error: ValidationError) -> str:
    """Render one error as ``"{code-or-property}: {message}"``."""
    label = error.error_code if error.error_code is not None else error.property_name
    return f"{label}: {error.message}"


def _require_result(validation_result: ValidationResult | None) -> ValidationResult:
    if validation_result is None:
        raise NullArgumentError("validation_result must not be None")
    return validation_result


def _require_validator(validator: Validator[Any] | None) -> Validator[Any]:
    if validator is None:
        raise NullArgumentError("validator must not be None")
    return validator


def _joined_err(validation_result: ValidationResult) -> Err:
    return Err(SEPARATOR.join(format_error(e) for e in validation_result.errors))


def to_result(validation_result: ValidationResult) -> Result[None]:
    """Map a validation result to ``Ok(None)`` or one joined ``Err``."""
    validation_result = _require_result(validation_result)
    if validation_result.is_valid:
        return Ok(None)
    return _joined_err(validation_result)


def to_value_result(validation_result: ValidationResult, value: T) -> Result[T]:
    """Map a validation result to ``Ok(value)`` or one joined ``Err``."""
    validation_result = _require_result(validation_result)
    if validation_result.is_valid:
        return Ok(value)
    return _joined_err(validation_result)


def to_errors_result(validation_result: ValidationResult) -> ErrorsResult:
    """Map a validation result to an ``ErrorsResult`` with one failure per error."""
    validation_result = _require_result(validation_result)
    if validation_result.is_valid:
        return ErrorsResult.success()
    return ErrorsResult.collect([Err(format_error(e)) for e in validation_result.errors])


def validate_as_result(validator: Validator[T], instance: T) -> Result[None]:
    return to_result(_require_validator(validator).validate(instance))


def validate_as_value_result(validator: Validator[T], instance: T) -> Result[T]:
    return to_value_result(_require_validator(validator).validate(instance), instance)


def validate_as_errors_result(validator: Validator[T], instance: T) -> ErrorsResult:
    return to_errors_result(_require_validator(validator).validate(instance))


async def validate_as_result_async(validator: Validator[T], instance: T) -> Result[None]:
    return to_result(await _require_validator(validator).validate_async(instance))


async def validate_as_value_result_async(validator: Validator[T], instance: T) -> Result[T]:
    return to_value_result(await _require_validator(validator).validate_async(instance), instance)


async def validate_as_errors_result_async(validator: Validator[T], instance: T) -> ErrorsResult:
    return to_errors_result(await _require_validator(validator).validate_async(instance))
