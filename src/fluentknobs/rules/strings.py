"""String rules: length bounds, pattern matching and common formats."""

from __future__ import annotations

import re
from re import Pattern as RegexPattern
from typing import Any, TypeVar
from urllib.parse import urlparse

from ..codes import ErrorCodes
from ..exceptions import ConfigurationError, NullArgumentError
from ..result import ValidationError
from .base import RuleBase

T = TypeVar("T")

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$", re.IGNORECASE)

URL_SCHEMES = ("http", "https")

DIGITS = "0123456789"


def _check_length_bound(name: str, bound: int, property_name: str) -> None:
    if bound is None:
        raise NullArgumentError(f"{name} must not be None", context={"property_name": property_name})
    if bound < 0:
        raise ConfigurationError(
            f"{name} cannot be negative: {bound}",
            context={"property_name": property_name},
        )


class MinLengthRule(RuleBase[T, Any]):
    """String must have at least ``min_length`` characters."""

    def __init__(self, property_name: str, min_length: int, message: str | None = None):
        super().__init__(property_name, message)
        _check_length_bound("min_length", min_length, property_name)
        self.min_length = min_length

    def validate(self, instance: T, value: Any) -> list[ValidationError]:
        if value is None:
            return self.error(ErrorCodes.NOT_NULL)
        if len(value) >= self.min_length:
            return self.success()
        return self.error(ErrorCodes.MIN_LENGTH, self.min_length)


class MaxLengthRule(RuleBase[T, Any]):
    """String must have at most ``max_length`` characters. None passes."""

    def __init__(self, property_name: str, max_length: int, message: str | None = None):
        super().__init__(property_name, message)
        _check_length_bound("max_length", max_length, property_name)
        self.max_length = max_length

    def validate(self, instance: T, value: Any) -> list[ValidationError]:
        if value is None or len(value) <= self.max_length:
            return self.success()
        return self.error(ErrorCodes.MAX_LENGTH, self.max_length)


class LengthRule(RuleBase[T, Any]):
    """String length must lie within ``[min_length, max_length]``."""

    def __init__(self, property_name: str, min_length: int, max_length: int, message: str | None = None):
        super().__init__(property_name, message)
        _check_length_bound("min_length", min_length, property_name)
        _check_length_bound("max_length", max_length, property_name)
        if min_length > max_length:
            raise ConfigurationError(
                f"min_length ({min_length}) cannot be greater than max_length ({max_length})",
                context={"property_name": property_name},
            )
        self.min_length = min_length
        self.max_length = max_length

    def validate(self, instance: T, value: Any) -> list[ValidationError]:
        if value is None:
            return self.error(ErrorCodes.NOT_NULL)
        if self.min_length <= len(value) <= self.max_length:
            return self.success()
        return self.error(ErrorCodes.LENGTH, self.min_length, self.max_length)


class MatchesRule(RuleBase[T, Any]):
    """String must contain a match for a regular expression.

    Matching uses ``re.search``; anchor the pattern with ``^``/``$`` to
    require a full match.
    """

    def __init__(self, property_name: str, pattern: str | RegexPattern, message: str | None = None):
        super().__init__(property_name, message)
        if pattern is None:
            raise NullArgumentError("pattern must not be None", context={"property_name": property_name})
        if isinstance(pattern, str):
            try:
                self.regex = re.compile(pattern)
            except re.error as e:
                raise ConfigurationError(
                    f"Invalid regular expression '{pattern}': {e}",
                    context={"property_name": property_name},
                ) from e
        else:
            self.regex = pattern
        self.pattern_str = self.regex.pattern

    def validate(self, instance: T, value: Any) -> list[ValidationError]:
        if value is None:
            return self.error(ErrorCodes.NOT_NULL)
        if self.regex.search(value):
            return self.success()
        return self.error(ErrorCodes.MATCHES, self.pattern_str)


class EmailAddressRule(RuleBase[T, Any]):
    """String must look like an email address (``local@domain.tld``)."""

    def validate(self, instance: T, value: Any) -> list[ValidationError]:
        if value is None:
            return self.error(ErrorCodes.NOT_NULL)
        if EMAIL_PATTERN.match(value):
            return self.success()
        return self.error(ErrorCodes.EMAIL_ADDRESS)


class UrlRule(RuleBase[T, Any]):
    """String must be an absolute http or https URL."""

    def validate(self, instance: T, value: Any) -> list[ValidationError]:
        if value is None:
            return self.error(ErrorCodes.NOT_NULL)
        if is_http_url(value):
            return self.success()
        return self.error(ErrorCodes.URL)


class CreditCardRule(RuleBase[T, Any]):
    """String must hold 13-19 digits passing the Luhn checksum.

    Separators such as spaces and dashes are ignored.
    """

    def validate(self, instance: T, value: Any) -> list[ValidationError]:
        if value is None:
            return self.error(ErrorCodes.NOT_NULL)

        digits = "".join(ch for ch in value if ch in DIGITS)
        if 13 <= len(digits) <= 19 and luhn_checksum_valid(digits):
            return self.success()
        return self.error(ErrorCodes.CREDIT_CARD)


def is_http_url(value: str) -> bool:
    if any(ch.isspace() for ch in value):
        return False
    try:
        parsed = urlparse(value)
    except ValueError:
        return False
    return parsed.scheme.lower() in URL_SCHEMES and bool(parsed.netloc)


def luhn_checksum_valid(digits: str) -> bool:
    """Check a digit string against the Luhn (mod 10) algorithm."""
    total = 0
    for position, ch in enumerate(reversed(digits)):
        digit = int(ch)
        if position % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return total % 10 == 0
