"""Stable error codes attached to validation errors.

Codes are plain strings so they can be used as keys in message catalogs,
compared against literals, and serialized without conversion.
"""


class ErrorCodes:
    """Error codes produced by the built-in rules."""

    NOT_NULL = "NotNull"
    NOT_EMPTY = "NotEmpty"
    COLLECTION_NOT_EMPTY = "CollectionNotEmpty"
    GREATER_THAN = "GreaterThan"
    LESS_THAN = "LessThan"
    BETWEEN = "Between"
    EQUAL = "Equal"
    NOT_EQUAL = "NotEqual"
    MIN_LENGTH = "MinLength"
    MAX_LENGTH = "MaxLength"
    LENGTH = "Length"
    MATCHES = "Matches"
    EMAIL_ADDRESS = "EmailAddress"
    URL = "Url"
    CREDIT_CARD = "CreditCard"
    IS_IN_ENUM = "IsInEnum"
    MIN_COUNT = "MinCount"
    MAX_COUNT = "MaxCount"
    MUST = "Must"

    @classmethod
    def all(cls) -> list[str]:
        """Return every built-in code, in declaration order."""
        return [
            value
            for name, value in vars(cls).items()
            if name.isupper() and isinstance(value, str)
        ]
