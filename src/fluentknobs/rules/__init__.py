"""Validation rules.

``ValidationRule`` is the capability every rule implements; ``RuleBase``
adds coded errors and message resolution. Composite rules wrap other rules
or validators: ``ConditionalRule``, ``SetValidatorRule`` and
``RuleForEachRule``.
"""

from .base import RuleBase, ValidationRule
from .common import (
    CustomRule,
    EqualRule,
    IsInEnumRule,
    NotEmptyRule,
    NotEqualRule,
    NotNullRule,
)
from .comparison import BetweenRule, GreaterThanRule, LessThanRule
from .conditional import ConditionalRule
from .each import RuleForEachRule
from .nested import SetValidatorRule
from .sequences import MaxCountRule, MinCountRule
from .strings import (
    CreditCardRule,
    EmailAddressRule,
    LengthRule,
    MatchesRule,
    MaxLengthRule,
    MinLengthRule,
    UrlRule,
    luhn_checksum_valid,
)

__all__ = [
    # Capability
    "ValidationRule",
    "RuleBase",
    # Composition
    "ConditionalRule",
    "SetValidatorRule",
    "RuleForEachRule",
    # General
    "NotNullRule",
    "NotEmptyRule",
    "EqualRule",
    "NotEqualRule",
    "IsInEnumRule",
    "CustomRule",
    # Comparison
    "GreaterThanRule",
    "LessThanRule",
    "BetweenRule",
    # Strings
    "MinLengthRule",
    "MaxLengthRule",
    "LengthRule",
    "MatchesRule",
    "EmailAddressRule",
    "UrlRule",
    "CreditCardRule",
    "luhn_checksum_valid",
    # Collections
    "MinCountRule",
    "MaxCountRule",
]
