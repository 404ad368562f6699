"""fluentknobs - fluent, composable object validation.

This package provides:
- A fluent rule DSL declared per property (``Validator.rule_for``)
- Conditional rules (``when``/``unless``), nested validators and element-wise checks
- Cascade control per property (collect all errors or stop at the first failing rule)
- Identical synchronous and asynchronous validation pipelines
- Pluggable message providers for localized error text
- A railway-style result adapter

Example:
    ```python
    from fluentknobs import Validator

    class ProductValidator(Validator[Product]):
        def __init__(self):
            super().__init__()
            self.rule_for("name").not_empty()
            self.rule_for("stock").greater_than(0)

    result = ProductValidator().validate(product)
    ```
"""

from .builder import RuleBuilder
from .codes import ErrorCodes
from .exceptions import (
    ConfigurationError,
    FluentknobsError,
    NullArgumentError,
    OperationError,
    ValidationFailedError,
)
from .messages import (
    DEFAULT_TEMPLATES,
    MessageProvider,
    TemplateMessageProvider,
    default_message,
)
from .property_validator import CascadeMode, PropertyValidator
from .railway import (
    Err,
    ErrorsResult,
    Ok,
    to_errors_result,
    to_result,
    to_value_result,
    validate_as_errors_result,
    validate_as_errors_result_async,
    validate_as_result,
    validate_as_result_async,
    validate_as_value_result,
    validate_as_value_result_async,
)
from .result import ValidationError, ValidationResult
from .rules import RuleBase, ValidationRule
from .validator import Validator

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Engine
    "Validator",
    "RuleBuilder",
    "PropertyValidator",
    "CascadeMode",
    # Results
    "ValidationError",
    "ValidationResult",
    "ErrorCodes",
    # Rules
    "ValidationRule",
    "RuleBase",
    # Messages
    "MessageProvider",
    "TemplateMessageProvider",
    "DEFAULT_TEMPLATES",
    "default_message",
    # Exceptions
    "FluentknobsError",
    "ConfigurationError",
    "NullArgumentError",
    "OperationError",
    "ValidationFailedError",
    # Railway adapter
    "Ok",
    "Err",
    "ErrorsResult",
    "to_result",
    "to_value_result",
    "to_errors_result",
    "validate_as_result",
    "validate_as_value_result",
    "validate_as_errors_result",
    "validate_as_result_async",
    "validate_as_value_result_async",
    "validate_as_errors_result_async",
]
