"""Message providers and the built-in message catalog.

A message provider supplies the text of an error for a given error code.
Rules consult the provider attached to them only when no custom message was
configured at registration time (see ``RuleBase.resolve_message``).

Templates use ``str.format`` syntax. ``{property_name}`` is the failing
property and ``{0}``, ``{1}``, ... are the arguments of the rule (for
example the bounds of ``between``).

Example:
    ```python
    from fluentknobs import TemplateMessageProvider

    provider = TemplateMessageProvider({
        "NotEmpty": "{property_name} nem lehet üres.",
        "EmailAddress": "{property_name} nem érvényes email cím.",
    })
    validator.use_message_provider(provider)

    # Or from a catalog file
    provider = TemplateMessageProvider.from_file("messages/hu.yaml")
    ```
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

import yaml  # type: ignore[import-untyped]

from .codes import ErrorCodes
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


DEFAULT_TEMPLATES: dict[str, str] = {
    ErrorCodes.NOT_NULL: "{property_name} must not be null.",
    ErrorCodes.NOT_EMPTY: "{property_name} must not be empty.",
    ErrorCodes.COLLECTION_NOT_EMPTY: "{property_name} must not be empty.",
    ErrorCodes.GREATER_THAN: "{property_name} must be greater than {0}.",
    ErrorCodes.LESS_THAN: "{property_name} must be less than {0}.",
    ErrorCodes.BETWEEN: "{property_name} must be between {0} and {1}.",
    ErrorCodes.EQUAL: "{property_name} must be equal to the specified value.",
    ErrorCodes.NOT_EQUAL: "{property_name} must not be equal to the specified value.",
    ErrorCodes.MIN_LENGTH: "{property_name} must be at least {0} characters.",
    ErrorCodes.MAX_LENGTH: "{property_name} must not exceed {0} characters.",
    ErrorCodes.LENGTH: "{property_name} must be between {0} and {1} characters.",
    ErrorCodes.MATCHES: "{property_name} has an invalid format.",
    ErrorCodes.EMAIL_ADDRESS: "{property_name} is not a valid email address.",
    ErrorCodes.URL: "{property_name} is not a valid URL.",
    ErrorCodes.CREDIT_CARD: "{property_name} is not a valid credit card number.",
    ErrorCodes.IS_IN_ENUM: "{property_name} is not a valid {0} value.",
    ErrorCodes.MIN_COUNT: "{property_name} must have at least {0} item(s).",
    ErrorCodes.MAX_COUNT: "{property_name} must not exceed {0} item(s).",
    ErrorCodes.MUST: "{property_name} is invalid.",
}


@runtime_checkable
class MessageProvider(Protocol):
    """Strategy supplying localized or custom text for an error code."""

    def get_message(self, error_code: str, property_name: str, *args: Any) -> str:
        """Return the message for ``error_code`` on ``property_name``.

        Args:
            error_code: Stable code of the failed check
            property_name: Name of the failing property
            *args: Rule arguments (bounds, lengths, enum name, ...)

        Returns:
            Message text
        """
        ...


def format_template(template: str, error_code: str, property_name: str, *args: Any) -> str:
    """Render a message template.

    Args:
        template: ``str.format`` template
        error_code: Code the template belongs to (for error context)
        property_name: Failing property
        *args: Positional rule arguments

    Returns:
        Rendered message

    Raises:
        ConfigurationError: If the template references unknown placeholders
    """
    try:
        return template.format(*args, property_name=property_name)
    except (IndexError, KeyError) as e:
        raise ConfigurationError(
            f"Message template for '{error_code}' references an unknown placeholder: {e}",
            context={"error_code": error_code, "template": template},
        ) from e


def default_message(error_code: str, property_name: str, *args: Any) -> str:
    """Render the built-in English message for ``error_code``."""
    template = DEFAULT_TEMPLATES.get(error_code, DEFAULT_TEMPLATES[ErrorCodes.MUST])
    return format_template(template, error_code, property_name, *args)


class TemplateMessageProvider:
    """Message provider backed by a ``code -> template`` catalog.

    Codes missing from the catalog fall back to the built-in English
    templates, so a catalog may translate only part of the rules.
    """

    def __init__(self, templates: dict[str, str] | None = None, use_defaults: bool = True):
        """Initialize the provider.

        Args:
            templates: Mapping of error code to ``str.format`` template
            use_defaults: If True, fall back to the built-in templates for
                codes missing from ``templates``
        """
        self.templates: dict[str, str] = dict(templates or {})
        self.use_defaults = use_defaults

    def get_message(self, error_code: str, property_name: str, *args: Any) -> str:
        """Render the catalog template for ``error_code``."""
        template = self.templates.get(error_code)
        if template is None:
            if not self.use_defaults:
                raise ConfigurationError(
                    f"No message template for error code '{error_code}'",
                    context={"error_code": error_code, "known_codes": sorted(self.templates)},
                )
            return default_message(error_code, property_name, *args)
        return format_template(template, error_code, property_name, *args)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TemplateMessageProvider:
        """Create a provider from a dictionary.

        The dictionary is either a flat ``code -> template`` mapping or has
        the catalog under a ``messages`` key, with an optional boolean
        ``use_defaults`` alongside it.

        Args:
            data: Catalog dictionary

        Returns:
            TemplateMessageProvider instance
        """
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Message catalog must be a mapping, got {type(data).__name__}"
            )

        if "messages" in data:
            templates = data["messages"] or {}
            use_defaults = data.get("use_defaults", True)
        else:
            templates = data
            use_defaults = True

        if not isinstance(templates, dict):
            raise ConfigurationError(
                f"Message templates must be a mapping, got {type(templates).__name__}"
            )

        bad_entries = [code for code, template in templates.items() if not isinstance(template, str)]
        if bad_entries:
            raise ConfigurationError(
                "Message templates must be strings",
                context={"error_codes": bad_entries},
            )

        return cls({str(code): template for code, template in templates.items()}, use_defaults)

    @classmethod
    def from_file(cls, path: str | Path) -> TemplateMessageProvider:
        """Load a provider from a YAML or JSON catalog file.

        Args:
            path: Path to the catalog (``.yaml``, ``.yml`` or ``.json``)

        Returns:
            TemplateMessageProvider instance

        Raises:
            ConfigurationError: If the file is missing or has an unsupported format
        """
        path = Path(path).resolve()

        if not path.exists():
            raise ConfigurationError(
                f"Message catalog not found: {path}",
                context={"path": str(path)},
            )

        suffix = path.suffix.lower()
        with open(path, encoding="utf-8") as f:
            if suffix in [".yaml", ".yml"]:
                data = yaml.safe_load(f) or {}
            elif suffix == ".json":
                data = json.load(f)
            else:
                raise ConfigurationError(
                    f"Unsupported message catalog format: {suffix}",
                    context={"path": str(path)},
                )

        provider = cls.from_dict(data)
        logger.debug("Loaded %d message template(s) from %s", len(provider.templates), path)
        return provider
