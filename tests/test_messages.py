"""Tests for message resolution and message providers."""

import json

import pytest
import yaml

from fluentknobs import (
    DEFAULT_TEMPLATES,
    ConfigurationError,
    ErrorCodes,
    MessageProvider,
    NullArgumentError,
    TemplateMessageProvider,
    Validator,
    default_message,
)

from models import Address, Customer, CustomerValidator


class RecordingProvider:
    """Provider returning a fixed marker and recording its calls."""

    def __init__(self, marker="from provider"):
        self.marker = marker
        self.calls = []

    def get_message(self, error_code, property_name, *args):
        self.calls.append((error_code, property_name, args))
        return f"{self.marker}: {error_code}"


class TestMessagePriority:
    """Test custom > provider > default resolution."""

    def test_default_message(self, make_validator):
        validator = make_validator("name", lambda b: b.not_empty())
        assert validator.validate(Customer(name="")).errors[0].message == "name must not be empty."

    def test_provider_overrides_default(self, make_validator):
        validator = make_validator("name", lambda b: b.not_empty())
        validator.use_message_provider(RecordingProvider())

        assert validator.validate(Customer(name="")).errors[0].message == "from provider: NotEmpty"

    def test_custom_message_overrides_provider(self, make_validator):
        provider = RecordingProvider()
        validator = make_validator("name", lambda b: b.not_empty("Custom text."))
        validator.use_message_provider(provider)

        assert validator.validate(Customer(name="")).errors[0].message == "Custom text."
        assert provider.calls == []

    def test_provider_receives_rule_arguments(self, make_validator):
        provider = RecordingProvider()
        validator = make_validator("age", lambda b: b.between(18, 65))
        validator.use_message_provider(provider)

        validator.validate(Customer(age=5))
        assert provider.calls == [(ErrorCodes.BETWEEN, "age", (18, 65))]

    def test_error_code_independent_of_message(self, make_validator):
        validator = make_validator("name", lambda b: b.not_empty("Custom text."))
        assert validator.validate(Customer(name="")).errors[0].error_code == ErrorCodes.NOT_EMPTY


class TestProviderPropagation:
    """Test how providers reach registered rules."""

    def test_provider_applies_to_rules_registered_before(self, customer_validator):
        """Test retroactive propagation through conditions."""
        customer_validator.use_message_provider(RecordingProvider())

        result = customer_validator.validate(Customer(name="", is_company=True))
        assert [e.message for e in result.errors] == [
            "from provider: NotEmpty",
            "from provider: NotEmpty",
        ]

    def test_provider_applies_to_rules_registered_after(self):
        validator = Validator()
        validator.use_message_provider(RecordingProvider())
        validator.rule_for("name").not_empty().when(lambda c: True)

        assert validator.validate(Customer(name="")).errors[0].message == "from provider: NotEmpty"

    def test_replacing_provider(self, make_validator):
        validator = make_validator("name", lambda b: b.not_empty())
        validator.use_message_provider(RecordingProvider("first"))
        validator.use_message_provider(RecordingProvider("second"))

        assert validator.validate(Customer(name="")).errors[0].message == "second: NotEmpty"

    def test_nested_validator_keeps_its_own_messages(self, customer_validator):
        """Test that a parent provider does not leak into a child validator."""
        customer_validator.use_message_provider(RecordingProvider())

        result = customer_validator.validate(Customer(address=Address(city="", zip_code="1011")))
        assert result.errors[0].property_name == "address.city"
        assert result.errors[0].message == "city must not be empty."

    def test_use_message_provider_chains(self):
        validator = CustomerValidator()
        provider = RecordingProvider()
        assert validator.use_message_provider(provider) is validator
        assert validator.message_provider is provider

    def test_invalid_providers(self):
        with pytest.raises(NullArgumentError):
            Validator().use_message_provider(None)
        with pytest.raises(ConfigurationError):
            Validator().use_message_provider(object())


class TestTemplateMessageProvider:
    """Test the catalog-backed provider."""

    def test_satisfies_protocol(self):
        assert isinstance(TemplateMessageProvider(), MessageProvider)

    def test_templates_with_arguments(self):
        provider = TemplateMessageProvider({"Between": "{property_name}: {0}..{1}"})
        assert provider.get_message("Between", "Age", 18, 65) == "Age: 18..65"

    def test_falls_back_to_defaults(self):
        provider = TemplateMessageProvider({"Between": "x"})
        assert provider.get_message("NotEmpty", "Name") == "Name must not be empty."

    def test_strict_catalog(self):
        provider = TemplateMessageProvider({"Between": "x"}, use_defaults=False)
        with pytest.raises(ConfigurationError):
            provider.get_message("NotEmpty", "Name")

    def test_bad_placeholder(self):
        provider = TemplateMessageProvider({"Between": "{property_name} {5}"})
        with pytest.raises(ConfigurationError):
            provider.get_message("Between", "Age", 18, 65)

    def test_from_dict_shapes(self):
        flat = TemplateMessageProvider.from_dict({"NotEmpty": "kötelező"})
        assert flat.templates == {"NotEmpty": "kötelező"}
        assert flat.use_defaults is True

        nested = TemplateMessageProvider.from_dict({"messages": {"NotEmpty": "x"}, "use_defaults": False})
        assert nested.templates == {"NotEmpty": "x"}
        assert nested.use_defaults is False

    def test_from_dict_rejects_bad_catalogs(self):
        with pytest.raises(ConfigurationError):
            TemplateMessageProvider.from_dict(["NotEmpty"])
        with pytest.raises(ConfigurationError):
            TemplateMessageProvider.from_dict({"NotEmpty": 42})
        with pytest.raises(ConfigurationError):
            TemplateMessageProvider.from_dict({"messages": ["NotEmpty"]})

    def test_from_yaml_file(self, tmp_path):
        path = tmp_path / "hu.yaml"
        path.write_text(
            yaml.safe_dump({"messages": {"NotEmpty": "{property_name} nem lehet üres."}}, allow_unicode=True),
            encoding="utf-8",
        )

        provider = TemplateMessageProvider.from_file(path)
        assert provider.get_message("NotEmpty", "Név") == "Név nem lehet üres."

    def test_from_json_file(self, tmp_path, make_validator):
        path = tmp_path / "messages.json"
        path.write_text(json.dumps({"Between": "{property_name} out of range"}), encoding="utf-8")

        validator = make_validator("age", lambda b: b.between(18, 65))
        validator.use_message_provider(TemplateMessageProvider.from_file(str(path)))
        assert validator.validate(Customer(age=3)).errors[0].message == "age out of range"

    def test_from_file_errors(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            TemplateMessageProvider.from_file(tmp_path / "missing.yaml")

        path = tmp_path / "messages.ini"
        path.write_text("[messages]", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="Unsupported"):
            TemplateMessageProvider.from_file(path)


class TestDefaultMessages:
    """Test the built-in catalog."""

    def test_every_code_has_a_template(self):
        assert set(ErrorCodes.all()) == set(DEFAULT_TEMPLATES)

    def test_unknown_code_uses_generic_message(self):
        assert default_message("Unknown", "Name") == "Name is invalid."
