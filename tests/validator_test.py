#!/usr/bin/env python3
"""
Tests for the keyword registry and recursive descent of the validator.
"""
import pytest

# autopep8: off
from utils import setup
setup()
from nullable_schema import ValidationOptions, Validator, ValidatorResult
from nullable_schema.keywords import DEFAULT_KEYWORDS
# autopep8: on


def reject_everything(validator, instance, schema, options, ctx):
    result = ValidatorResult(instance, schema, options, ctx)
    result.add_error("type", schema["type"], "rejected")
    return result


class TestValidator:
    """Tests for Validator."""

    def test_registry_is_read_only(self):
        """Test that handlers cannot be replaced after construction."""
        validator = Validator()

        with pytest.raises(TypeError):
            validator.keywords["type"] = reject_everything
        with pytest.raises(TypeError):
            DEFAULT_KEYWORDS["type"] = reject_everything

    def test_extend_returns_new_validator(self):
        """Test replacing a handler through extend."""
        validator = Validator()
        extended = validator.extend({"type": reject_everything})

        assert validator.keywords["type"] is DEFAULT_KEYWORDS["type"]
        assert extended.keywords["type"] is reject_everything
        assert extended.keywords["enum"] is DEFAULT_KEYWORDS["enum"]

        assert validator.validate("a", {"type": "string"}).valid
        assert not extended.validate("a", {"type": "string"}).valid

    def test_handlers_run_for_nested_schemas(self):
        """Test that replaced handlers are used at every depth."""
        extended = Validator({"type": reject_everything})
        schema = {"properties": {"a": {"properties": {"b": {"type": "string"}}}}}

        result = extended.validate({"a": {"b": "x"}}, schema)
        assert [error.path for error in result.errors if error.name == "type"] == [("a", "b")]

    def test_new_keyword(self):
        """Test registering a handler for a keyword the defaults lack."""

        def validate_even(validator, instance, schema, options, ctx):
            if not isinstance(instance, int) or instance % 2 == 0:
                return None
            result = ValidatorResult(instance, schema, options, ctx)
            result.add_error("even", schema["even"], f"{instance} is odd")
            return result

        validator = Validator({"even": validate_even})
        assert validator.validate(4, {"even": True}).valid
        assert not validator.validate(3, {"even": True}).valid

    def test_verbose_logging(self, caplog):
        """Test per-step debug logging."""
        caplog.set_level("DEBUG", logger="nullable_schema")

        Validator().validate({"a": 1}, {"properties": {"a": {"type": "integer"}}},
                             ValidationOptions(verbose=True))
        assert "Validating '/a'" in caplog.text
