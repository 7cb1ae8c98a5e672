#!/usr/bin/env python3
"""
Tests for string-specific validation features.
"""
import pytest

# autopep8: off
from utils import setup
setup()
from nullable_schema import SchemaError, create_nullable_validator, create_standard_validator
# autopep8: on


class TestStringValidation:
    """Tests for string-specific schema validation."""

    def setup_method(self):
        """Set up the test environment."""
        self.validator = create_standard_validator()

    def test_string_length(self):
        """Test string length constraints."""
        schema = {"type": "string", "minLength": 2, "maxLength": 5}

        assert self.validator.validate("abc", schema).valid

        result = self.validator.validate("a", schema)
        assert not result.valid
        assert result.errors[0].name == "minLength"
        assert "minimum is 2" in result.errors[0].message

        result = self.validator.validate("abcdef", schema)
        assert not result.valid
        assert result.errors[0].name == "maxLength"
        assert "maximum is 5" in result.errors[0].message

    def test_length_counts_code_points(self):
        """Test that length is measured in characters."""
        assert self.validator.validate("éé", {"maxLength": 2}).valid

    def test_pattern(self):
        """Test pattern matching."""
        schema = {"type": "string", "pattern": "^[A-Z]{3}-\\d+$"}

        assert self.validator.validate("ABC-123", schema).valid

        result = self.validator.validate("abc-123", schema)
        assert not result.valid
        assert result.errors[0].name == "pattern"
        assert "does not match pattern" in result.errors[0].message

    def test_pattern_is_searched(self):
        """Test that an unanchored pattern matches anywhere."""
        assert self.validator.validate("xx42yy", {"pattern": "\\d+"}).valid

    def test_invalid_pattern_raises(self):
        """Test that a malformed pattern is a schema error."""
        with pytest.raises(SchemaError):
            self.validator.validate("abc", {"pattern": "(unclosed"})

    def test_non_string_pattern_raises(self):
        """Test that a pattern given as another type is a schema error."""
        with pytest.raises(SchemaError) as excinfo:
            self.validator.validate("abc", {"pattern": ["a"]})
        assert excinfo.value.schema == ["a"]

        with pytest.raises(SchemaError):
            self.validator.validate("abc", {"pattern": 5})

    def test_string_keywords_ignore_other_types(self):
        """Test that string keywords only apply to strings."""
        schema = {"minLength": 3, "pattern": "^a"}

        assert self.validator.validate(12, schema).valid
        assert self.validator.validate(["a"], schema).valid

    def test_null_string_with_nullable_validator(self):
        """Test that null bypasses the type but string keywords stay idle."""
        schema = {"type": "string", "minLength": 3, "pattern": "^a"}

        assert create_nullable_validator().validate(None, schema).valid
        assert not self.validator.validate(None, schema).valid
