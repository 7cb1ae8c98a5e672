#!/usr/bin/env python3
"""
Tests for validation contexts and results.
"""
import pytest

# autopep8: off
from utils import setup
setup()
from nullable_schema import ValidationContext, ValidationError, ValidationOptions, ValidatorResult
# autopep8: on


class TestValidationContext:
    """Tests for ValidationContext."""

    def test_root_context(self):
        """Test the context at the validation root."""
        schema = {"type": "object"}
        ctx = ValidationContext(schema)

        assert ctx.path == ()
        assert ctx.pointer == ""
        assert ctx.dotted_path == "instance"
        assert ctx.schema is schema

    def test_make_child(self):
        """Test that children extend the path without touching the parent."""
        options = ValidationOptions()
        root = ValidationContext({}, options=options)
        child_schema = {"type": "string"}

        child = root.make_child(child_schema, "name")
        grandchild = child.make_child({}, "first")

        assert root.path == ()
        assert child.path == ("name",)
        assert grandchild.path == ("name", "first")
        assert grandchild.pointer == "/name/first"
        assert grandchild.dotted_path == "instance.name.first"
        assert child.schema is child_schema
        assert grandchild.options is options

    def test_siblings_are_independent(self):
        """Test that sibling contexts do not share state."""
        root = ValidationContext({})
        left = root.make_child({}, "left")
        right = root.make_child({}, "right")

        assert left.path == ("left",)
        assert right.path == ("right",)


class TestValidatorResult:
    """Tests for ValidatorResult."""

    def test_valid_follows_errors(self):
        """Test that validity is derived from the error list."""
        result = ValidatorResult("x", {"type": "integer"})
        assert result.valid
        assert result

        error = result.add_error("type", "integer", "Expected integer, got string")
        assert not result.valid
        assert not result
        assert error is result.errors[0]

        with pytest.raises(AttributeError):
            result.valid = True

    def test_add_error_uses_context_path(self):
        """Test that errors are attributed to the result's position."""
        ctx = ValidationContext({}).make_child({}, "a")
        result = ValidatorResult(1, {}, ValidationOptions(), ctx)

        error = result.add_error("enum", [2], "Value '1' not in enumeration: [2]")
        assert error == ValidationError(
            name="enum",
            argument=[2],
            message="Value '1' not in enumeration: [2]",
            path=("a",),
            instance=1,
            schema={},
        )

    def test_import_errors_keeps_order(self):
        """Test that imported errors keep their order and paths."""
        parent = ValidatorResult({}, {})
        parent.add_error("required", "x", "Missing required property 'x'")

        child = ValidatorResult(1, {}, None, ValidationContext({}).make_child({}, "b"))
        child.add_error("type", "string", "first")
        child.add_error("enum", ["a"], "second")

        parent.import_errors(child)
        parent.import_errors(None)

        assert [error.message for error in parent.errors] == [
            "Missing required property 'x'", "first", "second"]
        assert parent.errors[1].path == ("b",)
        assert len(child.errors) == 2

    def test_string_rendering(self):
        """Test result and error rendering."""
        result = ValidatorResult({}, {})
        assert str(result) == "ValidatorResult(valid=True)"

        result.add_error("required", "a", "Missing required property 'a'")
        assert "Error at '': Missing required property 'a'" in str(result)
        assert repr(result) == "ValidatorResult(valid=False, errors=1)"
