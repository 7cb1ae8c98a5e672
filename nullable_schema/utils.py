"""
Utility classes and functions for the nullable schema validator.
"""

import re
from functools import lru_cache
from typing import Any, Iterable, List, Pattern, Union


class JsonPointer:
    """
    Utility class for handling JSON Pointers (RFC 6901).

    JSON Pointers are used to report where in an instance a validation
    error occurred.
    """

    @staticmethod
    def from_parts(parts: Iterable[Any]) -> str:
        """
        Create a JSON Pointer from path parts.

        Args:
            parts: Sequence of path segments

        Returns:
            JSON Pointer string
        """
        parts = list(parts)
        if not parts:
            return ""

        return "/" + "/".join(JsonPointer.escape_part(part) for part in parts)

    @staticmethod
    def escape_part(part: Any) -> str:
        """
        Escape a JSON Pointer path segment.

        Args:
            part: Path segment to escape

        Returns:
            Escaped path segment
        """
        # Replace ~ with ~0 and / with ~1
        return str(part).replace("~", "~0").replace("/", "~1")


class TypeUtils:
    """Utilities for working with JSON Schema types."""

    KNOWN_TYPES = frozenset(
        ["string", "integer", "number", "boolean", "array", "object", "null"]
    )

    @staticmethod
    def get_json_type(value: Any) -> str:
        """
        Get the JSON Schema type for a Python value.

        Integral floats are reported as "number"; use ``is_type`` to
        check whether they satisfy "integer".

        Args:
            value: Python value

        Returns:
            JSON Schema type name
        """
        if value is None:
            return "null"
        elif isinstance(value, bool):
            return "boolean"
        elif isinstance(value, int):
            return "integer"
        elif isinstance(value, float):
            return "number"
        elif isinstance(value, str):
            return "string"
        elif isinstance(value, list):
            return "array"
        elif isinstance(value, dict):
            return "object"
        else:
            return "unknown"

    @staticmethod
    def is_type(value: Any, type_name: str) -> bool:
        """
        Check whether a value is an instance of a JSON Schema type.

        Args:
            value: Python value
            type_name: JSON Schema type name

        Returns:
            True if the value belongs to the type
        """
        if type_name == "null":
            return value is None
        if type_name == "boolean":
            return isinstance(value, bool)
        if type_name == "integer":
            if isinstance(value, bool):
                return False
            if isinstance(value, int):
                return True
            return isinstance(value, float) and value.is_integer()
        if type_name == "number":
            return isinstance(value, (int, float)) and not isinstance(value, bool)
        if type_name == "string":
            return isinstance(value, str)
        if type_name == "array":
            return isinstance(value, list)
        if type_name == "object":
            return isinstance(value, dict)
        return False

    @staticmethod
    def type_names(schema_type: Union[str, List[str]]) -> List[str]:
        """Normalize a ``type`` keyword value to a list of type names."""
        if isinstance(schema_type, str):
            return [schema_type]
        return list(schema_type)


def json_equal(left: Any, right: Any) -> bool:
    """
    Compare two JSON values the way JSON sees them.

    Python treats ``True == 1`` and ``False == 0``; JSON does not.
    Integers and floats with the same value compare equal.
    """
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left == right
    if isinstance(left, dict) and isinstance(right, dict):
        if left.keys() != right.keys():
            return False
        return all(json_equal(left[key], right[key]) for key in left)
    if isinstance(left, list) and isinstance(right, list):
        if len(left) != len(right):
            return False
        return all(json_equal(a, b) for a, b in zip(left, right))
    return left == right


def compile_pattern(source: Any) -> Pattern:
    """
    Compile a regular expression taken from a schema.

    Each source is compiled once per process and shared between calls.

    Args:
        source: Regular expression source

    Returns:
        Compiled pattern

    Raises:
        SchemaError: If the source is not a string or not a valid regular expression
    """
    from .api import SchemaError

    if not isinstance(source, str):
        raise SchemaError(f"Expected a regex pattern string, got {type(source).__name__}", schema=source)
    return _compile_cached(source)


@lru_cache(maxsize=256)
def _compile_cached(source: str) -> Pattern:
    from .api import SchemaError

    try:
        return re.compile(source)
    except re.error as e:
        raise SchemaError(f"Invalid regex pattern '{source}': {e}", schema=source) from e


class SchemaKeywords:
    """Constants for JSON Schema keywords."""

    TYPE = "type"
    ENUM = "enum"
    CONST = "const"

    # String keywords
    MIN_LENGTH = "minLength"
    MAX_LENGTH = "maxLength"
    PATTERN = "pattern"

    # Object keywords
    PROPERTIES = "properties"
    PATTERN_PROPERTIES = "patternProperties"
    ADDITIONAL_PROPERTIES = "additionalProperties"
    REQUIRED = "required"
    PROPERTY_NAMES = "propertyNames"
    MIN_PROPERTIES = "minProperties"
    MAX_PROPERTIES = "maxProperties"

    # Keywords carrying no validation semantics
    ANNOTATIONS = frozenset([
        "$schema",
        "$id",
        "id",
        "$comment",
        "title",
        "description",
        "default",
        "examples",
        "definitions",
        "$defs",
    ])

    @staticmethod
    def is_annotation(keyword: str) -> bool:
        """
        Check if a keyword is an annotation with no validation semantics.

        Args:
            keyword: Schema keyword

        Returns:
            True if the keyword is ignored during validation
        """
        return keyword in SchemaKeywords.ANNOTATIONS
