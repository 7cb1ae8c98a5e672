"""
Enum and const keyword handlers.
"""

from typing import Any, Dict, Optional

from ..api import SchemaError, ValidatorResult
from ..context import ValidationContext
from ..utils import json_equal


def validate_enum(validator, instance: Any, schema: Dict[str, Any],
                  options, ctx: ValidationContext) -> Optional[ValidatorResult]:
    """
    Validate a value against an enumeration.

    Args:
        validator: Validator running the step
        instance: Value to validate
        schema: Schema containing the ``enum`` keyword
        options: Validation options
        ctx: Validation context

    Returns:
        ValidatorResult, or None if the value is one of the allowed values

    Raises:
        SchemaError: If ``enum`` is not a list
    """
    values = schema["enum"]
    if not isinstance(values, list):
        raise SchemaError("enum expects a list", schema=schema)

    if any(json_equal(instance, value) for value in values):
        return None

    result = ValidatorResult(instance, schema, options, ctx)
    result.add_error(
        "enum",
        values,
        f"Value '{instance}' not in enumeration: {values}",
    )
    return result


def validate_const(validator, instance: Any, schema: Dict[str, Any],
                   options, ctx: ValidationContext) -> Optional[ValidatorResult]:
    """Validate a value against a constant."""
    if json_equal(instance, schema["const"]):
        return None

    result = ValidatorResult(instance, schema, options, ctx)
    result.add_error(
        "const",
        schema["const"],
        f"Expected constant value {schema['const']}, got {instance}",
    )
    return result
