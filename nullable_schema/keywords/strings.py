"""
String keyword handlers.

All handlers ignore values that are not strings; the ``type`` keyword
reports those.
"""

from typing import Any, Dict, Optional

from ..api import ValidatorResult
from ..context import ValidationContext
from ..utils import compile_pattern


def validate_min_length(validator, instance: Any, schema: Dict[str, Any],
                        options, ctx: ValidationContext) -> Optional[ValidatorResult]:
    if not isinstance(instance, str):
        return None

    result = ValidatorResult(instance, schema, options, ctx)
    min_length = schema["minLength"]
    if len(instance) < min_length:
        result.add_error(
            "minLength",
            min_length,
            f"String length is {len(instance)}, but minimum is {min_length}",
        )
    return result


def validate_max_length(validator, instance: Any, schema: Dict[str, Any],
                        options, ctx: ValidationContext) -> Optional[ValidatorResult]:
    if not isinstance(instance, str):
        return None

    result = ValidatorResult(instance, schema, options, ctx)
    max_length = schema["maxLength"]
    if len(instance) > max_length:
        result.add_error(
            "maxLength",
            max_length,
            f"String length is {len(instance)}, but maximum is {max_length}",
        )
    return result


def validate_pattern(validator, instance: Any, schema: Dict[str, Any],
                     options, ctx: ValidationContext) -> Optional[ValidatorResult]:
    """
    Validate a string against a regular expression.

    The pattern is searched for anywhere in the string; anchor it with
    ``^`` and ``$`` to match the whole value.

    Raises:
        SchemaError: If the pattern is not a valid regular expression
    """
    if not isinstance(instance, str):
        return None

    result = ValidatorResult(instance, schema, options, ctx)
    pattern = schema["pattern"]
    if not compile_pattern(pattern).search(instance):
        result.add_error(
            "pattern",
            pattern,
            f"String '{instance}' does not match pattern '{pattern}'",
        )
    return result
