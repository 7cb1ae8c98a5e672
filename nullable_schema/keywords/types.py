"""
Type keyword handler.
"""

import logging
from typing import Any, Dict, Optional

from ..api import ValidatorResult
from ..context import ValidationContext
from ..utils import TypeUtils

logger = logging.getLogger("nullable_schema")


def validate_type(validator, instance: Any, schema: Dict[str, Any],
                  options, ctx: ValidationContext) -> Optional[ValidatorResult]:
    """
    Validate a value's type against one or more possible types.

    Args:
        validator: Validator running the step
        instance: Value to validate
        schema: Schema containing the ``type`` keyword
        options: Validation options
        ctx: Validation context

    Returns:
        ValidatorResult, or None if the value matches one of the types
    """
    types = TypeUtils.type_names(schema["type"])

    for type_name in types:
        if type_name not in TypeUtils.KNOWN_TYPES:
            logger.warning(f"Unknown type '{type_name}' in schema at '{ctx.pointer}'")
            continue
        if TypeUtils.is_type(instance, type_name):
            return None

    result = ValidatorResult(instance, schema, options, ctx)
    actual_type = TypeUtils.get_json_type(instance)
    result.add_error(
        "type",
        schema["type"],
        f"Expected {', '.join(types)}, got {actual_type}",
    )
    return result
