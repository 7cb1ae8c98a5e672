"""
Null-tolerant keyword handlers.

Producers that must emit every field of a record but do not always know
its value send ``None`` (or leave the field out). The handlers here accept
such records:

- ``type`` and ``enum`` accept ``None`` whatever the schema declares.
- ``properties`` does not descend into properties that are ``None`` or
  missing.
- ``additionalProperties: false`` still rejects property names that are
  neither declared nor matched by ``patternProperties``.

``required`` keeps its default meaning: the key must exist, but its value
may be ``None``.
"""

import logging
from typing import Any, Dict, Optional

from .api import ValidatorResult
from .context import ValidationContext
from .keywords.objects import is_additional_property
from .utils import SchemaKeywords
from .validator import KeywordHandler, Validator

logger = logging.getLogger("nullable_schema")


def make_type_handler(default_type: KeywordHandler) -> KeywordHandler:
    """Build a ``type`` handler that accepts None and delegates everything else."""

    def validate_type(validator, instance: Any, schema: Dict[str, Any],
                      options, ctx: ValidationContext) -> Optional[ValidatorResult]:
        if instance is None:
            return None
        return default_type(validator, instance, schema, options, ctx)

    return validate_type


def make_enum_handler(default_enum: KeywordHandler) -> KeywordHandler:
    """Build an ``enum`` handler that accepts None even when it is not listed."""

    def validate_enum(validator, instance: Any, schema: Dict[str, Any],
                      options, ctx: ValidationContext) -> Optional[ValidatorResult]:
        if instance is None:
            return None
        return default_enum(validator, instance, schema, options, ctx)

    return validate_enum


def validate_properties(validator, instance: Any, schema: Dict[str, Any],
                        options, ctx: ValidationContext) -> Optional[ValidatorResult]:
    """
    Validate each declared property that holds a value.

    Properties that are None or missing are skipped without descending
    into their schema. A property that fails gets a summary error at this
    level followed by the errors found inside it.

    Args:
        validator: Validator running the step, used to recurse
        instance: Object to validate
        schema: Schema containing the ``properties`` keyword
        options: Validation options
        ctx: Validation context

    Returns:
        ValidatorResult, or None if the instance is not an object
    """
    if instance is None:
        return None
    if not isinstance(instance, dict):
        return None

    result = ValidatorResult(instance, schema, options, ctx)
    for prop, subschema in (schema["properties"] or {}).items():
        if instance.get(prop) is None:
            if options.verbose:
                logger.debug(f"Skipping null or missing property '{prop}' at '{ctx.pointer}'")
            continue

        res = validator.validate_schema(instance[prop], subschema, options, ctx.make_child(subschema, prop))
        if res.errors:
            result.add_error(
                "properties",
                prop,
                f"property {prop} is invalid",
            )
        result.import_errors(res)

    return result


def validate_additional_properties(validator, instance: Any, schema: Dict[str, Any],
                                   options, ctx: ValidationContext) -> Optional[ValidatorResult]:
    """
    Reject undeclared property names when ``additionalProperties`` is false.

    Any other value of ``additionalProperties``, including a schema, puts
    no constraint on undeclared properties.

    Raises:
        SchemaError: If a ``patternProperties`` key is not a valid regular expression
    """
    if instance is None:
        return None
    if schema["additionalProperties"] is not False:
        return None
    if not isinstance(instance, dict):
        return None

    result = ValidatorResult(instance, schema, options, ctx)
    for prop in instance:
        if is_additional_property(prop, schema):
            result.add_error(
                "additionalProperties",
                prop,
                f"additional property '{prop}' is not allowed",
            )

    return result


def create_nullable_validator() -> Validator:
    """
    Create a validator that treats null and missing values as valid.

    The default ``type`` and ``enum`` handlers are captured from a
    standard validator and called directly for every non-null value.

    Returns:
        New validator with the null-tolerant handlers registered
    """
    base = create_standard_validator()
    defaults = base.keywords

    validator = base.extend({
        SchemaKeywords.TYPE: make_type_handler(defaults[SchemaKeywords.TYPE]),
        SchemaKeywords.ENUM: make_enum_handler(defaults[SchemaKeywords.ENUM]),
        SchemaKeywords.PROPERTIES: validate_properties,
        SchemaKeywords.ADDITIONAL_PROPERTIES: validate_additional_properties,
    })
    logger.debug("Created nullable validator")
    return validator


def create_standard_validator() -> Validator:
    """Create a validator with the default keyword handlers only."""
    return Validator()
