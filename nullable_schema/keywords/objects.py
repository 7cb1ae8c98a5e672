"""
Object keyword handlers.

Every handler here ignores values that are not objects; the ``type``
keyword reports those.
"""

from typing import Any, Dict, Optional

from ..api import ValidatorResult
from ..context import ValidationContext
from ..utils import compile_pattern


def _is_object(instance: Any) -> bool:
    return isinstance(instance, dict)


def validate_required(validator, instance: Any, schema: Dict[str, Any],
                      options, ctx: ValidationContext) -> Optional[ValidatorResult]:
    """
    Check that every required property name is present.

    A property is present when its key exists, whatever its value,
    so ``{"a": None}`` satisfies ``required: ["a"]``.
    """
    if not _is_object(instance):
        return None

    result = ValidatorResult(instance, schema, options, ctx)
    for prop in schema["required"]:
        if prop not in instance:
            result.add_error(
                "required",
                prop,
                f"Missing required property '{prop}'",
            )
    return result


def validate_properties(validator, instance: Any, schema: Dict[str, Any],
                        options, ctx: ValidationContext) -> Optional[ValidatorResult]:
    """
    Validate each declared property present in the instance.

    Args:
        validator: Validator running the step, used to recurse
        instance: Object to validate
        schema: Schema containing the ``properties`` keyword
        options: Validation options
        ctx: Validation context

    Returns:
        ValidatorResult with the errors of every invalid property
    """
    if not _is_object(instance):
        return None

    result = ValidatorResult(instance, schema, options, ctx)
    for prop, subschema in (schema["properties"] or {}).items():
        if prop not in instance:
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


def validate_pattern_properties(validator, instance: Any, schema: Dict[str, Any],
                                options, ctx: ValidationContext) -> Optional[ValidatorResult]:
    """
    Validate every property whose name matches a pattern against that pattern's schema.

    A property matching several patterns is validated against each of them.

    Raises:
        SchemaError: If a pattern is not a valid regular expression
    """
    if not _is_object(instance):
        return None

    result = ValidatorResult(instance, schema, options, ctx)
    for pattern, subschema in (schema["patternProperties"] or {}).items():
        compiled_pattern = compile_pattern(pattern)
        for prop in instance:
            if not compiled_pattern.search(prop):
                continue
            res = validator.validate_schema(instance[prop], subschema, options, ctx.make_child(subschema, prop))
            if res.errors:
                result.add_error(
                    "patternProperties",
                    prop,
                    f"property {prop} does not match the schema for pattern '{pattern}'",
                )
            result.import_errors(res)
    return result


def is_additional_property(prop: str, schema: Dict[str, Any]) -> bool:
    """
    Check whether a property is neither declared nor matched by a pattern.

    Patterns are tried in mapping order and the first match wins.

    Raises:
        SchemaError: If a pattern is not a valid regular expression
    """
    if prop in (schema.get("properties") or {}):
        return False
    for pattern in (schema.get("patternProperties") or {}):
        if compile_pattern(pattern).search(prop):
            return False
    return True


def validate_additional_properties(validator, instance: Any, schema: Dict[str, Any],
                                   options, ctx: ValidationContext) -> Optional[ValidatorResult]:
    """
    Validate properties that are neither declared nor pattern-matched.

    ``False`` rejects every such property; a schema validates each of
    their values; ``True`` allows them.
    """
    if not _is_object(instance):
        return None

    additional = schema["additionalProperties"]
    if additional is True:
        return None

    result = ValidatorResult(instance, schema, options, ctx)
    for prop in instance:
        if not is_additional_property(prop, schema):
            continue
        if additional is False:
            result.add_error(
                "additionalProperties",
                prop,
                f"Additional property '{prop}' not allowed",
            )
            continue
        res = validator.validate_schema(instance[prop], additional, options, ctx.make_child(additional, prop))
        if res.errors:
            result.add_error(
                "additionalProperties",
                prop,
                f"Additional property '{prop}' does not match the schema",
            )
        result.import_errors(res)
    return result


def validate_property_names(validator, instance: Any, schema: Dict[str, Any],
                            options, ctx: ValidationContext) -> Optional[ValidatorResult]:
    """Validate each property name, as a string, against a schema."""
    if not _is_object(instance):
        return None

    result = ValidatorResult(instance, schema, options, ctx)
    subschema = schema["propertyNames"]
    for prop in instance:
        res = validator.validate_schema(prop, subschema, options, ctx.make_child(subschema, prop))
        if res.errors:
            result.add_error(
                "propertyNames",
                prop,
                f"Property name '{prop}' is invalid",
            )
        result.import_errors(res)
    return result


def validate_min_properties(validator, instance: Any, schema: Dict[str, Any],
                            options, ctx: ValidationContext) -> Optional[ValidatorResult]:
    if not _is_object(instance):
        return None

    result = ValidatorResult(instance, schema, options, ctx)
    min_properties = schema["minProperties"]
    if len(instance) < min_properties:
        result.add_error(
            "minProperties",
            min_properties,
            f"Object has {len(instance)} properties, but minimum is {min_properties}",
        )
    return result


def validate_max_properties(validator, instance: Any, schema: Dict[str, Any],
                            options, ctx: ValidationContext) -> Optional[ValidatorResult]:
    if not _is_object(instance):
        return None

    result = ValidatorResult(instance, schema, options, ctx)
    max_properties = schema["maxProperties"]
    if len(instance) > max_properties:
        result.add_error(
            "maxProperties",
            max_properties,
            f"Object has {len(instance)} properties, but maximum is {max_properties}",
        )
    return result
