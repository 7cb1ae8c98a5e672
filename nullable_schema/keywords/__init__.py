"""
Default keyword handlers.

Each handler is called as ``handler(validator, instance, schema, options, ctx)``
and returns a ValidatorResult, or None when it has nothing to report.
"""

from types import MappingProxyType

from ..utils import SchemaKeywords
from .enums import validate_const, validate_enum
from .objects import (
    validate_additional_properties,
    validate_max_properties,
    validate_min_properties,
    validate_pattern_properties,
    validate_properties,
    validate_property_names,
    validate_required,
)
from .strings import validate_max_length, validate_min_length, validate_pattern
from .types import validate_type

DEFAULT_KEYWORDS = MappingProxyType({
    SchemaKeywords.TYPE: validate_type,
    SchemaKeywords.ENUM: validate_enum,
    SchemaKeywords.CONST: validate_const,
    SchemaKeywords.REQUIRED: validate_required,
    SchemaKeywords.PROPERTIES: validate_properties,
    SchemaKeywords.PATTERN_PROPERTIES: validate_pattern_properties,
    SchemaKeywords.ADDITIONAL_PROPERTIES: validate_additional_properties,
    SchemaKeywords.PROPERTY_NAMES: validate_property_names,
    SchemaKeywords.MIN_PROPERTIES: validate_min_properties,
    SchemaKeywords.MAX_PROPERTIES: validate_max_properties,
    SchemaKeywords.MIN_LENGTH: validate_min_length,
    SchemaKeywords.MAX_LENGTH: validate_max_length,
    SchemaKeywords.PATTERN: validate_pattern,
})

__all__ = [
    "DEFAULT_KEYWORDS",
    "validate_type",
    "validate_enum",
    "validate_const",
    "validate_required",
    "validate_properties",
    "validate_pattern_properties",
    "validate_additional_properties",
    "validate_property_names",
    "validate_min_properties",
    "validate_max_properties",
    "validate_min_length",
    "validate_max_length",
    "validate_pattern",
]
