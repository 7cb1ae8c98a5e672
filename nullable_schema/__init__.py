"""
Nullable JSON Schema Validator

This package validates JSON data against a JSON schema while treating null
and missing values as valid, so partially known records pass type and enum
checks but still cannot carry undeclared properties.
"""

import logging

from .api import (
    SchemaError,
    ValidationError,
    ValidationOptions,
    ValidatorResult,
    standard_validate,
    validate,
)
from .context import ValidationContext
from .nullable import create_nullable_validator, create_standard_validator
from .utils import JsonPointer
from .validator import Validator
from .version import __version__

# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s: %(message)s",
)
logger = logging.getLogger("nullable_schema")

# Export public classes and functions
__all__ = [
    "Validator",
    "ValidatorResult",
    "ValidationError",
    "ValidationOptions",
    "ValidationContext",
    "SchemaError",
    "JsonPointer",
    "create_nullable_validator",
    "create_standard_validator",
    "validate",
    "standard_validate",
    "__version__",
]
