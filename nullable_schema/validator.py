"""
Validator implementation with keyword dispatch.
"""

import logging
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional, Union

from .api import SchemaError, ValidationOptions, ValidatorResult
from .context import ValidationContext
from .keywords import DEFAULT_KEYWORDS
from .utils import SchemaKeywords

logger = logging.getLogger("nullable_schema")

KeywordHandler = Callable[..., Optional[ValidatorResult]]


class Validator:
    """
    Validates data against schemas by dispatching on schema keywords.

    Every keyword present in a schema is looked up in the validator's
    keyword registry and its handler is run against the instance.
    Handlers that need to descend into sub-schemas call back into
    ``validate_schema``.

    The registry is fixed when the validator is built, so one validator
    can be shared between any number of validation calls.
    """

    def __init__(self, keywords: Optional[Mapping[str, KeywordHandler]] = None):
        """
        Initialize a new validator.

        Args:
            keywords: Handlers to register on top of the default ones,
                keyed by keyword name
        """
        registry: Dict[str, KeywordHandler] = dict(DEFAULT_KEYWORDS)
        registry.update(keywords or {})
        self._keywords = MappingProxyType(registry)

    @property
    def keywords(self) -> Mapping[str, KeywordHandler]:
        """Read-only mapping of keyword name to handler."""
        return self._keywords

    def extend(self, keywords: Mapping[str, KeywordHandler]) -> "Validator":
        """
        Create a validator with some handlers replaced.

        This validator is left unchanged.

        Args:
            keywords: Replacement handlers keyed by keyword name

        Returns:
            New validator with this validator's handlers and the replacements
        """
        registry = dict(self._keywords)
        registry.update(keywords)
        return Validator(registry)

    def validate(self,
                 instance: Any,
                 schema: Union[Dict[str, Any], bool],
                 options: Optional[ValidationOptions] = None) -> ValidatorResult:
        """
        Validate data against a schema.

        Args:
            instance: Data to validate
            schema: Schema to validate against
            options: Validation options, or None for defaults

        Returns:
            ValidatorResult containing validation status and errors

        Raises:
            SchemaError: If the schema is malformed
        """
        options = options or ValidationOptions()
        context = ValidationContext(schema, options=options)
        return self.validate_schema(instance, schema, options, context)

    def validate_schema(self,
                        instance: Any,
                        schema: Union[Dict[str, Any], bool],
                        options: ValidationOptions,
                        ctx: ValidationContext) -> ValidatorResult:
        """
        Validate data against a schema at a given position.

        This is the re-entrant entry point used by handlers to recurse.

        Args:
            instance: Data to validate
            schema: Schema (or sub-schema) to validate against
            options: Validation options
            ctx: Context for the position being validated

        Returns:
            ValidatorResult with every error found at or below this position

        Raises:
            SchemaError: If the schema is malformed
        """
        result = ValidatorResult(instance, schema, options, ctx)

        if schema is True:
            return result
        if schema is False:
            result.add_error("not", schema, "No value is allowed by a false schema")
            return result
        if not isinstance(schema, dict):
            raise SchemaError(
                f"Expected a schema object at '{ctx.pointer}', got {type(schema).__name__}",
                schema=schema,
            )

        if options.verbose:
            logger.debug(f"Validating '{ctx.pointer}' against keywords {list(schema)}")

        for keyword in schema:
            if keyword in options.skip_keywords or SchemaKeywords.is_annotation(keyword):
                continue

            handler = self._keywords.get(keyword)
            if handler is None:
                if not options.allow_unknown_keywords:
                    raise SchemaError(f"Unsupported keyword '{keyword}' at '{ctx.pointer}'", schema=schema)
                logger.debug(f"Ignoring unknown keyword '{keyword}' at '{ctx.pointer}'")
                continue

            result.import_errors(handler(self, instance, schema, options, ctx))

        return result

    def __repr__(self) -> str:
        return f"Validator(keywords={sorted(self._keywords)})"
