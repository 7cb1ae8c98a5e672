"""
Public API for the nullable schema validator.
"""

from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, List, Optional, Tuple, Union

from .context import ValidationContext
from .utils import JsonPointer


class SchemaError(ValueError):
    """
    Raised when a schema cannot be used for validation.

    This is distinct from a failed validation: a ``SchemaError`` means
    validation could not run at all, while a ``ValidatorResult`` with
    ``valid == False`` means it ran and found problems.
    """

    def __init__(self, message: str, schema: Any = None):
        super().__init__(message)
        self.schema = schema


@dataclass
class ValidationError:
    """
    Represents a validation error with structured information.

    Attributes:
        name: The keyword that reported the error
        argument: The offending value or property name
        message: Human-readable error message
        path: Property names from the root to the failing value
        instance: The value that failed validation
        schema: The schema that contains the keyword
    """
    name: str
    argument: Any
    message: str
    path: Tuple[Any, ...] = ()
    instance: Any = None
    schema: Any = None

    @property
    def pointer(self) -> str:
        """JSON Pointer to the value that failed validation."""
        return JsonPointer.from_parts(self.path)

    @property
    def dotted_path(self) -> str:
        return "".join(["instance"] + [f".{part}" for part in self.path])

    def __str__(self) -> str:
        return f"Error at '{self.pointer}': {self.message}"


@dataclass(frozen=True)
class ValidationOptions:
    """
    Options for a single validation call.

    Attributes:
        skip_keywords: Keywords that are never dispatched
        allow_unknown_keywords: Ignore keywords without a handler instead
            of raising ``SchemaError``
        verbose: Log each validation step at DEBUG level
    """
    skip_keywords: FrozenSet[str] = frozenset()
    allow_unknown_keywords: bool = True
    verbose: bool = False


class ValidatorResult:
    """
    Outcome of validating one instance against one schema.

    ``valid`` is derived from the error list and cannot be set.
    """

    def __init__(self,
                 instance: Any,
                 schema: Union[Dict[str, Any], bool],
                 options: Optional[ValidationOptions] = None,
                 ctx: Optional[ValidationContext] = None):
        self.instance = instance
        self.schema = schema
        self.options = options
        self.path: Tuple[Any, ...] = ctx.path if ctx is not None else ()
        self.errors: List[ValidationError] = []

    @property
    def valid(self) -> bool:
        return not self.errors

    def add_error(self, name: str, argument: Any, message: str) -> ValidationError:
        """
        Record an error at this result's position.

        Args:
            name: Keyword reporting the error
            argument: Offending value or property name
            message: Human-readable error message

        Returns:
            The recorded error
        """
        error = ValidationError(
            name=name,
            argument=argument,
            message=message,
            path=self.path,
            instance=self.instance,
            schema=self.schema,
        )
        self.errors.append(error)
        return error

    def import_errors(self, other: Optional["ValidatorResult"]) -> None:
        """
        Append the errors of another result, keeping their order.

        Errors already carry their full path, so nothing is rewritten.
        """
        if other is None:
            return
        self.errors.extend(other.errors)

    def __bool__(self) -> bool:
        return self.valid

    def __str__(self) -> str:
        if self.valid:
            return "ValidatorResult(valid=True)"
        lines = [str(error) for error in self.errors]
        return "ValidatorResult(valid=False):\n  " + "\n  ".join(lines)

    def __repr__(self) -> str:
        return f"ValidatorResult(valid={self.valid}, errors={len(self.errors)})"


def validate(instance: Any,
             schema: Union[Dict[str, Any], bool],
             options: Optional[ValidationOptions] = None) -> ValidatorResult:
    """
    Validate data against a schema, treating null and missing values as valid.

    A fresh validator is built for each call. Callers validating many
    instances should build one with ``create_nullable_validator`` and
    reuse it.

    Args:
        instance: The data to validate
        schema: The schema to validate against
        options: Validation options, or None for defaults

    Returns:
        ValidatorResult containing validation status and any errors

    Raises:
        SchemaError: If the schema is malformed
    """
    from .nullable import create_nullable_validator

    return create_nullable_validator().validate(instance, schema, options)


def standard_validate(instance: Any,
                      schema: Union[Dict[str, Any], bool],
                      options: Optional[ValidationOptions] = None) -> ValidatorResult:
    """
    Validate data against a schema without the null-handling policy.

    Args:
        instance: The data to validate
        schema: The schema to validate against
        options: Validation options, or None for defaults

    Returns:
        ValidatorResult containing validation status and any errors
    """
    from .nullable import create_standard_validator

    return create_standard_validator().validate(instance, schema, options)
