"""
Validation context for path tracking.
"""

from typing import Any, Dict, Optional, Tuple, Union

from .utils import JsonPointer


class ValidationContext:
    """
    Position of a validation step relative to the validation root.

    A context is never modified once created. Descending into a property
    produces a new context through ``make_child``, so sibling steps can
    share a parent without affecting each other.
    """

    def __init__(self,
                 schema: Union[Dict[str, Any], bool],
                 options: Optional[Any] = None,
                 path: Tuple[Any, ...] = ()):
        """
        Initialize a new validation context.

        Args:
            schema: Schema in effect at this position
            options: Options of the validation call
            path: Property names from the root to this position
        """
        self._schema = schema
        self._options = options
        self._path = tuple(path)

    @property
    def schema(self) -> Union[Dict[str, Any], bool]:
        return self._schema

    @property
    def options(self) -> Optional[Any]:
        return self._options

    @property
    def path(self) -> Tuple[Any, ...]:
        """Property names from the root to this position."""
        return self._path

    @property
    def pointer(self) -> str:
        """JSON Pointer for the current position."""
        return JsonPointer.from_parts(self._path)

    @property
    def dotted_path(self) -> str:
        """Dotted rendering of the current position, e.g. ``instance.a.b``."""
        return "".join(["instance"] + [f".{part}" for part in self._path])

    def make_child(self, schema: Union[Dict[str, Any], bool], key: Any) -> "ValidationContext":
        """
        Create a context scoped one level deeper.

        Args:
            schema: Sub-schema applied at the child position
            key: Property name of the child

        Returns:
            New context whose path ends with ``key``
        """
        return ValidationContext(
            schema,
            options=self._options,
            path=self._path + (key,),
        )

    def __str__(self) -> str:
        """String representation of the validation context."""
        return f"ValidationContext(path={self.pointer!r})"

    def __repr__(self) -> str:
        return self.__str__()
