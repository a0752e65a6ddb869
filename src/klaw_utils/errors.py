"""Tagged error kinds: one exception type discriminated by a `kind` name.

`error_class(name)` returns an `ErrorKind` struct. Calling it builds a
`NamedError`, and `isinstance(err, kind)` compares kind names instead of
relying on a dynamically created subclass per name.

Example:
    ```python
    NotFound = error_class('NotFound')

    try:
        raise NotFound('missing config', cause={'path': '/etc/app.toml'})
    except NamedError as err:
        assert isinstance(err, NotFound)
        assert err.name == 'NotFound'
    ```
"""

from __future__ import annotations

from typing import Any

import msgspec

from klaw_utils.types import ErrorName

__all__ = [
    'ErrorKind',
    'InvalidChunkType',
    'NamedError',
    'error_class',
]


class ErrorKind(msgspec.Struct, frozen=True, gc=False):
    """Name tag of a failure, callable to build the exception."""

    name: ErrorName

    def __call__(self, message: str | None = None, cause: Any = None) -> NamedError:
        """Build a `NamedError` of this kind.

        Args:
            message: Optional human-readable message, stored unchanged.
            cause: Optional wrapped value of any shape, stored by reference.
        """
        return NamedError(self.name, message, cause)

    def __instancecheck__(self, instance: Any) -> bool:
        return self.matches(instance)

    def matches(self, error: Any) -> bool:
        """Return True if `error` is a `NamedError` of exactly this kind."""
        return isinstance(error, NamedError) and error.kind == self.name


class NamedError(Exception):
    """Failure tagged with a kind name.

    Attributes:
        kind: Discriminant naming the variant.
        message: The message passed at construction, or None.
        cause: The wrapped cause, stored as-is even if it is not an exception.
    """

    def __init__(self, kind: str, message: str | None = None, cause: Any = None) -> None:
        self.kind = kind
        self.message = message
        self.cause = cause
        if message is None:
            super().__init__()
        else:
            super().__init__(message)
        if isinstance(cause, BaseException):
            self.__cause__ = cause

    @property
    def name(self) -> str:
        """Alias of `kind`."""
        return self.kind

    def __repr__(self) -> str:
        if self.message is None:
            return f'{self.kind}()'
        return f'{self.kind}({self.message!r})'

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.kind, self.message, self.cause))


def error_class(name: str) -> ErrorKind:
    """Create the error kind tagged with `name`.

    Kinds are plain values: two calls with the same name return equal kinds,
    and errors built by either match both.

    Args:
        name: Name of the error kind, 1 to 255 characters.

    Returns:
        An `ErrorKind` that constructs `NamedError` instances when called.

    Raises:
        msgspec.ValidationError: If `name` is not a string or its length is out of range.
    """
    return msgspec.convert({'name': name}, ErrorKind)


InvalidChunkType = error_class('InvalidChunkType')
"""A chunk that a raw-mode stream or byte buffer cannot turn into bytes."""
