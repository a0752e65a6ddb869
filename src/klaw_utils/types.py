"""Shared type aliases for chunks, callbacks, and constrained names.

The constrained aliases are validated by msgspec when structs using them are
converted or decoded, for example when `error_class()` builds an `ErrorKind`:

    >>> from klaw_utils.errors import error_class
    >>> error_class('')
    # ValidationError: Expected `str` of length >= 1 - at `$.name`
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Annotated, Any

import msgspec

__all__ = [
    'BytesLike',
    'Chunk',
    'ErrorName',
    'FileFilter',
    'StreamPredicate',
    'TEXT_TYPES',
]

BytesLike = bytes | bytearray | memoryview

Chunk = str | BytesLike | Any
"""One unit of data moving through a stream.

Raw-mode streams carry text or bytes; object-mode streams carry any value.
"""

FileFilter = Callable[[str], bool]
"""Decides whether a collected file path is kept."""

StreamPredicate = Callable[[Any], Awaitable[bool] | bool]
"""Decides whether a chunk is forwarded by a filter stage."""

TEXT_TYPES: tuple[type, ...] = (str, bytes, bytearray, memoryview)
"""Chunk types that raw-mode streams accept as-is."""

ErrorName = Annotated[str, msgspec.Meta(min_length=1, max_length=255)]
"""Name tag of an error kind.

Valid: "NotFound", "InvalidChunkType"
Invalid: ""
"""
