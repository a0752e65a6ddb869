"""Filter stage driven by an async predicate."""

from __future__ import annotations

import inspect
from typing import Any

from klaw_utils.streams.readable import Transform
from klaw_utils.types import StreamPredicate

__all__ = ['FilterTransform', 'filter_stream']


class FilterTransform(Transform):
    """Forwards only the chunks `predicate` accepts; rejected chunks are dropped."""

    def __init__(self, predicate: StreamPredicate, *, object_mode: bool = True, encoding: str | None = None) -> None:
        super().__init__(object_mode=object_mode, encoding=encoding)
        self.predicate = predicate

    async def _transform(self, chunk: Any) -> None:
        keep = self.predicate(chunk)
        if inspect.isawaitable(keep):
            keep = await keep
        if keep:
            self.feed(chunk)


def filter_stream(predicate: StreamPredicate, object_mode: bool = True) -> FilterTransform:
    """Create a transform stage that keeps chunks for which `predicate` is true.

    The predicate is awaited for each chunk before the next one is accepted,
    so evaluations never overlap and input order is preserved. If it raises,
    the stage fails with that error.

    Args:
        predicate: Async (or plain) callable returning whether to keep a chunk.
        object_mode: Carry arbitrary values (default) or bytes.

    Returns:
        A `FilterTransform`; pipe a source into it or write with `send()`.

    Example:
        ```python
        async def is_a(chunk: str) -> bool:
            return chunk == 'a'

        filtered = array_to_stream(['a', 'b', 'c'], True).pipe(filter_stream(is_a))
        assert await stream_to_array(filtered) == ['a']
        ```
    """
    return FilterTransform(predicate, object_mode=object_mode)
