"""Adapters between in-memory sequences, streams, and byte buffers."""

from __future__ import annotations

from collections.abc import AsyncIterable, Sequence
from typing import Any

from klaw_utils._config import get_config
from klaw_utils.streams._codec import encode_chunk, is_structured
from klaw_utils.streams.readable import Readable

__all__ = ['array_to_stream', 'stream_to_array', 'stream_to_buffer']


class SequenceReadable(Readable):
    """Readable that enqueues a whole sequence on its first read."""

    def __init__(self, items: Sequence[Any], *, object_mode: bool, encoding: str | None = None) -> None:
        super().__init__(object_mode=object_mode, encoding=encoding)
        self._items = items
        self._filled = False

    async def _read(self) -> bool:
        if self._filled:
            return False
        self._filled = True
        try:
            for item in self._items:
                self.feed(item)
        except Exception as exc:
            self.fail(exc)
            raise
        self.feed_eof()
        return True


def array_to_stream(items: Sequence[Any], object_mode: bool | None = None) -> Readable:
    """Wrap a sequence as a readable stream that emits every item in order.

    Args:
        items: Chunks to emit. Held in memory until the stream is drained.
        object_mode: Carry items as-is (True) or as bytes (False). If None,
            object mode is used when the first item is a structured value,
            i.e. not None and not text or bytes.

    Returns:
        A `Readable` that ends after the last item.

    Example:
        ```python
        stream = array_to_stream(['foo', 'bar'])
        assert await stream_to_buffer(stream) == b'foobar'
        ```
    """
    if object_mode is None:
        object_mode = bool(items) and is_structured(items[0])
    return SequenceReadable(items, object_mode=object_mode)


async def stream_to_array(stream: AsyncIterable[Any]) -> list[Any]:
    """Drain a stream and return every chunk it emitted, in order.

    Errors raised by the stream propagate; chunks collected so far are dropped.

    Example:
        ```python
        assert await stream_to_array(array_to_stream([1, 2], True)) == [1, 2]
        ```
    """
    return [chunk async for chunk in stream]


async def stream_to_buffer(stream: AsyncIterable[Any], encoding: str | None = None) -> bytes:
    """Drain a stream into one contiguous bytes object.

    Bytes-like chunks are concatenated as-is, text is encoded with `encoding`
    (the configured encoding by default), and structured values are encoded
    as compact JSON.

    Raises:
        NamedError: `InvalidChunkType` if a chunk cannot be encoded.
    """
    encoding = encoding or get_config().encoding
    output: list[bytes] = []
    async for chunk in stream:
        output.append(encode_chunk(chunk, encoding))
    return b''.join(output)
