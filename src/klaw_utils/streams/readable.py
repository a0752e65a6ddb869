"""Source and transform streams on top of anyio memory object streams.

`Readable` is an `anyio.abc.ObjectReceiveStream`: consume it with
`receive()` or `async for`. Chunks are buffered in an unbounded memory object
stream; when the buffer runs dry the `_read()` hook gets a chance to feed more
before the reader waits for a writer. Like anyio's own streams, every
`receive()` is a checkpoint, even when a chunk is already buffered.

`Transform` adds a sink side (`send`, `send_eof`) and passes every chunk
through `_transform()` one at a time. A transform can also be fed by piping a
source into it, in which case reading the transform pulls from the source.
"""

from __future__ import annotations

import math
from collections.abc import AsyncIterable, AsyncIterator
from typing import Any, NoReturn

import aiologic
import anyio
import anyio.lowlevel
from anyio.abc import ObjectReceiveStream

from klaw_utils._config import get_config
from klaw_utils._logging import get_logger
from klaw_utils.streams._codec import coerce_chunk

__all__ = ['PassThrough', 'Readable', 'Transform']


class Readable(ObjectReceiveStream[Any]):
    """Single-use source stream of chunks.

    In raw mode (`object_mode=False`) every fed chunk is converted to bytes;
    in object mode chunks pass through untouched.
    """

    def __init__(self, *, object_mode: bool = False, encoding: str | None = None) -> None:
        """Initialize an empty readable.

        Args:
            object_mode: Carry arbitrary values instead of bytes.
            encoding: Text encoding for raw mode. Defaults to the configured encoding.
        """
        self.object_mode = object_mode
        self.encoding = encoding or get_config().encoding
        self._writer, self._reader = anyio.create_memory_object_stream[Any](max_buffer_size=math.inf)
        self._eof = False
        self._exhausted = False
        self._error: BaseException | None = None

    def __del__(self) -> None:
        # Abandoned or partly read streams still own both channel ends
        if hasattr(self, '_reader'):
            self._writer.close()
            self._reader.close()

    @property
    def ended(self) -> bool:
        """True once the end signal has been fed; buffered chunks may remain."""
        return self._eof

    @property
    def error(self) -> BaseException | None:
        """The failure this stream was aborted with, if any."""
        return self._error

    def feed(self, chunk: Any) -> None:
        """Enqueue a chunk for readers.

        Raises:
            NamedError: `InvalidChunkType` if a raw-mode chunk is not text or bytes.
            anyio.ClosedResourceError: If the end signal was already fed.
        """
        if not self.object_mode:
            chunk = coerce_chunk(chunk, self.encoding)
        self._writer.send_nowait(chunk)

    def feed_eof(self) -> None:
        """Signal that no more chunks will be fed."""
        self._eof = True
        self._writer.close()

    def fail(self, error: BaseException) -> None:
        """Abort the stream: every later `receive()` raises `error`.

        Buffered chunks are discarded. Only the first failure is kept.
        """
        if self._error is None:
            self._error = error
            get_logger(__name__).debug('stream failed', stream=type(self).__name__, error=repr(error))
        self.feed_eof()

    async def _read(self) -> bool:
        """Feed more chunks on demand.

        Returns:
            True if the buffer may have changed and should be checked again,
            False to wait for chunks fed by someone else.
        """
        return False

    async def receive(self) -> Any:
        """Receive the next chunk.

        Raises:
            anyio.EndOfStream: When the stream has ended and the buffer is empty.
            anyio.ClosedResourceError: If the stream was closed with `aclose()`.
            BaseException: The error the stream failed with.
        """
        await anyio.lowlevel.checkpoint()
        if self._exhausted:
            raise anyio.EndOfStream
        while True:
            self._raise_if_failed()
            try:
                return self._reader.receive_nowait()
            except anyio.WouldBlock:
                pass
            except anyio.EndOfStream:
                self._finish()
            if not await self._read():
                break
        try:
            return await self._reader.receive()
        except anyio.EndOfStream:
            self._raise_if_failed()
            self._finish()

    async def aclose(self) -> None:
        """Close both ends; later reads raise `anyio.ClosedResourceError`."""
        self._eof = True
        self._writer.close()
        self._reader.close()

    def pipe[S: Transform](self, destination: S) -> S:
        """Make this stream the upstream of `destination` and return it.

        Example:
            ```python
            filtered = array_to_stream(['a', 'b'], True).pipe(filter_stream(keep_a))
            ```
        """
        destination.attach(self)
        return destination

    def _raise_if_failed(self) -> None:
        if self._error is not None:
            raise self._error

    def _finish(self) -> NoReturn:
        self._exhausted = True
        self._reader.close()
        raise anyio.EndOfStream


class Transform(Readable):
    """Stream stage that is both a sink and a source.

    Chunks written with `send()` (or pulled from a piped upstream) are handed
    to `_transform()` strictly one at a time; it feeds zero or more chunks to
    the readable side. Any error raised while transforming or pulling from
    upstream fails the stage and is raised to the writer and to readers.
    """

    def __init__(self, *, object_mode: bool = False, encoding: str | None = None) -> None:
        super().__init__(object_mode=object_mode, encoding=encoding)
        self._lock = aiologic.Lock()
        self._upstream: AsyncIterator[Any] | None = None

    def attach(self, upstream: AsyncIterable[Any]) -> None:
        """Use `upstream` as the source of chunks for this stage.

        Raises:
            RuntimeError: If an upstream is already attached.
        """
        if self._upstream is not None:
            msg = f'{type(self).__name__} already has an upstream'
            raise RuntimeError(msg)
        self._upstream = aiter(upstream)

    async def send(self, chunk: Any) -> None:
        """Write a chunk into the stage and wait until it has been processed.

        Raises:
            anyio.ClosedResourceError: If `send_eof()` was already called.
            BaseException: Whatever the stage failed with.
        """
        async with self._lock:
            await self._process(chunk)

    async def send_eof(self) -> None:
        """Signal that no more chunks will be written."""
        async with self._lock:
            if not self._eof:
                self.feed_eof()

    async def _transform(self, chunk: Any) -> None:
        self.feed(chunk)

    async def _process(self, chunk: Any) -> None:
        self._raise_if_failed()
        if self._eof:
            raise anyio.ClosedResourceError
        try:
            if not self.object_mode:
                chunk = coerce_chunk(chunk, self.encoding)
            await self._transform(chunk)
        except Exception as exc:
            self.fail(exc)
            raise

    async def _read(self) -> bool:
        if self._upstream is None:
            return False
        async with self._lock:
            if self._eof:
                return True
            try:
                chunk = await anext(self._upstream)
            except StopAsyncIteration:
                self.feed_eof()
                return True
            except Exception as exc:
                self.fail(exc)
                raise
            await self._process(chunk)
        return True


class PassThrough(Transform):
    """Transform that forwards every chunk unchanged."""
