"""Sequential merging of several streams into one."""

from __future__ import annotations

from collections.abc import AsyncIterable
from typing import Any

from klaw_utils._logging import get_logger
from klaw_utils.streams.readable import PassThrough

__all__ = ['merge_streams']


async def merge_streams(*streams: AsyncIterable[Any]) -> PassThrough:
    """Drain `streams` one after another into a single object-mode stream.

    Sources are consumed sequentially, not concurrently: stream i+1 is not
    read until stream i has ended. The result holds every chunk of the first
    source, then every chunk of the second, and so on, and ends after the last
    source ends. With no sources it ends immediately.

    Errors from a source propagate and abort the merge.

    Returns:
        A `PassThrough` holding the merged chunks.

    Example:
        ```python
        merged = await merge_streams(array_to_stream(['a'], True), array_to_stream(['b'], True))
        assert await stream_to_array(merged) == ['a', 'b']
        ```
    """
    log = get_logger(__name__)
    merged = PassThrough(object_mode=True)

    try:
        for index, source in enumerate(streams):
            count = 0
            async for chunk in source:
                await merged.send(chunk)
                count += 1
            log.debug('merge source drained', index=index, chunks=count)
    except BaseException:
        # The merged stream is never handed out on failure
        await merged.aclose()
        raise

    await merged.send_eof()
    log.debug('merge finished', sources=len(streams))
    return merged
