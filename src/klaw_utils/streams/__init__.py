"""Stream helpers: sequence adapters, filter stages, and merging."""

from klaw_utils.streams.adapters import array_to_stream, stream_to_array, stream_to_buffer
from klaw_utils.streams.filter import FilterTransform, filter_stream
from klaw_utils.streams.merge import merge_streams
from klaw_utils.streams.readable import PassThrough, Readable, Transform

__all__ = [
    'FilterTransform',
    'PassThrough',
    'Readable',
    'Transform',
    'array_to_stream',
    'filter_stream',
    'merge_streams',
    'stream_to_array',
    'stream_to_buffer',
]
