"""klaw-utils: async stream and filesystem helpers for the Klaw ecosystem.

Flat imports (preferred):
    from klaw_utils import array_to_stream, stream_to_array, merge_streams
    from klaw_utils import collect_files, error_class

Submodule imports (for organization):
    from klaw_utils.streams import Readable, Transform, filter_stream
    from klaw_utils.fs import collect_files
    from klaw_utils.errors import ErrorKind, NamedError
"""

from klaw_utils._config import UtilsConfig, get_config, init, reset_config
from klaw_utils._logging import add_log_hook, clear_log_hooks, configure_logging, get_logger, remove_log_hook
from klaw_utils.errors import ErrorKind, InvalidChunkType, NamedError, error_class
from klaw_utils.fs import collect_files
from klaw_utils.streams import (
    FilterTransform,
    PassThrough,
    Readable,
    Transform,
    array_to_stream,
    filter_stream,
    merge_streams,
    stream_to_array,
    stream_to_buffer,
)

__all__ = [
    # Errors
    'ErrorKind',
    # Streams
    'FilterTransform',
    'InvalidChunkType',
    'NamedError',
    'PassThrough',
    'Readable',
    'Transform',
    # Config
    'UtilsConfig',
    # Logging
    'add_log_hook',
    'array_to_stream',
    'clear_log_hooks',
    # Filesystem
    'collect_files',
    'configure_logging',
    'error_class',
    'filter_stream',
    'get_config',
    'get_logger',
    'init',
    'merge_streams',
    'remove_log_hook',
    'reset_config',
    'stream_to_array',
    'stream_to_buffer',
]
