"""Library configuration: UtilsConfig, init, and lazy defaults."""

from __future__ import annotations

import codecs
import logging
import os
import sys
from dataclasses import dataclass

from klaw_utils._logging import configure_logging

__all__ = [
    'UtilsConfig',
    'get_config',
    'init',
    'reset_config',
]

ENCODING_ENV_VAR = 'KLAW_UTILS_ENCODING'


@dataclass(frozen=True)
class UtilsConfig:
    """Configuration for klaw-utils.

    Attributes:
        encoding: Text encoding used to turn text chunks into bytes.
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        sort_entries: Sort directory entries by name while collecting files.
    """

    encoding: str = 'utf-8'
    log_level: str | None = None
    sort_entries: bool = True


# Global configuration (set by init() or on first get_config())
_config: UtilsConfig | None = None


def _detect_encoding() -> str:
    """Pick the chunk encoding.

    Priority:
    1. KLAW_UTILS_ENCODING environment variable
    2. The interpreter's default text encoding
    """
    env_encoding = os.environ.get(ENCODING_ENV_VAR, '').strip()
    if env_encoding:
        try:
            return codecs.lookup(env_encoding).name
        except LookupError:
            logging.warning("Unknown %s value '%s', using the default encoding", ENCODING_ENV_VAR, env_encoding)
    return codecs.lookup(sys.getdefaultencoding()).name


def init(
    encoding: str | None = None,
    log_level: str | None = None,
    sort_entries: bool | None = None,
) -> UtilsConfig:
    """Initialize klaw-utils with the given configuration.

    Args:
        encoding: Text encoding for chunk coercion. Auto-detected if None.
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.
        sort_entries: Sort directory entries by name. Defaults to True.

    Returns:
        The UtilsConfig that was set.

    Raises:
        LookupError: If the encoding is not known to the codecs registry.

    Example:
        ```python
        from klaw_utils import init

        init(encoding='latin-1', log_level='DEBUG')
        ```
    """
    global _config  # noqa: PLW0603

    resolved_encoding = _detect_encoding() if encoding is None else codecs.lookup(encoding).name

    _config = UtilsConfig(
        encoding=resolved_encoding,
        log_level=log_level,
        sort_entries=True if sort_entries is None else sort_entries,
    )

    if log_level is not None:
        configure_logging(log_level)

    return _config


def get_config() -> UtilsConfig:
    """Get the current configuration, initializing defaults on first use."""
    if _config is None:
        return init()
    return _config


def reset_config() -> None:
    """Forget the current configuration so the next get_config() re-detects it."""
    global _config  # noqa: PLW0603
    _config = None
