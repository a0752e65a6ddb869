"""Recursive file collection."""

from __future__ import annotations

import os

import anyio.to_thread

from klaw_utils._config import get_config
from klaw_utils._logging import get_logger
from klaw_utils.types import FileFilter

__all__ = ['collect_files']


def _scan(directory: str, sort_entries: bool) -> list[tuple[str, bool]]:
    """List (name, is_directory) pairs without following symlinks."""
    with os.scandir(directory) as it:
        entries = [(entry.name, entry.is_dir(follow_symlinks=False)) for entry in it]
    if sort_entries:
        entries.sort()
    return entries


async def collect_files(
    directory: str | os.PathLike[str],
    filter: FileFilter | None = None,  # noqa: A002 - mirrors the builtin's meaning
) -> list[str]:
    """Recursively collect the paths of all files under `directory`.

    Directories are always descended into and never returned; the filter is
    only consulted for non-directory entries. Each directory is listed once
    in a worker thread, and a subdirectory is walked as soon as it is met.

    Args:
        directory: Root directory to scan.
        filter: Optional callable returning True for paths to keep.

    Returns:
        Paths joined onto `directory`, in depth-first enumeration order.

    Raises:
        OSError: If the root (or any subdirectory) cannot be listed.

    Example:
        ```python
        logs = await collect_files('var', lambda path: path.endswith('.log'))
        ```
    """
    log = get_logger(__name__)
    sort_entries = get_config().sort_entries
    files: list[str] = []

    async def collect(current: str) -> None:
        entries = await anyio.to_thread.run_sync(_scan, current, sort_entries)
        log.debug('directory scanned', path=current, entries=len(entries))
        for name, is_dir in entries:
            entry_path = os.path.join(current, name)
            if is_dir:
                await collect(entry_path)
            elif filter is None or filter(entry_path):
                files.append(entry_path)

    await collect(os.fspath(directory))
    log.debug('files collected', root=os.fspath(directory), files=len(files))
    return files
