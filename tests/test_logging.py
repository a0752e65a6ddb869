"""Tests for logging configuration and hooks."""

from __future__ import annotations

from typing import Any

import pytest

from klaw_utils import collect_files, merge_streams
from klaw_utils._logging import (
    add_log_hook,
    configure_logging,
    get_logger,
    remove_log_hook,
)
from klaw_utils.streams import array_to_stream


@pytest.fixture(autouse=True)
def _restore(restore_logging: None) -> None:
    """Every test here reconfigures logging."""


class TestLogHooks:
    """Tests for logging hooks functionality."""

    def test_hook_receives_log_events(self) -> None:
        received: list[dict[str, Any]] = []

        configure_logging(level='DEBUG', json_output=True)
        add_log_hook(received.append)

        get_logger('test').info('Test message', extra_field='extra_value')

        test_entries = [e for e in received if e.get('event') == 'Test message']
        assert len(test_entries) == 1
        assert test_entries[0]['extra_field'] == 'extra_value'

    def test_remove_hook(self) -> None:
        calls: list[str] = []

        def hook(event_dict: dict[str, Any]) -> None:
            calls.append('called')

        configure_logging(level='DEBUG', json_output=True)
        add_log_hook(hook)

        logger = get_logger('test')
        logger.info('First')
        assert len(calls) == 1

        remove_log_hook(hook)
        logger.info('Second')
        assert len(calls) == 1

    def test_hook_exception_does_not_break_logging(self) -> None:
        calls: list[str] = []

        def bad_hook(event_dict: dict[str, Any]) -> None:
            raise RuntimeError('Hook failed')

        def good_hook(event_dict: dict[str, Any]) -> None:
            calls.append('good')

        configure_logging(level='DEBUG', json_output=False)
        add_log_hook(bad_hook)
        add_log_hook(good_hook)

        get_logger('test').info('Test')

        assert calls == ['good']

    def test_unconfigured_debug_is_silent(self) -> None:
        """Before configure_logging(), stdlib levels filter library debug events."""
        received: list[dict[str, Any]] = []
        add_log_hook(received.append)

        get_logger('klaw_utils.test').debug('hidden')

        assert received == []


class TestLibraryEvents:
    """Tests for events emitted by library operations."""

    async def test_collect_files_logs_scans(self, file_tree: str) -> None:
        received: list[dict[str, Any]] = []
        configure_logging(level='DEBUG')
        add_log_hook(received.append)

        await collect_files(file_tree)

        scanned = [e for e in received if e.get('event') == 'directory scanned']
        finished = [e for e in received if e.get('event') == 'files collected']
        assert len(scanned) == 4
        assert len(finished) == 1
        assert finished[0]['files'] == 4

    async def test_merge_logs_each_source(self) -> None:
        received: list[dict[str, Any]] = []
        configure_logging(level='DEBUG')
        add_log_hook(received.append)

        await merge_streams(array_to_stream([1, 2], True), array_to_stream([3], True))

        drained = [e for e in received if e.get('event') == 'merge source drained']
        assert [(e['index'], e['chunks']) for e in drained] == [(0, 2), (1, 1)]
