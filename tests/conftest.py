"""Pytest configuration and shared fixtures for klaw-utils tests."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
import structlog

from klaw_utils import clear_log_hooks, reset_config

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture(autouse=True)
def fresh_config() -> Generator[None]:
    """Start every test from default configuration."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def restore_logging() -> Generator[None]:
    """Undo configure_logging() so later tests run unconfigured."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    clear_log_hooks()
    yield
    clear_log_hooks()
    structlog.reset_defaults()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


@pytest.fixture
def file_tree(tmp_path: Path) -> str:
    """Directory tree with four files spread over nested folders.

    Layout:
        test/foo.txt
        test/testA/foo.txt
        test/testB/            (empty)
        test/testC/bar.log
        test/testC/foo.txt
    """
    root = tmp_path / 'test'
    for relative in ('foo.txt', 'testA/foo.txt', 'testC/bar.log', 'testC/foo.txt'):
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(relative, encoding='utf-8')
    (root / 'testB').mkdir()
    return str(root)
