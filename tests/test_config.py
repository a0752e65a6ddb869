"""Tests for configuration and initialization."""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest

from klaw_utils import UtilsConfig, get_config, init, reset_config
from klaw_utils._config import ENCODING_ENV_VAR, _detect_encoding


class TestUtilsConfig:
    """Tests for the UtilsConfig dataclass."""

    def test_default_values(self) -> None:
        config = UtilsConfig()
        assert config.encoding == 'utf-8'
        assert config.log_level is None
        assert config.sort_entries is True

    def test_config_is_frozen(self) -> None:
        config = UtilsConfig()
        with pytest.raises(AttributeError):
            config.encoding = 'ascii'  # type: ignore[misc]


class TestDetectEncoding:
    """Tests for _detect_encoding()."""

    def test_env_encoding(self) -> None:
        with patch.dict(os.environ, {ENCODING_ENV_VAR: 'latin-1'}):
            assert _detect_encoding() == 'iso8859-1'

    def test_env_invalid_falls_back(self) -> None:
        with patch.dict(os.environ, {ENCODING_ENV_VAR: 'not-a-codec'}):
            assert _detect_encoding() == 'utf-8'

    def test_no_env_uses_interpreter_default(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert _detect_encoding() == 'utf-8'


class TestInit:
    """Tests for init() and get_config()."""

    def test_init_with_defaults(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            config = init()
        assert config == UtilsConfig()

    def test_init_normalizes_encoding(self) -> None:
        assert init(encoding='UTF8').encoding == 'utf-8'

    def test_init_unknown_encoding_raises(self) -> None:
        with pytest.raises(LookupError):
            init(encoding='klingon')

    def test_init_sort_entries(self) -> None:
        assert init(sort_entries=False).sort_entries is False

    def test_get_config_returns_initialized(self) -> None:
        config = init(encoding='ascii')
        assert get_config() is config

    def test_get_config_lazily_initializes(self) -> None:
        reset_config()
        config = get_config()
        assert isinstance(config, UtilsConfig)
        assert get_config() is config

    def test_init_with_log_level(self, restore_logging: None) -> None:
        config = init(log_level='DEBUG')
        assert config.log_level == 'DEBUG'
