# tests/unit/config/test_dev_mode.py
# Unit tests for dev mode resolution

from unittest.mock import Mock, patch

import pytest

from cork.config.dev_mode import is_dev_mode_enabled, reset_dev_mode_cache
from cork.config.settings import CorkSettings, settings_manager


class TestIsDevModeEnabled:

    # * Verify default config leaves dev mode off
    def test_false_by_default(self):
        assert is_dev_mode_enabled() is False

    # * Verify stored setting is honored
    def test_reads_config(self):
        settings_manager.set("dev_mode", True)
        assert is_dev_mode_enabled() is True

    # * Verify global lookups are cached until reset
    def test_caches_global_result(self):
        with patch("cork.config.settings.settings_manager") as mock_manager:
            mock_manager.load.return_value = Mock(dev_mode=False)
            is_dev_mode_enabled()
            is_dev_mode_enabled()
            assert mock_manager.load.call_count == 1

            reset_dev_mode_cache()
            is_dev_mode_enabled()
            assert mock_manager.load.call_count == 2

    # * Verify ctx settings bypass the cache
    def test_ctx_uses_injected_settings(self):
        ctx = Mock()
        ctx.obj = CorkSettings(dev_mode=True)
        assert is_dev_mode_enabled(ctx) is True

    # * Verify env override beats both config & ctx
    @pytest.mark.parametrize(
        "raw, expected", [("1", True), ("TRUE", True), ("on", True), ("0", False), ("no", False)]
    )
    def test_env_override(self, monkeypatch, raw, expected):
        monkeypatch.setenv("CORK_DEV_MODE", raw)
        ctx = Mock()
        ctx.obj = CorkSettings(dev_mode=not expected)
        assert is_dev_mode_enabled() is expected
        assert is_dev_mode_enabled(ctx) is expected

    # * Verify blank env value is ignored
    def test_blank_env_ignored(self, monkeypatch):
        monkeypatch.setenv("CORK_DEV_MODE", "  ")
        assert is_dev_mode_enabled() is False
