"""Tests for environment-driven settings."""

from pathlib import Path

import pytest

from invoicebuddy.config import get_settings, reset_settings


class TestSettings:
    def test_defaults(self):
        settings = get_settings()

        assert settings.app_name == "InvoiceBuddy"
        assert settings.api.port == 3001
        assert settings.report.recent_invoices_limit == 5
        assert settings.storage.indent == 2

    def test_singleton(self):
        assert get_settings() is get_settings()

    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
        monkeypatch.setenv("API_PORT", "8080")
        monkeypatch.setenv("REPORT_RECENT_INVOICES_LIMIT", "10")
        monkeypatch.setenv("STORAGE_DATA_DIR", str(tmp_path / "elsewhere"))
        reset_settings()

        settings = get_settings()

        assert settings.api.port == 8080
        assert settings.report.recent_invoices_limit == 10
        assert settings.storage.data_dir == tmp_path / "elsewhere"

    def test_log_level_case_insensitive(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        reset_settings()

        assert get_settings().log_level == "DEBUG"
