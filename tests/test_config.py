"""Tests for settings loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from ask.config import Settings, get_settings


class TestSettings:
    """Tests for ASK_* environment settings."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.delenv("ASK_SSH_DIR")

        settings = Settings()

        assert settings.github_url == "https://github.com"
        assert settings.github_api_url == "https://api.github.com"
        assert settings.http_timeout == 10.0
        assert settings.log_level == "WARNING"
        assert settings.authorized_keys_dir == Path.home() / ".ssh"

    def test_ssh_dir_override(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
        monkeypatch.setenv("ASK_SSH_DIR", str(tmp_path / "keys"))

        assert Settings().authorized_keys_dir == tmp_path / "keys"

    def test_ssh_dir_expands_user(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("ASK_SSH_DIR", "~/custom-ssh")

        assert Settings().authorized_keys_dir == Path.home() / "custom-ssh"

    def test_rejects_non_positive_timeout(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("ASK_HTTP_TIMEOUT", "0")

        with pytest.raises(ValidationError, match="greater than zero"):
            Settings()

    def test_rejects_unknown_log_level(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("ASK_LOG_LEVEL", "LOUD")

        with pytest.raises(ValidationError):
            Settings()

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()
