"""Tests for configuration loading."""

import pytest
from pydantic import ValidationError

from core.config import AppSettings, _parse_env_lines, write_user_env_vars


class TestAppSettings:
    def test_defaults(self):
        settings = AppSettings(_env_file=None)
        assert settings.api_base_url == "http://localhost:8000/api/v1"
        assert settings.login_path == "/login"
        assert settings.home_path == "/"

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("VAULT_CLIENT_API_BASE_URL", "https://vault.example.com/api/v1/")
        monkeypatch.setenv("VAULT_CLIENT_LOG_LEVEL", "debug")

        settings = AppSettings(_env_file=None)

        assert settings.api_base_url == "https://vault.example.com/api/v1"
        assert settings.log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            AppSettings(_env_file=None, log_level="chatty")

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            AppSettings(_env_file=None, http_timeout_seconds=0)


class TestUserEnvFile:
    def test_write_merges_existing_values(self, tmp_path):
        env_path = tmp_path / "cfg" / ".env"
        write_user_env_vars({"VAULT_CLIENT_API_BASE_URL": "http://a"}, env_path=env_path)
        write_user_env_vars({"VAULT_CLIENT_LOG_LEVEL": "INFO"}, env_path=env_path)

        values = _parse_env_lines(env_path.read_text(encoding="utf-8"))

        assert values == {
            "VAULT_CLIENT_API_BASE_URL": "http://a",
            "VAULT_CLIENT_LOG_LEVEL": "INFO",
        }

    def test_undecodable_file_is_rewritten(self, tmp_path):
        env_path = tmp_path / ".env"
        env_path.write_bytes(b"\xff\xfe\x00garbage")

        write_user_env_vars({"VAULT_CLIENT_LOG_LEVEL": "INFO"}, env_path=env_path)

        values = _parse_env_lines(env_path.read_text(encoding="utf-8"))
        assert values == {"VAULT_CLIENT_LOG_LEVEL": "INFO"}

    def test_parse_skips_comments_and_quotes(self):
        text = '# comment\nA="1"\nbroken line\nB = \'two\'\n'
        assert _parse_env_lines(text) == {"A": "1", "B": "two"}
