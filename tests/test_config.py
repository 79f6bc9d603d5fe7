"""Tests for settings loading."""

import os

import pytest
from pydantic import ValidationError

from rustbook.utils import DEFAULT_CATALOG_PATH, load_settings


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    for name in ("RUSTBOOK_EXECUTE_URL", "RUSTBOOK_EXECUTE_TIMEOUT", "RUSTBOOK_CATALOG_PATH", "RUSTBOOK_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return tmp_path / "missing.env"


class TestLoadSettings:

    def test_defaults(self, clean_env):
        settings = load_settings(clean_env)
        assert settings.execute_url == "http://127.0.0.1:3000"
        assert settings.execute_timeout == 30.0
        assert settings.catalog_path == DEFAULT_CATALOG_PATH
        assert settings.log_level == "INFO"

    def test_environment_overrides(self, clean_env, monkeypatch):
        monkeypatch.setenv("RUSTBOOK_EXECUTE_URL", "http://runner:8080/")
        monkeypatch.setenv("RUSTBOOK_EXECUTE_TIMEOUT", "5")
        monkeypatch.setenv("RUSTBOOK_LOG_LEVEL", "debug")
        settings = load_settings(clean_env)
        assert settings.execute_url == "http://runner:8080"
        assert settings.execute_timeout == 5.0
        assert settings.log_level == "DEBUG"

    def test_env_file(self, clean_env, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("RUSTBOOK_EXECUTE_TIMEOUT=12\n", encoding="utf-8")
        try:
            settings = load_settings(env_file)
        finally:
            os.environ.pop("RUSTBOOK_EXECUTE_TIMEOUT", None)
        assert settings.execute_timeout == 12.0

    def test_invalid_timeout(self, clean_env, monkeypatch):
        monkeypatch.setenv("RUSTBOOK_EXECUTE_TIMEOUT", "0")
        with pytest.raises(ValidationError):
            load_settings(clean_env)
        monkeypatch.setenv("RUSTBOOK_EXECUTE_TIMEOUT", "soon")
        with pytest.raises(ValidationError):
            load_settings(clean_env)

    def test_env_file_found_from_working_directory(self, clean_env, tmp_path, monkeypatch):
        (tmp_path / ".env").write_text("RUSTBOOK_EXECUTE_TIMEOUT=9\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        try:
            settings = load_settings()
        finally:
            os.environ.pop("RUSTBOOK_EXECUTE_TIMEOUT", None)
        assert settings.execute_timeout == 9.0
