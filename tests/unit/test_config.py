"""
Unit tests for TwoTrackSettings.

Settings come from TWOTRACK_* environment variables; the clean_env fixture
removes stray variables and runs each test from an empty directory.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from twotrack import TwoTrackSettings


class TestDefaults:
    def test_defaults(self, clean_env) -> None:
        settings = TwoTrackSettings()
        assert settings.log_level == "INFO"
        assert settings.log_format == "console"
        assert settings.max_logged_messages == 10


class TestEnvironment:
    def test_reads_prefixed_variables(self, clean_env) -> None:
        """
        GIVEN TWOTRACK_LOG_LEVEL, TWOTRACK_LOG_FORMAT and TWOTRACK_MAX_LOGGED_MESSAGES
        WHEN settings are loaded
        THEN every field reflects the environment.
        """
        clean_env.setenv("TWOTRACK_LOG_LEVEL", "debug")
        clean_env.setenv("TWOTRACK_LOG_FORMAT", "json")
        clean_env.setenv("TWOTRACK_MAX_LOGGED_MESSAGES", "3")
        settings = TwoTrackSettings()
        assert settings.log_level == "DEBUG"
        assert settings.log_format == "json"
        assert settings.max_logged_messages == 3

    def test_reads_dotenv_file(self, clean_env, tmp_path) -> None:
        (tmp_path / ".env").write_text("TWOTRACK_LOG_LEVEL=WARNING\n", encoding="utf-8")
        assert TwoTrackSettings().log_level == "WARNING"

    def test_environment_beats_dotenv(self, clean_env, tmp_path) -> None:
        (tmp_path / ".env").write_text("TWOTRACK_LOG_LEVEL=WARNING\n", encoding="utf-8")
        clean_env.setenv("TWOTRACK_LOG_LEVEL", "ERROR")
        assert TwoTrackSettings().log_level == "ERROR"


class TestValidation:
    def test_rejects_unknown_log_level(self, clean_env) -> None:
        with pytest.raises(ValidationError, match="Unknown log level"):
            TwoTrackSettings(log_level="CHATTY")

    def test_rejects_unknown_format(self, clean_env) -> None:
        with pytest.raises(ValidationError):
            TwoTrackSettings(log_format="xml")

    def test_rejects_non_positive_message_limit(self, clean_env) -> None:
        with pytest.raises(ValidationError):
            TwoTrackSettings(max_logged_messages=0)
