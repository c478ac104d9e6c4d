"""
Notes API: Settings Tests
===========================

What:  Defaults, NOTES_* environment overrides and log level validation.
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from notes_api.config import Settings


class TestSettings:

    def test_defaults(self, monkeypatch):
        for name in ("NOTES_HOST", "NOTES_PORT", "NOTES_MAX_BODY_BYTES", "NOTES_ID_START", "NOTES_LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)

        s = Settings(_env_file=None)

        assert s.host == "127.0.0.1"
        assert s.port == 8080
        assert s.max_body_bytes == 16384
        assert s.id_start == 1
        assert s.log_level == "INFO"
        assert s.enable_docs is False
        assert s.bind_address == "127.0.0.1:8080"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("NOTES_PORT", "9090")
        monkeypatch.setenv("NOTES_MAX_BODY_BYTES", "1024")
        monkeypatch.setenv("NOTES_LOG_LEVEL", "debug")

        s = Settings(_env_file=None)

        assert s.port == 9090
        assert s.max_body_bytes == 1024
        assert s.log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(PydanticValidationError):
            Settings(_env_file=None, log_level="chatty")

    def test_port_range_enforced(self):
        with pytest.raises(PydanticValidationError):
            Settings(_env_file=None, port=70000)
