"""Tests for settings loading."""

import pytest
from pydantic import ValidationError

from app.core.config import Settings, parse_comma_separated_str


class TestSettings:
    """Tests for Settings defaults and environment overrides."""

    def test_defaults(self, monkeypatch):
        for name in ("PORT", "GROQ_MODEL", "TEMPERATURE", "CORS_ORIGINS", "TRANSLATION_LANGUAGE"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(groq_api_key="k", _env_file=None)

        assert settings.port == 5000
        assert settings.groq_model == "llama-3.1-8b-instant"
        assert settings.temperature == 0.7
        assert settings.cors_origins == ["*"]
        assert settings.translation_language == "Telugu"
        assert settings.strict_output_validation is False

    def test_port_and_key_from_environment(self, monkeypatch):
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("GROQ_API_KEY", "env-key")

        settings = Settings(_env_file=None)

        assert settings.port == 8080
        assert settings.groq_api_key == "env-key"

    def test_cors_origins_comma_separated(self, monkeypatch):
        monkeypatch.setenv("CORS_ORIGINS", "http://localhost:3000, https://kids.example.com")

        settings = Settings(groq_api_key="k", _env_file=None)

        assert settings.cors_origins == ["http://localhost:3000", "https://kids.example.com"]

    def test_missing_key_rejected(self, monkeypatch):
        monkeypatch.delenv("GROQ_API_KEY", raising=False)

        with pytest.raises(ValidationError):
            Settings(_env_file=None)


def test_parse_comma_separated_str():
    assert parse_comma_separated_str("a, b,,c") == ["a", "b", "c"]
    assert parse_comma_separated_str("") == []
    assert parse_comma_separated_str(["x"]) == ["x"]
