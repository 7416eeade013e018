"""
Tests for configuration validation.

Ensures environment variables are validated at startup.
"""

import pytest
from pydantic import ValidationError

from gspro.core.config import Settings


class TestSecretKeyValidation:

    def test_secret_key_too_short(self, monkeypatch):
        monkeypatch.setenv("SECRET_KEY", "tooshort")

        with pytest.raises(ValidationError) as exc_info:
            Settings()

        assert "SECRET_KEY must be at least 32 characters long" in str(exc_info.value)

    def test_secret_key_placeholder_value(self, monkeypatch):
        monkeypatch.setenv("SECRET_KEY", "generate-with-openssl-rand-hex-32")

        with pytest.raises(ValidationError) as exc_info:
            Settings()

        assert "not placeholder" in str(exc_info.value)


class TestDatabaseUrlValidation:

    def test_rejects_unknown_scheme(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "mysql://localhost/gspro")

        with pytest.raises(ValidationError) as exc_info:
            Settings()

        assert "DATABASE_URL must start with one of" in str(exc_info.value)

    def test_accepts_postgres(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "postgresql+asyncpg://u:p@localhost/gspro")

        assert Settings().database_url.startswith("postgresql+asyncpg://")


class TestOtherSettings:

    def test_cors_origins_comma_separated(self, monkeypatch):
        monkeypatch.setenv("CORS_ORIGINS", "http://localhost:5173, http://caixa.local")

        assert Settings().cors_origins == ["http://localhost:5173", "http://caixa.local"]

    def test_cors_origins_json(self, monkeypatch):
        monkeypatch.setenv("CORS_ORIGINS", '["http://localhost:5173"]')

        assert Settings().cors_origins == ["http://localhost:5173"]

    def test_log_level_is_normalized(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")

        assert Settings().log_level == "DEBUG"

    def test_invalid_log_level(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "loud")

        with pytest.raises(ValidationError):
            Settings()

    def test_business_defaults(self):
        settings = Settings()

        assert settings.recent_sales_limit == 5
        assert settings.bill_urgent_days == 3
        assert settings.qr_prefix == "GSPRO"
