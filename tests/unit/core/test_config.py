import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from quoteforge.core.config import Settings, get_settings


@pytest.fixture(autouse=True)
def reset_settings_cache():
    """Keep overridden settings from leaking into other tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_settings_defaults():
    """Test that settings load with correct defaults."""
    settings = Settings()

    assert settings.app_name == "Quote Forge"
    assert settings.environment == "development"
    assert settings.api_prefix == "/api/v1"
    assert settings.database_url.startswith("sqlite+aiosqlite")
    assert settings.db_sqlite_foreign_keys is True
    assert settings.is_development is True
    assert settings.is_production is False
    assert settings.is_sqlite is True


def test_settings_env_override():
    """Test that environment variables override defaults."""
    with patch.dict(os.environ, {
        "QUOTEFORGE_ENVIRONMENT": "production",
        "QUOTEFORGE_DEBUG": "true",
        "QUOTEFORGE_PORT": "9000",
        "QUOTEFORGE_DATABASE_URL": "postgresql+asyncpg://u:p@db/quotes",
    }):
        settings = Settings()

        assert settings.environment == "production"
        assert settings.debug is True
        assert settings.port == 9000
        assert settings.is_production is True
        assert settings.is_sqlite is False


def test_cors_origins_parsing():
    """Test CORS origins parsing from a JSON list."""
    with patch.dict(os.environ, {
        "QUOTEFORGE_CORS_ORIGINS": '["http://example.com", "http://test.com"]'
    }):
        settings = Settings()
        assert settings.cors_origins == ["http://example.com", "http://test.com"]


def test_sqlite_rejects_multiple_workers():
    """SQLite cannot be shared by several worker processes."""
    with pytest.raises(ValidationError, match="SQLite does not support multiple worker"):
        Settings(workers=4)


def test_postgres_allows_multiple_workers():
    settings = Settings(workers=4, database_url="postgresql+asyncpg://u:p@db/quotes")
    assert settings.workers == 4


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
