"""
ContactBook Backend: Settings Tests
===================================

What:  Tests for Settings parsing and the engine factory arguments.
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from contactbook.config import Settings


class TestPostgresUrl:

    @pytest.mark.parametrize(
        "raw",
        [
            "postgres://user:pw@db:5432/contacts",
            "postgresql://user:pw@db:5432/contacts",
            "  postgres://user:pw@db:5432/contacts  ",
        ],
    )
    def test_libpq_urls_use_asyncpg(self, raw):
        settings = Settings(postgres_url=raw)
        assert settings.postgres_url == "postgresql+asyncpg://user:pw@db:5432/contacts"

    def test_async_urls_are_kept(self):
        url = "postgresql+asyncpg://user:pw@db/contacts"
        assert Settings(postgres_url=url).postgres_url == url

    def test_read_from_environment(self, monkeypatch):
        monkeypatch.setenv("POSTGRES_URL", "postgres://env:pw@envhost/envdb")
        assert Settings().postgres_url == "postgresql+asyncpg://env:pw@envhost/envdb"

    def test_sqlite_skips_queue_pool(self):
        assert Settings(postgres_url="sqlite+aiosqlite:///x.db").uses_queue_pool is False
        assert Settings(postgres_url="postgres://u@h/d").uses_queue_pool is True


class TestOtherSettings:

    def test_log_level_is_upper_cased(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(PydanticValidationError, match="Invalid log_level"):
            Settings(log_level="chatty")

    def test_cors_origins_list(self):
        settings = Settings(cors_origins="http://a.test, http://b.test,")
        assert settings.cors_origins_list == ["http://a.test", "http://b.test"]

    def test_cors_defaults_to_any_origin(self, monkeypatch):
        monkeypatch.delenv("CORS_ORIGINS", raising=False)
        assert Settings().cors_origins_list == ["*"]

    def test_statement_timeout_must_be_positive(self):
        with pytest.raises(PydanticValidationError):
            Settings(db_statement_timeout=0)
