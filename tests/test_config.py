"""
Products API: Configuration Tests
=================================

What:  Tests for Settings URL assembly and startup validation.
How:   Settings instances are built with explicit keyword values, so the
       test environment's DATABASE_URL does not leak in.
"""

import pytest

from app.config import Settings


def _settings(**overrides):
    values = {
        "database_url": "",
        "db_host": "",
        "db_user": "",
        "db_password": "",
        "db_name": "",
    }
    values.update(overrides)
    return Settings(**values)


class TestDatabaseUrl:
    """Tests for Settings.sqlalchemy_url."""

    def test_full_url_wins(self):
        settings = _settings(
            database_url="postgresql+asyncpg://app:secret@db:5432/shop",
            db_host="ignored",
        )

        url = settings.sqlalchemy_url

        assert url.host == "db"
        assert url.database == "shop"

    def test_url_assembled_from_parts(self):
        settings = _settings(
            db_host="db.internal",
            db_port=5433,
            db_user="app",
            db_password="secret",
            db_name="shop",
        )

        url = settings.sqlalchemy_url

        assert url.drivername == "postgresql+asyncpg"
        assert url.host == "db.internal"
        assert url.port == 5433
        assert url.username == "app"
        assert url.password == "secret"
        assert url.database == "shop"

    def test_driver_override(self):
        settings = _settings(db_driver="mysql+aiomysql", db_host="h", db_name="n")

        assert settings.sqlalchemy_url.drivername == "mysql+aiomysql"


class TestValidation:
    """Tests for validate_required_for_production."""

    def test_missing_database_settings(self):
        with pytest.raises(ValueError, match="DB_HOST"):
            _settings().validate_required_for_production()

    def test_parts_are_sufficient(self):
        _settings(db_host="h", db_user="u", db_name="n").validate_required_for_production()

    def test_url_is_sufficient(self):
        _settings(database_url="sqlite+aiosqlite://").validate_required_for_production()

    def test_invalid_log_level(self):
        with pytest.raises(ValueError):
            _settings(log_level="chatty")

    def test_log_level_normalized(self):
        assert _settings(log_level="debug").log_level == "DEBUG"

    def test_cors_origins_list(self):
        settings = _settings(cors_origins="http://a.test, http://b.test")

        assert settings.cors_origins_list == ["http://a.test", "http://b.test"]
