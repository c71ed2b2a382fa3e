import pytest

from blogcore.config import DEFAULT_DATABASE_URL, get_settings, refresh_settings_cache


@pytest.fixture(autouse=True)
def _fresh_settings():
    refresh_settings_cache()
    yield
    refresh_settings_cache()


def test_defaults(monkeypatch):
    monkeypatch.delenv("BLOG_DATABASE_URL", raising=False)
    monkeypatch.delenv("BLOG_SQL_ECHO", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    settings = get_settings()
    assert settings.database_url == DEFAULT_DATABASE_URL
    assert settings.sql_echo is False
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("BLOG_DATABASE_URL", "sqlite:///blog.db")
    monkeypatch.setenv("BLOG_SQL_ECHO", "yes")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    settings = get_settings()
    assert settings.database_url == "sqlite:///blog.db"
    assert settings.sql_echo is True
    assert settings.log_level == "DEBUG"


def test_settings_are_cached(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    first = get_settings()
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    assert get_settings() is first
    refresh_settings_cache()
    assert get_settings().log_level == "ERROR"
