"""
Tests for configuration, database helpers, logging and errors
"""
import logging

from sqlalchemy import text
from sqlalchemy.orm import Session

from translatable.core import database
from translatable.core.config import (
    Settings,
    get_fallback_locale,
    get_locale,
    set_fallback_locale,
    set_locale,
)
from translatable.core.exceptions import (
    AttributeNotTranslatable,
    ShortcutNotPrefixed,
    TranslatableError,
)
from translatable.core.logging_config import LOG_FORMAT, setup_logging


def test_settings_defaults(monkeypatch):
    for name in ("APP_LOCALE", "APP_FALLBACK_LOCALE", "TRANSLATABLE_PREFIX", "DATABASE_URL"):
        monkeypatch.delenv(name, raising=False)

    defaults = Settings(_env_file=None)

    assert defaults.APP_LOCALE == "en"
    assert defaults.APP_FALLBACK_LOCALE == "en"
    assert defaults.TRANSLATABLE_PREFIX == "trans_"
    assert defaults.TRANSLATABLE_STRICT_SHORTCUTS is False


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("APP_LOCALE", "nl")
    monkeypatch.setenv("TRANSLATABLE_PREFIX", "localized_")

    configured = Settings(_env_file=None)

    assert configured.APP_LOCALE == "nl"
    assert configured.TRANSLATABLE_PREFIX == "localized_"


def test_locale_helpers():
    set_locale("fr")
    set_fallback_locale(None)

    assert get_locale() == "fr"
    assert get_fallback_locale() is None


def test_connect_args_per_backend():
    assert database._connect_args("sqlite:///./translatable.db") == {"check_same_thread": False}
    assert database._connect_args("postgresql://localhost/app") == {"connect_timeout": 10}


def test_get_db_yields_and_closes_a_session(monkeypatch):
    from translatable_models import TestingSessionLocal

    monkeypatch.setattr(database, "SessionLocal", TestingSessionLocal)

    sessions = database.get_db()
    db = next(sessions)
    assert isinstance(db, Session)
    assert db.execute(text("SELECT 1")).scalar() == 1

    sessions.close()
    assert not db.in_transaction()


def test_setup_logging_configures_root_logger():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        setup_logging("debug")

        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert root.handlers[0].formatter._fmt == LOG_FORMAT
        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
    finally:
        root.handlers = saved_handlers
        root.setLevel(saved_level)


def test_error_messages():
    not_translatable = AttributeNotTranslatable("title", ["name", "description"])
    not_prefixed = ShortcutNotPrefixed("name", "localized_")

    assert isinstance(not_translatable, TranslatableError)
    assert not isinstance(not_translatable, AttributeError)
    assert str(not_translatable) == (
        "Cannot translate attribute `title` as it's not one of the "
        "translatable attributes: name, description"
    )
    assert not_translatable.translatable == ("name", "description")
    assert "`localized_name`" in str(not_prefixed)
