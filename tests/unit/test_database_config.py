"""
Tests for database URL selection and logging configuration.
"""

import logging
import logging.handlers

from src.utils.database import get_database_url, get_engine
from src.utils.logger import setup_logging, get_logger

def test_get_database_url_testing(monkeypatch):
    """In testing mode the database is always in-memory SQLite."""
    monkeypatch.setenv("TESTING", "true")
    monkeypatch.setenv("DATABASE_URL", "postgresql://user:pw@db/restaurant")

    assert get_database_url() == "sqlite+aiosqlite://"

def test_get_database_url_converts_postgres(monkeypatch):
    monkeypatch.setenv("TESTING", "false")
    monkeypatch.setenv("DATABASE_URL", "postgresql://user:pw@db/restaurant\n")

    assert get_database_url() == "postgresql+asyncpg://user:pw@db/restaurant"

def test_get_database_url_converts_sqlite(monkeypatch):
    monkeypatch.setenv("TESTING", "false")
    monkeypatch.setenv("DATABASE_URL", "sqlite:///./restaurant.db")

    assert get_database_url() == "sqlite+aiosqlite:///./restaurant.db"

def test_get_engine_for_in_memory_sqlite():
    engine = get_engine("sqlite+aiosqlite://")

    assert engine.url.drivername == "sqlite+aiosqlite"
    assert type(engine.pool).__name__ == "StaticPool"

def test_setup_logging_adds_error_file(tmp_path, monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    root_logger = logging.getLogger()
    saved_handlers = root_logger.handlers[:]
    saved_level = root_logger.level

    try:
        logger = setup_logging(tmp_path)

        assert logger.name == "restaurant_core"
        assert root_logger.level == logging.DEBUG
        file_handlers = [
            handler for handler in root_logger.handlers
            if isinstance(handler, logging.handlers.RotatingFileHandler)
        ]
        assert len(file_handlers) == 1
        assert file_handlers[0].level == logging.ERROR
        assert (tmp_path / "error.log").exists()
    finally:
        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)
            handler.close()
        for handler in saved_handlers:
            root_logger.addHandler(handler)
        root_logger.setLevel(saved_level)

def test_get_logger_uses_env_level(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    assert get_logger("restaurant_core.test").level == logging.WARNING
