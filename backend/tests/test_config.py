"""
Tests for config.py - DATABASE_URL handling and env overrides.
"""

import pytest

from config import Config, TestConfig, get_database_url


def test_database_url_required(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    with pytest.raises(RuntimeError):
        get_database_url()


def test_postgres_scheme_rewritten(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgres://u:p@localhost:5432/real_estate")
    assert get_database_url() == "postgresql://u:p@localhost:5432/real_estate"


def test_remote_postgres_gets_sslmode(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@db.example.com:5432/real_estate")
    assert get_database_url().endswith("?sslmode=require")


def test_existing_sslmode_kept(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@db.example.com/re?sslmode=disable")
    assert get_database_url().endswith("sslmode=disable")


def test_sqlite_url_untouched(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite:///local.db")
    assert get_database_url() == "sqlite:///local.db"


def test_config_resolves_url_lazily(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@localhost/real_estate")
    assert Config().SQLALCHEMY_DATABASE_URI == "postgresql://u:p@localhost/real_estate"


def test_test_config_uses_memory_sqlite():
    assert TestConfig().SQLALCHEMY_DATABASE_URI == "sqlite:///:memory:"
    assert TestConfig.TESTING is True
