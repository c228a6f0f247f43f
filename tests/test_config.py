# tests/test_config.py

from __future__ import annotations

import logging

import pytest

from todo_list_app.config import DEFAULT_REQUEST_TIMEOUT, Settings
from todo_list_app.errors import ConfigError
from todo_list_app.logging_setup import setup_logging


@pytest.fixture(autouse=True)
def clean_env(monkeypatch) -> None:
    for name in ("BACKEND_URL", "NEXT_PUBLIC_BACKEND_URL", "TODO_REQUEST_TIMEOUT", "TODO_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_defaults_without_backend_url() -> None:
    settings = Settings.from_env(dotenv=False)

    assert settings.backend_url is None
    assert settings.request_timeout == DEFAULT_REQUEST_TIMEOUT
    assert settings.log_level == "INFO"
    with pytest.raises(ConfigError):
        settings.require_backend_url()


def test_reads_backend_url_and_alias(monkeypatch) -> None:
    monkeypatch.setenv("NEXT_PUBLIC_BACKEND_URL", "http://alias/api")
    assert Settings.from_env(dotenv=False).backend_url == "http://alias/api"

    monkeypatch.setenv("BACKEND_URL", " http://primary/api ")
    assert Settings.from_env(dotenv=False).require_backend_url() == "http://primary/api"


def test_blank_backend_url_counts_as_missing(monkeypatch) -> None:
    monkeypatch.setenv("BACKEND_URL", "   ")
    with pytest.raises(ConfigError):
        Settings.from_env(dotenv=False).require_backend_url()


@pytest.mark.parametrize("raw, expected", [("2.5", 2.5), ("abc", DEFAULT_REQUEST_TIMEOUT), ("-1", DEFAULT_REQUEST_TIMEOUT)])
def test_request_timeout_parsing(monkeypatch, raw, expected) -> None:
    monkeypatch.setenv("TODO_REQUEST_TIMEOUT", raw)
    assert Settings.from_env(dotenv=False).request_timeout == expected


def test_dotenv_does_not_override_environment(monkeypatch, tmp_path) -> None:
    (tmp_path / ".env").write_text("BACKEND_URL=http://from-dotenv/api\nTODO_LOG_LEVEL=debug\n")
    monkeypatch.chdir(tmp_path)
    # Register the variable so whatever the .env sets is undone after the test
    monkeypatch.setenv("TODO_LOG_LEVEL", "unset")
    monkeypatch.delenv("TODO_LOG_LEVEL")
    monkeypatch.setenv("BACKEND_URL", "http://from-env/api")

    settings = Settings.from_env()

    assert settings.backend_url == "http://from-env/api"
    assert settings.log_level == "DEBUG"


def test_setup_logging_does_not_stack_handlers() -> None:
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    try:
        setup_logging("debug")
        setup_logging("warning")

        ours = [h for h in root.handlers if getattr(h, "_todo_app_handler", False)]
        assert len(ours) == 1
        assert root.level == logging.WARNING
        assert logging.getLogger("urllib3").level == logging.WARNING
    finally:
        for handler in list(root.handlers):
            if handler not in before:
                root.removeHandler(handler)
        root.setLevel(level)
