from __future__ import annotations

import logging

from oauth_properties import config


def test_properties_path_is_relative_to_working_directory():
    assert config.PROPERTIES_PATH.name == "config.properties"
    assert not config.PROPERTIES_PATH.is_absolute()


def test_setup_logging_installs_stdout_handler(monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    monkeypatch.setenv("LOG_LEVEL", "debug")

    config.setup_logging()

    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0], logging.StreamHandler)
    assert root.handlers[0].formatter._fmt == config.LOG_FORMAT
    assert root.level == logging.DEBUG


def test_setup_logging_keeps_existing_handlers(monkeypatch):
    root = logging.getLogger()
    existing = logging.NullHandler()
    monkeypatch.setattr(root, "handlers", [existing])

    config.setup_logging()

    assert root.handlers == [existing]
