"""Shared fixtures for the tag cloud tests."""

import logging
from configparser import ConfigParser

import pytest

from utils.config import Config


@pytest.fixture(autouse=True)
def workdir(tmp_path, monkeypatch):
    """Run every test inside its own directory so Logs/ never leaks."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def config():
    return Config(ConfigParser())


@pytest.fixture
def logger():
    return logging.getLogger("tagcloud-tests")


@pytest.fixture
def write_text(workdir):
    def _write(name, content):
        path = workdir / name
        path.write_text(content, encoding="utf-8")
        return path
    return _write


@pytest.fixture(autouse=True)
def reset_loggers():
    yield
    log = logging.getLogger("TAGCLOUD")
    for handler in list(log.handlers):
        log.removeHandler(handler)
        handler.close()
