import logging

import pytest

from topaz.utils import logging as logging_utils


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("TOPAZ_LOG_LEVEL", raising=False)
    monkeypatch.delenv("TOPAZ_DEBUG", raising=False)
    root = logging.getLogger()
    previous = root.level
    yield monkeypatch
    root.setLevel(previous)


def test_default_level_without_env():
    assert logging_utils.configure_root() == logging.INFO
    assert logging.getLogger().level == logging.INFO


def test_explicit_level_name_from_cli():
    assert logging_utils.configure_root("warning") == logging.WARNING


def test_level_env_overrides_default(clean_env):
    clean_env.setenv("TOPAZ_LOG_LEVEL", "error")

    assert logging_utils.configure_root("debug") == logging.ERROR
    assert logging.getLogger().level == logging.ERROR


def test_numeric_level_env(clean_env):
    clean_env.setenv("TOPAZ_LOG_LEVEL", "15")

    assert logging_utils.env_level() == 15


def test_debug_flag_forces_debug(clean_env):
    clean_env.setenv("TOPAZ_DEBUG", "true")

    assert logging_utils.configure_root() == logging.DEBUG
    assert logging_utils.env_requests_debug() is True


def test_unknown_level_falls_back(clean_env):
    clean_env.setenv("TOPAZ_LOG_LEVEL", "chatty")

    assert logging_utils.env_level() is None
    assert logging_utils.configure_root("nonsense") == logging.INFO


def test_preferences_apply_only_without_env(clean_env):
    assert logging_utils.apply_preferences(True) == logging.DEBUG
    assert logging_utils.apply_preferences(False) == logging.INFO

    clean_env.setenv("TOPAZ_LOG_LEVEL", "WARNING")
    assert logging_utils.apply_preferences(True) == logging.WARNING
