import pytest

from stepwise.config import get_log_level, get_max_expansions, get_recursion_limit, int_from_env


def test_defaults(monkeypatch):
    monkeypatch.delenv("STEPWISE_MAX_EXPANSIONS", raising=False)
    monkeypatch.delenv("STEPWISE_LOG_LEVEL", raising=False)
    monkeypatch.delenv("STEPWISE_RECURSION_LIMIT", raising=False)
    assert get_max_expansions() == 100
    assert get_log_level() == "WARNING"
    assert get_recursion_limit() == 20_000


@pytest.mark.parametrize("raw,expected", [("25", 25), (" 7 ", 7), ("", 100), ("lots", 100)])
def test_max_expansions_from_env(monkeypatch, raw, expected):
    monkeypatch.setenv("STEPWISE_MAX_EXPANSIONS", raw)
    assert get_max_expansions() == expected


def test_log_level_from_env(monkeypatch):
    monkeypatch.setenv("STEPWISE_LOG_LEVEL", "debug")
    assert get_log_level() == "DEBUG"


def test_int_from_env_missing(monkeypatch):
    monkeypatch.delenv("STEPWISE_UNSET_VAR", raising=False)
    assert int_from_env("STEPWISE_UNSET_VAR", 3) == 3


def test_recursion_limit_from_env(monkeypatch):
    monkeypatch.setenv("STEPWISE_RECURSION_LIMIT", "50000")
    assert get_recursion_limit() == 50000
