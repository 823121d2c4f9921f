import pytest

from countryfetch.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, Settings, env_bool

ENV_KEYS = ["RESTCOUNTRIES_BASE_URL", "COUNTRYFETCH_TIMEOUT", "COUNTRYFETCH_LOG_LEVEL", "NO_COLOR", "COUNTRYFETCH_COLOR"]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_defaults():
    s = Settings.from_env()

    assert s.base_url == DEFAULT_BASE_URL
    assert s.timeout == DEFAULT_TIMEOUT
    assert s.log_level == "WARNING"
    assert s.color is None


def test_overrides(monkeypatch):
    monkeypatch.setenv("RESTCOUNTRIES_BASE_URL", "http://localhost:8080/v3.1/")
    monkeypatch.setenv("COUNTRYFETCH_TIMEOUT", "2.5")
    monkeypatch.setenv("COUNTRYFETCH_LOG_LEVEL", "debug")

    s = Settings.from_env()

    assert s.base_url == "http://localhost:8080/v3.1"
    assert s.timeout == 2.5
    assert s.log_level == "DEBUG"


@pytest.mark.parametrize("raw", ["abc", "0", "-3"])
def test_bad_timeout_falls_back(monkeypatch, raw):
    monkeypatch.setenv("COUNTRYFETCH_TIMEOUT", raw)

    assert Settings.from_env().timeout == DEFAULT_TIMEOUT


def test_no_color_wins(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.setenv("COUNTRYFETCH_COLOR", "1")

    assert Settings.from_env().color is False


def test_force_color(monkeypatch):
    monkeypatch.setenv("COUNTRYFETCH_COLOR", "yes")

    assert Settings.from_env().color is True


def test_env_bool(monkeypatch):
    monkeypatch.setenv("FLAG_X", "On")
    assert env_bool("FLAG_X") is True
    assert env_bool("FLAG_MISSING") is False
    assert env_bool("FLAG_MISSING", True) is True
