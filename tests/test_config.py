import logging

import pytest

from solarquote.config import LOG_FORMAT, Settings, configure_logging, load_settings

ENV_VARS = [
    "SOLARQUOTE_API_URL",
    "SOLARQUOTE_API_TIMEOUT",
    "SOLARQUOTE_CURRENCY",
    "SOLARQUOTE_USD_RATE",
    "SOLARQUOTE_COMPANY",
    "SOLARQUOTE_LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    assert load_settings(dotenv=False) == Settings()


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("SOLARQUOTE_API_URL", "https://crm.example.com/")
    monkeypatch.setenv("SOLARQUOTE_API_TIMEOUT", "2.5")
    monkeypatch.setenv("SOLARQUOTE_CURRENCY", "usd")
    monkeypatch.setenv("SOLARQUOTE_USD_RATE", "300")
    monkeypatch.setenv("SOLARQUOTE_COMPANY", "SunCo")
    monkeypatch.setenv("SOLARQUOTE_LOG_LEVEL", "debug")
    s = load_settings(dotenv=False)
    assert s.api_url == "https://crm.example.com"
    assert s.api_timeout == 2.5
    assert s.currency == "USD"
    assert s.usd_rate == 300
    assert s.company_name == "SunCo"
    assert s.log_level == "DEBUG"


def test_blank_number_falls_back_to_default(monkeypatch):
    monkeypatch.setenv("SOLARQUOTE_API_TIMEOUT", "  ")
    assert load_settings(dotenv=False).api_timeout == 10.0


def test_bad_number_raises(monkeypatch):
    monkeypatch.setenv("SOLARQUOTE_USD_RATE", "abc")
    with pytest.raises(ValueError, match="SOLARQUOTE_USD_RATE"):
        load_settings(dotenv=False)


def test_configure_logging(monkeypatch):
    captured = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: captured.update(kw))
    configure_logging(Settings(log_level="DEBUG"))
    assert captured["level"] == logging.DEBUG
    assert captured["format"] == LOG_FORMAT


def test_unknown_log_level_falls_back_to_info(monkeypatch):
    captured = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: captured.update(kw))
    configure_logging(Settings(log_level="CHATTY"))
    assert captured["level"] == logging.INFO
