import pytest

from config import get_settings_module


@pytest.mark.parametrize(
    "env, expected",
    [
        ("production", "config.production"),
        ("prod", "config.production"),
        ("TESTING", "config.testing"),
        ("anything", "config.development"),
    ],
)
def test_app_env_selects_module(monkeypatch, env, expected):
    monkeypatch.delenv("ATTENDANCE_SETTINGS", raising=False)
    monkeypatch.setenv("APP_ENV", env)
    assert get_settings_module() == expected


def test_explicit_settings_module_wins(monkeypatch):
    monkeypatch.setenv("APP_ENV", "production")
    monkeypatch.setenv("ATTENDANCE_SETTINGS", "config.testing")
    assert get_settings_module() == "config.testing"
