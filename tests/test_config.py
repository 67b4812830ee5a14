import pytest

from present_ai import config


@pytest.mark.parametrize("raw, expected", [("7", 7), ("", 5), ("five", 5), (" 3 ", 3)])
def test_int_settings_fall_back_on_bad_values(monkeypatch, raw, expected):
    monkeypatch.setenv("GIFT_IDEAS_PER_REQUEST", raw)

    assert config._int_env("GIFT_IDEAS_PER_REQUEST", 5) == expected
