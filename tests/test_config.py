"""Test settings, keypad layouts and key bindings."""

from argparse import Namespace

import pytest

from calccore.config import (
    BASIC_KEYPAD, KEYPADS, MODE_KEY, SCIENTIFIC_KEYPAD, Mode, Settings, symbol_for_key,
)
from calccore.symbols import SymbolKind, classify
from main import parse_args


def test_default_settings_are_valid():
    settings = Settings()
    settings.validate()
    assert settings.start_mode is Mode.BASIC
    assert settings.log_level == "INFO"


@pytest.mark.parametrize("settings", [
    Settings(start_mode="basic"),
    Settings(log_level="LOUD"),
])
def test_invalid_settings(settings):
    with pytest.raises(ValueError):
        settings.validate()


def test_settings_from_args():
    settings = Settings.from_args(Namespace(mode="Scientific", log_level="debug"))
    assert settings.start_mode is Mode.SCIENTIFIC
    assert settings.log_level == "DEBUG"


def test_settings_from_cli():
    settings = Settings.from_args(parse_args(["--mode", "scientific", "--log-level", "warning"]))
    assert settings.start_mode is Mode.SCIENTIFIC
    assert settings.log_level == "WARNING"


def test_cli_rejects_unknown_mode():
    with pytest.raises(SystemExit):
        parse_args(["--mode", "graphing"])


@pytest.mark.parametrize("mode", list(Mode))
def test_every_keypad_key_is_understood(mode):
    for row in KEYPADS[mode]:
        for key in row:
            if key is None or key == MODE_KEY:
                continue
            assert classify(key) is not SymbolKind.UNKNOWN, key


def test_both_keypads_offer_mode_toggle():
    assert any(MODE_KEY in row for row in BASIC_KEYPAD)
    assert any(MODE_KEY in row for row in SCIENTIFIC_KEYPAD)
    assert any("1/x" in row for row in SCIENTIFIC_KEYPAD)


@pytest.mark.parametrize("key,symbol", [
    ("7", "7"),
    ("*", "×"),
    ("Return", "="),
    ("KP_Enter", "="),
    ("BackSpace", "BS"),
    ("Escape", "C"),
    ("q", None),
    ("", None),
])
def test_symbol_for_key(key, symbol):
    assert symbol_for_key(key) == symbol
