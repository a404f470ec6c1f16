"""Calculator settings and keypad layouts."""
import logging
from dataclasses import dataclass
from enum import Enum


class Mode(Enum):
    BASIC = "basic"
    SCIENTIFIC = "scientific"


# Pseudo key that toggles the keypad mode; it is never sent to the editor.
MODE_KEY = "MODE"

# Rows of keys, left to right. None is an empty cell.
BASIC_KEYPAD = [
    [None, None, None, "BS"],
    ["C", "(", ")", "/"],
    ["7", "8", "9", "×"],
    ["4", "5", "6", "-"],
    ["1", "2", "3", "+"],
    [MODE_KEY, "0", ".", "="],
]

SCIENTIFIC_KEYPAD = [
    ["√", "sin", "cos", "tan"],
    ["ln", "arcsin", "arccos", "arctan"],
    [MODE_KEY, "1/x", "x!", "^"],
]

KEYPADS = {
    Mode.BASIC: BASIC_KEYPAD,
    Mode.SCIENTIFIC: SCIENTIFIC_KEYPAD,
}

# Tk keysym / typed character -> calculator symbol
KEY_BINDINGS = {
    **{d: d for d in "0123456789"},
    "+": "+",
    "-": "-",
    "*": "×",
    "/": "/",
    "^": "^",
    "(": "(",
    ")": ")",
    ".": ".",
    "=": "=",
    "Return": "=",
    "KP_Enter": "=",
    "BackSpace": "BS",
    "Escape": "C",
}


def symbol_for_key(key):
    """Translate a keyboard key into a calculator symbol, or None when the key is unbound."""
    return KEY_BINDINGS.get(key)


@dataclass
class Settings:
    start_mode: Mode = Mode.BASIC
    log_level: str = "INFO"

    def validate(self) -> None:
        if not isinstance(self.start_mode, Mode):
            raise ValueError(f"start_mode must be a Mode, got {self.start_mode!r}")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown log level: {self.log_level}")

    @classmethod
    def from_args(cls, args) -> "Settings":
        """Build settings from an argparse namespace with `mode` and `log_level`."""
        settings = cls(
            start_mode=Mode(args.mode.lower()),
            log_level=args.log_level.upper(),
        )
        settings.validate()
        return settings
