import logging
from typing import Tuple, Union

from calccore.config import Mode
from calccore.editor import edit, render

logger = logging.getLogger(__name__)


class CalculatorEngine:
    """
    Holds the state of one calculator session: the token list on the display
    and the keypad mode. Each key press replaces the token list with the one
    returned by the editor.
    """

    def __init__(self, mode: Mode = Mode.BASIC):
        self.mode = mode
        self.tokens: Tuple[str, ...] = ()

    def set_mode(self, mode: Union[Mode, str]):
        if isinstance(mode, str):
            try:
                mode = Mode(mode.lower())
            except ValueError:
                raise ValueError(f"Unknown mode: {mode}") from None
        self.mode = mode
        logger.info(f"Mode set to {self.mode.value}")

    def switch_mode(self) -> Mode:
        """Toggle between basic and scientific keypads; the input is kept."""
        self.set_mode(Mode.SCIENTIFIC if self.mode is Mode.BASIC else Mode.BASIC)
        return self.mode

    def press(self, symbol: str) -> Tuple[str, ...]:
        self.tokens = edit(self.tokens, symbol)
        return self.tokens

    def clear(self):
        self.tokens = ()

    @property
    def display(self) -> str:
        return render(self.tokens)
