#!/usr/bin/env python3
"""
Calculator GUI

Dark-themed keypad calculator (Tkinter):
- One display line showing the current token list; it scrolls to keep the end visible.
- Basic keypad (digits, four operators, brackets, C/BS/=) and a scientific keypad
  (√, trig, ln, 1/x, x!, ^), toggled with the mode key.
- Keyboard input is mapped onto the same symbols as the buttons.

All calculation happens in calccore; this window only forwards one symbol per
press and shows the result of render().
"""

import logging
import tkinter as tk
from typing import Optional

from calccore.config import KEYPADS, MODE_KEY, Settings, symbol_for_key
from calccore.engine import CalculatorEngine

logger = logging.getLogger(__name__)


# -------------------------
# Visual theme / constants
# -------------------------
WINDOW_WIDTH = 360
WINDOW_HEIGHT = 520

BG = "#0f1113"          # main app background
PANEL_BG = "#17181A"    # panels / container background
BTN_BG = "#2b2d30"      # button tile background
FUNC_BG = "#3a3d42"     # operator / function tile background
FG = "#E6EEF3"          # foreground text (light)
ACCENT = "#cfeeff"      # accent color for the title and '='

TITLE_FONT = ("Segoe UI", 13, "bold")
DISPLAY_FONT = ("Consolas", 24)
KEY_FONT = ("Segoe UI", 16)
SMALL_KEY_FONT = ("Segoe UI", 12)  # long function names (sin, arccos, ...)


class CalculatorGUI(tk.Tk):
    def __init__(self, settings: Optional[Settings] = None):
        super().__init__()
        settings = settings or Settings()

        # Window setup
        self.title("Calculator")
        self.geometry(f"{WINDOW_WIDTH}x{WINDOW_HEIGHT}")
        self.minsize(300, 420)
        self.configure(bg=BG)

        # Backend engine instance
        self.engine = CalculatorEngine(mode=settings.start_mode)

        self._build_header()
        self._build_display()
        self.keypad_frame: Optional[tk.Frame] = None
        self._build_keypad()
        self._refresh_display()

        self.bind("<Key>", self._on_key, add="+")

    # -------------------------
    # Header and display
    # -------------------------
    def _build_header(self):
        """Top header with the current mode as title."""
        header = tk.Frame(self, bg=PANEL_BG, height=48)
        header.pack(fill="x", side="top")
        self.title_label = tk.Label(header, text=self._mode_title(), bg=PANEL_BG, fg=ACCENT, font=TITLE_FONT)
        self.title_label.pack(side="left", padx=12, pady=6)

    def _build_display(self):
        """Read-only entry used as a single-line display; Entry gives horizontal scrolling for free."""
        disp = tk.Frame(self, bg=PANEL_BG)
        disp.pack(fill="x", padx=8, pady=(8, 0))
        self.display_var = tk.StringVar()
        self.display = tk.Entry(disp, textvariable=self.display_var, state="readonly", justify="right",
                                readonlybackground=BG, fg=FG, relief="flat", font=DISPLAY_FONT)
        self.display.pack(fill="x", padx=6, pady=6, ipady=10)
        scrollbar = tk.Scrollbar(disp, orient="horizontal", command=self.display.xview)
        self.display.config(xscrollcommand=scrollbar.set)
        scrollbar.pack(fill="x", padx=6)

    def _mode_title(self) -> str:
        return self.engine.mode.value.capitalize()

    # -------------------------
    # Keypad
    # -------------------------
    def _build_keypad(self):
        """(Re)build the tile grid for the current mode."""
        if self.keypad_frame is not None:
            self.keypad_frame.destroy()
        self.keypad_frame = tk.Frame(self, bg=PANEL_BG)
        self.keypad_frame.pack(fill="both", expand=True, padx=8, pady=8)

        rows = KEYPADS[self.engine.mode]
        for r, row in enumerate(rows):
            for c, label in enumerate(row):
                if label is None:
                    spacer = tk.Frame(self.keypad_frame, bg=PANEL_BG)
                    spacer.grid(row=r, column=c, sticky="nsew", padx=4, pady=4)
                else:
                    btn = tk.Button(self.keypad_frame, text=self._key_text(label), relief="flat",
                                    bg=self._key_bg(label), fg=FG, font=self._key_font(label),
                                    command=self._map_button(label))
                    btn.grid(row=r, column=c, sticky="nsew", padx=4, pady=4)
                self.keypad_frame.grid_columnconfigure(c, weight=1)
            self.keypad_frame.grid_rowconfigure(r, weight=1)

    @staticmethod
    def _key_text(label: str) -> str:
        if label == "BS":
            return "⌫"
        if label == MODE_KEY:
            return "⇄"
        return label

    @staticmethod
    def _key_bg(label: str) -> str:
        if label == "=":
            return ACCENT
        if label.isdigit() or label == ".":
            return BTN_BG
        return FUNC_BG

    @staticmethod
    def _key_font(label: str):
        return SMALL_KEY_FONT if len(label) > 2 else KEY_FONT

    def _map_button(self, label: str):
        """Map a keypad label to its handler: the mode key switches keypads, everything else goes to the engine."""
        if label == MODE_KEY:
            return self._switch_mode
        return lambda s=label: self._press(s)

    # -------------------------
    # Actions
    # -------------------------
    def _press(self, symbol: str):
        self.engine.press(symbol)
        self._refresh_display()

    def _switch_mode(self):
        self.engine.switch_mode()
        self.title_label.config(text=self._mode_title())
        self._build_keypad()

    def _on_key(self, event):
        """Keyboard handling: try the keysym first (Return, BackSpace, ...) then the typed character."""
        symbol = symbol_for_key(event.keysym) or symbol_for_key(event.char)
        if symbol is None:
            return None
        self._press(symbol)
        return "break"

    def _refresh_display(self):
        self.display_var.set(self.engine.display)
        # keep the newest input in view
        self.display.xview_moveto(1.0)


# -------------------------
# Run the application
# -------------------------
def main(settings: Optional[Settings] = None):
    app = CalculatorGUI(settings)
    logger.info(f"Calculator started in {app.engine.mode.value} mode")
    app.mainloop()


if __name__ == "__main__":
    main()
