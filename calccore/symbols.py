"""
Keypad vocabulary and token classification.

Every key on the calculator sends one symbol string. This module knows which
family each symbol belongs to and how tightly binary operators bind; it holds
no state.
"""
from enum import Enum

NUMBER_SYMBOLS = frozenset("0123456789")
BINARY_OPERATORS = frozenset({"+", "-", "×", "/", "^"})
UNARY_FUNCTIONS = frozenset({
    "√", "sin", "cos", "tan", "ln", "arcsin", "arccos", "arctan", "x!",
})
BRACKETS = frozenset({"(", ")"})
CONTROL_SYMBOLS = frozenset({"C", "BS", ".", "="})  # C for clear, BS for backspace

RECIPROCAL = "1/x"

_PRECEDENCE = {
    "+": 1, "-": 1,
    "×": 2, "/": 2,
    "^": 3,
}


class SymbolKind(Enum):
    NUMBER = "number"
    DIGIT = "digit"
    DECIMAL = "decimal"
    BINARY_OP = "binary_op"
    UNARY_FN = "unary_fn"
    OPEN_PAREN = "open_paren"
    CLOSE_PAREN = "close_paren"
    CLEAR = "clear"
    BACKSPACE = "backspace"
    EQUALS = "equals"
    RECIPROCAL = "reciprocal"
    UNKNOWN = "unknown"


_FIXED_KINDS = {
    ".": SymbolKind.DECIMAL,
    "(": SymbolKind.OPEN_PAREN,
    ")": SymbolKind.CLOSE_PAREN,
    "C": SymbolKind.CLEAR,
    "BS": SymbolKind.BACKSPACE,
    "=": SymbolKind.EQUALS,
    RECIPROCAL: SymbolKind.RECIPROCAL,
}


def is_numeric(s) -> bool:
    """True for a float literal with at most one leading '-' (e.g. '-3.5', '0.')."""
    if not isinstance(s, str) or not s:
        return False
    body = s[1:] if s.startswith("-") else s
    if not body or body[0] in "+-" or "_" in body or body != body.strip():
        return False
    try:
        float(body)
    except ValueError:
        return False
    return True


def is_binary_operator(s) -> bool:
    return s in BINARY_OPERATORS


def is_unary_function(s) -> bool:
    return s in UNARY_FUNCTIONS


def precedence(op) -> int:
    """Binding strength of a binary operator; 0 for anything else."""
    return _PRECEDENCE.get(op, 0)


def classify(symbol) -> SymbolKind:
    """Map a pressed key or a buffered token onto its SymbolKind."""
    if symbol in NUMBER_SYMBOLS:
        return SymbolKind.DIGIT
    if symbol in _FIXED_KINDS:
        return _FIXED_KINDS[symbol]
    if symbol in BINARY_OPERATORS:
        return SymbolKind.BINARY_OP
    if symbol in UNARY_FUNCTIONS:
        return SymbolKind.UNARY_FN
    if is_numeric(symbol):
        return SymbolKind.NUMBER
    return SymbolKind.UNKNOWN
