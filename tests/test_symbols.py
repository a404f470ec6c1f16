"""Test token classification."""

import pytest

from calccore.symbols import (
    BINARY_OPERATORS, UNARY_FUNCTIONS, SymbolKind, classify, is_numeric, precedence,
)


@pytest.mark.parametrize("token,expected", [
    ("3", True),
    ("-3.5", True),
    ("0.", True),
    ("-0.", True),
    ("15.0", True),
    ("inf", True),
    ("nan", True),
    ("", False),
    ("-", False),
    ("--3", False),
    ("+3", False),
    ("3 ", False),
    ("1_0", False),
    ("×", False),
    ("sin", False),
    (None, False),
])
def test_is_numeric(token, expected):
    """is_numeric accepts float literals with at most one leading '-'."""
    assert is_numeric(token) == expected


@pytest.mark.parametrize("op,expected", [
    ("+", 1),
    ("-", 1),
    ("×", 2),
    ("/", 2),
    ("^", 3),
    ("(", 0),
    ("sin", 0),
    ("7", 0),
])
def test_precedence(op, expected):
    assert precedence(op) == expected


@pytest.mark.parametrize("symbol,kind", [
    ("7", SymbolKind.DIGIT),
    ("42", SymbolKind.NUMBER),
    ("-4.5", SymbolKind.NUMBER),
    (".", SymbolKind.DECIMAL),
    ("×", SymbolKind.BINARY_OP),
    ("-", SymbolKind.BINARY_OP),
    ("arctan", SymbolKind.UNARY_FN),
    ("x!", SymbolKind.UNARY_FN),
    ("(", SymbolKind.OPEN_PAREN),
    (")", SymbolKind.CLOSE_PAREN),
    ("C", SymbolKind.CLEAR),
    ("BS", SymbolKind.BACKSPACE),
    ("=", SymbolKind.EQUALS),
    ("1/x", SymbolKind.RECIPROCAL),
    ("%", SymbolKind.UNKNOWN),
    ("", SymbolKind.UNKNOWN),
])
def test_classify(symbol, kind):
    assert classify(symbol) is kind


def test_vocabulary_sizes():
    assert len(BINARY_OPERATORS) == 5
    assert len(UNARY_FUNCTIONS) == 9
