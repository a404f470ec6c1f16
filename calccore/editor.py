"""
Incremental infix editing.

edit() takes the current token list and one pressed key and returns the new
token list. It never mutates its input and never raises: a key that does not
fit the current state leaves the list as it is.
"""
import logging
from typing import Sequence, Tuple

from calccore.evaluator import evaluate
from calccore.symbols import SymbolKind, classify, is_binary_operator, is_numeric

logger = logging.getLogger(__name__)

Tokens = Tuple[str, ...]


def _takes_implicit_multiply(last) -> bool:
    # a value just ended, so a new operand has to be multiplied onto it
    return last is not None and (is_numeric(last) or last == ")")


def _opens_operand(last) -> bool:
    return last is None or is_binary_operator(last) or last == "("


def _backspace(tokens: Tokens) -> Tokens:
    if not tokens:
        return ()
    last = tokens[-1]
    if len(last) > 1 and is_numeric(last):
        return tokens[:-1] + (last[:-1],)
    return tokens[:-1]


def _equals(tokens: Tokens) -> Tokens:
    if not tokens:
        return ()
    result = evaluate(tokens)
    if result.ok:
        return result.value
    logger.debug(f"Keeping input after failed evaluation ({type(result.error).__name__})")
    return tokens


def _digit(tokens: Tokens, digit: str) -> Tokens:
    last = tokens[-1] if tokens else None
    if last == "-":
        before = tokens[-2] if len(tokens) > 1 else None
        if _opens_operand(before):
            return tokens[:-1] + ("-" + digit,)
        return tokens + (digit,)
    if last is not None and is_numeric(last):
        return tokens[:-1] + (last + digit,)
    if last == ")":
        return tokens + ("×", digit)
    return tokens + (digit,)


def _decimal(tokens: Tokens) -> Tokens:
    last = tokens[-1] if tokens else None
    if last is not None and is_numeric(last) and "." not in last:
        return tokens[:-1] + (last + ".",)
    if _opens_operand(last):
        return tokens + ("0.",)
    return tokens


def _binary_operator(tokens: Tokens, op: str) -> Tokens:
    last = tokens[-1] if tokens else None
    if op == "-" and _opens_operand(last):
        # sign seed for a negative number
        return tokens + ("-",)
    if _takes_implicit_multiply(last):
        return tokens + (op,)
    if last is not None and is_binary_operator(last):
        return tokens[:-1] + (op,)
    return tokens


def _close_bracket(tokens: Tokens) -> Tokens:
    last = tokens[-1] if tokens else None
    if last is None or is_binary_operator(last) or last == "(":
        return tokens
    if tokens.count("(") > tokens.count(")"):
        return tokens + (")",)
    return tokens


def edit(tokens: Sequence[str], pressed: str) -> Tokens:
    """Return the token list that results from pressing `pressed` with `tokens` on the display."""
    tokens = tuple(tokens)
    kind = classify(pressed)

    if kind is SymbolKind.CLEAR:
        return ()
    if kind is SymbolKind.BACKSPACE:
        return _backspace(tokens)
    if kind is SymbolKind.RECIPROCAL:
        return tokens + ("1", "/")
    if kind is SymbolKind.EQUALS:
        return _equals(tokens)
    if kind is SymbolKind.DIGIT:
        return _digit(tokens, pressed)
    if kind is SymbolKind.DECIMAL:
        return _decimal(tokens)
    if kind is SymbolKind.BINARY_OP:
        return _binary_operator(tokens, pressed)
    if kind is SymbolKind.UNARY_FN:
        prefix = ("×",) if _takes_implicit_multiply(tokens[-1] if tokens else None) else ()
        return tokens + prefix + (pressed, "(")
    if kind is SymbolKind.OPEN_PAREN:
        prefix = ("×",) if _takes_implicit_multiply(tokens[-1] if tokens else None) else ()
        return tokens + prefix + ("(",)
    if kind is SymbolKind.CLOSE_PAREN:
        return _close_bracket(tokens)
    return tokens


def render(tokens: Sequence[str]) -> str:
    """Display string for a token list: '0' when empty, tokens joined by single spaces otherwise."""
    if not tokens:
        return "0"
    return " ".join(tokens)
