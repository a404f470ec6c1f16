"""
Expression evaluation: shunting-yard conversion to postfix followed by a
value-stack reduction.

Arithmetic runs on numpy float64 with floating-point warnings silenced, so a
division by zero or a domain error such as ln(0) produces inf/nan as a result
instead of an exception. Only structural problems are errors.
"""
import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import numpy as np

from calccore.symbols import SymbolKind, classify, is_unary_function, precedence

logger = logging.getLogger(__name__)


class EvalError(Exception):
    pass


class ParseUnderflow(EvalError):
    """An operator or function found fewer values on the stack than it needs."""


class InvalidFactorialOperand(EvalError):
    """x! was applied to a negative or non-integer value."""


class UnknownToken(EvalError):
    pass


class ExcessOperands(EvalError):
    """More than one value was left over after the reduction."""


def _factorial(a):
    # natural numbers (including 0) only, no gamma extension
    if not (a >= 0 and float(a).is_integer()):
        raise InvalidFactorialOperand(f"factorial needs a natural number, got {a}")
    fac = np.float64(1.0)
    for i in range(1, int(a) + 1):
        fac = fac * i
        if np.isinf(fac):
            break
    return fac


UNARY_OPS = {
    "√": np.sqrt,
    "sin": np.sin,
    "cos": np.cos,
    "tan": np.tan,
    "ln": np.log,
    "arcsin": np.arcsin,
    "arccos": np.arccos,
    "arctan": np.arctan,
    "x!": _factorial,
}

BINARY_OPS = {
    "+": np.add,
    "-": np.subtract,
    "×": np.multiply,
    "/": np.true_divide,
    "^": np.power,
}


@dataclass(frozen=True)
class EvalResult:
    """Outcome of evaluating an infix token list: either a value or the error that stopped it."""
    value: Optional[Tuple[str, ...]] = None
    error: Optional[EvalError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Sequence[str]) -> "EvalResult":
        return cls(value=tuple(value))

    @classmethod
    def failure(cls, error: EvalError) -> "EvalResult":
        return cls(error=error)


def to_postfix(infix_tokens: Sequence[str]) -> Tuple[str, ...]:
    """
    Convert an infix token list to postfix order using the shunting-yard algorithm.

    '^' is right-associative, every other operator left-associative. A unary
    function always sits right before its own '(' and is emitted when that
    bracket closes. Whatever is left on the operator stack at the end,
    unmatched '(' included, is flushed in pop order.
    """
    output = []
    stack = []

    for token in infix_tokens:
        kind = classify(token)
        if kind in (SymbolKind.NUMBER, SymbolKind.DIGIT):
            output.append(token)
        elif kind is SymbolKind.UNARY_FN:
            stack.append(token)
        elif kind is SymbolKind.BINARY_OP:
            while (
                stack
                and stack[-1] != "("
                and (precedence(stack[-1]) > precedence(token)
                     or (precedence(stack[-1]) == precedence(token) and token != "^"))
            ):
                output.append(stack.pop())
            stack.append(token)
        elif kind is SymbolKind.OPEN_PAREN:
            stack.append(token)
        elif kind is SymbolKind.CLOSE_PAREN:
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if stack:
                stack.pop()
            if stack and is_unary_function(stack[-1]):
                output.append(stack.pop())
        else:
            raise UnknownToken(f"Unknown token: {token!r}")

    while stack:
        output.append(stack.pop())
    return tuple(output)


def evaluate_postfix(postfix_tokens: Sequence[str]) -> Tuple[str, ...]:
    """Reduce a postfix token list to a one-element list holding the rendered result."""
    values = []

    with np.errstate(all="ignore"):
        for token in postfix_tokens:
            kind = classify(token)
            if kind in (SymbolKind.NUMBER, SymbolKind.DIGIT):
                values.append(np.float64(float(token)))
            elif kind is SymbolKind.UNARY_FN:
                if not values:
                    raise ParseUnderflow(f"Insufficient operands for {token}")
                arg = values.pop()
                values.append(UNARY_OPS[token](arg))
            elif kind is SymbolKind.BINARY_OP:
                if len(values) < 2:
                    raise ParseUnderflow(f"Insufficient operands for {token}")
                right = values.pop()
                left = values.pop()
                values.append(BINARY_OPS[token](left, right))
            elif kind in (SymbolKind.OPEN_PAREN, SymbolKind.CLOSE_PAREN):
                # left behind by an unbalanced '('
                continue
            else:
                raise UnknownToken(f"Unknown token: {token!r}")

    if not values:
        raise ParseUnderflow("Empty stack after evaluation")
    if len(values) > 1:
        raise ExcessOperands(f"Stack has {len(values)} values after evaluation, expected 1")
    return (str(float(values[0])),)


def evaluate(infix_tokens: Sequence[str]) -> EvalResult:
    """Run both stages on an infix token list and report the outcome as an EvalResult."""
    try:
        postfix = to_postfix(infix_tokens)
        return EvalResult.success(evaluate_postfix(postfix))
    except EvalError as e:
        logger.debug(f"Evaluation of {' '.join(infix_tokens)!r} failed: {e}")
        return EvalResult.failure(e)
