"""Calculator core - token classification, infix editing and evaluation"""
from .symbols import (
    SymbolKind, NUMBER_SYMBOLS, BINARY_OPERATORS, UNARY_FUNCTIONS,
    BRACKETS, CONTROL_SYMBOLS, classify, is_numeric, precedence
)
from .evaluator import (
    EvalError, ParseUnderflow, InvalidFactorialOperand, UnknownToken,
    ExcessOperands, EvalResult, to_postfix, evaluate_postfix, evaluate
)
from .editor import edit, render
from .config import Mode, Settings
from .engine import CalculatorEngine

__all__ = [
    'SymbolKind', 'NUMBER_SYMBOLS', 'BINARY_OPERATORS', 'UNARY_FUNCTIONS',
    'BRACKETS', 'CONTROL_SYMBOLS', 'classify', 'is_numeric', 'precedence',
    'EvalError', 'ParseUnderflow', 'InvalidFactorialOperand', 'UnknownToken',
    'ExcessOperands', 'EvalResult', 'to_postfix', 'evaluate_postfix', 'evaluate',
    'edit', 'render', 'Mode', 'Settings', 'CalculatorEngine'
]
