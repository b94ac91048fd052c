"""
exprparse Lexer Package

Character-level extraction for arithmetic expressions. Every extractor
returns (remainder, matched) and never keeps state between calls.

Key Features:
- take_while: split input at the first rejected character
- Digit, space and single-character operator extraction
- Source location tracking for error reports

Author: xwest
"""

from .tokens import (
    SourceLocation, OPERATOR_SYMBOLS, OPERATOR_LOOKALIKES, is_ascii_digit, is_space
)
from .extract import take_while, extract_digits, extract_whitespace, extract_operator
from .errors import Diagnostic, DiagnosticError, LexerError, EmptyInputError

__all__ = [
    "take_while",
    "extract_digits",
    "extract_whitespace",
    "extract_operator",
    "is_ascii_digit",
    "is_space",
    "SourceLocation",
    "OPERATOR_SYMBOLS",
    "OPERATOR_LOOKALIKES",
    "Diagnostic",
    "DiagnosticError",
    "LexerError",
    "EmptyInputError",
]
