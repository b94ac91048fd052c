"""
exprparse Parser Package

Parses <number> <operator> <number> expressions into immutable nodes.

Key Features:
- Composable parse functions returning (remainder, node)
- Recoverable errors for bad numbers and unknown operators
- Parser facade with error locations and trailing-input checks

Author: xwest
"""

from .ast_nodes import Number, Op, Expr
from .parser import Parser, parse, parse_number, parse_operator, parse_expr
from .errors import (
    ParseError, ParseWarning, NumberParseError, UnrecognizedSymbolError, TrailingInputError
)

__all__ = [
    # Core parser
    "Parser",
    "parse",
    "parse_number",
    "parse_operator",
    "parse_expr",

    # Nodes
    "Number", "Op", "Expr",

    # Error handling
    "ParseError", "ParseWarning", "NumberParseError",
    "UnrecognizedSymbolError", "TrailingInputError",
]
