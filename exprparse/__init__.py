"""
exprparse Package

Parses single binary arithmetic expressions such as "10 + 20" into a
left operand, an operator and a right operand.

Architecture:
    exprparse/
    ├── lexer/           # Character extraction and source locations
    ├── parser/          # Number/Op/Expr nodes and parse functions
    ├── config.py        # ParserConfig
    └── logging_utils.py # Optional log handler setup

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__email__ = "dev@neuralscript.org"
__license__ = "MIT"

from .lexer import (
    take_while, extract_digits, extract_whitespace, extract_operator,
    SourceLocation, Diagnostic, DiagnosticError, LexerError, EmptyInputError
)
from .parser import (
    Parser, parse, parse_number, parse_operator, parse_expr,
    Number, Op, Expr,
    ParseError, ParseWarning, NumberParseError, UnrecognizedSymbolError, TrailingInputError
)
from .config import ParserConfig
from .logging_utils import setup_logging

__all__ = [
    # Extraction
    "take_while",
    "extract_digits",
    "extract_whitespace",
    "extract_operator",

    # Parsing
    "Parser",
    "parse",
    "parse_number",
    "parse_operator",
    "parse_expr",
    "Number",
    "Op",
    "Expr",
    "ParserConfig",
    "setup_logging",

    # Errors
    "SourceLocation",
    "Diagnostic",
    "DiagnosticError",
    "LexerError",
    "EmptyInputError",
    "ParseError",
    "ParseWarning",
    "NumberParseError",
    "UnrecognizedSymbolError",
    "TrailingInputError",

    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__license__",
]
