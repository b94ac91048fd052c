"""
exprparse Parser Implementation

Combines the lexer's extractors into parsers for numbers, operators and
whole expressions. Every parse function takes the input text and returns
(remainder, node); the first failing step raises and nothing partial is
returned.

Author: xwest
"""

import logging
from typing import List, Optional, Tuple

from ..config import ParserConfig, DEFAULT_INT_BITS
from ..lexer.extract import extract_digits, extract_whitespace, extract_operator
from ..lexer.errors import DiagnosticError
from ..lexer.tokens import SourceLocation
from .ast_nodes import Number, Op, Expr
from .errors import (
    ParseWarning, create_missing_digits_error, create_number_overflow_error,
    create_trailing_input_error
)

logger = logging.getLogger(__name__)


def parse_number(source: str, int_bits: Optional[int] = DEFAULT_INT_BITS) -> Tuple[str, Number]:
    """
    Parse a leading run of digits into a Number.

    Spaces after the digits are left in the remainder.

    Args:
        source: Input text
        int_bits: Signed integer width to check against, None for unbounded

    Raises:
        NumberParseError: If there are no digits or the value overflows
        ValueError: If int_bits is below 2
    """
    if int_bits is not None and int_bits < 2:
        raise ValueError(f"int_bits must be at least 2, got {int_bits}")

    remainder, digits = extract_digits(source)
    if not digits:
        raise create_missing_digits_error(source)

    significant = digits.lstrip('0') or '0'

    # 2**(n-1) has floor((n-1) * log10(2)) + 1 digits; 30103/100000 rounds log10(2) up
    if int_bits is not None and len(significant) > (int_bits - 1) * 30103 // 100000 + 1:
        raise create_number_overflow_error(digits, source, int_bits)

    try:
        value = int(significant)
    except ValueError:
        # interpreter's int max str digits limit
        raise create_number_overflow_error(digits, source, int_bits) from None

    if int_bits is not None and value.bit_length() > int_bits - 1:
        raise create_number_overflow_error(digits, source, int_bits)

    return remainder, Number(value)


def parse_operator(source: str) -> Tuple[str, Op]:
    """
    Parse exactly one operator character.

    Raises:
        EmptyInputError: If source is empty
        UnrecognizedSymbolError: If the character isn't + - * or /
    """
    remainder, symbol = extract_operator(source)
    return remainder, Op.from_symbol(symbol, source)


def parse_expr(source: str, int_bits: Optional[int] = DEFAULT_INT_BITS) -> Tuple[str, Expr]:
    """
    Parse <number> <operator> <number> with optional spaces between tokens.

    Spaces after the right operand are consumed too. Anything left after
    that is returned as the remainder rather than rejected. Leading spaces
    before the first number are not skipped.
    """
    s, lhs = parse_number(source, int_bits)
    s, _ = extract_whitespace(s)

    s, operator = parse_operator(s)
    s, _ = extract_whitespace(s)

    s, rhs = parse_number(s, int_bits)
    s, _ = extract_whitespace(s)

    return s, Expr(lhs, operator, rhs)


class Parser:
    """
    exprparse parser facade.

    Wraps parse_expr with configuration, error locations and a check
    that the whole input was used.
    """

    def __init__(self, config: Optional[ParserConfig] = None):
        """
        Initialize the parser.

        Args:
            config: Parser configuration, defaults to ParserConfig()
        """
        self.config = config or ParserConfig()
        self.warnings: List[ParseWarning] = []

    def parse_with_remainder(self, source: str, filename: Optional[str] = None) -> Tuple[str, Expr]:
        """
        Parse an expression and return it with whatever input is left.

        Errors are re-raised with their location filled in.
        """
        filename = filename or self.config.filename
        self.warnings = []

        try:
            return parse_expr(source, self.config.int_bits)
        except DiagnosticError as e:
            e.locate(source, filename)
            logger.debug("Failed to parse %r: %s", source, e.diagnostic.message)
            raise

    def parse(self, source: str, filename: Optional[str] = None) -> Expr:
        """
        Parse an expression that should take up the whole input.

        Trailing input raises TrailingInputError when the config requires
        a complete parse, otherwise it is recorded in self.warnings.
        """
        filename = filename or self.config.filename
        remainder, expr = self.parse_with_remainder(source, filename)

        if remainder:
            if self.config.require_complete:
                raise create_trailing_input_error(remainder).locate(source, filename)

            location = SourceLocation.from_offset(source, len(source) - len(remainder), filename)
            warning = ParseWarning(
                message=f"Ignoring trailing input: {remainder!r}",
                location=location,
                code="P004",
                help_text="Only the first expression was parsed."
            )
            self.warnings.append(warning)
            logger.warning("%s: ignoring trailing input %r", location, remainder)

        logger.debug("Parsed %r as %s", source, expr)
        return expr


def parse(source: str, config: Optional[ParserConfig] = None) -> Expr:
    """Parse a complete expression with a throwaway Parser."""
    return Parser(config).parse(source)
