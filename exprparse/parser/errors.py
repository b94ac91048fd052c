"""
Error handling for the exprparse parser.

Provides error reporting for malformed numbers and operators, plus
the warning recorded when an expression doesn't consume all its input.

Author: xwest
"""

from typing import Optional, List

from ..lexer.tokens import SourceLocation, OPERATOR_SYMBOLS, OPERATOR_LOOKALIKES
from ..lexer.errors import Diagnostic, DiagnosticError


class ParseError(DiagnosticError):
    """
    Exception raised when a parse step rejects its input.

    Contains detailed diagnostic information for error reporting.
    """


class NumberParseError(ParseError):
    """A digit run was empty or didn't fit the integer width."""


class UnrecognizedSymbolError(ParseError):
    """The operator position held a character that isn't + - * or /."""

    def __init__(self, message: str, remaining: str, symbol: str, **kwargs):
        super().__init__(message, remaining, **kwargs)
        self.symbol = symbol


class TrailingInputError(ParseError):
    """Input was left over after a complete expression (strict mode)."""


class ParseWarning:
    """
    Represents a parser warning that doesn't stop parsing.
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation],
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="warning",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


def suggest_operator_corrections(symbol: str) -> List[str]:
    """Suggest the ASCII operator a character was probably meant to be."""
    if symbol in OPERATOR_LOOKALIKES:
        return [f"Use '{OPERATOR_LOOKALIKES[symbol]}' instead of '{symbol}'"]
    return [f"Use one of: {' '.join(sorted(OPERATOR_SYMBOLS))}"]


# Common parser error codes for categorization
PARSER_ERROR_CODES = {
    "P001": "Expected digits",
    "P002": "Number literal overflow",
    "P003": "Unrecognized operator",
    "P004": "Unexpected trailing input",
}


# Helper functions for creating common parser errors

def create_missing_digits_error(remaining: str) -> NumberParseError:
    """Create an error for a number position without any digits."""
    if remaining:
        found = f"found '{remaining[0]}'"
        help_text = "Numbers must start with a digit 0-9. Leading spaces and signs are not allowed."
    else:
        found = "found end of input"
        help_text = "The input ended where a number was expected."

    return NumberParseError(
        message=f"Expected digits, {found}",
        remaining=remaining,
        code="P001",
        help_text=help_text,
        suggestions=["Write the operand as a plain decimal number, e.g. 42"]
    )


def create_number_overflow_error(digits: str, remaining: str,
                                 int_bits: Optional[int]) -> NumberParseError:
    """Create an error for a digit run too large for the integer width."""
    shown = digits if len(digits) <= 20 else digits[:17] + "..."
    if int_bits is not None and int_bits <= 128:
        limit = 2 ** (int_bits - 1) - 1
        help_text = f"Numbers must fit in a signed {int_bits}-bit integer (at most {limit})."
    elif int_bits is not None:
        # the limit itself may be too long to print
        help_text = f"Numbers must fit in a signed {int_bits}-bit integer (at most 2**{int_bits - 1} - 1)."
    else:
        help_text = f"A {len(digits)}-digit number is longer than Python will convert."

    return NumberParseError(
        message=f"Number literal overflow: {shown}",
        remaining=remaining,
        code="P002",
        help_text=help_text,
        suggestions=["Use a smaller operand", "Raise int_bits in ParserConfig"]
    )


def create_unrecognized_symbol_error(symbol: str, remaining: str) -> UnrecognizedSymbolError:
    """Create an error for a character in operator position that isn't an operator."""
    if symbol.isprintable():
        shown = f"'{symbol}'"
    else:
        shown = f"U+{ord(symbol):04X}"

    return UnrecognizedSymbolError(
        message=f"Unrecognized operator {shown}",
        remaining=remaining,
        symbol=symbol,
        code="P003",
        help_text="Expressions support exactly one of the operators + - * /.",
        suggestions=suggest_operator_corrections(symbol)
    )


def create_trailing_input_error(trailing: str) -> TrailingInputError:
    """Create an error for input left over after a complete expression."""
    return TrailingInputError(
        message=f"Unexpected trailing input: {trailing!r}",
        remaining=trailing,
        code="P004",
        help_text="An expression is exactly <number> <operator> <number>; nothing may follow it.",
        suggestions=["Remove the extra characters", "Split chained operations into separate expressions"]
    )
