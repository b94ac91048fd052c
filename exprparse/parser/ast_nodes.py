"""
Syntax tree node definitions for exprparse.

All nodes are immutable values: two nodes are equal when their fields
are equal, and nothing refers back to the text they came from.

Author: xwest
"""

from dataclasses import dataclass
from enum import Enum

from .errors import create_unrecognized_symbol_error


@dataclass(frozen=True)
class Number:
    """A non-empty run of ASCII digits, converted to an integer."""
    value: int

    def __str__(self) -> str:
        return str(self.value)


class Op(Enum):
    """The four binary arithmetic operators, keyed by their symbol."""
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    @property
    def symbol(self) -> str:
        return self.value

    @classmethod
    def from_symbol(cls, symbol: str, remaining: str = "") -> "Op":
        """
        Map an operator character to its member.

        Args:
            symbol: Single operator character
            remaining: Input text starting at symbol, for error locations

        Raises:
            UnrecognizedSymbolError: If symbol isn't one of + - * /
        """
        try:
            return cls(symbol)
        except ValueError:
            raise create_unrecognized_symbol_error(symbol, remaining or symbol) from None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Expr:
    """A single binary operation: lhs operator rhs."""
    lhs: Number
    operator: Op
    rhs: Number

    def __str__(self) -> str:
        return f"{self.lhs} {self.operator} {self.rhs}"
