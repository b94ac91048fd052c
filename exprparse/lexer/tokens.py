"""
Character classes and source locations for the exprparse lexer.

This module defines the small vocabulary the extractors work with:
- Source locations for error reporting
- The recognized operator symbols (and common Unicode lookalikes)
- Character predicates for digits and spaces

Author: xwest
"""

from dataclasses import dataclass
from typing import Dict, FrozenSet


# Only these four characters are operators
OPERATOR_SYMBOLS: FrozenSet[str] = frozenset({'+', '-', '*', '/'})

# Characters people paste from documents instead of the ASCII operator.
# Used for suggestions in error messages, never accepted by the parser.
OPERATOR_LOOKALIKES: Dict[str, str] = {
    '×': '*',   # multiplication sign
    '⋅': '*',   # dot operator
    '·': '*',   # middle dot
    '∗': '*',   # asterisk operator
    '÷': '/',   # division sign
    '∕': '/',   # division slash
    '⁄': '/',   # fraction slash
    '−': '-',   # minus sign
    '–': '-',   # en dash
    '—': '-',   # em dash
    '＋': '+',   # fullwidth plus
    '⊕': '+',
    '⊖': '-',
}


def is_ascii_digit(char: str) -> bool:
    """Check if a character is one of 0-9 (Unicode digits don't count)."""
    return len(char) == 1 and '0' <= char <= '9'


def is_space(char: str) -> bool:
    """Check if a character is a literal space. Tabs and newlines are not."""
    return char == ' '


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source text.

    Used for error reporting. Lines and columns are 1-based, offset is
    the 0-based character index into the source.
    """
    filename: str
    line: int
    column: int
    offset: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"

    @classmethod
    def from_offset(cls, source: str, offset: int, filename: str = "<input>") -> "SourceLocation":
        """Compute line and column for a character offset into source."""
        offset = max(0, min(offset, len(source)))
        consumed = source[:offset]
        line = consumed.count('\n') + 1
        last_newline = consumed.rfind('\n')
        column = offset - last_newline  # rfind gives -1 when on the first line
        return cls(filename, line, column, offset)
