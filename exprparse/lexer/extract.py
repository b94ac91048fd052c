"""
Extraction primitives for the exprparse lexer.

Each extractor takes the input text and returns a (remainder, matched)
pair. Nothing is mutated and no cursor is kept between calls, so
callers can chain extractors by feeding each remainder into the next.

Author: xwest
"""

from typing import Callable, Tuple

from .tokens import is_ascii_digit, is_space
from .errors import create_empty_input_error


def take_while(accept: Callable[[str], bool], source: str) -> Tuple[str, str]:
    """
    Split source at the first character that accept rejects.

    Args:
        accept: Character predicate
        source: Input text (may be empty)

    Returns:
        (remainder, matched) where matched is the longest prefix whose
        characters all satisfy accept. Both may be empty.
    """
    end_of_match = next(
        (index for index, char in enumerate(source) if not accept(char)),
        len(source)
    )
    return source[end_of_match:], source[:end_of_match]


def extract_digits(source: str) -> Tuple[str, str]:
    """Take a leading run of ASCII digits. The run may be empty."""
    return take_while(is_ascii_digit, source)


def extract_whitespace(source: str) -> Tuple[str, str]:
    """Take a leading run of spaces. The run may be empty."""
    return take_while(is_space, source)


def extract_operator(source: str) -> Tuple[str, str]:
    """
    Take the first character as an operator token.

    No check is made that the character is actually an operator; that
    is left to the parser.

    Raises:
        EmptyInputError: If source is empty
    """
    if not source:
        raise create_empty_input_error("an operator")
    return source[1:], source[0]
