"""
Error handling for the exprparse lexer.

Provides the diagnostic record shared by every error in the package and
the errors raised by the extraction primitives.

Author: xwest
"""

from typing import Optional, List
from dataclasses import dataclass

from .tokens import SourceLocation


@dataclass
class Diagnostic:
    """Base record for diagnostics (errors, warnings)."""
    message: str
    location: Optional[SourceLocation]
    severity: str  # "error" or "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        if self.code:
            severity_prefix += f"[{self.code}]"
        result = f"{severity_prefix}: {self.message}\n"

        if self.location is not None:
            result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class DiagnosticError(Exception):
    """
    Base class for every error raised while extracting or parsing.

    Besides the diagnostic, keeps the input text that was left when the
    failing step started. The extractors only ever see the remainder, so
    the location is filled in later by whoever holds the full source.
    """

    def __init__(
        self,
        message: str,
        remaining: str,
        location: Optional[SourceLocation] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.remaining = remaining
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    @property
    def location(self) -> Optional[SourceLocation]:
        return self.diagnostic.location

    def locate(self, source: str, filename: str = "<input>") -> "DiagnosticError":
        """Attach a location, assuming remaining is a suffix of source."""
        offset = len(source) - len(self.remaining)
        self.diagnostic.location = SourceLocation.from_offset(source, offset, filename)
        return self

    def __str__(self) -> str:
        return str(self.diagnostic)


class LexerError(DiagnosticError):
    """Raised when an extraction cannot take the characters it needs."""


class EmptyInputError(LexerError):
    """Raised when an extraction needing at least one character gets none."""


# Common error codes for categorization
ERROR_CODES = {
    "L001": "Unexpected end of input",
}


def create_empty_input_error(expected: str) -> EmptyInputError:
    """Create an error for running out of input while expecting something."""
    return EmptyInputError(
        message=f"Unexpected end of input, expected {expected}",
        remaining="",
        code="L001",
        help_text=f"The input ended where {expected} was expected.",
        suggestions=[f"Add the missing {expected}"]
    )
