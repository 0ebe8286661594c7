"""
Error handling for the Monk lexer.

Lexical problems are collected as diagnostics while the scan keeps going;
nothing here interrupts a scan. Callers that want a diagnostic to be fatal
wrap it in a LexerError and raise it themselves.

Author: Prakhar Nagpal
"""

from enum import Enum
from typing import Optional, List
from dataclasses import dataclass

from .tokens import SourceLocation


class DiagnosticKind(Enum):
    """Categories of lexical problems, valued by their diagnostic code."""
    UNEXPECTED_CHARACTER = "L001"
    UNTERMINATED_LITERAL = "L002"
    NUMERIC_OVERFLOW = "L007"


# Common error codes for categorization
ERROR_CODES = {
    "L001": "Unexpected character",
    "L002": "Unterminated string literal",
    "L007": "Number literal overflow",
}


@dataclass
class Diagnostic:
    """A lexer diagnostic attached to the source location it concerns."""
    kind: DiagnosticKind
    message: str
    location: SourceLocation
    severity: str = "error"
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    @property
    def code(self) -> str:
        return self.kind.value

    @property
    def line(self) -> int:
        return self.location.line

    @property
    def column(self) -> int:
        return self.location.column

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        result = f"{severity_prefix}[{self.code}]: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result

    def render(self, source: str) -> str:
        """
        Render the diagnostic with the offending source line and a caret.

        Args:
            source: The full source text the diagnostic was produced from

        Returns:
            Multi-line report, e.g.::

                Error[L001]:
                   1 | let x = @
                               ^--- Unexpected character '@'
        """
        lines = source.split("\n")
        index = self.location.line - 1
        error_source = lines[index] if 0 <= index < len(lines) else ""
        gutter = f"   {self.location.line} | "
        pointer = " " * (len(gutter) + self.location.column - 1) + "^---"

        result = f"{self.severity.capitalize()}[{self.code}]:\n"
        result += f"{gutter}{error_source}\n"
        result += f"{pointer} {self.message}\n"
        if self.help_text:
            result += f"  help: {self.help_text}\n"
        return result


class LexerError(Exception):
    """
    Exception carrying a lexer diagnostic.

    The lexer never raises this during a scan; it is for callers that
    treat a diagnostic as fatal.
    """

    def __init__(self, diagnostic: Diagnostic):
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    def __str__(self) -> str:
        return str(self.diagnostic)


class ErrorRecovery:
    """
    Suggestions attached to diagnostics so the report points at a fix.
    """

    # Operators people bring from other languages that Monk spells differently.
    OPERATOR_ALTERNATIVES = {
        '&': ['and'],
        '|': ['or'],
        '#': ['//'],
        '`': ['"', "'"],
    }

    @staticmethod
    def suggest_operator_alternatives(char: str) -> List[str]:
        """Suggest Monk spellings for an operator Monk doesn't have."""
        return ErrorRecovery.OPERATOR_ALTERNATIVES.get(char, [])


def _describe_character(char: str) -> str:
    if char.isprintable():
        return f"'{char}'"
    return f"U+{ord(char):04X}"


def create_unexpected_character_error(char: str, location: SourceLocation) -> Diagnostic:
    """Create a diagnostic for a character no scanning rule accepts."""
    suggestions = ErrorRecovery.suggest_operator_alternatives(char)
    if char == '#':
        help_text = "Comments start with '//'."
    elif suggestions:
        help_text = f"Did you mean {' or '.join(repr(s) for s in suggestions)}?"
    elif char.isprintable() and ord(char) < 128:
        help_text = f"The character '{char}' is not valid in Monk source code."
    elif char.isprintable():
        help_text = "Only ASCII letters, digits and underscores may appear in names."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return Diagnostic(
        kind=DiagnosticKind.UNEXPECTED_CHARACTER,
        message=f"Unexpected character {_describe_character(char)}",
        location=location,
        help_text=help_text,
        suggestions=suggestions or None,
    )


def create_unterminated_string_error(quote_type: str, location: SourceLocation) -> Diagnostic:
    """Create a diagnostic for a string literal that never closes."""
    return Diagnostic(
        kind=DiagnosticKind.UNTERMINATED_LITERAL,
        message="Unterminated string",
        location=location,
        help_text=f"String literals must be closed with a matching {quote_type} quote.",
        suggestions=[f"Add a closing {quote_type} quote"],
    )


def create_numeric_overflow_error(lexeme: str, max_value: int, location: SourceLocation) -> Diagnostic:
    """Create a diagnostic for an integer literal too large for the target width."""
    return Diagnostic(
        kind=DiagnosticKind.NUMERIC_OVERFLOW,
        message=f"Integer literal {lexeme} is too large",
        location=location,
        help_text=f"Integer literals must not exceed {max_value}.",
    )
