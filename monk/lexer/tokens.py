"""
Token definitions for the Monk lexer.

This module defines all token types supported by Monk, including:
- Punctuation and single-character operators
- One or two character comparison operators
- Literals (integers, strings) and identifiers
- Keywords

Author: Prakhar Nagpal
"""

from enum import Enum
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple, Union


class TokenType(Enum):
    """
    Enumeration of all token types in Monk.

    Member values are the names the parser knows the kinds by, so
    ``TokenType("LeftParen")`` resolves the external vocabulary.
    """

    # ========================================================================
    # Single-character tokens
    # ========================================================================
    LEFT_PAREN = "LeftParen"                # (
    RIGHT_PAREN = "RightParen"              # )
    LEFT_BRACE = "LeftBrace"                # {
    RIGHT_BRACE = "RightBrace"              # }
    COMMA = "Comma"                         # ,
    PERIOD = "Period"                       # .
    MINUS = "Minus"                         # -
    PLUS = "Plus"                           # +
    SEMICOLON = "SemiColon"                 # ;
    SLASH = "Slash"                         # /
    ASTERISK = "Asterisk"                   # *
    CARRIAGE_RETURN = "CarriageReturn"      # \r
    TAB = "Tab"                             # \t

    # ========================================================================
    # One or two character tokens
    # ========================================================================
    BANG = "Bang"                           # !
    BANG_EQUAL = "BangEqual"                # !=
    EQUAL = "Equal"                         # =
    EQUAL_EQUAL = "EqualEqual"              # ==
    GREATER_THAN = "GreaterThan"            # >
    GREATER_THAN_EQUAL = "GreaterThanEqual"  # >=
    LESS_THAN = "LessThan"                  # <
    LESS_THAN_EQUAL = "LessThanEqual"       # <=

    # ========================================================================
    # Literals
    # ========================================================================
    IDENTIFIER = "Identifier"
    STRING = "String"
    INTEGER = "Integer"

    # ========================================================================
    # Keywords
    # ========================================================================
    AND = "And"
    ELSE = "Else"
    FALSE = "False"
    FUNCTION = "Function"
    FOR = "For"
    IF = "If"
    NONE = "None"
    OR = "Or"
    PRINT = "Print"
    RETURN = "Return"
    THIS = "This"
    TRUE = "True"
    STRUCT = "Struct"
    LET = "Let"
    WHILE = "While"

    EOF = "EOF"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class IntLiteral:
    """Decoded payload of an integer literal."""
    value: int


@dataclass(frozen=True)
class StrLiteral:
    """Text payload of a string literal or keyword spelling."""
    value: str


Literal = Union[IntLiteral, StrLiteral]


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Line and column are 1-based; offset counts code points from the
    start of the source.
    """
    filename: str
    line: int
    column: int
    offset: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the Monk language.

    ``location`` marks where the token's source span starts and ``end`` is
    the exclusive offset where it stops. For string literals the span
    covers the quotes while ``lexeme`` does not.
    """
    type: TokenType
    lexeme: str
    value: Optional[Literal]
    location: SourceLocation
    end: int

    def __str__(self) -> str:
        if self.value is not None and self.value.value != self.lexeme:
            return f"{self.type.value}({self.lexeme!r} -> {self.value.value!r})"
        return f"{self.type.value}({self.lexeme!r})"

    def __repr__(self) -> str:
        return (f"Token({self.type.value}, {self.lexeme!r}, "
                f"{self.value!r}, {self.location!r})")

    @property
    def line(self) -> int:
        return self.location.line

    @property
    def span(self) -> Tuple[int, int]:
        """Source offsets ``(start, end)`` consumed by this token."""
        return (self.location.offset, self.end)

    @property
    def literal_value(self) -> Union[int, str, None]:
        """The bare int/str carried by the payload, if any."""
        return self.value.value if self.value is not None else None

    @property
    def is_literal(self) -> bool:
        """Check if this token is a literal value."""
        return self.type in (TokenType.INTEGER, TokenType.STRING)

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a keyword."""
        return self.type in KEYWORD_TYPES

    @property
    def is_identifier(self) -> bool:
        """Check if this token is an identifier."""
        return self.type == TokenType.IDENTIFIER


# Reserved words, matched case-sensitively against a complete identifier run.
# Read-only so one table can be shared by every scan.
KEYWORDS: Mapping[str, TokenType] = MappingProxyType({
    "and": TokenType.AND,
    "struct": TokenType.STRUCT,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "for": TokenType.FOR,
    "fn": TokenType.FUNCTION,
    "if": TokenType.IF,
    "none": TokenType.NONE,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "let": TokenType.LET,
    "while": TokenType.WHILE,
})

KEYWORD_TYPES = frozenset(KEYWORDS.values())

SINGLE_CHAR_TOKENS: Mapping[str, TokenType] = MappingProxyType({
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.PERIOD,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.ASTERISK,
    "\r": TokenType.CARRIAGE_RETURN,
    "\t": TokenType.TAB,
})

# Operators that become a two-character token when followed by '='.
# Maps the first character to (single kind, combined kind).
EQUAL_SUFFIXED_TOKENS: Mapping[str, Tuple[TokenType, TokenType]] = MappingProxyType({
    "!": (TokenType.BANG, TokenType.BANG_EQUAL),
    "=": (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
    "<": (TokenType.LESS_THAN, TokenType.LESS_THAN_EQUAL),
    ">": (TokenType.GREATER_THAN, TokenType.GREATER_THAN_EQUAL),
})

QUOTE_CHARS = frozenset({'"', "'"})
