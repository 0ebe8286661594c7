"""
Monk Lexer Package

Implements the lexical analyzer (tokenizer) for the Monk language: raw
source text in, a flat list of classified tokens out.

Key Features:
- Single forward pass with at most two characters of lookahead
- Integer, string, identifier and keyword recognition against a shared,
  read-only keyword table
- Non-fatal diagnostics: one scan reports every malformed character or
  literal and still returns the valid tokens
- Source location tracking for error reports

Author: Prakhar Nagpal
"""

from .tokens import (
    Token, TokenType, SourceLocation, IntLiteral, StrLiteral, Literal, KEYWORDS
)
from .config import LexerConfig, DEFAULT_CONFIG
from .lexer import Lexer, ScanResult, scan, tokenize_string, tokenize_file
from .errors import Diagnostic, DiagnosticKind, LexerError

__all__ = [
    "Lexer",
    "ScanResult",
    "scan",
    "tokenize_string",
    "tokenize_file",
    "Token",
    "TokenType",
    "SourceLocation",
    "IntLiteral",
    "StrLiteral",
    "Literal",
    "KEYWORDS",
    "LexerConfig",
    "DEFAULT_CONFIG",
    "Diagnostic",
    "DiagnosticKind",
    "LexerError",
]
