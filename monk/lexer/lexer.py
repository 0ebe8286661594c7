"""
Monk Lexer - turns source text into tokens

Single forward pass over the source with one character of lookahead
(two for '//' and the '=' suffixed operators). Malformed input is recorded
as a diagnostic and the scan carries on from the next character, so a
single call reports every problem it finds.

Prakhar Nagpal
"""

import logging
import string
from typing import List, NamedTuple, Optional

from .config import DEFAULT_CONFIG, LexerConfig
from .tokens import (
    Token, TokenType, SourceLocation, IntLiteral, StrLiteral, Literal,
    SINGLE_CHAR_TOKENS, EQUAL_SUFFIXED_TOKENS, QUOTE_CHARS
)
from .errors import (
    Diagnostic, LexerError, create_unexpected_character_error,
    create_unterminated_string_error, create_numeric_overflow_error
)

logger = logging.getLogger(__name__)

DIGITS = frozenset(string.digits)
IDENTIFIER_START = frozenset(string.ascii_letters + "_")
IDENTIFIER_CONTINUE = IDENTIFIER_START | DIGITS


class ScanResult(NamedTuple):
    """Tokens and diagnostics produced by one scan."""
    tokens: List[Token]
    diagnostics: List[Diagnostic]

    @property
    def has_errors(self) -> bool:
        return len(self.diagnostics) > 0


class Lexer:
    """
    Monk lexical analyzer.

    Owns the source, the scan cursor and the output of one scan. Each
    call to tokenize() starts over from the beginning of the source.
    """

    def __init__(self, source: str, filename: Optional[str] = None,
                 config: Optional[LexerConfig] = None):
        """
        Initialize the lexer with source code.

        Args:
            source: Complete source text
            filename: Name of source file for error reporting
            config: Keyword table and integer width; defaults to DEFAULT_CONFIG
        """
        if not isinstance(source, str):
            raise TypeError(f"source must be str, got {type(source).__name__}")

        self.source = source
        self.config = config or DEFAULT_CONFIG
        self.filename = filename if filename is not None else self.config.filename
        self.keywords = self.config.keywords
        self.max_integer = self.config.max_integer

        self.pos = 0
        self.start_pos = 0
        self.line = 1
        self.start_line = 1
        # column offset within the current line, only used for diagnostics
        self.col_offset = 0
        self.start_col_offset = 0
        self.tokens: List[Token] = []
        self.errors: List[Diagnostic] = []

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source code.

        Returns:
            List of tokens ending with a single EOF token
        """
        self.pos = 0
        self.line = 1
        self.col_offset = 0
        self.tokens = []
        self.errors = []

        while not self._is_at_end():
            self.start_pos = self.pos
            self.start_line = self.line
            self.start_col_offset = self.col_offset
            self._scan_token()

        self.start_pos = self.pos
        self.start_line = self.line
        self.start_col_offset = self.col_offset
        self.tokens.append(Token(TokenType.EOF, "", None, self._start_location(), self.pos))

        logger.debug(
            "Scanned %s: %d tokens, %d diagnostics",
            self.filename, len(self.tokens), len(self.errors)
        )
        return self.tokens

    def scan(self) -> ScanResult:
        """Tokenize and return the tokens together with the diagnostics."""
        tokens = self.tokenize()
        return ScanResult(tokens, list(self.errors))

    def _scan_token(self):
        """Consume one lexical element starting at start_pos."""
        c = self._advance()

        if c in SINGLE_CHAR_TOKENS:
            self._add_token(SINGLE_CHAR_TOKENS[c])
        elif c in EQUAL_SUFFIXED_TOKENS:
            single, combined = EQUAL_SUFFIXED_TOKENS[c]
            self._add_token(combined if self._match('=') else single)
        elif c == '/':
            if self._match('/'):
                self._skip_line_comment()
            else:
                self._add_token(TokenType.SLASH)
        elif c in QUOTE_CHARS:
            self._scan_string(c)
        elif c == ' ' or c == '\n':
            pass
        elif c in DIGITS:
            self._scan_integer()
        elif c in IDENTIFIER_START:
            self._scan_identifier_or_keyword()
        else:
            self._report(create_unexpected_character_error(c, self._start_location()))

    def _skip_line_comment(self):
        """Skip to the end of the line, leaving the newline unconsumed."""
        while not self._is_at_end() and self._peek() != '\n':
            self._advance()

    def _scan_string(self, quote: str):
        """
        Scan a string literal opened by ``quote``.

        Only the same quote character closes the literal. Newlines are
        allowed inside and no escape sequences are recognised.
        """
        while not self._is_at_end() and self._peek() != quote:
            self._advance()

        if self._is_at_end():
            self._report(create_unterminated_string_error(quote, self._start_location()))
            return

        contents = self.source[self.start_pos + 1:self.pos]
        self._advance()  # closing quote
        self._add_token(TokenType.STRING, StrLiteral(contents), lexeme=contents)

    def _scan_integer(self):
        """Scan a run of ASCII digits as an unsigned integer."""
        while not self._is_at_end() and self._peek() in DIGITS:
            self._advance()

        lexeme = self.source[self.start_pos:self.pos]
        # compare digit counts first so huge runs never reach int()
        significant = lexeme.lstrip('0') or '0'
        if len(significant) > len(str(self.max_integer)) or int(significant) > self.max_integer:
            self._report(create_numeric_overflow_error(lexeme, self.max_integer, self._start_location()))
            return

        self._add_token(TokenType.INTEGER, IntLiteral(int(significant)))

    def _scan_identifier_or_keyword(self):
        """Scan a maximal identifier run, then classify it against the keyword table."""
        while not self._is_at_end() and self._peek() in IDENTIFIER_CONTINUE:
            self._advance()

        lexeme = self.source[self.start_pos:self.pos]
        token_type = self.keywords.get(lexeme)
        if token_type is None:
            self._add_token(TokenType.IDENTIFIER)
        else:
            self._add_token(token_type, StrLiteral(lexeme))

    def _add_token(self, token_type: TokenType, value: Optional[Literal] = None,
                   lexeme: Optional[str] = None):
        if lexeme is None:
            lexeme = self.source[self.start_pos:self.pos]
        self.tokens.append(Token(token_type, lexeme, value, self._start_location(), self.pos))

    def _report(self, diagnostic: Diagnostic):
        logger.debug("%s: %s", diagnostic.location, diagnostic.message)
        self.errors.append(diagnostic)

    def _start_location(self) -> SourceLocation:
        return SourceLocation(self.filename, self.start_line, self.start_col_offset + 1, self.start_pos)

    def _is_at_end(self) -> bool:
        return self.pos >= len(self.source)

    def _advance(self) -> str:
        """Consume one character, updating line/column."""
        char = self.source[self.pos]
        self.pos += 1
        if char == '\n':
            self.line += 1
            self.col_offset = 0
        else:
            self.col_offset += 1
        return char

    def _match(self, expected: str) -> bool:
        """Consume the next character only if it is ``expected``."""
        if self._is_at_end() or self.source[self.pos] != expected:
            return False
        self._advance()
        return True

    def _peek(self) -> str:
        """Peek at the next character without advancing."""
        if self._is_at_end():
            return '\0'
        return self.source[self.pos]

    def has_errors(self) -> bool:
        """Check if lexer encountered any errors."""
        return len(self.errors) > 0

    def get_diagnostics(self) -> List[Diagnostic]:
        """Get all diagnostics from the last scan."""
        return list(self.errors)


def scan(source: str, filename: str = "<string>",
         config: Optional[LexerConfig] = None) -> ScanResult:
    """
    Scan a complete source string.

    Args:
        source: Source text, possibly empty
        filename: Filename for diagnostics
        config: Optional lexer settings

    Returns:
        ScanResult of (tokens, diagnostics)
    """
    return Lexer(source, filename, config).scan()


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        List of tokens

    Raises:
        LexerError: If the scan produced any diagnostic
    """
    lexer = Lexer(source, filename)
    tokens = lexer.tokenize()

    if lexer.has_errors():
        # Raise the first error encountered
        raise LexerError(lexer.errors[0])

    return tokens


def tokenize_file(filepath: str) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Args:
        filepath: Path to source file

    Returns:
        List of tokens

    Raises:
        LexerError: If the scan produced any diagnostic
        IOError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8', newline='') as f:
        source = f.read()

    return tokenize_string(source, filepath)
