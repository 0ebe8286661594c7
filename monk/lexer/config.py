"""
Configuration for the Monk lexer.

Author: Prakhar Nagpal
"""

import string
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from .tokens import KEYWORDS, KEYWORD_TYPES, TokenType

_IDENTIFIER_START = frozenset(string.ascii_letters + "_")
_IDENTIFIER_CONTINUE = _IDENTIFIER_START | frozenset(string.digits)


def _is_identifier_run(spelling: str) -> bool:
    return (isinstance(spelling, str) and len(spelling) > 0
            and spelling[0] in _IDENTIFIER_START
            and all(c in _IDENTIFIER_CONTINUE for c in spelling))


@dataclass(frozen=True)
class LexerConfig:
    """
    Settings shared by every scan that uses this config.

    The keyword table is copied into a read-only mapping on construction,
    so one config can serve any number of scans.
    """
    keywords: Mapping[str, TokenType] = field(default_factory=lambda: KEYWORDS, hash=False)
    integer_bits: int = 32
    filename: str = "<unknown>"

    def __post_init__(self):
        if not isinstance(self.integer_bits, int) or isinstance(self.integer_bits, bool):
            raise TypeError(f"integer_bits must be an int, got {type(self.integer_bits).__name__}")
        if self.integer_bits < 1:
            raise ValueError(f"integer_bits must be at least 1, got {self.integer_bits}")
        for spelling, token_type in self.keywords.items():
            if not isinstance(token_type, TokenType):
                raise TypeError(f"keyword {spelling!r} maps to {token_type!r}, not a TokenType")
            if token_type not in KEYWORD_TYPES:
                raise ValueError(f"keyword {spelling!r} maps to non-keyword kind {token_type.value}")
            if not _is_identifier_run(spelling):
                raise ValueError(f"keyword {spelling!r} is not a valid identifier spelling")
        if self.keywords is not KEYWORDS:
            object.__setattr__(self, "keywords", MappingProxyType(dict(self.keywords)))

    @property
    def max_integer(self) -> int:
        """Largest value an integer literal may hold."""
        return (1 << self.integer_bits) - 1


DEFAULT_CONFIG = LexerConfig()
