"""
Monk Language Package

Front end for Monk, a small interpreted programming language.

Architecture:
    monk/
    └── lexer/           # Tokenization and lexical analysis

Author: Prakhar Nagpal
License: MIT
"""

__version__ = "0.1.0"
__author__ = "Prakhar Nagpal"
__license__ = "MIT"

from .lexer import Lexer, scan

__all__ = [
    # Core entry points
    "Lexer",
    "scan",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
