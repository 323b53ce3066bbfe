"""
octasm - Assembler Front End for a 12-bit Octal Machine
=======================================================

This package provides the lexical front end of an assembly toolchain for
a machine whose immediates are 9-bit or 12-bit words written in octal.

Main Components
---------------
- **assembler.lexer**: Tokenizer with lookahead and backtracking
    Converts assembly source into positioned tokens for a parser

- **words**: U9 and U12 range-checked machine words

- **errors**: Exception hierarchy and batch error collection

- **cli**: Command-line tools (octlex)

Quick Start
-----------
Tokenize a line of source:
    >>> from octasm import Lexer
    >>> lexer = Lexer("loop: ISZ count", "boot.s")
    >>> [token.value for token in lexer]
    ['loop', None, 'ISZ', 'count']

Or dump the tokens of a file:
    $ octlex boot.s
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from octasm.assembler import Lexer, LexerState, Token, TokenType
from octasm.errors import (
    OctasmError,
    SourceLocation,
    AssemblerError,
    AssemblySyntaxError,
    TooManyErrors,
    WordRangeError,
    ErrorCollector,
)
from octasm.words import Word, U9, U12

__all__ = [
    # Version info
    "__version__",
    # Lexer
    "Lexer",
    "LexerState",
    "Token",
    "TokenType",
    # Exception hierarchy
    "OctasmError",
    "SourceLocation",
    "AssemblerError",
    "AssemblySyntaxError",
    "TooManyErrors",
    "WordRangeError",
    "ErrorCollector",
    # Words
    "Word",
    "U9",
    "U12",
]
