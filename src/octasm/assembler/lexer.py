"""
Octal Assembly Language Lexer
=============================

This module implements the lexer (tokenizer) for octasm assembly source.
It converts source text into a lazy stream of tokens for the parser,
with lookahead (peek) and checkpointing (save/recall) for backtracking.

Token Types
-----------
- SYMBOL: Labels, opcodes, pragmas; any identifier is a symbol
- NINE_BIT_LITERAL / TWELVE_BIT_LITERAL: Octal numbers (777, 7777)
- STRING: Double-quoted strings ("hello"), no escape sequences
- Delimiters: ( ) : , < > .
- NEWLINE: End of line (significant for statement boundaries)
- ERROR: Lexical error, carries a message

Octal Literals
--------------
Every number is octal and takes the narrowest width that holds it:

| Digits      | Value     | Token              |
|-------------|-----------|--------------------|
| 0 .. 777    | 0..511    | NINE_BIT_LITERAL   |
| 1000 .. 7777| 512..4095 | TWELVE_BIT_LITERAL |
| 10000 ..    | > 4095    | ERROR              |

Comments
--------
A semicolon starts a comment running to the end of the line. The newline
that ends a comment is swallowed; a newline anywhere else is a NEWLINE
token.

Errors
------
The lexer never raises on bad input. Invalid characters, oversized
literals and unterminated strings come back as ERROR tokens, and the
cursor always moves past the offending text so scanning can continue.

Example
-------
>>> from octasm.assembler.lexer import Lexer
>>> lexer = Lexer("start: TAD 1234 ; add", "example.s")
>>> for token in lexer:
...     print(token)
Token(SYMBOL, 'start', 1:0)
Token(COLON, 1:5)
Token(SYMBOL, 'TAD', 1:7)
Token(TWELVE_BIT_LITERAL, U12(0o1234), 1:11)
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator, Optional
import logging
import string

from octasm.errors import AssemblySyntaxError, SourceLocation
from octasm.words import U9, U12


logger = logging.getLogger(__name__)


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """Token types for octasm assembly language."""

    ERROR = auto()               # Lexical error (message in value)

    # Delimiters
    LPAREN = auto()              # (
    RPAREN = auto()              # )
    COLON = auto()               # :
    COMMA = auto()               # ,
    NEWLINE = auto()             # End of line
    LT = auto()                  # <
    GT = auto()                  # >
    DOT = auto()                 # .

    # Values
    SYMBOL = auto()              # Labels, opcodes, pragmas
    NINE_BIT_LITERAL = auto()    # Octal value < 0o1000
    TWELVE_BIT_LITERAL = auto()  # Octal value < 0o10000
    STRING = auto()              # Double-quoted "..."


# =============================================================================
# Token and Cursor Data Classes
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    Represents a single token from the source code.

    Position fields record where the token begins, after any leading
    whitespace and comments were skipped.

    Attributes:
        type: The TokenType classification
        value: Payload; str for SYMBOL, STRING and ERROR, U9/U12 for
            literals, None for delimiters and NEWLINE
        offset: Index of the first character in the source text
        line: Line number (1-indexed)
        column: Column number (0-indexed)
        filename: Name of the source the token came from
    """
    type: TokenType
    value: str | U9 | U12 | None
    offset: int
    line: int
    column: int
    filename: str = "<input>"

    def __repr__(self) -> str:
        if self.value is not None:
            return f"Token({self.type.name}, {self.value!r}, {self.line}:{self.column})"
        return f"Token({self.type.name}, {self.line}:{self.column})"

    @property
    def is_error(self) -> bool:
        return self.type is TokenType.ERROR

    @property
    def location(self) -> SourceLocation:
        """Return a SourceLocation (1-indexed column) for error reporting."""
        return SourceLocation(self.filename, self.line, self.column + 1)


@dataclass(frozen=True)
class LexerState:
    """
    Cursor position of a lexer.

    Returned by Lexer.save() and accepted by Lexer.recall(). Only
    meaningful for the lexer that produced it.
    """
    offset: int = 0
    line: int = 1
    column: int = 0


class ScanState(Enum):
    """What the token scanner is accumulating."""
    IDLE = auto()         # Nothing classified yet
    SYMBOL = auto()       # Identifier characters
    LITERAL = auto()      # Octal digits
    STRING = auto()       # Characters up to the closing quote
    SINGLE_CHAR = auto()  # Delimiter, done on the next character


# =============================================================================
# Lexer Implementation
# =============================================================================

class Lexer:
    """
    Tokenizes octasm assembly source code.

    The lexer is pull-based: each call to next() scans exactly one token.
    A parser trying alternative productions can checkpoint the cursor
    with save() and rewind with recall().

    Usage:
        lexer = Lexer(source_text, filename)
        while (token := lexer.next()) is not None:
            ...

    Attributes:
        filename: Name of the source (attached to every token)
    """

    # Characters that can start an identifier
    IDENT_START = frozenset(string.ascii_letters + "_")

    # Characters that can continue an identifier
    IDENT_CHARS = frozenset(string.ascii_letters + string.digits + "_")

    OCTAL_DIGITS = frozenset(string.octdigits)

    SINGLE_CHAR_TOKENS = {
        "(": TokenType.LPAREN,
        ")": TokenType.RPAREN,
        ":": TokenType.COLON,
        ",": TokenType.COMMA,
        "\n": TokenType.NEWLINE,
        "<": TokenType.LT,
        ">": TokenType.GT,
        ".": TokenType.DOT,
    }

    def __init__(self, source: str, filename: str = "<input>"):
        """
        Initialize the lexer with source code.

        Args:
            source: The assembly source code to tokenize
            filename: Name of the source file (for diagnostics only)
        """
        self._filename = filename

        # The trailing space gives every symbol, literal and string a
        # terminating character, and marks where an open string runs out.
        self._text = source + " "

        self._state = LexerState()

    @property
    def filename(self) -> str:
        return self._filename

    # =========================================================================
    # Cursor Access
    # =========================================================================

    def eof(self) -> bool:
        """
        Check if the cursor reached the end of the padded source.

        This stays False while only the sentinel space is left, so use
        next() returning None to detect the end of the token stream.
        """
        return self._state.offset >= len(self._text)

    def save(self) -> LexerState:
        """Checkpoint the cursor."""
        return self._state

    def recall(self, state: LexerState) -> None:
        """Rewind (or fast-forward) the cursor to a checkpoint from save()."""
        self._state = state

    def get_line(self) -> int:
        """Line number the cursor is on."""
        return self._state.line

    def get_source_name(self) -> str:
        return self._filename

    def get_source_line(self, line: int) -> str:
        """
        Get the text of a source line, for error reporting.

        Args:
            line: 1-indexed line number

        Returns:
            The line without its newline, or "" if there is no such line
        """
        lines = self._text[:-1].split("\n")
        if 1 <= line <= len(lines):
            return lines[line - 1]
        return ""

    # =========================================================================
    # Token Production
    # =========================================================================

    def peek(self) -> Optional[Token]:
        """Return the token next() would return, without moving the cursor."""
        state = self._state
        token = self.next()
        self._state = state
        return token

    def next(self) -> Optional[Token]:
        """
        Scan the next token and advance past it.

        Returns:
            The next Token (possibly an ERROR token), or None when only
            whitespace and comments were left
        """
        self._skip_whitespace()

        text = self._text
        start = self._state
        pos = start.offset
        line = start.line
        column = start.column

        scan = ScanState.IDLE
        token_type: Optional[TokenType] = None
        value: str | U9 | U12 | None = None
        chars: list[str] = []
        finished = False

        index = pos
        while index < len(text):
            char = text[index]

            if scan is ScanState.IDLE:
                # Still idle after the first character: it started nothing
                if index != pos:
                    token_type, value = self._invalid_token(text[pos:index])
                    finished = True
                    break

                if char in self.SINGLE_CHAR_TOKENS:
                    scan = ScanState.SINGLE_CHAR
                    token_type = self.SINGLE_CHAR_TOKENS[char]
                    if token_type is TokenType.NEWLINE:
                        line += 1
                        column = 0
                elif char in self.IDENT_START:
                    scan = ScanState.SYMBOL
                elif char in self.OCTAL_DIGITS:
                    scan = ScanState.LITERAL
                elif char == '"':
                    scan = ScanState.STRING

            elif scan is ScanState.SYMBOL:
                if char not in self.IDENT_CHARS:
                    break

            elif scan is ScanState.LITERAL:
                if char not in self.OCTAL_DIGITS:
                    break

            elif scan is ScanState.STRING:
                if char == '"':
                    token_type, value = TokenType.STRING, "".join(chars)
                    finished = True
                    index += 1
                    column += 1
                    break
                if index == len(text) - 1:
                    # Ran into the sentinel: the string never closed
                    token_type, value = TokenType.ERROR, text[pos:index]
                    finished = True
                    break
                chars.append(char)

            else:
                break

            if token_type is not TokenType.NEWLINE:
                column += 1
            index += 1

        if not finished:
            if scan is ScanState.IDLE:
                if index == pos:
                    return None
                token_type, value = self._invalid_token(text[pos:index])
            elif scan is ScanState.SYMBOL:
                token_type, value = TokenType.SYMBOL, text[pos:index]
            elif scan is ScanState.LITERAL:
                token_type, value = self._classify_literal(text[pos:index])
            elif scan is ScanState.STRING:
                token_type, value = TokenType.ERROR, text[pos:index]

        self._state = LexerState(index, line, column)

        if token_type is TokenType.ERROR:
            logger.debug(f"{self._filename}:{start.line}:{start.column}: {value}")

        return Token(
            type=token_type,
            value=value,
            offset=start.offset,
            line=start.line,
            column=start.column,
            filename=self._filename,
        )

    def tokenize(self) -> Iterator[Token]:
        """
        Generate tokens from the cursor to the end of the source.

        Yields:
            Token objects, ERROR tokens included
        """
        while (token := self.next()) is not None:
            yield token

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        token = self.next()
        if token is None:
            raise StopIteration
        return token

    # =========================================================================
    # Helpers
    # =========================================================================

    def _skip_whitespace(self) -> None:
        """
        Skip spaces, tabs and comments, including the newline ending a comment.

        A newline outside a comment is left alone; it is a NEWLINE token.
        """
        text = self._text
        pos, line, column = self._state.offset, self._state.line, self._state.column
        in_comment = False

        while pos < len(text):
            char = text[pos]
            if in_comment and char == "\n":
                line += 1
                column = 0
                in_comment = False
            elif char in " \t" or in_comment:
                column += 1
            elif char == ";":
                in_comment = True
                column += 1
            else:
                break
            pos += 1

        self._state = LexerState(pos, line, column)

    @staticmethod
    def _invalid_token(span: str) -> tuple[TokenType, str]:
        return TokenType.ERROR, f"Invalid token '{span}'"

    @staticmethod
    def _classify_literal(digits: str) -> tuple[TokenType, str | U9 | U12]:
        """
        Pick the literal width for a run of octal digits.

        9 bits is tried first, then 12 bits; anything larger is an error.
        """
        number = int(digits, 8)

        if (word := U9.try_from(number)) is not None:
            return TokenType.NINE_BIT_LITERAL, word
        if (word := U12.try_from(number)) is not None:
            return TokenType.TWELVE_BIT_LITERAL, word
        return TokenType.ERROR, f"'{digits}' is an invalid 12 bit integer"

    def error_for(self, token: Token) -> AssemblySyntaxError:
        """
        Create a syntax error for an ERROR token.

        Args:
            token: An ERROR token produced by this lexer

        Returns:
            AssemblySyntaxError with location and source line

        Raises:
            ValueError: If the token is not an ERROR token
        """
        if not token.is_error:
            raise ValueError(f"not an error token: {token!r}")

        message = str(token.value)
        hint = None
        if message.startswith('"'):
            message = f"unterminated string literal {message}"
            hint = "close the string with '\"' before the end of input"
        elif message.endswith("is an invalid 12 bit integer"):
            hint = f"octal literals must not exceed {U12.max_value():o}"

        return AssemblySyntaxError(
            message,
            token.location,
            hint=hint,
            source_line=self.get_source_line(token.line),
        )
