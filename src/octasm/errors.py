"""
octasm Error Hierarchy
======================

This module defines the exception hierarchy for the octasm toolchain.
All exceptions inherit from OctasmError, allowing callers to catch every
toolchain error with a single except clause.

Exception Hierarchy
-------------------
OctasmError (base)
├── AssemblerError (source-related)
│   ├── AssemblySyntaxError - lexical errors in source
│   └── TooManyErrors - error limit reached while collecting
└── WordRangeError - value outside a 9-bit or 12-bit word

The lexer never raises for malformed input. It reports problems as ERROR
tokens, and drivers turn those into AssemblySyntaxError instances when they
want to raise or collect them.

Error messages follow this format:
    filename:line:column: error: description
        source_line_text
        ^ (pointer to error location)
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class OctasmError(Exception):
    """
    Base exception for all octasm errors.

        try:
            lexer.error_for(token)
        except OctasmError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Assembler Exceptions
# =============================================================================

class AssemblerError(OctasmError):
    """
    Base exception for errors tied to a place in the source.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The actual source text at the error location (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            boot.s:3:9: error: '10000' is an invalid 12 bit integer
                    TAD 10000
                        ^
            hint: octal literals must not exceed 7777
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class AssemblySyntaxError(AssemblerError):
    """
    Lexical error in assembly source code.

    Built from an ERROR token by Lexer.error_for(). Covers:
        - Invalid token-starting character
        - Octal literal larger than 12 bits
        - Unterminated string literal
    """
    pass


class TooManyErrors(AssemblerError):
    """
    Raised when too many errors have been encountered.

    Stops a driver from reporting an unbounded stream of errors for a
    file that is not assembly source at all.
    """

    def __init__(self, message: str = "Too many errors"):
        super().__init__(message)


# =============================================================================
# Word Exceptions
# =============================================================================

class WordRangeError(OctasmError, ValueError):
    """
    Value does not fit in a fixed-width machine word.

    Attributes:
        value: The rejected value
        bits: Width of the word that rejected it
    """

    def __init__(self, value: object, bits: int):
        self.value = value
        self.bits = bits
        super().__init__(
            f"{value!r} does not fit in an unsigned {bits} bit word "
            f"(0..{(1 << bits) - 1})"
        )


# =============================================================================
# Error Collection for Multiple Error Reporting
# =============================================================================

class ErrorCollector:
    """
    Collects multiple errors for batch reporting.

    Since the lexer keeps scanning after an error, a driver can gather
    every ERROR token of a file and report them together:

        collector = ErrorCollector(max_errors=100)

        try:
            for token in lexer:
                if token.is_error:
                    collector.add(lexer.error_for(token))
        except TooManyErrors:
            pass  # Already holds max_errors

        if collector.has_errors():
            print(collector.report())
            sys.exit(1)
    """

    def __init__(self, max_errors: int = 100):
        """
        Initialize the error collector.

        Args:
            max_errors: Maximum errors to collect before raising TooManyErrors
        """
        self.errors: list[AssemblerError] = []
        self.warnings: list[str] = []
        self.max_errors = max_errors

    def add(self, error: AssemblerError) -> None:
        """
        Add an error to the collection.

        Raises:
            TooManyErrors: If max_errors has been reached
        """
        self.errors.append(error)
        if len(self.errors) >= self.max_errors:
            raise TooManyErrors(f"Too many errors ({self.max_errors}), stopping")

    def add_warning(self, message: str) -> None:
        """Add a warning message."""
        self.warnings.append(message)

    def has_errors(self) -> bool:
        """Return True if any errors have been collected."""
        return len(self.errors) > 0

    def error_count(self) -> int:
        """Return the number of collected errors."""
        return len(self.errors)

    def warning_count(self) -> int:
        """Return the number of collected warnings."""
        return len(self.warnings)

    def report(self) -> str:
        """Format all errors and warnings for display."""
        lines = []

        for error in self.errors:
            lines.append(str(error))
            lines.append("")

        if self.warnings:
            lines.append("Warnings:")
            for warning in self.warnings:
                lines.append(f"  {warning}")

        error_word = "error" if len(self.errors) == 1 else "errors"
        warning_word = "warning" if len(self.warnings) == 1 else "warnings"
        lines.append(
            f"\n{len(self.errors)} {error_word}, {len(self.warnings)} {warning_word}"
        )

        return "\n".join(lines)

    def clear(self) -> None:
        """Clear all collected errors and warnings."""
        self.errors.clear()
        self.warnings.clear()
