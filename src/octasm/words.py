"""
Machine Word Types
==================

This module implements the bounded-width unsigned words used by the
octasm toolchain. The target machine encodes immediates either as 9-bit
or 12-bit values, and the lexer picks the narrowest one that holds an
octal literal.

Word Widths
-----------
| Type | Bits | Range     | Octal range |
|------|------|-----------|-------------|
| U9   | 9    | 0..511    | 0..777      |
| U12  | 12   | 0..4095   | 0..7777     |

Conversion
----------
Constructing a word with an out-of-range value raises WordRangeError.
When failure is an expected outcome (as in the lexer's width selection),
use the non-raising forms instead:

>>> U9.fits(511)
True
>>> U9.try_from(512) is None
True
>>> U12.try_from(512)
U12(0o1000)
"""

from dataclasses import dataclass
from typing import ClassVar, Optional, TypeVar

from octasm.errors import WordRangeError


W = TypeVar("W", bound="Word")


# =============================================================================
# Base Word Type
# =============================================================================

@dataclass(frozen=True, order=True)
class Word:
    """
    Immutable unsigned word of a fixed bit width.

    Subclasses only set BITS. Equality and ordering are per type, so
    U9(5) and U12(5) are different values even though int() agrees.

    Attributes:
        value: The integer held by the word
    """

    BITS: ClassVar[int] = 0

    value: int

    def __post_init__(self) -> None:
        if not self.fits(self.value):
            raise WordRangeError(self.value, self.BITS)

    @classmethod
    def max_value(cls) -> int:
        """Largest value the word can hold."""
        return (1 << cls.BITS) - 1

    @classmethod
    def fits(cls, value: object) -> bool:
        """Return True if value is an int within the word's range."""
        # bool is an int subclass but never a word value
        if not isinstance(value, int) or isinstance(value, bool):
            return False
        return 0 <= value <= cls.max_value()

    @classmethod
    def try_from(cls: type[W], value: int) -> Optional[W]:
        """Convert value to this word type, or return None if it doesn't fit."""
        if not cls.fits(value):
            return None
        return cls(value)

    def octal(self) -> str:
        """Zero-padded octal digits, one digit per three bits."""
        return format(self.value, "o").zfill(self.BITS // 3)

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}(0o{self.value:o})"


# =============================================================================
# Concrete Widths
# =============================================================================

@dataclass(frozen=True, order=True, repr=False)
class U9(Word):
    """Unsigned 9-bit word (0..511)."""

    BITS: ClassVar[int] = 9


@dataclass(frozen=True, order=True, repr=False)
class U12(Word):
    """Unsigned 12-bit word (0..4095)."""

    BITS: ClassVar[int] = 12
