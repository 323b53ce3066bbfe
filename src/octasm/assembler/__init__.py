"""
octasm Assembler Front End
==========================

The lexer is the part of the assembler implemented here. It turns source
text into tokens; the parser that consumes them classifies symbols into
opcodes, labels and pragmas.

Components
----------
- **Lexer**: Pull-based tokenizer with peek, save and recall
- **Token**: Immutable token with type, payload and source position
- **TokenType**: Closed set of token kinds
- **LexerState**: Opaque cursor checkpoint

Example Usage
-------------
>>> from octasm.assembler import Lexer, TokenType
>>> lexer = Lexer("JMP I 20", "boot.s")
>>> checkpoint = lexer.save()
>>> lexer.next().value
'JMP'
>>> lexer.recall(checkpoint)
>>> lexer.peek().type is TokenType.SYMBOL
True
"""

from octasm.assembler.lexer import Lexer, LexerState, Token, TokenType

__all__ = [
    "Lexer",
    "LexerState",
    "Token",
    "TokenType",
]
