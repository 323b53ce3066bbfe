"""
octasm Command-Line Interface
=============================

This package provides command-line tools for octasm:

- **octlex**: Tokenize a source file and print the token stream

Each tool is implemented as a Click-based CLI application with
help text and consistent exit codes.
"""

__all__ = ["octlex"]
