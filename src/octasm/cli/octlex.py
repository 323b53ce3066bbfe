"""
octlex - Token Dump Command-Line Interface
==========================================

This module implements a command-line tool that runs the octasm lexer over
a source file and prints the resulting token stream. It is meant for
checking how source text is split up before it reaches the parser.

Usage Examples
--------------
Print tokens, one per line:
    $ octlex boot.s

JSON output for other tools:
    $ octlex boot.s --format json

Stop after the first few errors:
    $ octlex --max-errors 5 boot.s

Read a Latin-1 source file with debug logging:
    $ octlex -v --encoding latin-1 boot.s

Environment variables OCTASM_ENCODING, OCTASM_MAX_ERRORS and
OCTASM_VERBOSE provide defaults for the matching options.
"""

import codecs
import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click

from octasm import __version__
from octasm.assembler import Lexer, Token, TokenType
from octasm.cli.errors import ExitCode, handle_cli_exception
from octasm.config import ToolConfig
from octasm.errors import ErrorCollector, TooManyErrors
from octasm.words import Word


logger = logging.getLogger(__name__)


# =============================================================================
# Helpers
# =============================================================================

def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


def check_encoding(encoding: str) -> None:
    """
    Make sure an encoding name is known to Python.

    Raises:
        click.BadParameter: If the encoding does not exist
    """
    try:
        codecs.lookup(encoding)
    except LookupError:
        raise click.BadParameter(
            f"unknown encoding '{encoding}'", param_hint="--encoding"
        ) from None


def lex_source(
    source: str,
    filename: str,
    max_errors: int = 100,
) -> tuple[list[Token], ErrorCollector]:
    """
    Tokenize a source string, collecting lexical errors on the way.

    ERROR tokens stay in the returned token list; each also becomes an
    AssemblySyntaxError in the collector. Lexing stops early once the
    collector reaches max_errors.

    Args:
        source: Assembly source text
        filename: Name reported in tokens and errors
        max_errors: Error limit for the collector

    Returns:
        Tuple of (tokens, collector)
    """
    lexer = Lexer(source, filename)
    collector = ErrorCollector(max_errors=max_errors)
    tokens: list[Token] = []

    try:
        for token in lexer:
            tokens.append(token)
            if token.is_error:
                collector.add(lexer.error_for(token))
    except TooManyErrors:
        collector.add_warning(f"stopped after {max_errors} errors at line {lexer.get_line()}")

    logger.debug(f"{filename}: {len(tokens)} tokens, {collector.error_count()} errors")
    return tokens, collector


def format_value(token: Token) -> str:
    """Render a token payload for text output."""
    if token.value is None:
        return ""
    if isinstance(token.value, Word):
        return token.value.octal()
    if token.type is TokenType.STRING:
        return json.dumps(token.value)
    return str(token.value)


def format_token(token: Token) -> str:
    """Format a token as 'line:column  TYPE  value'."""
    position = f"{token.line}:{token.column}"
    return f"{position:<8} {token.type.name:<20} {format_value(token)}".rstrip()


def token_to_dict(token: Token) -> dict:
    """Convert a token to a JSON-serializable dictionary."""
    value = token.value
    if isinstance(value, Word):
        value = int(value)
    return {
        "type": token.type.name,
        "value": value,
        "offset": token.offset,
        "line": token.line,
        "column": token.column,
    }


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-f", "--format", "output_format",
    type=click.Choice(["text", "json"], case_sensitive=False),
    default="text",
    help="Output format (default: text)",
)
@click.option(
    "-e", "--max-errors",
    type=click.IntRange(min=1),
    default=None,
    help="Stop after this many lexical errors (default: 100)",
)
@click.option(
    "--encoding",
    default=None,
    help="Source file encoding (default: utf-8)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="octlex")
def main(
    input_file: Path,
    output_format: str,
    max_errors: Optional[int],
    encoding: Optional[str],
    verbose: bool,
) -> None:
    """
    Print the tokens of an octasm assembly source file.

    INPUT_FILE is the assembly source file to tokenize.

    Exits with status 1 if the file contains lexical errors; the errors
    are reported on stderr after the token listing.

    \b
    Examples:
        octlex boot.s                 # One token per line
        octlex boot.s -f json         # JSON array of tokens
    """
    config = ToolConfig.from_env()
    if encoding is not None:
        config.encoding = encoding
    if max_errors is not None:
        config.max_errors = max_errors
    if verbose:
        config.verbose = True

    setup_logging(config.verbose)

    try:
        check_encoding(config.encoding)
        source = input_file.read_text(encoding=config.encoding)
        tokens, collector = lex_source(source, str(input_file), config.max_errors)

        if output_format.lower() == "json":
            click.echo(json.dumps([token_to_dict(t) for t in tokens], indent=2))
        else:
            for token in tokens:
                click.echo(format_token(token))

        if config.verbose:
            click.echo(f"{len(tokens)} tokens from {input_file}", err=True)

        if collector.has_errors():
            click.echo(collector.report(), err=True)
            sys.exit(ExitCode.BUILD_ERROR)

    except Exception as e:
        handle_cli_exception(e, verbose=config.verbose, error_type="Lexing")


if __name__ == "__main__":
    main()
