"""
octasm Tool Configuration
=========================

Settings shared by the command-line tools. Configuration can come from:
- Default values (defined here)
- Environment variables
- Command-line options (applied by the CLI on top of the above)

Environment Variables
---------------------
| Variable           | Field      | Example |
|--------------------|------------|---------|
| OCTASM_ENCODING    | encoding   | latin-1 |
| OCTASM_MAX_ERRORS  | max_errors | 20      |
| OCTASM_VERBOSE     | verbose    | 1       |
"""

from dataclasses import dataclass
import logging
import os


logger = logging.getLogger(__name__)

# Values of OCTASM_VERBOSE that switch verbose output on
_TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass
class ToolConfig:
    """
    Configuration for the octasm command-line tools.

    Attributes:
        encoding: Text encoding used to read source files
        max_errors: Errors to collect before giving up on a file
        verbose: Enable debug logging and extra output
    """

    encoding: str = "utf-8"
    max_errors: int = 100
    verbose: bool = False

    @classmethod
    def from_env(cls) -> "ToolConfig":
        """
        Create ToolConfig from environment variables.

        Unset variables keep their defaults; an OCTASM_MAX_ERRORS that is
        not a positive integer is ignored with a warning.
        """
        config = cls()

        if encoding := os.environ.get("OCTASM_ENCODING"):
            config.encoding = encoding

        if max_errors := os.environ.get("OCTASM_MAX_ERRORS"):
            try:
                value = int(max_errors)
            except ValueError:
                value = 0
            if value > 0:
                config.max_errors = value
            else:
                logger.warning(
                    f"Ignoring OCTASM_MAX_ERRORS={max_errors!r}: expected a positive integer"
                )

        if verbose := os.environ.get("OCTASM_VERBOSE"):
            config.verbose = verbose.strip().lower() in _TRUE_VALUES

        return config
