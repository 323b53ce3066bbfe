"""
Tests for octasm.errors - Error Hierarchy and Collection
========================================================
"""

import pytest

from octasm.errors import (
    AssemblerError,
    AssemblySyntaxError,
    ErrorCollector,
    OctasmError,
    SourceLocation,
    TooManyErrors,
)


# =============================================================================
# Formatting Tests
# =============================================================================

class TestFormatting:
    """Tests for AssemblerError message formatting."""

    def test_location_str(self):
        assert str(SourceLocation("boot.s", 3, 9)) == "boot.s:3:9"

    def test_message_only(self):
        assert str(AssemblerError("bad")) == "error: bad"

    def test_full_message(self):
        error = AssemblySyntaxError(
            "Invalid token '#'",
            SourceLocation("boot.s", 2, 5),
            hint="remove it",
            source_line="TAD #",
        )
        assert str(error) == (
            "boot.s:2:5: error: Invalid token '#'\n"
            "    TAD #\n"
            "        ^\n"
            "hint: remove it"
        )

    def test_hierarchy(self):
        assert issubclass(AssemblySyntaxError, AssemblerError)
        assert issubclass(AssemblerError, OctasmError)


# =============================================================================
# ErrorCollector Tests
# =============================================================================

class TestErrorCollector:
    """Tests for batch error collection."""

    def test_empty(self):
        collector = ErrorCollector()
        assert not collector.has_errors()
        assert collector.report().endswith("0 errors, 0 warnings")

    def test_add_and_report(self):
        collector = ErrorCollector()
        collector.add(AssemblySyntaxError("first"))
        collector.add_warning("careful")
        report = collector.report()
        assert "error: first" in report
        assert "  careful" in report
        assert report.endswith("1 error, 1 warning")
        assert collector.error_count() == 1
        assert collector.warning_count() == 1

    def test_limit(self):
        collector = ErrorCollector(max_errors=2)
        collector.add(AssemblySyntaxError("one"))
        with pytest.raises(TooManyErrors):
            collector.add(AssemblySyntaxError("two"))
        assert collector.error_count() == 2

    def test_clear(self):
        collector = ErrorCollector()
        collector.add(AssemblySyntaxError("one"))
        collector.add_warning("w")
        collector.clear()
        assert collector.error_count() == 0
        assert collector.warning_count() == 0
