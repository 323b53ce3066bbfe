"""
Tests for octasm.config - Tool Configuration
============================================
"""

import logging

from octasm.config import ToolConfig


class TestToolConfig:
    """Tests for defaults and environment overrides."""

    def test_defaults(self, monkeypatch):
        for name in ("OCTASM_ENCODING", "OCTASM_MAX_ERRORS", "OCTASM_VERBOSE"):
            monkeypatch.delenv(name, raising=False)
        config = ToolConfig.from_env()
        assert config == ToolConfig()
        assert config.encoding == "utf-8"
        assert config.max_errors == 100
        assert config.verbose is False

    def test_environment(self, monkeypatch):
        monkeypatch.setenv("OCTASM_ENCODING", "latin-1")
        monkeypatch.setenv("OCTASM_MAX_ERRORS", "5")
        monkeypatch.setenv("OCTASM_VERBOSE", "yes")
        config = ToolConfig.from_env()
        assert config.encoding == "latin-1"
        assert config.max_errors == 5
        assert config.verbose is True

    def test_invalid_max_errors_ignored(self, monkeypatch, caplog):
        monkeypatch.setenv("OCTASM_MAX_ERRORS", "lots")
        with caplog.at_level(logging.WARNING, logger="octasm.config"):
            config = ToolConfig.from_env()
        assert config.max_errors == 100
        assert "OCTASM_MAX_ERRORS" in caplog.text

    def test_non_positive_max_errors_ignored(self, monkeypatch):
        monkeypatch.setenv("OCTASM_MAX_ERRORS", "0")
        assert ToolConfig.from_env().max_errors == 100

    def test_verbose_off(self, monkeypatch):
        monkeypatch.setenv("OCTASM_VERBOSE", "0")
        assert ToolConfig.from_env().verbose is False
