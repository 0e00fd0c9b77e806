"""
Tests for CLI module.
"""

from __future__ import annotations

import json
import logging

from tjportal.cli import main

TEST_HOST = "https://tjxt-user-t.itheima.net/api"


class TestCLIMain:
    """Test main CLI group."""

    def test_help(self, runner):
        """--help shows usage."""
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "tjportal" in result.output

    def test_version(self, runner):
        """--version shows version."""
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "version" in result.output

    def test_log_level_option(self, runner):
        """--log-level sets the package logger level."""
        logger = logging.getLogger("tjportal")
        level = logger.level
        try:
            result = runner.invoke(main, ["--log-level", "debug", "list"])
            assert result.exit_code == 0
            assert logger.level == logging.DEBUG
        finally:
            logger.setLevel(level)

    def test_invalid_log_level(self, runner):
        result = runner.invoke(main, ["--log-level", "LOUD", "list"])
        assert result.exit_code == 2


class TestCLIList:
    """Test list command."""

    def test_list_table(self, runner):
        result = runner.invoke(main, ["list"])
        assert result.exit_code == 0
        for name in ("development", "test", "production"):
            assert name in result.output
        assert "http://localhost:10010" in result.output
        assert TEST_HOST in result.output

    def test_list_json(self, runner):
        result = runner.invoke(main, ["list", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data == {
            "development": {"host": "http://localhost:10010", "cdn": ""},
            "test": {"host": TEST_HOST, "cdn": ""},
            "production": {"host": TEST_HOST, "cdn": ""},
        }


class TestCLIShow:
    """Test show command."""

    def test_show_help(self, runner):
        result = runner.invoke(main, ["show", "--help"])
        assert result.exit_code == 0
        assert "Show endpoints" in result.output

    def test_show_text(self, runner):
        result = runner.invoke(main, ["show", "development"])
        assert result.exit_code == 0
        assert "http://localhost:10010" in result.output
        assert "(empty)" in result.output

    def test_show_json_alias(self, runner):
        result = runner.invoke(main, ["show", "product", "--json"])
        assert result.exit_code == 0
        assert json.loads(result.stdout) == {"host": TEST_HOST, "cdn": ""}

    def test_show_unknown(self, runner):
        result = runner.invoke(main, ["show", "staging"])
        assert result.exit_code == 1
        assert "Unknown environment" in result.output
        assert "staging" in result.output


class TestCLIUrl:
    """Test url command."""

    def test_api_url(self, runner):
        result = runner.invoke(main, ["url", "development", "/us/users/me"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "http://localhost:10010/us/users/me"

    def test_asset_url_without_cdn(self, runner):
        result = runner.invoke(main, ["url", "production", "img/logo.png", "--asset"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "img/logo.png"

    def test_url_unknown(self, runner):
        result = runner.invoke(main, ["url", "staging", "/x"])
        assert result.exit_code == 1
        assert "Unknown environment" in result.output
