"""Integration tests for the validate CLI command.

These tests verify the validate command works correctly end-to-end,
including:
- Valid configuration files pass validation
- Invalid configuration files produce errors
- Advisory warnings are displayed
- Exit codes are correct
"""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from fences.cli.main import app

# Get path to test fixtures
FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestValidateCommand:
    """Tests for the validate command."""

    @pytest.mark.parametrize("name", ["valid_inline_gate.json", "valid_rectangle.json"])
    def test_valid_config(self, runner: CliRunner, name: str) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / name)])

        assert result.exit_code == 0
        assert "Validation passed. Configuration is valid." in result.output

    def test_file_not_found(self, runner: CliRunner) -> None:
        """Non-existent file should fail with exit code 1."""
        config_path = FIXTURES_PATH / "nonexistent.json"
        result = runner.invoke(app, ["validate", str(config_path)])

        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_invalid_json_syntax(self, runner: CliRunner) -> None:
        """Invalid JSON should fail with exit code 1."""
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "invalid_json.json")])

        assert result.exit_code == 1
        assert "Invalid JSON syntax" in result.output
        assert "Validation failed" in result.output

    def test_unknown_field_rejected(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "unknown_field.json")])

        assert result.exit_code == 1
        assert "shape.colour" in result.output

    def test_short_run_warns(self, runner: CliRunner) -> None:
        """A side too short for one panel is a warning, exit code 2."""
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "short_run.json")])

        assert result.exit_code == 2
        assert "Warnings:" in result.output
        assert "shape.length" in result.output
        assert "Suggestion:" in result.output
        assert "Validation passed with 1 warning(s)" in result.output

    def test_gate_past_end_is_error(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "gate_past_end.json")])

        assert result.exit_code == 1
        assert "shape.gate.width" in result.output
        assert "Validation failed: 1 error(s)" in result.output
