"""Integration tests for the validate CLI command.

These tests verify the validate command works correctly end-to-end,
including:
- Valid configuration files pass validation
- Load and schema errors are reported with exit code 1
- Geometry warnings give exit code 2
"""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from boxnets.cli.main import app

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestValidateCommand:
    """Tests for the validate command."""

    def test_valid_config(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "valid_cuboid.json")])

        assert result.exit_code == 0
        assert "Validating" in result.output
        assert "Validation passed. Configuration is valid." in result.output

    def test_file_not_found(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "nonexistent.json")])

        assert result.exit_code == 1
        assert "File not found" in result.output
        assert "Validation failed." in result.output

    def test_invalid_json_syntax(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "invalid_json.json")])

        assert result.exit_code == 1
        assert "Invalid JSON syntax" in result.output
        assert "Line 6" in result.output

    def test_unknown_field_rejected(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "unknown_field.json")])

        assert result.exit_code == 1
        assert "Errors:" in result.output
        assert "depth" in result.output

    def test_geometry_error(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["validate", str(FIXTURES_PATH / "invalid_glue_flap.json")]
        )

        assert result.exit_code == 1
        assert "box.glue_flap" in result.output
        assert "Value: 120.0" in result.output
        assert "Validation failed: 1 error(s), 0 warning(s)" in result.output

    def test_valid_config_with_warnings(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["validate", str(FIXTURES_PATH / "valid_with_warnings.json")]
        )

        assert result.exit_code == 2
        assert "Warnings:" in result.output
        assert "Suggestion: Swap length and width" in result.output
        assert "Validation passed with 1 warning(s)" in result.output

    def test_validate_writes_nothing(
        self, runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "valid_cuboid.json")])

        assert result.exit_code == 0
        assert not list(tmp_path.iterdir())

    def test_sizes_the_net_cannot_use(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "invalid_too_low.json")])

        assert result.exit_code == 1
        assert "Net cannot be laid out" in result.output
        assert "Validation failed: 1 error(s)" in result.output
