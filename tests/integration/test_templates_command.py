"""Integration tests for the templates CLI commands."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from ledwall.cli.main import app


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestTemplatesList:
    """Tests for 'ledwall templates list'."""

    def test_lists_all_templates(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["templates", "list"])

        assert result.exit_code == 0
        assert "Available templates:" in result.output
        assert "indoor-flown" in result.output
        assert "outdoor-stacked" in result.output
        assert "corporate-small" in result.output
        assert "4 x 2.5 m indoor screen flown on two motors" in result.output
        assert "ledwall templates init <name>" in result.output


class TestTemplatesInit:
    """Tests for 'ledwall templates init'."""

    def test_init_to_output(self, runner: CliRunner, tmp_path: Path) -> None:
        output = tmp_path / "stage.json"
        result = runner.invoke(
            app, ["templates", "init", "indoor-flown", "--output", str(output)]
        )

        assert result.exit_code == 0
        assert f"Created: {output}" in result.output
        assert json.loads(output.read_text())["screen"]["width"] == 4.0

    def test_init_default_name(
        self, runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(app, ["templates", "init", "outdoor-stacked"])

        assert result.exit_code == 0
        assert (tmp_path / "outdoor-stacked.json").exists()

    def test_unknown_template(self, runner: CliRunner, tmp_path: Path) -> None:
        output = tmp_path / "x.json"
        result = runner.invoke(app, ["templates", "init", "stadium", "-o", str(output)])

        assert result.exit_code == 1
        assert "Error: Template not found: stadium" in result.output
        assert "Available templates: indoor-flown" in result.output
        assert not output.exists()

    def test_existing_file(self, runner: CliRunner, tmp_path: Path) -> None:
        output = tmp_path / "stage.json"
        output.write_text("{}")

        result = runner.invoke(
            app, ["templates", "init", "indoor-flown", "-o", str(output)]
        )

        assert result.exit_code == 1
        assert f"Error: File already exists: {output}" in result.output
        assert output.read_text() == "{}"

    def test_force_overwrite(self, runner: CliRunner, tmp_path: Path) -> None:
        output = tmp_path / "stage.json"
        output.write_text("{}")

        result = runner.invoke(
            app, ["templates", "init", "indoor-flown", "-o", str(output), "--force"]
        )

        assert result.exit_code == 0
        assert "schema_version" in output.read_text()

    def test_initialized_template_validates(
        self, runner: CliRunner, tmp_path: Path
    ) -> None:
        output = tmp_path / "stage.json"
        runner.invoke(app, ["templates", "init", "indoor-flown", "-o", str(output)])

        result = runner.invoke(app, ["validate", str(output)])

        assert result.exit_code == 0
