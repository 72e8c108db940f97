"""Unit tests for CalculateLayoutCommand and the application DTOs."""

from __future__ import annotations

from ledwall.application import (
    CalculateLayoutCommand,
    LayoutOutput,
    ModuleCatalog,
    ScreenInput,
)
from ledwall.domain import InstallationType, ProjectConfig


class TestScreenInput:
    """Tests for ScreenInput validation."""

    def test_valid(self) -> None:
        assert ScreenInput(width=4.0, height=2.5).validate() == []

    def test_non_positive_size(self) -> None:
        errors = ScreenInput(width=0, height=-1).validate()

        assert "Width must be positive" in errors
        assert "Height must be positive" in errors

    def test_size_limits(self) -> None:
        errors = ScreenInput(width=250, height=150).validate()

        assert "Width exceeds maximum (200 m)" in errors
        assert "Height exceeds maximum (100 m)" in errors


class TestLayoutOutput:
    def test_invalid_with_errors(self) -> None:
        output = LayoutOutput(project=None, module=None, result=None, errors=["boom"])
        assert output.is_valid is False

    def test_invalid_without_result(self) -> None:
        output = LayoutOutput(project=ProjectConfig(), module=None, result=None)
        assert output.is_valid is False


class TestCalculateLayoutCommand:
    """Tests for CalculateLayoutCommand.execute()."""

    def test_execute_default_project(
        self, calculate_command: CalculateLayoutCommand, project: ProjectConfig
    ) -> None:
        output = calculate_command.execute(project)

        assert output.is_valid
        assert output.module.id == 3
        assert output.result.total_modules == 40
        assert output.plan is not None
        assert len(output.plan.cells) == 40

    def test_execute_without_plan(
        self, calculate_command: CalculateLayoutCommand, project: ProjectConfig
    ) -> None:
        output = calculate_command.execute(project, include_plan=False)

        assert output.is_valid
        assert output.plan is None

    def test_unknown_module_is_reported(
        self, calculate_command: CalculateLayoutCommand, project: ProjectConfig
    ) -> None:
        output = calculate_command.execute(project.with_module(99))

        assert not output.is_valid
        assert output.result is None
        assert output.errors == ["Module not found: 99"]

    def test_custom_catalog(self, project: ProjectConfig) -> None:
        catalog = ModuleCatalog()
        custom = catalog.add("Acme", "Metre", width_mm=1000, height_mm=1000)
        command = CalculateLayoutCommand(catalog=catalog)

        output = command.execute(project.with_module(custom.id))

        assert output.is_valid
        assert output.result.cols_full == 4
        assert output.result.has_half_row is True

    def test_default_catalog(self, project: ProjectConfig) -> None:
        output = CalculateLayoutCommand().execute(project)
        assert output.is_valid


class TestExecuteScreen:
    """Tests for CalculateLayoutCommand.execute_screen()."""

    def test_screen_size_applied(self, calculate_command: CalculateLayoutCommand) -> None:
        output = calculate_command.execute_screen(ScreenInput(width=6.0, height=3.0))

        assert output.is_valid
        assert (output.result.cols, output.result.rows) == (12, 6)

    def test_keeps_base_settings(self, calculate_command: CalculateLayoutCommand) -> None:
        base = ProjectConfig(installation=InstallationType.STACKED, motor_count=4)
        output = calculate_command.execute_screen(
            ScreenInput(width=6.0, height=3.0, module_id=5), base=base
        )

        assert output.project.installation == InstallationType.STACKED
        assert output.project.module_id == 5
        assert output.module.model == "PL3.9 Lite"
        assert output.result.motor_loads == ()

    def test_invalid_screen(self, calculate_command: CalculateLayoutCommand) -> None:
        output = calculate_command.execute_screen(ScreenInput(width=0, height=3.0))

        assert not output.is_valid
        assert output.project is None
        assert "Width must be positive" in output.errors
