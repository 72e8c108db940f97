"""Unit tests for the text formatters and the JSON exporter."""

from __future__ import annotations

import json

import pytest

from ledwall.application import CalculateLayoutCommand, LayoutOutput
from ledwall.domain import (
    HardwareItem,
    InstallationType,
    PduSpec,
    ProjectConfig,
    ProjectMetadata,
)
from ledwall.infrastructure import (
    JsonExporter,
    LogisticsFormatter,
    PowerReportFormatter,
    RiggingReportFormatter,
    RouteDiagramFormatter,
    SummaryFormatter,
)


@pytest.fixture
def output(calculate_command: CalculateLayoutCommand, project: ProjectConfig) -> LayoutOutput:
    return calculate_command.execute(project)


class TestSummaryFormatter:
    def test_contents(self, output: LayoutOutput) -> None:
        text = SummaryFormatter().format(output.result, output.module, output.project)

        assert text.startswith("SCREEN SUMMARY")
        assert "Module:      Absen PL2.5 Pro (500x500 mm)" in text
        assert "Grid:        8 cols x 5 rows" in text
        assert "Resolution:  1600 x 1000 px (8:5)" in text
        assert "TOTAL" in text
        assert "Half" not in text
        assert "Warnings:" not in text

    def test_event_details(
        self, calculate_command: CalculateLayoutCommand, project: ProjectConfig
    ) -> None:
        config = project.with_changes(
            metadata=ProjectMetadata(event_name="Spring Gala", client_name="Acme")
        )
        output = calculate_command.execute(config)

        text = SummaryFormatter().format(output.result, output.module, output.project)

        assert "Event:       Spring Gala" in text
        assert "Client:      Acme" in text

    def test_warnings_listed(
        self, calculate_command: CalculateLayoutCommand, project: ProjectConfig
    ) -> None:
        output = calculate_command.execute(project.with_changes(motor_count=7))

        text = SummaryFormatter().format(output.result, output.module, output.project)

        assert "Warnings:" in text
        assert "split evenly" in text


class TestRiggingReportFormatter:
    def test_flown(self, output: LayoutOutput) -> None:
        text = RiggingReportFormatter().format(output.result, output.project)

        assert text.startswith("RIGGING REPORT")
        assert "Installation:   flown" in text
        assert "Bumpers:        0x 1 m, 8x 0.5 m" in text
        assert "M1" in text
        assert "M2" in text
        assert "OK" in text
        assert "Dynamic" not in text

    def test_safety_factor_line(
        self, calculate_command: CalculateLayoutCommand, project: ProjectConfig
    ) -> None:
        output = calculate_command.execute(project.with_changes(safety_factor=1.25))

        text = RiggingReportFormatter().format(output.result, output.project)

        assert "Dynamic (x1.25)" in text
        assert "627.5" in text

    def test_overloaded_status(
        self, calculate_command: CalculateLayoutCommand, project: ProjectConfig
    ) -> None:
        output = calculate_command.execute(project.with_changes(motor_capacity_kg=200))

        text = RiggingReportFormatter().format(output.result, output.project)

        assert "OVERLOADED" in text

    def test_stacked_has_no_motor_table(
        self, calculate_command: CalculateLayoutCommand, project: ProjectConfig
    ) -> None:
        config = project.with_changes(installation=InstallationType.STACKED)
        output = calculate_command.execute(config)

        text = RiggingReportFormatter().format(output.result, output.project)

        assert "Installation:   stacked" in text
        assert "Bumpers" not in text
        assert "M1" not in text


class TestPowerReportFormatter:
    def test_contents(self, output: LayoutOutput) -> None:
        text = PowerReportFormatter().format(output.result, output.project)

        assert text.startswith("POWER AND SIGNAL")
        assert "Total power:      5,200 W" in text
        assert "Current:          22.6 A @ 230 V" in text
        assert "Power lines:      4 (12 modules per feed)" in text
        assert "Data lines:       3 (16 modules per line)" in text
        assert "PDU" not in text

    def test_pdu_line(
        self, calculate_command: CalculateLayoutCommand, project: ProjectConfig
    ) -> None:
        config = project.with_changes(pdu=PduSpec(name="Powerbox 63A", count=2))
        output = calculate_command.execute(config)

        text = PowerReportFormatter().format(output.result, output.project)

        assert "PDU:              2x Powerbox 63A" in text


class TestLogisticsFormatter:
    def test_grouped_by_category(self, output: LayoutOutput) -> None:
        text = LogisticsFormatter().format(output.result.hardware)

        assert text.startswith("HARDWARE AND LOGISTICS")
        assert "RIGGING" in text
        assert "CASES" in text
        assert "Bumper 0.5 m" in text

    def test_notes(self) -> None:
        hardware = (HardwareItem("Sling", 4, "rigging", "1.5 m"),)

        text = LogisticsFormatter().format(hardware)

        assert "(1.5 m)" in text

    def test_empty(self) -> None:
        assert "No hardware required." in LogisticsFormatter().format(())


class TestRouteDiagramFormatter:
    def test_data_route(self, calculate_command: CalculateLayoutCommand, project: ProjectConfig) -> None:
        output = calculate_command.execute(project)
        route = output.plan.data_route

        text = RouteDiagramFormatter().format(route, output.result.cols, output.result.rows)

        assert text.startswith("DATA ROUTE")
        assert "16 modules per line, 3 lines" in text
        assert "D1*" in text
        assert "D3" in text
        assert text.endswith("* feed point")
        # title, rule, caption, blank line, then a border line around each row
        assert len(text.splitlines()) == 4 + 2 * 5 + 1 + 1

    def test_empty_route(
        self, calculate_command: CalculateLayoutCommand, project: ProjectConfig
    ) -> None:
        output = calculate_command.execute(project.with_changes(target_width_m=0.0))

        text = RouteDiagramFormatter().format(output.plan.power_route, 0, 0)

        assert text.startswith("POWER ROUTE")
        assert "No tiles to route." in text


class TestJsonExporter:
    def test_structure(self, output: LayoutOutput) -> None:
        data = json.loads(JsonExporter().export(output))

        assert data["module"]["id"] == 3
        assert data["result"]["grid"]["cols"] == 8
        assert data["result"]["modules"]["total"] == 40
        assert data["result"]["weights"]["total"] == pytest.approx(502.0)
        assert data["result"]["rigging"]["motors"][0]["status"] == "ok"
        assert data["result"]["warnings"] == []

    def test_routes(self, output: LayoutOutput) -> None:
        data = JsonExporter().to_dict(output)

        data_route = data["routes"]["data"]
        assert data_route["kind"] == "data"
        assert data_route["lines"] == 3
        assert len(data_route["tiles"]) == 40
        assert data_route["tiles"][0]["is_feed"] is True

    def test_without_plan(
        self, calculate_command: CalculateLayoutCommand, project: ProjectConfig
    ) -> None:
        output = calculate_command.execute(project, include_plan=False)
        assert "routes" not in JsonExporter().to_dict(output)

    def test_invalid_output(
        self, calculate_command: CalculateLayoutCommand, project: ProjectConfig
    ) -> None:
        output = calculate_command.execute(project.with_module(99))
        assert JsonExporter().to_dict(output) == {"errors": ["Module not found: 99"]}
