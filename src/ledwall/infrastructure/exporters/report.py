"""Markdown project report for a video wall.

The report covers project details, screen configuration, weights, motor
loads, power and signal figures, both cable routes and the hardware list,
ready to print or hand to the rigging crew.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from ledwall.infrastructure.exporters.base import ExporterRegistry
from ledwall.infrastructure.formatters import STATUS_LABELS, RouteDiagramFormatter

if TYPE_CHECKING:
    from ledwall.application.dtos import LayoutOutput


logger = logging.getLogger(__name__)


@ExporterRegistry.register("report")
class ProjectReportGenerator:
    """Generates the project report in markdown format.

    Attributes:
        format_name: "report"
        file_extension: "md"
    """

    format_name: ClassVar[str] = "report"
    file_extension: ClassVar[str] = "md"

    def __init__(self, include_timestamps: bool = True, include_routes: bool = True) -> None:
        """Initialize the report generator.

        Args:
            include_timestamps: Whether to include generation timestamp in header.
            include_routes: Whether to include the cable route diagrams.
        """
        self.include_timestamps = include_timestamps
        self.include_routes = include_routes

    def export(self, output: LayoutOutput, path: Path) -> None:
        path.write_text(self.export_string(output))
        logger.info(f"Exported project report to {path}")

    def export_string(self, output: LayoutOutput) -> str:
        """Generate the markdown report.

        Args:
            output: Calculated layout.

        Returns:
            Markdown document. Invalid output yields a report of the errors.
        """
        if not output.is_valid:
            lines = ["# LED Wall Report", "", "Calculation failed:", ""]
            lines.extend(f"- {error}" for error in output.errors)
            return "\n".join(lines)

        lines: list[str] = []
        lines.extend(self._header(output))
        lines.extend(self._screen(output))
        lines.extend(self._weights(output))
        lines.extend(self._power(output))
        if self.include_routes and output.plan is not None:
            lines.extend(self._routes(output))
        lines.extend(self._hardware(output))
        lines.extend(self._warnings(output))
        return "\n".join(lines)

    def _header(self, output: LayoutOutput) -> list[str]:
        meta = output.project.metadata
        title = meta.event_name or "LED Wall"
        lines = [f"# {title}", ""]
        if meta.client_name:
            lines.append(f"**Client:** {meta.client_name}  ")
        if meta.date:
            lines.append(f"**Date:** {meta.date}  ")
        if self.include_timestamps:
            lines.append(f"*Generated: {datetime.now().strftime('%Y-%m-%d %H:%M')}*")
        lines.append("")
        return lines

    def _screen(self, output: LayoutOutput) -> list[str]:
        result = output.result
        module = output.module
        lines = [
            "## Screen",
            "",
            "| | |",
            "|---|---|",
            f"| Module | {module.name} ({module.width_mm:g} x {module.height_mm:g} mm) |",
            f"| Size | {result.real_width_m:g} x {result.real_height_m:g} m |",
            f"| Area | {result.area_m2:.2f} m2 |",
            f"| Grid | {result.cols} x {result.rows} |",
            f"| Resolution | {result.resolution_x} x {result.resolution_y} px |",
            f"| Aspect ratio | {result.aspect_ratio or '-'} |",
            f"| Modules | {result.total_modules} ({result.modules_full} full, "
            f"{result.modules_half} half, {result.modules_quarter} quarter, "
            f"{result.modules_special} special) |",
            "",
        ]
        return lines

    def _weights(self, output: LayoutOutput) -> list[str]:
        result = output.result
        project = output.project
        lines = [
            "## Rigging",
            "",
            f"Installation: **{project.installation.value}**, "
            f"truss {project.truss_model.value}",
            "",
            "| Weight | kg |",
            "|---|---:|",
            f"| Screen | {result.weight_screen:.1f} |",
            f"| Rigging | {result.weight_rigging:.1f} |",
            f"| Cables | {result.weight_cables:.1f} |",
            f"| Suspended | {result.weight_suspended:.1f} |",
            f"| Motors | {result.weight_motors:.1f} |",
            f"| **Total** | **{result.weight_total:.1f}** |",
        ]
        if project.safety_factor > 1:
            lines.append(
                f"| Dynamic (x{project.safety_factor:g}) | "
                f"{result.weight_total_factored:.1f} |"
            )
        lines.append("")

        if result.motor_loads:
            lines.append("| Motor | Lift kg | Total kg | Load | Status |")
            lines.append("|---|---:|---:|---:|---|")
            for load in result.motor_loads:
                lines.append(
                    f"| M{load.index} | {load.lift_kg:.1f} | {load.total_kg:.1f} | "
                    f"{load.utilization:.0%} | {STATUS_LABELS[load.status]} |"
                )
            lines.append("")
        return lines

    def _power(self, output: LayoutOutput) -> list[str]:
        result = output.result
        project = output.project
        lines = [
            "## Power and Signal",
            "",
            f"- Total power: {result.power_total_w:,.0f} W",
            f"- Current: {result.amps_total:.1f} A @ {project.voltage:g} V "
            f"({result.amps_3phase:.2f} A three-phase)",
            f"- Power lines: {result.power_lines}, data lines: {result.data_lines}",
            f"- {project.multicable_type.value}: {result.required_multicables} "
            f"required, {result.selected_multicables} selected",
        ]
        pdu = project.pdu
        if pdu.name:
            lines.append(f"- PDU: {pdu.count}x {pdu.name} ({pdu.connector})")
        video = project.video
        if video.processor:
            lines.append(f"- Processor: {video.processor_qty}x {video.processor}")
        if video.server:
            lines.append(f"- Media server: {video.server_qty}x {video.server}")
        lines.append("")
        return lines

    def _routes(self, output: LayoutOutput) -> list[str]:
        plan = output.plan
        formatter = RouteDiagramFormatter()
        lines = ["## Cable Routes", ""]
        for route in (plan.data_route, plan.power_route):
            lines.append("```")
            lines.append(formatter.format(route, plan.grid.cols, plan.grid.rows))
            lines.append("```")
            lines.append("")
        return lines

    def _hardware(self, output: LayoutOutput) -> list[str]:
        lines = ["## Hardware Checklist", ""]
        for item in output.result.hardware:
            note = f" - {item.notes}" if item.notes else ""
            lines.append(f"- [ ] {item.name} (qty: {item.quantity}){note}")
        lines.append("")
        return lines

    def _warnings(self, output: LayoutOutput) -> list[str]:
        if not output.result.warnings:
            return []
        lines = ["## Warnings", ""]
        lines.extend(f"> {warning}" for warning in output.result.warnings)
        lines.append("")
        return lines
