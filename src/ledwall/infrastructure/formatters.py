"""Text formatters and JSON serialization for layout calculations."""

from __future__ import annotations

import json
from typing import Any

from ledwall.application.dtos import LayoutOutput
from ledwall.domain import (
    CableRoute,
    CalculationResult,
    HardwareItem,
    LedModule,
    LoadStatus,
    ProjectConfig,
)

STATUS_LABELS: dict[LoadStatus, str] = {
    LoadStatus.OK: "OK",
    LoadStatus.NEAR_LIMIT: "NEAR LIMIT",
    LoadStatus.OVERLOADED: "OVERLOADED",
}


class SummaryFormatter:
    """Formats the screen summary: module, grid, resolution and dimensions."""

    def format(
        self, result: CalculationResult, module: LedModule, project: ProjectConfig
    ) -> str:
        lines = [
            "SCREEN SUMMARY",
            "=" * 60,
            "",
        ]

        meta = project.metadata
        if meta.event_name or meta.client_name:
            lines.append(f"Event:       {meta.event_name or '-'}")
            lines.append(f"Client:      {meta.client_name or '-'}")
            if meta.date:
                lines.append(f"Date:        {meta.date}")
            lines.append("")

        lines.append(f"Module:      {module.name} ({module.width_mm:g}x{module.height_mm:g} mm)")
        lines.append(
            f"Requested:   {project.target_width_m:g} x {project.target_height_m:g} m"
        )
        lines.append(
            f"Real size:   {result.real_width_m:g} x {result.real_height_m:g} m "
            f"({result.area_m2:.2f} m2)"
        )
        lines.append(f"Grid:        {result.cols} cols x {result.rows} rows")
        if result.aspect_ratio:
            lines.append(
                f"Resolution:  {result.resolution_x} x {result.resolution_y} px "
                f"({result.aspect_ratio})"
            )
        else:
            lines.append(f"Resolution:  {result.resolution_x} x {result.resolution_y} px")
        lines.append("")

        lines.append(f"{'Modules':<30} {'Qty':>8}")
        lines.append("-" * 60)
        lines.append(f"{'  Full':<30} {result.modules_full:>8}")
        if result.modules_half:
            lines.append(f"{'  Half':<30} {result.modules_half:>8}")
        if result.modules_quarter:
            lines.append(f"{'  Quarter':<30} {result.modules_quarter:>8}")
        if result.modules_special:
            lines.append(f"{'  Special (corner/flex)':<30} {result.modules_special:>8}")
        lines.append("-" * 60)
        lines.append(f"{'TOTAL':<30} {result.total_modules:>8}")

        if result.warnings:
            lines.append("")
            lines.append("Warnings:")
            for warning in result.warnings:
                lines.append(f"  - {warning}")

        return "\n".join(lines)


class RiggingReportFormatter:
    """Formats the weight breakdown and per-motor loads."""

    def format(self, result: CalculationResult, project: ProjectConfig) -> str:
        lines = [
            "RIGGING REPORT",
            "=" * 60,
            "",
            f"Installation:   {project.installation.value}",
            f"Truss:          {project.truss_model.value}",
        ]
        if project.is_flown:
            lines.append(
                f"Bumpers:        {result.bumpers_1m}x 1 m, {result.bumpers_05m}x 0.5 m"
            )
            lines.append(
                f"Truss length:   {result.selected_truss_m:g} m selected, "
                f"{result.required_truss_m} m required"
            )
        lines.append("")

        lines.append(f"{'Weight':<30} {'kg':>10}")
        lines.append("-" * 60)
        lines.append(f"{'  Screen':<30} {result.weight_screen:>10.1f}")
        lines.append(f"{'  Rigging':<30} {result.weight_rigging:>10.1f}")
        lines.append(f"{'  Cables':<30} {result.weight_cables:>10.1f}")
        lines.append(f"{'Suspended':<30} {result.weight_suspended:>10.1f}")
        if project.is_flown:
            lines.append(f"{'  Motors':<30} {result.weight_motors:>10.1f}")
        lines.append("-" * 60)
        lines.append(f"{'TOTAL':<30} {result.weight_total:>10.1f}")
        if project.safety_factor > 1:
            lines.append(
                f"{'Dynamic (x' + format(project.safety_factor, 'g') + ')':<30} "
                f"{result.weight_total_factored:>10.1f}"
            )

        if result.motor_loads:
            lines.append("")
            lines.append(
                f"{'Motor':<8} {'Share':>7} {'Lift kg':>10} {'Self kg':>9} "
                f"{'Total kg':>10} {'Load':>6}  Status"
            )
            lines.append("-" * 70)
            for load in result.motor_loads:
                lines.append(
                    f"{'M' + str(load.index):<8} {load.share:>7.0%} {load.lift_kg:>10.1f} "
                    f"{load.self_kg:>9.1f} {load.total_kg:>10.1f} "
                    f"{load.utilization:>6.0%}  {STATUS_LABELS[load.status]}"
                )
        return "\n".join(lines)


class PowerReportFormatter:
    """Formats power draw, current and line counts."""

    def format(self, result: CalculationResult, project: ProjectConfig) -> str:
        lines = [
            "POWER AND SIGNAL",
            "=" * 60,
            "",
            f"Total power:      {result.power_total_w:,.0f} W",
            f"Current:          {result.amps_total:.1f} A @ {project.voltage:g} V",
            f"Three-phase:      {result.amps_3phase:.2f} A per phase",
            "",
            f"Power lines:      {result.power_lines} "
            f"({project.feed_cable_interval} modules per feed)",
            f"Data lines:       {result.data_lines} "
            f"({project.signal_reel_interval} modules per line)",
            f"Power links:      {result.power_links}",
            f"Data links:       {result.data_links}",
            "",
            f"{project.multicable_type.value}: {result.required_multicables} required "
            f"({project.circuits_per_cable} circuits each), "
            f"{result.selected_multicables} selected",
            f"Breakouts:        {result.total_breakouts}",
        ]
        pdu = project.pdu
        if pdu.name:
            lines.append("")
            lines.append(
                f"PDU:              {pdu.count}x {pdu.name} ({pdu.connector}, "
                f"{pdu.cable_length_m:g} m cable)"
            )
        return "\n".join(lines)


class LogisticsFormatter:
    """Formats the hardware and logistics list grouped by category."""

    def format(
        self, hardware: tuple[HardwareItem, ...], title: str = "HARDWARE AND LOGISTICS"
    ) -> str:
        lines = [
            title,
            "=" * 60,
            "",
        ]

        if not hardware:
            lines.append("No hardware required.")
            return "\n".join(lines)

        categories: dict[str, list[HardwareItem]] = {}
        for item in hardware:
            categories.setdefault(item.category, []).append(item)

        lines.append(f"{'Item':<35} {'Qty':>8}")
        lines.append("-" * 60)
        for category, items in categories.items():
            lines.append(f"\n{category.upper()}")
            for item in items:
                lines.append(f"  {item.name:<33} {item.quantity:>8}")
                if item.notes:
                    lines.append(f"    ({item.notes})")
        return "\n".join(lines)


class RouteDiagramFormatter:
    """Formats an ASCII grid showing the line label of every tile."""

    def format(self, route: CableRoute, cols: int, rows: int) -> str:
        """Draw the route as a grid of labels.

        Args:
            route: Data or power route.
            cols: Grid columns.
            rows: Grid rows.

        Returns:
            Diagram with one cell per tile; feed points are marked with ``*``.
        """
        title = f"{route.kind.value.upper()} ROUTE"
        config = route.config
        lines = [
            title,
            "=" * 60,
            f"{config.pattern.value}, {config.axis.value}, from {config.start.value}; "
            f"{route.interval} modules per line, {route.group_count} lines",
            "",
        ]
        if not route.tiles:
            lines.append("No tiles to route.")
            return "\n".join(lines)

        labels = {(t.cell.col, t.cell.row): t for t in route.tiles}
        cell_width = max(len(t.label) for t in route.tiles) + 2
        border = "+" + "+".join("-" * cell_width for _ in range(cols)) + "+"

        lines.append(border)
        for row in range(rows):
            cells = []
            for col in range(cols):
                tile = labels.get((col, row))
                text = ""
                if tile is not None:
                    text = tile.label + ("*" if tile.is_feed else "")
                cells.append(text.center(cell_width))
            lines.append("|" + "|".join(cells) + "|")
            lines.append(border)
        lines.append("* feed point")
        return "\n".join(lines)


def result_to_dict(result: CalculationResult) -> dict[str, Any]:
    """Convert a CalculationResult into JSON-serializable data."""
    return {
        "grid": {
            "cols": result.cols,
            "rows": result.rows,
            "cols_full": result.cols_full,
            "rows_full": result.rows_full,
            "has_half_col": result.has_half_col,
            "has_half_row": result.has_half_row,
        },
        "modules": {
            "total": result.total_modules,
            "full": result.modules_full,
            "half": result.modules_half,
            "quarter": result.modules_quarter,
            "special": result.modules_special,
        },
        "dimensions": {
            "width_m": result.real_width_m,
            "height_m": result.real_height_m,
            "area_m2": result.area_m2,
            "resolution_x": result.resolution_x,
            "resolution_y": result.resolution_y,
            "aspect_ratio": result.aspect_ratio,
        },
        "weights": {
            "screen": result.weight_screen,
            "rigging": result.weight_rigging,
            "cables": result.weight_cables,
            "suspended": result.weight_suspended,
            "motors": result.weight_motors,
            "total": result.weight_total,
            "total_factored": result.weight_total_factored,
        },
        "power": {
            "total_w": result.power_total_w,
            "amps": result.amps_total,
            "amps_3phase": result.amps_3phase,
            "power_lines": result.power_lines,
            "data_lines": result.data_lines,
            "power_links": result.power_links,
            "data_links": result.data_links,
        },
        "rigging": {
            "bumpers_1m": result.bumpers_1m,
            "bumpers_05m": result.bumpers_05m,
            "required_truss_m": result.required_truss_m,
            "selected_truss_m": result.selected_truss_m,
            "truss_spigots": result.truss_spigots,
            "truss_pins": result.truss_pins,
            "stack_half_couplers": result.stack_half_couplers,
            "stack_pins": result.stack_pins,
            "motors": [
                {
                    "index": load.index,
                    "share": load.share,
                    "lift_kg": load.lift_kg,
                    "self_kg": load.self_kg,
                    "total_kg": load.total_kg,
                    "capacity_kg": load.capacity_kg,
                    "status": load.status.value,
                }
                for load in result.motor_loads
            ],
        },
        "logistics": {
            "required_multicables": result.required_multicables,
            "selected_multicables": result.selected_multicables,
            "total_breakouts": result.total_breakouts,
            "fly_cases_main": result.fly_cases_main,
            "fly_cases_small": result.fly_cases_small,
        },
        "hardware": [
            {
                "name": item.name,
                "quantity": item.quantity,
                "category": item.category,
                "notes": item.notes,
            }
            for item in result.hardware
        ],
        "warnings": list(result.warnings),
    }


def route_to_dict(route: CableRoute) -> dict[str, Any]:
    """Convert a cable route into JSON-serializable data."""
    return {
        "kind": route.kind.value,
        "pattern": route.config.pattern.value,
        "axis": route.config.axis.value,
        "start": route.config.start.value,
        "interval": route.interval,
        "lines": route.group_count,
        "tiles": [
            {
                "order": tile.order,
                "col": tile.cell.col,
                "row": tile.cell.row,
                "kind": tile.cell.kind.value,
                "x": tile.cell.x,
                "y": tile.cell.y,
                "width": tile.cell.width,
                "height": tile.cell.height,
                "group": tile.group,
                "label": tile.label,
                "color": tile.color,
                "is_feed": tile.is_feed,
            }
            for tile in route.tiles
        ],
    }


class JsonExporter:
    """Exports a layout calculation as JSON.

    Includes the module, the full result and, when present, both cable
    routes with per-tile geometry.
    """

    def export(self, output: LayoutOutput) -> str:
        """Export layout output as JSON string."""
        return json.dumps(self.to_dict(output), indent=2)

    def to_dict(self, output: LayoutOutput) -> dict[str, Any]:
        if not output.is_valid:
            return {"errors": output.errors}

        module = output.module
        data: dict[str, Any] = {
            "module": {
                "id": module.id,
                "brand": module.brand,
                "model": module.model,
                "width_mm": module.width_mm,
                "height_mm": module.height_mm,
                "weight_kg": module.weight_kg,
                "power_w": module.power_w,
                "pixels_h": module.pixels_h,
                "pixels_v": module.pixels_v,
            },
            "result": result_to_dict(output.result),
        }
        if output.plan is not None:
            data["routes"] = {
                "data": route_to_dict(output.plan.data_route),
                "power": route_to_dict(output.plan.power_route),
            }
        return data
