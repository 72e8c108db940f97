"""Logistics and hardware calculation.

Turns module totals and rigging figures into cable, flight-case and
multi-cable counts, the pixel resolution and a flat hardware list.
"""

from __future__ import annotations

import math
from dataclasses import replace

from ..project import ProjectConfig
from ..value_objects import LedModule
from .grid_resolver import round_half_up
from .models import GridLayout, HardwareItem, LogisticsResult, RiggingResult, ScreenTotals


def _format_length(length_m: float) -> str:
    return f"{length_m:g} m"


def aspect_ratio(resolution_x: int, resolution_y: int) -> str | None:
    """Reduce a resolution to its aspect ratio, e.g. 1600x1000 -> "8:5".

    Returns:
        The ratio as ``"w:h"``, or None when either side is zero.
    """
    if resolution_x <= 0 or resolution_y <= 0:
        return None
    divisor = math.gcd(resolution_x, resolution_y)
    return f"{resolution_x // divisor}:{resolution_y // divisor}"


def resolution(
    grid: GridLayout, module: LedModule, pixels_h: float, pixels_v: float
) -> tuple[int, int]:
    """Pixel resolution of the snapped screen.

    Args:
        grid: Resolved tile grid.
        module: Selected module (physical size).
        pixels_h: Horizontal pixels per module, override applied.
        pixels_v: Vertical pixels per module, override applied.

    Returns:
        (resolution_x, resolution_y); zero on an axis without pixels.
    """
    if grid.is_empty or module.is_degenerate:
        return 0, 0
    res_x = 0
    res_y = 0
    if pixels_h > 0:
        res_x = round_half_up(grid.snapped_width_m * 1000 / (module.width_mm / pixels_h))
    if pixels_v > 0:
        res_y = round_half_up(
            grid.snapped_height_m * 1000 / (module.height_mm / pixels_v)
        )
    return res_x, res_y


class LogisticsCalculator:
    """Computes cable lines, cases, multi-cables and the hardware list."""

    def calculate(
        self,
        grid: GridLayout,
        module: LedModule,
        totals: ScreenTotals,
        rigging: RiggingResult,
        config: ProjectConfig,
        pixels_h: float,
        pixels_v: float,
    ) -> LogisticsResult:
        """Calculate logistics figures.

        Args:
            grid: Resolved tile grid.
            module: Selected module.
            totals: Module counts.
            rigging: Rigging figures, used for the hardware list.
            config: Project configuration.
            pixels_h: Effective horizontal pixels per module.
            pixels_v: Effective vertical pixels per module.

        Returns:
            LogisticsResult.
        """
        total = totals.total_modules
        power_lines = math.ceil(total / config.feed_cable_interval)
        data_lines = math.ceil(total / config.signal_reel_interval)
        required_multicables = math.ceil(power_lines / config.circuits_per_cable)
        res_x, res_y = resolution(grid, module, pixels_h, pixels_v)

        result = LogisticsResult(
            power_lines=power_lines,
            data_lines=data_lines,
            power_links=total - power_lines,
            data_links=total - data_lines,
            fly_cases_main=math.ceil(
                (totals.modules_full + totals.modules_special) / config.fly_case_interval
            ),
            fly_cases_small=math.ceil(
                (totals.modules_half + totals.modules_quarter)
                / config.fly_case_interval_small
            ),
            required_multicables=required_multicables,
            selected_multicables=config.selected_multicable_count,
            total_breakouts=required_multicables + config.extra_breakouts,
            resolution_x=res_x,
            resolution_y=res_y,
            aspect_ratio=aspect_ratio(res_x, res_y),
        )
        return replace(result, hardware=self.hardware_list(rigging, result, config))

    def hardware_list(
        self,
        rigging: RiggingResult,
        logistics: LogisticsResult,
        config: ProjectConfig,
    ) -> tuple[HardwareItem, ...]:
        """Build the flat hardware list, skipping zero quantities."""
        items: list[HardwareItem] = []

        def add(name: str, quantity: int, category: str, notes: str = "") -> None:
            if quantity > 0:
                items.append(HardwareItem(name, int(quantity), category, notes))

        # Rigging
        add("Bumper 1 m", rigging.bumpers_1m, "rigging")
        add("Bumper 0.5 m", rigging.bumpers_05m, "rigging")
        bumpers = rigging.bumpers_1m + rigging.bumpers_05m
        add("Sling", bumpers, "rigging", _format_length(config.sling_length_m))
        add("Shackle", bumpers, "rigging")
        add(
            f"Chain motor {config.motor_capacity_kg:g} kg",
            len(rigging.motor_loads),
            "rigging",
        )

        # Truss
        truss = config.truss_model.value
        for length, qty in sorted(config.truss_segments.items()):
            add(f"Truss {truss} {_format_length(length)}", qty, "truss")
        if rigging.auto_truss_m:
            add(
                f"Truss {truss} (estimated)",
                rigging.auto_truss_m,
                "truss",
                "metres required, no segments selected",
            )
        add("Truss spigot", rigging.truss_spigots, "truss")
        add("Truss pin", rigging.truss_pins, "truss")

        # Stacking
        if not config.is_flown:
            add("Base plate", config.stack_base_plates, "stacking")
            add("Half coupler", rigging.stack_half_couplers, "stacking")
            add("Stacking pin", rigging.stack_pins, "stacking")
            add("Bilite base", config.stack_bilite_bases, "stacking")
            add("Bilite 1 m", config.stack_bilite_1m, "stacking")
            add("Bilite 0.5 m", config.stack_bilite_05m, "stacking")

        # Cabling
        add("Power feed cable", logistics.power_lines, "cabling")
        add("Data cable", logistics.data_lines, "cabling")
        add("Power link", logistics.power_links, "cabling")
        add("Data link", logistics.data_links, "cabling")
        multicable = config.multicable_type.value
        for length, qty in sorted(config.multicables.items()):
            add(f"{multicable} {_format_length(length)}", qty, "cabling")
        add(f"{multicable} breakout", logistics.total_breakouts, "cabling")

        # Cases
        add("Flight case (full modules)", logistics.fly_cases_main, "cases")
        add("Flight case (small modules)", logistics.fly_cases_small, "cases")

        return tuple(items)
