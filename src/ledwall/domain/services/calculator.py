"""Layout and rigging calculation pipeline.

LayoutCalculationEngine chains the grid resolver, weight/power aggregator,
rigging distributor, cable routing sequencer and logistics calculator. It
holds no state between calls; every calculation starts from scratch on the
given configuration snapshot and module.
"""

from __future__ import annotations

import logging

from ..project import ProjectConfig
from ..value_objects import CableKind, LedModule
from .cable_routing import build_cable_route
from .grid_resolver import GridLayoutResolver, snap_dimension
from .logistics import LogisticsCalculator
from .models import CalculationResult, LayoutPlan
from .rigging import RiggingLoadDistributor, is_tabulated_motor_count
from .weight_power import WeightPowerAggregator

logger = logging.getLogger(__name__)


class LayoutCalculationEngine:
    """Computes the full CalculationResult for a project and module.

    Example:
        >>> engine = LayoutCalculationEngine()
        >>> result = engine.calculate(ProjectConfig(), module)
        >>> result.total_modules
        40
    """

    def __init__(self) -> None:
        self.grid_resolver = GridLayoutResolver()
        self.aggregator = WeightPowerAggregator()
        self.rigging = RiggingLoadDistributor()
        self.logistics = LogisticsCalculator()

    def calculate(self, config: ProjectConfig, module: LedModule) -> CalculationResult:
        """Run the calculation pipeline.

        Args:
            config: Frozen project configuration.
            module: Selected catalog module.

        Returns:
            CalculationResult. Degenerate geometry yields an all-zero result
            with a warning instead of an exception.
        """
        weight_kg = config.override_weight or module.weight_kg
        pixels_h = config.override_pixels_h or module.pixels_h
        pixels_v = config.override_pixels_v or module.pixels_v

        grid = self.grid_resolver.resolve(
            config.target_width_m, config.target_height_m, module
        )
        if grid.is_empty:
            return self._empty_result(config, module)

        totals = self.aggregator.aggregate(
            grid,
            module_weight_kg=weight_kg,
            module_power_w=module.power_w,
            special_count=config.special_module_count,
            voltage=config.voltage,
        )
        rigging = self.rigging.distribute(grid, totals, config)
        logistics = self.logistics.calculate(
            grid, module, totals, rigging, config, pixels_h, pixels_v
        )

        warnings: list[str] = []
        if config.special_module_count > grid.full_count:
            warnings.append(
                f"{config.special_module_count} special modules exceed the "
                f"{grid.full_count} full module positions"
            )
        if config.is_flown and not is_tabulated_motor_count(config.motor_count):
            warnings.append(
                f"No measured load split for {config.motor_count} motors, "
                "load is split evenly"
            )
        for load in rigging.motor_loads:
            if load.is_overloaded:
                warnings.append(
                    f"Motor {load.index} lifts {load.lift_kg:.1f} kg, above its "
                    f"{load.capacity_kg:g} kg capacity"
                )
        if logistics.aspect_ratio is None:
            warnings.append("Resolution is zero on one axis, aspect ratio undefined")

        logger.debug(
            f"Calculated {totals.total_modules} modules, "
            f"{rigging.weight_total:.1f} kg total for module {module.id}"
        )

        return CalculationResult(
            cols=grid.cols,
            rows=grid.rows,
            cols_full=grid.cols_full,
            rows_full=grid.rows_full,
            has_half_col=grid.has_half_col,
            has_half_row=grid.has_half_row,
            total_modules=totals.total_modules,
            modules_full=totals.modules_full,
            modules_half=totals.modules_half,
            modules_quarter=totals.modules_quarter,
            modules_special=totals.modules_special,
            real_width_m=grid.snapped_width_m,
            real_height_m=grid.snapped_height_m,
            area_m2=grid.snapped_width_m * grid.snapped_height_m,
            resolution_x=logistics.resolution_x,
            resolution_y=logistics.resolution_y,
            aspect_ratio=logistics.aspect_ratio,
            weight_screen=totals.weight_screen,
            weight_rigging=rigging.weight_rigging,
            weight_cables=rigging.weight_cables,
            weight_suspended=rigging.weight_suspended,
            weight_motors=rigging.weight_motors,
            weight_total=rigging.weight_total,
            weight_total_factored=rigging.weight_total * config.safety_factor,
            power_total_w=totals.power_total_w,
            amps_total=totals.amps_total,
            amps_3phase=totals.amps_3phase,
            power_lines=logistics.power_lines,
            data_lines=logistics.data_lines,
            bumpers_1m=rigging.bumpers_1m,
            bumpers_05m=rigging.bumpers_05m,
            required_truss_m=rigging.required_truss_m,
            selected_truss_m=rigging.selected_truss_m,
            motor_loads=rigging.motor_loads,
            truss_spigots=rigging.truss_spigots,
            truss_pins=rigging.truss_pins,
            stack_half_couplers=rigging.stack_half_couplers,
            stack_pins=rigging.stack_pins,
            required_multicables=logistics.required_multicables,
            selected_multicables=logistics.selected_multicables,
            total_breakouts=logistics.total_breakouts,
            fly_cases_main=logistics.fly_cases_main,
            fly_cases_small=logistics.fly_cases_small,
            power_links=logistics.power_links,
            data_links=logistics.data_links,
            hardware=logistics.hardware,
            warnings=tuple(warnings),
        )

    def plan(self, config: ProjectConfig, module: LedModule) -> LayoutPlan:
        """Build the tile geometry and both cable routes for renderers.

        Args:
            config: Frozen project configuration.
            module: Selected catalog module.

        Returns:
            LayoutPlan with cells and data/power routes.
        """
        grid = self.grid_resolver.resolve(
            config.target_width_m, config.target_height_m, module
        )
        return LayoutPlan(
            grid=grid,
            cells=grid.cells(),
            data_route=build_cable_route(
                grid, config.data_route, config.signal_reel_interval, CableKind.DATA
            ),
            power_route=build_cable_route(
                grid, config.power_route, config.feed_cable_interval, CableKind.POWER
            ),
        )

    def _empty_result(self, config: ProjectConfig, module: LedModule) -> CalculationResult:
        if module.is_degenerate:
            reason = f"Module {module.id} has no usable width or height"
        elif snap_dimension(config.target_width_m) == 0 or snap_dimension(
            config.target_height_m
        ) == 0:
            reason = "Screen size snaps to zero"
        else:
            reason = "Screen is smaller than one module"
        logger.info(f"{reason}, returning an empty layout")

        return CalculationResult(
            cols=0,
            rows=0,
            cols_full=0,
            rows_full=0,
            has_half_col=False,
            has_half_row=False,
            total_modules=0,
            modules_full=0,
            modules_half=0,
            modules_quarter=0,
            modules_special=0,
            real_width_m=0.0,
            real_height_m=0.0,
            area_m2=0.0,
            resolution_x=0,
            resolution_y=0,
            aspect_ratio=None,
            weight_screen=0.0,
            weight_rigging=0.0,
            weight_cables=0.0,
            weight_suspended=0.0,
            weight_motors=0.0,
            weight_total=0.0,
            weight_total_factored=0.0,
            power_total_w=0.0,
            amps_total=0.0,
            amps_3phase=0.0,
            power_lines=0,
            data_lines=0,
            bumpers_1m=0,
            bumpers_05m=0,
            required_truss_m=0,
            selected_truss_m=0.0,
            motor_loads=(),
            truss_spigots=0,
            truss_pins=0,
            stack_half_couplers=0,
            stack_pins=0,
            required_multicables=0,
            selected_multicables=0,
            total_breakouts=0,
            fly_cases_main=0,
            fly_cases_small=0,
            power_links=0,
            data_links=0,
            warnings=(reason,),
        )


def calculate_layout(config: ProjectConfig, module: LedModule) -> CalculationResult:
    """Calculate a layout with a fresh engine."""
    return LayoutCalculationEngine().calculate(config, module)
