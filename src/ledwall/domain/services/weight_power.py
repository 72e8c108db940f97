"""Screen weight and power aggregation.

Special modules (corners and flex) take the place of full modules, never of
half or quarter modules, and weigh and draw the same as a full module.
"""

from __future__ import annotations

from .constants import (
    HALF_POWER_RATIO,
    HALF_WEIGHT_RATIO,
    QUARTER_POWER_RATIO,
    QUARTER_WEIGHT_RATIO,
    SPECIAL_POWER_RATIO,
    SPECIAL_WEIGHT_RATIO,
    THREE_PHASE_VOLTAGE,
)
from .models import GridLayout, ScreenTotals


class WeightPowerAggregator:
    """Sums module weight and power draw over the resolved grid."""

    def aggregate(
        self,
        grid: GridLayout,
        module_weight_kg: float,
        module_power_w: float,
        special_count: int,
        voltage: float,
    ) -> ScreenTotals:
        """Aggregate counts, weight and electrical load.

        Args:
            grid: Resolved tile grid.
            module_weight_kg: Weight of a full module (override already applied).
            module_power_w: Maximum draw of a full module.
            special_count: Corner and flex modules placed on the screen.
            voltage: Single-phase supply voltage.

        Returns:
            ScreenTotals. An empty grid yields all-zero totals and ignores
            special modules.
        """
        if grid.is_empty:
            special_count = 0

        full = grid.full_count
        half = grid.half_count
        quarter = grid.quarter_count
        full_adjusted = max(0, full - special_count)
        total = full_adjusted + half + quarter + special_count

        weight = (
            full_adjusted * module_weight_kg
            + half * module_weight_kg * HALF_WEIGHT_RATIO
            + quarter * module_weight_kg * QUARTER_WEIGHT_RATIO
            + special_count * module_weight_kg * SPECIAL_WEIGHT_RATIO
        )
        watts = (
            full_adjusted * module_power_w
            + half * module_power_w * HALF_POWER_RATIO
            + quarter * module_power_w * QUARTER_POWER_RATIO
            + special_count * module_power_w * SPECIAL_POWER_RATIO
        )

        return ScreenTotals(
            modules_full=full_adjusted,
            modules_half=half,
            modules_quarter=quarter,
            modules_special=special_count,
            total_modules=total,
            weight_screen=weight,
            power_total_w=watts,
            amps_total=watts / voltage,
            amps_3phase=watts / THREE_PHASE_VOLTAGE,
        )
