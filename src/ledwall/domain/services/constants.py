"""Constant tables for layout, weight, power and rigging calculations.

All weights are kilograms, lengths metres and power watts.
"""

from __future__ import annotations

from ..value_objects import TrussModel

# =============================================================================
# Grid snapping
# =============================================================================

# Target dimensions are snapped to this granularity
SNAP_STEP_M: float = 0.5

# Half columns/rows only exist for modules of exactly this size
HALF_TILE_MODULE_SIZE_M: float = 1.0

# Remainder band that produces a trailing half column or row
HALF_TILE_REMAINDER_MIN_M: float = 0.4
HALF_TILE_REMAINDER_MAX_M: float = 0.6

# =============================================================================
# Weight and power ratios relative to a full module
# =============================================================================

HALF_WEIGHT_RATIO: float = 0.55
QUARTER_WEIGHT_RATIO: float = 0.30
SPECIAL_WEIGHT_RATIO: float = 1.0

HALF_POWER_RATIO: float = 0.5
# Half of the half-module draw; differs from QUARTER_WEIGHT_RATIO
QUARTER_POWER_RATIO: float = HALF_POWER_RATIO * 0.5
SPECIAL_POWER_RATIO: float = 1.0

# Line-to-line voltage used for the three-phase current estimate
THREE_PHASE_VOLTAGE: float = 690.0

# =============================================================================
# Rigging
# =============================================================================

TRUSS_WEIGHT_PER_M: dict[TrussModel, float] = {
    TrussModel.T30: 4.5,
    TrussModel.T40: 6.5,
    TrussModel.T52: 10.0,
}

# Signal and power jumper weight per module
CABLE_WEIGHT_PER_MODULE: float = 0.2

# Columns at least this wide hang from a 1 m bumper, narrower ones from 0.5 m
FULL_BUMPER_MIN_COLUMN_WIDTH_M: float = 1.0

MIN_MOTOR_COUNT: int = 2

# Share of the suspended load carried by each motor, from left to right
MOTOR_LOAD_DISTRIBUTION: dict[int, tuple[float, ...]] = {
    2: (0.50, 0.50),
    3: (0.19, 0.62, 0.19),
    4: (0.13, 0.37, 0.37, 0.13),
    5: (0.10, 0.28, 0.24, 0.28, 0.10),
    6: (0.08, 0.23, 0.19, 0.19, 0.23, 0.08),
    8: (0.06, 0.16, 0.14, 0.14, 0.14, 0.14, 0.16, 0.06),
}

# Fraction of rated capacity where a motor is reported as near its limit
MOTOR_NEAR_LIMIT_RATIO: float = 0.8

SPIGOTS_PER_TRUSS_JOINT: int = 4
PINS_PER_TRUSS_JOINT: int = 8
HALF_COUPLERS_PER_BASE_PLATE: int = 4
PINS_PER_BASE_PLATE: int = 4

# =============================================================================
# Cable route colours (cycled per line group)
# =============================================================================

LINE_COLORS: tuple[str, ...] = (
    "#ef4444",
    "#f97316",
    "#f59e0b",
    "#84cc16",
    "#10b981",
    "#06b6d4",
    "#6366f1",
    "#a855f7",
    "#d946ef",
    "#f43f5e",
)
