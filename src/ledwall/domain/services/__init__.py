"""Layout calculation services.

The engine runs five stages on a frozen project snapshot:

- Grid layout resolution (snapping, half columns/rows)
- Weight and power aggregation
- Rigging load distribution
- Cable routing
- Logistics and hardware counts

Example:
    >>> from ledwall.domain.services import LayoutCalculationEngine
    >>> result = LayoutCalculationEngine().calculate(config, module)
    >>> result.weight_total
    502.0
"""

from .cable_routing import build_cable_route, line_color, sequence_route
from .calculator import LayoutCalculationEngine, calculate_layout
from .constants import LINE_COLORS, MOTOR_LOAD_DISTRIBUTION, TRUSS_WEIGHT_PER_M
from .grid_resolver import GridLayoutResolver, resolve_grid, round_half_up, snap_dimension
from .logistics import LogisticsCalculator, aspect_ratio
from .models import (
    CableRoute,
    CalculationResult,
    GridLayout,
    HardwareItem,
    LayoutPlan,
    LogisticsResult,
    MotorLoad,
    RiggingResult,
    RoutedTile,
    ScreenTotals,
    TileCell,
)
from .rigging import (
    RiggingLoadDistributor,
    effective_motor_count,
    is_tabulated_motor_count,
    motor_load_distribution,
)
from .weight_power import WeightPowerAggregator

__all__ = [
    # Engine
    "LayoutCalculationEngine",
    "calculate_layout",
    # Stages
    "GridLayoutResolver",
    "WeightPowerAggregator",
    "RiggingLoadDistributor",
    "LogisticsCalculator",
    # Functions
    "build_cable_route",
    "sequence_route",
    "line_color",
    "resolve_grid",
    "round_half_up",
    "snap_dimension",
    "aspect_ratio",
    "motor_load_distribution",
    "effective_motor_count",
    "is_tabulated_motor_count",
    # Models
    "CableRoute",
    "CalculationResult",
    "GridLayout",
    "HardwareItem",
    "LayoutPlan",
    "LogisticsResult",
    "MotorLoad",
    "RiggingResult",
    "RoutedTile",
    "ScreenTotals",
    "TileCell",
    # Tables
    "LINE_COLORS",
    "MOTOR_LOAD_DISTRIBUTION",
    "TRUSS_WEIGHT_PER_M",
]
