"""Domain layer: value objects, project configuration and calculation services."""

from .project import (
    MULTICABLE_LENGTHS,
    TRUSS_SEGMENT_LENGTHS,
    PduSpec,
    ProjectConfig,
    ProjectMetadata,
    VideoSpec,
)
from .services import (
    CableRoute,
    CalculationResult,
    GridLayout,
    HardwareItem,
    LayoutCalculationEngine,
    LayoutPlan,
    MotorLoad,
    RoutedTile,
    TileCell,
    calculate_layout,
)
from .value_objects import (
    CableKind,
    InstallationType,
    LedModule,
    LoadStatus,
    MultiCableType,
    RouteAxis,
    RouteConfig,
    RoutePattern,
    StartCorner,
    TileKind,
    TrussConnection,
    TrussModel,
    positive_or_none,
)

__all__ = [
    "CableKind",
    "CableRoute",
    "CalculationResult",
    "GridLayout",
    "HardwareItem",
    "InstallationType",
    "LayoutCalculationEngine",
    "LayoutPlan",
    "LedModule",
    "LoadStatus",
    "MULTICABLE_LENGTHS",
    "MotorLoad",
    "MultiCableType",
    "PduSpec",
    "ProjectConfig",
    "ProjectMetadata",
    "RouteAxis",
    "RouteConfig",
    "RoutePattern",
    "RoutedTile",
    "StartCorner",
    "TRUSS_SEGMENT_LENGTHS",
    "TileCell",
    "TileKind",
    "TrussConnection",
    "TrussModel",
    "VideoSpec",
    "calculate_layout",
    "positive_or_none",
]
