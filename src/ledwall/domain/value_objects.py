"""Value objects for the LED wall domain.

Enums use ``(str, Enum)`` so they serialize directly into JSON configuration
files and API payloads.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class InstallationType(str, Enum):
    """How the screen is supported.

    Attributes:
        FLOWN: Hung from truss and bumpers on chain motors.
        STACKED: Built up from the floor on base plates or staging.
    """

    FLOWN = "flown"
    STACKED = "stacked"


class TrussModel(str, Enum):
    """Truss profile used to hang or brace the screen."""

    T30 = "30x30"
    T40 = "40x40"
    T52 = "52x52"


class TrussConnection(str, Enum):
    """Joint type for 52x52 truss (spigot couplers or bolted plates)."""

    SPIGOT = "spigot"
    BOLT = "bolt"


class RoutePattern(str, Enum):
    """Traversal pattern for a cable route.

    Attributes:
        SNAKE: Reverse the inner order on every other pass (serpentine).
        STRAIGHT: Same inner order on every pass.
    """

    SNAKE = "snake"
    STRAIGHT = "straight"


class RouteAxis(str, Enum):
    """Primary axis of a cable route.

    Attributes:
        VERTICAL: Walk columns, visiting the rows of each column in turn.
        HORIZONTAL: Walk rows, visiting the columns of each row in turn.
    """

    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


class StartCorner(str, Enum):
    """Corner of the screen where a cable route begins."""

    TOP_LEFT = "top-left"
    TOP_RIGHT = "top-right"
    BOTTOM_LEFT = "bottom-left"
    BOTTOM_RIGHT = "bottom-right"

    @property
    def from_right(self) -> bool:
        """True when columns are walked right to left."""
        return self in (StartCorner.TOP_RIGHT, StartCorner.BOTTOM_RIGHT)

    @property
    def from_bottom(self) -> bool:
        """True when rows are walked bottom to top."""
        return self in (StartCorner.BOTTOM_LEFT, StartCorner.BOTTOM_RIGHT)


class TileKind(str, Enum):
    """Classification of a grid cell by the share of a module it occupies.

    Attributes:
        FULL: A whole module.
        HALF: Half a module, in the trailing half column or half row.
        QUARTER: The corner cell where a half column meets a half row.
    """

    FULL = "full"
    HALF = "half"
    QUARTER = "quarter"


class CableKind(str, Enum):
    """Type of daisy-chained cable run."""

    DATA = "data"
    POWER = "power"

    @property
    def label_prefix(self) -> str:
        """Prefix used for line labels (D1, D2... / P1, P2...)."""
        return "D" if self == CableKind.DATA else "P"


class MultiCableType(str, Enum):
    """Multi-circuit power cable connector family."""

    SOCAPEX = "Socapex"
    HARTING = "Harting"
    CETAC = "Cetac"


class LoadStatus(str, Enum):
    """Motor load status relative to its rated capacity.

    Attributes:
        OK: Lift load below 80% of capacity.
        NEAR_LIMIT: Lift load between 80% and 100% of capacity.
        OVERLOADED: Lift load above capacity.
    """

    OK = "ok"
    NEAR_LIMIT = "near_limit"
    OVERLOADED = "overloaded"


@dataclass(frozen=True)
class LedModule:
    """A catalog entry describing one LED panel model.

    Dimensions are in millimetres, weight in kilograms and power in watts
    (maximum draw). A module with a non-positive width or height is accepted
    but flagged as degenerate; the calculation engine turns it into an empty
    layout instead of failing.

    Attributes:
        id: Catalog identifier.
        brand: Manufacturer name.
        model: Model name.
        width_mm: Panel width in millimetres.
        height_mm: Panel height in millimetres.
        weight_kg: Panel weight in kilograms.
        power_w: Maximum power draw in watts.
        pixels_h: Horizontal pixel count.
        pixels_v: Vertical pixel count.
    """

    id: int
    brand: str
    model: str
    width_mm: float
    height_mm: float
    weight_kg: float
    power_w: float
    pixels_h: int
    pixels_v: int

    def __post_init__(self) -> None:
        if self.weight_kg < 0:
            raise ValueError("Module weight must be non-negative")
        if self.power_w < 0:
            raise ValueError("Module power must be non-negative")
        if self.pixels_h < 0 or self.pixels_v < 0:
            raise ValueError("Module pixel counts must be non-negative")

    @property
    def name(self) -> str:
        """Display name, brand followed by model."""
        return f"{self.brand} {self.model}".strip()

    @property
    def width_m(self) -> float:
        return self.width_mm / 1000

    @property
    def height_m(self) -> float:
        return self.height_mm / 1000

    @property
    def is_degenerate(self) -> bool:
        """True when the module has no usable physical size."""
        return not (self.width_mm > 0 and self.height_mm > 0)

    @property
    def pixel_pitch_mm(self) -> float | None:
        """Horizontal pixel pitch in millimetres, None when undefined."""
        if self.pixels_h <= 0 or self.width_mm <= 0:
            return None
        return self.width_mm / self.pixels_h


@dataclass(frozen=True)
class RouteConfig:
    """Traversal settings for one cable route (data or power).

    Attributes:
        pattern: Snake or straight traversal.
        axis: Primary iteration axis.
        start: Corner where the route begins.
    """

    pattern: RoutePattern = RoutePattern.SNAKE
    axis: RouteAxis = RouteAxis.VERTICAL
    start: StartCorner = StartCorner.TOP_LEFT


def positive_or_none(value: float | None) -> float | None:
    """Normalize an optional numeric override.

    Returns the value when it is a finite positive number and None otherwise,
    so missing, zero, negative and NaN overrides all mean "use the catalog
    value".
    """
    if value is None:
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number) or math.isinf(number) or number <= 0:
        return None
    return number
