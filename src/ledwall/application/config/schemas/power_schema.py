"""Power, cable route, multi-cable and infrastructure configuration schemas."""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
)

from ledwall.application.config.schemas.base import validate_quantities
from ledwall.domain.value_objects import (
    MultiCableType,
    RouteAxis,
    RoutePattern,
    StartCorner,
)


class PowerConfig(BaseModel):
    """Supply voltage and packing intervals.

    Attributes:
        voltage: Single-phase supply voltage.
        feed_cable_interval: Modules chained on one power feed.
        signal_reel_interval: Modules chained on one data line.
        fly_case_interval: Full modules per flight case.
        fly_case_interval_small: Half/quarter modules per flight case.
    """

    model_config = ConfigDict(extra="forbid")

    voltage: float = Field(default=230.0, gt=0.0, le=1000.0)
    feed_cable_interval: int = Field(default=12, ge=1)
    signal_reel_interval: int = Field(default=16, ge=1)
    fly_case_interval: int = Field(default=8, ge=1)
    fly_case_interval_small: int = Field(default=10, ge=1)


class RouteConfigSchema(BaseModel):
    """Traversal settings for one cable route."""

    model_config = ConfigDict(extra="forbid")

    pattern: RoutePattern = RoutePattern.SNAKE
    axis: RouteAxis = RouteAxis.VERTICAL
    start: StartCorner = StartCorner.TOP_LEFT


def _default_power_route() -> RouteConfigSchema:
    return RouteConfigSchema(pattern=RoutePattern.STRAIGHT)


class RoutesConfig(BaseModel):
    """Data and power cable routes."""

    model_config = ConfigDict(extra="forbid")

    data: RouteConfigSchema = Field(default_factory=RouteConfigSchema)
    power: RouteConfigSchema = Field(default_factory=_default_power_route)


class MultiCableConfig(BaseModel):
    """Multi-circuit power cable selection.

    Attributes:
        type: Connector family.
        circuits_per_cable: Circuits carried by one cable.
        extra_breakouts: Spare breakouts on top of the required count.
        lengths: Selected cables as length (m) -> quantity.
    """

    model_config = ConfigDict(extra="forbid")

    type: MultiCableType = MultiCableType.SOCAPEX
    circuits_per_cable: int = Field(default=6, ge=1, le=24)
    extra_breakouts: int = Field(default=0, ge=0)
    lengths: dict[float, int] = Field(default_factory=dict)

    @field_validator("lengths")
    @classmethod
    def validate_lengths(cls, v: dict[float, int]) -> dict[float, int]:
        """Ensure cable lengths are positive and quantities non-negative."""
        return validate_quantities(v, "multicable.lengths")


class PduConfig(BaseModel):
    """Power distribution unit details."""

    model_config = ConfigDict(extra="forbid")

    name: str = ""
    count: int = Field(default=1, ge=0)
    connector: str = "Cetac 63A"
    cable_length: float = Field(default=10.0, ge=0.0)


class VideoConfig(BaseModel):
    """Video processing and distribution chain."""

    model_config = ConfigDict(extra="forbid")

    processor: str = ""
    processor_qty: int = Field(default=1, ge=0)
    server: str = ""
    server_qty: int = Field(default=1, ge=0)
    interconnect_type: str = "HDMI"
    interconnect_length: float = Field(default=2.0, ge=0.0)
    interconnect_qty: int = Field(default=1, ge=0)
    distribution_type: str = "Fiber"
    distribution_length: float = Field(default=100.0, ge=0.0)
    distribution_qty: int = Field(default=2, ge=0)
    accessories: str = ""


class InfrastructureConfig(BaseModel):
    """Power distribution and video chain, carried into reports only."""

    model_config = ConfigDict(extra="forbid")

    pdu: PduConfig = Field(default_factory=PduConfig)
    video: VideoConfig = Field(default_factory=VideoConfig)
