"""Immutable project configuration.

A ProjectConfig is the complete input vector for one layout calculation.
It is never mutated; every edit produces a new snapshot through one of the
``with_*`` constructors, so a calculation always reads a consistent view.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, fields, replace
from types import MappingProxyType
from typing import Any, Mapping

from .value_objects import (
    InstallationType,
    MultiCableType,
    RouteConfig,
    RouteAxis,
    RoutePattern,
    StartCorner,
    TrussConnection,
    TrussModel,
    positive_or_none,
)

# Standard truss segment lengths in metres
TRUSS_SEGMENT_LENGTHS: tuple[float, ...] = (0.5, 1.0, 2.0, 3.0)

# Standard multi-cable lengths in metres
MULTICABLE_LENGTHS: tuple[float, ...] = (5.0, 10.0, 20.0, 25.0, 30.0, 50.0)


def _frozen_quantities(values: Mapping[float, int] | None) -> Mapping[float, int]:
    """Copy a length -> quantity mapping into a read-only view."""
    normalized: dict[float, int] = {}
    for length, qty in (values or {}).items():
        length = float(length)
        if not length > 0:
            raise ValueError("Segment length must be positive")
        if qty < 0:
            raise ValueError("Segment quantity must be non-negative")
        normalized[length] = int(qty)
    return MappingProxyType(normalized)


@dataclass(frozen=True)
class ProjectMetadata:
    """Descriptive project data carried into reports.

    Attributes:
        event_name: Event or show name.
        client_name: Client name.
        date: Free-form event date.
        logo: Path or URL of a logo image.
    """

    event_name: str = ""
    client_name: str = ""
    date: str = ""
    logo: str | None = None


@dataclass(frozen=True)
class PduSpec:
    """Power distribution unit feeding the screen (report only)."""

    name: str = ""
    count: int = 1
    connector: str = "Cetac 63A"
    cable_length_m: float = 10.0


@dataclass(frozen=True)
class VideoSpec:
    """Video chain attached to the screen (report only).

    Attributes:
        processor: Video processor model.
        processor_qty: Number of processors.
        server: Media server model.
        server_qty: Number of media servers.
        interconnect_type: Cable type between server and processor.
        interconnect_length_m: Length of each interconnect cable.
        interconnect_qty: Number of interconnect cables.
        distribution_type: Cable type from processor to screen.
        distribution_length_m: Length of each distribution cable.
        distribution_qty: Number of distribution cables.
        accessories: Free-form accessories list.
    """

    processor: str = ""
    processor_qty: int = 1
    server: str = ""
    server_qty: int = 1
    interconnect_type: str = "HDMI"
    interconnect_length_m: float = 2.0
    interconnect_qty: int = 1
    distribution_type: str = "Fiber"
    distribution_length_m: float = 100.0
    distribution_qty: int = 2
    accessories: str = ""


@dataclass(frozen=True)
class ProjectConfig:
    """Frozen snapshot of every input to the layout calculation.

    Lengths are metres, weights kilograms. Overrides are optional and only
    replace the catalog value when they are finite and positive.

    Attributes:
        target_width_m: Requested screen width.
        target_height_m: Requested screen height.
        module_id: Catalog id of the selected LED module.
        override_weight: Per-module weight override.
        override_pixels_h: Horizontal pixel count override.
        override_pixels_v: Vertical pixel count override.
        corner_left: Left corner modules replacing full modules.
        corner_right: Right corner modules replacing full modules.
        flex: Flexible modules replacing full modules.
        installation: Flown or stacked installation.
        truss_model: Truss profile.
        truss_connection: Joint type, only meaningful for 52x52 truss.
        truss_segments: Selected truss segments, length -> quantity.
        motor_count: Number of chain motors (a minimum of 2 is enforced).
        motor_capacity_kg: Rated capacity of each motor.
        motor_weight_kg: Self weight of each motor.
        sling_length_m: Sling length per rigging point.
        safety_factor: Dynamic load multiplier applied to motor lift loads.
        bumper_1m_kg: Weight of a 1 m bumper.
        bumper_05m_kg: Weight of a 0.5 m bumper.
        sling_kg: Weight of one sling.
        shackle_kg: Weight of one shackle.
        stack_base_plates: Base plates used in stacked mode.
        stack_bilite_bases: Bilite base pieces in stacked mode.
        stack_bilite_1m: Bilite 1 m pieces in stacked mode.
        stack_bilite_05m: Bilite 0.5 m pieces in stacked mode.
        voltage: Single-phase supply voltage.
        feed_cable_interval: Modules per power feed.
        signal_reel_interval: Modules per data line.
        fly_case_interval: Full modules per flight case.
        fly_case_interval_small: Half and quarter modules per flight case.
        data_route: Data cable route.
        power_route: Power cable route.
        multicable_type: Multi-circuit cable family.
        circuits_per_cable: Circuits carried by one multi-cable.
        extra_breakouts: Spare breakouts on top of the required count.
        multicables: Selected multi-cables, length -> quantity.
        metadata: Event, client and logo data.
        pdu: Power distribution unit details.
        video: Video chain details.
    """

    target_width_m: float = 4.0
    target_height_m: float = 2.5
    module_id: int = 3

    override_weight: float | None = None
    override_pixels_h: float | None = None
    override_pixels_v: float | None = None

    corner_left: int = 0
    corner_right: int = 0
    flex: int = 0

    installation: InstallationType = InstallationType.FLOWN
    truss_model: TrussModel = TrussModel.T40
    truss_connection: TrussConnection = TrussConnection.SPIGOT
    truss_segments: Mapping[float, int] = field(default_factory=dict)
    motor_count: int = 2
    motor_capacity_kg: float = 1000.0
    motor_weight_kg: float = 50.0
    sling_length_m: float = 1.5
    safety_factor: float = 1.0

    bumper_1m_kg: float = 12.0
    bumper_05m_kg: float = 6.0
    sling_kg: float = 2.0
    shackle_kg: float = 0.5

    stack_base_plates: int = 0
    stack_bilite_bases: int = 0
    stack_bilite_1m: int = 0
    stack_bilite_05m: int = 0

    voltage: float = 230.0
    feed_cable_interval: int = 12
    signal_reel_interval: int = 16
    fly_case_interval: int = 8
    fly_case_interval_small: int = 10

    data_route: RouteConfig = field(
        default_factory=lambda: RouteConfig(
            RoutePattern.SNAKE, RouteAxis.VERTICAL, StartCorner.TOP_LEFT
        )
    )
    power_route: RouteConfig = field(
        default_factory=lambda: RouteConfig(
            RoutePattern.STRAIGHT, RouteAxis.VERTICAL, StartCorner.TOP_LEFT
        )
    )

    multicable_type: MultiCableType = MultiCableType.SOCAPEX
    circuits_per_cable: int = 6
    extra_breakouts: int = 0
    multicables: Mapping[float, int] = field(default_factory=dict)

    metadata: ProjectMetadata = field(default_factory=ProjectMetadata)
    pdu: PduSpec = field(default_factory=PduSpec)
    video: VideoSpec = field(default_factory=VideoSpec)

    def __post_init__(self) -> None:
        for name in ("target_width_m", "target_height_m"):
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0:
                raise ValueError(f"{name} must be a finite non-negative number")

        for name in (
            "corner_left",
            "corner_right",
            "flex",
            "motor_count",
            "stack_base_plates",
            "stack_bilite_bases",
            "stack_bilite_1m",
            "stack_bilite_05m",
            "extra_breakouts",
        ):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative")

        for name in (
            "motor_capacity_kg",
            "motor_weight_kg",
            "sling_length_m",
            "bumper_1m_kg",
            "bumper_05m_kg",
            "sling_kg",
            "shackle_kg",
        ):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative")

        for name in (
            "feed_cable_interval",
            "signal_reel_interval",
            "fly_case_interval",
            "fly_case_interval_small",
            "circuits_per_cable",
        ):
            if getattr(self, name) < 1:
                raise ValueError(f"{name} must be at least 1")

        if not self.voltage > 0:
            raise ValueError("Voltage must be positive")
        if not math.isfinite(self.safety_factor) or self.safety_factor < 1:
            raise ValueError("Safety factor must be at least 1")

        object.__setattr__(
            self, "override_weight", positive_or_none(self.override_weight)
        )
        object.__setattr__(
            self, "override_pixels_h", positive_or_none(self.override_pixels_h)
        )
        object.__setattr__(
            self, "override_pixels_v", positive_or_none(self.override_pixels_v)
        )
        object.__setattr__(
            self, "truss_segments", _frozen_quantities(self.truss_segments)
        )
        object.__setattr__(self, "multicables", _frozen_quantities(self.multicables))

    # -------------------------------------------------------------------------
    # Derived values
    # -------------------------------------------------------------------------

    @property
    def special_module_count(self) -> int:
        """Corner and flex modules that replace full modules."""
        return self.corner_left + self.corner_right + self.flex

    @property
    def is_flown(self) -> bool:
        return self.installation == InstallationType.FLOWN

    @property
    def selected_truss_length_m(self) -> float:
        return sum(length * qty for length, qty in self.truss_segments.items())

    @property
    def selected_truss_pieces(self) -> int:
        return sum(self.truss_segments.values())

    @property
    def selected_multicable_count(self) -> int:
        return sum(self.multicables.values())

    # -------------------------------------------------------------------------
    # Snapshot constructors
    # -------------------------------------------------------------------------

    def with_changes(self, **changes: Any) -> ProjectConfig:
        """Return a copy with the given fields replaced.

        Raises:
            TypeError: If a field name is unknown.
            ValueError: If the resulting configuration is invalid.
        """
        known = {f.name for f in fields(self)}
        unknown = sorted(set(changes) - known)
        if unknown:
            raise TypeError(f"Unknown ProjectConfig fields: {', '.join(unknown)}")
        return replace(self, **changes)

    def with_module(self, module_id: int) -> ProjectConfig:
        """Select another module and clear the per-module overrides."""
        return replace(
            self,
            module_id=module_id,
            override_weight=None,
            override_pixels_h=None,
            override_pixels_v=None,
        )

    def with_truss_segment(self, length_m: float, quantity: int) -> ProjectConfig:
        """Return a copy with one truss segment length set to ``quantity``."""
        segments = dict(self.truss_segments)
        segments[float(length_m)] = quantity
        return replace(self, truss_segments=segments)

    def with_multicable(self, length_m: float, quantity: int) -> ProjectConfig:
        """Return a copy with one multi-cable length set to ``quantity``."""
        cables = dict(self.multicables)
        cables[float(length_m)] = quantity
        return replace(self, multicables=cables)

    def with_data_route(self, route: RouteConfig) -> ProjectConfig:
        return replace(self, data_route=route)

    def with_power_route(self, route: RouteConfig) -> ProjectConfig:
        return replace(self, power_route=route)
