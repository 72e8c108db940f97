"""Data models produced by the layout calculation services.

All models are frozen dataclasses. Weights are kilograms, lengths metres.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..value_objects import CableKind, LoadStatus, RouteConfig, TileKind
from .constants import MOTOR_NEAR_LIMIT_RATIO


# =============================================================================
# Grid
# =============================================================================


@dataclass(frozen=True)
class TileCell:
    """One cell of the tile grid with its physical rectangle.

    Coordinates use a top-left origin with y growing downwards.

    Attributes:
        col: Column index, 0 is the leftmost column.
        row: Row index, 0 is the top row.
        kind: Full, half or quarter module.
        x: Left edge in metres.
        y: Top edge in metres.
        width: Cell width in metres.
        height: Cell height in metres.
        is_half_width: Cell lies in the trailing half column.
        is_half_height: Cell lies in the trailing half row.
    """

    col: int
    row: int
    kind: TileKind
    x: float
    y: float
    width: float
    height: float
    is_half_width: bool = False
    is_half_height: bool = False

    @property
    def cx(self) -> float:
        """Horizontal centre in metres."""
        return self.x + self.width / 2

    @property
    def cy(self) -> float:
        """Vertical centre in metres."""
        return self.y + self.height / 2


@dataclass(frozen=True)
class GridLayout:
    """Resolved tile grid for a snapped screen size.

    Attributes:
        snapped_width_m: Target width snapped to the nearest 0.5 m.
        snapped_height_m: Target height snapped to the nearest 0.5 m.
        module_width_m: Module width in metres.
        module_height_m: Module height in metres.
        cols_full: Number of full-width columns.
        rows_full: Number of full-height rows.
        has_half_col: A trailing half-width column exists.
        has_half_row: A trailing half-height row exists.
    """

    snapped_width_m: float
    snapped_height_m: float
    module_width_m: float
    module_height_m: float
    cols_full: int
    rows_full: int
    has_half_col: bool = False
    has_half_row: bool = False

    @property
    def cols(self) -> int:
        return self.cols_full + (1 if self.has_half_col else 0)

    @property
    def rows(self) -> int:
        return self.rows_full + (1 if self.has_half_row else 0)

    @property
    def full_count(self) -> int:
        return self.cols_full * self.rows_full

    @property
    def half_count(self) -> int:
        return (self.cols_full if self.has_half_row else 0) + (
            self.rows_full if self.has_half_col else 0
        )

    @property
    def quarter_count(self) -> int:
        return 1 if self.has_half_col and self.has_half_row else 0

    @property
    def cell_count(self) -> int:
        return self.cols * self.rows

    @property
    def is_empty(self) -> bool:
        return self.cell_count == 0

    def column_width(self, col: int) -> float:
        """Physical width of a column in metres."""
        if col >= self.cols_full:
            return self.module_width_m * 0.5
        return self.module_width_m

    def row_height(self, row: int) -> float:
        """Physical height of a row in metres."""
        if row >= self.rows_full:
            return self.module_height_m * 0.5
        return self.module_height_m

    def cell(self, col: int, row: int) -> TileCell:
        """Build the cell at a column/row position.

        Raises:
            IndexError: If the position lies outside the grid.
        """
        if not (0 <= col < self.cols and 0 <= row < self.rows):
            raise IndexError(f"Cell ({col}, {row}) outside {self.cols}x{self.rows} grid")

        half_w = col >= self.cols_full
        half_h = row >= self.rows_full
        if half_w and half_h:
            kind = TileKind.QUARTER
        elif half_w or half_h:
            kind = TileKind.HALF
        else:
            kind = TileKind.FULL

        return TileCell(
            col=col,
            row=row,
            kind=kind,
            x=min(col, self.cols_full) * self.module_width_m,
            y=min(row, self.rows_full) * self.module_height_m,
            width=self.column_width(col),
            height=self.row_height(row),
            is_half_width=half_w,
            is_half_height=half_h,
        )

    def cells(self) -> tuple[TileCell, ...]:
        """All cells in row-major order."""
        return tuple(
            self.cell(col, row) for row in range(self.rows) for col in range(self.cols)
        )


# =============================================================================
# Weight, power and rigging
# =============================================================================


@dataclass(frozen=True)
class ScreenTotals:
    """Module counts, screen weight and electrical load.

    Attributes:
        modules_full: Full modules left after special modules are placed.
        modules_half: Half modules.
        modules_quarter: Quarter modules.
        modules_special: Corner and flex modules.
        total_modules: Sum of all module classes.
        weight_screen: Weight of all modules.
        power_total_w: Maximum power draw of all modules.
        amps_total: Single-phase current at the configured voltage.
        amps_3phase: Three-phase current estimate.
    """

    modules_full: int
    modules_half: int
    modules_quarter: int
    modules_special: int
    total_modules: int
    weight_screen: float
    power_total_w: float
    amps_total: float
    amps_3phase: float


@dataclass(frozen=True)
class MotorLoad:
    """Load carried by one chain motor.

    Attributes:
        index: Motor position from the left, starting at 1.
        share: Fraction of the suspended load carried by this motor.
        lift_kg: Suspended load share including the safety factor.
        self_kg: Motor self weight.
        capacity_kg: Rated motor capacity.
    """

    index: int
    share: float
    lift_kg: float
    self_kg: float
    capacity_kg: float

    @property
    def total_kg(self) -> float:
        return self.lift_kg + self.self_kg

    @property
    def utilization(self) -> float:
        """Lift load as a fraction of capacity (0 when capacity is unset)."""
        if self.capacity_kg <= 0:
            return 0.0
        return self.lift_kg / self.capacity_kg

    @property
    def is_overloaded(self) -> bool:
        return self.lift_kg > self.capacity_kg

    @property
    def status(self) -> LoadStatus:
        if self.is_overloaded:
            return LoadStatus.OVERLOADED
        if self.utilization >= MOTOR_NEAR_LIMIT_RATIO:
            return LoadStatus.NEAR_LIMIT
        return LoadStatus.OK


@dataclass(frozen=True)
class RiggingResult:
    """Rigging weights, hardware counts and motor loads."""

    weight_truss: float
    weight_bumpers: float
    weight_slings: float
    weight_rigging: float
    weight_cables: float
    weight_suspended: float
    weight_motors: float
    weight_total: float
    bumpers_1m: int
    bumpers_05m: int
    required_truss_m: int
    selected_truss_m: float
    auto_truss_m: int
    truss_spigots: int
    truss_pins: int
    stack_half_couplers: int
    stack_pins: int
    motor_loads: tuple[MotorLoad, ...] = ()


# =============================================================================
# Cable routes
# =============================================================================


@dataclass(frozen=True)
class RoutedTile:
    """A cell placed in a cable route.

    Attributes:
        cell: The grid cell.
        order: Position in the route, starting at 0.
        group: Line group number, starting at 1.
        label: Line label such as ``D1`` or ``P3``.
        color: Display colour of the line group.
        is_feed: The cell is the first one of its group (where the cable enters).
    """

    cell: TileCell
    order: int
    group: int
    label: str
    color: str
    is_feed: bool = False


@dataclass(frozen=True)
class CableRoute:
    """An ordered daisy-chain route split into line groups."""

    kind: CableKind
    config: RouteConfig
    interval: int
    tiles: tuple[RoutedTile, ...] = ()

    @property
    def group_count(self) -> int:
        return max((tile.group for tile in self.tiles), default=0)

    def group(self, number: int) -> tuple[RoutedTile, ...]:
        """Tiles belonging to one line group, in route order."""
        return tuple(tile for tile in self.tiles if tile.group == number)

    def tile_at(self, col: int, row: int) -> RoutedTile | None:
        for tile in self.tiles:
            if tile.cell.col == col and tile.cell.row == row:
                return tile
        return None


# =============================================================================
# Logistics
# =============================================================================


@dataclass(frozen=True)
class HardwareItem:
    """One line of the hardware and logistics list.

    Attributes:
        name: Item description.
        quantity: Number of pieces.
        category: Grouping used by reports (rigging, truss, stacking, cabling, cases).
        notes: Optional extra information.
    """

    name: str
    quantity: int
    category: str = "rigging"
    notes: str = ""


@dataclass(frozen=True)
class LogisticsResult:
    """Cable, case and resolution figures derived from the module totals."""

    power_lines: int
    data_lines: int
    power_links: int
    data_links: int
    fly_cases_main: int
    fly_cases_small: int
    required_multicables: int
    selected_multicables: int
    total_breakouts: int
    resolution_x: int
    resolution_y: int
    aspect_ratio: str | None
    hardware: tuple[HardwareItem, ...] = ()


# =============================================================================
# Complete result
# =============================================================================


@dataclass(frozen=True)
class CalculationResult:
    """Complete output of one layout calculation.

    Values are derived purely from the project configuration and the
    selected module. ``warnings`` lists edge cases that were resolved to a
    safe default, such as an empty grid or an undefined aspect ratio.
    """

    # Grid
    cols: int
    rows: int
    cols_full: int
    rows_full: int
    has_half_col: bool
    has_half_row: bool

    # Modules
    total_modules: int
    modules_full: int
    modules_half: int
    modules_quarter: int
    modules_special: int

    # Dimensions
    real_width_m: float
    real_height_m: float
    area_m2: float
    resolution_x: int
    resolution_y: int
    aspect_ratio: str | None

    # Weights
    weight_screen: float
    weight_rigging: float
    weight_cables: float
    weight_suspended: float
    weight_motors: float
    weight_total: float
    weight_total_factored: float

    # Power
    power_total_w: float
    amps_total: float
    amps_3phase: float
    power_lines: int
    data_lines: int

    # Rigging
    bumpers_1m: int
    bumpers_05m: int
    required_truss_m: int
    selected_truss_m: float
    motor_loads: tuple[MotorLoad, ...]

    # Hardware
    truss_spigots: int
    truss_pins: int
    stack_half_couplers: int
    stack_pins: int

    # Multi-cable and logistics
    required_multicables: int
    selected_multicables: int
    total_breakouts: int
    fly_cases_main: int
    fly_cases_small: int
    power_links: int
    data_links: int

    hardware: tuple[HardwareItem, ...] = ()
    warnings: tuple[str, ...] = ()

    @property
    def overloaded_motors(self) -> tuple[MotorLoad, ...]:
        return tuple(load for load in self.motor_loads if load.is_overloaded)

    @property
    def is_empty(self) -> bool:
        return self.total_modules == 0


@dataclass(frozen=True)
class LayoutPlan:
    """Geometry handed to renderers: the tile grid and both cable routes.

    Attributes:
        grid: Resolved grid.
        cells: All cells in row-major order.
        data_route: Data route with line groups.
        power_route: Power route with line groups.
    """

    grid: GridLayout
    cells: tuple[TileCell, ...] = field(default_factory=tuple)
    data_route: CableRoute | None = None
    power_route: CableRoute | None = None
