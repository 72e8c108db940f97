"""Cable routing sequencer.

Orders the cells of a tile grid into a daisy-chain for one cable type and
splits the chain into line groups. Data and power routes use the same
traversal, each with its own pattern, axis and start corner.
"""

from __future__ import annotations

from ..value_objects import CableKind, RouteAxis, RouteConfig, RoutePattern
from .constants import LINE_COLORS
from .models import CableRoute, GridLayout, RoutedTile, TileCell


def sequence_route(grid: GridLayout, route: RouteConfig) -> tuple[TileCell, ...]:
    """Order every grid cell along a cable route.

    Columns are walked right to left for right-hand start corners and rows
    bottom to top for bottom start corners. The route axis picks the outer
    loop (vertical walks columns, horizontal walks rows); a snake pattern
    reverses the inner order on every odd pass.

    Args:
        grid: Resolved tile grid.
        route: Pattern, axis and start corner.

    Returns:
        All cells, each exactly once, in route order.
    """
    col_order = list(range(grid.cols))
    row_order = list(range(grid.rows))
    if route.start.from_right:
        col_order.reverse()
    if route.start.from_bottom:
        row_order.reverse()

    if route.axis == RouteAxis.VERTICAL:
        outer, inner = col_order, row_order
    else:
        outer, inner = row_order, col_order

    sequence: list[TileCell] = []
    for pass_index, outer_index in enumerate(outer):
        inner_order = inner
        if route.pattern == RoutePattern.SNAKE and pass_index % 2 == 1:
            inner_order = inner[::-1]
        for inner_index in inner_order:
            if route.axis == RouteAxis.VERTICAL:
                sequence.append(grid.cell(outer_index, inner_index))
            else:
                sequence.append(grid.cell(inner_index, outer_index))
    return tuple(sequence)


def line_color(group: int) -> str:
    """Display colour for a line group numbered from 1."""
    return LINE_COLORS[(group - 1) % len(LINE_COLORS)]


def build_cable_route(
    grid: GridLayout, route: RouteConfig, interval: int, kind: CableKind
) -> CableRoute:
    """Sequence a route and split it into line groups of ``interval`` cells.

    Args:
        grid: Resolved tile grid.
        route: Pattern, axis and start corner.
        interval: Cells per line (modules per power feed or data line).
        kind: Data or power, used for the ``D<n>``/``P<n>`` labels.

    Returns:
        CableRoute with one RoutedTile per cell.

    Raises:
        ValueError: If interval is below 1.
    """
    if interval < 1:
        raise ValueError("Route interval must be at least 1")

    tiles = []
    for order, cell in enumerate(sequence_route(grid, route)):
        group = order // interval + 1
        tiles.append(
            RoutedTile(
                cell=cell,
                order=order,
                group=group,
                label=f"{kind.label_prefix}{group}",
                color=line_color(group),
                is_feed=order % interval == 0,
            )
        )
    return CableRoute(kind=kind, config=route, interval=interval, tiles=tuple(tiles))
