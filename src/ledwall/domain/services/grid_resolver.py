"""Grid layout resolution.

Snaps a requested screen size to 0.5 m and works out how many full
columns/rows of a module fit, plus the trailing half column/row that
1.0 m modules can carry.
"""

from __future__ import annotations

import logging
import math

from ..value_objects import LedModule
from .constants import (
    HALF_TILE_MODULE_SIZE_M,
    HALF_TILE_REMAINDER_MAX_M,
    HALF_TILE_REMAINDER_MIN_M,
    SNAP_STEP_M,
)
from .models import GridLayout

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounding towards +infinity.

    Python's ``round`` uses banker's rounding (``round(2.5) == 2``); layout
    snapping and resolution need ``2.5 -> 3``.
    """
    return math.floor(value + 0.5)


def snap_dimension(value_m: float) -> float:
    """Snap a length in metres to the nearest 0.5 m."""
    steps = 1 / SNAP_STEP_M
    return round_half_up(value_m * steps) / steps


def _has_half_tile(module_size_m: float, remainder_m: float) -> bool:
    return (
        module_size_m == HALF_TILE_MODULE_SIZE_M
        and HALF_TILE_REMAINDER_MIN_M <= remainder_m <= HALF_TILE_REMAINDER_MAX_M
    )


class GridLayoutResolver:
    """Resolves the tile grid for a target screen size and module.

    Modules that are not exactly 1.0 m on an axis never get a half tile on
    that axis; any remainder is dropped.
    """

    def resolve(
        self, target_width_m: float, target_height_m: float, module: LedModule
    ) -> GridLayout:
        """Resolve the grid.

        Args:
            target_width_m: Requested screen width.
            target_height_m: Requested screen height.
            module: Selected LED module.

        Returns:
            GridLayout. The grid is empty when the module is degenerate or a
            snapped dimension is zero.
        """
        snapped_w = snap_dimension(target_width_m)
        snapped_h = snap_dimension(target_height_m)
        module_w = module.width_m
        module_h = module.height_m

        if module.is_degenerate:
            logger.debug(f"Module {module.id} has no usable size, grid is empty")
            return GridLayout(
                snapped_width_m=snapped_w,
                snapped_height_m=snapped_h,
                module_width_m=max(module_w, 0.0),
                module_height_m=max(module_h, 0.0),
                cols_full=0,
                rows_full=0,
            )

        cols_full = math.floor(snapped_w / module_w)
        rows_full = math.floor(snapped_h / module_h)
        has_half_col = _has_half_tile(module_w, snapped_w % module_w)
        has_half_row = _has_half_tile(module_h, snapped_h % module_h)

        # A zero dimension leaves nothing to fill along the other axis either
        if snapped_w == 0 or snapped_h == 0:
            cols_full = rows_full = 0
            has_half_col = has_half_row = False

        grid = GridLayout(
            snapped_width_m=snapped_w,
            snapped_height_m=snapped_h,
            module_width_m=module_w,
            module_height_m=module_h,
            cols_full=cols_full,
            rows_full=rows_full,
            has_half_col=has_half_col,
            has_half_row=has_half_row,
        )
        logger.debug(
            f"Resolved {snapped_w}x{snapped_h} m into {grid.cols}x{grid.rows} cells "
            f"(half col: {has_half_col}, half row: {has_half_row})"
        )
        return grid


def resolve_grid(
    target_width_m: float, target_height_m: float, module: LedModule
) -> GridLayout:
    """Convenience wrapper around GridLayoutResolver.resolve()."""
    return GridLayoutResolver().resolve(target_width_m, target_height_m, module)
