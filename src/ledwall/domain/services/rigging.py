"""Rigging load distribution.

This module computes truss, bumper and sling weights, the suspended and
total load, the truss and stacking hardware counts, and how the suspended
load is shared between chain motors.
"""

from __future__ import annotations

import logging
import math

from ..project import ProjectConfig
from .constants import (
    CABLE_WEIGHT_PER_MODULE,
    FULL_BUMPER_MIN_COLUMN_WIDTH_M,
    HALF_COUPLERS_PER_BASE_PLATE,
    MIN_MOTOR_COUNT,
    MOTOR_LOAD_DISTRIBUTION,
    PINS_PER_BASE_PLATE,
    PINS_PER_TRUSS_JOINT,
    SPIGOTS_PER_TRUSS_JOINT,
    TRUSS_WEIGHT_PER_M,
)
from .models import GridLayout, MotorLoad, RiggingResult, ScreenTotals

logger = logging.getLogger(__name__)


def effective_motor_count(motor_count: int) -> int:
    """Motor count with the two-motor minimum applied."""
    return max(MIN_MOTOR_COUNT, motor_count)


def is_tabulated_motor_count(motor_count: int) -> bool:
    """True when the load split for this motor count comes from the table."""
    return effective_motor_count(motor_count) in MOTOR_LOAD_DISTRIBUTION


def motor_load_distribution(motor_count: int) -> tuple[float, ...]:
    """Share of the suspended load carried by each motor.

    Counts in the distribution table use its measured split; any other count
    is split evenly. Counts below two are raised to two.

    Args:
        motor_count: Configured number of motors.

    Returns:
        One share per motor, summing to 1.0.

    Examples:
        >>> motor_load_distribution(4)
        (0.13, 0.37, 0.37, 0.13)
        >>> motor_load_distribution(7)[0] == 1 / 7
        True
    """
    count = effective_motor_count(motor_count)
    shares = MOTOR_LOAD_DISTRIBUTION.get(count)
    if shares is None:
        return tuple(1 / count for _ in range(count))
    return shares


class RiggingLoadDistributor:
    """Service computing rigging weight, hardware and motor loads.

    Flown screens hang from one bumper per column on truss and motors;
    when no truss segments are selected a truss as long as the screen is
    assumed. Stacked screens only carry the weight of explicitly selected
    truss and use base-plate hardware instead of truss joint spigots and pins.
    """

    def distribute(
        self, grid: GridLayout, totals: ScreenTotals, config: ProjectConfig
    ) -> RiggingResult:
        """Compute rigging weights and motor loads.

        Args:
            grid: Resolved tile grid.
            totals: Module counts and screen weight.
            config: Project configuration.

        Returns:
            RiggingResult with the full weight breakdown.
        """
        truss_kg_per_m = TRUSS_WEIGHT_PER_M[config.truss_model]
        selected_truss_m = config.selected_truss_length_m
        required_truss_m = math.ceil(grid.snapped_width_m) if config.is_flown else 0

        auto_truss_m = 0
        bumpers_1m = 0
        bumpers_05m = 0
        motor_loads: tuple[MotorLoad, ...] = ()

        if config.is_flown:
            if selected_truss_m == 0:
                auto_truss_m = required_truss_m
            for col in range(grid.cols):
                if grid.column_width(col) >= FULL_BUMPER_MIN_COLUMN_WIDTH_M:
                    bumpers_1m += 1
                else:
                    bumpers_05m += 1

        weight_truss = (selected_truss_m + auto_truss_m) * truss_kg_per_m
        weight_bumpers = (
            bumpers_1m * config.bumper_1m_kg + bumpers_05m * config.bumper_05m_kg
        )
        weight_slings = (bumpers_1m + bumpers_05m) * (config.sling_kg + config.shackle_kg)
        weight_rigging = weight_truss + weight_bumpers + weight_slings

        weight_cables = totals.total_modules * CABLE_WEIGHT_PER_MODULE
        weight_suspended = totals.weight_screen + weight_rigging + weight_cables

        weight_motors = 0.0
        if config.is_flown:
            shares = motor_load_distribution(config.motor_count)
            motor_loads = tuple(
                MotorLoad(
                    index=i + 1,
                    share=share,
                    lift_kg=weight_suspended * config.safety_factor * share,
                    self_kg=config.motor_weight_kg,
                    capacity_kg=config.motor_capacity_kg,
                )
                for i, share in enumerate(shares)
            )
            weight_motors = len(motor_loads) * config.motor_weight_kg

        truss_joints = max(0, config.selected_truss_pieces - 1) if config.is_flown else 0
        stack_plates = 0 if config.is_flown else config.stack_base_plates

        overloaded = [load.index for load in motor_loads if load.is_overloaded]
        if overloaded:
            logger.warning(f"Motors {overloaded} exceed their rated capacity")

        return RiggingResult(
            weight_truss=weight_truss,
            weight_bumpers=weight_bumpers,
            weight_slings=weight_slings,
            weight_rigging=weight_rigging,
            weight_cables=weight_cables,
            weight_suspended=weight_suspended,
            weight_motors=weight_motors,
            weight_total=weight_suspended + weight_motors,
            bumpers_1m=bumpers_1m,
            bumpers_05m=bumpers_05m,
            required_truss_m=required_truss_m,
            selected_truss_m=selected_truss_m,
            auto_truss_m=auto_truss_m,
            truss_spigots=truss_joints * SPIGOTS_PER_TRUSS_JOINT,
            truss_pins=truss_joints * PINS_PER_TRUSS_JOINT,
            stack_half_couplers=stack_plates * HALF_COUPLERS_PER_BASE_PLATE,
            stack_pins=stack_plates * PINS_PER_BASE_PLATE,
            motor_loads=motor_loads,
        )
