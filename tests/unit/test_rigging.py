"""Unit tests for rigging load distribution.

Tests cover:
- Motor load distribution table and uniform fallback
- Truss, bumper and sling weights for flown screens
- Truss and stacking hardware counts
- Motor lift loads, safety factor and load status
"""

from __future__ import annotations

import pytest

from ledwall.domain import (
    InstallationType,
    LedModule,
    LoadStatus,
    ProjectConfig,
    TrussModel,
)
from ledwall.domain.services import (
    MOTOR_LOAD_DISTRIBUTION,
    GridLayoutResolver,
    MotorLoad,
    RiggingLoadDistributor,
    RiggingResult,
    WeightPowerAggregator,
    effective_motor_count,
    is_tabulated_motor_count,
    motor_load_distribution,
)


def distribute(config: ProjectConfig, module: LedModule) -> RiggingResult:
    """Run grid, aggregation and rigging for a config and module."""
    grid = GridLayoutResolver().resolve(
        config.target_width_m, config.target_height_m, module
    )
    totals = WeightPowerAggregator().aggregate(
        grid, module.weight_kg, module.power_w, config.special_module_count, config.voltage
    )
    return RiggingLoadDistributor().distribute(grid, totals, config)


# =============================================================================
# Motor load distribution
# =============================================================================


class TestMotorLoadDistribution:
    """Tests for motor_load_distribution()."""

    @pytest.mark.parametrize("count", sorted(MOTOR_LOAD_DISTRIBUTION))
    def test_table_entries_sum_to_one(self, count: int) -> None:
        shares = motor_load_distribution(count)

        assert len(shares) == count
        assert sum(shares) == pytest.approx(1.0)

    @pytest.mark.parametrize("count", sorted(MOTOR_LOAD_DISTRIBUTION))
    def test_table_entries_are_symmetric(self, count: int) -> None:
        shares = motor_load_distribution(count)
        assert shares == tuple(reversed(shares))

    def test_four_motor_split(self) -> None:
        assert motor_load_distribution(4) == (0.13, 0.37, 0.37, 0.13)

    @pytest.mark.parametrize("count", [7, 9, 12])
    def test_untabulated_count_is_uniform(self, count: int) -> None:
        shares = motor_load_distribution(count)

        assert len(shares) == count
        assert all(share == pytest.approx(1 / count) for share in shares)

    @pytest.mark.parametrize("count", [0, 1])
    def test_minimum_two_motors(self, count: int) -> None:
        assert effective_motor_count(count) == 2
        assert motor_load_distribution(count) == (0.5, 0.5)

    def test_is_tabulated(self) -> None:
        assert is_tabulated_motor_count(6) is True
        assert is_tabulated_motor_count(7) is False
        assert is_tabulated_motor_count(1) is True


# =============================================================================
# Flown screens
# =============================================================================


class TestFlownRigging:
    """Tests for flown installations."""

    def test_default_weight_breakdown(self, module: LedModule) -> None:
        """4 x 2.5 m of PL2.5 Pro on auto truss and two motors."""
        rigging = distribute(ProjectConfig(), module)

        assert rigging.required_truss_m == 4
        assert rigging.auto_truss_m == 4
        assert rigging.weight_truss == pytest.approx(4 * 6.5)
        assert rigging.bumpers_1m == 0
        assert rigging.bumpers_05m == 8
        assert rigging.weight_bumpers == pytest.approx(48.0)
        assert rigging.weight_slings == pytest.approx(20.0)
        assert rigging.weight_rigging == pytest.approx(94.0)
        assert rigging.weight_cables == pytest.approx(8.0)
        assert rigging.weight_suspended == pytest.approx(402.0)
        assert rigging.weight_motors == pytest.approx(100.0)
        assert rigging.weight_total == pytest.approx(502.0)

    def test_motor_lift_loads(self, module: LedModule) -> None:
        rigging = distribute(ProjectConfig(), module)

        assert [m.index for m in rigging.motor_loads] == [1, 2]
        assert all(m.lift_kg == pytest.approx(201.0) for m in rigging.motor_loads)
        assert all(m.total_kg == pytest.approx(251.0) for m in rigging.motor_loads)

    def test_lift_loads_sum_to_factored_suspended_weight(self, module: LedModule) -> None:
        config = ProjectConfig(motor_count=5, safety_factor=1.2)
        rigging = distribute(config, module)

        lift = sum(m.lift_kg for m in rigging.motor_loads)
        assert lift == pytest.approx(rigging.weight_suspended * 1.2)

    def test_safety_factor_scales_lift_not_weights(self, module: LedModule) -> None:
        rigging = distribute(ProjectConfig(safety_factor=1.5), module)

        assert rigging.weight_total == pytest.approx(502.0)
        assert rigging.motor_loads[0].lift_kg == pytest.approx(402 * 1.5 * 0.5)

    def test_single_motor_counts_as_two(self, module: LedModule) -> None:
        rigging = distribute(ProjectConfig(motor_count=1), module)

        assert len(rigging.motor_loads) == 2
        assert rigging.weight_motors == pytest.approx(100.0)

    def test_selected_truss_replaces_auto_truss(self, module: LedModule) -> None:
        config = ProjectConfig(truss_segments={2.0: 2, 0.5: 1})
        rigging = distribute(config, module)

        assert rigging.selected_truss_m == 4.5
        assert rigging.auto_truss_m == 0
        assert rigging.weight_truss == pytest.approx(4.5 * 6.5)
        assert rigging.truss_spigots == 2 * 4
        assert rigging.truss_pins == 2 * 8

    def test_truss_model_sets_weight_per_metre(self, module: LedModule) -> None:
        rigging = distribute(ProjectConfig(truss_model=TrussModel.T52), module)
        assert rigging.weight_truss == pytest.approx(4 * 10.0)

    def test_metre_wide_columns_use_1m_bumpers(self) -> None:
        module = LedModule(20, "Acme", "Square 1m", 1000, 1000, 20.0, 300, 100, 100)
        rigging = distribute(ProjectConfig(target_width_m=3.5), module)

        assert rigging.bumpers_1m == 3
        assert rigging.bumpers_05m == 1
        assert rigging.weight_bumpers == pytest.approx(3 * 12 + 6)

    def test_required_truss_rounds_up(self, module: LedModule) -> None:
        rigging = distribute(ProjectConfig(target_width_m=4.5), module)
        assert rigging.required_truss_m == 5


# =============================================================================
# Stacked screens
# =============================================================================


class TestStackedRigging:
    """Tests for ground-stacked installations."""

    def test_no_bumpers_or_motors(self, module: LedModule) -> None:
        config = ProjectConfig(installation=InstallationType.STACKED)
        rigging = distribute(config, module)

        assert rigging.bumpers_1m == 0
        assert rigging.bumpers_05m == 0
        assert rigging.motor_loads == ()
        assert rigging.weight_motors == 0
        assert rigging.weight_truss == 0
        assert rigging.required_truss_m == 0
        assert rigging.weight_total == pytest.approx(300.0 + 8.0)

    def test_selected_truss_weight_without_joint_hardware(
        self, module: LedModule
    ) -> None:
        """Stacked truss adds weight but no spigots or pins."""
        config = ProjectConfig(
            installation=InstallationType.STACKED,
            stack_base_plates=3,
            truss_segments={2.0: 2},
        )
        rigging = distribute(config, module)

        assert rigging.weight_truss == pytest.approx(4 * 6.5)
        assert rigging.weight_rigging == pytest.approx(26.0)
        assert rigging.truss_spigots == 0
        assert rigging.truss_pins == 0
        assert rigging.stack_half_couplers == 12

    def test_base_plate_hardware(self, module: LedModule) -> None:
        config = ProjectConfig(installation=InstallationType.STACKED, stack_base_plates=12)
        rigging = distribute(config, module)

        assert rigging.stack_half_couplers == 48
        assert rigging.stack_pins == 48

    def test_base_plates_ignored_when_flown(self, module: LedModule) -> None:
        rigging = distribute(ProjectConfig(stack_base_plates=12), module)

        assert rigging.stack_half_couplers == 0
        assert rigging.stack_pins == 0


# =============================================================================
# Motor load status
# =============================================================================


class TestMotorLoad:
    """Tests for MotorLoad status thresholds."""

    def _load(self, lift: float, capacity: float) -> MotorLoad:
        return MotorLoad(index=1, share=0.5, lift_kg=lift, self_kg=50, capacity_kg=capacity)

    def test_ok_below_eighty_percent(self) -> None:
        assert self._load(700, 1000).status == LoadStatus.OK

    def test_near_limit_from_eighty_percent(self) -> None:
        assert self._load(800, 1000).status == LoadStatus.NEAR_LIMIT
        assert self._load(1000, 1000).status == LoadStatus.NEAR_LIMIT

    def test_overloaded_above_capacity(self) -> None:
        load = self._load(1000.5, 1000)

        assert load.is_overloaded is True
        assert load.status == LoadStatus.OVERLOADED

    def test_utilization_without_capacity(self) -> None:
        assert self._load(100, 0).utilization == 0.0

    def test_overloaded_motors_in_rigging(self, module: LedModule) -> None:
        rigging = distribute(ProjectConfig(motor_capacity_kg=150), module)
        assert all(m.status == LoadStatus.OVERLOADED for m in rigging.motor_loads)
