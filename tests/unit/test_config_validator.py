"""Unit tests for project validation and rigging advisories."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from ledwall.application.config import (
    ValidationResult,
    load_config,
    load_config_from_dict,
    validate_config,
)
from ledwall.application.config.validator import (
    check_catalog,
    check_load_advisories,
    check_rigging_advisories,
    check_screen_advisories,
)

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"


def make_config(**sections: Any):
    data: dict[str, Any] = {
        "schema_version": "1.0",
        "screen": {"width": 4.0, "height": 2.5},
    }
    data.update(sections)
    return load_config_from_dict(data)


class TestValidationResult:
    """Tests for ValidationResult bookkeeping."""

    def test_empty_result(self) -> None:
        result = ValidationResult()

        assert result.is_valid
        assert not result.has_warnings
        assert result.exit_code == 0

    def test_warning_exit_code(self) -> None:
        result = ValidationResult().add_warning("screen.width", "snapped")

        assert result.is_valid
        assert result.exit_code == 2

    def test_error_wins_over_warning(self) -> None:
        result = (
            ValidationResult()
            .add_warning("screen.width", "snapped")
            .add_error("screen.module_id", "missing", 42)
        )

        assert not result.is_valid
        assert result.exit_code == 1
        assert result.errors[0].value == 42

    def test_merge(self) -> None:
        first = ValidationResult().add_warning("a", "one")
        second = ValidationResult().add_error("b", "two")

        first.merge(second)

        assert len(first.warnings) == 1
        assert len(first.errors) == 1


# =============================================================================
# Fixture files
# =============================================================================


class TestValidateFixtures:
    """Full validation of the sample project files."""

    @pytest.mark.parametrize(
        ("filename", "exit_code"),
        [
            ("valid_minimal.json", 0),
            ("valid_full.json", 0),
            ("stacked.json", 0),
            ("unknown_module.json", 1),
            ("with_warnings.json", 2),
        ],
    )
    def test_exit_codes(self, filename: str, exit_code: int) -> None:
        result = validate_config(load_config(FIXTURES_PATH / filename))
        assert result.exit_code == exit_code

    def test_unknown_module_stops_further_checks(self) -> None:
        result = validate_config(load_config(FIXTURES_PATH / "unknown_module.json"))

        assert [e.path for e in result.errors] == ["screen.module_id"]
        assert result.errors[0].message == "Module 42 is not in the catalog"
        assert result.warnings == []

    def test_with_warnings_content(self) -> None:
        result = validate_config(load_config(FIXTURES_PATH / "with_warnings.json"))
        paths = [w.path for w in result.warnings]

        assert "screen.width" in paths
        assert "rigging.motor_count" in paths
        assert "rigging.motor_capacity" in paths


# =============================================================================
# Individual checks
# =============================================================================


class TestCheckCatalog:
    def test_custom_id_clashes_with_builtin(self) -> None:
        config = make_config(
            schema_version="1.1",
            catalog={"modules": [{"id": 3, "brand": "Acme", "model": "Clash"}]},
        )
        result = check_catalog(config)

        assert result.errors[0].path == "catalog.modules[0].id"
        assert "already used by a built-in module" in result.errors[0].message

    def test_custom_id_allowed_without_defaults(self) -> None:
        config = make_config(
            schema_version="1.1",
            screen={"width": 4.0, "height": 2.5, "module_id": 3},
            catalog={
                "include_defaults": False,
                "modules": [{"id": 3, "brand": "Acme", "model": "Own"}],
            },
        )
        assert check_catalog(config).is_valid

    def test_selected_custom_module(self) -> None:
        config = load_config(FIXTURES_PATH / "valid_full.json")
        assert check_catalog(config).is_valid


class TestCheckScreenAdvisories:
    def test_snapped_width(self) -> None:
        config = make_config(screen={"width": 4.2, "height": 2.5})
        result = check_screen_advisories(config)

        assert len(result.warnings) == 1
        assert result.warnings[0].message == "Screen width 4.2 m is snapped to 4 m"

    def test_exact_size_has_no_warning(self) -> None:
        assert not check_screen_advisories(make_config()).has_warnings

    def test_ignored_override(self) -> None:
        config = make_config(
            screen={"width": 4.0, "height": 2.5, "overrides": {"weight": 0}}
        )
        result = check_screen_advisories(config)

        assert result.warnings[0].path == "screen.overrides.weight"
        assert result.warnings[0].message.startswith("Override weight=0")
        assert result.warnings[0].message.endswith("is not positive and is ignored")


class TestCheckRiggingAdvisories:
    def test_untabulated_motor_count(self) -> None:
        result = check_rigging_advisories(make_config(rigging={"motor_count": 7}))

        warning = result.warnings[0]
        assert warning.path == "rigging.motor_count"
        assert "No measured load split for 7 motors" in warning.message
        assert warning.suggestion.startswith("Use 2, 3, 4, 5, 6 or 8 motors")

    def test_stacked_ignores_motor_count(self) -> None:
        config = make_config(rigging={"installation": "stacked", "motor_count": 7})
        assert not check_rigging_advisories(config).has_warnings

    def test_stacking_hardware_on_flown_screen(self) -> None:
        result = check_rigging_advisories(make_config(stacking={"base_plates": 4}))
        assert result.warnings[0].message == (
            "Stacking hardware is set but the screen is flown"
        )

    def test_short_truss(self) -> None:
        result = check_rigging_advisories(
            make_config(rigging={"truss_segments": {"1": 3}})
        )
        assert result.warnings[0].message == (
            "Selected truss (3 m) is shorter than the screen width (4 m)"
        )

    def test_long_enough_truss(self) -> None:
        config = make_config(rigging={"truss_segments": {"2": 2}})
        assert not check_rigging_advisories(config).has_warnings

    def test_bolt_on_40_truss(self) -> None:
        result = check_rigging_advisories(
            make_config(rigging={"truss_connection": "bolt"})
        )
        assert result.warnings[0].path == "rigging.truss_connection"


class TestCheckLoadAdvisories:
    def test_default_has_no_warnings(self) -> None:
        assert not check_load_advisories(make_config()).has_warnings

    def test_overloaded_motors(self) -> None:
        result = check_load_advisories(make_config(rigging={"motor_capacity": 200}))

        assert len(result.warnings) == 2
        assert result.warnings[0].message == (
            "Motor 1 lifts 201.0 kg, above its 200 kg capacity"
        )
        assert result.warnings[0].suggestion == (
            "Add motors or use motors with a higher capacity"
        )

    def test_empty_layout(self) -> None:
        result = check_load_advisories(
            make_config(screen={"width": 0.0, "height": 2.5})
        )

        assert len(result.warnings) == 1
        assert result.warnings[0].message == "Screen size snaps to zero"

    def test_too_many_specials(self) -> None:
        config = make_config(
            screen={"width": 1.0, "height": 0.5},
            special_modules={"flex": 3},
        )
        result = check_load_advisories(config)

        assert result.warnings[0].path == "special_modules"
        assert result.warnings[0].message == (
            "3 special modules exceed the 2 full module positions"
        )

    def test_zero_resolution(self) -> None:
        config = make_config(
            schema_version="1.1",
            screen={"width": 4.0, "height": 2.5, "module_id": 9},
            catalog={"modules": [{"brand": "Acme", "model": "Dark", "pixels_h": 0}]},
        )
        result = check_load_advisories(config)

        assert result.warnings[0].path == "screen.overrides"
