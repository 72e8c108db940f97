"""Validation structures and rigging advisory checks.

Schema validation only guarantees well-formed values. The checks here look
at the project as a whole: unknown modules, screen sizes changed by
snapping, motor counts without a measured load split, overloaded motors
and hardware that does not match the installation mode.
"""

from dataclasses import dataclass, field
from typing import Any

from ledwall.application.catalog import DEFAULT_MODULES
from ledwall.application.config.adapter import config_to_catalog, config_to_project
from ledwall.application.config.schemas import LedWallConfiguration
from ledwall.domain import (
    InstallationType,
    LayoutCalculationEngine,
    TrussConnection,
    TrussModel,
)
from ledwall.domain.services import (
    is_tabulated_motor_count,
    snap_dimension,
)


@dataclass
class ValidationError:
    """Represents a blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "screen.module_id")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """Represents a non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings.

    Attributes:
        errors: List of blocking validation errors
        warnings: List of non-blocking validation warnings
    """

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the configuration has no blocking errors."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """Get the CLI exit code based on validation status.

        Returns:
            0 if valid with no warnings
            1 if there are errors
            2 if valid but has warnings
        """
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        """Add a validation error and return self for chaining."""
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        """Add a validation warning and return self for chaining."""
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Merge another ValidationResult into this one."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


def check_catalog(config: LedWallConfiguration) -> ValidationResult:
    """Check custom module ids and the selected module."""
    result = ValidationResult()

    if config.catalog is not None:
        taken = (
            {m.id for m in DEFAULT_MODULES} if config.catalog.include_defaults else set()
        )
        for i, module in enumerate(config.catalog.modules):
            if module.id is not None and module.id in taken:
                result.add_error(
                    path=f"catalog.modules[{i}].id",
                    message=f"Module id {module.id} is already used by a built-in module",
                    value=module.id,
                )

    if result.is_valid:
        catalog = config_to_catalog(config)
        if config.screen.module_id not in catalog:
            result.add_error(
                path="screen.module_id",
                message=f"Module {config.screen.module_id} is not in the catalog",
                value=config.screen.module_id,
            )
    return result


def check_screen_advisories(config: LedWallConfiguration) -> ValidationResult:
    """Warn when snapping changes the requested size or overrides are ignored."""
    result = ValidationResult()

    for name in ("width", "height"):
        requested = getattr(config.screen, name)
        snapped = snap_dimension(requested)
        if snapped != requested:
            result.add_warning(
                path=f"screen.{name}",
                message=f"Screen {name} {requested:g} m is snapped to {snapped:g} m",
                suggestion="Use a multiple of 0.5 m to avoid surprises",
            )

    overrides = config.screen.overrides
    for name in ("weight", "pixels_h", "pixels_v"):
        value = getattr(overrides, name)
        if value is not None and not value > 0:
            result.add_warning(
                path=f"screen.overrides.{name}",
                message=f"Override {name}={value!r} is not positive and is ignored",
            )
    return result


def check_rigging_advisories(config: LedWallConfiguration) -> ValidationResult:
    """Check rigging settings against the installation mode."""
    result = ValidationResult()
    rigging = config.rigging
    flown = rigging.installation == InstallationType.FLOWN

    if flown:
        if not is_tabulated_motor_count(rigging.motor_count):
            result.add_warning(
                path="rigging.motor_count",
                message=(
                    f"No measured load split for {rigging.motor_count} motors; "
                    "the load is assumed to be shared evenly"
                ),
                suggestion="Use 2, 3, 4, 5, 6 or 8 motors for a measured distribution",
            )

        stacking = config.stacking
        if any(
            (
                stacking.base_plates,
                stacking.bilite_bases,
                stacking.bilite_1m,
                stacking.bilite_05m,
            )
        ):
            result.add_warning(
                path="stacking",
                message="Stacking hardware is set but the screen is flown",
                suggestion="Remove the stacking section or set installation to stacked",
            )

        selected = sum(length * qty for length, qty in rigging.truss_segments.items())
        required = snap_dimension(config.screen.width)
        if 0 < selected < required:
            result.add_warning(
                path="rigging.truss_segments",
                message=(
                    f"Selected truss ({selected:g} m) is shorter than the "
                    f"screen width ({required:g} m)"
                ),
            )

    if (
        rigging.truss_connection == TrussConnection.BOLT
        and rigging.truss_model != TrussModel.T52
    ):
        result.add_warning(
            path="rigging.truss_connection",
            message="Bolted connections only apply to 52x52 truss",
        )
    return result


def check_load_advisories(config: LedWallConfiguration) -> ValidationResult:
    """Run the calculation and report overloaded motors and layout edge cases."""
    result = ValidationResult()
    catalog = config_to_catalog(config)
    project = config_to_project(config)
    module = catalog.get(project.module_id)
    calculation = LayoutCalculationEngine().calculate(project, module)

    if calculation.is_empty:
        result.add_warning(
            path="screen",
            message=calculation.warnings[0] if calculation.warnings else "Empty layout",
        )
        return result

    for load in calculation.overloaded_motors:
        result.add_warning(
            path="rigging.motor_capacity",
            message=(
                f"Motor {load.index} lifts {load.lift_kg:.1f} kg, above its "
                f"{load.capacity_kg:g} kg capacity"
            ),
            suggestion="Add motors or use motors with a higher capacity",
        )

    full_positions = calculation.cols_full * calculation.rows_full
    if project.special_module_count > full_positions:
        result.add_warning(
            path="special_modules",
            message=(
                f"{project.special_module_count} special modules exceed the "
                f"{full_positions} full module positions"
            ),
        )

    if calculation.aspect_ratio is None:
        result.add_warning(
            path="screen.overrides",
            message="Resolution is zero on one axis; aspect ratio is undefined",
        )
    return result


def validate_config(config: LedWallConfiguration) -> ValidationResult:
    """Perform full validation of a parsed project file.

    Args:
        config: A validated LedWallConfiguration instance

    Returns:
        ValidationResult with all errors and warnings
    """
    result = check_catalog(config)
    if not result.is_valid:
        return result

    result.merge(check_screen_advisories(config))
    result.merge(check_rigging_advisories(config))
    result.merge(check_load_advisories(config))
    return result
