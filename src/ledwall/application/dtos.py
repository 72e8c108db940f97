"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from ledwall.domain import (
    CalculationResult,
    LayoutPlan,
    LedModule,
    ProjectConfig,
)


@dataclass
class ScreenInput:
    """Input DTO for a quick calculation from screen size and module."""

    width: float
    height: float
    module_id: int = 3

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        if self.width <= 0:
            errors.append("Width must be positive")
        if self.height <= 0:
            errors.append("Height must be positive")
        if self.width > 200:
            errors.append("Width exceeds maximum (200 m)")
        if self.height > 100:
            errors.append("Height exceeds maximum (100 m)")
        return errors


@dataclass
class LayoutOutput:
    """Output DTO bundling a calculation with its inputs and geometry.

    Attributes:
        project: Configuration snapshot that was calculated.
        module: Module used for the calculation.
        result: Calculation result, None when inputs were invalid.
        plan: Tile geometry and cable routes, None when inputs were invalid.
        errors: Input errors that prevented the calculation.
    """

    project: ProjectConfig | None
    module: LedModule | None
    result: CalculationResult | None
    plan: LayoutPlan | None = None
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the calculation ran without input errors."""
        return len(self.errors) == 0 and self.result is not None
