"""Application commands for running layout calculations."""

from __future__ import annotations

import logging

from ledwall.application.catalog import ModuleCatalog, ModuleNotFoundError
from ledwall.application.dtos import LayoutOutput, ScreenInput
from ledwall.domain import LayoutCalculationEngine, ProjectConfig

logger = logging.getLogger(__name__)


class CalculateLayoutCommand:
    """Command that resolves the module and runs the calculation engine.

    Example:
        >>> command = CalculateLayoutCommand()
        >>> output = command.execute(ProjectConfig())
        >>> output.result.total_modules
        40
    """

    def __init__(
        self,
        catalog: ModuleCatalog | None = None,
        engine: LayoutCalculationEngine | None = None,
    ) -> None:
        """Initialize the command.

        Args:
            catalog: Module catalog, defaults to the built-in modules.
            engine: Calculation engine, a new one by default.
        """
        self.catalog = catalog or ModuleCatalog()
        self.engine = engine or LayoutCalculationEngine()

    def execute(self, project: ProjectConfig, include_plan: bool = True) -> LayoutOutput:
        """Calculate a project.

        Args:
            project: Frozen project configuration.
            include_plan: Also build the tile geometry and cable routes.

        Returns:
            LayoutOutput. An unknown module id is reported in ``errors``.
        """
        try:
            module = self.catalog.get(project.module_id)
        except ModuleNotFoundError as e:
            logger.debug(f"Calculation aborted: {e}")
            return LayoutOutput(project=project, module=None, result=None, errors=[str(e)])

        result = self.engine.calculate(project, module)
        plan = self.engine.plan(project, module) if include_plan else None
        return LayoutOutput(project=project, module=module, result=result, plan=plan)

    def execute_screen(
        self, screen: ScreenInput, base: ProjectConfig | None = None
    ) -> LayoutOutput:
        """Calculate from a screen size, keeping every other setting of ``base``.

        Args:
            screen: Width, height and module id.
            base: Project whose remaining settings are kept (defaults otherwise).

        Returns:
            LayoutOutput with input errors when the screen is invalid.
        """
        errors = screen.validate()
        if errors:
            return LayoutOutput(project=None, module=None, result=None, errors=errors)

        base = base or ProjectConfig()
        project = base.with_changes(
            target_width_m=screen.width, target_height_m=screen.height
        )
        if screen.module_id != base.module_id:
            project = project.with_module(screen.module_id)
        return self.execute(project)
