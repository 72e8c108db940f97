"""Application layer: catalog, commands, configuration and templates."""

from ledwall.application.catalog import (
    DEFAULT_MODULES,
    ModuleCatalog,
    ModuleNotFoundError,
)
from ledwall.application.commands import CalculateLayoutCommand
from ledwall.application.dtos import LayoutOutput, ScreenInput

__all__ = [
    "DEFAULT_MODULES",
    "CalculateLayoutCommand",
    "LayoutOutput",
    "ModuleCatalog",
    "ModuleNotFoundError",
    "ScreenInput",
]
