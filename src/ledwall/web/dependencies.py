"""FastAPI dependency injection for LED wall services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from ledwall.application import CalculateLayoutCommand, ModuleCatalog
from ledwall.application.templates import TemplateManager
from ledwall.infrastructure.llm import ModuleSpecLookup, SafetyAdvisor


@lru_cache(maxsize=1)
def get_module_catalog() -> ModuleCatalog:
    """Get the cached built-in module catalog."""
    return ModuleCatalog()


def get_calculate_command(
    catalog: Annotated[ModuleCatalog, Depends(get_module_catalog)],
) -> CalculateLayoutCommand:
    return CalculateLayoutCommand(catalog=catalog)


def get_template_manager() -> TemplateManager:
    return TemplateManager()


def get_safety_advisor() -> SafetyAdvisor:
    return SafetyAdvisor()


def get_spec_lookup() -> ModuleSpecLookup:
    return ModuleSpecLookup()


ModuleCatalogDep = Annotated[ModuleCatalog, Depends(get_module_catalog)]
CalculateCommandDep = Annotated[CalculateLayoutCommand, Depends(get_calculate_command)]
TemplateManagerDep = Annotated[TemplateManager, Depends(get_template_manager)]
SafetyAdvisorDep = Annotated[SafetyAdvisor, Depends(get_safety_advisor)]
SpecLookupDep = Annotated[ModuleSpecLookup, Depends(get_spec_lookup)]
