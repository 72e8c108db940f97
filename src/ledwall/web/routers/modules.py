"""Module catalog and spec lookup endpoints."""

from fastapi import APIRouter

from ledwall.domain import LedModule
from ledwall.web.dependencies import ModuleCatalogDep, SpecLookupDep
from ledwall.web.schemas.requests import ModuleLookupRequest
from ledwall.web.schemas.responses import (
    ModuleListSchema,
    ModuleSchema,
    ModuleSpecsSchema,
)

router = APIRouter(prefix="/modules", tags=["modules"])


def module_to_schema(module: LedModule) -> ModuleSchema:
    return ModuleSchema(
        id=module.id,
        brand=module.brand,
        model=module.model,
        width_mm=module.width_mm,
        height_mm=module.height_mm,
        weight_kg=module.weight_kg,
        power_w=module.power_w,
        pixels_h=module.pixels_h,
        pixels_v=module.pixels_v,
    )


@router.get("", response_model=ModuleListSchema)
async def list_modules(catalog: ModuleCatalogDep) -> ModuleListSchema:
    """List the built-in module catalog."""
    return ModuleListSchema(
        modules=[module_to_schema(m) for m in catalog.list_modules()]
    )


@router.get("/{module_id}", response_model=ModuleSchema)
async def get_module(module_id: int, catalog: ModuleCatalogDep) -> ModuleSchema:
    """Get one catalog module.

    Raises:
        ModuleNotFoundError: If the id is unknown (handled by exception handler).
    """
    return module_to_schema(catalog.get(module_id))


@router.post("/lookup", response_model=ModuleSpecsSchema)
async def lookup_module(
    request: ModuleLookupRequest,
    service: SpecLookupDep,
) -> ModuleSpecsSchema:
    """Ask the local LLM for a module's technical data.

    Raises:
        ModuleLookupError: If the lookup fails (handled as 502).
    """
    specs = await service.lookup(request.brand, request.model)
    return ModuleSpecsSchema(brand=request.brand, model=request.model, **specs.model_dump())
