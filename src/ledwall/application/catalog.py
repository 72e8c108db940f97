"""LED module catalog.

The catalog is seeded with common rental-stock panels. Entries are
immutable; adding or removing a module replaces the entry list, so a
calculation holding a module snapshot never sees a partial change.
"""

from __future__ import annotations

import logging

from ledwall.domain import LedModule

logger = logging.getLogger(__name__)


class ModuleNotFoundError(Exception):
    """Raised when a module id is not in the catalog."""

    def __init__(self, module_id: int) -> None:
        self.module_id = module_id
        super().__init__(f"Module not found: {module_id}")


DEFAULT_MODULES: tuple[LedModule, ...] = (
    LedModule(1, "Generic", "P3.91 Indoor", 500, 500, 8.5, 150, 128, 128),
    LedModule(2, "Generic", "P2.6 Indoor", 500, 500, 7.5, 140, 192, 192),
    LedModule(3, "Absen", "PL2.5 Pro", 500, 500, 7.5, 130, 200, 200),
    LedModule(4, "Absen", "PL2.5 Lite", 500, 500, 6.5, 120, 200, 200),
    LedModule(5, "Absen", "PL3.9 Lite", 500, 1000, 14.0, 250, 128, 256),
    LedModule(6, "ROE", "Black Pearl BP2V2", 500, 500, 9.4, 180, 176, 176),
    LedModule(7, "ROE", "Carbon CB3", 600, 1200, 13.8, 300, 160, 320),
    LedModule(8, "Gloshine", "Legend 3.9", 500, 1000, 11.0, 200, 128, 256),
)

# Values used for fields missing when a module is added by hand
NEW_MODULE_DEFAULTS: dict[str, float] = {
    "width_mm": 500,
    "height_mm": 500,
    "weight_kg": 10,
    "power_w": 150,
    "pixels_h": 100,
    "pixels_v": 100,
}


class ModuleCatalog:
    """In-memory catalog of LED modules.

    Example:
        >>> catalog = ModuleCatalog()
        >>> catalog.get(3).model
        'PL2.5 Pro'
        >>> module = catalog.add("Acme", "X1", width_mm=500, height_mm=1000)
        >>> module.id
        9
    """

    def __init__(self, modules: tuple[LedModule, ...] | list[LedModule] | None = None) -> None:
        self._modules: tuple[LedModule, ...] = tuple(
            DEFAULT_MODULES if modules is None else modules
        )

    def __len__(self) -> int:
        return len(self._modules)

    def __contains__(self, module_id: object) -> bool:
        return any(m.id == module_id for m in self._modules)

    def list_modules(self) -> tuple[LedModule, ...]:
        """Snapshot of all catalog entries."""
        return self._modules

    def get(self, module_id: int) -> LedModule:
        """Look up a module by id.

        Raises:
            ModuleNotFoundError: If no module has this id.
        """
        for module in self._modules:
            if module.id == module_id:
                return module
        raise ModuleNotFoundError(module_id)

    def get_or_first(self, module_id: int) -> LedModule:
        """Look up a module, falling back to the first entry."""
        try:
            return self.get(module_id)
        except ModuleNotFoundError:
            if not self._modules:
                raise
            fallback = self._modules[0]
            logger.warning(
                f"Module {module_id} not in catalog, using {fallback.name}"
            )
            return fallback

    def find(self, brand: str, model: str) -> LedModule | None:
        """Case-insensitive lookup by brand and model."""
        for module in self._modules:
            if (
                module.brand.lower() == brand.lower()
                and module.model.lower() == model.lower()
            ):
                return module
        return None

    def next_id(self) -> int:
        return max((m.id for m in self._modules), default=0) + 1

    def add(
        self,
        brand: str,
        model: str,
        width_mm: float | None = None,
        height_mm: float | None = None,
        weight_kg: float | None = None,
        power_w: float | None = None,
        pixels_h: int | None = None,
        pixels_v: int | None = None,
    ) -> LedModule:
        """Add a module, filling missing fields with defaults.

        Returns:
            The new catalog entry with the next free id.
        """
        values = {
            "width_mm": width_mm,
            "height_mm": height_mm,
            "weight_kg": weight_kg,
            "power_w": power_w,
            "pixels_h": pixels_h,
            "pixels_v": pixels_v,
        }
        filled = {
            key: NEW_MODULE_DEFAULTS[key] if value is None else value
            for key, value in values.items()
        }
        module = LedModule(
            id=self.next_id(),
            brand=brand,
            model=model,
            width_mm=filled["width_mm"],
            height_mm=filled["height_mm"],
            weight_kg=filled["weight_kg"],
            power_w=filled["power_w"],
            pixels_h=int(filled["pixels_h"]),
            pixels_v=int(filled["pixels_v"]),
        )
        self._modules = self._modules + (module,)
        logger.info(f"Added module {module.id}: {module.name}")
        return module

    def add_module(self, module: LedModule) -> LedModule:
        """Add an existing module entry, keeping its id.

        Raises:
            ValueError: If the id is already used.
        """
        if module.id in self:
            raise ValueError(f"Module id {module.id} already in catalog")
        self._modules = self._modules + (module,)
        return module

    def remove(self, module_id: int) -> LedModule:
        """Remove a module from the catalog.

        Raises:
            ModuleNotFoundError: If no module has this id.
        """
        module = self.get(module_id)
        self._modules = tuple(m for m in self._modules if m.id != module_id)
        logger.info(f"Removed module {module_id}: {module.name}")
        return module
