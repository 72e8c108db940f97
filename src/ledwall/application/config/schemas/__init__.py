"""Configuration schema models for LED wall project files.

The schemas are organized into the following modules:
- base.py: Version constants and shared validators
- screen_schema.py: Project info, screen and special modules
- rigging_schema.py: Rigging and stacking
- power_schema.py: Power, routes, multi-cable and infrastructure
- catalog_schema.py: Custom modules
- root.py: Root configuration model
"""

from ledwall.application.config.schemas.base import (
    SUPPORTED_VERSIONS as SUPPORTED_VERSIONS,
)
from ledwall.application.config.schemas.catalog_schema import (
    CatalogConfig as CatalogConfig,
    ModuleConfig as ModuleConfig,
)
from ledwall.application.config.schemas.power_schema import (
    InfrastructureConfig as InfrastructureConfig,
    MultiCableConfig as MultiCableConfig,
    PduConfig as PduConfig,
    PowerConfig as PowerConfig,
    RouteConfigSchema as RouteConfigSchema,
    RoutesConfig as RoutesConfig,
    VideoConfig as VideoConfig,
)
from ledwall.application.config.schemas.rigging_schema import (
    HardwareWeightsConfig as HardwareWeightsConfig,
    RiggingConfig as RiggingConfig,
    StackingConfig as StackingConfig,
)
from ledwall.application.config.schemas.root import (
    LedWallConfiguration as LedWallConfiguration,
)
from ledwall.application.config.schemas.screen_schema import (
    ModuleOverridesConfig as ModuleOverridesConfig,
    ProjectInfoConfig as ProjectInfoConfig,
    ScreenConfig as ScreenConfig,
    SpecialModulesConfig as SpecialModulesConfig,
)
