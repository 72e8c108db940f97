"""Project file schema, loading, adaptation and validation.

Public API:
    - LedWallConfiguration: Root configuration model
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - ConfigError: Exception for configuration errors
    - config_to_project: Convert a configuration into a ProjectConfig
    - config_to_catalog: Build the module catalog for a configuration
    - validate_config: Perform full configuration validation
    - ValidationResult, ValidationError, ValidationWarning: Validation results

Example:
    >>> from pathlib import Path
    >>> from ledwall.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("main-stage.json"))
    ...     print(f"Screen: {config.screen.width}x{config.screen.height} m")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from ledwall.application.config.adapter import (
    config_to_catalog,
    config_to_project,
    module_config_to_module,
)
from ledwall.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from ledwall.application.config.schemas import (
    SUPPORTED_VERSIONS,
    CatalogConfig,
    HardwareWeightsConfig,
    InfrastructureConfig,
    LedWallConfiguration,
    ModuleConfig,
    ModuleOverridesConfig,
    MultiCableConfig,
    PduConfig,
    PowerConfig,
    ProjectInfoConfig,
    RiggingConfig,
    RouteConfigSchema,
    RoutesConfig,
    ScreenConfig,
    SpecialModulesConfig,
    StackingConfig,
    VideoConfig,
)
from ledwall.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_config,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "CatalogConfig",
    "ConfigError",
    "HardwareWeightsConfig",
    "InfrastructureConfig",
    "LedWallConfiguration",
    "ModuleConfig",
    "ModuleOverridesConfig",
    "MultiCableConfig",
    "PduConfig",
    "PowerConfig",
    "ProjectInfoConfig",
    "RiggingConfig",
    "RouteConfigSchema",
    "RoutesConfig",
    "ScreenConfig",
    "SpecialModulesConfig",
    "StackingConfig",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "VideoConfig",
    "config_to_catalog",
    "config_to_project",
    "load_config",
    "load_config_from_dict",
    "module_config_to_module",
    "validate_config",
]
