"""Root configuration schema for LED wall project files."""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
)

from ledwall.application.config.schemas.base import SUPPORTED_VERSIONS
from ledwall.application.config.schemas.catalog_schema import CatalogConfig
from ledwall.application.config.schemas.power_schema import (
    InfrastructureConfig,
    MultiCableConfig,
    PowerConfig,
    RoutesConfig,
)
from ledwall.application.config.schemas.rigging_schema import (
    RiggingConfig,
    StackingConfig,
)
from ledwall.application.config.schemas.screen_schema import (
    ProjectInfoConfig,
    ScreenConfig,
    SpecialModulesConfig,
)


class LedWallConfiguration(BaseModel):
    """Root configuration model for an LED wall project.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        project: Event and client information
        screen: Screen size and module selection
        special_modules: Corner and flex modules
        rigging: Installation mode, truss and motors
        stacking: Ground-support hardware for stacked screens
        power: Voltage and packing intervals
        routes: Data and power cable routes
        multicable: Multi-circuit cable selection
        infrastructure: PDU and video chain (v1.1+)
        catalog: Custom modules (v1.1+)

    Example:
        >>> config = LedWallConfiguration(
        ...     schema_version="1.0",
        ...     screen=ScreenConfig(width=4.0, height=2.5),
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    project: ProjectInfoConfig = Field(default_factory=ProjectInfoConfig)
    screen: ScreenConfig
    special_modules: SpecialModulesConfig = Field(default_factory=SpecialModulesConfig)
    rigging: RiggingConfig = Field(default_factory=RiggingConfig)
    stacking: StackingConfig = Field(default_factory=StackingConfig)
    power: PowerConfig = Field(default_factory=PowerConfig)
    routes: RoutesConfig = Field(default_factory=RoutesConfig)
    multicable: MultiCableConfig = Field(default_factory=MultiCableConfig)
    infrastructure: InfrastructureConfig | None = Field(
        default=None, description="PDU and video chain (optional)"
    )
    catalog: CatalogConfig | None = Field(
        default=None, description="Custom module catalog (optional)"
    )

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported.

        Newer minor versions of a supported major version are accepted.
        """
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )
