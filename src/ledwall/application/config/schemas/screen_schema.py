"""Screen, project metadata and special module configuration schemas."""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
)


class ProjectInfoConfig(BaseModel):
    """Descriptive project information printed on reports.

    Attributes:
        event_name: Event or show name.
        client_name: Client name.
        date: Event date as free text.
        logo: Optional path or URL of a logo image.
    """

    model_config = ConfigDict(extra="forbid")

    event_name: str = Field(default="", max_length=200)
    client_name: str = Field(default="", max_length=200)
    date: str = Field(default="", max_length=50)
    logo: str | None = None


class ModuleOverridesConfig(BaseModel):
    """Per-project overrides of catalog module values.

    Zero or negative values are accepted and mean "use the catalog value".
    """

    model_config = ConfigDict(extra="forbid")

    weight: float | None = Field(default=None, description="Module weight in kg")
    pixels_h: float | None = Field(default=None, description="Horizontal pixels")
    pixels_v: float | None = Field(default=None, description="Vertical pixels")


class ScreenConfig(BaseModel):
    """Requested screen size and module selection.

    Attributes:
        width: Target width in metres, snapped to 0.5 m.
        height: Target height in metres, snapped to 0.5 m.
        module_id: Catalog id of the LED module.
        overrides: Optional module value overrides.
    """

    model_config = ConfigDict(extra="forbid")

    width: float = Field(..., ge=0.0, le=200.0, description="Target width in metres")
    height: float = Field(..., ge=0.0, le=100.0, description="Target height in metres")
    module_id: int = Field(default=3, ge=1)
    overrides: ModuleOverridesConfig = Field(default_factory=ModuleOverridesConfig)


class SpecialModulesConfig(BaseModel):
    """Corner and flex modules that take the place of full modules."""

    model_config = ConfigDict(extra="forbid")

    corner_left: int = Field(default=0, ge=0)
    corner_right: int = Field(default=0, ge=0)
    flex: int = Field(default=0, ge=0)
