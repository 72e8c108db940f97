"""Custom LED module catalog schemas."""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    model_validator,
)


class ModuleConfig(BaseModel):
    """A custom LED module added to the catalog.

    Attributes:
        id: Optional catalog id; the next free id is used when omitted.
        brand: Manufacturer.
        model: Model name.
        width_mm: Panel width in millimetres.
        height_mm: Panel height in millimetres.
        weight_kg: Panel weight in kilograms.
        power_w: Maximum power draw in watts.
        pixels_h: Horizontal pixel count.
        pixels_v: Vertical pixel count.
    """

    model_config = ConfigDict(extra="forbid")

    id: int | None = Field(default=None, ge=1)
    brand: str = Field(..., min_length=1, max_length=100)
    model: str = Field(..., min_length=1, max_length=100)
    width_mm: float = Field(default=500.0, gt=0.0, le=5000.0)
    height_mm: float = Field(default=500.0, gt=0.0, le=5000.0)
    weight_kg: float = Field(default=10.0, ge=0.0)
    power_w: float = Field(default=150.0, ge=0.0)
    pixels_h: int = Field(default=100, ge=0)
    pixels_v: int = Field(default=100, ge=0)


class CatalogConfig(BaseModel):
    """Catalog section of a project file.

    Attributes:
        include_defaults: Start from the built-in module list.
        modules: Additional custom modules.
    """

    model_config = ConfigDict(extra="forbid")

    include_defaults: bool = True
    modules: list[ModuleConfig] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_unique_ids(self) -> "CatalogConfig":
        """Reject custom modules that repeat an explicit id."""
        ids = [m.id for m in self.modules if m.id is not None]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise ValueError(f"Duplicate custom module ids: {duplicates}")
        return self
