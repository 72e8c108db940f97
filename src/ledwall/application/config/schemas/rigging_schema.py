"""Rigging and stacking configuration schemas."""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
)

from ledwall.application.config.schemas.base import validate_quantities
from ledwall.domain.value_objects import (
    InstallationType,
    TrussConnection,
    TrussModel,
)


class HardwareWeightsConfig(BaseModel):
    """Unit weights of rigging hardware in kilograms."""

    model_config = ConfigDict(extra="forbid")

    bumper_1m: float = Field(default=12.0, ge=0.0)
    bumper_05m: float = Field(default=6.0, ge=0.0)
    sling: float = Field(default=2.0, ge=0.0)
    shackle: float = Field(default=0.5, ge=0.0)


class RiggingConfig(BaseModel):
    """Rigging configuration.

    Attributes:
        installation: Flown (motors) or stacked (ground supported).
        truss_model: Truss profile, selects the weight per metre.
        truss_connection: Joint type for 52x52 truss.
        truss_segments: Selected truss segments as length (m) -> quantity.
        motor_count: Number of chain motors, minimum 2 is enforced.
        motor_capacity: Rated capacity of each motor in kg.
        motor_weight: Self weight of each motor in kg.
        sling_length: Sling length in metres.
        safety_factor: Dynamic load multiplier, at least 1.
        hardware_weights: Bumper, sling and shackle unit weights.
    """

    model_config = ConfigDict(extra="forbid")

    installation: InstallationType = InstallationType.FLOWN
    truss_model: TrussModel = TrussModel.T40
    truss_connection: TrussConnection = TrussConnection.SPIGOT
    truss_segments: dict[float, int] = Field(default_factory=dict)
    motor_count: int = Field(default=2, ge=1, le=32)
    motor_capacity: float = Field(default=1000.0, gt=0.0, description="kg per motor")
    motor_weight: float = Field(default=50.0, ge=0.0, description="kg per motor")
    sling_length: float = Field(default=1.5, ge=0.0)
    safety_factor: float = Field(default=1.0, ge=1.0, le=10.0)
    hardware_weights: HardwareWeightsConfig = Field(
        default_factory=HardwareWeightsConfig
    )

    @field_validator("truss_segments")
    @classmethod
    def validate_truss_segments(cls, v: dict[float, int]) -> dict[float, int]:
        """Ensure segment lengths are positive and quantities non-negative."""
        return validate_quantities(v, "truss_segments")


class StackingConfig(BaseModel):
    """Ground-support hardware for stacked installations."""

    model_config = ConfigDict(extra="forbid")

    base_plates: int = Field(default=0, ge=0)
    bilite_bases: int = Field(default=0, ge=0)
    bilite_1m: int = Field(default=0, ge=0)
    bilite_05m: int = Field(default=0, ge=0)
