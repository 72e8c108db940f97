"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from ledwall.domain import InstallationType


class CalculateRequest(BaseModel):
    """Quick calculation from a screen size and module."""

    width: float = Field(..., gt=0, le=200, description="Screen width in metres")
    height: float = Field(..., gt=0, le=100, description="Screen height in metres")
    module_id: int = Field(default=3, ge=1, description="Catalog id of the LED module")
    installation: InstallationType = Field(
        default=InstallationType.FLOWN, description="Flown or stacked"
    )
    motor_count: int = Field(default=2, ge=1, le=32, description="Number of chain motors")
    motor_capacity: float = Field(
        default=1000.0, gt=0, description="Rated capacity per motor in kg"
    )
    safety_factor: float = Field(
        default=1.0, ge=1.0, le=10.0, description="Dynamic load multiplier"
    )


class ConfigRequest(BaseModel):
    """Request carrying a full project file."""

    config: dict[str, Any] = Field(..., description="LED wall project JSON")


class AdviseRequest(BaseModel):
    """Request for a rigging safety analysis."""

    config: dict[str, Any] = Field(..., description="LED wall project JSON")
    language: str = Field(default="English", description="Language of the answer")


class ModuleLookupRequest(BaseModel):
    """Request for an LLM module spec lookup."""

    brand: str = Field(..., min_length=1, description="Module brand")
    model: str = Field(..., min_length=1, description="Module model")
