"""Pydantic models for LLM responses."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModuleSpecs(BaseModel):
    """Technical data of an LED module as returned by the spec lookup.

    Every field is required and must be positive; a response with a
    missing or zero value is rejected rather than filled in.
    """

    model_config = ConfigDict(extra="ignore")

    width_mm: float = Field(..., gt=0, description="Module width in millimetres")
    height_mm: float = Field(..., gt=0, description="Module height in millimetres")
    weight_kg: float = Field(..., gt=0, description="Module weight in kilograms")
    max_power_w: float = Field(..., gt=0, description="Maximum power draw in watts")
    pixels_h: int = Field(..., gt=0, description="Horizontal pixels per module")
    pixels_v: int = Field(..., gt=0, description="Vertical pixels per module")
