"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class ModuleSchema(BaseModel):
    """LED module catalog entry."""

    id: int = Field(..., description="Catalog id")
    brand: str = Field(..., description="Manufacturer")
    model: str = Field(..., description="Model name")
    width_mm: float = Field(..., description="Width in millimetres")
    height_mm: float = Field(..., description="Height in millimetres")
    weight_kg: float = Field(..., description="Weight in kilograms")
    power_w: float = Field(..., description="Maximum power in watts")
    pixels_h: int = Field(..., description="Horizontal pixels")
    pixels_v: int = Field(..., description="Vertical pixels")


class ModuleListSchema(BaseModel):
    """Response for module listing."""

    modules: list[ModuleSchema] = Field(..., description="Catalog modules")


class MotorLoadSchema(BaseModel):
    """Load on one chain motor."""

    index: int = Field(..., description="Motor position from the left, from 1")
    share: float = Field(..., description="Fraction of the suspended load")
    lift_kg: float = Field(..., description="Lift load including safety factor")
    self_kg: float = Field(..., description="Motor self weight")
    total_kg: float = Field(..., description="Lift plus self weight")
    capacity_kg: float = Field(..., description="Rated capacity")
    utilization: float = Field(..., description="Lift load as a fraction of capacity")
    status: str = Field(..., description="ok, near_limit or overloaded")


class HardwareItemSchema(BaseModel):
    """Hardware list line."""

    name: str
    quantity: int
    category: str
    notes: str = ""


class CalculationResultSchema(BaseModel):
    """Flat calculation result; weights in kg, lengths in metres."""

    cols: int
    rows: int
    cols_full: int
    rows_full: int
    has_half_col: bool
    has_half_row: bool
    total_modules: int
    modules_full: int
    modules_half: int
    modules_quarter: int
    modules_special: int
    real_width_m: float
    real_height_m: float
    area_m2: float
    resolution_x: int
    resolution_y: int
    aspect_ratio: str | None
    weight_screen: float
    weight_rigging: float
    weight_cables: float
    weight_suspended: float
    weight_motors: float
    weight_total: float
    weight_total_factored: float
    power_total_w: float
    amps_total: float
    amps_3phase: float
    power_lines: int
    data_lines: int
    bumpers_1m: int
    bumpers_05m: int
    required_truss_m: int
    selected_truss_m: float
    truss_spigots: int
    truss_pins: int
    stack_half_couplers: int
    stack_pins: int
    required_multicables: int
    selected_multicables: int
    total_breakouts: int
    fly_cases_main: int
    fly_cases_small: int
    power_links: int
    data_links: int
    motor_loads: list[MotorLoadSchema] = Field(default_factory=list)
    hardware: list[HardwareItemSchema] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


class CalculationResponse(BaseModel):
    """Response for a layout calculation."""

    module: ModuleSchema = Field(..., description="Module used")
    result: CalculationResultSchema = Field(..., description="Calculation result")


class RoutedTileSchema(BaseModel):
    """One tile of a cable route with its geometry."""

    order: int
    col: int
    row: int
    kind: str
    x: float
    y: float
    width: float
    height: float
    group: int
    label: str
    color: str
    is_feed: bool


class CableRouteSchema(BaseModel):
    """Data or power route."""

    kind: str
    pattern: str
    axis: str
    start: str
    interval: int
    lines: int
    tiles: list[RoutedTileSchema]


class RoutesResponse(BaseModel):
    """Response with the tile grid and both cable routes."""

    cols: int
    rows: int
    width_m: float
    height_m: float
    data: CableRouteSchema
    power: CableRouteSchema


class ValidationResultSchema(BaseModel):
    """Response for configuration validation."""

    is_valid: bool = Field(..., description="Whether configuration is valid")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )
    warnings: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation warnings"
    )


class TemplateListItemSchema(BaseModel):
    name: str = Field(..., description="Template name")
    description: str = Field(..., description="Template description")


class TemplateListSchema(BaseModel):
    templates: list[TemplateListItemSchema] = Field(..., description="Available templates")


class TemplateContentSchema(BaseModel):
    name: str = Field(..., description="Template name")
    description: str = Field(..., description="Template description")
    content: dict[str, Any] = Field(..., description="Template project content")


class AdviceSchema(BaseModel):
    """Response for a safety analysis."""

    summary: str = Field(..., description="Installation summary sent to the advisor")
    analysis: str = Field(..., description="Advisor answer")


class ModuleSpecsSchema(BaseModel):
    """Response for a module spec lookup."""

    brand: str
    model: str
    width_mm: float
    height_mm: float
    weight_kg: float
    max_power_w: float
    pixels_h: int
    pixels_v: int


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error type identifier")
    details: list[dict[str, Any]] | dict[str, Any] | None = Field(
        default=None, description="Additional error details"
    )
