"""Pydantic schemas for the REST API."""

from ledwall.web.schemas.requests import (
    AdviseRequest,
    CalculateRequest,
    ConfigRequest,
    ModuleLookupRequest,
)
from ledwall.web.schemas.responses import (
    AdviceSchema,
    CableRouteSchema,
    CalculationResponse,
    CalculationResultSchema,
    ErrorResponseSchema,
    HardwareItemSchema,
    ModuleListSchema,
    ModuleSchema,
    ModuleSpecsSchema,
    MotorLoadSchema,
    RoutedTileSchema,
    RoutesResponse,
    TemplateContentSchema,
    TemplateListItemSchema,
    TemplateListSchema,
    ValidationResultSchema,
)

__all__ = [
    # Requests
    "AdviseRequest",
    "CalculateRequest",
    "ConfigRequest",
    "ModuleLookupRequest",
    # Responses
    "AdviceSchema",
    "CableRouteSchema",
    "CalculationResponse",
    "CalculationResultSchema",
    "ErrorResponseSchema",
    "HardwareItemSchema",
    "ModuleListSchema",
    "ModuleSchema",
    "ModuleSpecsSchema",
    "MotorLoadSchema",
    "RoutedTileSchema",
    "RoutesResponse",
    "TemplateContentSchema",
    "TemplateListItemSchema",
    "TemplateListSchema",
    "ValidationResultSchema",
]
