"""Project file validation endpoints."""

from fastapi import APIRouter

from ledwall.application.config import load_config_from_dict, validate_config
from ledwall.web.schemas.requests import ConfigRequest
from ledwall.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_configuration(request: ConfigRequest) -> ValidationResultSchema:
    """Validate a project file without calculating it.

    Schema errors are returned as a 422 by the ConfigError handler; the
    advisory checks come back as errors and warnings in the body.
    """
    config = load_config_from_dict(request.config)
    result = validate_config(config)

    return ValidationResultSchema(
        is_valid=result.is_valid,
        errors=[{"message": e.message, "path": e.path} for e in result.errors],
        warnings=[
            {"message": w.message, "path": w.path, "suggestion": w.suggestion}
            for w in result.warnings
        ],
    )
