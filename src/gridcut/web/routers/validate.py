"""Configuration validation endpoints."""

from fastapi import APIRouter

from gridcut.application.config import load_config_from_dict, validate_config
from gridcut.web.schemas.requests import ConfigValidateRequest
from gridcut.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_configuration(
    request: ConfigValidateRequest,
) -> ValidationResultSchema:
    """Validate a layout configuration without computing it.

    Raises:
        ConfigError: If the configuration does not match the schema.
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
