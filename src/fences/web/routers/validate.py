"""Configuration validation endpoints."""

from fastapi import APIRouter

from fences.application.config import (
    ConfigError,
    load_config_from_dict,
    validate_config,
)
from fences.web.schemas.requests import ConfigValidateRequest
from fences.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
def validate_configuration(request: ConfigValidateRequest) -> ValidationResultSchema:
    """Validate a fence configuration without calculating it.

    Schema violations are reported as errors in the response body rather
    than as an error status.
    """
    try:
        config = load_config_from_dict(request.config)
    except ConfigError as e:
        return ValidationResultSchema(
            is_valid=False,
            errors=[
                {"message": d.get("message", e.message), "path": d.get("path", "")}
                for d in e.details
            ]
            or [{"message": e.message, "path": ""}],
        )

    result = validate_config(config)
    return ValidationResultSchema(
        is_valid=result.is_valid,
        errors=[{"message": err.message, "path": err.path} for err in result.errors],
        warnings=[
            {"message": w.message, "path": w.path, "suggestion": w.suggestion}
            for w in result.warnings
        ],
    )
