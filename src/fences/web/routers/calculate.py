"""Fence calculation endpoints."""

from fastapi import APIRouter, Query
from fastapi.responses import PlainTextResponse

from fences.application.commands import CalculateFenceCommand
from fences.application.config import config_to_input, load_config_from_dict
from fences.application.dtos import CalculatorOutput
from fences.infrastructure.exporters import OUTPUT_FORMATS, BomExporter, output_to_dict
from fences.web.dependencies import CalculateCommandDep
from fences.web.exceptions import UnsupportedFormatError
from fences.web.schemas.requests import CalculateRequest
from fences.web.schemas.responses import CalculationResponseSchema, ErrorResponseSchema

router = APIRouter(prefix="/calculate", tags=["calculate"])

MEDIA_TYPES: dict[str, str] = {
    "text": "text/plain",
    "csv": "text/csv",
    "json": "application/json",
}


def _run(request: CalculateRequest, command: CalculateFenceCommand) -> CalculatorOutput:
    config = load_config_from_dict(request.config)
    return command.execute(config_to_input(config))


@router.post(
    "",
    response_model=CalculationResponseSchema,
    responses={422: {"model": ErrorResponseSchema}},
)
def calculate_fence(
    request: CalculateRequest,
    command: CalculateCommandDep,
) -> CalculationResponseSchema:
    """Lay out and price a fence.

    A non-compliant layout is still a successful response; check
    ``success`` and the warnings. Configuration errors return 422.
    """
    output = _run(request, command)
    return CalculationResponseSchema.model_validate(output_to_dict(output))


@router.post(
    "/bom",
    response_class=PlainTextResponse,
    responses={400: {"model": ErrorResponseSchema}, 422: {"model": ErrorResponseSchema}},
)
def calculate_bom(
    request: CalculateRequest,
    command: CalculateCommandDep,
    bom_format: str = Query(
        default="text", alias="format", description="BOM format: text, csv, json"
    ),
) -> PlainTextResponse:
    """Calculate a fence and return only its bill of materials."""
    if bom_format not in OUTPUT_FORMATS:
        raise UnsupportedFormatError(bom_format, list(OUTPUT_FORMATS))

    output = _run(request, command)
    content = BomExporter(output_format=bom_format).export_string(output)
    return PlainTextResponse(content=content, media_type=MEDIA_TYPES[bom_format])
