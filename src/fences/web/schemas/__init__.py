"""Pydantic schemas for the REST API."""

from fences.web.schemas.requests import CalculateRequest, ConfigValidateRequest
from fences.web.schemas.responses import (
    BillOfMaterialsSchema,
    BomLineItemSchema,
    CalculationResponseSchema,
    CatalogueSchema,
    ErrorResponseSchema,
    FittingResultSchema,
    RunSchema,
    ValidationResultSchema,
    WarningSchema,
)

__all__ = [
    "BillOfMaterialsSchema",
    "BomLineItemSchema",
    "CalculateRequest",
    "CalculationResponseSchema",
    "CatalogueSchema",
    "ConfigValidateRequest",
    "ErrorResponseSchema",
    "FittingResultSchema",
    "RunSchema",
    "ValidationResultSchema",
    "WarningSchema",
]
