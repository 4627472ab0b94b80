"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class PointSchema(BaseModel):
    x: float
    y: float


class RunGateSchema(BaseModel):
    position: float
    width: float
    panel_type: str


class RunSchema(BaseModel):
    """A straight run of the fence."""

    run_id: str = Field(..., description="Run identifier, e.g. run-1 or side-3")
    length: float = Field(..., description="Run length in mm")
    start: PointSchema
    end: PointSchema
    direction: str
    gate: RunGateSchema | None = None


class PanelPlacementSchema(BaseModel):
    handle: str
    width: float
    start: float
    end: float


class GapSchema(BaseModel):
    start: float
    end: float
    width: float
    compliant: bool


class PostPlacementSchema(BaseModel):
    position: float
    shared: bool


class GatePlacementSchema(BaseModel):
    start: float
    end: float
    width: float
    panel_type: str


class WarningSchema(BaseModel):
    """A problem found while fitting a run."""

    type: str = Field(..., description="Warning type, e.g. GAP_EXCEEDS_LIMIT")
    severity: str
    message: str
    position: float | None = Field(
        default=None, description="Offset along the run in mm"
    )


class FittingResultSchema(BaseModel):
    """Layout of one run."""

    run_id: str
    success: bool
    panels: list[PanelPlacementSchema] = Field(default_factory=list)
    gaps: list[GapSchema] = Field(default_factory=list)
    posts: list[PostPlacementSchema] = Field(default_factory=list)
    gate: GatePlacementSchema | None = None
    warnings: list[WarningSchema] = Field(default_factory=list)


class BomLineItemSchema(BaseModel):
    type: str
    handle: str
    description: str
    quantity: int
    unit_price: float
    line_total: float


class BillOfMaterialsSchema(BaseModel):
    """Priced bill of materials."""

    items: list[BomLineItemSchema] = Field(default_factory=list)
    subtotal: float
    tax: float
    total: float
    warnings: list[WarningSchema] = Field(default_factory=list)


class CalculationResponseSchema(BaseModel):
    """Response for a fence calculation."""

    success: bool = Field(..., description="True when every run is compliant")
    runs: list[RunSchema]
    fitting_results: list[FittingResultSchema]
    bom: BillOfMaterialsSchema


class ValidationResultSchema(BaseModel):
    """Response for configuration validation."""

    is_valid: bool = Field(..., description="Whether configuration is valid")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )
    warnings: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation warnings"
    )


class CataloguePanelSchema(BaseModel):
    handle: str
    width: float
    height: float
    price: float


class CataloguePostSchema(BaseModel):
    handle: str
    description: str
    mount_type: str
    price: float


class CatalogueSchema(BaseModel):
    """Products available for layouts."""

    standard_panels: list[CataloguePanelSchema]
    gate_panels: list[CataloguePanelSchema]
    hinge_panels: list[CataloguePanelSchema]
    posts: list[CataloguePostSchema]


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error type identifier")
    details: list[dict[str, Any]] | dict[str, Any] | None = Field(
        default=None, description="Additional error details"
    )
