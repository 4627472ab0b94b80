"""Domain services for fence layout and billing."""

from .bom import BillOfMaterials, BomAggregator, BomItemType, BomLineItem, round_cents
from .config import (
    DEFAULT_SETTINGS,
    DEFAULT_TAX_RATE,
    CalculatorSettings,
    GateHardwareConfig,
)
from .gap_validator import validate_gaps, validate_gate_position, validate_run_length
from .geometry import decompose_shape, shared_corner_count
from .run_fitter import RunFitter, fit_run

__all__ = [
    "BillOfMaterials",
    "BomAggregator",
    "BomItemType",
    "BomLineItem",
    "CalculatorSettings",
    "DEFAULT_SETTINGS",
    "DEFAULT_TAX_RATE",
    "GateHardwareConfig",
    "RunFitter",
    "decompose_shape",
    "fit_run",
    "round_cents",
    "shared_corner_count",
    "validate_gaps",
    "validate_gate_position",
    "validate_run_length",
]
