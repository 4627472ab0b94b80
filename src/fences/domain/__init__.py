"""Domain layer - core business logic."""

from .catalogue import DEFAULT_CATALOGUE, Catalogue
from .entities import (
    FittingResult,
    Gap,
    GatePlacement,
    PanelPlacement,
    PostPlacement,
    Run,
)
from .services import (
    DEFAULT_SETTINGS,
    BillOfMaterials,
    BomAggregator,
    BomItemType,
    BomLineItem,
    CalculatorSettings,
    GateHardwareConfig,
    RunFitter,
    decompose_shape,
    shared_corner_count,
)
from .shapes import GateConfig, InlineShape, LShape, RectangleShape, ShapeConfig, ShapeType
from .value_objects import (
    GatePanelType,
    PanelCategory,
    PanelSize,
    Point2D,
    PostSpec,
    RunDirection,
    ValidationWarning,
    WarningSeverity,
    WarningType,
)

__all__ = [
    "BillOfMaterials",
    "BomAggregator",
    "BomItemType",
    "BomLineItem",
    "CalculatorSettings",
    "Catalogue",
    "DEFAULT_CATALOGUE",
    "DEFAULT_SETTINGS",
    "FittingResult",
    "Gap",
    "GateConfig",
    "GateHardwareConfig",
    "GatePanelType",
    "GatePlacement",
    "InlineShape",
    "LShape",
    "PanelCategory",
    "PanelPlacement",
    "PanelSize",
    "Point2D",
    "PostPlacement",
    "PostSpec",
    "RectangleShape",
    "Run",
    "RunDirection",
    "RunFitter",
    "ShapeConfig",
    "ShapeType",
    "ValidationWarning",
    "WarningSeverity",
    "WarningType",
    "decompose_shape",
    "shared_corner_count",
]
