"""Value objects for the fence domain.

Immutable data types shared by the catalogue, the layout services and the
bill of materials. All lengths are in millimetres and all prices are in AUD
excluding GST.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PanelCategory(str, Enum):
    """Catalogue family a glass panel belongs to."""

    STANDARD = "standard"
    GATE = "gate"
    HINGE = "hinge"


class GatePanelType(str, Enum):
    """Glass used for a gate leaf."""

    STANDARD_8MM = "standard-8mm"
    HYDRAULIC_WALL_12MM = "hydraulic-wall-12mm"
    HYDRAULIC_120_12MM = "hydraulic-120-12mm"


class RunDirection(str, Enum):
    """Direction a run is drawn in, used by schematic consumers."""

    RIGHT = "right"
    DOWN = "down"
    LEFT = "left"
    UP = "up"


class MountType(str, Enum):
    """How a spigot is fixed to the ground."""

    CORE_DRILLED = "core-drilled"
    BASE_PLATED = "base-plated"


class HardwareCategory(str, Enum):
    """Gate hardware families."""

    HINGE = "hinge"
    LATCH = "latch"


class WarningType(str, Enum):
    """Kinds of validation warnings produced while fitting a run."""

    GAP_EXCEEDS_LIMIT = "GAP_EXCEEDS_LIMIT"
    RUN_TOO_SHORT = "RUN_TOO_SHORT"
    NO_VALID_FIT = "NO_VALID_FIT"
    GAP_TOO_NARROW = "GAP_TOO_NARROW"
    GATE_POSITION_INVALID = "GATE_POSITION_INVALID"


class WarningSeverity(str, Enum):
    """How serious a validation warning is."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True)
class Point2D:
    """2D point in plan coordinates (mm). Negative values are valid."""

    x: float
    y: float


@dataclass(frozen=True)
class PanelSize:
    """A glass panel as listed in the catalogue.

    Attributes:
        width: Panel width in mm.
        height: Panel height in mm.
        handle: Stable catalogue handle (e.g. "gp-12mm-1200mm").
        category: Catalogue family.
        price: Unit price in AUD ex GST.
    """

    width: float
    height: float
    handle: str
    category: PanelCategory
    price: float

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Panel dimensions must be positive")
        if not self.handle:
            raise ValueError("Panel handle must not be empty")
        if self.price < 0:
            raise ValueError("Panel price must be non-negative")

    @property
    def glass_thickness(self) -> int:
        """Glass thickness in mm (gate leaves are 8mm, everything else 12mm)."""
        return 8 if self.category == PanelCategory.GATE else 12

    @property
    def description(self) -> str:
        """Human-readable description used on BOM lines."""
        kind = {
            PanelCategory.STANDARD: "Glass Panel",
            PanelCategory.GATE: "Glass Gate Panel",
            PanelCategory.HINGE: "Glass Hinge Panel",
        }[self.category]
        return (
            f"{self.glass_thickness}mm {kind} "
            f"{self.width:.0f}mm × {self.height:.0f}mm"
        )


@dataclass(frozen=True)
class PostSpec:
    """A spigot (post) as listed in the catalogue.

    Attributes:
        handle: Stable catalogue handle.
        description: Human-readable name.
        mount_type: Core drilled or base plated.
        price: Unit price in AUD ex GST.
        body_width: Width of the spigot body in mm.
    """

    handle: str
    description: str
    mount_type: MountType
    price: float
    body_width: float

    def __post_init__(self) -> None:
        if not self.handle:
            raise ValueError("Post handle must not be empty")
        if self.body_width <= 0:
            raise ValueError("Post body width must be positive")
        if self.price < 0:
            raise ValueError("Post price must be non-negative")


@dataclass(frozen=True)
class HardwareSpec:
    """Gate hardware (hinge pair, latch kit) as listed in the catalogue."""

    handle: str
    description: str
    category: HardwareCategory
    price: float


@dataclass(frozen=True)
class ValidationWarning:
    """A non-fatal problem found while fitting a run.

    Warnings are plain values; they are collected and reported, never raised.

    Attributes:
        warning_type: What kind of problem this is.
        severity: How serious the problem is.
        message: Human-readable description.
        position: Offset along the run (mm) where the problem occurs, if any.
    """

    warning_type: WarningType
    severity: WarningSeverity
    message: str
    position: float | None = None

    def __post_init__(self) -> None:
        if not self.message:
            raise ValueError("message must not be empty")

    @property
    def is_error(self) -> bool:
        """Check if this warning has error severity."""
        return self.severity == WarningSeverity.ERROR


__all__ = [
    "GatePanelType",
    "HardwareCategory",
    "HardwareSpec",
    "MountType",
    "PanelCategory",
    "PanelSize",
    "Point2D",
    "PostSpec",
    "RunDirection",
    "ValidationWarning",
    "WarningSeverity",
    "WarningType",
]
