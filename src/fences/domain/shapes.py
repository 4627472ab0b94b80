"""Fence shape descriptions.

A shape is a closed set of variants, each carrying only the fields that are
meaningful for its geometry. ``ShapeConfig`` is the union of the variants and
is dispatched on with ``match`` by the geometry service.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .value_objects import GatePanelType


class ShapeType(str, Enum):
    """Tag identifying a shape variant."""

    INLINE = "inline"
    L_SHAPE = "l-shape"
    RECTANGLE = "rectangle"


@dataclass(frozen=True)
class GateConfig:
    """A gate opening on a run.

    Position and width are validated against the run by the gap validator,
    not here, so that an inconsistent gate is reported as a warning rather
    than rejected outright.

    Attributes:
        position: Distance in mm from the start of the run to the gate.
        width: Gate opening width in mm.
        panel_type: Glass used for the gate leaf.
        side: Side of a multi-run shape the gate sits on (1-based).
    """

    position: float
    width: float
    panel_type: GatePanelType = GatePanelType.STANDARD_8MM
    side: int | None = None

    @property
    def end(self) -> float:
        """Offset of the far edge of the gate opening."""
        return self.position + self.width

    def without_side(self) -> "GateConfig":
        """Copy of this gate as attached to a single run."""
        return GateConfig(
            position=self.position,
            width=self.width,
            panel_type=self.panel_type,
        )


def _check_gate_side(gate: GateConfig | None, sides: int) -> None:
    if gate is None:
        return
    if gate.side is None or not 1 <= gate.side <= sides:
        raise ValueError(f"Gate side must be between 1 and {sides}, got {gate.side}")


@dataclass(frozen=True)
class InlineShape:
    """A single straight run."""

    length: float
    gate: GateConfig | None = None

    @property
    def shape_type(self) -> ShapeType:
        return ShapeType.INLINE


@dataclass(frozen=True)
class LShape:
    """Two perpendicular runs sharing one corner."""

    side1_length: float
    side2_length: float
    gate: GateConfig | None = None

    def __post_init__(self) -> None:
        _check_gate_side(self.gate, 2)

    @property
    def shape_type(self) -> ShapeType:
        return ShapeType.L_SHAPE


@dataclass(frozen=True)
class RectangleShape:
    """Four runs forming a closed rectangle."""

    width: float
    height: float
    gate: GateConfig | None = None

    def __post_init__(self) -> None:
        _check_gate_side(self.gate, 4)

    @property
    def shape_type(self) -> ShapeType:
        return ShapeType.RECTANGLE


ShapeConfig = Union[InlineShape, LShape, RectangleShape]


__all__ = [
    "GateConfig",
    "InlineShape",
    "LShape",
    "RectangleShape",
    "ShapeConfig",
    "ShapeType",
]
