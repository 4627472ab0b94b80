"""Shape decomposition into independent runs.

- Inline    -> 1 run
- L-shape   -> 2 runs, 1 shared corner
- Rectangle -> 4 runs, 4 shared corners

Each run is fitted on its own. Corner spigots are computed by both adjacent
runs and de-duplicated at BOM time using ``shared_corner_count``.
"""

from __future__ import annotations

from ..entities import Run
from ..shapes import GateConfig, InlineShape, LShape, RectangleShape, ShapeConfig
from ..value_objects import Point2D, RunDirection


def decompose_shape(shape: ShapeConfig) -> list[Run]:
    """Decompose a shape into its ordered runs.

    Args:
        shape: Inline, L-shape or rectangle description.

    Returns:
        Runs in drawing order; each run starts where the previous one ends.

    Raises:
        TypeError: If ``shape`` is not a known shape variant.
    """
    match shape:
        case InlineShape():
            return _decompose_inline(shape)
        case LShape():
            return _decompose_l_shape(shape)
        case RectangleShape():
            return _decompose_rectangle(shape)
        case _:
            raise TypeError(f"Unknown shape: {shape!r}")


def shared_corner_count(shape: ShapeConfig) -> int:
    """Number of corner posts shared by two runs of this shape."""
    match shape:
        case InlineShape():
            return 0
        case LShape():
            return 1
        case RectangleShape():
            return 4
        case _:
            raise TypeError(f"Unknown shape: {shape!r}")


def _gate_for_side(gate: GateConfig | None, side: int) -> GateConfig | None:
    if gate is not None and gate.side == side:
        return gate.without_side()
    return None


def _decompose_inline(shape: InlineShape) -> list[Run]:
    return [
        Run(
            run_id="run-1",
            length=shape.length,
            start=Point2D(0, 0),
            end=Point2D(shape.length, 0),
            direction=RunDirection.RIGHT,
            gate=shape.gate.without_side() if shape.gate else None,
        )
    ]


def _decompose_l_shape(shape: LShape) -> list[Run]:
    side1, side2 = shape.side1_length, shape.side2_length
    corner = Point2D(side1, 0)
    return [
        Run(
            run_id="run-1",
            length=side1,
            start=Point2D(0, 0),
            end=corner,
            direction=RunDirection.RIGHT,
            gate=_gate_for_side(shape.gate, 1),
        ),
        Run(
            run_id="run-2",
            length=side2,
            start=corner,
            end=Point2D(side1, side2),
            direction=RunDirection.DOWN,
            gate=_gate_for_side(shape.gate, 2),
        ),
    ]


def _decompose_rectangle(shape: RectangleShape) -> list[Run]:
    w, h = shape.width, shape.height
    corners = [Point2D(0, 0), Point2D(w, 0), Point2D(w, h), Point2D(0, h)]
    sides = [
        (w, RunDirection.RIGHT),
        (h, RunDirection.DOWN),
        (w, RunDirection.LEFT),
        (h, RunDirection.UP),
    ]
    return [
        Run(
            run_id=f"side-{i + 1}",
            length=length,
            start=corners[i],
            end=corners[(i + 1) % 4],
            direction=direction,
            gate=_gate_for_side(shape.gate, i + 1),
        )
        for i, (length, direction) in enumerate(sides)
    ]


__all__ = ["decompose_shape", "shared_corner_count"]
