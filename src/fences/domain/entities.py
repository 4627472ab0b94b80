"""Runs and the layout placed along them.

A ``Run`` is produced once per shape side by the geometry service; the
fitter turns each run into a ``FittingResult``. Nothing here is mutated
after construction.
"""

from __future__ import annotations

from dataclasses import dataclass

from .shapes import GateConfig
from .value_objects import (
    GatePanelType,
    PanelSize,
    Point2D,
    RunDirection,
    ValidationWarning,
)


@dataclass(frozen=True)
class Run:
    """One straight section of fence to be fitted with panels.

    Attributes:
        run_id: Identifier such as "run-1" or "side-3".
        length: Run length in mm.
        start: Start point in plan coordinates.
        end: End point in plan coordinates.
        direction: Drawing direction.
        gate: Gate opening on this run, if any.
    """

    run_id: str
    length: float
    start: Point2D
    end: Point2D
    direction: RunDirection
    gate: GateConfig | None = None

    def __post_init__(self) -> None:
        if not self.run_id:
            raise ValueError("run_id must not be empty")


@dataclass(frozen=True)
class PanelPlacement:
    """A catalogue panel placed between two offsets along a run."""

    panel: PanelSize
    start: float
    end: float

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ValueError("Panel end must not precede its start")

    @property
    def width(self) -> float:
        return self.end - self.start


@dataclass(frozen=True)
class Gap:
    """Clear space between adjacent panel edges (or a panel and a run end).

    Negative widths are representable so that overlaps can be reported.
    """

    start: float
    end: float
    width: float
    compliant: bool


@dataclass(frozen=True)
class PostPlacement:
    """A spigot position along a run.

    Attributes:
        position: Centre of the spigot in mm from the run start.
        shared: True when the spigot is shared with an adjacent run.
    """

    position: float
    shared: bool = False


@dataclass(frozen=True)
class GatePlacement:
    """Where the gate opening sits along its run."""

    start: float
    end: float
    width: float
    panel_type: GatePanelType = GatePanelType.STANDARD_8MM


@dataclass(frozen=True)
class FittingResult:
    """Outcome of fitting panels into one run.

    Attributes:
        run_id: Run (or sub-section) this result applies to.
        success: True when every gap is within the allowed maximum.
        panels: Panel placements ordered by start offset.
        gaps: Gaps ordered by start offset.
        posts: Spigot placements.
        warnings: Problems found while fitting.
        gate: Gate placement if the run has a gate.
    """

    run_id: str
    success: bool
    panels: tuple[PanelPlacement, ...] = ()
    gaps: tuple[Gap, ...] = ()
    posts: tuple[PostPlacement, ...] = ()
    warnings: tuple[ValidationWarning, ...] = ()
    gate: GatePlacement | None = None

    @classmethod
    def failed(
        cls, run_id: str, warnings: list[ValidationWarning]
    ) -> "FittingResult":
        """Result for a run that could not be fitted at all."""
        return cls(run_id=run_id, success=False, warnings=tuple(warnings))

    @classmethod
    def empty(cls, run_id: str) -> "FittingResult":
        """Successful result for a zero-length section."""
        return cls(run_id=run_id, success=True)

    @property
    def panel_count(self) -> int:
        return len(self.panels)

    @property
    def total_panel_width(self) -> float:
        """Sum of catalogue widths of all placed panels."""
        return sum(p.panel.width for p in self.panels)

    @property
    def total_gap_width(self) -> float:
        """Sum of all gap widths."""
        return sum(g.width for g in self.gaps)

    @property
    def has_gate(self) -> bool:
        return self.gate is not None


__all__ = [
    "FittingResult",
    "Gap",
    "GatePlacement",
    "PanelPlacement",
    "PostPlacement",
    "Run",
]
