"""Data Transfer Objects for the calculate use case."""

from __future__ import annotations

from dataclasses import dataclass, field

from fences.domain import (
    DEFAULT_SETTINGS,
    BillOfMaterials,
    CalculatorSettings,
    FittingResult,
    Run,
    ShapeConfig,
    ValidationWarning,
)


@dataclass(frozen=True)
class CalculatorInput:
    """Shape to lay out plus the settings to lay it out with."""

    shape: ShapeConfig
    settings: CalculatorSettings = field(default=DEFAULT_SETTINGS)


@dataclass(frozen=True)
class CalculatorOutput:
    """Result of a full calculation.

    Attributes:
        runs: Runs the shape decomposed into.
        fitting_results: One fitting result per run, in run order.
        bom: Bill of materials across all runs.
        success: True when every run was fitted compliantly.
    """

    runs: tuple[Run, ...]
    fitting_results: tuple[FittingResult, ...]
    bom: BillOfMaterials
    success: bool

    @property
    def warnings(self) -> tuple[ValidationWarning, ...]:
        return self.bom.warnings

    @property
    def failed_runs(self) -> list[str]:
        """IDs of runs that could not be fitted compliantly."""
        return [r.run_id for r in self.fitting_results if not r.success]


__all__ = ["CalculatorInput", "CalculatorOutput"]
