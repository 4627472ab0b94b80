"""Application commands (use cases) for fence calculation."""

from __future__ import annotations

import logging

from fences.domain import BomAggregator, Catalogue, RunFitter, decompose_shape

from .dtos import CalculatorInput, CalculatorOutput

logger = logging.getLogger(__name__)


class CalculateFenceCommand:
    """Command to lay out and price a complete fence.

    1. Decomposes the shape into independent straight runs
    2. Fits panels into each run
    3. Aggregates the bill of materials across all runs

    Every run is attempted even when an earlier one fails; the BOM is built
    from whatever was fitted and carries all warnings.
    """

    def __init__(
        self,
        run_fitter: RunFitter | None = None,
        bom_aggregator: BomAggregator | None = None,
        catalogue: Catalogue | None = None,
    ) -> None:
        self.run_fitter = run_fitter or RunFitter(catalogue)
        self.bom_aggregator = bom_aggregator or BomAggregator(catalogue)

    def execute(self, calculator_input: CalculatorInput) -> CalculatorOutput:
        """Execute the calculation.

        Args:
            calculator_input: Shape and settings.

        Returns:
            CalculatorOutput with runs, fitting results, BOM and success flag.

        Raises:
            TypeError: If the shape is not a known shape variant.
        """
        shape = calculator_input.shape
        settings = calculator_input.settings

        runs = decompose_shape(shape)
        fitting_results = [self.run_fitter.fit(run, settings) for run in runs]
        bom = self.bom_aggregator.aggregate(fitting_results, shape, settings)
        success = all(result.success for result in fitting_results)

        if not success:
            failed = [r.run_id for r in fitting_results if not r.success]
            logger.warning(f"Non-compliant runs: {', '.join(failed)}")

        return CalculatorOutput(
            runs=tuple(runs),
            fitting_results=tuple(fitting_results),
            bom=bom,
            success=success,
        )


def calculate(calculator_input: CalculatorInput) -> CalculatorOutput:
    """Run a calculation with the default catalogue."""
    return CalculateFenceCommand().execute(calculator_input)


__all__ = ["CalculateFenceCommand", "calculate"]
