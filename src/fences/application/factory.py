"""Service factory for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from fences.domain import DEFAULT_CATALOGUE, BomAggregator, Catalogue, RunFitter

if TYPE_CHECKING:
    from fences.application.commands import CalculateFenceCommand
    from fences.infrastructure.formatters import LayoutFormatter


@dataclass
class ServiceFactory:
    """Creates and caches the services a calculation needs.

    All services share the factory's catalogue, so swapping the catalogue
    (e.g. in tests) changes fitting, gate selection and pricing together.

    Example:
        >>> factory = ServiceFactory()
        >>> command = factory.create_calculate_command()
        >>> output = command.execute(CalculatorInput(shape=InlineShape(3000)))
    """

    catalogue: Catalogue = DEFAULT_CATALOGUE

    _run_fitter: RunFitter | None = field(default=None, init=False, repr=False)
    _bom_aggregator: BomAggregator | None = field(
        default=None, init=False, repr=False
    )

    def get_run_fitter(self) -> RunFitter:
        """Get or create the run fitter."""
        if self._run_fitter is None:
            self._run_fitter = RunFitter(self.catalogue)
        return self._run_fitter

    def get_bom_aggregator(self) -> BomAggregator:
        """Get or create the BOM aggregator."""
        if self._bom_aggregator is None:
            self._bom_aggregator = BomAggregator(self.catalogue)
        return self._bom_aggregator

    def get_layout_formatter(self) -> "LayoutFormatter":
        from fences.infrastructure.formatters import LayoutFormatter

        return LayoutFormatter()

    def create_calculate_command(self) -> "CalculateFenceCommand":
        """Create a CalculateFenceCommand wired to this factory's services."""
        from fences.application.commands import CalculateFenceCommand

        return CalculateFenceCommand(
            run_fitter=self.get_run_fitter(),
            bom_aggregator=self.get_bom_aggregator(),
        )


# Default factory instance
_default_factory: ServiceFactory | None = None


def get_factory() -> ServiceFactory:
    """Get the default service factory."""
    global _default_factory
    if _default_factory is None:
        _default_factory = ServiceFactory()
    return _default_factory


def set_factory(factory: ServiceFactory | None) -> None:
    """Set a custom factory (for testing)."""
    global _default_factory
    _default_factory = factory


def reset_factory() -> None:
    """Reset the factory to default (for testing cleanup)."""
    global _default_factory
    _default_factory = None


__all__ = ["ServiceFactory", "get_factory", "reset_factory", "set_factory"]
