"""Application layer - use cases and orchestration."""

from .commands import CalculateFenceCommand, calculate
from .dtos import CalculatorInput, CalculatorOutput

__all__ = [
    "CalculateFenceCommand",
    "CalculatorInput",
    "CalculatorOutput",
    "calculate",
]
