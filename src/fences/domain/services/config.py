"""Calculator settings.

Domain objects holding the admin-configurable knobs that drive gap maths
and BOM contents.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..catalogue import AS1926_MAX_GAP, DEFAULT_POST_WIDTH

# Australian GST
DEFAULT_TAX_RATE = 0.10


@dataclass(frozen=True)
class GateHardwareConfig:
    """Hardware to bill with each gate.

    Attributes:
        gate_panel_handle: Override for the gate leaf handle.
        hinge_handle: Hinge pair handle.
        latch_handle: Latch kit handle.
        requires_hinge_panel: Whether a hinge panel is fitted beside the gate.
        hinge_panel_handle: Hinge panel handle.
    """

    gate_panel_handle: str | None = None
    hinge_handle: str | None = None
    latch_handle: str | None = None
    requires_hinge_panel: bool = False
    hinge_panel_handle: str | None = None


@dataclass(frozen=True)
class CalculatorSettings:
    """Settings for one calculation.

    Attributes:
        post_width: Spigot body width in mm; consumed between every panel.
        max_gap_width: Largest allowed gap in mm (AS 1926.1 = 100mm).
        include_posts: Whether spigots are billed.
        default_post_handle: Catalogue handle of the spigot to bill.
        gate_hardware: Hardware billed with every gate, if configured.
        tax_rate: Flat tax rate applied to the subtotal.
    """

    post_width: float = DEFAULT_POST_WIDTH
    max_gap_width: float = AS1926_MAX_GAP
    include_posts: bool = False
    default_post_handle: str | None = None
    gate_hardware: GateHardwareConfig | None = None
    tax_rate: float = DEFAULT_TAX_RATE

    def __post_init__(self) -> None:
        if self.post_width < 0:
            raise ValueError("post_width must be non-negative")
        if self.max_gap_width <= 0:
            raise ValueError("max_gap_width must be positive")
        if not 0 <= self.tax_rate < 1:
            raise ValueError("tax_rate must be between 0 and 1")


DEFAULT_SETTINGS = CalculatorSettings()


__all__ = [
    "CalculatorSettings",
    "DEFAULT_SETTINGS",
    "DEFAULT_TAX_RATE",
    "GateHardwareConfig",
]
