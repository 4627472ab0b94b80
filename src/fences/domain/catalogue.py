"""Static product catalogue.

Panel, gate, hinge-panel, spigot and gate hardware data as listed in the
store's product export. Prices are in AUD ex GST and may be refreshed by an
external pricing service; the layout engine only relies on widths and
handles.

The ``Catalogue`` class wraps the tables in a read-only, width-sorted lookup.
"""

from __future__ import annotations

import bisect
from typing import Iterable, Sequence

from .value_objects import (
    HardwareCategory,
    HardwareSpec,
    MountType,
    PanelCategory,
    PanelSize,
    PostSpec,
)

PANEL_HEIGHT = 1200.0

# Default spigot body width used in gap calculations
DEFAULT_POST_WIDTH = 60.0

# AS 1926.1 maximum gap between fence elements
AS1926_MAX_GAP = 100.0

# 12mm toughened glass, 100-2000mm in 50mm increments
_STANDARD_PRICES: tuple[tuple[int, float], ...] = (
    (100, 31.05), (150, 31.05), (200, 31.05), (250, 31.05), (300, 31.05),
    (350, 31.05), (400, 34.69), (450, 38.95), (500, 43.35), (550, 47.62),
    (600, 52.03), (650, 56.28), (700, 60.69), (750, 64.97), (800, 69.36),
    (850, 73.63), (900, 78.03), (950, 82.30), (1000, 86.70), (1050, 90.97),
    (1100, 95.38), (1150, 99.64), (1200, 104.05), (1250, 108.31),
    (1300, 112.71), (1350, 116.99), (1400, 121.25), (1450, 125.65),
    (1500, 129.92), (1550, 134.33), (1600, 138.58), (1650, 142.99),
    (1700, 147.27), (1750, 151.67), (1800, 155.93), (1850, 159.47),
    (1900, 164.61), (1950, 170.48), (2000, 173.27),
)

# 8mm gate leaves, 700-1000mm in 25mm increments, pre-drilled for hinge + latch
_GATE_PRICES: tuple[tuple[int, float], ...] = (
    (700, 49.95), (725, 51.72), (750, 53.49), (775, 55.27), (800, 57.04),
    (825, 58.82), (850, 60.59), (875, 62.36), (900, 64.14), (925, 65.91),
    (950, 67.68), (975, 69.46), (1000, 71.29),
)

# 12mm hinge panels, 1000-2000mm in 100mm increments
_HINGE_PRICES: tuple[tuple[int, float], ...] = (
    (1000, 89.29), (1100, 97.40), (1200, 106.14), (1300, 114.24),
    (1400, 122.98), (1500, 131.09), (1600, 139.83), (1700, 147.93),
    (1800, 156.68), (1900, 170.25), (2000, 177.62),
)

STANDARD_PANELS: tuple[PanelSize, ...] = tuple(
    PanelSize(
        width=float(width),
        height=PANEL_HEIGHT,
        handle=f"gp-12mm-{width:04d}mm",
        category=PanelCategory.STANDARD,
        price=price,
    )
    for width, price in _STANDARD_PRICES
)

GATE_PANELS_8MM: tuple[PanelSize, ...] = tuple(
    PanelSize(
        width=float(width),
        height=PANEL_HEIGHT,
        handle=f"gg-8mm-{width:04d}mm",
        category=PanelCategory.GATE,
        price=price,
    )
    for width, price in _GATE_PRICES
)

HINGE_PANELS: tuple[PanelSize, ...] = tuple(
    PanelSize(
        width=float(width),
        height=PANEL_HEIGHT,
        handle=f"gh-12mm-{width:04d}mm",
        category=PanelCategory.HINGE,
        price=price,
    )
    for width, price in _HINGE_PRICES
)

POSTS: tuple[PostSpec, ...] = (
    PostSpec("spigot-value-core-drill-square-clear-coat", "Square Core Drilled - Value", MountType.CORE_DRILLED, 52.57, 60.0),
    PostSpec("spigot-value-core-drill-round-clear-coat", "Round Core Drilled - Value", MountType.CORE_DRILLED, 52.57, 60.0),
    PostSpec("spigot-value-base-plated-square-clear-coat", "Square Base Plated - Value", MountType.BASE_PLATED, 57.11, 60.0),
    PostSpec("spigot-value-base-plated-round-clear-coat", "Round Base Plated - Value", MountType.BASE_PLATED, 55.42, 60.0),
    PostSpec("spigot-pro-core-drill-square-clear-coat", "Square Core Drilled - Pro", MountType.CORE_DRILLED, 64.75, 60.0),
    PostSpec("spigot-pro-core-drill-round-clear-coat", "Round Core Drilled - Pro", MountType.CORE_DRILLED, 63.37, 60.0),
    PostSpec("spigot-pro-base-plated-square-clear-coat", "Square Base Plated - Pro", MountType.BASE_PLATED, 66.94, 60.0),
    PostSpec("spigot-pro-base-plated-round-clear-coat", "Round Base Plated - Pro", MountType.BASE_PLATED, 65.51, 60.0),
)

SPRING_HINGES: tuple[HardwareSpec, ...] = (
    HardwareSpec("spring-hinge-glass-to-glass-ss316-pair", "Spring Hinge G2G SS316 (pair)", HardwareCategory.HINGE, 64.42),
    HardwareSpec("spring-hinge-glass-to-glass-black-pair", "Spring Hinge G2G Black (pair)", HardwareCategory.HINGE, 70.90),
    HardwareSpec("spring-hinge-wall-to-glass-black-pair", "Spring Hinge W2G Black (pair)", HardwareCategory.HINGE, 70.71),
    HardwareSpec("spring-hinge-wall-to-glass-silver-pair", "Spring Hinge W2G Silver (pair)", HardwareCategory.HINGE, 81.29),
)

LATCH_KITS: tuple[HardwareSpec, ...] = (
    HardwareSpec("kit-g2g-std-latch-kit-ss-polished", "G2G Standard Latch Kit - SS Polished", HardwareCategory.LATCH, 120.17),
    HardwareSpec("kit-g2g-std-latch-kit-black", "G2G Standard Latch Kit - Black", HardwareCategory.LATCH, 131.43),
    HardwareSpec("kit-w2g-std-latch-kit-ss-polished", "W2G Standard Latch Kit - SS Polished", HardwareCategory.LATCH, 120.17),
    HardwareSpec("kit-w2g-std-latch-kit-black", "W2G Standard Latch Kit - Black", HardwareCategory.LATCH, 126.36),
)


def _sorted_by_width(panels: Iterable[PanelSize]) -> tuple[PanelSize, ...]:
    return tuple(sorted(panels, key=lambda p: p.width))


class Catalogue:
    """Read-only, width-sorted lookup over the product tables.

    Example:
        >>> DEFAULT_CATALOGUE.largest_panel_at_or_below(1234).width
        1200.0
    """

    def __init__(
        self,
        standard_panels: Sequence[PanelSize] = STANDARD_PANELS,
        gate_panels: Sequence[PanelSize] = GATE_PANELS_8MM,
        hinge_panels: Sequence[PanelSize] = HINGE_PANELS,
        posts: Sequence[PostSpec] = POSTS,
        hardware: Sequence[HardwareSpec] = SPRING_HINGES + LATCH_KITS,
    ) -> None:
        if not standard_panels:
            raise ValueError("Catalogue needs at least one standard panel")
        if not gate_panels:
            raise ValueError("Catalogue needs at least one gate panel")
        if not posts:
            raise ValueError("Catalogue needs at least one post")
        self._standard = _sorted_by_width(standard_panels)
        self._gates = _sorted_by_width(gate_panels)
        self._hinge_panels = _sorted_by_width(hinge_panels)
        self._posts = tuple(posts)
        self._hardware = tuple(hardware)
        self._standard_widths = [p.width for p in self._standard]

    @property
    def standard_panels(self) -> tuple[PanelSize, ...]:
        return self._standard

    @property
    def gate_panels(self) -> tuple[PanelSize, ...]:
        return self._gates

    @property
    def hinge_panels(self) -> tuple[PanelSize, ...]:
        return self._hinge_panels

    @property
    def posts(self) -> tuple[PostSpec, ...]:
        return self._posts

    @property
    def hardware(self) -> tuple[HardwareSpec, ...]:
        return self._hardware

    @property
    def min_panel_width(self) -> float:
        """Narrowest standard panel."""
        return self._standard[0].width

    @property
    def max_panel_width(self) -> float:
        """Widest standard panel."""
        return self._standard[-1].width

    def available_widths(self) -> list[float]:
        """All standard panel widths, widest first."""
        return sorted(self._standard_widths, reverse=True)

    def panel_by_width(self, width: float) -> PanelSize | None:
        """Standard panel with exactly this width, if listed."""
        index = bisect.bisect_left(self._standard_widths, width)
        if index < len(self._standard) and self._standard_widths[index] == width:
            return self._standard[index]
        return None

    def largest_panel_at_or_below(self, target_width: float) -> PanelSize | None:
        """Snap a target width down to a catalogue panel.

        Returns the widest standard panel not wider than ``target_width``;
        targets wider than the catalogue snap to the widest panel. Targets
        narrower than the narrowest panel have no fit and return None.
        """
        if target_width < self.min_panel_width:
            return None
        index = bisect.bisect_right(self._standard_widths, target_width)
        return self._standard[index - 1]

    def gate_panel_for(self, opening_width: float) -> PanelSize:
        """Narrowest gate panel at least as wide as the opening.

        Falls back to the widest gate panel when the opening exceeds the
        catalogue.
        """
        for panel in self._gates:
            if panel.width >= opening_width:
                return panel
        return self._gates[-1]

    def find_gate_panel(self, handle: str) -> PanelSize | None:
        return next((p for p in self._gates if p.handle == handle), None)

    def find_hinge_panel(self, handle: str) -> PanelSize | None:
        return next((p for p in self._hinge_panels if p.handle == handle), None)

    def find_post(self, handle: str) -> PostSpec | None:
        return next((p for p in self._posts if p.handle == handle), None)

    def find_hardware(self, handle: str) -> HardwareSpec | None:
        return next((h for h in self._hardware if h.handle == handle), None)

    @property
    def default_post(self) -> PostSpec:
        """First listed spigot, used when no post handle is configured."""
        return self._posts[0]


DEFAULT_CATALOGUE = Catalogue()


__all__ = [
    "AS1926_MAX_GAP",
    "Catalogue",
    "DEFAULT_CATALOGUE",
    "DEFAULT_POST_WIDTH",
    "GATE_PANELS_8MM",
    "HINGE_PANELS",
    "LATCH_KITS",
    "PANEL_HEIGHT",
    "POSTS",
    "SPRING_HINGES",
    "STANDARD_PANELS",
]
