"""Bill of Materials aggregation.

Turns the fitting results of every run into priced line items:
- glass panels grouped by catalogue handle
- one gate leaf per gated run, plus configured gate hardware
- spigots (optional), with shared corners billed once
- subtotal, flat-rate tax and total rounded to cents
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Sequence

from ..catalogue import DEFAULT_CATALOGUE, Catalogue
from ..entities import FittingResult, GatePlacement
from ..shapes import ShapeConfig
from ..value_objects import PanelSize, ValidationWarning
from .config import CalculatorSettings, GateHardwareConfig
from .geometry import shared_corner_count

logger = logging.getLogger(__name__)


class BomItemType(str, Enum):
    """Product category of a BOM line."""

    PANEL = "panel"
    GATE_PANEL = "gate-panel"
    HINGE_PANEL = "hinge-panel"
    SPIGOT = "spigot"
    HINGE = "hinge"
    LATCH = "latch"


def round_cents(value: float) -> float:
    """Round a currency amount to two decimal places, halves away from zero."""
    return float(Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class BomLineItem:
    """A single priced line on the bill of materials.

    Attributes:
        item_type: Product category.
        handle: Catalogue handle.
        description: Human-readable description.
        quantity: Number of units.
        unit_price: Price per unit in AUD ex GST.
        line_total: quantity × unit_price, rounded to cents.
    """

    item_type: BomItemType
    handle: str
    description: str
    quantity: int
    unit_price: float
    line_total: float

    def __post_init__(self) -> None:
        if self.quantity < 1:
            raise ValueError("Quantity must be at least 1")
        if self.unit_price < 0:
            raise ValueError("Unit price must be non-negative")

    @classmethod
    def priced(
        cls,
        item_type: BomItemType,
        handle: str,
        description: str,
        quantity: int,
        unit_price: float,
    ) -> "BomLineItem":
        """Create a line item with its total computed from the unit price."""
        return cls(
            item_type=item_type,
            handle=handle,
            description=description,
            quantity=quantity,
            unit_price=unit_price,
            line_total=round_cents(unit_price * quantity),
        )


@dataclass(frozen=True)
class BillOfMaterials:
    """Priced bill of materials for a whole fence.

    Attributes:
        items: Line items in the order panels, gate hardware, spigots.
        subtotal: Sum of line totals ex tax.
        tax: Tax on the subtotal.
        total: Subtotal plus tax.
        warnings: Every warning raised while fitting the runs.
    """

    items: tuple[BomLineItem, ...] = field(default_factory=tuple)
    subtotal: float = 0.0
    tax: float = 0.0
    total: float = 0.0
    warnings: tuple[ValidationWarning, ...] = field(default_factory=tuple)

    def items_of_type(self, item_type: BomItemType) -> list[BomLineItem]:
        """Line items of a single category."""
        return [item for item in self.items if item.item_type == item_type]

    def quantity_of(self, item_type: BomItemType) -> int:
        """Total quantity across all lines of a category."""
        return sum(item.quantity for item in self.items_of_type(item_type))


class BomAggregator:
    """Aggregates fitting results into a BillOfMaterials."""

    def __init__(self, catalogue: Catalogue | None = None) -> None:
        self.catalogue = catalogue or DEFAULT_CATALOGUE

    def aggregate(
        self,
        fitting_results: Sequence[FittingResult],
        shape: ShapeConfig,
        settings: CalculatorSettings,
    ) -> BillOfMaterials:
        """Build the bill of materials for all runs of a shape.

        Args:
            fitting_results: One result per run, in run order.
            shape: Shape the runs came from (for shared-corner counting).
            settings: Post billing, gate hardware and tax settings.

        Returns:
            The complete, priced BillOfMaterials.
        """
        items: list[BomLineItem] = []
        warnings: list[ValidationWarning] = []

        for result in fitting_results:
            warnings.extend(result.warnings)

        items.extend(self._panel_items(fitting_results))

        for result in fitting_results:
            if result.gate is not None:
                items.extend(self._gate_items(result.gate, settings.gate_hardware))

        if settings.include_posts:
            items.extend(self._post_items(fitting_results, shape, settings))

        subtotal = round_cents(sum(item.line_total for item in items))
        tax = round_cents(subtotal * settings.tax_rate)
        total = round_cents(subtotal + tax)

        logger.debug(
            f"BOM: {len(items)} line(s), subtotal {subtotal:.2f}, total {total:.2f}"
        )

        return BillOfMaterials(
            items=tuple(items),
            subtotal=subtotal,
            tax=tax,
            total=total,
            warnings=tuple(warnings),
        )

    def _panel_items(
        self, fitting_results: Sequence[FittingResult]
    ) -> list[BomLineItem]:
        # dict keeps first-seen order
        counts: dict[str, tuple[PanelSize, int]] = {}
        for result in fitting_results:
            for placement in result.panels:
                handle = placement.panel.handle
                panel, qty = counts.get(handle, (placement.panel, 0))
                counts[handle] = (panel, qty + 1)

        return [
            BomLineItem.priced(
                BomItemType.PANEL, panel.handle, panel.description, qty, panel.price
            )
            for panel, qty in counts.values()
        ]

    def _gate_items(
        self,
        gate: GatePlacement,
        hardware: GateHardwareConfig | None,
    ) -> list[BomLineItem]:
        gate_panel = self.select_gate_panel(gate.width, hardware)
        items = [
            BomLineItem.priced(
                BomItemType.GATE_PANEL,
                gate_panel.handle,
                gate_panel.description,
                1,
                gate_panel.price,
            )
        ]

        if hardware is None:
            return items

        # Hardware lines are priced downstream by the storefront
        if hardware.hinge_handle:
            items.append(
                BomLineItem.priced(
                    BomItemType.HINGE, hardware.hinge_handle, "Gate Hinge (pair)", 1, 0.0
                )
            )
        if hardware.latch_handle:
            items.append(
                BomLineItem.priced(
                    BomItemType.LATCH, hardware.latch_handle, "Gate Latch Kit", 1, 0.0
                )
            )
        if hardware.requires_hinge_panel and hardware.hinge_panel_handle:
            items.append(
                BomLineItem.priced(
                    BomItemType.HINGE_PANEL,
                    hardware.hinge_panel_handle,
                    "Hinge Panel",
                    1,
                    0.0,
                )
            )

        return items

    def select_gate_panel(
        self, opening_width: float, hardware: GateHardwareConfig | None = None
    ) -> PanelSize:
        """Gate leaf to bill for an opening.

        A configured gate panel handle wins when it is in the catalogue;
        otherwise the narrowest leaf covering the opening is used, falling
        back to the widest leaf available.
        """
        if hardware is not None and hardware.gate_panel_handle:
            override = self.catalogue.find_gate_panel(hardware.gate_panel_handle)
            if override is not None:
                return override
            logger.warning(
                f"Gate panel '{hardware.gate_panel_handle}' not in catalogue, "
                "selecting by width"
            )
        return self.catalogue.gate_panel_for(opening_width)

    def _post_items(
        self,
        fitting_results: Sequence[FittingResult],
        shape: ShapeConfig,
        settings: CalculatorSettings,
    ) -> list[BomLineItem]:
        # Corner posts are counted by both adjacent runs
        quantity = sum(len(r.posts) for r in fitting_results)
        quantity -= shared_corner_count(shape)
        if quantity <= 0:
            return []

        post = None
        if settings.default_post_handle:
            post = self.catalogue.find_post(settings.default_post_handle)
            if post is None:
                logger.warning(
                    f"Post '{settings.default_post_handle}' not in catalogue, "
                    "using default"
                )
        post = post or self.catalogue.default_post

        return [
            BomLineItem.priced(
                BomItemType.SPIGOT, post.handle, post.description, quantity, post.price
            )
        ]


__all__ = [
    "BillOfMaterials",
    "BomAggregator",
    "BomItemType",
    "BomLineItem",
    "round_cents",
]
