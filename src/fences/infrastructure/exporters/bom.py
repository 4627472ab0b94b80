"""Bill of Materials export.

Renders the priced BOM of a calculation as text, CSV or JSON. Lines are
grouped into glass panels, gate items and spigots; prices are AUD ex tax
with tax and total at the foot.
"""

from __future__ import annotations

import csv
import io
import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from fences.domain import BomItemType
from fences.infrastructure.exporters.base import ExporterRegistry
from fences.infrastructure.exporters.json_exporter import bom_to_dict

if TYPE_CHECKING:
    from fences.application.dtos import CalculatorOutput
    from fences.domain import BillOfMaterials, BomLineItem


logger = logging.getLogger(__name__)

OUTPUT_FORMATS: tuple[str, ...] = ("text", "csv", "json")

# Section title -> item types shown under it, in print order
TEXT_SECTIONS: tuple[tuple[str, tuple[BomItemType, ...]], ...] = (
    ("GLASS PANELS", (BomItemType.PANEL,)),
    (
        "GATE",
        (
            BomItemType.GATE_PANEL,
            BomItemType.HINGE_PANEL,
            BomItemType.HINGE,
            BomItemType.LATCH,
        ),
    ),
    ("SPIGOTS", (BomItemType.SPIGOT,)),
)


@ExporterRegistry.register("bom")  # type: ignore[arg-type]
class BomExporter:
    """Bill of Materials exporter.

    Attributes:
        format_name: "bom"
        file_extension: "txt", "csv" or "json" depending on output_format.
    """

    format_name: ClassVar[str] = "bom"

    def __init__(self, output_format: str = "text") -> None:
        if output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"Unsupported BOM format '{output_format}'. "
                f"Choose one of: {', '.join(OUTPUT_FORMATS)}"
            )
        self.output_format = output_format
        self._file_extension = {"text": "txt", "csv": "csv", "json": "json"}[
            output_format
        ]

    @property
    def file_extension(self) -> str:
        return self._file_extension

    def export(self, output: CalculatorOutput, path: Path) -> None:
        path.write_text(self.export_string(output), encoding="utf-8")
        logger.info(f"Exported BOM to {path}")

    def export_string(self, output: CalculatorOutput) -> str:
        """Render the BOM in the configured format."""
        return self.format(output.bom)

    def format(self, bom: BillOfMaterials) -> str:
        if self.output_format == "csv":
            return self.format_csv(bom)
        if self.output_format == "json":
            return self.format_json(bom)
        return self.format_text(bom)

    def format_text(self, bom: BillOfMaterials) -> str:
        """Format the BOM as a human-readable report."""
        lines: list[str] = []
        lines.append("=" * 60)
        lines.append("BILL OF MATERIALS")
        lines.append("=" * 60)
        lines.append("")

        for title, item_types in TEXT_SECTIONS:
            items = [item for item in bom.items if item.item_type in item_types]
            if not items:
                continue
            lines.append(title)
            lines.append("-" * 40)
            lines.extend(_text_line(item) for item in items)
            lines.append("")

        if not bom.items:
            lines.append("  (No items)")
            lines.append("")

        lines.append("-" * 40)
        lines.append(f"  {'Subtotal:':<12}${bom.subtotal:>10,.2f}")
        lines.append(f"  {'Tax:':<12}${bom.tax:>10,.2f}")
        lines.append(f"  {'Total:':<12}${bom.total:>10,.2f}")

        if bom.warnings:
            lines.append("")
            lines.append("WARNINGS")
            lines.append("-" * 40)
            for warning in bom.warnings:
                lines.append(f"  [{warning.warning_type.value}] {warning.message}")

        return "\n".join(lines)

    def format_csv(self, bom: BillOfMaterials) -> str:
        """Format the BOM as CSV with totals in trailing rows."""
        output = io.StringIO()
        writer = csv.writer(output)
        writer.writerow(
            ["Type", "Handle", "Description", "Quantity", "Unit Price", "Line Total"]
        )
        for item in bom.items:
            writer.writerow(
                [
                    item.item_type.value,
                    item.handle,
                    item.description,
                    item.quantity,
                    f"{item.unit_price:.2f}",
                    f"{item.line_total:.2f}",
                ]
            )
        writer.writerow(["", "", "Subtotal", "", "", f"{bom.subtotal:.2f}"])
        writer.writerow(["", "", "Tax", "", "", f"{bom.tax:.2f}"])
        writer.writerow(["", "", "Total", "", "", f"{bom.total:.2f}"])
        return output.getvalue()

    def format_json(self, bom: BillOfMaterials) -> str:
        return json.dumps(bom_to_dict(bom), indent=2)


def _text_line(item: BomLineItem) -> str:
    return (
        f"  {item.quantity:>3} x {item.description} ({item.handle})"
        f" @ ${item.unit_price:,.2f} = ${item.line_total:,.2f}"
    )


__all__ = ["BomExporter", "OUTPUT_FORMATS"]
