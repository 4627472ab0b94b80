"""JSON export of a complete fence calculation.

The ``*_to_dict`` helpers are shared with the BOM exporter and the REST API
so that every JSON rendering of a calculation has the same shape.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from fences.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from fences.application.dtos import CalculatorOutput
    from fences.domain import BillOfMaterials, FittingResult, Run, ValidationWarning


logger = logging.getLogger(__name__)


def warning_to_dict(warning: ValidationWarning) -> dict[str, Any]:
    return {
        "type": warning.warning_type.value,
        "severity": warning.severity.value,
        "message": warning.message,
        "position": warning.position,
    }


def run_to_dict(run: Run) -> dict[str, Any]:
    data: dict[str, Any] = {
        "run_id": run.run_id,
        "length": run.length,
        "start": {"x": run.start.x, "y": run.start.y},
        "end": {"x": run.end.x, "y": run.end.y},
        "direction": run.direction.value,
        "gate": None,
    }
    if run.gate is not None:
        data["gate"] = {
            "position": run.gate.position,
            "width": run.gate.width,
            "panel_type": run.gate.panel_type.value,
        }
    return data


def fitting_result_to_dict(result: FittingResult) -> dict[str, Any]:
    """Convert a fitting result, keeping offsets as plain floats."""
    return {
        "run_id": result.run_id,
        "success": result.success,
        "panels": [
            {
                "handle": p.panel.handle,
                "width": p.panel.width,
                "start": p.start,
                "end": p.end,
            }
            for p in result.panels
        ],
        "gaps": [
            {
                "start": g.start,
                "end": g.end,
                "width": g.width,
                "compliant": g.compliant,
            }
            for g in result.gaps
        ],
        "posts": [
            {"position": post.position, "shared": post.shared}
            for post in result.posts
        ],
        "gate": (
            {
                "start": result.gate.start,
                "end": result.gate.end,
                "width": result.gate.width,
                "panel_type": result.gate.panel_type.value,
            }
            if result.gate is not None
            else None
        ),
        "warnings": [warning_to_dict(w) for w in result.warnings],
    }


def bom_to_dict(bom: BillOfMaterials) -> dict[str, Any]:
    return {
        "items": [
            {
                "type": item.item_type.value,
                "handle": item.handle,
                "description": item.description,
                "quantity": item.quantity,
                "unit_price": item.unit_price,
                "line_total": item.line_total,
            }
            for item in bom.items
        ],
        "subtotal": bom.subtotal,
        "tax": bom.tax,
        "total": bom.total,
        "warnings": [warning_to_dict(w) for w in bom.warnings],
    }


def output_to_dict(output: CalculatorOutput) -> dict[str, Any]:
    """Convert a whole calculation to JSON-serialisable data."""
    return {
        "success": output.success,
        "runs": [run_to_dict(run) for run in output.runs],
        "fitting_results": [fitting_result_to_dict(r) for r in output.fitting_results],
        "bom": bom_to_dict(output.bom),
    }


@ExporterRegistry.register("json")  # type: ignore[arg-type]
class JsonExporter:
    """Exports runs, fitting results and the BOM as one JSON document."""

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def export(self, output: CalculatorOutput, path: Path) -> None:
        path.write_text(self.export_string(output), encoding="utf-8")
        logger.info(f"Exported calculation to {path}")

    def export_string(self, output: CalculatorOutput) -> str:
        return json.dumps(output_to_dict(output), indent=self.indent)


__all__ = [
    "JsonExporter",
    "bom_to_dict",
    "fitting_result_to_dict",
    "output_to_dict",
    "run_to_dict",
    "warning_to_dict",
]
