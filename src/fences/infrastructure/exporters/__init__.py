"""Exporter framework for fence calculations.

- Exporter Protocol: interface for all exporters
- ExporterRegistry: central registry for format discovery
- ExportManager: writes one calculation in several formats

Registered exporters:
- bom: Bill of Materials as text, csv or json
- json: Full calculation (runs, fitting results, BOM)

Usage:
    from fences.infrastructure.exporters import ExportManager, ExporterRegistry

    formats = ExporterRegistry.available_formats()
    manager = ExportManager(Path("out"))
    manager.export_all(["bom", "json"], output, project_name="backyard")
"""

from fences.infrastructure.exporters.base import (
    Exporter,
    ExporterRegistry,
    ExportManager,
)
from fences.infrastructure.exporters.bom import OUTPUT_FORMATS, BomExporter
from fences.infrastructure.exporters.json_exporter import (
    JsonExporter,
    bom_to_dict,
    fitting_result_to_dict,
    output_to_dict,
    run_to_dict,
    warning_to_dict,
)

__all__ = [
    "BomExporter",
    "ExportManager",
    "Exporter",
    "ExporterRegistry",
    "JsonExporter",
    "OUTPUT_FORMATS",
    "bom_to_dict",
    "fitting_result_to_dict",
    "output_to_dict",
    "run_to_dict",
    "warning_to_dict",
]
