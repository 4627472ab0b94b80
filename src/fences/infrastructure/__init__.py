"""Infrastructure layer - exporters and formatters."""

from .exporters import (
    BomExporter,
    Exporter,
    ExporterRegistry,
    ExportManager,
    JsonExporter,
)
from .formatters import CatalogueFormatter, LayoutFormatter

__all__ = [
    "BomExporter",
    "CatalogueFormatter",
    "ExportManager",
    "Exporter",
    "ExporterRegistry",
    "JsonExporter",
    "LayoutFormatter",
]
