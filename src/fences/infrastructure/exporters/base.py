"""Exporter protocol, registry and manager for calculation output."""

from __future__ import annotations

import logging
from abc import abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from fences.application.dtos import CalculatorOutput


logger = logging.getLogger(__name__)


@runtime_checkable
class Exporter(Protocol):
    """Protocol for all exporters.

    Attributes:
        format_name: Registry name of the format (e.g. "bom", "json").
        file_extension: File extension without leading dot.
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]

    @abstractmethod
    def export(self, output: CalculatorOutput, path: Path) -> None:
        """Write the calculation output to ``path``."""
        ...

    def export_string(self, output: CalculatorOutput) -> str:
        """Render the calculation output as a string."""
        raise NotImplementedError(
            f"Format '{self.format_name}' does not support string export"
        )


class ExporterRegistry:
    """Registry of exporter classes keyed by format name.

    Example:
        @ExporterRegistry.register("json")
        class JsonExporter:
            format_name = "json"
            file_extension = "json"
            ...
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str):
        """Class decorator registering an exporter under ``format_name``."""

        def decorator(exporter_class: type[Exporter]) -> type[Exporter]:
            if format_name in cls._exporters:
                logger.warning(
                    f"Overwriting existing exporter for format '{format_name}'"
                )
            cls._exporters[format_name] = exporter_class
            logger.debug(
                f"Registered exporter '{format_name}': {exporter_class.__name__}"
            )
            return exporter_class

        return decorator

    @classmethod
    def get(cls, format_name: str) -> type[Exporter]:
        """Look up an exporter class.

        Raises:
            KeyError: If no exporter is registered for the format.
        """
        if format_name not in cls._exporters:
            available = ", ".join(sorted(cls._exporters.keys()))
            raise KeyError(
                f"No exporter registered for format '{format_name}'. "
                f"Available formats: {available or 'none'}"
            )
        return cls._exporters[format_name]

    @classmethod
    def available_formats(cls) -> list[str]:
        return sorted(cls._exporters.keys())

    @classmethod
    def is_registered(cls, format_name: str) -> bool:
        return format_name in cls._exporters

    @classmethod
    def clear(cls) -> None:
        """Remove every registration (for tests)."""
        cls._exporters.clear()


class ExportManager:
    """Writes one calculation to files in several formats.

    Files are named ``{project_name}_{format}.{ext}`` inside ``output_dir``,
    which is created on first export.
    """

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = Path(output_dir)

    def export_all(
        self,
        formats: list[str],
        output: CalculatorOutput,
        project_name: str = "fence",
    ) -> dict[str, Path]:
        """Export to every format in ``formats``.

        Returns:
            Mapping of format name to written file path.

        Raises:
            KeyError: If any format is not registered.
            OSError: If a file cannot be written.
        """
        # Fail before touching the file system
        exporter_classes = {name: ExporterRegistry.get(name) for name in formats}

        self.output_dir.mkdir(parents=True, exist_ok=True)
        results: dict[str, Path] = {}

        for format_name, exporter_class in exporter_classes.items():
            exporter = exporter_class()
            filename = f"{project_name}_{format_name}.{exporter.file_extension}"
            filepath = self.output_dir / filename

            logger.info(f"Exporting to {format_name}: {filepath}")
            exporter.export(output, filepath)
            results[format_name] = filepath

        return results

    def export_single(
        self,
        format_name: str,
        output: CalculatorOutput,
        project_name: str = "fence",
    ) -> Path:
        """Export to a single format and return the file path."""
        return self.export_all([format_name], output, project_name)[format_name]
