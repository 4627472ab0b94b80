"""Console formatters for fence layouts and the product catalogue."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fences.domain import Catalogue, FittingResult, PanelSize

if TYPE_CHECKING:
    from fences.application.dtos import CalculatorOutput


class LayoutFormatter:
    """Formats the per-run layout of a calculation.

    Each run is listed with its panels in placement order, the gate opening
    if any, the gap widths and spigot positions, and the warnings raised
    while fitting it.
    """

    def __init__(self, precision: int = 1) -> None:
        self._precision = precision

    def format(self, output: CalculatorOutput) -> str:
        lines = ["FENCE LAYOUT", "=" * 60]
        runs = {run.run_id: run for run in output.runs}

        for result in output.fitting_results:
            run = runs.get(result.run_id)
            length = f" ({run.length:g}mm, {run.direction.value})" if run else ""
            status = "OK" if result.success else "NON-COMPLIANT"
            lines.append(f"{result.run_id}{length}: {status}")
            lines.extend(self.format_result(result))
            lines.append("")

        verdict = "COMPLIANT" if output.success else "NOT COMPLIANT"
        lines.append(f"Result: {verdict}")
        return "\n".join(lines)

    def format_result(self, result: FittingResult) -> list[str]:
        """Indented lines describing one fitting result."""
        p = self._precision
        lines: list[str] = []

        if result.panels:
            widths = " + ".join(f"{pl.panel.width:g}" for pl in result.panels)
            lines.append(f"  Panels ({result.panel_count}): {widths}")
        if result.gate is not None:
            lines.append(
                f"  Gate: {result.gate.width:g}mm opening at "
                f"{result.gate.start:.{p}f}-{result.gate.end:.{p}f}mm "
                f"({result.gate.panel_type.value})"
            )
        if result.gaps:
            gaps = ", ".join(f"{g.width:.{p}f}" for g in result.gaps)
            lines.append(f"  Gaps: {gaps}")
        if result.posts:
            posts = ", ".join(f"{post.position:.{p}f}" for post in result.posts)
            lines.append(f"  Spigots ({len(result.posts)}): {posts}")
        for warning in result.warnings:
            lines.append(f"  ! {warning.message}")

        return lines


class CatalogueFormatter:
    """Formats the product catalogue as tables."""

    def format(self, catalogue: Catalogue) -> str:
        sections = [
            self._panel_table("STANDARD PANELS (12mm)", catalogue.standard_panels),
            self._panel_table("GATE PANELS (8mm)", catalogue.gate_panels),
            self._panel_table("HINGE PANELS (12mm)", catalogue.hinge_panels),
        ]

        lines = ["SPIGOTS", "=" * 70]
        lines.append(f"{'Handle':<44} {'Mount':<12} {'Price':>10}")
        lines.append("-" * 70)
        for post in catalogue.posts:
            lines.append(
                f"{post.handle:<44} {post.mount_type.value:<12} ${post.price:>9.2f}"
            )
        sections.append("\n".join(lines))

        return "\n\n".join(sections)

    def _panel_table(self, title: str, panels: tuple[PanelSize, ...]) -> str:
        lines = [title, "=" * 50]
        lines.append(f"{'Handle':<24} {'Width':>8} {'Price':>12}")
        lines.append("-" * 50)
        for panel in panels:
            lines.append(f"{panel.handle:<24} {panel.width:>8g} ${panel.price:>11.2f}")
        return "\n".join(lines)


__all__ = ["CatalogueFormatter", "LayoutFormatter"]
