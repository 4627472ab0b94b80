"""Panel fitting for a single straight run.

The fitter searches panel counts from the fewest that could possibly cover
the run to the most that could fit, and returns the first count whose
catalogue-snapped layout keeps every gap within the allowed maximum.

Gated runs are split at the gate into a left and a right section that are
fitted independently and merged, with a spigot on each side of the opening.
"""

from __future__ import annotations

import logging
import math

from ..catalogue import DEFAULT_CATALOGUE, Catalogue
from ..entities import (
    FittingResult,
    Gap,
    GatePlacement,
    PanelPlacement,
    PostPlacement,
    Run,
)
from ..shapes import GateConfig
from ..value_objects import (
    PanelSize,
    ValidationWarning,
    WarningSeverity,
    WarningType,
)
from .config import CalculatorSettings
from .gap_validator import validate_gaps, validate_gate_position, validate_run_length

logger = logging.getLogger(__name__)


class RunFitter:
    """Fits catalogue panels into runs.

    Stateless apart from the catalogue it reads; ``fit`` is deterministic.

    Example:
        >>> fitter = RunFitter()
        >>> result = fitter.fit(run, CalculatorSettings())
        >>> result.success, result.panel_count
        (True, 2)
    """

    def __init__(self, catalogue: Catalogue | None = None) -> None:
        self.catalogue = catalogue or DEFAULT_CATALOGUE

    def fit(self, run: Run, settings: CalculatorSettings) -> FittingResult:
        """Fit panels into a run.

        Args:
            run: The run to fit.
            settings: Post width and gap limit to fit against.

        Returns:
            FittingResult for the run. On a length or gate problem the result
            is unsuccessful, has no placements and carries the warnings.
        """
        length_warnings = validate_run_length(
            run.length, settings.post_width, self.catalogue.min_panel_width
        )
        if length_warnings:
            logger.debug(f"Run {run.run_id} rejected: {length_warnings[0].message}")
            return FittingResult.failed(run.run_id, length_warnings)

        if run.gate is not None:
            return self._fit_with_gate(run, run.gate, settings)

        return self.fit_section(run.run_id, run.length, 0.0, settings)

    def panel_count_bounds(
        self, length: float, settings: CalculatorSettings
    ) -> tuple[int, int]:
        """Range of panel counts worth trying for a section.

        The lower bound assumes every panel is the widest in the catalogue
        with a full-tolerance gap and a post beside it; the upper bound
        assumes the narrowest panel with only a post beside it.
        """
        widest_step = (
            self.catalogue.max_panel_width + settings.max_gap_width + settings.post_width
        )
        narrowest_step = self.catalogue.min_panel_width + settings.post_width
        lower = max(1, math.ceil(length / widest_step))
        upper = math.ceil(length / narrowest_step)
        return lower, upper

    def fit_section(
        self,
        section_id: str,
        length: float,
        offset: float,
        settings: CalculatorSettings,
    ) -> FittingResult:
        """Fit a gateless section, preferring the fewest panels.

        Args:
            section_id: Identifier reported on the result.
            length: Section length in mm.
            offset: Offset of the section start along its run.
            settings: Post width and gap limit.

        Returns:
            The first compliant layout found, or an unsuccessful result with
            a NO_VALID_FIT warning.
        """
        lower, upper = self.panel_count_bounds(length, settings)

        for panel_count in range(lower, upper + 1):
            result = self._try_panel_count(
                section_id, length, offset, panel_count, settings
            )
            if result is not None:
                logger.debug(
                    f"Section {section_id} ({length:g}mm) fitted with "
                    f"{panel_count} panel(s)"
                )
                return result

        logger.info(
            f"No compliant layout for section {section_id} ({length:g}mm), "
            f"tried {lower}..{upper} panels"
        )
        return FittingResult.failed(
            section_id,
            [
                ValidationWarning(
                    warning_type=WarningType.NO_VALID_FIT,
                    severity=WarningSeverity.ERROR,
                    message=(
                        f"Cannot fit panels into {length:g}mm section while "
                        f"keeping gaps ≤ {settings.max_gap_width:g}mm. "
                        "Try adjusting the run length."
                    ),
                    position=offset,
                )
            ],
        )

    def select_panels(
        self, target_width: float, count: int, max_total_width: float
    ) -> list[PanelSize] | None:
        """Choose ``count`` catalogue panels for the available width.

        Every panel but the last is the target snapped down to the catalogue.
        The last panel takes whatever width remains, also snapped down.

        Returns:
            The panels in placement order, or None if the count cannot be
            filled without a panel narrower than the catalogue minimum.
        """
        panels: list[PanelSize] = []
        remaining = max_total_width

        for i in range(count):
            is_last = i == count - 1
            panel = self.catalogue.largest_panel_at_or_below(
                remaining if is_last else target_width
            )
            if panel is None:
                return None

            panels.append(panel)
            remaining -= panel.width
            if remaining < 0 and not is_last:
                return None

        overshoot = sum(p.width for p in panels) - max_total_width
        if overshoot > 0:
            adjusted = self.catalogue.largest_panel_at_or_below(
                panels[-1].width - overshoot
            )
            if adjusted is None:
                return None
            panels[-1] = adjusted

        return panels

    def _try_panel_count(
        self,
        section_id: str,
        length: float,
        offset: float,
        panel_count: int,
        settings: CalculatorSettings,
    ) -> FittingResult | None:
        """Lay out exactly ``panel_count`` panels, or None if infeasible."""
        gap_count = panel_count + 1

        # Each gap position holds a spigot body; only the rest is panel space
        panel_space = length - gap_count * settings.post_width
        if panel_space <= 0:
            return None

        panels = self.select_panels(panel_space / panel_count, panel_count, panel_space)
        if panels is None:
            return None

        total_panel_width = sum(p.width for p in panels)
        gap_width = (length - total_panel_width) / gap_count
        if gap_width < 0 or gap_width > settings.max_gap_width:
            return None

        placements = _build_placements(panels, gap_width, offset)
        gaps = _build_gaps(panels, gap_width, offset, length, settings.max_gap_width)
        posts = [PostPlacement(position=(g.start + g.end) / 2) for g in gaps]
        gap_warnings = validate_gaps(gaps, settings.max_gap_width)

        return FittingResult(
            run_id=section_id,
            success=not gap_warnings,
            panels=tuple(placements),
            gaps=tuple(gaps),
            posts=tuple(posts),
            warnings=tuple(gap_warnings),
        )

    def _fit_with_gate(
        self, run: Run, gate: GateConfig, settings: CalculatorSettings
    ) -> FittingResult:
        gate_warnings = validate_gate_position(gate, run.length)
        if gate_warnings:
            logger.debug(f"Run {run.run_id} rejected: invalid gate position")
            return FittingResult.failed(run.run_id, gate_warnings)

        gate_start = gate.position
        gate_end = gate.end
        left_length = gate_start
        right_length = run.length - gate_end

        left = (
            self.fit_section(f"{run.run_id}-left", left_length, 0.0, settings)
            if left_length > 0
            else FittingResult.empty(f"{run.run_id}-left")
        )
        right = (
            self.fit_section(f"{run.run_id}-right", right_length, gate_end, settings)
            if right_length > 0
            else FittingResult.empty(f"{run.run_id}-right")
        )

        # Spigots either side of the opening belong to neither section
        flanking_posts = (
            PostPlacement(position=gate_start, shared=False),
            PostPlacement(position=gate_end, shared=False),
        )

        return FittingResult(
            run_id=run.run_id,
            success=left.success and right.success,
            panels=left.panels + right.panels,
            gaps=left.gaps + right.gaps,
            posts=left.posts + right.posts + flanking_posts,
            warnings=left.warnings + right.warnings,
            gate=GatePlacement(
                start=gate_start,
                end=gate_end,
                width=gate.width,
                panel_type=gate.panel_type,
            ),
        )


def _build_placements(
    panels: list[PanelSize], gap_width: float, offset: float
) -> list[PanelPlacement]:
    placements: list[PanelPlacement] = []
    cursor = offset + gap_width

    for panel in panels:
        placements.append(
            PanelPlacement(panel=panel, start=cursor, end=cursor + panel.width)
        )
        cursor += panel.width + gap_width

    return placements


def _build_gaps(
    panels: list[PanelSize],
    gap_width: float,
    offset: float,
    section_length: float,
    max_gap_width: float,
) -> list[Gap]:
    """Rebuild gaps from the geometry.

    The trailing gap runs to the section end so that panels plus gaps add
    up to the section length exactly.
    """
    gaps = [_gap(offset, gap_width, max_gap_width)]
    cursor = offset + gap_width

    for i, panel in enumerate(panels):
        cursor += panel.width
        is_last = i == len(panels) - 1
        width = (offset + section_length) - cursor if is_last else gap_width
        gaps.append(_gap(cursor, width, max_gap_width))
        cursor += width

    return gaps


def _gap(start: float, width: float, max_gap_width: float) -> Gap:
    return Gap(
        start=start,
        end=start + width,
        width=width,
        compliant=0 <= width <= max_gap_width,
    )


def fit_run(
    run: Run, settings: CalculatorSettings, catalogue: Catalogue | None = None
) -> FittingResult:
    """Convenience wrapper around ``RunFitter.fit``."""
    return RunFitter(catalogue).fit(run, settings)


__all__ = ["RunFitter", "fit_run"]
