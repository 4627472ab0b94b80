"""Gap and length validation.

AS 1926.1-2012 requires that no gap in a pool fence exceeds 100mm. The
checks here are pure functions returning warnings; an empty list means the
input is valid.
"""

from __future__ import annotations

from typing import Sequence

from ..entities import Gap
from ..shapes import GateConfig
from ..value_objects import ValidationWarning, WarningSeverity, WarningType


def validate_gaps(
    gaps: Sequence[Gap], max_gap_width: float
) -> list[ValidationWarning]:
    """Check every gap against the safety maximum.

    Produces one GAP_EXCEEDS_LIMIT warning per gap wider than
    ``max_gap_width`` and one GAP_TOO_NARROW warning per negative gap.
    """
    warnings: list[ValidationWarning] = []

    for gap in gaps:
        if gap.width > max_gap_width:
            warnings.append(
                ValidationWarning(
                    warning_type=WarningType.GAP_EXCEEDS_LIMIT,
                    severity=WarningSeverity.ERROR,
                    message=(
                        f"Gap of {round(gap.width)}mm at position "
                        f"{round(gap.start)}mm exceeds the {max_gap_width:g}mm "
                        "maximum (AS 1926.1)."
                    ),
                    position=gap.start,
                )
            )

        if gap.width < 0:
            warnings.append(
                ValidationWarning(
                    warning_type=WarningType.GAP_TOO_NARROW,
                    severity=WarningSeverity.ERROR,
                    message=(
                        f"Negative gap of {round(gap.width)}mm at position "
                        f"{round(gap.start)}mm: panels overlap."
                    ),
                    position=gap.start,
                )
            )

    return warnings


def validate_run_length(
    length: float, post_width: float, min_panel_width: float
) -> list[ValidationWarning]:
    """Check that a run can hold at least one panel between two posts."""
    if length <= 0:
        return [
            ValidationWarning(
                warning_type=WarningType.RUN_TOO_SHORT,
                severity=WarningSeverity.ERROR,
                message="Run length must be greater than 0mm.",
            )
        ]

    min_length = min_panel_width + 2 * post_width
    if length < min_length:
        return [
            ValidationWarning(
                warning_type=WarningType.RUN_TOO_SHORT,
                severity=WarningSeverity.ERROR,
                message=(
                    f"Run length of {length:g}mm is too short. Minimum is "
                    f"{min_length:g}mm ({min_panel_width:g}mm panel + 2× "
                    f"{post_width:g}mm spigots)."
                ),
            )
        ]

    return []


def validate_gate_position(
    gate: GateConfig, run_length: float
) -> list[ValidationWarning]:
    """Check that a gate opening lies within its run."""
    warnings: list[ValidationWarning] = []

    if gate.position < 0:
        warnings.append(
            ValidationWarning(
                warning_type=WarningType.GATE_POSITION_INVALID,
                severity=WarningSeverity.ERROR,
                message=f"Gate position ({gate.position:g}mm) cannot be negative.",
                position=gate.position,
            )
        )

    if gate.end > run_length:
        warnings.append(
            ValidationWarning(
                warning_type=WarningType.GATE_POSITION_INVALID,
                severity=WarningSeverity.ERROR,
                message=(
                    f"Gate extends beyond run. Gate ends at {gate.end:g}mm "
                    f"but run is only {run_length:g}mm."
                ),
                position=gate.position,
            )
        )

    if gate.width <= 0:
        warnings.append(
            ValidationWarning(
                warning_type=WarningType.GATE_POSITION_INVALID,
                severity=WarningSeverity.ERROR,
                message="Gate width must be greater than 0mm.",
                position=gate.position,
            )
        )

    return warnings


__all__ = ["validate_gaps", "validate_gate_position", "validate_run_length"]
