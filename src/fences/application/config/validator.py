"""Validation results and fence advisory checks.

Pydantic catches structural problems while loading. The checks here look at
a loaded configuration against the product catalogue and the pool-fencing
gap rule, reporting problems the calculator would otherwise only surface as
non-compliant runs.
"""

from dataclasses import dataclass, field
from typing import Any

from fences.application.config.schema import (
    FenceConfiguration,
    InlineShapeConfig,
    LShapeConfig,
    RectangleShapeConfig,
)
from fences.domain.catalogue import AS1926_MAX_GAP, DEFAULT_CATALOGUE, Catalogue


@dataclass
class ValidationError:
    """A blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g. "shape.gate.position").
        message: Human-readable description of the error.
        value: The offending value.
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking concern; the configuration can still be calculated."""

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Errors and warnings collected while validating a configuration."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """CLI exit code: 0 clean, 1 errors, 2 warnings only."""
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


def side_lengths(config: FenceConfiguration) -> dict[int, tuple[str, float]]:
    """Map each 1-based side of the shape to its JSON path and length."""
    shape = config.shape
    if isinstance(shape, InlineShapeConfig):
        return {1: ("shape.length", shape.length)}
    if isinstance(shape, LShapeConfig):
        return {
            1: ("shape.side1_length", shape.side1_length),
            2: ("shape.side2_length", shape.side2_length),
        }
    if isinstance(shape, RectangleShapeConfig):
        return {
            1: ("shape.width", shape.width),
            2: ("shape.height", shape.height),
            3: ("shape.width", shape.width),
            4: ("shape.height", shape.height),
        }
    raise TypeError(f"Unsupported shape configuration: {type(shape).__name__}")


def check_run_lengths(
    config: FenceConfiguration, catalogue: Catalogue = DEFAULT_CATALOGUE
) -> ValidationResult:
    """Warn about sides too short for one panel between two spigots."""
    result = ValidationResult()
    post_width = config.settings.post_width
    min_length = catalogue.min_panel_width + 2 * post_width

    reported: set[str] = set()
    for path, length in side_lengths(config).values():
        if length < min_length and path not in reported:
            reported.add(path)
            result.add_warning(
                path=path,
                message=(
                    f"Length {length:g}mm is shorter than the {min_length:g}mm "
                    "needed for one panel and two spigots"
                ),
                suggestion=f"Use at least {min_length:g}mm",
            )
    return result


def check_gate(
    config: FenceConfiguration, catalogue: Catalogue = DEFAULT_CATALOGUE
) -> ValidationResult:
    """Check that the gate lies within its side and a leaf can cover it."""
    result = ValidationResult()
    gate = config.shape.gate
    if gate is None:
        return result

    side = getattr(gate, "side", 1)
    _, run_length = side_lengths(config)[side]

    if gate.position < 0:
        result.add_error(
            "shape.gate.position", "Gate position cannot be negative", gate.position
        )
    if gate.width <= 0:
        result.add_error("shape.gate.width", "Gate width must be positive", gate.width)
    elif gate.position + gate.width > run_length:
        result.add_error(
            "shape.gate.width",
            (
                f"Gate ends at {gate.position + gate.width:g}mm but its side is "
                f"only {run_length:g}mm long"
            ),
            gate.width,
        )

    widest_leaf = catalogue.gate_panels[-1].width
    if gate.width > widest_leaf:
        result.add_warning(
            path="shape.gate.width",
            message=(
                f"Gate opening of {gate.width:g}mm is wider than the widest gate "
                f"panel ({widest_leaf:g}mm)"
            ),
            suggestion=f"Reduce the opening to {widest_leaf:g}mm or less",
        )
    return result


def check_settings(
    config: FenceConfiguration, catalogue: Catalogue = DEFAULT_CATALOGUE
) -> ValidationResult:
    """Check settings against the gap rule and catalogue handles."""
    result = ValidationResult()
    settings = config.settings

    if settings.max_gap_width > AS1926_MAX_GAP:
        result.add_warning(
            path="settings.max_gap_width",
            message=(
                f"Maximum gap of {settings.max_gap_width:g}mm exceeds the "
                f"{AS1926_MAX_GAP:g}mm allowed by AS 1926.1"
            ),
            suggestion=f"Use {AS1926_MAX_GAP:g}mm or less",
        )

    if settings.default_post_handle and catalogue.find_post(
        settings.default_post_handle
    ) is None:
        result.add_warning(
            path="settings.default_post_handle",
            message=f"Unknown spigot '{settings.default_post_handle}'",
            suggestion=f"The default spigot '{catalogue.default_post.handle}' will be billed",
        )

    hardware = settings.gate_hardware
    if hardware is None:
        return result

    if hardware.gate_panel_handle and catalogue.find_gate_panel(
        hardware.gate_panel_handle
    ) is None:
        result.add_warning(
            path="settings.gate_hardware.gate_panel_handle",
            message=f"Unknown gate panel '{hardware.gate_panel_handle}'",
            suggestion="The gate panel will be selected by opening width",
        )
    for name in ("hinge_handle", "latch_handle"):
        handle = getattr(hardware, name)
        if handle and catalogue.find_hardware(handle) is None:
            result.add_warning(
                path=f"settings.gate_hardware.{name}",
                message=f"Unknown hardware '{handle}'",
            )
    if hardware.hinge_panel_handle and catalogue.find_hinge_panel(
        hardware.hinge_panel_handle
    ) is None:
        result.add_warning(
            path="settings.gate_hardware.hinge_panel_handle",
            message=f"Unknown hinge panel '{hardware.hinge_panel_handle}'",
        )
    return result


def validate_config(
    config: FenceConfiguration, catalogue: Catalogue = DEFAULT_CATALOGUE
) -> ValidationResult:
    """Run every advisory check on a loaded configuration.

    Args:
        config: A FenceConfiguration (already validated by pydantic).
        catalogue: Catalogue to check handles and widths against.

    Returns:
        ValidationResult containing any errors or warnings.
    """
    result = ValidationResult()
    result.merge(check_run_lengths(config, catalogue))
    result.merge(check_gate(config, catalogue))
    result.merge(check_settings(config, catalogue))
    return result


__all__ = [
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "check_gate",
    "check_run_lengths",
    "check_settings",
    "side_lengths",
    "validate_config",
]
