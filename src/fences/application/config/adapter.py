"""Conversion from validated configuration models to domain objects.

The pydantic models describe what a file or request may contain; the
functions here turn them into the frozen domain shapes and settings that
``CalculateFenceCommand`` consumes.
"""

from fences.application.config.schema import (
    FenceConfiguration,
    GateConfigSchema,
    GateHardwareConfigSchema,
    InlineShapeConfig,
    LShapeConfig,
    RectangleShapeConfig,
    SettingsConfig,
    SideGateConfigSchema,
)
from fences.application.dtos import CalculatorInput
from fences.domain import (
    CalculatorSettings,
    GateConfig,
    GateHardwareConfig,
    InlineShape,
    LShape,
    RectangleShape,
    ShapeConfig,
)


def _gate(gate: GateConfigSchema | None) -> GateConfig | None:
    if gate is None:
        return None
    side = gate.side if isinstance(gate, SideGateConfigSchema) else None
    return GateConfig(
        position=gate.position,
        width=gate.width,
        panel_type=gate.panel_type,
        side=side,
    )


def config_to_shape(config: FenceConfiguration) -> ShapeConfig:
    """Convert the ``shape`` section to a domain shape.

    Example:
        >>> config = load_config(Path("pool.json"))
        >>> shape = config_to_shape(config)
        >>> shape.shape_type
        <ShapeType.INLINE: 'inline'>
    """
    shape = config.shape
    match shape:
        case InlineShapeConfig():
            return InlineShape(length=shape.length, gate=_gate(shape.gate))
        case LShapeConfig():
            return LShape(
                side1_length=shape.side1_length,
                side2_length=shape.side2_length,
                gate=_gate(shape.gate),
            )
        case RectangleShapeConfig():
            return RectangleShape(
                width=shape.width, height=shape.height, gate=_gate(shape.gate)
            )
    raise TypeError(f"Unsupported shape configuration: {type(shape).__name__}")


def _gate_hardware(
    hardware: GateHardwareConfigSchema | None,
) -> GateHardwareConfig | None:
    if hardware is None:
        return None
    return GateHardwareConfig(
        gate_panel_handle=hardware.gate_panel_handle,
        hinge_handle=hardware.hinge_handle,
        latch_handle=hardware.latch_handle,
        requires_hinge_panel=hardware.requires_hinge_panel,
        hinge_panel_handle=hardware.hinge_panel_handle,
    )


def config_to_settings(config: FenceConfiguration) -> CalculatorSettings:
    """Convert the ``settings`` section to CalculatorSettings."""
    settings: SettingsConfig = config.settings
    return CalculatorSettings(
        post_width=settings.post_width,
        max_gap_width=settings.max_gap_width,
        include_posts=settings.include_posts,
        default_post_handle=settings.default_post_handle,
        gate_hardware=_gate_hardware(settings.gate_hardware),
        tax_rate=settings.tax_rate,
    )


def config_to_input(config: FenceConfiguration) -> CalculatorInput:
    """Convert a whole configuration to calculator input."""
    return CalculatorInput(
        shape=config_to_shape(config),
        settings=config_to_settings(config),
    )


__all__ = ["config_to_input", "config_to_settings", "config_to_shape"]
