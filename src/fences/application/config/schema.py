"""Pydantic models for fence configuration files.

The root model is ``FenceConfiguration``. The fence outline is a
discriminated union keyed on the ``shape`` field so that each variant only
accepts the dimensions that make sense for it.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from fences.domain.value_objects import GatePanelType

# Supported schema versions for configuration files
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class GateConfigSchema(BaseModel):
    """Gate opening on an inline run.

    Position and width are not cross-checked against the run length here;
    the calculator reports an out-of-run gate as a warning.

    Attributes:
        position: Distance in mm from the start of the run to the gate.
        width: Opening width in mm.
        panel_type: Glass used for the gate leaf.
    """

    model_config = ConfigDict(extra="forbid")

    position: float
    width: float
    panel_type: GatePanelType = GatePanelType.STANDARD_8MM


class SideGateConfigSchema(GateConfigSchema):
    """Gate opening on one side of a multi-run shape."""

    side: int = Field(..., ge=1, description="1-based side the gate sits on")


class InlineShapeConfig(BaseModel):
    """A single straight run."""

    model_config = ConfigDict(extra="forbid")

    shape: Literal["inline"]
    length: float = Field(..., gt=0)
    gate: GateConfigSchema | None = None


class LShapeConfig(BaseModel):
    """Two runs meeting at one corner."""

    model_config = ConfigDict(extra="forbid")

    shape: Literal["l-shape"]
    side1_length: float = Field(..., gt=0)
    side2_length: float = Field(..., gt=0)
    gate: SideGateConfigSchema | None = None

    @model_validator(mode="after")
    def validate_gate_side(self) -> "LShapeConfig":
        """An L-shape only has sides 1 and 2."""
        if self.gate is not None and self.gate.side > 2:
            raise ValueError(f"L-shape gate side must be 1 or 2, got {self.gate.side}")
        return self


class RectangleShapeConfig(BaseModel):
    """Closed rectangle of four runs."""

    model_config = ConfigDict(extra="forbid")

    shape: Literal["rectangle"]
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)
    gate: SideGateConfigSchema | None = None

    @model_validator(mode="after")
    def validate_gate_side(self) -> "RectangleShapeConfig":
        """A rectangle has sides 1 to 4."""
        if self.gate is not None and self.gate.side > 4:
            raise ValueError(
                f"Rectangle gate side must be between 1 and 4, got {self.gate.side}"
            )
        return self


ShapeConfigSchema = Annotated[
    Union[InlineShapeConfig, LShapeConfig, RectangleShapeConfig],
    Field(discriminator="shape"),
]


class GateHardwareConfigSchema(BaseModel):
    """Hardware billed with every gate."""

    model_config = ConfigDict(extra="forbid")

    gate_panel_handle: str | None = None
    hinge_handle: str | None = None
    latch_handle: str | None = None
    requires_hinge_panel: bool = False
    hinge_panel_handle: str | None = None

    @model_validator(mode="after")
    def validate_hinge_panel(self) -> "GateHardwareConfigSchema":
        """A required hinge panel must name a handle."""
        if self.requires_hinge_panel and not self.hinge_panel_handle:
            raise ValueError(
                "hinge_panel_handle is required when requires_hinge_panel is true"
            )
        return self


class SettingsConfig(BaseModel):
    """Calculator settings.

    Attributes:
        post_width: Spigot body width in mm.
        max_gap_width: Largest gap allowed between panels in mm.
        include_posts: Whether spigots appear on the bill of materials.
        default_post_handle: Catalogue handle of the spigot to bill.
        gate_hardware: Hardware billed with every gate.
        tax_rate: Flat tax rate applied to the subtotal.
    """

    model_config = ConfigDict(extra="forbid")

    post_width: float = Field(default=60.0, ge=0)
    max_gap_width: float = Field(default=100.0, gt=0)
    include_posts: bool = False
    default_post_handle: str | None = None
    gate_hardware: GateHardwareConfigSchema | None = None
    tax_rate: float = Field(default=0.10, ge=0, lt=1)


class OutputConfig(BaseModel):
    """Output format and file options.

    Attributes:
        format: Format of the bill of materials printed to the console.
        include_layout: Whether the per-run layout is printed before the BOM.
        formats: Exporters to run when writing files.
        output_dir: Directory for exported files.
        project_name: Base name for exported files.
    """

    model_config = ConfigDict(extra="forbid")

    format: Literal["text", "json", "csv"] = "text"
    include_layout: bool = True
    formats: list[str] = Field(default_factory=list, description="Exporters to run")
    output_dir: str | None = Field(default=None, description="Directory for output files")
    project_name: str = Field(default="fence", description="Base name for output files")


class FenceConfiguration(BaseModel):
    """Root configuration model for a fence.

    Example:
        >>> config = FenceConfiguration(
        ...     schema_version="1.0",
        ...     shape=InlineShapeConfig(shape="inline", length=3000),
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    shape: ShapeConfigSchema
    settings: SettingsConfig = Field(default_factory=SettingsConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that the schema version is supported."""
        if v not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(
                f"Unsupported schema version '{v}'. Supported versions: {supported}"
            )
        return v


__all__ = [
    "FenceConfiguration",
    "GateConfigSchema",
    "GateHardwareConfigSchema",
    "InlineShapeConfig",
    "LShapeConfig",
    "OutputConfig",
    "RectangleShapeConfig",
    "SUPPORTED_VERSIONS",
    "SettingsConfig",
    "ShapeConfigSchema",
    "SideGateConfigSchema",
]
