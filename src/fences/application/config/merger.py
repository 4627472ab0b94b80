"""Merging of CLI options into fence configuration.

Precedence is CLI options > configuration file > defaults. Only options
that were actually given (not None) override anything. The merged data is
validated again through the schema, so an option that does not apply to the
shape (e.g. ``--length`` on a rectangle) is reported as a ConfigError.
"""

from typing import Any

from fences.application.config.loader import load_config_from_dict
from fences.application.config.schema import FenceConfiguration

DEFAULT_SCHEMA_VERSION = "1.0"

# CLI option name -> shape field
SHAPE_FIELDS: dict[str, str] = {
    "length": "length",
    "side1": "side1_length",
    "side2": "side2_length",
    "width": "width",
    "height": "height",
}


def merge_config_with_cli(
    config: FenceConfiguration | None,
    *,
    shape: str | None = None,
    length: float | None = None,
    side1: float | None = None,
    side2: float | None = None,
    width: float | None = None,
    height: float | None = None,
    gate_position: float | None = None,
    gate_width: float | None = None,
    gate_side: int | None = None,
    include_posts: bool | None = None,
    post_width: float | None = None,
    max_gap_width: float | None = None,
    output_format: str | None = None,
    output_dir: str | None = None,
    project_name: str | None = None,
) -> FenceConfiguration:
    """Apply CLI overrides to a configuration, or build one from options alone.

    Args:
        config: Base configuration, or None to build from CLI options only
            (the shape then defaults to "inline").
        shape: Shape type; when it differs from the base shape the base
            dimensions are discarded.

    Returns:
        A new, validated FenceConfiguration.

    Raises:
        ConfigError: If the merged data does not validate.

    Example:
        >>> merged = merge_config_with_cli(None, length=3000, include_posts=True)
        >>> merged.shape.length
        3000.0
    """
    if config is None:
        data: dict[str, Any] = {
            "schema_version": DEFAULT_SCHEMA_VERSION,
            "shape": {"shape": shape or "inline"},
        }
    else:
        data = config.model_dump(mode="json", exclude_none=True)
        if shape is not None and shape != data["shape"]["shape"]:
            data["shape"] = {"shape": shape}

    dimensions = {
        "length": length,
        "side1": side1,
        "side2": side2,
        "width": width,
        "height": height,
    }
    for option, value in dimensions.items():
        if value is not None:
            data["shape"][SHAPE_FIELDS[option]] = value

    _merge_gate(data["shape"], gate_position, gate_width, gate_side)

    settings = data.setdefault("settings", {})
    _set_if_given(settings, "include_posts", include_posts)
    _set_if_given(settings, "post_width", post_width)
    _set_if_given(settings, "max_gap_width", max_gap_width)

    output = data.setdefault("output", {})
    _set_if_given(output, "format", output_format)
    _set_if_given(output, "output_dir", output_dir)
    _set_if_given(output, "project_name", project_name)

    return load_config_from_dict(data)


def _merge_gate(
    shape_data: dict[str, Any],
    position: float | None,
    width: float | None,
    side: int | None,
) -> None:
    if position is None and width is None and side is None:
        return
    gate = shape_data.setdefault("gate", {})
    _set_if_given(gate, "position", position)
    _set_if_given(gate, "width", width)
    _set_if_given(gate, "side", side)


def _set_if_given(target: dict[str, Any], key: str, value: Any) -> None:
    if value is not None:
        target[key] = value


__all__ = ["merge_config_with_cli"]
