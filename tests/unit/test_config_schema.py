"""Unit tests for the configuration schema and loader."""

import json
from pathlib import Path
from typing import Any

import pytest
from pydantic import ValidationError

from fences.application.config import (
    ConfigError,
    FenceConfiguration,
    InlineShapeConfig,
    LShapeConfig,
    RectangleShapeConfig,
    load_config,
    load_config_from_dict,
)
from fences.application.config.loader import _format_json_path
from fences.domain import GatePanelType


class TestFenceConfiguration:
    def test_minimal_inline(self) -> None:
        config = FenceConfiguration.model_validate(
            {"schema_version": "1.0", "shape": {"shape": "inline", "length": 3000}}
        )

        assert isinstance(config.shape, InlineShapeConfig)
        assert config.shape.length == 3000
        assert config.settings.post_width == 60.0
        assert config.settings.max_gap_width == 100.0
        assert config.settings.include_posts is False
        assert config.settings.tax_rate == pytest.approx(0.10)
        assert config.output.format == "text"

    def test_discriminates_l_shape(self) -> None:
        config = FenceConfiguration.model_validate(
            {
                "schema_version": "1.0",
                "shape": {"shape": "l-shape", "side1_length": 3000, "side2_length": 4000},
            }
        )
        assert isinstance(config.shape, LShapeConfig)

    def test_discriminates_rectangle(self, rectangle_config_data: dict[str, Any]) -> None:
        config = FenceConfiguration.model_validate(rectangle_config_data)
        assert isinstance(config.shape, RectangleShapeConfig)

    def test_gate_defaults_to_standard_leaf(self, inline_config_data: dict[str, Any]) -> None:
        config = FenceConfiguration.model_validate(inline_config_data)

        assert config.shape.gate is not None
        assert config.shape.gate.panel_type == GatePanelType.STANDARD_8MM

    def test_unknown_shape_rejected(self) -> None:
        with pytest.raises(ValidationError):
            FenceConfiguration.model_validate(
                {"schema_version": "1.0", "shape": {"shape": "circle", "radius": 2}}
            )

    def test_unsupported_version(self) -> None:
        with pytest.raises(ValidationError, match="Unsupported schema version"):
            FenceConfiguration.model_validate(
                {"schema_version": "2.0", "shape": {"shape": "inline", "length": 3000}}
            )

    def test_extra_fields_forbidden(self) -> None:
        with pytest.raises(ValidationError):
            FenceConfiguration.model_validate(
                {
                    "schema_version": "1.0",
                    "shape": {"shape": "inline", "length": 3000, "width": 10},
                }
            )

    @pytest.mark.parametrize("length", [0, -100])
    def test_length_must_be_positive(self, length: float) -> None:
        with pytest.raises(ValidationError):
            InlineShapeConfig(shape="inline", length=length)

    def test_l_shape_gate_side_limited_to_two(self) -> None:
        with pytest.raises(ValidationError, match="side must be 1 or 2"):
            LShapeConfig.model_validate(
                {
                    "shape": "l-shape",
                    "side1_length": 3000,
                    "side2_length": 4000,
                    "gate": {"position": 100, "width": 900, "side": 3},
                }
            )

    def test_rectangle_gate_requires_side(self) -> None:
        with pytest.raises(ValidationError):
            RectangleShapeConfig.model_validate(
                {
                    "shape": "rectangle",
                    "width": 3000,
                    "height": 4000,
                    "gate": {"position": 100, "width": 900},
                }
            )

    def test_gate_geometry_not_checked_by_schema(self) -> None:
        config = InlineShapeConfig.model_validate(
            {"shape": "inline", "length": 3000, "gate": {"position": 2500, "width": 900}}
        )
        assert config.gate is not None

    def test_hinge_panel_handle_required(self) -> None:
        with pytest.raises(ValidationError, match="hinge_panel_handle"):
            FenceConfiguration.model_validate(
                {
                    "schema_version": "1.0",
                    "shape": {"shape": "inline", "length": 3000},
                    "settings": {"gate_hardware": {"requires_hinge_panel": True}},
                }
            )

    def test_tax_rate_below_one(self) -> None:
        with pytest.raises(ValidationError):
            FenceConfiguration.model_validate(
                {
                    "schema_version": "1.0",
                    "shape": {"shape": "inline", "length": 3000},
                    "settings": {"tax_rate": 1.5},
                }
            )


class TestFormatJsonPath:
    def test_keys(self) -> None:
        assert _format_json_path(("shape", "gate", "position")) == "shape.gate.position"

    def test_index(self) -> None:
        assert _format_json_path(("output", "formats", 1)) == "output.formats[1]"


class TestLoadConfig:
    def test_load_valid_file(self, tmp_path: Path, inline_config_data: dict[str, Any]) -> None:
        path = tmp_path / "fence.json"
        path.write_text(json.dumps(inline_config_data))

        config = load_config(path)
        assert config.shape.length == 5000

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path / "missing.json")

        assert exc_info.value.error_type == "file_not_found"
        assert exc_info.value.path == tmp_path / "missing.json"

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text('{"schema_version": "1.0",')

        with pytest.raises(ConfigError) as exc_info:
            load_config(path)

        assert exc_info.value.error_type == "json_parse"
        assert exc_info.value.details[0]["line"] == 1

    def test_schema_violation(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text(
            json.dumps({"schema_version": "1.0", "shape": {"shape": "inline", "length": -5}})
        )

        with pytest.raises(ConfigError) as exc_info:
            load_config(path)

        error = exc_info.value
        assert error.error_type == "validation"
        assert error.details[0]["path"] == "shape.length"
        assert "Configuration validation failed" in str(error)


class TestLoadConfigFromDict:
    def test_valid(self, rectangle_config_data: dict[str, Any]) -> None:
        config = load_config_from_dict(rectangle_config_data)
        assert config.shape.width == 3000

    def test_nested_gate_path(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(
                {
                    "schema_version": "1.0",
                    "shape": {"shape": "inline", "length": 3000, "gate": {"width": 900}},
                }
            )

        paths = [d["path"] for d in exc_info.value.details]
        assert "shape.gate.position" in paths

    def test_missing_shape(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict({"schema_version": "1.0"})

        assert exc_info.value.details[0]["path"] == "shape"
