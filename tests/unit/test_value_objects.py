"""Unit tests for domain value objects and shapes."""

import pytest

from fences.domain import (
    GateConfig,
    GatePanelType,
    InlineShape,
    LShape,
    PanelCategory,
    PanelSize,
    PostSpec,
    RectangleShape,
    ShapeType,
    ValidationWarning,
    WarningSeverity,
    WarningType,
)
from fences.domain.value_objects import MountType


class TestPanelSize:
    def test_standard_panel_description(self) -> None:
        panel = PanelSize(1200.0, 1200.0, "gp-12mm-1200mm", PanelCategory.STANDARD, 104.05)

        assert panel.glass_thickness == 12
        assert panel.description == "12mm Glass Panel 1200mm × 1200mm"

    def test_gate_panel_is_8mm(self) -> None:
        panel = PanelSize(900.0, 1200.0, "gg-8mm-0900mm", PanelCategory.GATE, 64.14)

        assert panel.glass_thickness == 8
        assert panel.description.startswith("8mm Glass Gate Panel")

    @pytest.mark.parametrize("width", [0.0, -50.0])
    def test_non_positive_width_rejected(self, width: float) -> None:
        with pytest.raises(ValueError, match="dimensions must be positive"):
            PanelSize(width, 1200.0, "gp-bad", PanelCategory.STANDARD, 10.0)

    def test_empty_handle_rejected(self) -> None:
        with pytest.raises(ValueError, match="handle"):
            PanelSize(500.0, 1200.0, "", PanelCategory.STANDARD, 10.0)

    def test_negative_price_rejected(self) -> None:
        with pytest.raises(ValueError, match="price"):
            PanelSize(500.0, 1200.0, "gp-500", PanelCategory.STANDARD, -1.0)

    def test_is_frozen(self) -> None:
        panel = PanelSize(500.0, 1200.0, "gp-500", PanelCategory.STANDARD, 43.35)
        with pytest.raises(AttributeError):
            panel.width = 600.0  # type: ignore[misc]


class TestPostSpec:
    def test_valid_post(self) -> None:
        post = PostSpec("spigot-a", "Spigot A", MountType.CORE_DRILLED, 52.57, 60.0)
        assert post.body_width == 60.0

    def test_zero_body_width_rejected(self) -> None:
        with pytest.raises(ValueError, match="body width"):
            PostSpec("spigot-a", "Spigot A", MountType.CORE_DRILLED, 52.57, 0.0)


class TestValidationWarning:
    def test_error_severity(self) -> None:
        warning = ValidationWarning(
            WarningType.GAP_EXCEEDS_LIMIT, WarningSeverity.ERROR, "too wide", 120.0
        )
        assert warning.is_error
        assert warning.position == 120.0

    def test_info_is_not_error(self) -> None:
        warning = ValidationWarning(WarningType.NO_VALID_FIT, WarningSeverity.INFO, "note")
        assert not warning.is_error

    def test_empty_message_rejected(self) -> None:
        with pytest.raises(ValueError):
            ValidationWarning(WarningType.NO_VALID_FIT, WarningSeverity.ERROR, "")


class TestShapes:
    def test_shape_types(self) -> None:
        assert InlineShape(3000).shape_type == ShapeType.INLINE
        assert LShape(3000, 4000).shape_type == ShapeType.L_SHAPE
        assert RectangleShape(3000, 4000).shape_type == ShapeType.RECTANGLE

    def test_gate_end(self) -> None:
        gate = GateConfig(position=2000, width=900)
        assert gate.end == 2900
        assert gate.panel_type == GatePanelType.STANDARD_8MM

    def test_without_side_drops_side(self) -> None:
        gate = GateConfig(position=100, width=900, side=2)
        assert gate.without_side().side is None
        assert gate.without_side().position == 100

    def test_l_shape_gate_side_out_of_range(self) -> None:
        with pytest.raises(ValueError, match="between 1 and 2"):
            LShape(3000, 4000, gate=GateConfig(100, 900, side=3))

    def test_l_shape_gate_requires_side(self) -> None:
        with pytest.raises(ValueError):
            LShape(3000, 4000, gate=GateConfig(100, 900))

    def test_rectangle_accepts_side_four(self) -> None:
        shape = RectangleShape(3000, 4000, gate=GateConfig(100, 900, side=4))
        assert shape.gate is not None
        assert shape.gate.side == 4
