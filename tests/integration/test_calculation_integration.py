"""End-to-end tests of the calculation pipeline.

Configuration data goes through the loader, the adapter and the calculate
command; the assertions check the layout and BOM that come out.
"""

from typing import Any

import pytest

from fences.application import CalculatorInput, calculate
from fences.application.commands import CalculateFenceCommand
from fences.application.config import config_to_input, load_config_from_dict
from fences.application.factory import (
    ServiceFactory,
    get_factory,
    reset_factory,
    set_factory,
)
from fences.domain import (
    BomItemType,
    CalculatorSettings,
    Catalogue,
    GateConfig,
    InlineShape,
    LShape,
    RectangleShape,
)
from fences.domain.catalogue import GATE_PANELS_8MM, POSTS, STANDARD_PANELS


def spigots(output) -> int:
    return output.bom.quantity_of(BomItemType.SPIGOT)


class TestFromConfiguration:
    def test_gated_inline(
        self, calculate_command: CalculateFenceCommand, inline_config_data: dict[str, Any]
    ) -> None:
        config = load_config_from_dict(inline_config_data)
        output = calculate_command.execute(config_to_input(config))

        assert output.success
        assert output.failed_runs == []
        # Gated panels plus six spigots
        assert output.bom.subtotal == pytest.approx(709.51)
        assert output.bom.total == pytest.approx(780.46)

    def test_rectangle(
        self,
        calculate_command: CalculateFenceCommand,
        rectangle_config_data: dict[str, Any],
    ) -> None:
        config = load_config_from_dict(rectangle_config_data)
        output = calculate_command.execute(config_to_input(config))

        assert [r.run_id for r in output.runs] == ["side-1", "side-2", "side-3", "side-4"]
        assert output.success
        assert len(output.fitting_results) == 4


class TestSharedCorners:
    @pytest.fixture
    def with_posts(self) -> CalculatorSettings:
        return CalculatorSettings(include_posts=True)

    def test_l_shape_corner_counted_once(
        self, calculate_command: CalculateFenceCommand, with_posts: CalculatorSettings
    ) -> None:
        output = calculate_command.execute(CalculatorInput(LShape(3000, 4000), with_posts))
        first, second = output.fitting_results

        assert spigots(output) == (first.panel_count + 1) + (second.panel_count + 1) - 1

    def test_rectangle_four_corners_shared(
        self, calculate_command: CalculateFenceCommand, with_posts: CalculatorSettings
    ) -> None:
        output = calculate_command.execute(
            CalculatorInput(RectangleShape(3000, 4000), with_posts)
        )
        per_run = sum(len(result.posts) for result in output.fitting_results)

        assert spigots(output) == per_run - 4

    def test_gate_posts_never_shared(
        self, calculate_command: CalculateFenceCommand
    ) -> None:
        config = load_config_from_dict(
            {
                "schema_version": "1.0",
                "shape": {
                    "shape": "l-shape",
                    "side1_length": 5000,
                    "side2_length": 3000,
                    "gate": {"position": 2000, "width": 900, "side": 1},
                },
                "settings": {"include_posts": True},
            }
        )
        output = calculate_command.execute(config_to_input(config))
        first, second = output.fitting_results

        assert len(first.posts) == first.panel_count + 4
        assert spigots(output) == len(first.posts) + len(second.posts) - 1


class TestRunOutcomes:
    def test_bom_built_from_fitted_runs(
        self, calculate_command: CalculateFenceCommand
    ) -> None:
        output = calculate_command.execute(CalculatorInput(LShape(3000, 100)))

        assert not output.success
        assert output.failed_runs == ["run-2"]
        assert output.bom.quantity_of(BomItemType.PANEL) == 2
        assert len(output.warnings) == 1

    def test_gate_only_on_its_side(self) -> None:
        shape = RectangleShape(3000, 4000, gate=GateConfig(1000, 900, side=3))
        output = calculate(CalculatorInput(shape))

        gated = [r.run_id for r in output.fitting_results if r.gate is not None]
        assert gated == ["side-3"]


class TestServiceFactory:
    def teardown_method(self) -> None:
        reset_factory()

    def test_global_factory_is_shared(self) -> None:
        assert get_factory() is get_factory()

    def test_set_factory(self) -> None:
        # Only 1000mm panels on offer
        catalogue = Catalogue(
            standard_panels=[p for p in STANDARD_PANELS if p.width == 1000],
            gate_panels=GATE_PANELS_8MM,
            posts=POSTS,
        )
        set_factory(ServiceFactory(catalogue=catalogue))

        command = get_factory().create_calculate_command()
        output = command.execute(CalculatorInput(InlineShape(2250)))

        assert [p.panel.width for p in output.fitting_results[0].panels] == [1000.0] * 2

    def test_reset_factory(self) -> None:
        set_factory(ServiceFactory())
        first = get_factory()
        reset_factory()

        assert get_factory() is not first
