"""Unit tests for the product catalogue."""

import pytest

from fences.domain import Catalogue, PanelCategory, PanelSize
from fences.domain.catalogue import GATE_PANELS_8MM, STANDARD_PANELS


class TestCatalogueTables:
    def test_standard_panels_cover_100_to_2000_in_50mm_steps(
        self, catalogue: Catalogue
    ) -> None:
        widths = [p.width for p in catalogue.standard_panels]
        assert widths == [float(w) for w in range(100, 2001, 50)]

    def test_handles_are_zero_padded(self, catalogue: Catalogue) -> None:
        assert catalogue.panel_by_width(100.0).handle == "gp-12mm-0100mm"
        assert catalogue.panel_by_width(1400.0).handle == "gp-12mm-1400mm"

    def test_gate_panels_700_to_1000(self, catalogue: Catalogue) -> None:
        widths = [p.width for p in catalogue.gate_panels]
        assert widths[0] == 700.0
        assert widths[-1] == 1000.0
        assert all(p.category == PanelCategory.GATE for p in catalogue.gate_panels)

    def test_min_and_max_widths(self, catalogue: Catalogue) -> None:
        assert catalogue.min_panel_width == 100.0
        assert catalogue.max_panel_width == 2000.0

    def test_available_widths_widest_first(self, catalogue: Catalogue) -> None:
        widths = catalogue.available_widths()
        assert widths[0] == 2000.0
        assert widths[-1] == 100.0

    def test_unlisted_width(self, catalogue: Catalogue) -> None:
        assert catalogue.panel_by_width(1234.0) is None


class TestLargestPanelAtOrBelow:
    @pytest.mark.parametrize(
        "target,expected",
        [
            (1410.0, 1400.0),
            (1400.0, 1400.0),
            (1449.99, 1400.0),
            (100.0, 100.0),
            (2040.0, 2000.0),
        ],
    )
    def test_snaps_down(
        self, catalogue: Catalogue, target: float, expected: float
    ) -> None:
        panel = catalogue.largest_panel_at_or_below(target)
        assert panel is not None
        assert panel.width == expected

    def test_below_minimum_has_no_panel(self, catalogue: Catalogue) -> None:
        assert catalogue.largest_panel_at_or_below(99.9) is None


class TestGatePanelFor:
    def test_exact_width(self, catalogue: Catalogue) -> None:
        assert catalogue.gate_panel_for(900).handle == "gg-8mm-0900mm"

    def test_rounds_up_to_next_leaf(self, catalogue: Catalogue) -> None:
        assert catalogue.gate_panel_for(910).width == 925.0

    def test_narrow_opening_gets_narrowest_leaf(self, catalogue: Catalogue) -> None:
        assert catalogue.gate_panel_for(500).width == 700.0

    def test_wide_opening_falls_back_to_widest(self, catalogue: Catalogue) -> None:
        assert catalogue.gate_panel_for(1200).width == 1000.0


class TestLookups:
    def test_find_post(self, catalogue: Catalogue) -> None:
        post = catalogue.find_post("spigot-pro-core-drill-round-clear-coat")
        assert post is not None
        assert post.price == 63.37

    def test_default_post_is_first(self, catalogue: Catalogue) -> None:
        assert catalogue.default_post.handle == "spigot-value-core-drill-square-clear-coat"

    def test_find_hardware(self, catalogue: Catalogue) -> None:
        assert catalogue.find_hardware("kit-g2g-std-latch-kit-black") is not None
        assert catalogue.find_hardware("nope") is None

    def test_find_hinge_panel(self, catalogue: Catalogue) -> None:
        assert catalogue.find_hinge_panel("gh-12mm-1200mm") is not None


class TestCustomCatalogue:
    def test_panels_sorted_by_width(self) -> None:
        catalogue = Catalogue(standard_panels=tuple(reversed(STANDARD_PANELS)))
        assert catalogue.min_panel_width == 100.0

    def test_requires_standard_panels(self) -> None:
        with pytest.raises(ValueError, match="standard panel"):
            Catalogue(standard_panels=())

    def test_requires_gate_panels(self) -> None:
        with pytest.raises(ValueError, match="gate panel"):
            Catalogue(gate_panels=())

    def test_restricted_catalogue(self) -> None:
        only_1000 = (PanelSize(1000.0, 1200.0, "gp-1000", PanelCategory.STANDARD, 86.7),)
        catalogue = Catalogue(standard_panels=only_1000, gate_panels=GATE_PANELS_8MM)
        assert catalogue.largest_panel_at_or_below(1999.0).width == 1000.0
        assert catalogue.largest_panel_at_or_below(999.0) is None
