"""Tests for page geometry and responsive font sizing."""

import pytest

from labelku.services.paper import PaperDimensions
from labelku.services.typography import (
    FontTiers,
    PageGeometry,
    compute_font_tiers,
    mm_to_pt,
)


class TestPageGeometry:
    def test_mm_to_pt(self):
        assert mm_to_pt(10) == pytest.approx(28.3465)

    def test_from_paper(self):
        geometry = PageGeometry.from_paper(PaperDimensions(100, 150))
        assert geometry.width == pytest.approx(283.465)
        assert geometry.height == pytest.approx(425.1975)
        assert geometry.margin == 15

    def test_usable_width(self):
        geometry = PageGeometry(width=200, height=300)
        assert geometry.usable_width == 170


class TestComputeFontTiers:
    def test_small_width_hits_floors(self):
        tiers = compute_font_tiers(100)
        assert tiers.title == 10
        assert tiers.header == 8
        assert tiers.body == 7

    def test_large_width_hits_ceilings(self):
        tiers = compute_font_tiers(1000)
        assert tiers.title == 16
        assert tiers.header == 12
        assert tiers.body == 10

    def test_scales_linearly_between_bounds(self):
        tiers = compute_font_tiers(240)
        assert tiers.title == pytest.approx(12)
        assert tiers.header == pytest.approx(9.6)
        assert tiers.body == pytest.approx(8)

    def test_smallest_label(self):
        tiers = compute_font_tiers(mm_to_pt(30))
        assert (tiers.title, tiers.header, tiers.body) == (10, 8, 7)

    def test_line_height(self):
        assert FontTiers(title=12, header=9, body=8).line_height == 10

    def test_footer_size(self):
        assert FontTiers(title=16, header=12, body=10).footer == 9
        assert FontTiers(title=10, header=8, body=7).footer == 6
