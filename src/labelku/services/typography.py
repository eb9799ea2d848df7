"""
Page geometry and responsive font sizing.

Label widths vary roughly tenfold across the catalog, so font sizes scale
linearly with the page width and are clamped to readable bounds.
"""

from dataclasses import dataclass

from labelku.constants import (
    BODY_FONT_DIVISOR,
    BODY_FONT_MAX,
    BODY_FONT_MIN,
    FOOTER_FONT_MIN,
    HEADER_FONT_DIVISOR,
    HEADER_FONT_MAX,
    HEADER_FONT_MIN,
    LINE_HEIGHT_EXTRA_PT,
    MM_TO_PT,
    PAGE_MARGIN_PT,
    TITLE_FONT_DIVISOR,
    TITLE_FONT_MAX,
    TITLE_FONT_MIN,
)
from labelku.services.paper import PaperDimensions


def mm_to_pt(value_mm: float) -> float:
    """Convert millimeters to PDF points."""
    return value_mm * MM_TO_PT


@dataclass(frozen=True)
class PageGeometry:
    """Page bounds in points (1/72 inch).

    Attributes:
        width: Page width
        height: Page height
        margin: Margin applied on every side
    """

    width: float
    height: float
    margin: float = PAGE_MARGIN_PT

    @classmethod
    def from_paper(cls, paper: PaperDimensions) -> "PageGeometry":
        return cls(width=mm_to_pt(paper.width), height=mm_to_pt(paper.height))

    @property
    def usable_width(self) -> float:
        return self.width - 2 * self.margin


def _clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))


@dataclass(frozen=True)
class FontTiers:
    """Font sizes for one page, in points."""

    title: float
    header: float
    body: float

    @property
    def line_height(self) -> float:
        """Vertical advance for wrapped text lines."""
        return self.body + LINE_HEIGHT_EXTRA_PT

    @property
    def footer(self) -> float:
        return max(FOOTER_FONT_MIN, self.body - 1)


def compute_font_tiers(page_width: float) -> FontTiers:
    """Derive title/header/body font sizes from the page width in points.

    Args:
        page_width: Canvas width in points

    Returns:
        FontTiers with each tier clamped to its fixed range
    """
    return FontTiers(
        title=_clamp(page_width / TITLE_FONT_DIVISOR, TITLE_FONT_MIN, TITLE_FONT_MAX),
        header=_clamp(page_width / HEADER_FONT_DIVISOR, HEADER_FONT_MIN, HEADER_FONT_MAX),
        body=_clamp(page_width / BODY_FONT_DIVISOR, BODY_FONT_MIN, BODY_FONT_MAX),
    )
