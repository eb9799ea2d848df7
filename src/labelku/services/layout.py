"""
Text layout primitives for single-page labels.

Layout runs top-down: a vertical cursor starts near the top margin and
only moves down. Every primitive places content at the cursor and then
advances it. Placed content is recorded as a display list of TextRun and
RuleLine items in top-down coordinates; drawing them onto a PDF page is
the writer's job (see receipt_pdf.py).

Overflow policy: once the cursor passes ``page height - OVERFLOW_GUARD_PT``
further lines are dropped instead of being drawn over the footer. Dropped
lines are counted on the layout so callers can tell that content was cut.
"""

import logging
from dataclasses import dataclass
from typing import Protocol

from reportlab.lib.utils import simpleSplit
from reportlab.pdfbase import pdfmetrics

from labelku.constants import (
    CENTERED_ADVANCE_EXTRA_PT,
    COLUMN_GUTTER_PT,
    OVERFLOW_GUARD_PT,
    RULE_LINE_WIDTH_PT,
)
from labelku.services.typography import PageGeometry

logger = logging.getLogger(__name__)

REGULAR_FONT = "Helvetica"
BOLD_FONT = "Helvetica-Bold"


def font_name(bold: bool) -> str:
    return BOLD_FONT if bold else REGULAR_FONT


class FontMetrics(Protocol):
    """Text measurement capability used by the layout engine."""

    def measure_width(self, text: str, size: float, bold: bool = False) -> float:
        """Width of ``text`` in points at ``size``."""
        ...

    def wrap_to_width(
        self, text: str, max_width: float, size: float, bold: bool = False
    ) -> list[str]:
        """Break ``text`` into lines no wider than ``max_width`` where possible."""
        ...


class ReportLabMetrics:
    """FontMetrics backed by reportlab's built-in Helvetica AFM data."""

    def measure_width(self, text: str, size: float, bold: bool = False) -> float:
        return pdfmetrics.stringWidth(text, font_name(bold), size)

    def wrap_to_width(
        self, text: str, max_width: float, size: float, bold: bool = False
    ) -> list[str]:
        # simpleSplit keeps a single word longer than max_width on its own line
        return simpleSplit(text, font_name(bold), size, max_width)


@dataclass(frozen=True)
class TextRun:
    """A line of text placed on the page.

    Attributes:
        text: Line content
        x: Left edge in points
        y: Baseline, measured down from the top edge
        size: Font size in points
        bold: Whether the bold face is used
    """

    text: str
    x: float
    y: float
    size: float
    bold: bool = False


@dataclass(frozen=True)
class RuleLine:
    """A horizontal rule from x1 to x2 at y (measured down from the top)."""

    x1: float
    x2: float
    y: float
    width: float = RULE_LINE_WIDTH_PT


class PageLayout:
    """Per-render layout state: geometry, cursor and the display list.

    One instance belongs to one render call and is never shared.
    """

    def __init__(
        self,
        geometry: PageGeometry,
        metrics: FontMetrics,
        line_height: float,
        cursor: float = 0.0,
    ) -> None:
        """Initialize the layout.

        Args:
            geometry: Page bounds in points
            metrics: Text measurement backend
            line_height: Vertical advance per wrapped line
            cursor: Initial vertical offset from the top edge
        """
        self.geometry = geometry
        self.metrics = metrics
        self.line_height = line_height
        self.cursor = cursor
        self.runs: list[TextRun] = []
        self.rules: list[RuleLine] = []
        self.dropped_lines = 0

    @property
    def guard_limit(self) -> float:
        """Cursor position past which no more lines are placed."""
        return self.geometry.height - OVERFLOW_GUARD_PT

    @property
    def truncated(self) -> bool:
        return self.dropped_lines > 0

    def has_room(self) -> bool:
        return self.cursor <= self.guard_limit

    def advance(self, amount: float) -> None:
        """Move the cursor down by ``amount`` points."""
        if amount < 0:
            raise ValueError(f"Layout cursor cannot move up (amount={amount})")
        self.cursor += amount

    def place(self, text: str, x: float, y: float, size: float, bold: bool = False) -> TextRun:
        """Record text at an explicit position without touching the cursor."""
        run = TextRun(text=text, x=x, y=y, size=size, bold=bold)
        self.runs.append(run)
        return run

    def place_centered(self, text: str, y: float, size: float, bold: bool = False) -> TextRun:
        """Record text horizontally centered on the page at an explicit y."""
        width = self.metrics.measure_width(text, size, bold)
        return self.place(text, (self.geometry.width - width) / 2, y, size, bold)

    def _drop(self, count: int) -> None:
        self.dropped_lines += count
        logger.debug(f"Overflow guard dropped {count} line(s) at y={self.cursor:.1f}")

    def add_centered_text(self, text: str, size: float, bold: bool = False) -> None:
        """Place one centered line at the cursor and advance by ``size + 3``."""
        if not self.has_room():
            self._drop(1)
            return
        self.place_centered(text, self.cursor, size, bold)
        self.cursor += size + CENTERED_ADVANCE_EXTRA_PT

    def add_text(self, text: str, size: float, bold: bool = False, indent: float = 0.0) -> None:
        """Wrap ``text`` to the usable width and place it left-aligned.

        Each wrapped line advances the cursor by the line height. Lines
        that would start past the overflow guard are dropped.
        """
        max_width = self.geometry.usable_width - indent
        lines = self.metrics.wrap_to_width(text, max_width, size, bold)
        x = self.geometry.margin + indent

        for index, line in enumerate(lines):
            if not self.has_room():
                self._drop(len(lines) - index)
                return
            self.place(line, x, self.cursor, size, bold)
            self.cursor += self.line_height

    def add_two_column_text(self, left: str, right: str, size: float) -> None:
        """Place independently wrapped left/right texts side by side.

        Row ``i`` shows line ``i`` of each side; the shorter side leaves
        its trailing rows empty. Rows past the overflow guard are dropped.
        """
        half = self.geometry.usable_width / 2
        column_width = half - COLUMN_GUTTER_PT
        left_lines = self.metrics.wrap_to_width(left, column_width, size)
        right_lines = self.metrics.wrap_to_width(right, column_width, size)
        rows = max(len(left_lines), len(right_lines))

        left_x = self.geometry.margin
        right_x = self.geometry.margin + half

        for row in range(rows):
            if not self.has_room():
                self._drop(rows - row)
                return
            if row < len(left_lines) and left_lines[row]:
                self.place(left_lines[row], left_x, self.cursor, size)
            if row < len(right_lines) and right_lines[row]:
                self.place(right_lines[row], right_x, self.cursor, size)
            self.cursor += self.line_height

    def draw_line(self, y: float) -> RuleLine:
        """Record a full-width rule at an explicit y, independent of the cursor."""
        rule = RuleLine(x1=self.geometry.margin, x2=self.geometry.width - self.geometry.margin, y=y)
        self.rules.append(rule)
        return rule
