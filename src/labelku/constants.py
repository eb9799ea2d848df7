"""
LabelKu - Numeric Constants

Simple numeric constants with ZERO internal imports to avoid circular dependencies.
For application-level constants (strings, paths), use config.py.
"""

from typing import Final

# ============================================================================
# Units & Page Geometry
# ============================================================================

MM_TO_PT: Final[float] = 2.83465
PAGE_MARGIN_PT: Final[float] = 15.0
CURSOR_START_OFFSET_PT: Final[float] = 10.0

# ============================================================================
# Responsive Font Sizing (divisor of page width, floor, ceiling)
# ============================================================================

TITLE_FONT_DIVISOR: Final[float] = 20.0
TITLE_FONT_MIN: Final[float] = 10.0
TITLE_FONT_MAX: Final[float] = 16.0

HEADER_FONT_DIVISOR: Final[float] = 25.0
HEADER_FONT_MIN: Final[float] = 8.0
HEADER_FONT_MAX: Final[float] = 12.0

BODY_FONT_DIVISOR: Final[float] = 30.0
BODY_FONT_MIN: Final[float] = 7.0
BODY_FONT_MAX: Final[float] = 10.0

FOOTER_FONT_MIN: Final[float] = 6.0

LINE_HEIGHT_EXTRA_PT: Final[float] = 2.0
CENTERED_ADVANCE_EXTRA_PT: Final[float] = 3.0

# ============================================================================
# Layout Spacing
# ============================================================================

OVERFLOW_GUARD_PT: Final[float] = 30.0
COLUMN_GUTTER_PT: Final[float] = 10.0
RULE_GAP_PT: Final[float] = 10.0
SECTION_GAP_PT: Final[float] = 8.0
RULE_LINE_WIDTH_PT: Final[float] = 0.5

# ============================================================================
# Footer Placement
# ============================================================================

BOTTOM_RULE_OFFSET_PT: Final[float] = 40.0
FOOTER_DATE_OFFSET_PT: Final[float] = 8.0
FOOTER_LINE_STEP_PT: Final[float] = 12.0
FOOTER_BOTTOM_LIMIT_PT: Final[float] = 10.0

# ============================================================================
# Boundary Timeouts (seconds)
# ============================================================================

CLIPBOARD_TIMEOUT_SECS: Final[int] = 5
OPEN_URL_TIMEOUT_SECS: Final[int] = 10
