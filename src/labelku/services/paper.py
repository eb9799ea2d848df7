"""
Paper dimension resolution for label sizes.

The token catalog is part of the output contract: printers and saved
settings refer to these names, so entries are only ever added.
"""

import logging
from typing import Final, NamedTuple

from labelku.models import Orientation

logger = logging.getLogger(__name__)

# Paper-size token -> (width, height) in millimeters, portrait
PAPER_SIZES: Final[dict[str, tuple[float, float]]] = {
    "30x55mm": (30, 55),
    "40x30mm": (40, 30),
    "40x50mm": (40, 50),
    "50x33mm": (50, 33),
    "50x40mm": (50, 40),
    "50x50mm": (50, 50),
    "50x100mm": (50, 100),
    "60x20mm": (60, 20),
    "76x130mm": (76, 130),
    "80x100mm": (80, 100),
    "100x100mm": (100, 100),
    "100x150mm": (100, 150),
    "100x180mm": (100, 180),
}

DEFAULT_PAPER_SIZE: Final[str] = "100x150mm"


class PaperDimensions(NamedTuple):
    """Physical label size in millimeters."""

    width: float
    height: float


def resolve_paper_dimensions(
    paper_size: str, orientation: "str | Orientation" = Orientation.PORTRAIT
) -> PaperDimensions:
    """Look up a paper-size token and apply the orientation.

    Unknown tokens resolve to the 100x150mm default; this is not an error.
    Landscape swaps width and height after the lookup.

    Args:
        paper_size: Catalog token such as "50x100mm"
        orientation: "portrait" or "landscape"

    Returns:
        PaperDimensions with width and height in millimeters
    """
    if paper_size in PAPER_SIZES:
        width, height = PAPER_SIZES[paper_size]
    else:
        logger.debug(f"Unknown paper size {paper_size!r}, using {DEFAULT_PAPER_SIZE}")
        width, height = PAPER_SIZES[DEFAULT_PAPER_SIZE]

    if Orientation.parse(orientation) is Orientation.LANDSCAPE:
        width, height = height, width

    return PaperDimensions(width, height)
