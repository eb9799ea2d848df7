"""
LabelKu - PDF Utilities Module

Reads back generated receipt PDFs, e.g. to confirm the physical label
size a printer will receive.
"""

import os
from typing import Any

import pikepdf

from labelku.constants import MM_TO_PT
from labelku.utils.logger import logger


def get_pdf_info(file_path: str) -> dict[str, Any]:
    """Get page count, first-page size and metadata of a PDF file.

    Args:
        file_path: Path to the PDF file

    Returns:
        Dictionary with pages, width/height in points and millimeters,
        title, producer and file_size. Zero/empty values when the file
        is missing or unreadable.
    """
    info: dict[str, Any] = {
        "pages": 0,
        "width_pt": 0.0,
        "height_pt": 0.0,
        "width_mm": 0.0,
        "height_mm": 0.0,
        "title": "",
        "producer": "",
        "file_size": 0,
    }

    if not file_path or not os.path.exists(file_path):
        return info

    info["file_size"] = os.path.getsize(file_path)

    try:
        with pikepdf.open(file_path) as pdf:
            info["pages"] = len(pdf.pages)
            if pdf.pages:
                x0, y0, x1, y1 = (float(v) for v in pdf.pages[0].mediabox)
                info["width_pt"] = x1 - x0
                info["height_pt"] = y1 - y0
                info["width_mm"] = round(info["width_pt"] / MM_TO_PT, 1)
                info["height_mm"] = round(info["height_pt"] / MM_TO_PT, 1)
            if "/Title" in pdf.docinfo:
                info["title"] = str(pdf.docinfo["/Title"])
            if "/Producer" in pdf.docinfo:
                info["producer"] = str(pdf.docinfo["/Producer"])
    except pikepdf.PdfError as e:
        logger.error(f"Error reading PDF info for {os.path.basename(file_path)}: {e}")

    return info
