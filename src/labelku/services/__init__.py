"""
LabelKu - Services Package

Receipt layout, rendering and the collaborators around it.
"""

from labelku.services.receipt_pdf import RenderedReceipt, render_receipt_pdf
from labelku.services.text_format import format_receipt_text

__all__ = ["RenderedReceipt", "render_receipt_pdf", "format_receipt_text"]
