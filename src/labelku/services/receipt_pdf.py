"""
Shipping receipt document assembly.

Sections are laid out in a fixed order on one page sized to the selected
label: title, top rule, courier/payment header, sender, recipient,
package information, then a footer pinned above the bottom margin.
The finished layout is written to PDF with ReportLab.
"""

import io
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Final

from reportlab.pdfgen import canvas

from labelku.config import APP_NAME, DOCUMENT_TITLE
from labelku.constants import (
    BOTTOM_RULE_OFFSET_PT,
    CURSOR_START_OFFSET_PT,
    FOOTER_BOTTOM_LIMIT_PT,
    FOOTER_DATE_OFFSET_PT,
    FOOTER_LINE_STEP_PT,
    RULE_GAP_PT,
    SECTION_GAP_PT,
)
from labelku.models import ReceiptData
from labelku.services.layout import FontMetrics, PageLayout, ReportLabMetrics, font_name
from labelku.services.paper import resolve_paper_dimensions
from labelku.services.typography import FontTiers, PageGeometry, compute_font_tiers
from labelku.utils.format_utils import format_generated_timestamp

logger = logging.getLogger(__name__)

# Carrier code -> label printed on the receipt
CARRIER_LABELS: Final[dict[str, str]] = {
    "jnt": "J&T Express",
    "jne": "JNE",
    "lion": "Lion Parcel",
    "pos": "Pos Indonesia",
    "tiki": "TIKI",
    "wahana": "Wahana",
}


def carrier_label(code: str) -> str:
    """Display label for a carrier code; unknown codes are shown uppercased."""
    return CARRIER_LABELS.get(code.strip().lower(), code.upper())


def address_lines(address: str) -> list[str]:
    """Split a multi-line address into its non-blank, trimmed lines."""
    return [line.strip() for line in address.splitlines() if line.strip()]


@dataclass(frozen=True)
class RenderedReceipt:
    """A finished receipt document.

    Attributes:
        pdf: PDF file content
        filename: Suggested file name (resi-<tracking>.pdf)
        width_pt: Page width in points
        height_pt: Page height in points
        dropped_lines: Lines suppressed by the overflow guard
    """

    pdf: bytes
    filename: str
    width_pt: float
    height_pt: float
    dropped_lines: int = 0

    @property
    def truncated(self) -> bool:
        return self.dropped_lines > 0


def add_party_section(
    layout: PageLayout,
    heading: str,
    name: str,
    phone: str,
    address: str,
    tiers: FontTiers,
) -> None:
    """Place a sender/recipient block: heading, name, phone, address rows."""
    layout.add_text(heading, tiers.header, bold=True)
    layout.add_text(f"Nama: {name}", tiers.body)
    layout.add_text(f"Nomor: {phone}", tiers.body)
    for line in address_lines(address):
        layout.add_text(f"Alamat: {line}", tiers.body)


def add_package_section(layout: PageLayout, data: ReceiptData, tiers: FontTiers) -> None:
    """Place the package block; skipped entirely without contents or weight."""
    if not (data.package_contents or data.weight):
        return

    layout.add_text("Informasi Paket", tiers.header, bold=True)
    if data.package_contents:
        layout.add_text(f"Isi: {data.package_contents}", tiers.body)
    if data.weight:
        layout.add_text(f"Berat: {data.weight} gram", tiers.body)
    if data.notes.strip():
        layout.add_text(f"Catatan: {data.notes}", tiers.body)
    layout.advance(SECTION_GAP_PT)


def add_footer(layout: PageLayout, tracking_number: str, now: datetime, size: float) -> None:
    """Pin the bottom rule, generation date and tracking number to the page bottom.

    The rule and date sit at fixed offsets from the bottom edge. The
    tracking number goes one line below the date only while the content
    above has not run into that space.
    """
    height = layout.geometry.height
    bottom_rule_y = height - BOTTOM_RULE_OFFSET_PT
    layout.draw_line(bottom_rule_y)

    date_y = bottom_rule_y + FOOTER_DATE_OFFSET_PT
    layout.place_centered(f"Generated: {format_generated_timestamp(now)}", date_y, size)
    layout.advance(max(0.0, date_y - layout.cursor))

    if layout.cursor + FOOTER_LINE_STEP_PT < height - FOOTER_BOTTOM_LIMIT_PT:
        layout.place_centered(f"No. Resi: {tracking_number}", date_y + FOOTER_LINE_STEP_PT, size)
    else:
        logger.debug("No room for the tracking number line, omitting it")


def layout_receipt(
    data: ReceiptData, now: datetime, metrics: FontMetrics | None = None
) -> PageLayout:
    """Lay out a receipt on a page sized from its paper token and orientation.

    Args:
        data: Receipt to render (not modified)
        now: Generation time printed in the footer
        metrics: Text measurement backend (default: ReportLab Helvetica)

    Returns:
        The finished PageLayout with its display list and dropped-line count
    """
    geometry = PageGeometry.from_paper(resolve_paper_dimensions(data.paper_size, data.orientation))
    tiers = compute_font_tiers(geometry.width)
    layout = PageLayout(
        geometry,
        metrics or ReportLabMetrics(),
        tiers.line_height,
        cursor=geometry.margin + CURSOR_START_OFFSET_PT,
    )

    layout.add_centered_text(DOCUMENT_TITLE, tiers.title, bold=True)

    layout.draw_line(layout.cursor)
    layout.advance(RULE_GAP_PT)

    layout.add_two_column_text(
        f"Ekspedisi: {carrier_label(data.courier)}",
        f"Pembayaran: {data.service.upper()}",
        tiers.header,
    )
    layout.advance(SECTION_GAP_PT)

    add_party_section(
        layout, "Pengirim", data.sender_name, data.sender_phone, data.sender_address, tiers
    )
    layout.advance(SECTION_GAP_PT)

    add_party_section(
        layout, "Penerima", data.recipient_name, data.recipient_phone, data.recipient_address, tiers
    )
    layout.advance(SECTION_GAP_PT)

    add_package_section(layout, data, tiers)
    add_footer(layout, data.tracking_number, now, tiers.footer)
    return layout


def write_pdf(layout: PageLayout, title: str) -> bytes:
    """Draw a finished layout onto a single PDF page.

    Layout coordinates grow downward from the top edge; PDF coordinates
    grow upward from the bottom, so every y is flipped here.
    """
    width, height = layout.geometry.width, layout.geometry.height
    buffer = io.BytesIO()

    pdf = canvas.Canvas(buffer, pagesize=(width, height))
    pdf.setTitle(title)
    pdf.setAuthor(APP_NAME)
    pdf.setCreator(APP_NAME)

    for rule in layout.rules:
        pdf.setLineWidth(rule.width)
        pdf.line(rule.x1, height - rule.y, rule.x2, height - rule.y)

    for run in layout.runs:
        pdf.setFont(font_name(run.bold), run.size)
        pdf.drawString(run.x, height - run.y, run.text)

    pdf.showPage()
    pdf.save()
    return buffer.getvalue()


def render_receipt_pdf(
    data: ReceiptData,
    now: datetime | None = None,
    metrics: FontMetrics | None = None,
) -> RenderedReceipt:
    """Render a receipt to an in-memory PDF.

    Content that does not fit is dropped rather than raising; the result
    reports how many lines were lost.

    Args:
        data: Receipt to render
        now: Generation time for the footer (default: current local time)
        metrics: Text measurement backend

    Returns:
        RenderedReceipt holding the PDF bytes
    """
    now = now or datetime.now()
    layout = layout_receipt(data, now, metrics)

    if layout.truncated:
        logger.warning(
            f"Receipt {data.tracking_number}: {layout.dropped_lines} line(s) did not fit "
            f"on {data.paper_size} ({data.orientation})"
        )

    pdf_bytes = write_pdf(layout, title=f"{DOCUMENT_TITLE} {data.tracking_number}".strip())
    logger.info(f"Rendered receipt {data.tracking_number} ({len(pdf_bytes)} bytes)")

    return RenderedReceipt(
        pdf=pdf_bytes,
        filename=data.pdf_filename,
        width_pt=layout.geometry.width,
        height_pt=layout.geometry.height,
        dropped_lines=layout.dropped_lines,
    )
