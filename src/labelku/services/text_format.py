"""
Plain-text receipt payload.

The text is what gets copied to the clipboard and shared over WhatsApp,
Telegram and email, so the markers, labels and line order are fixed.
"""

from datetime import datetime

from labelku.models import ReceiptData
from labelku.utils.format_utils import format_receipt_date


def format_receipt_text(data: ReceiptData, now: datetime | None = None) -> str:
    """Render a receipt as the canonical multi-line text payload.

    The notes line is left out entirely when notes are blank.

    Args:
        data: Receipt to format
        now: Date printed on the last line (default: today)

    Returns:
        Payload with leading/trailing whitespace trimmed
    """
    now = now or datetime.now()

    lines = [
        "📦 RESI PENGIRIMAN",
        f"No. Resi: {data.tracking_number}",
        f"Ekspedisi: {data.courier.upper()} - {data.service}",
        "",
        "👤 PENGIRIM:",
        data.sender_name,
        data.sender_phone,
        data.sender_address,
        "",
        "📍 PENERIMA:",
        data.recipient_name,
        data.recipient_phone,
        data.recipient_address,
        "",
        "📦 INFORMASI PAKET:",
        f"Isi: {data.package_contents}",
        f"Berat: {data.weight} gram",
    ]
    if data.notes.strip():
        lines.append(f"Catatan: {data.notes}")
    lines += ["", f"📅 Tanggal: {format_receipt_date(now)}"]

    return "\n".join(lines).strip()
