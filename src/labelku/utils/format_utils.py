"""
LabelKu - Format Utilities Module

Fixed-locale (id-ID) formatting for dates and currency shown on receipts.
"""

from datetime import datetime


def format_rupiah(amount: int) -> str:
    """Format an integer amount as Indonesian Rupiah.

    Args:
        amount: Amount in whole Rupiah

    Returns:
        Formatted string with dot thousands separators (e.g., "Rp 15.000")
    """
    sign = "-" if amount < 0 else ""
    grouped = f"{abs(int(amount)):,}".replace(",", ".")
    return f"{sign}Rp {grouped}"


def format_receipt_date(now: datetime) -> str:
    """Format a date the way id-ID short dates read (e.g., "5/1/2026")."""
    return f"{now.day}/{now.month}/{now.year}"


def format_generated_timestamp(now: datetime) -> str:
    """Format a two-digit id-ID date and time (e.g., "05/01/2026, 09.07").

    Args:
        now: Moment the document is generated

    Returns:
        Date and time with a dot as the hour/minute separator
    """
    return f"{now:%d/%m/%Y}, {now:%H.%M}"
