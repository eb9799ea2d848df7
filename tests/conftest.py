"""Pytest configuration for labelku tests.

Provides a sample receipt, a fixed clock and a fixed-width font metrics
stand-in so wrapping results are predictable.
"""

from datetime import datetime

import pytest

from labelku.models import ReceiptData


class FixedWidthMetrics:
    """Every character is half the font size wide; wraps on spaces."""

    def measure_width(self, text, size, bold=False):
        return len(text) * size * 0.5

    def wrap_to_width(self, text, max_width, size, bold=False):
        lines = []
        current = ""
        for word in text.split():
            candidate = f"{current} {word}" if current else word
            if current and self.measure_width(candidate, size) > max_width:
                lines.append(current)
                current = word
            else:
                current = candidate
        if current:
            lines.append(current)
        return lines


@pytest.fixture
def fixed_metrics():
    return FixedWidthMetrics()


@pytest.fixture
def fixed_now():
    return datetime(2026, 10, 19, 14, 30)


@pytest.fixture
def sample_receipt():
    return ReceiptData(
        sender_name="Budi Santoso",
        sender_phone="081234567890",
        sender_address="Jl. Merdeka No. 10\nBandung",
        recipient_name="Siti Aminah",
        recipient_phone="082198765432",
        recipient_address="Jl. Sudirman No. 5\nJakarta Selatan",
        package_contents="Buku",
        weight="500",
        notes="",
        courier="jnt",
        service="Reguler",
        paper_size="100x150mm",
        orientation="portrait",
        shipping_cost=15000,
        tracking_number="JNT12345678ABCD",
    )
