"""Tests for format_utils module."""

from datetime import datetime

import pytest

from labelku.utils.format_utils import (
    format_generated_timestamp,
    format_receipt_date,
    format_rupiah,
)


class TestFormatRupiah:
    @pytest.mark.parametrize(
        "amount,expected",
        [
            (0, "Rp 0"),
            (500, "Rp 500"),
            (15000, "Rp 15.000"),
            (1250000, "Rp 1.250.000"),
        ],
    )
    def test_thousands_separator(self, amount, expected):
        assert format_rupiah(amount) == expected

    def test_negative(self):
        assert format_rupiah(-500) == "-Rp 500"


class TestFormatReceiptDate:
    def test_no_padding(self):
        assert format_receipt_date(datetime(2026, 1, 5)) == "5/1/2026"

    def test_two_digit_parts(self):
        assert format_receipt_date(datetime(2026, 10, 19)) == "19/10/2026"


class TestFormatGeneratedTimestamp:
    def test_padded_with_dot_time(self):
        assert format_generated_timestamp(datetime(2026, 1, 5, 9, 7)) == "05/01/2026, 09.07"

    def test_afternoon(self):
        assert format_generated_timestamp(datetime(2026, 10, 19, 14, 30)) == "19/10/2026, 14.30"
