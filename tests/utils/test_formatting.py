"""
Tests for size and time formatting.
"""

from datetime import datetime

from src.utils.formatting import format_size, format_time, normalize_size


class TestFormatSize:
    """Test cases for format_size."""

    def test_zero_is_a_known_size(self):
        assert format_size(0) == "0 B (0 bytes)"

    def test_unknown_size(self):
        assert format_size(None) == "unknown"
        assert format_size(-1) == "unknown"

    def test_bytes_below_one_kilobyte(self):
        assert format_size(1023) == "1023 B (1023 bytes)"

    def test_fractional_kilobytes(self):
        assert format_size(1536) == "1.5 KB (1536 bytes)"

    def test_whole_units(self):
        assert format_size(1024) == "1 KB (1024 bytes)"
        assert format_size(1024**3) == f"1 GB ({1024 ** 3} bytes)"


class TestNormalizeSize:
    def test_value_is_rounded(self):
        assert normalize_size(1000000) == (976.56, "KB")

    def test_largest_unit(self):
        assert normalize_size(1024**7) == (1024.0, "EB")


def test_format_time():
    assert format_time(datetime(2024, 3, 5, 7, 8, 9)) == "2024-03-05 07:08:09"
