from datetime import date

import pytest

from services.shared.domain import IsoDateTime


class TestIsoDateTime:
    """IsoDateTime Value Object のテスト"""

    def test_accepts_space_separated_datetime(self):
        """日付と時刻を空白で区切った旧表記も受け付ける"""
        dt = IsoDateTime.from_string("2025-01-01 10:00")
        assert dt.calendar_date == date(2025, 1, 1)

    def test_accepts_z_suffix(self):
        dt = IsoDateTime.from_string("2025-01-01T10:00:00Z")
        assert dt.value.utcoffset() is not None

    def test_invalid_string_raises(self):
        with pytest.raises(ValueError):
            IsoDateTime.from_string("not-a-date")

    def test_minutes_until_truncates(self):
        """経過分数は端数を切り捨てる"""
        departure = IsoDateTime.from_string("2025-01-01T10:00:00")
        arrival = IsoDateTime.from_string("2025-01-01T11:05:59")
        assert departure.minutes_until(arrival) == 65

    def test_comparison(self):
        earlier = IsoDateTime.from_string("2025-01-01T10:00:00")
        later = IsoDateTime.from_string("2025-01-01T12:00:00")
        assert earlier.is_before(later)
        assert later.is_after(earlier)

    def test_naive_value_is_treated_as_utc(self):
        """オフセットなしの値は UTC とみなす"""
        naive = IsoDateTime.from_string("2025-01-01T10:00:00")
        assert naive == IsoDateTime.from_string("2025-01-01T10:00:00Z")
        assert str(naive) == "2025-01-01T10:00:00+00:00"

    def test_offset_is_converted_to_utc(self):
        dt = IsoDateTime.from_string("2025-01-02T08:00:00+09:00")
        assert str(dt) == "2025-01-01T23:00:00+00:00"
        assert dt.calendar_date == date(2025, 1, 1)
        assert dt.is_before(IsoDateTime.from_string("2025-01-02T00:00:00"))
