"""
Tests for the two time conversions.
"""
import pytest

from cutplay.core.timebase import (align_down, align_up, clip_offset,
                                   units_to_seconds, view_units)


class TestClipOffset:
    """Tests for absolute byte offsets."""

    def test_half_second(self, mono_format):
        assert clip_offset(mono_format, 0.5) == 8000

    def test_floors(self, mono_format):
        assert clip_offset(mono_format, 0.00001) == 0
        assert clip_offset(mono_format, 1.99999) == 31999

    def test_missing_format_is_zero(self):
        assert clip_offset(None, 3.0) == 0

    def test_stereo_counts_both_channels(self, stereo_format):
        assert clip_offset(stereo_format, 1.0) == 32000


class TestViewUnits:
    """Tests for view unit conversion."""

    def test_view_units(self):
        assert view_units(8000, 1.0) == 4000

    def test_inverse(self):
        assert units_to_seconds(8000, view_units(8000, 0.75)) == pytest.approx(0.75)
        assert units_to_seconds(8000, 2000) == 0.5

    def test_differs_from_clip_offset(self, mono_format):
        # One mono second is 16000 bytes but only 4000 view units
        assert clip_offset(mono_format, 1.0) == 4 * view_units(8000, 1.0)


class TestAlignment:

    def test_align_down(self):
        assert align_down(8001, 2) == 8000
        assert align_down(8000, 4) == 8000

    def test_align_up(self):
        assert align_up(8001, 4) == 8004
        assert align_up(8004, 4) == 8004
