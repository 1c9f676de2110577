"""
Tests for the clip-level editing facade.
"""
import numpy as np
import pytest

from cutplay.core.clip import AudioFormat, Clip
from cutplay.core.errors import EmptyInput, FormatMismatch, InvalidRange, UnsupportedBitDepth
from cutplay.core.sample_view import to_clip, to_view
from helpers import samples_of


def clip_of(samples, fmt, ids, name="clip"):
    return Clip.create(name, np.array(samples, dtype='<i2').tobytes(), fmt, ids)


@pytest.fixture
def slow_format():
    """2 Hz mono: one view second is exactly one sample."""
    return AudioFormat(sample_rate=2, bit_depth=16, channels=1)


class TestRoundTrip:
    """Tests for clip -> view -> clip conversion."""

    def test_untransformed_round_trip_is_byte_equal(self, mono_clip, ids):
        result = to_clip(to_view(mono_clip), mono_clip.name, mono_clip.format, ids)
        assert result.buffer == mono_clip.buffer
        assert result.modified
        assert result.id != mono_clip.id

    def test_stereo_round_trip(self, stereo_format, ids):
        clip = Clip.create("stereo", bytes(range(256)) * 4, stereo_format, ids)
        assert to_clip(to_view(clip), clip.name, clip.format, ids).buffer == clip.buffer

    def test_rejects_8_bit(self, ids):
        clip = Clip.create("8bit", bytes(100), AudioFormat(8000, 8, 1), ids)
        with pytest.raises(UnsupportedBitDepth):
            to_view(clip)


class TestEnvelopeEdits:
    """Tests for amplify, offset and fades through the editor."""

    def test_amplify_doubles(self, editor, mono_format, ids):
        clip = clip_of([1000, -3000, 5, 0], mono_format, ids)
        result = editor.amplify(clip, 200)
        assert samples_of(result) == [2000, -6000, 10, 0]
        assert result.name == clip.name
        assert result.format == clip.format

    def test_amplify_window(self, editor, slow_format, ids):
        clip = clip_of([100, 100, 100, 100], slow_format, ids)
        result = editor.amplify(clip, 200, start=1.0, duration=2.0)
        assert samples_of(result) == [100, 200, 200, 100]

    def test_offset_saturates_per_byte(self, editor, mono_format, ids):
        clip = clip_of([0, 32700, -5], mono_format, ids)
        assert samples_of(editor.offset(clip, 100)) == [100, 32639, 95]

    def test_fade_in_starts_silent(self, editor, tone_clip):
        result = editor.fade_in(tone_clip, 1.0)
        samples = samples_of(result)
        original = samples_of(tone_clip)
        # One fade step covers 40 samples at 8 kHz
        assert samples[:40] == [0] * 40
        assert samples[4100:] == original[4100:]
        assert result.length == tone_clip.length

    def test_fade_out_ends_quiet(self, editor, tone_clip):
        result = editor.fade_out(tone_clip, 0.5)
        samples = samples_of(result)
        assert samples[:2000] == samples_of(tone_clip)[:2000]
        assert all(abs(s) <= 160 for s in samples[-50:])

    def test_fade_outside_clip(self, editor, tone_clip):
        with pytest.raises(InvalidRange):
            editor.fade_in(tone_clip, tone_clip.duration + 1)


class TestSplicingEdits:
    """Tests for cut, silence insertion and concatenation."""

    def test_cut(self, editor, mono_clip):
        assert editor.cut(mono_clip, 0.5, 1.0).length == 24000

    def test_insert_silence(self, editor, mono_clip):
        result = editor.insert_silence(mono_clip, 1.0, 0.5)
        assert result.buffer[16000:24000] == bytes(8000)

    def test_concat_takes_first_name(self, editor, mono_format, ids):
        a = clip_of([1], mono_format, ids, name="a")
        b = clip_of([2, 3], mono_format, ids, name="b")
        result = editor.concat([a, b])
        assert result.name == "a"
        assert samples_of(result) == [1, 2, 3]


class TestAutocutEdit:
    """Tests for silence trimming on clips."""

    def test_mono(self, editor, mono_format, ids):
        clip = clip_of([10000] * 1000 + [0] * 2000 + [-10000] * 1000, mono_format, ids)
        result = editor.autocut(clip, 10, 0.1)
        assert samples_of(result) == [10000] * 1000 + [-10000] * 1000

    def test_stereo_stays_frame_aligned(self, editor, stereo_format, ids):
        # The quiet run starts mid-frame; the cut widens to whole frames
        clip = clip_of([10000] * 3 + [0] * 2002 + [10000] * 3, stereo_format, ids)
        result = editor.autocut(clip, 10, 0.1)
        assert result.length % stereo_format.frame_size == 0
        assert samples_of(result) == [10000] * 4

    def test_invalid_threshold(self, editor, mono_clip):
        with pytest.raises(InvalidRange):
            editor.autocut(mono_clip, 150, 0.1)


class TestMixingEdits:
    """Tests for add and subtract over clip lists."""

    def test_subtract_equal_clips_is_silent(self, editor, tone_clip):
        result = editor.subtract([tone_clip, tone_clip])
        assert result.buffer == bytes(tone_clip.length)

    def test_add_is_order_independent(self, editor, mono_format, ids):
        a = clip_of([1000, -200, 7], mono_format, ids)
        b = clip_of([5, 5], mono_format, ids)
        assert editor.add([a, b]).buffer == editor.add([b, a]).buffer

    def test_add_format_mismatch(self, editor, mono_clip, stereo_format, ids):
        stereo = Clip.create("stereo", bytes(64), stereo_format, ids)
        with pytest.raises(FormatMismatch):
            editor.add([mono_clip, stereo])

    def test_add_empty(self, editor):
        with pytest.raises(EmptyInput):
            editor.add([])
        with pytest.raises(EmptyInput):
            editor.subtract([])


class TestValidation:
    """Failed edits leave inputs and the id sequence untouched."""

    def test_failed_cut_consumes_no_id(self, editor, mono_clip, ids):
        with pytest.raises(InvalidRange):
            editor.cut(mono_clip, 1.5, 0.5)
        assert ids.next_id() == mono_clip.id + 1

    def test_failed_amplify_consumes_no_id(self, editor, ids):
        clip = Clip.create("8bit", bytes(100), AudioFormat(8000, 8, 1), ids)
        with pytest.raises(UnsupportedBitDepth):
            editor.amplify(clip, 50)
        with pytest.raises(InvalidRange):
            editor.amplify(clip, 50, duration=-1.0)
        assert ids.next_id() == clip.id + 1

    def test_input_clip_unchanged(self, editor, mono_clip, pattern_bytes):
        editor.amplify(mono_clip, 300)
        editor.fade_out(mono_clip, 0.0)
        assert mono_clip.buffer == pattern_bytes
        assert not mono_clip.modified

    def test_results_get_increasing_ids(self, editor, mono_clip):
        first = editor.amplify(mono_clip, 50)
        second = editor.amplify(first, 50)
        assert mono_clip.id < first.id < second.id
