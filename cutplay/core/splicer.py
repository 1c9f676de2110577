"""
Byte-range splicing: cut, silence insertion and concatenation.

Clip-level functions work in absolute byte space (``clip_offset``);
``cut_view`` works in view units and is the excision primitive used by
autocut.
"""
from __future__ import annotations
from typing import Sequence
import numpy as np

from .clip import Clip, ClipIdGenerator
from .errors import EmptyInput, FormatMismatch, InvalidRange
from .sample_view import SampleView
from .timebase import align_down, clip_offset, view_units


def _byte_offset(clip: Clip, seconds: float) -> int:
    return align_down(clip_offset(clip.format, seconds), clip.format.frame_size)


def check_time(clip: Clip, seconds: float, label: str) -> None:
    """Raise InvalidRange unless ``0 <= seconds <= clip.duration``."""
    if not 0 <= seconds <= clip.duration:
        raise InvalidRange(
            f"{label}={seconds} is outside clip {clip.id} (0 - {clip.duration:.3f} s)"
        )


def check_formats(clips: Sequence[Clip]) -> None:
    """Raise EmptyInput/FormatMismatch unless all clips share one format."""
    if not clips:
        raise EmptyInput("No clips given")
    expected = clips[0].format
    for clip in clips[1:]:
        if clip.format != expected:
            raise FormatMismatch(
                f"Clip {clip.id} has format {clip.format}, expected {expected}"
            )


def cut(clip: Clip, start: float, stop: float, ids: ClipIdGenerator) -> Clip:
    """
    Remove the audio between ``start`` and ``stop`` seconds.

    Returns:
        New clip without bytes ``[offset(start), offset(stop))``
    """
    check_time(clip, start, "start")
    check_time(clip, stop, "stop")
    if stop < start:
        raise InvalidRange(f"Cut end {stop} lies before its start {start}")

    first, last = _byte_offset(clip, start), _byte_offset(clip, stop)
    return clip.derive(clip.buffer[:first] + clip.buffer[last:], ids)


def insert_silence(clip: Clip, at: float, seconds: float, ids: ClipIdGenerator) -> Clip:
    """Insert ``seconds`` of zero bytes at position ``at``."""
    check_time(clip, at, "at")
    if seconds < 0:
        raise InvalidRange(f"Silence length must not be negative, got {seconds}")

    pos = _byte_offset(clip, at)
    gap = bytes(_byte_offset(clip, seconds))
    return clip.derive(clip.buffer[:pos] + gap + clip.buffer[pos:], ids)


def concat(clips: Sequence[Clip], ids: ClipIdGenerator) -> Clip:
    """Join clips in order; the result takes the first clip's name and format."""
    clips = list(clips)
    check_formats(clips)
    return clips[0].derive(b"".join(c.buffer for c in clips), ids)


def cut_view(view: SampleView, start_time: float, duration: float) -> SampleView:
    """
    Drop ``duration`` worth of view units starting at ``start_time``.

    Both arguments are view seconds; the unit counts are rounded to the
    nearest whole unit. The bytes before the cut and after it are joined
    into a new view of length ``view.length - duration_units``.
    """
    first = round(view_units(view.sample_rate, start_time))
    count = round(view_units(view.sample_rate, duration))
    if first < 0 or count < 0 or first + count > view.length:
        raise InvalidRange(
            f"Cut of {count} units at {first} does not fit a {view.length}-unit view"
        )
    if first % view.resolution or count % view.resolution:
        raise InvalidRange(f"Cut of {count} units at {first} splits a sample")

    return view.derive(np.concatenate((view.data[:first], view.data[first + count:])))
