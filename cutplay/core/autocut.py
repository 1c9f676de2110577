"""
Silence trimming ("autocut").

Repeatedly finds the leftmost run of quiet samples that lasts longer than
a minimum duration and cuts it out, rescanning the shortened view from the
start, until a full scan finds nothing left to remove.
"""
from __future__ import annotations
from typing import Optional
import numpy as np

from .config import ENGINE_CONFIG
from .errors import InvalidRange
from .sample_view import SampleView
from .splicer import cut_view
from .timebase import align_down, align_up, units_to_seconds


def threshold_for(threshold_percent: float) -> float:
    """Silence threshold as a share of the full 16-bit magnitude range."""
    return ENGINE_CONFIG.threshold_range * threshold_percent / 100


def find_silent_run(
    view: SampleView,
    min_duration: float,
    threshold_percent: float
) -> Optional[tuple[int, int]]:
    """
    Locate the first qualifying silent run.

    A run is a maximal stretch of samples with ``|sample| < threshold``
    that is ended by a loud sample; a quiet tail reaching the end of the
    view never qualifies. The scan starts at sample 0, so a run of leading
    silence is reported whole. A run qualifies when its length in view
    seconds exceeds ``min_duration``.

    Returns:
        ``(first_sample, sample_count)`` of the run, or None
    """
    quiet = np.abs(view.samples) < threshold_for(threshold_percent)
    if not quiet.any():
        return None

    edges = np.diff(quiet.astype(np.int8), prepend=np.int8(0))
    starts = np.flatnonzero(edges == 1)
    ends = np.flatnonzero(edges == -1)  # index of the loud sample closing each run
    lengths = ends - starts[:len(ends)]

    seconds = units_to_seconds(view.sample_rate, lengths)
    hits = np.flatnonzero(seconds > min_duration)
    if not len(hits):
        return None
    k = hits[0]
    return int(starts[k]), int(lengths[k])


def autocut(
    view: SampleView,
    min_duration: float,
    threshold_percent: float,
    frame_size: int = ENGINE_CONFIG.sample_resolution
) -> SampleView:
    """
    Remove every silent run longer than ``min_duration``.

    Args:
        view: Source view
        min_duration: Shortest run to remove, in view seconds
        threshold_percent: Silence threshold, 0-100 percent of full scale
        frame_size: Excisions are widened to whole frames of this many
            bytes, so multi-channel clips keep their interleaving

    Returns:
        Trimmed view (a fresh copy when nothing was removed)
    """
    if not 0 <= threshold_percent <= 100:
        raise InvalidRange(f"Threshold must be 0-100 percent, got {threshold_percent}")
    if min_duration < 0:
        raise InvalidRange(f"Minimum duration must not be negative, got {min_duration}")

    current = view.derive(view.data.copy())
    while True:
        run = find_silent_run(current, min_duration, threshold_percent)
        if run is None:
            return current

        first_sample, count = run
        first = align_down(first_sample * current.resolution, frame_size)
        last = align_up((first_sample + count) * current.resolution, frame_size)
        # Byte counts are view units here: units_to_seconds(bytes) is twice
        # the run's start/length in view seconds
        current = cut_view(
            current,
            units_to_seconds(current.sample_rate, first),
            units_to_seconds(current.sample_rate, last - first),
        )
