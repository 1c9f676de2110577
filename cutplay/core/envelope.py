"""
Envelope engine: decode, transform, clip and re-encode a window of samples.
All functions are pure (no side effects) and return new views.
"""
from __future__ import annotations
import math
from typing import Optional
import numpy as np

from .codec import decode_samples, encode_clipped
from .config import ENGINE_CONFIG
from .sample_view import SampleView
from .timebase import view_units
from .types import SampleArray, SampleTransform


def _window_bound(units: float) -> int:
    # A partial sample counts as a whole one; negative positions clamp to 0
    return max(0, math.ceil(units))


def sweep(
    view: SampleView,
    start_time: float,
    duration: float,
    transform: SampleTransform
) -> SampleView:
    """
    Apply ``transform`` to the samples inside a time window.

    Args:
        view: Source view (never modified)
        start_time: Window start in view seconds
        duration: Window length in view seconds
        transform: Element-wise sample mapping

    Returns:
        View of identical length; samples outside the window are copied
        byte for byte, samples inside are transformed and re-encoded with
        byte-level saturation
    """
    first = _window_bound(view_units(view.sample_rate, start_time))
    count = _window_bound(view_units(view.sample_rate, duration))
    stop = min(first + count, view.sample_count)

    out = view.data.copy()
    if first < stop:
        window = decode_samples(view.data[first * view.resolution:stop * view.resolution])
        out[first * view.resolution:stop * view.resolution] = encode_clipped(transform(window))
    return view.derive(out)


# --- Transforms ---

def amplify(percentage: int) -> SampleTransform:
    """Scale by ``percentage``/100, truncating toward zero."""
    factor = percentage / 100

    def transform(samples: SampleArray) -> SampleArray:
        return np.trunc(samples * factor).astype(np.int64)
    return transform


def offset(delta: int) -> SampleTransform:
    """Add a constant to every sample."""
    def transform(samples: SampleArray) -> SampleArray:
        return samples + delta
    return transform


def silence() -> SampleTransform:
    def transform(samples: SampleArray) -> SampleArray:
        return np.zeros_like(samples)
    return transform


# --- Operations ---

def amplify_view(
    view: SampleView,
    percentage: int,
    start_time: float = 0.0,
    duration: Optional[float] = None
) -> SampleView:
    """
    Change volume by a percentage (<100 quieter, >100 louder).

    Args:
        view: Source view
        percentage: Scaling factor in percent
        start_time: Window start in view seconds
        duration: Window length in view seconds (None = to the end)
    """
    if duration is None:
        duration = view.duration
    return sweep(view, start_time, duration, amplify(percentage))


def offset_view(view: SampleView, delta: int) -> SampleView:
    """Add ``delta`` to every sample of the view."""
    return sweep(view, 0.0, view.duration, offset(delta))


def fade_in(view: SampleView, to_time: float) -> SampleView:
    """
    Fade in from silence, reaching full level at ``to_time``.

    The ramp is a staircase of ``fade_steps`` windows: the first window is
    silenced, window i is scaled by i percent. Each step works on the
    previous step's output, so windows that overlap by a rounded-up sample
    are scaled twice.
    """
    steps = ENGINE_CONFIG.fade_steps
    step = to_time / steps
    result = sweep(view, 0.0, step, silence())

    start = step
    for percentage in range(1, steps):
        result = sweep(result, start, step, amplify(percentage))
        start += step
    return result


def fade_out(view: SampleView, from_time: float) -> SampleView:
    """
    Fade out to silence, starting at ``from_time``.

    Mirror of :func:`fade_in`: windows after ``from_time`` are scaled by
    99, 98, ... 0 percent, chained on the previous result.
    """
    steps = ENGINE_CONFIG.fade_steps
    step = (view.duration - from_time) / steps
    result = view

    start = from_time + step
    for percentage in range(steps - 1, -1, -1):
        result = sweep(result, start, step, amplify(percentage))
        start += step
    return result
