"""
Seconds to buffer position conversions.

Two conventions live side by side and must stay separate:

- clip offsets are absolute byte positions in a clip buffer and depend on
  the full format (rate, width, channels);
- view units index the channel-agnostic sample stream of a SampleView and
  depend only on the sample rate and the fixed 2-byte resolution.

For a mono clip one second is twice as many bytes as it is view units, so
unifying them would move every cut and autocut boundary.
"""
from __future__ import annotations
import math
from typing import Optional

from .clip import AudioFormat
from .config import ENGINE_CONFIG


def clip_offset(fmt: Optional[AudioFormat], seconds: float) -> int:
    """Byte offset of ``seconds`` in a clip of format ``fmt`` (0 when unset)."""
    if fmt is None:
        return 0
    return math.floor(seconds * fmt.bytes_per_second)


def view_units(sample_rate: int, seconds: float) -> float:
    """View units covered by ``seconds``; may be fractional."""
    return seconds * sample_rate * ENGINE_CONFIG.sample_resolution / 4


def units_to_seconds(sample_rate: int, units: float) -> float:
    """Inverse of :func:`view_units`."""
    return 4 * units / (sample_rate * ENGINE_CONFIG.sample_resolution)


def align_down(offset: int, frame_size: int) -> int:
    """Round a byte offset down to a frame boundary."""
    return offset - offset % frame_size


def align_up(offset: int, frame_size: int) -> int:
    """Round a byte offset up to a frame boundary."""
    return -(-offset // frame_size) * frame_size
