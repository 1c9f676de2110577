"""
Transient working buffer used inside the sample algorithms.

A SampleView is a flat stream of 16-bit values. It knows the sample rate
but not the channel count, so interleaved channels look like consecutive
samples to amplify, fades, mixing and autocut.
"""
from __future__ import annotations
from dataclasses import dataclass
import numpy as np

from .clip import AudioFormat, Clip, ClipIdGenerator
from .codec import decode_samples
from .config import ENGINE_CONFIG
from .errors import UnsupportedBitDepth
from .timebase import units_to_seconds
from .types import ByteArray, SampleArray


@dataclass(frozen=True)
class SampleView:
    data: ByteArray
    sample_rate: int
    resolution: int = ENGINE_CONFIG.sample_resolution

    def __post_init__(self) -> None:
        if len(self.data) % self.resolution:
            raise ValueError(f"View buffer must hold whole samples, got {len(self.data)} bytes")
        # Views are shared between chained operations; nobody may write into one
        self.data.flags.writeable = False

    @classmethod
    def from_bytes(cls, data: bytes, sample_rate: int) -> "SampleView":
        return cls(np.frombuffer(data, dtype=np.uint8).copy(), sample_rate)

    def derive(self, data: ByteArray) -> "SampleView":
        """New view over ``data`` with this view's rate."""
        return SampleView(data, self.sample_rate, self.resolution)

    @property
    def length(self) -> int:
        """Buffer length in bytes."""
        return len(self.data)

    @property
    def sample_count(self) -> int:
        return len(self.data) // self.resolution

    @property
    def samples(self) -> SampleArray:
        return decode_samples(self.data)

    @property
    def duration(self) -> float:
        """Whole-buffer duration in view time."""
        return units_to_seconds(self.sample_rate, self.sample_count)

    def tobytes(self) -> bytes:
        return self.data.tobytes()


def to_view(clip: Clip) -> SampleView:
    """
    Copy a 16-bit clip into a working view.

    Raises:
        UnsupportedBitDepth: clip is not 16-bit
    """
    if clip.format.bit_depth != ENGINE_CONFIG.supported_bit_depth:
        raise UnsupportedBitDepth(
            f"Clip {clip.id} is {clip.format.bit_depth}-bit; only "
            f"{ENGINE_CONFIG.supported_bit_depth}-bit PCM can be edited"
        )
    return SampleView.from_bytes(clip.buffer, clip.format.sample_rate)


def to_clip(view: SampleView, name: str, fmt: AudioFormat, ids: ClipIdGenerator) -> Clip:
    """Wrap a view's buffer in a new modified clip."""
    return Clip.create(name, view.tobytes(), fmt, ids, modified=True)
