from __future__ import annotations
from dataclasses import dataclass, field
import itertools
import threading

from .errors import FrameAlignmentError


@dataclass(frozen=True, slots=True)
class AudioFormat:
    """
    Linear PCM format descriptor: little-endian, signed, interleaved.
    """
    sample_rate: int
    bit_depth: int = 16
    channels: int = 1

    def __post_init__(self) -> None:
        for name in ("sample_rate", "bit_depth", "channels"):
            value = getattr(self, name)
            if not isinstance(value, int) or value <= 0:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")
        if self.bit_depth % 8:
            raise ValueError(f"bit_depth must be a whole number of bytes, got {self.bit_depth}")

    @property
    def sample_width(self) -> int:
        """Bytes per single-channel sample."""
        return self.bit_depth // 8

    @property
    def frame_size(self) -> int:
        return self.sample_width * self.channels

    @property
    def bytes_per_second(self) -> int:
        return self.sample_rate * self.sample_width * self.channels


class ClipIdGenerator:
    """
    Hands out clip ids: unique, strictly increasing, never reused.
    Safe to share between threads.
    """
    __slots__ = ('_counter', '_lock')

    def __init__(self, start: int = 1) -> None:
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def next_id(self) -> int:
        with self._lock:
            return next(self._counter)


@dataclass(frozen=True)
class Clip:
    """
    A named, immutable audio buffer.
    Edits never touch an existing clip; they build a new one with a fresh id.
    """
    id: int
    name: str
    buffer: bytes = field(repr=False)
    format: AudioFormat
    modified: bool = False

    def __post_init__(self) -> None:
        if len(self.buffer) % self.format.frame_size:
            raise FrameAlignmentError(
                f"Buffer of {len(self.buffer)} bytes is not a whole number of "
                f"{self.format.frame_size}-byte frames"
            )

    @classmethod
    def create(
        cls,
        name: str,
        buffer: bytes | bytearray | memoryview,
        fmt: AudioFormat,
        ids: ClipIdGenerator,
        modified: bool = False
    ) -> "Clip":
        """Build a clip over a private copy of ``buffer``."""
        return cls(ids.next_id(), name, bytes(buffer), fmt, modified)

    def derive(self, buffer: bytes | bytearray | memoryview, ids: ClipIdGenerator) -> "Clip":
        """New modified clip carrying this clip's name and format."""
        return Clip.create(self.name, buffer, self.format, ids, modified=True)

    @property
    def length(self) -> int:
        """Buffer length in bytes."""
        return len(self.buffer)

    @property
    def duration(self) -> float:
        """Duration in seconds."""
        return len(self.buffer) / self.format.bytes_per_second

    def __str__(self) -> str:
        label = f"{self.id}: {self.name} |{self.duration:.2f} s"
        if self.modified:
            label += " (modified)"
        return label
