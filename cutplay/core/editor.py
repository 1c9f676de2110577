"""
Clip-level editing facade.

Gives the UI one uniform interface over the sample engine: every method
validates its arguments up front, runs one engine operation and returns a
new modified clip. Input clips are never touched.
"""
from __future__ import annotations
from typing import Optional, Sequence

from . import autocut as _autocut
from . import envelope, mixer, splicer
from .clip import Clip, ClipIdGenerator
from .errors import InvalidRange
from .sample_view import to_clip, to_view
from cutplay.utils.logger import logger


class ClipEditor:
    """
    Applies edits to clips, stamping results with ids from one generator.
    """
    __slots__ = ('_ids',)

    def __init__(self, ids: Optional[ClipIdGenerator] = None) -> None:
        self._ids = ids if ids is not None else ClipIdGenerator()

    @property
    def ids(self) -> ClipIdGenerator:
        return self._ids

    # --- Splicing ---

    def cut(self, clip: Clip, start: float, stop: float) -> Clip:
        """Remove ``start``..``stop`` seconds."""
        result = splicer.cut(clip, start, stop, self._ids)
        logger.info(f"Cut {start:.3f}-{stop:.3f}s from clip {clip.id} -> {result.id}")
        return result

    def insert_silence(self, clip: Clip, at: float, seconds: float) -> Clip:
        """Insert ``seconds`` of silence at ``at``."""
        result = splicer.insert_silence(clip, at, seconds, self._ids)
        logger.info(f"Inserted {seconds:.3f}s silence at {at:.3f}s in clip {clip.id} -> {result.id}")
        return result

    def concat(self, clips: Sequence[Clip]) -> Clip:
        """Join clips in the given order."""
        result = splicer.concat(clips, self._ids)
        logger.info(f"Concatenated clips {[c.id for c in clips]} -> {result.id}")
        return result

    # --- Envelope ---

    def amplify(
        self,
        clip: Clip,
        percentage: int,
        start: float = 0.0,
        duration: Optional[float] = None
    ) -> Clip:
        """
        Change volume by ``percentage`` percent.

        Args:
            clip: Source clip
            percentage: <100 quieter, >100 louder
            start: Window start (seconds, view time)
            duration: Window length (None = whole clip)
        """
        splicer.check_time(clip, start, "start")
        if duration is not None and duration < 0:
            raise InvalidRange(f"Duration must not be negative, got {duration}")
        view = envelope.amplify_view(to_view(clip), percentage, start, duration)
        return self._finish(view, clip, f"Amplified clip {clip.id} by {percentage}%")

    def offset(self, clip: Clip, delta: int) -> Clip:
        """Add a DC offset to every sample."""
        view = envelope.offset_view(to_view(clip), delta)
        return self._finish(view, clip, f"Offset clip {clip.id} by {delta}")

    def fade_in(self, clip: Clip, to_time: float) -> Clip:
        """Fade in over the first ``to_time`` seconds."""
        splicer.check_time(clip, to_time, "to_time")
        view = envelope.fade_in(to_view(clip), to_time)
        return self._finish(view, clip, f"Faded in clip {clip.id} to {to_time:.3f}s")

    def fade_out(self, clip: Clip, from_time: float) -> Clip:
        """Fade out from ``from_time`` to the end."""
        splicer.check_time(clip, from_time, "from_time")
        view = envelope.fade_out(to_view(clip), from_time)
        return self._finish(view, clip, f"Faded out clip {clip.id} from {from_time:.3f}s")

    # --- Silence trimming ---

    def autocut(self, clip: Clip, threshold_percent: float, min_duration: float) -> Clip:
        """
        Cut out every run below ``threshold_percent`` lasting over ``min_duration``.
        """
        view = _autocut.autocut(
            to_view(clip), min_duration, threshold_percent, clip.format.frame_size
        )
        removed = clip.length - view.length
        return self._finish(
            view, clip,
            f"Autocut clip {clip.id} (threshold {threshold_percent}%, min {min_duration}s) "
            f"removed {removed} bytes"
        )

    # --- Mixing ---

    def add(self, clips: Sequence[Clip]) -> Clip:
        """Add clips together byte by byte (order does not matter)."""
        clips = list(clips)
        splicer.check_formats(clips)
        view = mixer.add_views(to_view(c) for c in clips)
        return self._finish(view, clips[0], f"Added clips {[c.id for c in clips]}")

    def subtract(self, clips: Sequence[Clip]) -> Clip:
        """Subtract each following clip from the running result."""
        clips = list(clips)
        splicer.check_formats(clips)
        view = mixer.subtract_views(to_view(c) for c in clips)
        return self._finish(view, clips[0], f"Subtracted clips {[c.id for c in clips]}")

    def _finish(self, view, source: Clip, message: str) -> Clip:
        result = to_clip(view, source.name, source.format, self._ids)
        logger.info(f"{message} -> {result.id}")
        return result
