"""
Playback controller for cutplay.
Streams the selected clip to the audio output via sounddevice.
"""
from __future__ import annotations
from typing import Optional
import numpy as np

from .clip import Clip
from .config import PLAYBACK_CONFIG, PlaybackState
from .converter import clip_frames
from .timebase import clip_offset
from .types import PositionCallback, StateCallback
from cutplay.utils.logger import get_logger

logger = get_logger("playback")


class PlaybackController:
    """
    Plays one clip at a time from a chosen start position.
    The clip is read-only, so the stream callback needs no locking.
    """
    __slots__ = (
        '_clip', '_frames', '_stream', '_current_frame', '_state',
        '_on_position_changed', '_on_state_changed', '_disposed'
    )

    def __init__(
        self,
        on_position_changed: Optional[PositionCallback] = None,
        on_state_changed: Optional[StateCallback] = None
    ) -> None:
        """
        Initialize playback controller.

        Args:
            on_position_changed: Callback for position updates (seconds)
            on_state_changed: Callback for state changes
        """
        self._clip: Optional[Clip] = None
        self._frames: Optional[np.ndarray] = None
        self._stream = None
        self._current_frame: int = 0
        self._state = PlaybackState.STOPPED
        self._on_position_changed = on_position_changed
        self._on_state_changed = on_state_changed
        self._disposed: bool = False

    @property
    def clip(self) -> Optional[Clip]:
        return self._clip

    @property
    def current_frame(self) -> int:
        """Current playback position in frames."""
        return self._current_frame

    @property
    def current_time(self) -> float:
        """Current playback position in seconds."""
        if self._clip is None:
            return 0.0
        return self._current_frame / self._clip.format.sample_rate

    @property
    def state(self) -> PlaybackState:
        return self._state

    @property
    def is_playing(self) -> bool:
        return self._state == PlaybackState.PLAYING

    def _set_state(self, state: PlaybackState) -> None:
        """Update state and notify callback."""
        if self._disposed:
            self._state = state
            return
        if self._state != state:
            self._state = state
            if self._on_state_changed:
                self._on_state_changed(state)

    def _notify_position(self) -> None:
        if self._disposed:
            return
        if self._on_position_changed:
            self._on_position_changed(self.current_time)

    def set_clip(self, clip: Optional[Clip]) -> None:
        """
        Stop playback and select a new clip (or none).

        Raises:
            UnsupportedBitDepth: clip is not 16-bit; the current clip stays selected
        """
        frames = clip_frames(clip) if clip is not None else None
        self.stop()
        self._clip, self._frames = clip, frames

    def play(self) -> bool:
        """
        Start streaming the selected clip from the current position.

        Returns:
            True if playback started successfully
        """
        if self._disposed or self._clip is None or self.is_playing:
            return False
        if self._current_frame >= len(self._frames):
            return False

        import sounddevice as sd

        frames_data = self._frames
        self._set_state(PlaybackState.PLAYING)

        def playback_callback(outdata: np.ndarray, frames: int, time: object, status) -> None:
            """Real-time audio callback."""
            start = self._current_frame
            chunk = frames_data[start:start + frames]
            outdata[:len(chunk)] = chunk
            outdata[len(chunk):] = 0
            self._current_frame = start + len(chunk)
            if len(chunk) < frames:
                raise sd.CallbackStop()

        def on_finished() -> None:
            # finished_callback may fire during shutdown; never call user callbacks then.
            if self._disposed:
                return
            if self._state == PlaybackState.PLAYING:
                self._set_state(PlaybackState.STOPPED)
                self._current_frame = 0
                self._notify_position()

        try:
            self._stream = sd.OutputStream(
                samplerate=self._clip.format.sample_rate,
                channels=self._clip.format.channels,
                dtype='int16',
                blocksize=PLAYBACK_CONFIG.blocksize,
                callback=playback_callback,
                finished_callback=on_finished
            )
            self._stream.start()
            logger.info("Playback of clip %d started at frame %d", self._clip.id, self._current_frame)
            return True
        except (sd.PortAudioError, ValueError) as e:
            logger.error("Failed to start playback: %s", e, exc_info=True)
            self._stream = None
            self._set_state(PlaybackState.STOPPED)
            return False

    def _close_stream(self) -> None:
        if self._stream is None:
            return
        import sounddevice as sd

        stream, self._stream = self._stream, None
        try:
            try:
                stream.stop()
            finally:
                stream.close()
        except sd.PortAudioError as e:
            logger.warning("Error stopping stream: %s", e)

    def pause(self) -> None:
        """Pause playback (keep position)."""
        # Leave PLAYING before closing, or the finished callback rewinds
        if self._state == PlaybackState.PLAYING:
            self._set_state(PlaybackState.PAUSED)
            logger.info("Playback paused at frame %d", self._current_frame)
        self._close_stream()

    def stop(self) -> None:
        """Stop playback and reset position."""
        self._set_state(PlaybackState.STOPPED)
        self._close_stream()
        self._current_frame = 0
        self._notify_position()

    def seek_seconds(self, seconds: float) -> None:
        """
        Move the start position, like skipping to a point in the clip.

        Args:
            seconds: Target position in seconds (clamped to the clip)
        """
        if self._clip is None:
            return
        byte_pos = clip_offset(self._clip.format, max(0.0, seconds))
        frame = byte_pos // self._clip.format.frame_size
        self._current_frame = min(frame, len(self._frames))
        self._notify_position()

    def toggle_play_pause(self) -> None:
        """Toggle between play and pause states."""
        if self.is_playing:
            self.pause()
        else:
            self.play()

    def cleanup(self) -> None:
        """Clean up resources."""
        # Mark disposed first so finished_callback can't touch Qt objects.
        self._disposed = True
        self._on_position_changed = None
        self._on_state_changed = None
        self._close_stream()
        self._state = PlaybackState.STOPPED
