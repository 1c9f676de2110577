"""
Tests for playback position and state handling.
None of these open an audio stream.
"""
import pytest

from cutplay.core.clip import AudioFormat, Clip
from cutplay.core.config import PlaybackState
from cutplay.core.errors import UnsupportedBitDepth
from cutplay.core.playback import PlaybackController


@pytest.fixture
def positions():
    return []


@pytest.fixture
def player(positions):
    controller = PlaybackController(on_position_changed=positions.append)
    yield controller
    controller.cleanup()


class TestPlaybackController:
    """Tests for the controller without a device."""

    def test_initial_state(self, player):
        assert player.state == PlaybackState.STOPPED
        assert player.clip is None
        assert player.current_time == 0.0

    def test_play_without_clip(self, player):
        assert player.play() is False
        assert player.state == PlaybackState.STOPPED

    def test_seek_uses_clip_offset(self, player, tone_clip, positions):
        player.set_clip(tone_clip)
        player.seek_seconds(0.5)
        # 0.5 s * 16000 bytes/s = 8000 bytes = 4000 frames
        assert player.current_frame == 4000
        assert player.current_time == 0.5
        assert positions[-1] == 0.5

    def test_seek_clamps(self, player, tone_clip):
        player.set_clip(tone_clip)
        player.seek_seconds(10.0)
        assert player.current_frame == 8000
        player.seek_seconds(-3.0)
        assert player.current_frame == 0

    def test_seek_without_clip_is_ignored(self, player, positions):
        player.seek_seconds(1.0)
        assert player.current_frame == 0
        assert positions == []

    def test_play_at_end_returns_false(self, player, tone_clip):
        player.set_clip(tone_clip)
        player.seek_seconds(tone_clip.duration)
        assert player.play() is False
        assert not player.is_playing

    def test_stop_rewinds(self, player, tone_clip, positions):
        player.set_clip(tone_clip)
        player.seek_seconds(0.25)
        player.stop()
        assert player.current_frame == 0
        assert positions[-1] == 0.0

    def test_set_clip_resets_position(self, player, tone_clip, mono_clip):
        player.set_clip(tone_clip)
        player.seek_seconds(0.5)
        player.set_clip(mono_clip)
        assert player.clip is mono_clip
        assert player.current_frame == 0

    def test_disposed_player_refuses_to_play(self, player, tone_clip):
        player.set_clip(tone_clip)
        player.cleanup()
        assert player.play() is False

    def test_failed_set_clip_keeps_current_clip(self, player, tone_clip, ids):
        player.set_clip(tone_clip)
        eight_bit = Clip.create("8bit", bytes(100), AudioFormat(8000, 8, 1), ids)
        with pytest.raises(UnsupportedBitDepth):
            player.set_clip(eight_bit)
        assert player.clip is tone_clip
        player.seek_seconds(10.0)
        assert player.current_frame == 8000


class FailingStream:
    """Output stream whose stop() fails like a lost audio device."""

    def __init__(self, error):
        self.error = error
        self.closed = False

    def stop(self):
        raise self.error("device lost")

    def close(self):
        self.closed = True


@pytest.fixture
def portaudio_error():
    try:
        import sounddevice as sd
    except (ImportError, OSError) as e:
        pytest.skip(f"sounddevice unavailable: {e}")
    return sd.PortAudioError


class TestStreamShutdown:
    """Stream errors while closing are logged, not raised."""

    @pytest.mark.parametrize("action", ["pause", "stop", "cleanup"])
    def test_stop_error_still_closes(self, player, portaudio_error, action):
        stream = FailingStream(portaudio_error)
        player._stream = stream
        getattr(player, action)()
        assert stream.closed
        assert player._stream is None
