"""
Centralized configuration for cutplay.
All magic numbers and default settings in one place.
"""
from dataclasses import dataclass
from enum import Enum, auto


class PlaybackState(Enum):
    """Playback state enumeration."""
    STOPPED = auto()
    PLAYING = auto()
    PAUSED = auto()


@dataclass(frozen=True, slots=True)
class EngineConfig:
    """Sample engine constants."""
    sample_resolution: int = 2       # bytes per view sample
    supported_bit_depth: int = 16
    fade_steps: int = 100
    threshold_range: int = 65536     # width of the 16-bit magnitude range
    sample_min: int = -32768
    sample_max: int = 32767
    byte_min: int = -128
    byte_max: int = 127


@dataclass(frozen=True, slots=True)
class IOConfig:
    """File ingestion/persistence settings."""
    supported_extensions: tuple[str, ...] = (".wav", ".flac", ".ogg", ".mp3")
    output_extension: str = ".wav"
    output_subtype: str = "PCM_16"


@dataclass(frozen=True, slots=True)
class PlaybackConfig:
    """Audio output settings."""
    blocksize: int = 1024


@dataclass(frozen=True, slots=True)
class WaveformConfig:
    """Waveform visualization settings."""
    background_color: tuple[int, int, int] = (20, 20, 20)
    default_color: tuple[int, int, int] = (44, 199, 201)  # Teal
    max_points: int = 2000  # min/max pairs drawn per repaint


# Global config instances (immutable singletons)
ENGINE_CONFIG = EngineConfig()
IO_CONFIG = IOConfig()
PLAYBACK_CONFIG = PlaybackConfig()
WAVEFORM_CONFIG = WaveformConfig()
