"""
Pytest configuration and fixtures for cutplay tests.
"""
import pytest
import numpy as np

from cutplay.core.clip import AudioFormat, Clip, ClipIdGenerator
from cutplay.core.editor import ClipEditor
from cutplay.core.library import ClipLibrary


@pytest.fixture
def ids() -> ClipIdGenerator:
    return ClipIdGenerator()


@pytest.fixture
def mono_format() -> AudioFormat:
    """8 kHz, 16-bit, mono: 16000 bytes per second."""
    return AudioFormat(sample_rate=8000, bit_depth=16, channels=1)


@pytest.fixture
def stereo_format() -> AudioFormat:
    return AudioFormat(sample_rate=8000, bit_depth=16, channels=2)


@pytest.fixture
def pattern_bytes() -> bytes:
    """2 seconds of recognisable (non-repeating every frame) mono bytes."""
    return (np.arange(32000) % 251).astype(np.uint8).tobytes()


@pytest.fixture
def mono_clip(pattern_bytes, mono_format, ids) -> Clip:
    return Clip.create("pattern", pattern_bytes, mono_format, ids)


@pytest.fixture
def tone_clip(mono_format, ids) -> Clip:
    """1 second of a 440 Hz tone at half scale."""
    t = np.arange(8000) / 8000
    samples = (np.sin(2 * np.pi * 440 * t) * 16000).astype('<i2')
    return Clip.create("tone", samples.tobytes(), mono_format, ids)


@pytest.fixture
def editor(ids) -> ClipEditor:
    return ClipEditor(ids)


@pytest.fixture
def library() -> ClipLibrary:
    return ClipLibrary(name="Test Session")
