"""
cutplay Core Module

This module contains the core audio editing logic:
- Clip / AudioFormat / ClipIdGenerator: immutable audio units and their ids
- SampleView: channel-agnostic working buffer for sample math
- envelope, mixer, splicer, autocut: pure sample-level algorithms
- ClipEditor: clip-level facade over the algorithms
- ClipLibrary: ordered list of clips in a session
- converter: file ingestion and persistence
"""
from .clip import AudioFormat, Clip, ClipIdGenerator
from .sample_view import SampleView, to_clip, to_view
from .editor import ClipEditor
from .library import ClipLibrary
from .errors import (
    AudioEditError,
    EmptyInput,
    FormatMismatch,
    FrameAlignmentError,
    InvalidRange,
    UnsupportedBitDepth,
)
from .config import (
    ENGINE_CONFIG,
    IO_CONFIG,
    PLAYBACK_CONFIG,
    WAVEFORM_CONFIG,
    PlaybackState
)
from . import autocut
from . import codec
from . import converter
from . import envelope
from . import mixer
from . import splicer
from . import timebase

__all__ = [
    # Main classes
    'AudioFormat',
    'Clip',
    'ClipIdGenerator',
    'SampleView',
    'ClipEditor',
    'ClipLibrary',
    'to_clip',
    'to_view',
    # Errors
    'AudioEditError',
    'EmptyInput',
    'FormatMismatch',
    'FrameAlignmentError',
    'InvalidRange',
    'UnsupportedBitDepth',
    # Config
    'ENGINE_CONFIG',
    'IO_CONFIG',
    'PLAYBACK_CONFIG',
    'WAVEFORM_CONFIG',
    'PlaybackState',
    # Submodules
    'autocut',
    'codec',
    'converter',
    'envelope',
    'mixer',
    'splicer',
    'timebase',
]
