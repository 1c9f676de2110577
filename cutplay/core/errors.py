"""
Error kinds raised by the sample engine.

Every check runs before an output buffer is allocated, so a failed
operation leaves its inputs untouched and produces nothing.
"""


class AudioEditError(ValueError):
    """Base class for all engine validation failures."""


class InvalidRange(AudioEditError):
    """A time or position argument lies outside the clip, or is reversed/negative."""


class FormatMismatch(AudioEditError):
    """Clips combined or concatenated together do not share one format."""


class UnsupportedBitDepth(AudioEditError):
    """The sample engine only handles 16-bit PCM."""


class EmptyInput(AudioEditError):
    """A clip sequence operation received no clips."""


class FrameAlignmentError(AudioEditError):
    """A buffer length is not a whole number of frames."""
