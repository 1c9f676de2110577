"""
cutplay - a small PCM clip editor.

Clips are immutable 16-bit linear PCM buffers; every edit (cut, fades,
volume, mixing, autocut) produces a new clip.
"""
__version__ = "0.1.0"
