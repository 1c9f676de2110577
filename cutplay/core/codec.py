"""
16-bit little-endian sample codec.

Decoding is plain signed 16-bit little-endian. Encoding saturates per
byte, not per value: an overflow writes 127 into both bytes (0x7F7F,
decoding to 32639) and an underflow writes -128 into both (0x8080,
decoding to -32640). Saved clips depend on these exact byte values.
"""
from __future__ import annotations
import numpy as np

from .config import ENGINE_CONFIG
from .types import ByteArray, SampleArray, SignedByteArray

_POSITIVE_CLIP = 0x7F7F
_NEGATIVE_CLIP = 0x8080


def decode_samples(data: ByteArray | bytes) -> SampleArray:
    """
    Decode byte pairs (lo, hi) into ``(hi << 8) | (lo & 0xFF)`` as signed 16-bit.

    Args:
        data: Even-length little-endian buffer

    Returns:
        Samples widened to int64 so transforms can overflow freely
    """
    return np.frombuffer(data, dtype='<i2').astype(np.int64)


def encode_clipped(values: SampleArray) -> ByteArray:
    """
    Encode integer results back into little-endian byte pairs.

    Args:
        values: Transformed samples, possibly out of 16-bit range

    Returns:
        Freshly allocated uint8 array, two bytes per value
    """
    values = np.asarray(values, dtype=np.int64)
    words = np.where(
        values > ENGINE_CONFIG.sample_max,
        _POSITIVE_CLIP,
        np.where(values < ENGINE_CONFIG.sample_min, _NEGATIVE_CLIP, values & 0xFFFF),
    )
    return words.astype('<u2').view(np.uint8).copy()


def saturate_bytes(values: np.ndarray) -> SignedByteArray:
    """Clamp wide integer results to the signed byte range."""
    return np.clip(values, ENGINE_CONFIG.byte_min, ENGINE_CONFIG.byte_max).astype(np.int8)
