"""
Type definitions for the cutplay core module.
Provides type aliases and protocols for type safety and better IDE support.
"""
from typing import Callable, Protocol
import numpy as np
from numpy.typing import NDArray

# Raw buffers
ByteArray = NDArray[np.uint8]     # encoded little-endian bytes
SignedByteArray = NDArray[np.int8]
SampleArray = NDArray[np.int64]   # decoded 16-bit values, widened for math

# Callback types
StateCallback = Callable[[object], None]
PositionCallback = Callable[[float], None]


class SampleTransform(Protocol):
    """Maps decoded samples to new (unclipped) values, element by element."""
    def __call__(self, samples: SampleArray) -> SampleArray: ...


class ByteOp(Protocol):
    """Element-wise binary op on widened signed bytes (add or subtract)."""
    def __call__(self, base: NDArray[np.int16], overlay: NDArray[np.int16]) -> NDArray[np.int16]: ...
