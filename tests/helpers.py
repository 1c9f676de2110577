"""
Small builders shared by the test modules.
"""
import numpy as np

from cutplay.core.clip import Clip
from cutplay.core.sample_view import SampleView


def view_of(samples, sample_rate=8000):
    """Build a view from plain 16-bit sample values."""
    return SampleView.from_bytes(np.array(samples, dtype='<i2').tobytes(), sample_rate)


def view_of_bytes(values, sample_rate=8000):
    """Build a view from signed byte values."""
    return SampleView.from_bytes(np.array(values, dtype=np.int8).tobytes(), sample_rate)


def samples_of(obj):
    """Decoded samples of a view or a clip, as a plain list."""
    data = obj.buffer if isinstance(obj, Clip) else obj.tobytes()
    return np.frombuffer(data, dtype='<i2').tolist()


def signed_bytes_of(view):
    return view.data.view(np.int8).tolist()
