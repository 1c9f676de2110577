"""
File ingestion and persistence.

Decodes audio files into 16-bit little-endian interleaved PCM clips and
writes clips back out as PCM WAV, using soundfile. The sample engine never
sees a container format.
"""
from __future__ import annotations
import os
from typing import TYPE_CHECKING
import numpy as np
import soundfile as sf

from .clip import AudioFormat, Clip
from .config import ENGINE_CONFIG, IO_CONFIG
from .errors import UnsupportedBitDepth
from cutplay.utils.logger import logger

if TYPE_CHECKING:
    from .library import ClipLibrary


def is_supported(path: str) -> bool:
    return os.path.splitext(path)[1].lower() in IO_CONFIG.supported_extensions


def load_clip(path: str, library: "ClipLibrary") -> Clip:
    """
    Decode a file and add it to the library as an unmodified clip.

    Args:
        path: Audio file path
        library: Library receiving the clip

    Returns:
        The new clip, named after the file
    """
    logger.info(f"Loading file: {path}")
    data, samplerate = sf.read(path, dtype='int16', always_2d=True)

    fmt = AudioFormat(
        sample_rate=int(samplerate),
        bit_depth=ENGINE_CONFIG.supported_bit_depth,
        channels=int(data.shape[1]),
    )
    # (frames, channels) in C order is already interleaved
    buffer = np.ascontiguousarray(data, dtype='<i2').tobytes()
    return library.ingest(os.path.basename(path), buffer, fmt)


def load_directory(path: str, library: "ClipLibrary") -> list[Clip]:
    """
    Load every supported file in a directory, in name order.
    Files that fail to decode are logged and skipped; a path that is not
    a directory loads nothing.
    """
    if not os.path.isdir(path):
        logger.error(f"Not a directory: {path}")
        return []
    loaded = []
    for entry in sorted(os.listdir(path)):
        file_path = os.path.join(path, entry)
        if not os.path.isfile(file_path) or not is_supported(file_path):
            continue
        try:
            loaded.append(load_clip(file_path, library))
        except (RuntimeError, OSError, ValueError) as e:
            logger.error(f"Failed to load {file_path}: {e}")
    logger.info(f"Loaded {len(loaded)} clips from {path}")
    return loaded


def clip_frames(clip: Clip) -> np.ndarray:
    """Clip buffer as an ``(frames, channels)`` int16 array."""
    if clip.format.bit_depth != ENGINE_CONFIG.supported_bit_depth:
        raise UnsupportedBitDepth(
            f"Clip {clip.id} is {clip.format.bit_depth}-bit; only 16-bit clips can be exported"
        )
    samples = np.frombuffer(clip.buffer, dtype='<i2').astype(np.int16)
    return samples.reshape(-1, clip.format.channels)


def save_clip(clip: Clip, name: str, folder: str) -> str:
    """
    Write a clip to ``<folder>/<name>.wav`` as 16-bit PCM.

    Returns:
        Path of the written file
    """
    os.makedirs(folder, exist_ok=True)
    file_path = os.path.join(folder, name + IO_CONFIG.output_extension)
    sf.write(
        file_path,
        clip_frames(clip),
        clip.format.sample_rate,
        subtype=IO_CONFIG.output_subtype,
    )
    logger.info(f"Saved clip {clip.id} to {file_path}")
    return file_path
