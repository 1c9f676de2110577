"""
Byte-wise mixing of views.

Mixing works on the raw encoded bytes: the low and the high byte of every
sample are added (or subtracted) as independent signed 8-bit values and
each is clamped on its own. It is not a 16-bit sample add, and results
differ from one wherever a low byte carries.
"""
from __future__ import annotations
from functools import reduce
from typing import Iterable
import numpy as np

from .codec import saturate_bytes
from .errors import EmptyInput
from .sample_view import SampleView
from .types import ByteOp


def _add(base: np.ndarray, overlay: np.ndarray) -> np.ndarray:
    return base + overlay


def _subtract(base: np.ndarray, overlay: np.ndarray) -> np.ndarray:
    return base - overlay


def combine(op: ByteOp, first: SampleView, second: SampleView) -> SampleView:
    """
    Combine two views byte by byte.

    The longer view is the base (``first`` on a tie) and the shorter one is
    laid over its start; base bytes past the overlay are copied unchanged.

    Args:
        op: Byte operation, applied as ``op(base, overlay)``
        first: Left operand
        second: Right operand

    Returns:
        New view with the base's length and rate
    """
    if len(first.data) >= len(second.data):
        base, overlay = first, second
    else:
        base, overlay = second, first

    n = len(overlay.data)
    wide = base.data.view(np.int8).astype(np.int16)
    wide[:n] = op(wide[:n], overlay.data.view(np.int8).astype(np.int16))
    return base.derive(saturate_bytes(wide).view(np.uint8))


def _fold(op: ByteOp, views: Iterable[SampleView]) -> SampleView:
    views = list(views)
    if not views:
        raise EmptyInput("No views to combine")
    # A lone view still comes back as a fresh buffer
    first = views[0].derive(views[0].data.copy())
    return reduce(lambda acc, view: combine(op, acc, view), views[1:], first)


def add_views(views: Iterable[SampleView]) -> SampleView:
    """Sum views pairwise, left to right."""
    return _fold(_add, views)


def subtract_views(views: Iterable[SampleView]) -> SampleView:
    """Subtract views pairwise, left to right."""
    return _fold(_subtract, views)
