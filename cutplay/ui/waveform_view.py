from PyQt6.QtWidgets import QWidget
from PyQt6.QtCore import Qt, QPointF
from PyQt6.QtGui import QPainter, QColor, QPalette
import numpy as np

from cutplay.core.config import WAVEFORM_CONFIG
from cutplay.core.converter import clip_frames


class WaveformWidget(QWidget):
    """Draws a min/max envelope of the selected clip's first channel."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.clip = None
        self.envelope = None  # (mins, maxs) normalised to -1..1
        self.playhead_seconds = 0.0
        self.setMinimumSize(300, 80)
        self.setAutoFillBackground(True)
        self.setBackgroundRole(QPalette.ColorRole.Base)
        self.color = QColor(*WAVEFORM_CONFIG.default_color)
        self.playhead_color = QColor(255, 50, 50)

    def set_clip(self, clip):
        """Sets the clip to draw (None clears the view)."""
        self.clip = clip
        self.envelope = self._compute_envelope(clip) if clip is not None else None
        self.update()

    def set_playhead(self, seconds):
        if self.playhead_seconds != seconds:
            self.playhead_seconds = seconds
            self.update()

    @staticmethod
    def _compute_envelope(clip):
        if clip.format.bit_depth != 16:
            return None
        channel = clip_frames(clip)[:, 0].astype(np.float32) / 32768.0
        if len(channel) == 0:
            return None

        # One min/max pair per bucket keeps repaints cheap for long clips
        buckets = min(WAVEFORM_CONFIG.max_points, len(channel))
        usable = len(channel) - len(channel) % buckets
        chunks = channel[:usable].reshape(buckets, -1)
        return chunks.min(axis=1), chunks.max(axis=1)

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.fillRect(self.rect(), QColor(*WAVEFORM_CONFIG.background_color))

        if self.envelope is None:
            painter.setPen(QColor(100, 100, 100))
            painter.drawText(self.rect(), Qt.AlignmentFlag.AlignCenter, "No Clip Selected")
            return

        width, height = self.width(), self.height()
        mid_y = height / 2
        mins, maxs = self.envelope
        x_scale = width / len(mins)

        painter.setPen(self.color)
        for i, (lo, hi) in enumerate(zip(mins, maxs)):
            x = i * x_scale
            painter.drawLine(QPointF(x, mid_y - hi * mid_y), QPointF(x, mid_y - lo * mid_y))

        duration = self.clip.duration
        if duration > 0:
            px = self.playhead_seconds / duration * width
            painter.setPen(self.playhead_color)
            painter.drawLine(QPointF(px, 0), QPointF(px, height))
