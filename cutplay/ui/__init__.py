"""
cutplay UI Module

Qt-based user interface components:
- MainWindow: Clip list, player controls and edit buttons
- WaveformWidget: Waveform visualization of the selected clip
"""
from .main_window import MainWindow
from .waveform_view import WaveformWidget

__all__ = [
    'MainWindow',
    'WaveformWidget',
]
