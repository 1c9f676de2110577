from PyQt6.QtWidgets import (QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QGridLayout,
                             QPushButton, QListWidget, QAbstractItemView, QFileDialog,
                             QInputDialog, QMessageBox)
from PyQt6.QtCore import QTimer, QSize
from PyQt6.QtGui import QAction, QKeySequence
import qtawesome as qta

from cutplay.core.config import PlaybackState
from cutplay.core.converter import load_clip, load_directory, save_clip, is_supported
from cutplay.core.errors import AudioEditError
from cutplay.core.library import ClipLibrary
from cutplay.core.playback import PlaybackController
from cutplay.ui.waveform_view import WaveformWidget
from cutplay.utils.logger import logger


class MainWindow(QMainWindow):
    def __init__(self, library=None):
        super().__init__()

        self.setWindowTitle("cutplay")
        self.resize(900, 450)

        # Core Components
        self.library = library if library is not None else ClipLibrary()
        self.editor = self.library.editor
        self.player = PlaybackController(on_state_changed=self.on_state_changed)
        self.last_folder = ""
        self.pending_state = None

        # UI Setup
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QHBoxLayout(self.central_widget)

        self.create_menus()
        self.create_clip_list()
        self.create_modification_panel()
        self.create_transport_controls()

        # Playhead refresh while playing
        self.timer = QTimer()
        self.timer.timeout.connect(self.periodic_update)
        self.timer.start(50)

        self.refresh_clip_list()

    # --- Layout ---

    def create_menus(self):
        menubar = self.menuBar()
        file_menu = menubar.addMenu("&File")

        load_action = QAction(qta.icon("fa5s.file-audio", color="white"), "Load Files...", self)
        load_action.setShortcut(QKeySequence.StandardKey.Open)
        load_action.triggered.connect(self.load_files_dialog)
        file_menu.addAction(load_action)

        folder_action = QAction(qta.icon("fa5s.folder-open", color="white"), "Load Folder...", self)
        folder_action.triggered.connect(self.load_folder_dialog)
        file_menu.addAction(folder_action)

        clear_action = QAction("Clear List", self)
        clear_action.triggered.connect(self.clear_list)
        file_menu.addAction(clear_action)

        file_menu.addSeparator()

        exit_action = QAction("Exit", self)
        exit_action.setShortcut(QKeySequence.StandardKey.Quit)
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

    def create_clip_list(self):
        left = QVBoxLayout()

        self.clip_list = QListWidget()
        self.clip_list.setSelectionMode(QAbstractItemView.SelectionMode.ExtendedSelection)
        self.clip_list.itemSelectionChanged.connect(self.on_selection_changed)
        left.addWidget(self.clip_list, stretch=1)

        self.waveform = WaveformWidget()
        left.addWidget(self.waveform)

        self.left_layout = left
        self.main_layout.addLayout(left, stretch=1)

    def create_modification_panel(self):
        panel = QWidget()
        grid = QGridLayout(panel)

        buttons = [
            ("Cut", "fa5s.cut", self.cut_clip),
            ("Fade-in", "fa5s.sort-amount-up", self.fade_in_clip),
            ("Fade-out", "fa5s.sort-amount-down", self.fade_out_clip),
            ("Add silence", "fa5s.volume-mute", self.insert_silence_clip),
            ("Volume", "fa5s.volume-up", self.volume_clip),
            ("Offset", "fa5s.arrows-alt-v", self.offset_clip),
            ("Autocut", "fa5s.magic", self.autocut_clip),
            ("Concatenate", "fa5s.link", self.concat_clips),
            ("Add", "fa5s.plus", self.add_clips),
            ("Subtract", "fa5s.minus", self.subtract_clips),
        ]
        for i, (label, icon, slot) in enumerate(buttons):
            btn = QPushButton(qta.icon(icon, color="white"), label)
            btn.clicked.connect(slot)
            grid.addWidget(btn, i // 2, i % 2)

        self.main_layout.addWidget(panel)

    def create_transport_controls(self):
        transport = QHBoxLayout()

        self.btn_play_pause = QPushButton(qta.icon("fa5s.play", color="#55ff55"), "Play/Pause")
        self.btn_play_pause.setIconSize(QSize(20, 20))
        self.btn_play_pause.clicked.connect(self.toggle_play_pause)

        btn_skip = QPushButton(qta.icon("fa5s.step-forward", color="white"), "Skip to")
        btn_skip.clicked.connect(self.skip_to)

        btn_save = QPushButton(qta.icon("fa5s.save", color="white"), "Save")
        btn_save.clicked.connect(self.save_clip_dialog)

        btn_remove = QPushButton(qta.icon("fa5s.trash-alt", color="#ff5555"), "Remove")
        btn_remove.clicked.connect(self.remove_clip)

        for btn in (self.btn_play_pause, btn_skip, btn_save, btn_remove):
            transport.addWidget(btn)

        self.left_layout.addLayout(transport)
        self.statusBar().showMessage("Ready")

    # --- Selection helpers ---

    def selected_clips(self):
        """Selected clips in list order."""
        rows = sorted(index.row() for index in self.clip_list.selectedIndexes())
        return [self.library.get(row) for row in rows]

    def current_clip(self):
        clips = self.selected_clips()
        if not clips:
            self.statusBar().showMessage("Select a clip first", 3000)
            return None
        return clips[0]

    def refresh_clip_list(self, select=None):
        self.clip_list.blockSignals(True)
        self.clip_list.clear()
        self.clip_list.addItems(self.library.names())
        self.clip_list.blockSignals(False)

        if select is not None:
            row = self.library.index_of(select)
            if row >= 0:
                self.clip_list.setCurrentRow(row)
        self.on_selection_changed()

    def on_selection_changed(self):
        clips = self.selected_clips()
        clip = clips[0] if clips else None
        try:
            self.player.set_clip(clip)
        except AudioEditError as e:
            logger.warning(f"Cannot play clip: {e}")
            self.player.set_clip(None)
        self.waveform.set_clip(clip)

    # --- Running edits ---

    def run_edit(self, description, operation):
        """Runs one edit, adds the result to the list and selects it."""
        try:
            result = operation()
        except AudioEditError as e:
            logger.warning(f"{description} failed: {e}")
            QMessageBox.warning(self, description, str(e))
            return
        self.library.add(result)
        self.refresh_clip_list(select=result)
        self.statusBar().showMessage(f"{description}: {result}", 3000)

    def ask_float(self, title, label, value=0.0, minimum=0.0, maximum=1e6):
        number, ok = QInputDialog.getDouble(self, title, label, value, minimum, maximum, 3)
        return number if ok else None

    def ask_int(self, title, label, value=100, minimum=-100000, maximum=100000):
        number, ok = QInputDialog.getInt(self, title, label, value, minimum, maximum)
        return number if ok else None

    def cut_clip(self):
        clip = self.current_clip()
        if clip is None:
            return
        start = self.ask_float("Cut", "Start in seconds:", 0.0, 0.0, clip.duration)
        if start is None:
            return
        stop = self.ask_float("Cut", "End in seconds:", clip.duration, 0.0, clip.duration)
        if stop is None:
            return
        self.run_edit("Cut", lambda: self.editor.cut(clip, start, stop))

    def fade_in_clip(self):
        clip = self.current_clip()
        if clip is None:
            return
        to_time = self.ask_float("Fade-in", "End in seconds:", min(1.0, clip.duration), 0.0, clip.duration)
        if to_time is not None:
            self.run_edit("Fade-in", lambda: self.editor.fade_in(clip, to_time))

    def fade_out_clip(self):
        clip = self.current_clip()
        if clip is None:
            return
        from_time = self.ask_float("Fade-out", "Start in seconds:", 0.0, 0.0, clip.duration)
        if from_time is not None:
            self.run_edit("Fade-out", lambda: self.editor.fade_out(clip, from_time))

    def insert_silence_clip(self):
        clip = self.current_clip()
        if clip is None:
            return
        at = self.ask_float("Add silence", "Position in seconds:", 0.0, 0.0, clip.duration)
        if at is None:
            return
        seconds = self.ask_float("Add silence", "Seconds of silence:", 1.0)
        if seconds is not None:
            self.run_edit("Add silence", lambda: self.editor.insert_silence(clip, at, seconds))

    def volume_clip(self):
        clip = self.current_clip()
        if clip is None:
            return
        percentage = self.ask_int("Volume", "Percentage:", 100, 0, 10000)
        if percentage is not None:
            self.run_edit("Volume", lambda: self.editor.amplify(clip, percentage))

    def offset_clip(self):
        clip = self.current_clip()
        if clip is None:
            return
        delta = self.ask_int("Offset", "Offset added to every sample:", 0, -65536, 65536)
        if delta is not None:
            self.run_edit("Offset", lambda: self.editor.offset(clip, delta))

    def autocut_clip(self):
        clip = self.current_clip()
        if clip is None:
            return
        threshold = self.ask_int("Autocut", "Threshold in percent:", 1, 0, 100)
        if threshold is None:
            return
        min_duration = self.ask_float("Autocut", "Minimum silence in seconds:", 0.5)
        if min_duration is not None:
            self.run_edit("Autocut", lambda: self.editor.autocut(clip, threshold, min_duration))

    def concat_clips(self):
        clips = self.selected_clips()
        self.run_edit("Concatenate", lambda: self.editor.concat(clips))

    def add_clips(self):
        clips = self.selected_clips()
        self.run_edit("Add", lambda: self.editor.add(clips))

    def subtract_clips(self):
        clips = self.selected_clips()
        self.run_edit("Subtract", lambda: self.editor.subtract(clips))

    # --- Player ---

    def toggle_play_pause(self):
        self.player.toggle_play_pause()

    def skip_to(self):
        clip = self.player.clip
        if clip is None:
            return
        seconds = self.ask_float("Skip to", "Start point in seconds:", 0.0, 0.0, clip.duration)
        if seconds is not None:
            self.player.pause()
            self.player.seek_seconds(seconds)

    def on_state_changed(self, state):
        # May arrive on the audio thread; widgets are only touched from the timer
        self.pending_state = state

    def periodic_update(self):
        self.waveform.set_playhead(self.player.current_time)
        state, self.pending_state = self.pending_state, None
        if state == PlaybackState.PLAYING:
            self.btn_play_pause.setIcon(qta.icon("fa5s.pause", color="#ffff55"))
        elif state is not None:
            self.btn_play_pause.setIcon(qta.icon("fa5s.play", color="#55ff55"))

    # --- Files ---

    def load_files_dialog(self):
        paths, _ = QFileDialog.getOpenFileNames(
            self, "Load Audio Files", self.last_folder,
            "Audio Files (*.wav *.mp3 *.flac *.ogg)"
        )
        last = None
        for path in paths:
            if not is_supported(path):
                continue
            try:
                last = load_clip(path, self.library)
            except (RuntimeError, OSError, ValueError) as e:
                logger.error(f"Failed to load {path}: {e}", exc_info=True)
                self.statusBar().showMessage(f"Failed to load: {path}", 5000)
        self.refresh_clip_list(select=last)

    def load_folder_dialog(self):
        folder = QFileDialog.getExistingDirectory(self, "Load Folder", self.last_folder)
        if folder:
            self.last_folder = folder
            loaded = load_directory(folder, self.library)
            self.refresh_clip_list(select=loaded[-1] if loaded else None)
            self.statusBar().showMessage(f"Loaded {len(loaded)} clips", 3000)

    def save_clip_dialog(self):
        clip = self.current_clip()
        if clip is None:
            return
        folder = QFileDialog.getExistingDirectory(self, "Save Into Folder", self.last_folder)
        if not folder:
            return
        name, ok = QInputDialog.getText(self, "Save", "File name (without .wav):")
        if not ok or not name:
            return
        try:
            path = save_clip(clip, name, folder)
            self.statusBar().showMessage(f"Saved to: {path}", 5000)
        except (AudioEditError, RuntimeError, OSError) as e:
            logger.error(f"Save failed: {e}")
            QMessageBox.critical(self, "Save Error", f"Could not save clip: {e}")

    def remove_clip(self):
        row = self.clip_list.currentRow()
        if self.library.remove(row) is None:
            return
        neighbour = self.library.get(max(0, row - 1))
        self.refresh_clip_list(select=neighbour)

    def clear_list(self):
        self.library.clear()
        self.refresh_clip_list()

    def closeEvent(self, event):
        self.timer.stop()
        self.player.cleanup()
        super().closeEvent(event)
