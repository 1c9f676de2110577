import sys
from PyQt6.QtWidgets import QApplication
import qdarktheme

from cutplay.core.converter import load_directory
from cutplay.core.library import ClipLibrary
from cutplay.ui.main_window import MainWindow

def main():
    app = QApplication(sys.argv)
    
    # Apply modern dark theme
    app.setStyleSheet(qdarktheme.load_stylesheet(theme="dark"))

    # Optional folder argument preloads its audio files
    library = ClipLibrary()
    if len(sys.argv) > 1:
        load_directory(sys.argv[1], library)

    window = MainWindow(library)
    window.show()
    
    sys.exit(app.exec())

if __name__ == "__main__":
    main()
