import sys
import os
import logging

# Configure logging
logging.basicConfig(
    level=logging.WARNING,  # Only show warnings and errors
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout)
    ]
)

# Add picker/src to path so imports work when running directly
if __name__ == "__main__":
    current_dir = os.path.dirname(os.path.abspath(__file__))
    if current_dir not in sys.path:
        sys.path.insert(0, current_dir)

# PyQt5 import/s
from PyQt5 import QtWidgets
from PyQt5.QtWidgets import QMainWindow, QWidget, QHBoxLayout, QVBoxLayout, QLabel, QScrollArea
from PyQt5.QtCore import Qt
from PyQt5.QtGui import QPalette, QColor

# Component imports
from components.color_picker import ColorPicker
from components.color_scheme import ColorSchemeWidget
from components.custom_scheme import CustomSchemeWidget

from models.color import validate_hsv

# Service imports
from services.storage import JsonFileStorage, create_hsv_storage, create_color_scheme_storage

# Utility imports
from utils.logger import set_main_window

from constants import DEFAULT_HSV, ERROR_MESSAGES, SCHEME_SECTIONS, SCHEME_DESCRIPTIONS


class HappyColorsWindow(QMainWindow):
    """Color picker with a custom scheme and generated scheme inspiration."""

    def __init__(self, storage=None):
        super().__init__()
        self.setWindowTitle("Happy Colors")
        self.resize(1280, 800)

        set_main_window(self)

        self.storage = storage if storage is not None else JsonFileStorage()
        self.hsv_storage = create_hsv_storage(self.storage)
        self.scheme_storage = create_color_scheme_storage(self.storage)

        # Notices raised while loading are shown once the status bar exists
        self._pending_notices = []
        self.hsv = self._load_hsv()
        saved_scheme = self._load_scheme()

        self.scheme_widgets = {}
        self._setup_ui(saved_scheme)

        for message in self._pending_notices:
            self.show_notice(message)
        self._pending_notices = []

    # ========================================
    # Stored state
    # ========================================

    def _load_hsv(self):
        result = self.hsv_storage.get()
        if result.error:
            self._pending_notices.append(ERROR_MESSAGES['get_color'])
        return validate_hsv(result.data if result.data is not None else DEFAULT_HSV)

    def _load_scheme(self):
        result = self.scheme_storage.get()
        if result.error:
            self._pending_notices.append(ERROR_MESSAGES['get_scheme'])
        return result.data

    # ========================================
    # UI
    # ========================================

    def _setup_ui(self, saved_scheme):
        central = QWidget()
        self.setCentralWidget(central)
        layout = QHBoxLayout(central)
        layout.setContentsMargins(40, 40, 40, 0)
        layout.setSpacing(80)

        # Left: picker and custom scheme
        left = QVBoxLayout()
        left.setSpacing(16)

        title = QLabel("Happy Colors.")
        title.setStyleSheet("font-size: 36px; font-weight: bold;")
        left.addWidget(title)
        left.addWidget(QLabel("Create your own color scheme"))

        self.color_picker = ColorPicker(self.hsv)
        self.color_picker.colorsChanged.connect(self._on_color_picker_changed)
        left.addWidget(self.color_picker)

        self.custom_scheme = CustomSchemeWidget(saved_scheme)
        self.custom_scheme.set_current_hex(self.color_picker.colors.hex)
        self.custom_scheme.schemeChanged.connect(self._on_custom_scheme_changed)
        self.custom_scheme.schemeReset.connect(self._on_custom_scheme_reset)
        left.addWidget(self.custom_scheme)
        left.addStretch()

        layout.addLayout(left)

        # Right: generated schemes
        schemes = QWidget()
        schemes_layout = QVBoxLayout(schemes)
        schemes_layout.setSpacing(12)

        heading = QLabel("Generated Schemes & Inspiration")
        heading.setStyleSheet("font-size: 28px; font-weight: bold;")
        schemes_layout.addWidget(heading)

        for scheme, scheme_title, show_hex in SCHEME_SECTIONS:
            section_title = QLabel(f"{scheme_title}.")
            section_title.setStyleSheet("font-size: 20px; font-weight: bold; padding-top: 24px;")
            schemes_layout.addWidget(section_title)

            description = QLabel(SCHEME_DESCRIPTIONS[scheme])
            description.setWordWrap(True)
            schemes_layout.addWidget(description)

            widget = ColorSchemeWidget(scheme, self.hsv, show_hex=show_hex)
            widget.setMinimumHeight(160)
            widget.colorSelected.connect(self._on_color_scheme_selected)
            schemes_layout.addWidget(widget)
            self.scheme_widgets[scheme] = widget

        schemes_layout.addStretch()

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QScrollArea.NoFrame)
        scroll.setWidget(schemes)
        layout.addWidget(scroll, 1)

        self.status_left = QLabel("Ready")
        self.statusBar().addWidget(self.status_left, 1)

    def show_notice(self, message):
        """One line storage notice in the status bar."""
        self.status_left.setText(message)

    # ========================================
    # Handlers
    # ========================================

    def _on_color_picker_changed(self, colors):
        self.hsv = list(colors.hsv)
        if self.hsv_storage.set(self.hsv).error:
            self.show_notice(ERROR_MESSAGES['set_color'])

        self.custom_scheme.set_current_hex(colors.hex)
        for widget in self.scheme_widgets.values():
            widget.set_color(self.hsv)

    def _on_color_scheme_selected(self, hsv):
        self.color_picker.set_hsv(hsv)

    def _on_custom_scheme_changed(self, scheme):
        if self.scheme_storage.set(scheme).error:
            self.show_notice(ERROR_MESSAGES['set_scheme'])

    def _on_custom_scheme_reset(self):
        self.scheme_storage.remove()

    def closeEvent(self, event):
        self.color_picker.close()
        super().closeEvent(event)


def main():
    """Main entry point for Happy Colors"""
    app = QtWidgets.QApplication([])

    # Use Fusion style with dark palette
    app.setStyle("Fusion")

    dark_palette = QPalette()
    dark_palette.setColor(QPalette.Window, QColor(53, 53, 53))
    dark_palette.setColor(QPalette.WindowText, Qt.white)
    dark_palette.setColor(QPalette.Base, QColor(25, 25, 25))
    dark_palette.setColor(QPalette.AlternateBase, QColor(53, 53, 53))
    dark_palette.setColor(QPalette.ToolTipBase, Qt.white)
    dark_palette.setColor(QPalette.ToolTipText, Qt.white)
    dark_palette.setColor(QPalette.Text, Qt.white)
    dark_palette.setColor(QPalette.Button, QColor(53, 53, 53))
    dark_palette.setColor(QPalette.ButtonText, Qt.white)
    dark_palette.setColor(QPalette.BrightText, Qt.red)
    dark_palette.setColor(QPalette.Link, QColor(42, 130, 218))
    dark_palette.setColor(QPalette.Highlight, QColor(42, 130, 218))
    dark_palette.setColor(QPalette.HighlightedText, Qt.black)

    app.setPalette(dark_palette)

    window = HappyColorsWindow()
    window.show()
    app.exec_()


if __name__ == "__main__":
    main()
