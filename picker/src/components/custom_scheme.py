"""
Custom Scheme - User built color scheme

A fixed number of slots, each empty or holding a 6 digit HEX code. Clicking
a slot stores the current color in it. Persisting is left to the owner,
which listens to schemeChanged and schemeReset.
"""

from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtWidgets import QWidget, QHBoxLayout, QVBoxLayout, QLabel, QFrame, QPushButton

from constants import CUSTOM_SLOT_SIZE, DEFAULT_HSV
from models.color import hsv_to_hex
from services.storage import create_custom_scheme

EMPTY_SLOT_STYLE = "background-color: transparent; border: 2px dashed #808080;"


class CustomSlot(QFrame):
    """One slot of the custom scheme."""

    clicked = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setFixedSize(*CUSTOM_SLOT_SIZE)
        self.setCursor(Qt.PointingHandCursor)
        self.setToolTip("Save the current color here")

    def mousePressEvent(self, event):
        if event.button() == Qt.LeftButton:
            self.clicked.emit()
        super().mousePressEvent(event)


class CustomSchemeWidget(QWidget):
    """Row of custom color slots plus a reset button.

    The reset button is only visible while at least one slot is filled.
    """

    schemeChanged = pyqtSignal(list)
    schemeReset = pyqtSignal()

    def __init__(self, scheme=None, parent=None):
        super().__init__(parent)
        self._scheme = create_custom_scheme(scheme)
        self._current_hex = hsv_to_hex(DEFAULT_HSV)
        self._slots = []
        self._labels = []
        self._setup_ui()
        self._refresh()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        row = QHBoxLayout()
        row.setSpacing(16)
        for index in range(len(self._scheme)):
            column = QVBoxLayout()
            column.setSpacing(4)

            slot = CustomSlot(self)
            slot.clicked.connect(lambda index=index: self.save_color(index))
            column.addWidget(slot)
            self._slots.append(slot)

            label = QLabel(self)
            label.setStyleSheet("font-size: 14px;")
            column.addWidget(label)
            self._labels.append(label)

            row.addLayout(column)
        row.addStretch()
        layout.addLayout(row)

        self.reset_button = QPushButton("Reset color scheme", self)
        self.reset_button.clicked.connect(self.reset)
        layout.addWidget(self.reset_button, 0, Qt.AlignLeft)

    @property
    def scheme(self):
        return list(self._scheme)

    def set_current_hex(self, hex_code):
        """HEX code (no #) stored when a slot is clicked."""
        self._current_hex = hex_code

    def save_color(self, index):
        """Store the current color in a slot."""
        self._scheme[index] = self._current_hex
        self._refresh()
        self.schemeChanged.emit(self.scheme)

    def reset(self):
        """Empty every slot."""
        self._scheme = create_custom_scheme()
        self._refresh()
        self.schemeReset.emit()

    def _refresh(self):
        for slot, label, hex_code in zip(self._slots, self._labels, self._scheme):
            if hex_code:
                slot.setStyleSheet(f"background-color: #{hex_code}; border: 1px solid #000;")
                label.setText(f"#{hex_code}")
            else:
                slot.setStyleSheet(EMPTY_SLOT_STYLE)
                label.setText("")
        self.reset_button.setVisible(any(self._scheme))
