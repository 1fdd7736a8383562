"""
Color Scheme - Swatches of one generated scheme

Monochromatic schemes are laid out in two rows (top color, then its shades);
every other scheme is a single row. Clicking a swatch emits its HSV.
"""

from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtWidgets import QWidget, QHBoxLayout, QVBoxLayout, QLabel, QFrame

from constants import DEFAULT_HSV, SCHEME_MONOCHROMATIC, SWATCH_HEIGHT
from models.color import hsv_to_hex
from models.schemes import generate_color_scheme, get_color_scheme
from utils.logger import loggerRaise


class ColorSwatch(QFrame):
    """Clickable color block."""

    clicked = pyqtSignal(list)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._hsv = None
        self.setCursor(Qt.PointingHandCursor)
        self.setMinimumHeight(SWATCH_HEIGHT // 2)

    @property
    def hsv(self):
        return self._hsv

    def set_hsv(self, hsv):
        self._hsv = list(hsv)
        self.setStyleSheet(f"background-color: #{hsv_to_hex(hsv)}; border: 1px solid #000;")
        self.setToolTip(f"#{hsv_to_hex(hsv)}")

    def mousePressEvent(self, event):
        if event.button() == Qt.LeftButton and self._hsv is not None:
            self.clicked.emit(list(self._hsv))
        super().mousePressEvent(event)


class ColorSchemeWidget(QWidget):
    """Displays one named color scheme for a base color.

    Args:
        scheme: Scheme name (see constants SCHEME_*); unknown names raise
        hsv: Base color
        show_hex: Show the HEX code under each swatch
    """

    colorSelected = pyqtSignal(list)

    def __init__(self, scheme, hsv=None, show_hex=False, parent=None):
        super().__init__(parent)
        try:
            get_color_scheme(scheme)
        except KeyError as e:
            loggerRaise(e, f"Unknown color scheme: {scheme}")

        self.scheme = scheme
        self.show_hex = show_hex
        self._swatches = []
        self._hex_labels = []
        self._colors = None

        self._setup_ui(generate_color_scheme(scheme, hsv if hsv is not None else DEFAULT_HSV))

    def _setup_ui(self, colors):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        if self.scheme == SCHEME_MONOCHROMATIC:
            _, shades = colors
            layout.addLayout(self._build_row(1), 5)
            layout.addLayout(self._build_row(len(shades)), 2)
        else:
            layout.addLayout(self._build_row(len(colors)))

        self.set_color(colors=colors)

    def _build_row(self, count):
        row = QHBoxLayout()
        row.setSpacing(0)
        for _ in range(count):
            column = QVBoxLayout()
            column.setSpacing(2)

            swatch = ColorSwatch(self)
            swatch.clicked.connect(self.colorSelected.emit)
            column.addWidget(swatch, 1)
            self._swatches.append(swatch)

            if self.show_hex:
                label = QLabel(self)
                label.setStyleSheet("font-size: 16px;")
                column.addWidget(label)
                self._hex_labels.append(label)

            row.addLayout(column)
        return row

    @property
    def colors(self):
        """Generated scheme for the current base color."""
        return self._colors

    def swatch_colors(self):
        """Swatch HSV values in display order."""
        return [swatch.hsv for swatch in self._swatches]

    def hex_codes(self):
        return [label.text() for label in self._hex_labels]

    def set_color(self, hsv=None, colors=None):
        """Regenerate the scheme for a new base color."""
        if colors is None:
            colors = generate_color_scheme(self.scheme, hsv)
        self._colors = colors

        flat = [colors[0]] + list(colors[1]) if self.scheme == SCHEME_MONOCHROMATIC else list(colors)
        for index, color in enumerate(flat):
            self._swatches[index].set_hsv(color)
            if self.show_hex:
                self._hex_labels[index].setText(f"#{hsv_to_hex(color)}")
