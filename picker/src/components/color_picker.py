"""
Color Picker - Palette, hue slider and readouts for one color

Owns the canonical Colors of the picked color. The palette and the slider
only report HSV; every other model is derived here via Colors.from_hsv.
"""

from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtWidgets import QWidget, QHBoxLayout, QVBoxLayout, QGridLayout, QLabel, QFrame

from components.color_palette import ColorPalette
from components.color_slider import ColorSlider
from constants import DEFAULT_HSV, SWATCH_HEIGHT
from models.color import Colors, has_color_changed, validate_hsv

READOUT_ORDER = ('HEX', 'RGB', 'HSB', 'HSL')


class ColorPicker(QWidget):
    """Picks a color through a saturation/value palette and a hue slider.

    Emits colorsChanged(Colors) whenever the picked color changes, whether
    by dragging or through set_hsv.
    """

    colorsChanged = pyqtSignal(object)

    def __init__(self, hsv=None, parent=None):
        super().__init__(parent)
        self._colors = Colors.from_hsv(hsv if hsv is not None else DEFAULT_HSV)
        self._readouts = {}
        self._setup_ui()
        self._update_panel()

    def _setup_ui(self):
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(24)

        self.palette_widget = ColorPalette(list(self._colors.hsv), self)
        self.palette_widget.hsvChanged.connect(self._on_palette_changed)
        layout.addWidget(self.palette_widget)

        self.slider = ColorSlider(self._colors.hsv[0], self)
        self.slider.hueChanged.connect(self._on_hue_slider_changed)
        layout.addWidget(self.slider)

        panel = QVBoxLayout()
        panel.setSpacing(12)

        self.swatch = QFrame()
        self.swatch.setFixedHeight(SWATCH_HEIGHT)
        self.swatch.setMinimumWidth(175)
        panel.addWidget(self.swatch)

        grid = QGridLayout()
        grid.setHorizontalSpacing(16)
        for row, name in enumerate(READOUT_ORDER):
            title = QLabel(name)
            title.setStyleSheet("font-weight: bold; font-size: 16px;")
            value = QLabel()
            value.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
            value.setTextInteractionFlags(Qt.TextSelectableByMouse)
            grid.addWidget(title, row, 0)
            grid.addWidget(value, row, 1)
            self._readouts[name] = value
        panel.addLayout(grid)
        panel.addStretch()

        layout.addLayout(panel)

    # ========================================
    # Public API
    # ========================================

    @property
    def colors(self):
        return self._colors

    @property
    def hsv(self):
        return list(self._colors.hsv)

    def readout(self, name):
        """Displayed text of one readout (HEX, RGB, HSB or HSL)."""
        return self._readouts[name].text()

    def set_hsv(self, hsv):
        """Pick a color from outside; palette and slider follow."""
        self._set_hsv(hsv)

    def close(self):
        self.palette_widget.close()
        self.slider.close()
        return super().close()

    # ========================================
    # Internal
    # ========================================

    def _set_hsv(self, hsv):
        hsv = validate_hsv(hsv)
        if not has_color_changed(hsv, self._colors.hsv):
            return

        self._colors = Colors.from_hsv(hsv)
        self.palette_widget.set_hsv(hsv)
        self.slider.set_hue(hsv[0])
        self._update_panel()
        self.colorsChanged.emit(self._colors)

    def _on_palette_changed(self, hsv):
        self._set_hsv(hsv)

    def _on_hue_slider_changed(self, hue):
        _, s, v = self._colors.hsv
        self._set_hsv([hue, s, v])

    def _update_panel(self):
        self.swatch.setStyleSheet(f"background-color: #{self._colors.hex}; border-radius: 4px;")
        for name, text in self._colors.to_display().items():
            self._readouts[name].setText(text)
