"""
Color Slider - Vertical hue strip

Hue runs from 360 at the top to 0 at the bottom (both red). The marker
only moves vertically.
"""

from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtGui import QPainter, QPainterPath
from PyQt5.QtWidgets import QWidget, QHBoxLayout

from components.draggable.drag_context import DraggableConfig
from components.draggable.drag_controller import DragController
from components.draggable.qt_bridge import CanvasWidget, MarkerWidget, get_frame_scheduler, get_window_events
from constants import DEFAULT_HSV, MARKER_SIZE, SLIDER_HEIGHT, SLIDER_WIDTH
from models.color import hsv_to_rgb, validate_hue
from models.coords import ValueCoords
from utils.gradients import hue_strip_pixels, pixels_to_qimage, rgb_to_qcolor

# Horizontal position of the locked marker: centre of the strip
HANDLE_X = 50


def hue_to_handle_position(hue):
    return ValueCoords(x=HANDLE_X, y=100 - (hue / 360) * 100)


def handle_position_to_hue(position):
    return validate_hue(360 - (360 / 100) * position.y)


class HueCanvas(CanvasWidget):
    """Rounded strip showing every hue."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self._image = None

    def resizeEvent(self, event):
        self._image = None
        super().resizeEvent(event)

    def paintEvent(self, event):
        if self._image is None:
            self._image = pixels_to_qimage(hue_strip_pixels(self.width(), self.height()))
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)
        radius = self.width() / 2
        clip = QPainterPath()
        clip.addRoundedRect(0, 0, self.width(), self.height(), radius, radius)
        painter.setClipPath(clip)
        painter.drawImage(self.rect(), self._image)
        painter.end()


class ColorSlider(QWidget):
    """Hue picker. Emits hueChanged only for changes made by dragging."""

    hueChanged = pyqtSignal(float)

    def __init__(self, hue=None, parent=None):
        super().__init__(parent)
        self._hue = validate_hue(hue if hue is not None else DEFAULT_HSV[0])
        self._updating = False

        self._setup_ui()

        self.controller = DragController(get_window_events(), get_frame_scheduler())
        self.destroyed.connect(self.controller.deregister)

        self._updating = True
        self.controller.register(DraggableConfig(
            canvas=self.canvas,
            draggable=self.marker,
            callback=self._on_handle_position_changed,
            initial=hue_to_handle_position(self._hue),
            lock_x=True,
        ))
        self._updating = False
        self._update_slider_styling()

    def _setup_ui(self):
        layout = QHBoxLayout(self)
        margin_x = (MARKER_SIZE - SLIDER_WIDTH + 1) // 2
        margin_y = MARKER_SIZE // 2
        layout.setContentsMargins(margin_x, margin_y, margin_x, margin_y)

        self.canvas = HueCanvas(self)
        self.canvas.setFixedWidth(SLIDER_WIDTH)
        self.canvas.setMinimumHeight(SLIDER_HEIGHT)
        self.canvas.resize(SLIDER_WIDTH, SLIDER_HEIGHT)
        self.canvas.setCursor(Qt.PointingHandCursor)
        layout.addWidget(self.canvas)

        self.marker = MarkerWidget(MARKER_SIZE, self.canvas, self)

    @property
    def hue(self):
        return self._hue

    def set_hue(self, hue):
        """Move the marker to a hue set from outside (no signal)."""
        hue = validate_hue(hue)
        if hue == self._hue:
            return

        self._hue = hue
        self._updating = True
        self.controller.update_draggable_value(hue_to_handle_position(hue))
        self._updating = False
        self._update_slider_styling()

    def close(self):
        self.controller.deregister()
        return super().close()

    def _on_handle_position_changed(self, position):
        if self._updating:
            return

        hue = handle_position_to_hue(position)
        if hue != self._hue:
            self._hue = hue
            self._update_slider_styling()
            self.hueChanged.emit(float(hue))

    def _update_slider_styling(self):
        self.marker.set_color(rgb_to_qcolor(hsv_to_rgb([self._hue, 100, 100])))
