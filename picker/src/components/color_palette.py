"""
Color Palette - Saturation/value picking surface

The marker position maps directly to the color:
    x = saturation (0-100, left to right)
    y = 100 - value (value 100 at the top)
The hue is set from outside (the hue slider) and only changes the gradient.
"""

from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtGui import QPainter
from PyQt5.QtWidgets import QWidget, QHBoxLayout

from components.draggable.drag_context import DraggableConfig
from components.draggable.drag_controller import DragController
from components.draggable.qt_bridge import CanvasWidget, MarkerWidget, get_frame_scheduler, get_window_events
from constants import DEFAULT_HSV, MARKER_SIZE, PALETTE_SIZE
from models.color import has_color_changed, hsv_to_rgb, validate_hsv
from models.coords import ValueCoords
from utils.gradients import pixels_to_qimage, rgb_to_qcolor, saturation_value_pixels


class SaturationValueCanvas(CanvasWidget):
    """Canvas painted with the saturation/value gradient of one hue."""

    def __init__(self, hue, parent=None):
        super().__init__(parent)
        self._hue = hue
        self._image = None

    def set_hue(self, hue):
        if hue != self._hue:
            self._hue = hue
            self._image = None
            self.update()

    def resizeEvent(self, event):
        self._image = None
        super().resizeEvent(event)

    def paintEvent(self, event):
        if self._image is None:
            self._image = pixels_to_qimage(saturation_value_pixels(self._hue, self.width(), self.height()))
        painter = QPainter(self)
        painter.drawImage(self.rect(), self._image)
        painter.end()


class ColorPalette(QWidget):
    """Two dimensional saturation/value picker.

    Emits hsvChanged only for changes made by dragging; set_hsv is silent.
    """

    hsvChanged = pyqtSignal(list)

    def __init__(self, hsv=None, parent=None):
        super().__init__(parent)
        self._hsv = validate_hsv(hsv if hsv is not None else DEFAULT_HSV)

        # Block feedback while the controller reports programmatic moves
        self._updating = False

        self._setup_ui()

        self.controller = DragController(get_window_events(), get_frame_scheduler())
        self.destroyed.connect(self.controller.deregister)

        self._updating = True
        self.controller.register(DraggableConfig(
            canvas=self.canvas,
            draggable=self.marker,
            callback=self._on_handle_position_changed,
            initial=self._hsv_to_handle_position(self._hsv),
        ))
        self._updating = False
        self._update_palette_styling()

    def _setup_ui(self):
        layout = QHBoxLayout(self)
        # Room for the marker to overhang the canvas edges
        margin = MARKER_SIZE // 2
        layout.setContentsMargins(margin, margin, margin, margin)

        self.canvas = SaturationValueCanvas(self._hsv[0], self)
        self.canvas.setMinimumSize(PALETTE_SIZE, PALETTE_SIZE)
        self.canvas.resize(PALETTE_SIZE, PALETTE_SIZE)
        self.canvas.setCursor(Qt.CrossCursor)
        layout.addWidget(self.canvas)

        self.marker = MarkerWidget(MARKER_SIZE, self.canvas, self)

    @property
    def hsv(self):
        return list(self._hsv)

    def set_hsv(self, hsv):
        """Move the marker to a color set from outside (no signal)."""
        hsv = validate_hsv(hsv)
        if not has_color_changed(hsv, self._hsv):
            return

        self._hsv = hsv
        self._updating = True
        self.controller.update_draggable_value(self._hsv_to_handle_position(hsv))
        self._updating = False
        self._update_palette_styling()

    def close(self):
        self.controller.deregister()
        return super().close()

    def _on_handle_position_changed(self, position):
        if self._updating:
            return

        hsv = validate_hsv(self._handle_position_to_hsv(position))
        if has_color_changed(hsv, self._hsv):
            self._hsv = hsv
            self._update_palette_styling()
            self.hsvChanged.emit(list(hsv))

    def _hsv_to_handle_position(self, hsv):
        return ValueCoords(x=hsv[1], y=100 - hsv[2])

    def _handle_position_to_hsv(self, position):
        return [self._hsv[0], position.x, 100 - position.y]

    def _update_palette_styling(self):
        self.canvas.set_hue(self._hsv[0])
        self.marker.set_color(rgb_to_qcolor(hsv_to_rgb(self._hsv)))
