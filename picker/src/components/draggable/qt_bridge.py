"""Qt boundary for the draggable engine.

Converts to/from Qt primitives only here:
- QtWindowEvents: application-wide event filter feeding an EventTarget
- CanvasWidget / MarkerWidget: canvas and marker handles backed by QWidgets
- QtFrameScheduler: frame callbacks on single-shot QTimers
"""

from PyQt5.QtCore import QObject, QEvent, QPoint, QRectF, QTimer, Qt
from PyQt5.QtGui import QBrush, QColor, QPainter, QPen, QWindow
from PyQt5.QtWidgets import QApplication, QWidget

from components.draggable import events
from components.draggable.events import EventTarget, MouseEvent, TouchEvent, TouchPoint, ResizeEvent
from models.coords import Rect
from constants import FRAME_INTERVAL_MS
from utils.numbers import round_to

_MOUSE_EVENTS = {
    QEvent.MouseButtonPress: events.MOUSE_DOWN,
    QEvent.MouseButtonDblClick: events.MOUSE_DOWN,
    QEvent.MouseMove: events.MOUSE_MOVE,
    QEvent.MouseButtonRelease: events.MOUSE_UP,
}

_TOUCH_EVENTS = {
    QEvent.TouchBegin: events.TOUCH_START,
    QEvent.TouchUpdate: events.TOUCH_MOVE,
    QEvent.TouchEnd: events.TOUCH_END,
    QEvent.TouchCancel: events.TOUCH_END,
}


def widget_path(widget):
    """Widget and its ancestors, innermost first (the event's target path).

    Widgets may declare a logical parent through ``path_parent()``, which
    takes precedence over the Qt parent.
    """
    path = []
    while widget is not None:
        path.append(widget)
        if hasattr(widget, 'path_parent'):
            widget = widget.path_parent()
        else:
            widget = widget.parentWidget()
    return tuple(path)


class QtWindowEvents(QObject, EventTarget):
    """Routes native input events of every window to the core EventTarget.

    Mouse and touch events are taken from QWindow objects so each native
    event is dispatched exactly once, regardless of widget propagation.
    """

    def __init__(self, parent=None):
        QObject.__init__(self, parent)
        EventTarget.__init__(self)

    def eventFilter(self, obj, event):
        event_type = event.type()

        if isinstance(obj, QWindow):
            if event_type in _MOUSE_EVENTS:
                # Touch input is handled from the touch events themselves
                if event.source() != Qt.MouseEventSynthesizedByQt:
                    self._dispatch_mouse(_MOUSE_EVENTS[event_type], event)
            elif event_type in _TOUCH_EVENTS:
                self._dispatch_touch(_TOUCH_EVENTS[event_type], event)
            elif event_type == QEvent.Resize:
                self.dispatch(ResizeEvent())
        elif event_type == QEvent.ContextMenu and isinstance(obj, QWidget):
            self.dispatch(MouseEvent(events.CONTEXT_MENU, event.globalX(), event.globalY(), widget_path(obj)))

        # Never consume: widgets keep receiving their own input
        return False

    def _dispatch_mouse(self, event_type, event):
        pos = event.screenPos()
        path = ()
        if event_type == events.MOUSE_DOWN:
            path = widget_path(QApplication.widgetAt(event.globalPos()))
        self.dispatch(MouseEvent(event_type, pos.x(), pos.y(), path))

    def _dispatch_touch(self, event_type, event):
        points = event.touchPoints()
        touches = tuple(
            TouchPoint(p.screenPos().x(), p.screenPos().y())
            for p in points if p.state() != Qt.TouchPointReleased
        )
        changed = tuple(
            TouchPoint(p.screenPos().x(), p.screenPos().y())
            for p in points if p.state() != Qt.TouchPointStationary
        )
        path = ()
        if event_type == events.TOUCH_START and points:
            path = widget_path(QApplication.widgetAt(points[0].screenPos().toPoint()))
        self.dispatch(TouchEvent(event_type, touches, changed, path))


class QtFrameScheduler:
    """Runs callbacks roughly one frame later on single-shot timers."""

    def __init__(self, interval_ms=FRAME_INTERVAL_MS):
        self._interval = interval_ms
        self._timers = set()  # keep pending timers alive

    def request(self, callback):
        timer = QTimer()
        timer.setSingleShot(True)
        timer.timeout.connect(lambda: self._fire(timer, callback))
        self._timers.add(timer)
        timer.start(self._interval)
        return timer

    def cancel(self, handle):
        handle.stop()
        self._timers.discard(handle)

    def _fire(self, timer, callback):
        self._timers.discard(timer)
        callback()


class CanvasWidget(QWidget):
    """Rectangular region a marker can be dragged in.

    Resizes are reported to observers from resizeEvent, which is the native
    resize observation the drag controller prefers over window resizes.
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self._resize_observers = []
        self.setAttribute(Qt.WA_AcceptTouchEvents)

    def bounding_rect(self):
        origin = self.mapToGlobal(QPoint(0, 0))
        return Rect(origin.x(), origin.y(), self.width(), self.height())

    def canvas_size(self):
        return (self.width(), self.height())

    def observe_resize(self, callback):
        if callback not in self._resize_observers:
            self._resize_observers.append(callback)

    def unobserve_resize(self, callback):
        if callback in self._resize_observers:
            self._resize_observers.remove(callback)

    def resizeEvent(self, event):
        super().resizeEvent(event)
        for callback in list(self._resize_observers):
            callback(self.canvas_size())


class MarkerWidget(QWidget):
    """Round marker centred on an anchor point of a canvas.

    The marker is a child of the canvas' host rather than of the canvas so it
    can overhang the canvas edges. It still belongs to the canvas in event
    paths (see path_parent). bounding_rect reports the 1px anchor, not the
    painted disc.
    """

    BORDER_WIDTH = 3

    def __init__(self, size, canvas, parent=None):
        super().__init__(parent)
        self.setFixedSize(size, size)
        self._canvas = canvas
        self._anchor = (0.0, 0.0)
        self._color = QColor(Qt.white)
        canvas.installEventFilter(self)
        self.raise_()

    @property
    def anchor(self):
        return self._anchor

    def path_parent(self):
        return self._canvas

    def set_color(self, color):
        """Set the fill color (QColor)."""
        self._color = QColor(color)
        self.update()

    def translate(self, x, y):
        """Place the marker centre at canvas pixel (x, y)."""
        self._anchor = (x, y)
        self._place()

    def _place(self):
        x, y = self._anchor
        origin = self._canvas.mapTo(self.parentWidget(), QPoint(0, 0)) if self.parentWidget() else QPoint(0, 0)
        self.move(
            origin.x() + int(round_to(x)) - self.width() // 2,
            origin.y() + int(round_to(y)) - self.height() // 2,
        )

    def bounding_rect(self):
        origin = self._canvas.mapToGlobal(QPoint(0, 0))
        return Rect(origin.x() + self._anchor[0], origin.y() + self._anchor[1], 1, 1)

    def eventFilter(self, obj, event):
        # Follow the canvas when the host's layout moves it
        if obj is self._canvas and event.type() == QEvent.Move:
            self._place()
        return False

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)
        inset = self.BORDER_WIDTH / 2
        disc = QRectF(self.rect()).adjusted(inset, inset, -inset, -inset)
        painter.setPen(QPen(QColor(0, 0, 0, 76), 1))
        painter.setBrush(Qt.NoBrush)
        painter.drawEllipse(disc.translated(1, 1))
        painter.setPen(QPen(Qt.white, self.BORDER_WIDTH))
        painter.setBrush(QBrush(self._color))
        painter.drawEllipse(disc)
        painter.end()


# ========================================
# Shared instances
# ========================================

_window_events = None
_frame_scheduler = None


def get_window_events():
    """Application-wide event target, installed on first use."""
    global _window_events
    if _window_events is None:
        app = QApplication.instance()
        _window_events = QtWindowEvents(app)
        app.installEventFilter(_window_events)
    return _window_events


def get_frame_scheduler():
    global _frame_scheduler
    if _frame_scheduler is None:
        _frame_scheduler = QtFrameScheduler()
    return _frame_scheduler
