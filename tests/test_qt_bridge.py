"""
Tests for the Qt side of the draggable engine.

Verifies:
- Native QWindow mouse, touch and resize events become core events
- Touch point states split into active and changed touches
- Context menus on widgets stop drags with a widget path
- Marker paths go through their canvas
- Frame callbacks run later and can be cancelled
"""
import pytest
from PyQt5.QtCore import QEvent, QPoint, QPointF, QSize, Qt
from PyQt5.QtGui import QContextMenuEvent, QMouseEvent, QResizeEvent, QTouchDevice, QTouchEvent, QWindow
from PyQt5.QtWidgets import QWidget

from components.draggable import events
from components.draggable.qt_bridge import (
    CanvasWidget, MarkerWidget, QtFrameScheduler, QtWindowEvents, widget_path,
)


def touch_point(x, y, state):
    point = QTouchEvent.TouchPoint()
    point.setScreenPos(QPointF(x, y))
    point.setState(state)
    return point


def touch_event(event_type, points):
    states = Qt.TouchPointStates()
    for point in points:
        states |= point.state()
    return QTouchEvent(event_type, QTouchDevice(), Qt.NoModifier, states, points)


# ══════════════════════════════════════════════════════════════════════════
# Window Events
# ══════════════════════════════════════════════════════════════════════════

class TestQtWindowEvents:

    @pytest.fixture
    def target(self, qapp):
        return QtWindowEvents()

    @pytest.fixture
    def qwindow(self, qapp):
        return QWindow()

    def record(self, target, event_type):
        received = []
        target.add_listener(event_type, received.append)
        return received

    def test_mouse_move(self, target, qwindow):
        received = self.record(target, events.MOUSE_MOVE)
        event = QMouseEvent(QEvent.MouseMove, QPointF(1, 2), QPointF(1, 2), QPointF(120.5, 80),
                            Qt.NoButton, Qt.LeftButton, Qt.NoModifier)

        assert target.eventFilter(qwindow, event) is False
        assert len(received) == 1
        assert (received[0].x, received[0].y) == (120.5, 80)

    def test_mouse_press_and_release(self, target, qwindow):
        pressed = self.record(target, events.MOUSE_DOWN)
        released = self.record(target, events.MOUSE_UP)

        for event_type in (QEvent.MouseButtonPress, QEvent.MouseButtonRelease):
            target.eventFilter(qwindow, QMouseEvent(event_type, QPointF(0, 0), QPointF(0, 0), QPointF(5, 6),
                                                    Qt.LeftButton, Qt.LeftButton, Qt.NoModifier))
        assert [(e.x, e.y) for e in pressed] == [(5, 6)]
        assert [(e.x, e.y) for e in released] == [(5, 6)]

    def test_mouse_on_widget_is_not_routed(self, qtbot, target):
        # Widgets see the same input after their window; only windows are routed
        widget = QWidget()
        qtbot.addWidget(widget)
        received = self.record(target, events.MOUSE_MOVE)
        event = QMouseEvent(QEvent.MouseMove, QPointF(1, 2), QPointF(1, 2), QPointF(1, 2),
                            Qt.NoButton, Qt.NoButton, Qt.NoModifier)
        target.eventFilter(widget, event)
        assert received == []

    def test_touch_update_splits_points(self, target, qwindow):
        received = self.record(target, events.TOUCH_MOVE)
        event = touch_event(QEvent.TouchUpdate, [
            touch_point(10, 20, Qt.TouchPointMoved),
            touch_point(30, 40, Qt.TouchPointStationary),
        ])
        target.eventFilter(qwindow, event)

        touch = received[0]
        assert [(p.x, p.y) for p in touch.touches] == [(10, 20), (30, 40)]
        assert [(p.x, p.y) for p in touch.changed_touches] == [(10, 20)]

    def test_touch_end_only_has_changed_touches(self, target, qwindow):
        received = self.record(target, events.TOUCH_END)
        event = touch_event(QEvent.TouchEnd, [touch_point(15, 25, Qt.TouchPointReleased)])
        target.eventFilter(qwindow, event)

        touch = received[0]
        assert touch.touches == ()
        assert [(p.x, p.y) for p in touch.changed_touches] == [(15, 25)]

    def test_touch_cancel_ends_touch(self, target, qwindow):
        received = self.record(target, events.TOUCH_END)
        target.eventFilter(qwindow, touch_event(QEvent.TouchCancel, []))
        assert len(received) == 1

    def test_window_resize(self, target, qwindow):
        received = self.record(target, events.RESIZE)
        target.eventFilter(qwindow, QResizeEvent(QSize(100, 100), QSize(50, 50)))
        assert len(received) == 1

    def test_context_menu_on_widget(self, qtbot, target):
        parent = QWidget()
        child = QWidget(parent)
        qtbot.addWidget(parent)
        received = self.record(target, events.CONTEXT_MENU)

        target.eventFilter(child, QContextMenuEvent(QContextMenuEvent.Mouse, QPoint(1, 1), QPoint(40, 50)))
        assert (received[0].x, received[0].y) == (40, 50)
        assert received[0].path == (child, parent)


# ══════════════════════════════════════════════════════════════════════════
# Widget Paths
# ══════════════════════════════════════════════════════════════════════════

class TestWidgetPath:

    def test_none(self):
        assert widget_path(None) == ()

    def test_marker_belongs_to_canvas(self, qtbot):
        host = QWidget()
        qtbot.addWidget(host)
        canvas = CanvasWidget(host)
        marker = MarkerWidget(21, canvas, host)

        assert widget_path(marker) == (marker, canvas, host)

    def test_marker_translation(self, qtbot):
        host = QWidget()
        qtbot.addWidget(host)
        canvas = CanvasWidget(host)
        canvas.setGeometry(10, 10, 100, 100)
        marker = MarkerWidget(21, canvas, host)

        marker.translate(50, 25.4)
        assert marker.anchor == (50, 25.4)
        assert (marker.x(), marker.y()) == (10 + 50 - 10, 10 + 25 - 10)


# ══════════════════════════════════════════════════════════════════════════
# Frame Scheduler
# ══════════════════════════════════════════════════════════════════════════

class TestQtFrameScheduler:

    def test_runs_callback_later(self, qtbot):
        calls = []
        scheduler = QtFrameScheduler(interval_ms=1)
        scheduler.request(lambda: calls.append(1))
        assert calls == []
        qtbot.waitUntil(lambda: calls == [1], timeout=1000)

    def test_cancel(self, qtbot):
        calls = []
        scheduler = QtFrameScheduler(interval_ms=1)
        handle = scheduler.request(lambda: calls.append(1))
        scheduler.cancel(handle)
        qtbot.wait(50)
        assert calls == []
