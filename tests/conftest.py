"""
Shared fixtures for Happy Colors tests.

Provides fake canvas/marker handles with DOM-like geometry, a frame
scheduler that only runs when flushed, an event simulator and temporary
storage.
"""
import sys
import os
import pytest

# Widgets are created without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Ensure picker/src is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'picker', 'src'))

from components.draggable.events import EventTarget, MouseEvent, Rect


# ── Fake handles ────────────────────────────────────────────────────────

class FakeCanvas:
    """Canvas at a fixed viewport offset that reports its own resizes."""

    def __init__(self, left=30, top=40, width=200, height=200):
        self.left = left
        self.top = top
        self.width = width
        self.height = height
        self.resize_observers = []

    @property
    def path(self):
        return (self,)

    def bounding_rect(self):
        return Rect(self.left, self.top, self.width, self.height)

    def canvas_size(self):
        return (self.width, self.height)

    def observe_resize(self, callback):
        self.resize_observers.append(callback)

    def unobserve_resize(self, callback):
        self.resize_observers.remove(callback)

    def resize(self, width, height):
        self.width = width
        self.height = height
        for callback in list(self.resize_observers):
            callback(self.canvas_size())


class PlainCanvas:
    """Canvas without resize observation (window resizes are used instead)."""

    def __init__(self, left=30, top=40, width=200, height=200):
        self.left = left
        self.top = top
        self.width = width
        self.height = height

    @property
    def path(self):
        return (self,)

    def bounding_rect(self):
        return Rect(self.left, self.top, self.width, self.height)

    def canvas_size(self):
        return (self.width, self.height)


class FakeMarker:
    """Marker inside a canvas; its rect starts at the applied translation."""

    def __init__(self, canvas, size=1):
        self.canvas = canvas
        self.size = size
        self.translation = None
        self.translations = []

    @property
    def path(self):
        return (self, self.canvas)

    def bounding_rect(self):
        x, y = self.translation or (0, 0)
        return Rect(self.canvas.left + x, self.canvas.top + y, self.size, self.size)

    def translate(self, x, y):
        self.translation = (x, y)
        self.translations.append((x, y))


class ManualFrameScheduler:
    """Frame scheduler driven by the test through flush()."""

    def __init__(self):
        self._next_handle = 0
        self._callbacks = {}

    @property
    def pending(self):
        return len(self._callbacks)

    def request(self, callback):
        self._next_handle += 1
        self._callbacks[self._next_handle] = callback
        return self._next_handle

    def cancel(self, handle):
        self._callbacks.pop(handle, None)

    def flush(self):
        callbacks = list(self._callbacks.values())
        self._callbacks.clear()
        for callback in callbacks:
            callback()


class CallbackRecorder:
    """Collects every value a drag callback receives."""

    def __init__(self):
        self.calls = []

    def __call__(self, value):
        self.calls.append(value)

    @property
    def last(self):
        return self.calls[-1] if self.calls else None


class FailingStorage:
    """Backing store whose writes always fail."""

    def __init__(self, items=None):
        self.items = dict(items or {})

    def get_item(self, key):
        return self.items.get(key)

    def set_item(self, key, text):
        raise OSError("disk full")

    def remove_item(self, key):
        raise OSError("read-only")


# ── Fixtures ────────────────────────────────────────────────────────────

@pytest.fixture
def window():
    """Global event target (stands in for the application window)"""
    return EventTarget()


@pytest.fixture
def scheduler():
    return ManualFrameScheduler()


@pytest.fixture
def canvas():
    """200x200 canvas at viewport offset (30, 40)"""
    return FakeCanvas()


@pytest.fixture
def marker(canvas):
    return FakeMarker(canvas)


@pytest.fixture
def recorder():
    return CallbackRecorder()


@pytest.fixture
def controller(window, scheduler):
    from components.draggable.drag_controller import DragController
    controller = DragController(window, scheduler)
    yield controller
    controller.deregister()


@pytest.fixture
def simulate(window, scheduler):
    """Dispatch a mouse event at (x, y) relative to a target's current rect.

    Frame callbacks are flushed afterwards, like waiting one animation frame.
    """
    def _simulate(event_type, target, x, y):
        rect = target.bounding_rect()
        window.dispatch(MouseEvent(event_type, x + rect.left, y + rect.top, target.path))
        scheduler.flush()
    return _simulate


@pytest.fixture
def storage_path(tmp_path):
    return str(tmp_path / "happycolors" / "storage.json")


@pytest.fixture
def file_storage(storage_path):
    """Empty JSON file storage in a temporary directory"""
    from services.storage import JsonFileStorage
    return JsonFileStorage(storage_path)
