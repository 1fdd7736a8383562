"""
Frame-based debouncing for high frequency handlers (pointer moves, resizes).

A debounced handler keeps at most one pending call. Calling it again before
the next frame cancels the pending call and schedules the new one, so the
last event of a burst wins and intermediate events are dropped.

A scheduler is any object with:
    request(callback) -> handle   run callback on the next frame
    cancel(handle)                 drop a requested callback
"""


class FrameDebouncer:
    """Single-slot pending call driven by a frame scheduler."""

    def __init__(self, callback, scheduler):
        """
        Args:
            callback: Function to call with the latest arguments
            scheduler: Frame scheduler (see module docstring)
        """
        self._callback = callback
        self._scheduler = scheduler
        self._pending = None

    @property
    def pending(self):
        """True while a call is waiting for the next frame."""
        return self._pending is not None

    def __call__(self, *args, **kwargs):
        self.cancel()
        self._pending = self._scheduler.request(lambda: self._run(args, kwargs))

    def cancel(self):
        if self._pending is not None:
            self._scheduler.cancel(self._pending)
            self._pending = None

    def _run(self, args, kwargs):
        self._pending = None
        self._callback(*args, **kwargs)


def debounce(callback, scheduler):
    """Debounce a function to at most one call per frame."""
    return FrameDebouncer(callback, scheduler)
