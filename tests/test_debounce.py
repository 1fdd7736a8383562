"""
Tests for frame debouncing.

Verifies:
- Calls are deferred to the next frame
- Bursts collapse to the last call
- Cancellation drops the pending call
"""
from utils.debounce import FrameDebouncer, debounce


class TestFrameDebouncer:

    def test_deferred_until_frame(self, scheduler):
        calls = []
        debounced = debounce(calls.append, scheduler)

        debounced(1)
        assert calls == []
        assert debounced.pending

        scheduler.flush()
        assert calls == [1]
        assert not debounced.pending

    def test_last_call_wins(self, scheduler):
        calls = []
        debounced = debounce(calls.append, scheduler)

        debounced(1)
        debounced(2)
        debounced(3)
        assert scheduler.pending == 1

        scheduler.flush()
        assert calls == [3]

    def test_keyword_arguments(self, scheduler):
        calls = []
        debounced = FrameDebouncer(lambda *args, **kwargs: calls.append((args, kwargs)), scheduler)

        debounced(1, key='value')
        scheduler.flush()
        assert calls == [((1,), {'key': 'value'})]

    def test_cancel(self, scheduler):
        calls = []
        debounced = debounce(calls.append, scheduler)

        debounced(1)
        debounced.cancel()
        scheduler.flush()
        assert calls == []
        assert scheduler.pending == 0

    def test_cancel_without_pending_call(self, scheduler):
        debounced = debounce(lambda: None, scheduler)
        debounced.cancel()
        assert not debounced.pending

    def test_separate_frames_each_run(self, scheduler):
        calls = []
        debounced = debounce(calls.append, scheduler)

        debounced(1)
        scheduler.flush()
        debounced(2)
        scheduler.flush()
        assert calls == [1, 2]
