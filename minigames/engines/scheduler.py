# -*- coding: utf-8 -*-
"""
Cancellable delayed callbacks owned by an engine.

Engines never touch a real timer: they ask a Scheduler for `call_later` and keep
the returned handle so reset/teardown can cancel it. The Qt widgets hand in a
QTimer-backed scheduler (see modes/qt_support.py); ManualScheduler runs on a
virtual clock and is what the test-suite drives.
"""
import heapq
import itertools
import logging

logger = logging.getLogger(__name__)


class TimerHandle:
    def __init__(self, callback):
        self._callback = callback
        self.cancelled = False
        self.fired = False

    @property
    def active(self) -> bool:
        return not (self.cancelled or self.fired)

    def cancel(self):
        self.cancelled = True

    def _run(self):
        if not self.active:
            return
        self.fired = True
        self._callback()


class Scheduler:
    def call_later(self, delay_ms: int, callback) -> TimerHandle:
        raise NotImplementedError


class ManualScheduler(Scheduler):
    """Virtual clock; time only moves when `advance` is called."""

    def __init__(self):
        self.now = 0
        self._queue = []
        self._seq = itertools.count()

    def call_later(self, delay_ms: int, callback) -> TimerHandle:
        handle = TimerHandle(callback)
        heapq.heappush(self._queue, (self.now + max(0, delay_ms), next(self._seq), handle))
        return handle

    @property
    def pending(self) -> int:
        return sum(1 for _, _, h in self._queue if h.active)

    def advance(self, ms: int):
        target = self.now + ms
        while self._queue and self._queue[0][0] <= target:
            due, _, handle = heapq.heappop(self._queue)
            self.now = due
            handle._run()
        self.now = target
