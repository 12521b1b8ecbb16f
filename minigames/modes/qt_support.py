# -*- coding: utf-8 -*-
"""Qt-backed collaborators for the engines: QTimer scheduler and an app-wide arrow-key source."""
import logging

from PySide6 import QtCore, QtWidgets

from minigames.engines.scheduler import Scheduler, TimerHandle

logger = logging.getLogger(__name__)


class QtTimerHandle(TimerHandle):
    def __init__(self, callback, timer: QtCore.QTimer):
        super().__init__(callback)
        self._timer = timer

    def cancel(self):
        super().cancel()
        if self._timer is not None:
            self._timer.stop()
            self._timer.deleteLater()
            self._timer = None

    def _run(self):
        super()._run()
        if self._timer is not None:
            self._timer.deleteLater()
            self._timer = None


class QtScheduler(Scheduler):
    """One single-shot QTimer per call, parented so it dies with the widget."""

    def __init__(self, parent: QtCore.QObject):
        self._parent = parent

    def call_later(self, delay_ms: int, callback) -> TimerHandle:
        timer = QtCore.QTimer(self._parent)
        timer.setSingleShot(True)
        handle = QtTimerHandle(callback, timer)
        timer.timeout.connect(handle._run)
        timer.start(max(0, int(delay_ms)))
        return handle


QT_ARROWS = {
    QtCore.Qt.Key_Up: "ArrowUp",
    QtCore.Qt.Key_Down: "ArrowDown",
    QtCore.Qt.Key_Left: "ArrowLeft",
    QtCore.Qt.Key_Right: "ArrowRight",
}


class QtKeySource(QtCore.QObject):
    """Application-wide key-down listener; installed only while someone is attached."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self._handlers = []
        self._installed = False

    def attach(self, handler):
        self._handlers.append(handler)
        if not self._installed:
            app = QtWidgets.QApplication.instance()
            if app is not None:
                app.installEventFilter(self)
                self._installed = True

    def detach(self, handler):
        if handler in self._handlers:
            self._handlers.remove(handler)
        if not self._handlers and self._installed:
            app = QtWidgets.QApplication.instance()
            if app is not None:
                app.removeEventFilter(self)
            self._installed = False

    def eventFilter(self, obj, event):
        if event.type() == QtCore.QEvent.KeyPress:
            key = QT_ARROWS.get(event.key())
            if key is not None and self._handlers:
                for handler in list(self._handlers):
                    handler(key)
                # فلش‌ها را مصرف کن تا فوکوس بین دکمه‌ها جابجا نشود
                return True
        return False
