# -*- coding: utf-8 -*-
"""
BaseModeWidget: shared scaffolding for the game views.

- Mounts exactly one engine and repaints whenever its state changes
- `unmount()` stops listening and drops the engine; the shell owns teardown
- Carries the current language; subclasses rebuild labels in `retranslate`
Views never hold game logic: they read `engine.state` and forward input via `dispatch`.
"""
import logging

from PySide6 import QtWidgets, QtCore

from minigames.engines.base import Reset
from minigames.i18n import tr

logger = logging.getLogger(__name__)


class BaseModeWidget(QtWidgets.QWidget):
    stateChanged = QtCore.Signal(object)

    def __init__(self, lang: str = "fa", parent=None):
        super().__init__(parent)
        self._lang = lang
        self.engine = None
        self._unsubscribe = None

    # --- mount / unmount
    def mount(self, engine):
        self.unmount()
        self.engine = engine
        self._unsubscribe = engine.subscribe(self._on_state)
        logger.debug("%s mounted on %s", engine.kind, type(self).__name__)
        self.refresh()

    def unmount(self):
        if self.engine is None:
            return
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        self.engine = None
        self.refresh()

    def dispatch(self, action):
        if self.engine is not None:
            self.engine.dispatch(action)

    def reset(self):
        self.dispatch(Reset())

    def _on_state(self, state):
        self.stateChanged.emit(state)
        self.refresh()

    # --- view
    def _t(self, key: str, **fmt) -> str:
        return tr(key, self._lang, **fmt)

    def set_lang(self, lang: str):
        self._lang = lang
        self.retranslate()
        self.refresh()

    def retranslate(self):
        pass

    def refresh(self):
        self.update()
