# -*- coding: utf-8 -*-
"""
Engine: shared scaffolding for the game engines.

- Holds the single owned state snapshot (frozen dataclass, replaced on every transition)
- Tracks every timer the engine scheduled so reset/teardown can cancel them
- Fans state changes out to subscribers (the Qt views repaint from these)
- Carries the notifier and the `t(key)` translator used for outcome messages
"""
import logging
from dataclasses import dataclass, fields

from minigames.i18n import translator
from minigames.notify import Notifier
from minigames.settings import LANG_DEFAULT

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Reset:
    pass


class Engine:
    kind = ""
    actions = {}  # action type -> method name

    def __init__(self, scheduler=None, notifier=None, t=None):
        self.scheduler = scheduler
        self.notifier = notifier or Notifier()
        self.t = t or translator(LANG_DEFAULT)
        self._timers = {}
        self._listeners = []
        self._state = self.initial_state()

    # --- state
    def initial_state(self):
        raise NotImplementedError

    @property
    def state(self):
        return self._state

    def _set_state(self, new_state):
        if new_state is self._state:
            return
        self._state = new_state
        for cb in list(self._listeners):
            cb(new_state)

    def subscribe(self, callback):
        self._listeners.append(callback)
        return lambda: self._listeners.remove(callback)

    # --- actions
    def dispatch(self, action):
        """Route an action dataclass to the method named in `actions`, fields as kwargs."""
        if isinstance(action, Reset):
            self.reset()
            return
        name = self.actions.get(type(action))
        if name is None:
            logger.debug("%s: ignoring unknown action %r", self.kind, action)
            return
        getattr(self, name)(**{f.name: getattr(action, f.name) for f in fields(action)})

    def reset(self):
        self.cancel_timers()
        self._set_state(self.initial_state())

    def teardown(self):
        self.cancel_timers()

    # --- timers
    def _call_later(self, name: str, delay_ms: int, callback):
        self._cancel(name)
        if self.scheduler is None:
            logger.debug("%s: no scheduler, %s not scheduled", self.kind, name)
            return None
        handle = self.scheduler.call_later(delay_ms, callback)
        self._timers[name] = handle
        return handle

    def _cancel(self, name: str):
        handle = self._timers.pop(name, None)
        if handle is not None:
            handle.cancel()

    def cancel_timers(self):
        for name in list(self._timers):
            self._cancel(name)

    def has_timer(self, name: str) -> bool:
        handle = self._timers.get(name)
        return handle is not None and handle.active
