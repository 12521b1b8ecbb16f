import random

import pytest

from minigames.engines.scheduler import ManualScheduler
from minigames.notify import Notifier


class RecordingNotifier(Notifier):
    def __init__(self):
        self.messages = []

    def show(self, level, message):
        self.messages.append((level, message))

    @property
    def levels(self):
        return [lvl for lvl, _ in self.messages]


class FakeKeySource:
    def __init__(self):
        self.handlers = []

    def attach(self, handler):
        self.handlers.append(handler)

    def detach(self, handler):
        self.handlers.remove(handler)

    def press(self, key):
        for h in list(self.handlers):
            h(key)


@pytest.fixture()
def scheduler():
    return ManualScheduler()


@pytest.fixture()
def notifier():
    return RecordingNotifier()


@pytest.fixture()
def keys():
    return FakeKeySource()


@pytest.fixture()
def rng():
    return random.Random(7)


@pytest.fixture()
def engine_kw(scheduler, notifier):
    return {"scheduler": scheduler, "notifier": notifier, "t": lambda key, **fmt: key}
