import os
import random

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
QtWidgets = pytest.importorskip("PySide6.QtWidgets")

from minigames.engines.board import Direction
from minigames.engines.snake import RUNNING, SnakeEngine
from minigames.modes.snake_widget import PAD, SnakeWidget


@pytest.fixture(scope="module")
def qapp():
    return QtWidgets.QApplication.instance() or QtWidgets.QApplication([])


@pytest.fixture()
def view(qapp, engine_kw, keys):
    eng = SnakeEngine(rng=random.Random(4), key_source=keys, **engine_kw)
    w = SnakeWidget(lang="en")
    w.mount(eng)
    yield w
    w.unmount()
    eng.teardown()
    w.deleteLater()


def test_pad_has_one_button_per_direction():
    assert set(PAD) == set(Direction)
    assert len({(row, col) for row, col, _ in PAD.values()}) == 4


def test_pad_disabled_until_running(view):
    assert not any(b.isEnabled() for b in view.pad_buttons.values())
    view.btn_start.click()
    assert view.engine.state.status == RUNNING
    assert all(b.isEnabled() for b in view.pad_buttons.values())


def test_pad_buttons_turn_the_snake(view):
    view.btn_start.click()
    view.pad_buttons[Direction.DOWN].click()
    assert view.engine.state.pending_direction is Direction.DOWN
    view.pad_buttons[Direction.LEFT].click()
    # still committed to RIGHT until the next tick, so LEFT is a reversal
    assert view.engine.state.pending_direction is Direction.DOWN
