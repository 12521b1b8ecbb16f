from minigames.engines.scheduler import ManualScheduler


def test_fires_in_due_order():
    s = ManualScheduler()
    fired = []
    s.call_later(200, lambda: fired.append("b"))
    s.call_later(100, lambda: fired.append("a"))
    s.advance(99)
    assert fired == []
    s.advance(101)
    assert fired == ["a", "b"]
    assert s.now == 200


def test_cancelled_handle_never_fires():
    s = ManualScheduler()
    fired = []
    h = s.call_later(50, lambda: fired.append(1))
    h.cancel()
    h.cancel()
    s.advance(100)
    assert fired == []
    assert s.pending == 0


def test_callback_can_reschedule():
    s = ManualScheduler()
    ticks = []

    def tick():
        ticks.append(s.now)
        if len(ticks) < 3:
            s.call_later(150, tick)

    s.call_later(150, tick)
    s.advance(1000)
    assert ticks == [150, 300, 450]
