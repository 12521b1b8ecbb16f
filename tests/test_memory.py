import random

import pytest

from minigames.engines.memory import (
    Flip,
    MemoryEngine,
    NewGame,
    deal,
    flip,
    format_time,
    resolve,
)
from minigames.settings import MEMORY_RESOLVE_DELAY_MS

SYMBOLS = ["cat", "dog", "fox", "owl"]


def pairs_by_symbol(state):
    out = {}
    for c in state.cards:
        out.setdefault(c.symbol, []).append(c.id)
    return list(out.values())


def test_deal_duplicates_each_symbol(rng):
    st = deal(SYMBOLS, rng)
    assert len(st.cards) == 8
    assert sorted(c.symbol for c in st.cards) == sorted(SYMBOLS * 2)
    assert len({c.id for c in st.cards}) == 8
    assert st.staged == () and st.move_count == 0 and not st.is_won


def test_deal_rejects_bad_symbol_sets():
    with pytest.raises(ValueError):
        deal([])
    with pytest.raises(ValueError):
        deal(["a", "a"])


def test_third_flip_is_ignored_while_pair_is_staged(rng):
    st = deal(SYMBOLS, rng)
    ids = [c.id for c in st.cards]
    st = flip(st, ids[0])
    st = flip(st, ids[1])
    assert len(st.staged) == 2
    assert flip(st, ids[2]) is st


def test_flipped_or_matched_card_is_ignored(rng):
    st = deal(SYMBOLS, rng)
    a, b = pairs_by_symbol(st)[0]
    st = flip(st, a)
    assert flip(st, a) is st
    st = resolve(flip(st, b))
    assert st.card(a).is_matched
    assert flip(st, a) is st


def test_unknown_card_is_ignored(rng):
    st = deal(SYMBOLS, rng)
    assert flip(st, 999) is st


def test_mismatch_turns_both_face_down(rng):
    st = deal(SYMBOLS, rng)
    (a, _), (b, _) = pairs_by_symbol(st)[:2]
    st = resolve(flip(flip(st, a), b))
    assert not st.card(a).is_flipped and not st.card(b).is_flipped
    assert st.staged == ()
    assert st.move_count == 1


def test_move_count_counts_pairs_not_flips(rng):
    st = deal(SYMBOLS, rng)
    a, b = pairs_by_symbol(st)[0]
    st = flip(st, a)
    assert st.move_count == 0
    st = flip(st, b)
    assert st.move_count == 0
    assert resolve(st).move_count == 1


def test_four_symbols_won_after_four_pairs(engine_kw, scheduler, notifier):
    eng = MemoryEngine(symbols=SYMBOLS, rng=random.Random(3), **engine_kw)
    for a, b in pairs_by_symbol(eng.state):
        assert not eng.state.is_won
        eng.dispatch(Flip(a))
        eng.dispatch(Flip(b))
        scheduler.advance(MEMORY_RESOLVE_DELAY_MS)
    assert eng.state.is_won
    assert eng.state.move_count == 4
    assert all(c.is_matched for c in eng.state.cards)
    assert notifier.messages == [("success", "memory.won")]


@pytest.mark.parametrize("n", [1, 2, 5, 8])
def test_any_deck_can_be_finished(n):
    st = deal([f"s{i}" for i in range(n)], random.Random(n))
    for a, b in pairs_by_symbol(st):
        st = resolve(flip(flip(st, a), b))
    assert st.is_won
    assert st.move_count == n


def test_resolution_waits_for_delay(engine_kw, scheduler):
    eng = MemoryEngine(symbols=SYMBOLS, rng=random.Random(1), **engine_kw)
    a, b = pairs_by_symbol(eng.state)[0]
    eng.flip(a)
    eng.flip(b)
    scheduler.advance(MEMORY_RESOLVE_DELAY_MS - 1)
    assert not eng.state.card(a).is_matched
    scheduler.advance(1)
    assert eng.state.card(a).is_matched and eng.state.card(b).is_matched


def test_reset_cancels_pending_resolution(engine_kw, scheduler):
    eng = MemoryEngine(symbols=SYMBOLS, rng=random.Random(1), **engine_kw)
    a, b = pairs_by_symbol(eng.state)[0]
    eng.flip(a)
    eng.flip(b)
    eng.dispatch(NewGame())
    scheduler.advance(MEMORY_RESOLVE_DELAY_MS * 2)
    assert eng.state.move_count == 0
    assert eng.state.staged == ()


def test_teardown_cancels_timers(engine_kw, scheduler):
    eng = MemoryEngine(symbols=SYMBOLS, rng=random.Random(1), **engine_kw)
    a, b = pairs_by_symbol(eng.state)[0]
    eng.flip(a)
    eng.flip(b)
    before = eng.state
    eng.teardown()
    scheduler.advance(5000)
    assert eng.state is before
    assert scheduler.pending == 0


def test_clock_counts_until_won(engine_kw, scheduler):
    eng = MemoryEngine(symbols=["x"], rng=random.Random(1), **engine_kw)
    scheduler.advance(3000)
    assert eng.state.elapsed == 3
    a, b = pairs_by_symbol(eng.state)[0]
    eng.flip(a)
    eng.flip(b)
    scheduler.advance(MEMORY_RESOLVE_DELAY_MS)
    assert eng.state.is_won
    frozen = eng.state.elapsed
    scheduler.advance(5000)
    assert eng.state.elapsed == frozen


def test_format_time():
    assert format_time(0) == "0:00"
    assert format_time(75) == "1:15"


def test_initialize_deals_a_new_symbol_set(engine_kw, scheduler):
    eng = MemoryEngine(symbols=SYMBOLS, rng=random.Random(1), **engine_kw)
    scheduler.advance(2000)
    eng.initialize(["sun", "moon"])
    assert eng.symbols == ["sun", "moon"]
    assert len(eng.state.cards) == 4
    assert eng.state.elapsed == 0 and eng.state.move_count == 0
    scheduler.advance(1000)
    assert eng.state.elapsed == 1


def test_rejected_symbol_set_keeps_game_playable(engine_kw, scheduler):
    eng = MemoryEngine(symbols=["a", "b"], rng=random.Random(1), **engine_kw)
    before = eng.state
    with pytest.raises(ValueError):
        eng.initialize(["x", "x"])
    with pytest.raises(ValueError):
        eng.initialize([])
    assert eng.state is before
    assert eng.symbols == ["a", "b"]
    scheduler.advance(3000)
    assert eng.state.elapsed == 3
    eng.dispatch(NewGame())
    assert sorted(c.symbol for c in eng.state.cards) == ["a", "a", "b", "b"]
