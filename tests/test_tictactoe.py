import pytest

from minigames.engines.tictactoe import (
    DRAW,
    Mark,
    PlayAt,
    TicTacToeEngine,
    TicTacToeState,
    WINNING_LINES,
    best_move,
    play_at,
)
from minigames.settings import TICTACTOE_COMPUTER_DELAY_MS


def play(moves, state=None):
    state = state or TicTacToeState()
    for m in moves:
        state = play_at(state, m)
    return state


def test_top_row_wins_on_fifth_move():
    moves = [0, 4, 1, 3, 2]
    assert play(moves[:4]).outcome is None
    st = play(moves)
    assert st.outcome == "X"
    assert st.winner is Mark.X


@pytest.mark.parametrize("line", WINNING_LINES)
@pytest.mark.parametrize("mark", [Mark.X, Mark.O])
def test_every_line_wins(line, mark):
    cells = [None] * 9
    for i in line:
        cells[i] = mark
    # the last cell of the line is played as the winning move
    cells[line[-1]] = None
    st = TicTacToeState(cells=tuple(cells), turn=mark)
    st = play_at(st, line[-1])
    assert st.winner is mark


def test_full_board_without_line_is_draw():
    # X O X / X O O / O X X
    st = play([0, 1, 2, 4, 3, 5, 7, 6, 8])
    assert st.outcome == DRAW
    assert all(c is not None for c in st.cells)


def test_no_move_after_outcome():
    st = play([0, 4, 1, 3, 2])
    assert play_at(st, 8) is st


def test_filled_cell_and_out_of_range_are_ignored():
    st = play([4])
    assert play_at(st, 4) is st
    assert play_at(st, 9) is st
    assert play_at(st, -1) is st


def test_turn_alternates():
    st = play([0])
    assert st.turn is Mark.O
    st = play_at(st, 1)
    assert st.turn is Mark.X


def test_engine_notifies_win_once(engine_kw, notifier):
    eng = TicTacToeEngine(**engine_kw)
    for m in [0, 4, 1, 3, 2]:
        eng.dispatch(PlayAt(m))
    eng.dispatch(PlayAt(8))
    assert notifier.messages == [("success", "ttt.won")]
    assert eng.state.cells[8] is None


def test_engine_notifies_draw(engine_kw, notifier):
    eng = TicTacToeEngine(**engine_kw)
    for m in [0, 1, 2, 4, 3, 5, 7, 6, 8]:
        eng.play_at(m)
    assert notifier.levels == ["info"]


def test_reset_clears_board(engine_kw):
    eng = TicTacToeEngine(**engine_kw)
    eng.play_at(0)
    eng.reset()
    assert eng.state == TicTacToeState()


def test_best_move_blocks_and_wins():
    # O to move, X threatens 0-1-2
    cells = [Mark.X, Mark.X, None, None, Mark.O, None, None, None, None]
    assert best_move(cells, Mark.O) == 2
    # O can win on the middle column
    cells = [Mark.X, Mark.O, Mark.X, None, Mark.O, None, Mark.X, None, None]
    assert best_move(cells, Mark.O) == 7


def test_computer_replies_after_delay(engine_kw, scheduler):
    eng = TicTacToeEngine(mode="computer", **engine_kw)
    eng.play_at(0)
    assert eng.state.turn is Mark.O
    # human cannot play for O while the reply is pending
    eng.play_at(1)
    assert eng.state.cells[1] is None
    scheduler.advance(TICTACTOE_COMPUTER_DELAY_MS)
    assert eng.state.turn is Mark.X
    assert eng.state.cells.count(Mark.O) == 1
    # perfect reply to a corner opening is the centre
    assert eng.state.cells[4] is Mark.O


def test_reset_cancels_pending_computer_move(engine_kw, scheduler):
    eng = TicTacToeEngine(mode="computer", **engine_kw)
    eng.play_at(0)
    eng.reset()
    scheduler.advance(TICTACTOE_COMPUTER_DELAY_MS * 2)
    assert eng.state == TicTacToeState()
