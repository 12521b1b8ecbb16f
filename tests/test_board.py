from minigames.engines.board import Direction, Grid, Point
from minigames.engines.tictactoe import WINNING_LINES


def test_point_addition():
    assert Point(5, 5) + Direction.RIGHT.value == Point(6, 5)
    assert Point(0, 0) + Direction.UP.vector == Point(0, -1)


def test_direction_opposites():
    for d in Direction:
        assert d.opposite.opposite is d
        assert d.opposite is not d
    assert Direction.LEFT.opposite is Direction.RIGHT


def test_direction_from_key():
    assert Direction.from_key("ArrowUp") is Direction.UP
    assert Direction.from_key("ArrowRight") is Direction.RIGHT
    assert Direction.from_key("w") is None


def test_grid_addressing_roundtrip():
    g = Grid(4, 3)
    assert g.size == 12
    assert [g.index_of(p) for p in g.cells()] == list(range(12))
    assert g.point_at(5) == Point(1, 1)


def test_grid_bounds_and_neighbors():
    g = Grid(20, 20)
    assert g.contains(Point(0, 0)) and g.contains(Point(19, 19))
    assert not g.contains(Point(20, 5)) and not g.contains(Point(-1, 5))
    assert sorted(g.neighbors(Point(0, 0))) == [Point(0, 1), Point(1, 0)]
    assert len(g.neighbors(Point(5, 5))) == 4


def test_diagonals_only_on_square_grids():
    assert Grid(3, 4).diagonals() == []
    assert len(Grid(3, 3).lines()) == 8


def test_winning_lines():
    assert len(WINNING_LINES) == 8
    assert (0, 1, 2) in WINNING_LINES
    assert (0, 3, 6) in WINNING_LINES
    assert (0, 4, 8) in WINNING_LINES
    assert (2, 4, 6) in WINNING_LINES
