import pytest
from board import Board
from generate import BoardGenerator


def test_deterministic_seed():
    b1 = BoardGenerator(5, 4, seed=123, density=0.4).generate()
    b2 = BoardGenerator(5, 4, seed=123, density=0.4).generate()
    assert b1.live_cells == b2.live_cells


def test_cells_inside_window():
    gen = BoardGenerator(7, 3, seed=5, density=0.6)
    board = gen.generate()
    assert (board.width, board.height) == (7, 3)
    assert board.id is None
    assert all(0 <= x < 7 and 0 <= y < 3 for x, y in board.live_cells)
    assert all(isinstance(x, int) and isinstance(y, int) for x, y in board.live_cells)


def test_density_bounds():
    w, h = 64, 64
    density = 0.3
    board = BoardGenerator(w, h, seed=0, density=density).generate()
    actual = len(board.live_cells) / (w * h)
    assert abs(actual - density) < 0.03      # within ±3 pp


def test_density_extremes():
    assert BoardGenerator(4, 4, density=0.0).generate().live_cells == frozenset()
    assert len(BoardGenerator(4, 4, density=1.0).generate().live_cells) == 16


def test_invalid_density():
    with pytest.raises(ValueError):
        BoardGenerator(4, 4, density=1.5)


def test_is_trivial_cases():
    gen = BoardGenerator(4, 4)
    assert gen.is_trivial(Board(width=4, height=4))
    assert gen.is_trivial(Board(width=4, height=4, live_cells={(0, 0), (1, 0), (0, 1), (1, 1)}))
    assert not gen.is_trivial(Board(width=4, height=4, live_cells={(0, 0), (1, 0), (2, 0)}))


def test_batch_nontrivial():
    gen = BoardGenerator(8, 8, seed=1, density=0.4)
    batch = gen.generate_batch(10)
    assert len(batch) == 10
    assert not any(gen.is_trivial(b) for b in batch)


def test_batch_gives_up_on_empty_soups():
    gen = BoardGenerator(4, 4, density=0.0)
    with pytest.raises(RuntimeError):
        gen.generate_batch(3)
    assert len(gen.generate_batch(3, trim_trivial=False)) == 3
