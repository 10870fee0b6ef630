import pytest

from knight_tour.core.board import BoardState


def test_new_board_is_unvisited():
    board = BoardState(4)

    assert board.size == 4
    assert board.visited_count() == 0
    assert all(value == 0 for row in board.cells() for value in row)


def test_set_and_get_use_row_col_order():
    board = BoardState(5)
    board.set(1, 3, 7)

    assert board.get(1, 3) == 7
    assert board.get(3, 1) == 0
    assert board.cells()[1][3] == 7


@pytest.mark.parametrize(
    "x, y, expected",
    [
        (0, 0, True),
        (4, 4, True),
        (4, 0, True),
        (-1, 0, False),
        (0, -1, False),
        (5, 0, False),
        (0, 5, False),
        (5, 5, False),
    ],
)
def test_is_within_bounds(x, y, expected):
    assert BoardState(5).is_within_bounds(x, y) is expected


def test_reset_zeroes_every_cell():
    board = BoardState(3)
    for row in range(3):
        for col in range(3):
            board.set(row, col, row * 3 + col + 1)
    assert board.visited_count() == 9

    board.reset()

    assert board.visited_count() == 0
    assert board.cells() == ((0, 0, 0), (0, 0, 0), (0, 0, 0))


def test_cells_is_a_copy():
    board = BoardState(2)
    snapshot = board.cells()
    board.set(0, 0, 1)

    assert snapshot[0][0] == 0
    assert board.cells()[0][0] == 1


def test_single_square_board():
    board = BoardState(1)
    assert board.is_within_bounds(0, 0)
    assert not board.is_within_bounds(1, 0)


def test_invalid_size():
    with pytest.raises(ValueError):
        BoardState(0)
