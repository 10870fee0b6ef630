"""Constants shared by the tour engine and its drivers."""


class TourConsts:
    """Knight geometry and board size limits."""

    # Canonical move order; ties in Warnsdorff's rule go to the earliest entry.
    KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
        (2, 1),
        (1, 2),
        (-1, 2),
        (-2, 1),
        (-2, -1),
        (-1, -2),
        (1, -2),
        (2, -1),
    )
    """(dx, dy) offsets, x is the column and y is the row."""

    MAX_DEGREE = len(KNIGHT_OFFSETS)
    """A square never has more than 8 onward moves."""

    MIN_BOARD_SIZE = 2
    """Smallest board offered by the size dialog."""

    MAX_BOARD_SIZE = 14
    """Largest board offered by the size dialog."""

    DEFAULT_BOARD_SIZE = 8


FILE_LETTERS = "abcdefghijklmnopqrstuvwxyz"
