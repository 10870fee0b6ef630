"""Knight's tour engine driven by Warnsdorff's heuristic.

The engine owns a BoardState and walks the knight one square per
``advance()`` call. Each step moves to the reachable unvisited square with
the fewest onward moves; ties go to the earliest offset in
``TourConsts.KNIGHT_OFFSETS``. The heuristic is greedy and can dead-end
before every square is visited.
"""

from __future__ import annotations

import logging

from knight_tour.core.board import BoardState
from knight_tour.core.exceptions import InvalidPositionError
from knight_tour.interfaces.tour import ITourEngine, Position, TourSnapshot
from knight_tour.utils.consts import FILE_LETTERS, TourConsts

logger = logging.getLogger(__name__)

_OFFSETS = TourConsts.KNIGHT_OFFSETS


class TourEngine(ITourEngine):
    """Board state plus knight position, move count and move history.

    Invariants kept by every public method:
    - ``board.get(y, x) == move_count`` for the current square
    - ``len(move_history) == move_count``
    - history entries and positive board cells correspond one to one
    """

    def __init__(self, board_size: int):
        self._board = BoardState(board_size)
        self._history: list[Position] = []
        self._current = Position(0, 0)
        self._move_count = 1
        self._finished = False
        self._seed(0, 0)

    @property
    def board(self) -> BoardState:
        return self._board

    @property
    def board_size(self) -> int:
        return self._board.size

    @property
    def current_position(self) -> Position:
        return self._current

    @property
    def move_count(self) -> int:
        return self._move_count

    @property
    def move_history(self) -> list[Position]:
        return list(self._history)

    @property
    def is_complete(self) -> bool:
        """True once every square of the board has been visited."""
        return self._move_count == self._board.size * self._board.size

    @property
    def is_finished(self) -> bool:
        """True if the last ``advance()`` found no legal move."""
        return self._finished

    # ------------------------------------------------------------------
    # Move selection
    # ------------------------------------------------------------------

    def _is_open(self, x: int, y: int) -> bool:
        board = self._board
        return board.is_within_bounds(x, y) and board.get(y, x) == 0

    def _count_onward(self, x: int, y: int) -> int:
        return sum(1 for dx, dy in _OFFSETS if self._is_open(x + dx, y + dy))

    def is_legal_move(self, x: int, y: int) -> bool:
        """Return True if ``(x, y)`` is on the board and unvisited."""
        return self._is_open(x, y)

    def degree(self, x: int, y: int) -> int:
        """Number of legal knight moves out of ``(x, y)`` right now.

        Raises:
            InvalidPositionError: if ``(x, y)`` is off the board
        """
        if not self._board.is_within_bounds(x, y):
            raise InvalidPositionError(x, y, self._board.size)
        return self._count_onward(x, y)

    def _select_next(self) -> Position | None:
        best: Position | None = None
        min_degree = TourConsts.MAX_DEGREE + 1
        x, y = self._current

        for dx, dy in _OFFSETS:
            nx, ny = x + dx, y + dy
            if not self._is_open(nx, ny):
                continue
            degree = self._count_onward(nx, ny)
            # Strict comparison: the first candidate with the minimum wins.
            if degree < min_degree:
                min_degree = degree
                best = Position(nx, ny)

        return best

    def advance(self) -> bool:
        """Move the knight one square using Warnsdorff's rule.

        Returns:
            True if the knight moved, False if no legal move exists. State is
            untouched in the latter case.
        """
        target = self._select_next()
        if target is None:
            if not self._finished:
                self._finished = True
                if self.is_complete:
                    logger.info(f"Tour complete after {self._move_count} moves")
                else:
                    logger.info(
                        f"Dead end at {self.position_to_notation(*self._current)} "
                        f"after {self._move_count} of "
                        f"{self._board.size * self._board.size} squares"
                    )
            return False

        self._current = target
        self._move_count += 1
        self._board.set(target.y, target.x, self._move_count)
        self._history.append(target)
        logger.debug(
            f"Move {self._move_count}: {self.position_to_notation(*target)}"
        )
        return True

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def _seed(self, x: int, y: int) -> None:
        self._board.reset()
        self._history.clear()
        self._current = Position(x, y)
        self._move_count = 1
        self._finished = False
        self._board.set(y, x, self._move_count)
        self._history.append(self._current)

    def reset(self) -> None:
        """Restart the tour with the knight on (0, 0)."""
        self._seed(0, 0)

    def set_start(self, x: int, y: int) -> None:
        """Restart the tour with the knight on ``(x, y)``.

        Raises:
            InvalidPositionError: if ``(x, y)`` is off the board; the current
                tour is left as it was.
        """
        if not self._board.is_within_bounds(x, y):
            raise InvalidPositionError(x, y, self._board.size)
        self._seed(x, y)
        logger.info(f"Tour restarted at {self.position_to_notation(x, y)}")

    # ------------------------------------------------------------------
    # Notation
    # ------------------------------------------------------------------

    def position_to_notation(self, x: int, y: int) -> str:
        """Map column ``x`` to a file letter and row ``y`` to a rank.

        Row 0 is the top of the grid and the highest rank, so on an 8x8
        board (0, 0) is ``a8`` and (7, 7) is ``h1``.
        """
        return f"{chr(ord('a') + x)}{self._board.size - y}"

    def notation_to_position(self, text: str) -> Position:
        """Parse algebraic notation such as ``e4`` into a position.

        Raises:
            InvalidPositionError: if the text is malformed or off the board
        """
        square = text.strip().lower()
        if len(square) < 2 or square[0] not in FILE_LETTERS or not square[1:].isdigit():
            raise InvalidPositionError(
                board_size=self._board.size,
                message=f"Cannot parse square '{text}'",
            )
        x = FILE_LETTERS.index(square[0])
        y = self._board.size - int(square[1:])
        if not self._board.is_within_bounds(x, y):
            raise InvalidPositionError(x, y, self._board.size)
        return Position(x, y)

    def get_snapshot(self) -> TourSnapshot:
        return TourSnapshot(
            board_size=self._board.size,
            cells=self._board.cells(),
            current=self._current,
            move_count=self._move_count,
            history=tuple(self._history),
            finished=self._finished,
            complete=self.is_complete,
        )
