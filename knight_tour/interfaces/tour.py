"""Tour engine interface consumed by renderers and drivers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import NamedTuple


class Position(NamedTuple):
    """A square as (x=column, y=row); row 0 is the top of the board."""

    x: int
    y: int


@dataclass(frozen=True)
class TourSnapshot:
    """Read-only view of a tour for UI panels."""

    board_size: int
    cells: tuple[tuple[int, ...], ...]
    current: Position
    move_count: int
    history: tuple[Position, ...]
    finished: bool = False
    complete: bool = False

    def marker(self, x: int, y: int) -> int:
        return self.cells[y][x]


class ITourEngine(ABC):
    """Behavioral contract of a knight's tour engine."""

    @property
    @abstractmethod
    def board_size(self) -> int:
        """Side length of the board."""
        ...

    @property
    @abstractmethod
    def current_position(self) -> Position:
        """Square the knight currently stands on."""
        ...

    @property
    @abstractmethod
    def move_count(self) -> int:
        """Number of squares visited so far, start square included."""
        ...

    @property
    @abstractmethod
    def move_history(self) -> list[Position]:
        """Visited squares in chronological order."""
        ...

    @abstractmethod
    def advance(self) -> bool:
        """Make the next move. Return False when no legal move remains."""
        ...

    @abstractmethod
    def reset(self) -> None:
        """Restart the tour from the top-left square."""
        ...

    @abstractmethod
    def set_start(self, x: int, y: int) -> None:
        """Restart the tour from ``(x, y)``."""
        ...

    @abstractmethod
    def position_to_notation(self, x: int, y: int) -> str:
        """Algebraic name of a square, e.g. ``a8``."""
        ...

    @abstractmethod
    def notation_to_position(self, text: str) -> Position:
        """Parse algebraic notation back into a position."""
        ...

    @abstractmethod
    def get_snapshot(self) -> TourSnapshot:
        """Return an immutable snapshot for rendering."""
        ...
