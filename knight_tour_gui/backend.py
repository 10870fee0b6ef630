"""GUI backend interfaces and adapters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from knight_tour.interfaces.tour import ITourEngine, Position, TourSnapshot


class TourBackend(Protocol):
    """Minimal tour backend required by the GUI."""

    @property
    def board_size(self) -> int:
        ...

    def advance(self) -> bool:
        ...

    def reset(self) -> None:
        ...

    def set_start(self, x: int, y: int) -> None:
        ...

    def notation(self, position: Position) -> str:
        ...

    def parse_notation(self, text: str) -> Position:
        ...

    def snapshot(self) -> TourSnapshot:
        ...


@dataclass
class EngineBackend(TourBackend):
    """Adapter that exposes a TourEngine through the TourBackend interface.

    ``start`` is the square ``reset()`` returns to; it follows the last
    successful ``set_start`` call.
    """

    engine: ITourEngine
    start: Position = Position(0, 0)

    def __post_init__(self) -> None:
        self.engine.set_start(*self.start)

    @property
    def board_size(self) -> int:
        return self.engine.board_size

    def advance(self) -> bool:
        return self.engine.advance()

    def reset(self) -> None:
        if self.start == Position(0, 0):
            self.engine.reset()
        else:
            self.engine.set_start(*self.start)

    def set_start(self, x: int, y: int) -> None:
        self.engine.set_start(x, y)
        self.start = Position(x, y)

    def notation(self, position: Position) -> str:
        return self.engine.position_to_notation(position.x, position.y)

    def parse_notation(self, text: str) -> Position:
        return self.engine.notation_to_position(text)

    def snapshot(self) -> TourSnapshot:
        return self.engine.get_snapshot()
