"""Tour controller (Presenter-ish, framework-agnostic)."""

from __future__ import annotations

import logging
from enum import Enum, auto
from typing import Callable, Protocol

from knight_tour.interfaces.tour import Position, TourSnapshot
from knight_tour_gui.backend import TourBackend

logger = logging.getLogger(__name__)


class TourState(Enum):
    PAUSED = auto()
    PLAYING = auto()
    FINISHED = auto()


class MoveSound(Protocol):
    """Anything that can react to a successful move."""

    def play_move(self) -> None:
        ...


class TourController:
    """Coordinator between the tour backend and the window.

    Holds the status line and the move history text, and notifies the
    move sound and listeners after each state change. The engine never
    calls back into the UI.
    """

    def __init__(
        self,
        backend: TourBackend,
        sound: MoveSound | None = None,
    ):
        self._backend = backend
        self._sound = sound
        self._listeners: list[Callable[[], None]] = []
        self._state = TourState.PAUSED
        self._status = ""
        self._history_lines: list[str] = []
        self._restart_text()

    @property
    def state(self) -> TourState:
        return self._state

    @property
    def board_size(self) -> int:
        return self._backend.board_size

    @property
    def status_text(self) -> str:
        return self._status

    @property
    def history_lines(self) -> list[str]:
        return list(self._history_lines)

    def subscribe(self, listener: Callable[[], None]) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def snapshot(self) -> TourSnapshot:
        return self._backend.snapshot()

    def notation(self, position: Position) -> str:
        return self._backend.notation(position)

    def parse_square(self, text: str) -> Position:
        return self._backend.parse_notation(text)

    def set_playing(self, playing: bool) -> None:
        if self._state == TourState.FINISHED:
            return
        self._state = TourState.PLAYING if playing else TourState.PAUSED
        self._notify()

    def next_move(self) -> bool:
        """Advance one square. Return False once the tour has ended."""
        if self._state == TourState.FINISHED:
            return False

        if not self._backend.advance():
            snap = self._backend.snapshot()
            if snap.complete:
                self._status = f"Tour complete! All {snap.move_count} squares visited"
            else:
                self._status = (
                    f"No more valid moves! Tour ended at move {snap.move_count}"
                )
            self._state = TourState.FINISHED
            logger.info(self._status)
            self._notify()
            return False

        if self._sound is not None:
            self._sound.play_move()

        snap = self._backend.snapshot()
        position = self._backend.notation(snap.current)
        self._status = f"Knight's Tour: Move {snap.move_count}"
        self._history_lines.append(f"Move {snap.move_count}: Knight moved to {position}")
        logger.info(f"Move count: {snap.move_count}. Knight moved to : {position}")
        self._notify()
        return True

    def reset(self) -> None:
        self._backend.reset()
        self._state = TourState.PAUSED
        self._restart_text()
        self._notify()

    def set_start(self, x: int, y: int) -> None:
        """Reseed the tour at ``(x, y)``; InvalidPositionError propagates."""
        self._backend.set_start(x, y)
        self._state = TourState.PAUSED
        self._restart_text()
        self._notify()

    def _restart_text(self) -> None:
        snap = self._backend.snapshot()
        position = self._backend.notation(snap.current)
        self._status = f"Knight's Tour: Move {snap.move_count}"
        self._history_lines = [f"Move 1: Knight at {position}"]

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener()
