"""Knight's Tour engine.

Walks a knight across a square board with Warnsdorff's heuristic: every
move goes to the unvisited square with the fewest onward moves.

Architecture:
- core: board state and the tour engine (no UI dependencies)
- interfaces: Position, TourSnapshot and the engine contract
- utils: constants and YAML configuration

Getting started:
    from knight_tour import TourEngine

    tour = TourEngine(8)
    while tour.advance():
        pass
    print(tour.move_count, tour.is_complete)
"""

from knight_tour.core.board import BoardState
from knight_tour.core.exceptions import (
    ConfigurationError,
    InvalidPositionError,
    TourError,
)
from knight_tour.core.tour import TourEngine
from knight_tour.interfaces.tour import ITourEngine, Position, TourSnapshot

__all__ = [
    # Core
    "BoardState",
    "TourEngine",
    # Interfaces
    "ITourEngine",
    "Position",
    "TourSnapshot",
    # Errors
    "TourError",
    "ConfigurationError",
    "InvalidPositionError",
]
