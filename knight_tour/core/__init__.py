"""Core modules for the tour engine.

- board: BoardState, the grid of visit markers
- tour: TourEngine, Warnsdorff move selection and tour lifecycle
- exceptions: TourError hierarchy
"""

from knight_tour.core.board import BoardState
from knight_tour.core.exceptions import (
    ConfigurationError,
    InvalidPositionError,
    TourError,
)
from knight_tour.core.tour import TourEngine

__all__ = [
    "BoardState",
    "TourEngine",
    "TourError",
    "ConfigurationError",
    "InvalidPositionError",
]
