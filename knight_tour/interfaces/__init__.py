"""Interfaces shared by the engine and its renderers."""

from knight_tour.interfaces.tour import ITourEngine, Position, TourSnapshot

__all__ = [
    "ITourEngine",
    "Position",
    "TourSnapshot",
]
