"""Board state: per-square visit markers for a single tour."""

from __future__ import annotations


class BoardState:
    """Fixed-size square grid of visit markers.

    A cell holds 0 while unvisited and ``k`` once the knight landed there on
    move ``k``. Cells are addressed as ``(row, col)``; callers that think in
    ``(x, y)`` positions must pass ``(y, x)``.

    ``get`` and ``set`` do not check bounds. Callers must test
    ``is_within_bounds`` first; the engine's degree loop relies on that
    contract to stay a plain list lookup.
    """

    def __init__(self, size: int):
        if size < 1:
            raise ValueError("Board size must be positive")
        self._size = size
        self._grid: list[list[int]] = [[0] * size for _ in range(size)]

    @property
    def size(self) -> int:
        return self._size

    def is_within_bounds(self, x: int, y: int) -> bool:
        """Return True if column ``x`` and row ``y`` are on the board."""
        return 0 <= x < self._size and 0 <= y < self._size

    def get(self, row: int, col: int) -> int:
        """Return the marker at ``(row, col)``. Bounds are the caller's job."""
        return self._grid[row][col]

    def set(self, row: int, col: int, value: int) -> None:
        """Overwrite the marker at ``(row, col)`` without validation."""
        self._grid[row][col] = value

    def reset(self) -> None:
        for row in self._grid:
            for col in range(self._size):
                row[col] = 0

    def cells(self) -> tuple[tuple[int, ...], ...]:
        """Immutable copy of the grid, row-major."""
        return tuple(tuple(row) for row in self._grid)

    def visited_count(self) -> int:
        return sum(1 for row in self._grid for value in row if value)
