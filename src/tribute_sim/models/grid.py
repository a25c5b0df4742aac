"""Integer grid coordinates."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Coord(BaseModel):
    """An immutable integer (x, y) position on the arena grid."""

    model_config = ConfigDict(frozen=True, strict=True)

    x: int = 0
    y: int = 0

    def __add__(self, other: Coord) -> Coord:
        if not isinstance(other, Coord):
            return NotImplemented
        return Coord(x=self.x + other.x, y=self.y + other.y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"

    def clamp(self, width: int, height: int) -> Coord:
        """Clamp each axis independently to ``[0, width] x [0, height]``.

        Clamping a point that is already in bounds returns an equal point.
        """
        return Coord(
            x=min(max(self.x, 0), width),
            y=min(max(self.y, 0), height),
        )

    def in_bounds(self, width: int, height: int) -> bool:
        return 0 <= self.x <= width and 0 <= self.y <= height

    def chebyshev_distance(self, other: Coord) -> int:
        """Number of king moves between two cells."""
        return max(abs(self.x - other.x), abs(self.y - other.y))

    def within(self, other: Coord, radius: int) -> bool:
        return self.chebyshev_distance(other) <= radius


def grid_center(width: int, height: int) -> Coord:
    """Starting cell for every tribute."""
    return Coord(x=width // 2, y=height // 2)


__all__ = ["Coord", "grid_center"]
