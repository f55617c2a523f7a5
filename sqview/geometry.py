"""Screen rectangles used to lay out popups and hit-test mouse clicks."""

from __future__ import annotations

from dataclasses import dataclass

_MAX_COORD = 0xFFFF


def _sat_add(value: int, amount: int) -> int:
    return min(value + amount, _MAX_COORD)


def _sat_sub(value: int, amount: int) -> int:
    return max(value - amount, 0)


@dataclass(frozen=True)
class Rect:
    """A cell-aligned rectangle on the terminal screen."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def inner(self) -> Rect:
        """The area left inside a one-cell border."""
        return Rect(
            _sat_add(self.x, 1),
            _sat_add(self.y, 1),
            _sat_sub(self.width, 2),
            _sat_sub(self.height, 2),
        )

    def shadow(self) -> Rect:
        """The drop-shadow area, offset one cell down and right."""
        return Rect(
            _sat_add(self.x, 1),
            _sat_add(self.y, 1),
            _sat_sub(self.width, 1),
            _sat_sub(self.height, 1),
        )

    def contains(self, x: int, y: int) -> bool:
        """Whether the cell at (x, y) lies inside the rectangle."""
        return self.x <= x < self.right() and self.y <= y < self.bottom()

    def right(self) -> int:
        """The first column past the rectangle."""
        return self.x + self.width

    def bottom(self) -> int:
        """The first row past the rectangle."""
        return self.y + self.height