from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinate:
    x: int
    y: int

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


def exceeds_tolerance(previous: Coordinate, current: Coordinate, tolerance: int) -> bool:
    """True when the pointer moved more than `tolerance` on either axis."""
    return abs(current.x - previous.x) > tolerance or abs(current.y - previous.y) > tolerance
