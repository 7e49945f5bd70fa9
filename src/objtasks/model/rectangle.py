"""Rectangle value type."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rectangle:
    """An axis-aligned rectangle described by its side lengths."""

    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height


def make_rectangle(width: float, height: float) -> Rectangle:
    """Factory kept for callers that prefer a function to the class."""
    return Rectangle(width=width, height=height)
