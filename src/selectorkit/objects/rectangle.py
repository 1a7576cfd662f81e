"""Rectangle value object."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rectangle:
    """A width x height rectangle."""

    width: float
    height: float

    @property
    def area(self) -> float:
        """Return width * height."""
        return self.width * self.height
