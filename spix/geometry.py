"""Basic geometric value types used to address positions on items."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Size:
    """Width and height of an item."""

    width: float = 0.0
    height: float = 0.0


@dataclass(frozen=True)
class Point:
    """A point in item or screen coordinates."""

    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and its size."""

    top_left: Point = field(default_factory=Point)
    size: Size = field(default_factory=Size)

    @classmethod
    def from_xywh(cls, x: float, y: float, width: float, height: float) -> Rect:
        """Build a rectangle from its corner coordinates and dimensions."""
        return cls(Point(x, y), Size(width, height))