"""Geometry primitives shared by footprint elements.

These are pure values with no behaviour beyond construction and a few
read-only helpers. Coordinates are in millimetres, component-local, with
KiCad's orientation (Y grows downwards).
"""

from __future__ import annotations

from dataclasses import dataclass

from .types import StrokeType

Point = tuple[float, float]
Vector3 = tuple[float, float, float]


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned rectangle.

    ``min_x <= max_x`` and ``min_y <= max_y`` are expected but not enforced;
    an inverted rectangle is kept exactly as given.
    """

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def center(self) -> Point:
        return ((self.min_x + self.max_x) / 2, (self.min_y + self.max_y) / 2)

    @property
    def is_inverted(self) -> bool:
        """True if either axis has min greater than max."""
        return self.min_x > self.max_x or self.min_y > self.max_y

    @property
    def is_degenerate(self) -> bool:
        """True if the rectangle has no positive area."""
        return self.width <= 0 or self.height <= 0

    def expanded(self, margin: float) -> Rectangle:
        """Return a copy grown by ``margin`` on every side.

        A negative margin shrinks the rectangle and may invert it.
        """
        return Rectangle(
            min_x=self.min_x - margin,
            min_y=self.min_y - margin,
            max_x=self.max_x + margin,
            max_y=self.max_y + margin,
        )


@dataclass(frozen=True)
class FontSettings:
    """Text font: glyph size (width, height) and stroke thickness."""

    size: Point = (1.0, 1.0)
    thickness: float = 0.15


@dataclass(frozen=True)
class Stroke:
    """Graphic stroke: line width and style."""

    width: float
    stroke_type: StrokeType = StrokeType.SOLID
