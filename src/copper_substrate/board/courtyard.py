"""
Courtyard derivation.

The courtyard is the placement keep-out outline of a footprint: the
component's bounding box grown by a margin on every side, drawn on the
courtyard layer as four line segments.
"""

from __future__ import annotations

import uuid as _uuid
from dataclasses import dataclass

from ..core.geometry import Rectangle, Stroke
from ..core.types import LayerType, StrokeType
from .elements import GraphicLine

DEFAULT_COURTYARD_MARGIN = 0.25
COURTYARD_LINE_WIDTH = 0.05

# Namespace for courtyard line tokens, see Courtyard.to_graphic_elements
COURTYARD_UUID_NAMESPACE = _uuid.UUID("6f1c52a4-3d0e-5b8e-9a57-0c2f3e1b7d44")


@dataclass(frozen=True)
class Courtyard:
    """Margin-expanded outline of a component on the courtyard layer.

    Attributes:
        bounds: The already expanded rectangle
        margin: Margin that was applied to the bounding box
        owner: Name of the footprint the courtyard belongs to
        layer: Always the front courtyard layer
    """

    bounds: Rectangle
    margin: float
    owner: str = ""
    layer: LayerType = LayerType.COURTYARD

    @classmethod
    def from_bounding_box(
        cls, bbox: Rectangle, margin: float = DEFAULT_COURTYARD_MARGIN, owner: str = ""
    ) -> Courtyard:
        """Expand ``bbox`` by ``margin`` on all sides.

        A negative margin is accepted and yields a smaller, possibly inverted
        rectangle.
        """
        return cls(bounds=bbox.expanded(margin), margin=margin, owner=owner)

    def edges(self) -> list[tuple[tuple[float, float], tuple[float, float]]]:
        """Perimeter as (start, end) pairs: top, right, bottom, left.

        Traced clockwise in KiCad coordinates: top edge left to right, right
        edge top to bottom, bottom edge right to left, left edge bottom to top.
        """
        b = self.bounds
        return [
            ((b.min_x, b.min_y), (b.max_x, b.min_y)),
            ((b.max_x, b.min_y), (b.max_x, b.max_y)),
            ((b.max_x, b.max_y), (b.min_x, b.max_y)),
            ((b.min_x, b.max_y), (b.min_x, b.min_y)),
        ]

    def to_graphic_elements(self) -> list[GraphicLine]:
        """Render the courtyard as exactly four solid lines.

        Each line gets its own token, derived from the owner, the edge index
        and the edge coordinates, so the same courtyard always yields the same
        tokens. Zero-area courtyards still produce four lines.
        """
        stroke = Stroke(width=COURTYARD_LINE_WIDTH, stroke_type=StrokeType.SOLID)
        lines = []
        for index, (start, end) in enumerate(self.edges()):
            lines.append(
                GraphicLine(
                    layer=self.layer,
                    stroke=stroke,
                    start=start,
                    end=end,
                    uuid=self._edge_uuid(index, start, end),
                )
            )
        return lines

    def _edge_uuid(self, index: int, start: tuple[float, float], end: tuple[float, float]) -> str:
        key = f"{self.owner}/{self.layer.value}/{index}/{start!r}/{end!r}"
        return str(_uuid.uuid5(COURTYARD_UUID_NAMESPACE, key))
