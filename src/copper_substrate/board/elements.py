"""
Footprint content elements: pads, text, graphics and 3-D model reference.

Each element carries an identity token (``uuid``) that KiCad writes as the
element's ``tstamp``. A fresh random token is generated for every new
instance unless one is passed in, so tokens are stable for the lifetime of an
instance but not across runs. Pass explicit tokens to get reproducible files.
"""

from __future__ import annotations

import uuid as _uuid
from dataclasses import dataclass, field

from ..core.geometry import FontSettings, Point, Rectangle, Stroke, Vector3
from ..core.types import FpTextType, LayerType, PadShape, PadType, TentingType


def new_uuid() -> str:
    """Generate a fresh identity token."""
    return str(_uuid.uuid4())


@dataclass(frozen=True)
class TentingSettings:
    """Solder mask tenting of a pad's hole, front and back."""

    front: TentingType = TentingType.NONE
    back: TentingType = TentingType.NONE


@dataclass(frozen=True)
class PadDescriptor:
    """A footprint pad (SMD or through-hole).

    ``roundrect_ratio`` should be set exactly when ``shape`` is ROUNDRECT, and
    ``drill_size`` only for drilled pads. Neither is enforced here; see
    ``DescriptorValidator`` for opt-in checks.
    """

    number: str
    pad_type: PadType
    shape: PadShape
    position: Point
    size: Point
    layers: tuple[str, ...]
    drill_size: float | None = None
    roundrect_ratio: float | None = None
    tenting: TentingSettings = field(default_factory=TentingSettings)
    uuid: str = field(default_factory=new_uuid)


@dataclass(frozen=True)
class FpText:
    """A footprint text item (reference designator, value or free text)."""

    text_type: FpTextType
    text: str
    position: Point
    layer: str
    rotation: float | None = None
    font: FontSettings = field(default_factory=FontSettings)
    uuid: str = field(default_factory=new_uuid)


@dataclass(frozen=True)
class GraphicElement:
    """Base for footprint graphics drawn on a single layer."""

    layer: LayerType
    stroke: Stroke
    uuid: str = field(default_factory=new_uuid, kw_only=True)


@dataclass(frozen=True)
class GraphicLine(GraphicElement):
    """A straight line segment."""

    start: Point = (0.0, 0.0)
    end: Point = (0.0, 0.0)


@dataclass(frozen=True)
class GraphicRectangle(GraphicElement):
    """An axis-aligned rectangle outline."""

    bounds: Rectangle = Rectangle(0.0, 0.0, 0.0, 0.0)


@dataclass(frozen=True)
class GraphicCircle(GraphicElement):
    """A circle given by center and radius."""

    center: Point = (0.0, 0.0)
    radius: float = 0.0


@dataclass(frozen=True)
class Model3D:
    """Reference to a 3-D model file with its placement transform."""

    path: str
    offset: Vector3 = (0.0, 0.0, 0.0)
    scale: Vector3 = (1.0, 1.0, 1.0)
    rotation: Vector3 = (0.0, 0.0, 0.0)
