"""
KiCad S-Expression Builders

Convenience functions for the small nodes footprint elements are made of.
These builders produce SExp nodes that serialize to valid KiCad footprint
syntax.

Usage:
    from copper_substrate.sexp.builders import at, stroke, layer, tstamp

    line = SExp.block(
        "fp_line",
        SExp.list("start", 0, 0),
        SExp.list("end", 1, 0),
        stroke(0.05),
        layer("F.CrtYd"),
        tstamp(token),
    )
"""

from __future__ import annotations

from typing import Iterable, Optional

from ..core.types import StrokeType
from .node import SExp


def at(x: float, y: float, rotation: Optional[float] = None) -> SExp:
    """Build an (at X Y [ROTATION]) position node.

    The rotation field is written only when given, including an explicit 0.
    """
    if rotation is None:
        return SExp.list("at", x, y)
    return SExp.list("at", x, y, rotation)


def xy(x: float, y: float, name: str = "xy") -> SExp:
    """Build an (xy X Y) coordinate node, or (start X Y) etc. via ``name``."""
    return SExp.list(name, x, y)


def xyz(vector: tuple[float, float, float]) -> SExp:
    """Build an (xyz X Y Z) vector node."""
    return SExp.list("xyz", *vector)


def layer(name: str) -> SExp:
    """Build a (layer "NAME") node."""
    return SExp.list("layer", name)


def layers(names: Iterable[str]) -> SExp:
    """Build a (layers "A" "B" ...) node, keeping the given order."""
    return SExp.list("layers", *names)


def stroke(width: float, stroke_type: StrokeType = StrokeType.SOLID) -> SExp:
    """Build a multi-line (stroke (width W) (type T)) block."""
    return SExp.block("stroke", SExp.list("width", width), SExp.list("type", stroke_type))


def font(size: tuple[float, float], thickness: float) -> SExp:
    """Build a (font (size W H) (thickness T)) node."""
    return SExp.list("font", SExp.list("size", *size), SExp.list("thickness", thickness))


def effects(size: tuple[float, float], thickness: float) -> SExp:
    """Build an (effects (font ...)) node."""
    return SExp.list("effects", font(size, thickness))


def tstamp(token: str) -> SExp:
    """Build a (tstamp "UUID") node."""
    return SExp.list("tstamp", token)
