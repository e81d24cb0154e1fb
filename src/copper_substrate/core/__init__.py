"""Core value objects: geometry primitives and taxonomy enums."""

from .classification import (
    BGAPackage,
    FunctionalKind,
    FunctionalType,
    Package,
    PackageFamily,
    QFPPackage,
    SMTPackage,
    ThroughHolePackage,
)
from .geometry import FontSettings, Point, Rectangle, Stroke, Vector3
from .types import (
    FpTextType,
    LayerType,
    PadShape,
    PadType,
    Severity,
    StrokeType,
    TentingType,
)

__all__ = [
    # Geometry
    "Point",
    "Vector3",
    "Rectangle",
    "FontSettings",
    "Stroke",
    # Taxonomy
    "LayerType",
    "PadType",
    "PadShape",
    "TentingType",
    "FpTextType",
    "StrokeType",
    "Severity",
    # Classification
    "FunctionalKind",
    "FunctionalType",
    "PackageFamily",
    "Package",
    "SMTPackage",
    "ThroughHolePackage",
    "BGAPackage",
    "QFPPackage",
]
