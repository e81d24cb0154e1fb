"""Component descriptor interface, footprint elements and courtyard derivation."""

from .courtyard import COURTYARD_LINE_WIDTH, DEFAULT_COURTYARD_MARGIN, Courtyard
from .elements import (
    FpText,
    GraphicCircle,
    GraphicElement,
    GraphicLine,
    GraphicRectangle,
    Model3D,
    PadDescriptor,
    TentingSettings,
    new_uuid,
)
from .interface import BoardComposableObject
from .validator import (
    DescriptorIssue,
    DescriptorValidator,
    IssueType,
    validate_component,
)

__all__ = [
    # Interface
    "BoardComposableObject",
    # Elements
    "PadDescriptor",
    "TentingSettings",
    "FpText",
    "GraphicElement",
    "GraphicLine",
    "GraphicRectangle",
    "GraphicCircle",
    "Model3D",
    "new_uuid",
    # Courtyard
    "Courtyard",
    "DEFAULT_COURTYARD_MARGIN",
    "COURTYARD_LINE_WIDTH",
    # Validation
    "DescriptorValidator",
    "DescriptorIssue",
    "IssueType",
    "validate_component",
]
