"""Taxonomy enums for footprint content.

Every enum here is a closed set with a fixed mapping to the keyword or layer
name the KiCad footprint format expects. The string value of each member *is*
that keyword, so ``str(member)`` can be written straight into a document.

Types:
- LayerType: Board layers footprint graphics are drawn on
- PadType: Pad mounting technology (smd, thru_hole, np_thru_hole)
- PadShape: Copper outline of a pad
- TentingType: Solder mask coverage of a pad's hole
- FpTextType: Kind of footprint text (reference, value, user)
- StrokeType: Line style of graphic strokes
- Severity: Severity of descriptor validation issues
"""

from __future__ import annotations

from enum import Enum


class _KeywordEnum(str, Enum):
    """Shared lookup behaviour for keyword-valued enums."""

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_string(cls, keyword: str):
        """Look up a member by its format keyword.

        Raises:
            ValueError: If the keyword doesn't match any member.
        """
        for member in cls:
            if member.value == keyword:
                return member
        valid = ", ".join(m.value for m in cls)
        raise ValueError(f"Unknown {cls.__name__} keyword: {keyword!r} (expected one of: {valid})")


class LayerType(_KeywordEnum):
    """Front-side layers a footprint graphic can be placed on.

    Values match KiCad's layer naming convention.
    """

    SILKSCREEN = "F.SilkS"  # visible markings
    COURTYARD = "F.CrtYd"  # component keep-out boundary
    FABRICATION = "F.Fab"  # manufacturing reference
    COPPER = "F.Cu"  # electrical layer
    MASK = "F.Mask"  # solder mask
    PASTE = "F.Paste"  # solder paste

    @property
    def kicad_name(self) -> str:
        """The KiCad layer name for this layer."""
        return self.value

    @property
    def is_copper(self) -> bool:
        """Check if this is a copper layer."""
        return self.value.endswith(".Cu")

    @property
    def is_technical(self) -> bool:
        """Check if this layer only carries mask or paste apertures."""
        return self in (LayerType.MASK, LayerType.PASTE)


class PadType(_KeywordEnum):
    """Pad mounting technology."""

    SMD = "smd"
    THROUGH_HOLE = "thru_hole"
    NPTH = "np_thru_hole"  # non-plated through hole

    @property
    def is_drilled(self) -> bool:
        return self is not PadType.SMD


class PadShape(_KeywordEnum):
    """Pad copper outline."""

    CIRCLE = "circle"
    RECT = "rect"
    OVAL = "oval"
    ROUNDRECT = "roundrect"


class TentingType(_KeywordEnum):
    """Whether solder mask covers a pad's hole."""

    NONE = "none"
    FULL = "full"
    PARTIAL = "partial"


class FpTextType(_KeywordEnum):
    """Footprint text kind."""

    REFERENCE = "reference"
    VALUE = "value"
    USER = "user"


class StrokeType(_KeywordEnum):
    """Graphic stroke line style."""

    SOLID = "solid"
    DASHED = "dash"
    DOTTED = "dot"


class Severity(_KeywordEnum):
    """Validation severity levels."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
