"""Pytest fixtures for copper-substrate tests."""

import pytest

from copper_substrate.board import (
    BoardComposableObject,
    FpText,
    GraphicCircle,
    GraphicLine,
    GraphicRectangle,
    Model3D,
    PadDescriptor,
)
from copper_substrate.core import (
    FontSettings,
    FpTextType,
    FunctionalType,
    LayerType,
    PadShape,
    PadType,
    Rectangle,
    Stroke,
)


class SMTResistor0805(BoardComposableObject):
    """Two-pad 0805 resistor with fixed identity tokens."""

    def __init__(self, value="10k", description="Resistor SMD 0805", tags="resistor 0805"):
        self.value = value
        self._description = description
        self._tags = tags
        self._pads = [
            PadDescriptor(
                number=number,
                pad_type=PadType.SMD,
                shape=PadShape.ROUNDRECT,
                position=(x, 0.0),
                size=(1.0, 1.45),
                layers=("F.Cu", "F.Mask", "F.Paste"),
                roundrect_ratio=0.25,
                uuid=f"pad-{number}",
            )
            for number, x in (("1", -0.95), ("2", 0.95))
        ]
        self._texts = [
            FpText(
                text_type=FpTextType.REFERENCE,
                text="REF**",
                position=(0.0, -1.16),
                layer="F.SilkS",
                uuid="text-ref",
            ),
            FpText(
                text_type=FpTextType.VALUE,
                text="R_0805_2012Metric",
                position=(0.0, 1.16),
                layer="F.Fab",
                uuid="text-value",
            ),
            FpText(
                text_type=FpTextType.USER,
                text="${REFERENCE}",
                position=(0.0, 0.0),
                layer="F.Fab",
                font=FontSettings(size=(0.25, 0.25), thickness=0.04),
                uuid="text-user",
            ),
        ]

    def is_smt(self):
        return True

    def is_electrical(self):
        return True

    def is_passive(self):
        return True

    def terminal_count(self):
        return 2

    def functional_type(self):
        return FunctionalType.resistor(self.value)

    def footprint_name(self):
        return "R_0805_2012Metric"

    def library_name(self):
        return "Resistor_SMD"

    def bounding_box(self):
        return Rectangle(-1.0, -0.625, 1.0, 0.625)

    def pad_descriptors(self):
        return list(self._pads)

    def description(self):
        return self._description

    def tags(self):
        return self._tags

    def fp_text_elements(self):
        return list(self._texts)

    def graphic_elements(self):
        return []

    def model_3d(self):
        return Model3D(path="${KICAD9_3DMODEL_DIR}/Resistor_SMD.3dshapes/R_0805_2012Metric.wrl")


class ThroughHoleJumper(BoardComposableObject):
    """Two through-hole pads, a fab outline, and no model."""

    def __init__(self):
        self._pads = [
            PadDescriptor(
                number=number,
                pad_type=PadType.THROUGH_HOLE,
                shape=PadShape.CIRCLE,
                position=(x, 0.0),
                size=(1.6, 1.6),
                drill_size=0.8,
                layers=("*.Cu", "*.Mask"),
                uuid=f"tht-{number}",
            )
            for number, x in (("1", 0.0), ("2", 2.54))
        ]
        self._graphics = [
            GraphicLine(
                layer=LayerType.FABRICATION,
                stroke=Stroke(width=0.1),
                start=(-1.0, -1.0),
                end=(3.54, -1.0),
                uuid="fab-top",
            ),
            GraphicRectangle(
                layer=LayerType.SILKSCREEN,
                stroke=Stroke(width=0.12),
                bounds=Rectangle(-1.0, -1.0, 3.54, 1.0),
                uuid="silk-rect",
            ),
            GraphicCircle(
                layer=LayerType.SILKSCREEN,
                stroke=Stroke(width=0.12),
                center=(0.0, 0.0),
                radius=1.0,
                uuid="silk-circle",
            ),
        ]

    def is_smt(self):
        return False

    def is_electrical(self):
        return True

    def terminal_count(self):
        return 2

    def functional_type(self):
        return FunctionalType.resistor("0R")

    def footprint_name(self):
        return "Jumper_THT_P2.54mm"

    def library_name(self):
        return "Jumper"

    def bounding_box(self):
        return Rectangle(-1.0, -1.0, 3.54, 1.0)

    def pad_descriptors(self):
        return list(self._pads)

    def description(self):
        return None

    def tags(self):
        return None

    def fp_text_elements(self):
        return []

    def graphic_elements(self):
        return list(self._graphics)

    def model_3d(self):
        return None


@pytest.fixture
def resistor():
    """0805 resistor descriptor with fixed identity tokens."""
    return SMTResistor0805()


@pytest.fixture
def jumper():
    """Through-hole jumper descriptor with mixed graphic variants."""
    return ThroughHoleJumper()


@pytest.fixture
def make_resistor():
    """Factory for 0805 resistors with custom description, tags or value."""
    return SMTResistor0805
