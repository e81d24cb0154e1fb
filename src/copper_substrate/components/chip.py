"""
Chip component footprints.

Concrete ``BoardComposableObject`` implementations for 2-terminal chip
resistors, capacitors and inductors, following KiCad library naming
(``R_0805_2012Metric``). All footprint content is built once at construction,
so identity tokens stay stable for the lifetime of the instance.
"""

from __future__ import annotations

from ..board.courtyard import DEFAULT_COURTYARD_MARGIN
from ..board.elements import (
    FpText,
    GraphicElement,
    GraphicLine,
    Model3D,
    PadDescriptor,
)
from ..board.interface import BoardComposableObject
from ..core.classification import FunctionalKind, FunctionalType, SMTPackage
from ..core.geometry import FontSettings, Rectangle, Stroke
from ..core.types import FpTextType, LayerType, PadShape, PadType
from ..exceptions import ComponentError
from .standards import CHIP_ROUNDRECT_RATIO, CHIP_SIZES

# Per-kind naming: (name prefix, library, description noun)
CHIP_KINDS = {
    FunctionalKind.RESISTOR: ("R", "Resistor_SMD", "Resistor"),
    FunctionalKind.CAPACITOR: ("C", "Capacitor_SMD", "Capacitor"),
    FunctionalKind.INDUCTOR: ("L", "Inductor_SMD", "Inductor"),
}

SMD_LAYERS = ("F.Cu", "F.Mask", "F.Paste")
MODEL_DIR = "${KICAD9_3DMODEL_DIR}"

SILK_WIDTH = 0.12
FAB_WIDTH = 0.1
SILK_PAD_CLEARANCE = 0.2  # silk line edge to pad edge
SILK_BODY_OFFSET = 0.11
TEXT_OFFSET = 0.435  # reference/value text distance beyond the body or pads

REFERENCE_FONT = FontSettings(size=(1.0, 1.0), thickness=0.15)
FAB_REFERENCE_FONT = FontSettings(size=(0.25, 0.25), thickness=0.04)


class ChipComponent(BoardComposableObject):
    """A 2-terminal chip passive in a standard imperial size.

    Example::

        >>> r = ChipComponent("0805", FunctionalKind.RESISTOR, value="10k")
        >>> r.footprint_name()
        'R_0805_2012Metric'
    """

    def __init__(
        self,
        size: str,
        kind: FunctionalKind = FunctionalKind.RESISTOR,
        value: str = "",
        name: str | None = None,
        courtyard_margin: float | None = None,
    ):
        if size not in CHIP_SIZES:
            valid_sizes = ", ".join(sorted(CHIP_SIZES.keys()))
            raise ComponentError(
                f"Unknown chip size: {size}",
                context={"size": size, "available": valid_sizes},
                suggestions=["Use one of the standard imperial chip sizes"],
            )
        if kind not in CHIP_KINDS:
            raise ComponentError(
                f"Chip footprints are not available for {kind.value}",
                context={"kind": kind.value},
                suggestions=["Use resistor, capacitor or inductor"],
            )

        self.size = size
        self.kind = kind
        self.value = value
        self._std = CHIP_SIZES[size]

        prefix, library, noun = CHIP_KINDS[kind]
        metric = self._std["metric"]
        self._name = name or f"{prefix}_{size}_{metric}Metric"
        self._library = library
        self._noun = noun

        if courtyard_margin is None:
            courtyard_margin = self._std.get("courtyard_margin", DEFAULT_COURTYARD_MARGIN)
        self._courtyard_margin = courtyard_margin

        self._pads = self._build_pads()
        self._texts = self._build_texts()
        self._graphics = self._build_graphics()

    # Classification

    def is_smt(self) -> bool:
        return True

    def is_electrical(self) -> bool:
        return True

    def is_passive(self) -> bool:
        return True

    def terminal_count(self) -> int:
        return 2

    # Identity

    def functional_type(self) -> FunctionalType:
        return FunctionalType(self.kind, self.value)

    def footprint_name(self) -> str:
        return self._name

    def library_name(self) -> str:
        return self._library

    def package(self) -> SMTPackage:
        return SMTPackage(part=self.size, size=(self._std["length"], self._std["width"]))

    # Geometry

    def bounding_box(self) -> Rectangle:
        half_l = self._std["length"] / 2
        half_w = self._std["width"] / 2
        return Rectangle(-half_l, -half_w, half_l, half_w)

    def courtyard_margin(self) -> float:
        return self._courtyard_margin

    # Footprint content

    def pad_descriptors(self) -> list[PadDescriptor]:
        return list(self._pads)

    def description(self) -> str | None:
        metric = self._std["metric"]
        return (
            f"{self._noun} SMD {self.size} ({metric} Metric), "
            "square (rectangular) end terminal, IPC-7351 nominal"
        )

    def tags(self) -> str | None:
        return f"{self._noun.lower()} {self.size}"

    def fp_text_elements(self) -> list[FpText]:
        return list(self._texts)

    def graphic_elements(self) -> list[GraphicElement]:
        return list(self._graphics)

    def model_3d(self) -> Model3D | None:
        return Model3D(path=f"{MODEL_DIR}/{self._library}.3dshapes/{self._name}.wrl")

    def _build_pads(self) -> list[PadDescriptor]:
        pad_w = self._std["pad_width"]
        pad_h = self._std["pad_height"]
        pad_x = (self._std["pad_gap"] + pad_w) / 2
        return [
            PadDescriptor(
                number=number,
                pad_type=PadType.SMD,
                shape=PadShape.ROUNDRECT,
                position=(x, 0.0),
                size=(pad_w, pad_h),
                layers=SMD_LAYERS,
                roundrect_ratio=CHIP_ROUNDRECT_RATIO,
            )
            for number, x in (("1", -pad_x), ("2", pad_x))
        ]

    def _build_texts(self) -> list[FpText]:
        text_y = max(self._std["width"], self._std["pad_height"]) / 2 + TEXT_OFFSET
        return [
            FpText(
                text_type=FpTextType.REFERENCE,
                text="REF**",
                position=(0.0, -text_y),
                layer=LayerType.SILKSCREEN.kicad_name,
                font=REFERENCE_FONT,
            ),
            FpText(
                text_type=FpTextType.VALUE,
                text=self._name,
                position=(0.0, text_y),
                layer=LayerType.FABRICATION.kicad_name,
                font=REFERENCE_FONT,
            ),
            FpText(
                text_type=FpTextType.USER,
                text="${REFERENCE}",
                position=(0.0, 0.0),
                layer=LayerType.FABRICATION.kicad_name,
                font=FAB_REFERENCE_FONT,
            ),
        ]

    def _build_graphics(self) -> list[GraphicElement]:
        graphics: list[GraphicElement] = []

        # Silkscreen marks above and below the body, only if they fit between the pads
        silk_x = self._std["pad_gap"] / 2 - SILK_PAD_CLEARANCE + SILK_WIDTH / 2
        silk_y = self._std["width"] / 2 + SILK_BODY_OFFSET
        if silk_x > 0:
            silk = Stroke(width=SILK_WIDTH)
            for y in (-silk_y, silk_y):
                graphics.append(
                    GraphicLine(
                        layer=LayerType.SILKSCREEN, stroke=silk, start=(-silk_x, y), end=(silk_x, y)
                    )
                )

        # Fab layer body outline
        body = self.bounding_box()
        fab = Stroke(width=FAB_WIDTH)
        corners = [
            (body.min_x, body.min_y),
            (body.max_x, body.min_y),
            (body.max_x, body.max_y),
            (body.min_x, body.max_y),
        ]
        for start, end in zip(corners, corners[1:] + corners[:1]):
            graphics.append(
                GraphicLine(layer=LayerType.FABRICATION, stroke=fab, start=start, end=end)
            )
        return graphics


def create_chip(
    size: str,
    kind: FunctionalKind = FunctionalKind.RESISTOR,
    value: str = "",
    name: str | None = None,
) -> ChipComponent:
    """
    Create a chip component (resistor, capacitor, inductor).

    Args:
        size: Imperial size code ("0201", "0402", "0603", "0805", "1206", etc.)
        kind: Functional kind, one of resistor, capacitor or inductor
        value: Part value carried in the functional type ("10k", "100nF")
        name: Custom footprint name (auto-generated if not specified)

    Returns:
        ChipComponent ready for export

    Example:
        >>> create_chip("0402", FunctionalKind.CAPACITOR).footprint_name()
        'C_0402_1005Metric'
    """
    return ChipComponent(size, kind, value=value, name=name)


def create_chip_resistor(size: str, value: str = "") -> ChipComponent:
    return ChipComponent(size, FunctionalKind.RESISTOR, value=value)


def create_chip_capacitor(size: str, value: str = "") -> ChipComponent:
    return ChipComponent(size, FunctionalKind.CAPACITOR, value=value)
