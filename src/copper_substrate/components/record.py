"""Data-driven component records.

``RecordComponent`` is a flat record implementing ``BoardComposableObject``
directly from stored fields. It can be built in code or from plain data (a
dict, or YAML text) using the same keywords the footprint format uses::

    name: R_0805_2012Metric
    library: Resistor_SMD
    functional_type: {kind: resistor, part: 10k}
    bounding_box: [-1.0, -0.625, 1.0, 0.625]
    tags: resistor 0805
    pads:
      - {number: "1", type: smd, shape: roundrect, at: [-0.95, 0], size: [1.0, 1.45],
         layers: [F.Cu, F.Mask, F.Paste], roundrect_ratio: 0.25}
    texts:
      - {type: reference, text: "REF**", at: [0, -1.16], layer: F.SilkS}
    graphics:
      - {kind: line, layer: F.Fab, start: [-1, -0.625], end: [1, -0.625],
         stroke: {width: 0.1, type: solid}}
    model: {path: "${KICAD9_3DMODEL_DIR}/Resistor_SMD.3dshapes/R_0805_2012Metric.wrl"}

Elements without a ``uuid`` key get a fresh token when the record is built.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable

import yaml

from ..board.courtyard import DEFAULT_COURTYARD_MARGIN
from ..board.elements import (
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
from ..board.interface import BoardComposableObject
from ..core.classification import FunctionalKind, FunctionalType
from ..core.geometry import FontSettings, Rectangle, Stroke
from ..core.types import FpTextType, LayerType, PadShape, PadType, StrokeType, TentingType
from ..exceptions import ComponentError

logger = logging.getLogger(__name__)

RECORD_KEYS = {
    "name",
    "library",
    "functional_type",
    "bounding_box",
    "pads",
    "texts",
    "graphics",
    "description",
    "tags",
    "model",
    "courtyard_margin",
    "electrical",
}


@dataclass
class RecordComponent(BoardComposableObject):
    """A component whose footprint content is stored as plain fields."""

    name: str
    library: str
    functional: FunctionalType
    bbox: Rectangle
    pads: list[PadDescriptor] = field(default_factory=list)
    texts: list[FpText] = field(default_factory=list)
    graphics: list[GraphicElement] = field(default_factory=list)
    descr: str | None = None
    keywords: str | None = None
    model: Model3D | None = None
    margin: float = DEFAULT_COURTYARD_MARGIN
    electrical: bool = True

    def is_smt(self) -> bool:
        return any(pad.pad_type is PadType.SMD for pad in self.pads)

    def is_electrical(self) -> bool:
        return self.electrical

    def is_passive(self) -> bool:
        return self.functional.kind.is_passive

    def terminal_count(self) -> int:
        return len({pad.number for pad in self.pads if pad.pad_type is not PadType.NPTH})

    def functional_type(self) -> FunctionalType:
        return self.functional

    def footprint_name(self) -> str:
        return self.name

    def library_name(self) -> str:
        return self.library

    def bounding_box(self) -> Rectangle:
        return self.bbox

    def courtyard_margin(self) -> float:
        return self.margin

    def pad_descriptors(self) -> list[PadDescriptor]:
        return list(self.pads)

    def description(self) -> str | None:
        return self.descr

    def tags(self) -> str | None:
        return self.keywords

    def fp_text_elements(self) -> list[FpText]:
        return list(self.texts)

    def graphic_elements(self) -> list[GraphicElement]:
        return list(self.graphics)

    def model_3d(self) -> Model3D | None:
        return self.model

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RecordComponent:
        """Build a record from plain data.

        Raises:
            ComponentError: If a required key is missing or a value is malformed
        """
        if not isinstance(data, dict):
            raise ComponentError(
                "Component record must be a mapping", context={"got": type(data).__name__}
            )
        name = data.get("name", "<unnamed>")
        for key in sorted(set(data) - RECORD_KEYS):
            logger.warning(f"Ignoring unknown key '{key}' in component record {name}")
        try:
            record = cls(
                name=str(data["name"]),
                library=str(data.get("library", "")),
                functional=_parse_functional(data.get("functional_type", "integrated_circuit")),
                bbox=Rectangle(*_floats(data["bounding_box"], 4)),
                pads=[_parse_pad(p) for p in data.get("pads", [])],
                texts=[_parse_text(t) for t in data.get("texts", [])],
                graphics=[_parse_graphic(g) for g in data.get("graphics", [])],
                descr=_optional_str(data.get("description")),
                keywords=_parse_tags(data.get("tags")),
                model=_parse_model(data["model"]) if data.get("model") else None,
                margin=float(data.get("courtyard_margin", DEFAULT_COURTYARD_MARGIN)),
                electrical=bool(data.get("electrical", True)),
            )
        except KeyError as e:
            raise ComponentError(
                f"Component record is missing required key {e}",
                context={"component": name},
            ) from e
        except (AttributeError, TypeError, ValueError) as e:
            raise ComponentError(
                f"Invalid component record: {e}",
                context={"component": name},
            ) from e
        logger.debug(
            f"Loaded component {record.name}: {len(record.pads)} pads, "
            f"{len(record.texts)} texts, {len(record.graphics)} graphics"
        )
        return record

    @classmethod
    def from_yaml(cls, text: str) -> RecordComponent:
        """Build a record from YAML text (see module docstring for the layout).

        Raises:
            ComponentError: If the YAML is invalid or the record is malformed
        """
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ComponentError(
                f"Invalid YAML component record: {e}",
                suggestions=["Check indentation and quoting of the YAML document"],
            ) from e
        return cls.from_dict(data)


def _floats(values: Any, count: int) -> tuple[float, ...]:
    if len(values) != count:
        raise ValueError(f"expected {count} numbers, got {len(values)}")
    return tuple(float(v) for v in values)


def _optional_float(value: Any) -> float | None:
    return None if value is None else float(value)


def _optional_str(value: Any) -> str | None:
    return None if value is None else str(value)


def _parse_functional(value: Any) -> FunctionalType:
    if isinstance(value, str):
        return FunctionalType(FunctionalKind(value))
    return FunctionalType(FunctionalKind(value["kind"]), str(value.get("part", "")))


def _parse_tags(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        return " ".join(str(v) for v in value)
    return str(value)


def _token(data: dict[str, Any]) -> str:
    return str(data["uuid"]) if data.get("uuid") else new_uuid()


def _parse_pad(data: dict[str, Any]) -> PadDescriptor:
    tenting = data.get("tenting") or {}
    return PadDescriptor(
        number=str(data["number"]),
        pad_type=PadType.from_string(data.get("type", "smd")),
        shape=PadShape.from_string(data.get("shape", "rect")),
        position=_floats(data.get("at", (0, 0)), 2),
        size=_floats(data["size"], 2),
        layers=tuple(str(layer) for layer in data.get("layers", ())),
        drill_size=_optional_float(data.get("drill")),
        roundrect_ratio=_optional_float(data.get("roundrect_ratio")),
        tenting=TentingSettings(
            front=TentingType.from_string(tenting.get("front", "none")),
            back=TentingType.from_string(tenting.get("back", "none")),
        ),
        uuid=_token(data),
    )


def _parse_text(data: dict[str, Any]) -> FpText:
    font = data.get("font") or {}
    return FpText(
        text_type=FpTextType.from_string(data.get("type", "user")),
        text=str(data["text"]),
        position=_floats(data.get("at", (0, 0)), 2),
        layer=str(data.get("layer", LayerType.SILKSCREEN.kicad_name)),
        rotation=_optional_float(data.get("rotation")),
        font=FontSettings(
            size=_floats(font.get("size", (1.0, 1.0)), 2),
            thickness=float(font.get("thickness", 0.15)),
        ),
        uuid=_token(data),
    )


def _parse_stroke(data: dict[str, Any]) -> Stroke:
    return Stroke(
        width=float(data.get("width", 0.12)),
        stroke_type=StrokeType.from_string(data.get("type", "solid")),
    )


def _parse_line(data: dict[str, Any], common: dict[str, Any]) -> GraphicLine:
    return GraphicLine(start=_floats(data["start"], 2), end=_floats(data["end"], 2), **common)


def _parse_rectangle(data: dict[str, Any], common: dict[str, Any]) -> GraphicRectangle:
    return GraphicRectangle(bounds=Rectangle(*_floats(data["bounds"], 4)), **common)


def _parse_circle(data: dict[str, Any], common: dict[str, Any]) -> GraphicCircle:
    return GraphicCircle(center=_floats(data["center"], 2), radius=float(data["radius"]), **common)


_GRAPHIC_PARSERS: dict[str, Callable[[dict[str, Any], dict[str, Any]], GraphicElement]] = {
    "line": _parse_line,
    "rectangle": _parse_rectangle,
    "circle": _parse_circle,
}


def _parse_graphic(data: dict[str, Any]) -> GraphicElement:
    kind = data.get("kind", "line")
    parser = _GRAPHIC_PARSERS.get(kind)
    if parser is None:
        raise ValueError(f"unknown graphic kind {kind!r} (expected one of: line, rectangle, circle)")
    common = {
        "layer": LayerType.from_string(data.get("layer", LayerType.SILKSCREEN.kicad_name)),
        "stroke": _parse_stroke(data.get("stroke") or {}),
        "uuid": _token(data),
    }
    return parser(data, common)


def _parse_model(data: dict[str, Any]) -> Model3D:
    return Model3D(
        path=str(data["path"]),
        offset=_floats(data.get("offset", (0, 0, 0)), 3),
        scale=_floats(data.get("scale", (1, 1, 1)), 3),
        rotation=_floats(data.get("rotation", (0, 0, 0)), 3),
    )
