"""
KiCad footprint (.kicad_mod) serializer.

Turns any ``BoardComposableObject`` into the text of a KiCad footprint file.
Serialization runs in two passes: ``build_footprint_tree`` asks the component
for its content and builds an ``SExp`` document tree, and ``render_document``
formats that tree as tab-indented text.

The section order of the document is fixed, because the consumer expects it:

1. Header: name, format version, generator, generator version, board layer
2. Description (only if the component has one)
3. Tags (only if the component has them)
4. ``(attr smd)`` when at least one pad is SMD
5. ``(duplicate_pad_numbers_are_jumpers no)``
6. Text items, in component order
7. Graphics: the component's own, then the four courtyard lines
8. Pads, in component order
9. 3-D model (only if the component has one)
10. ``(embedded_fonts no)`` and the closing paren

Serialization is a pure function of the component's state: equal components
produce byte-identical text. Nothing is validated; see
``copper_substrate.board.validator`` for opt-in checks.

Usage:
    from copper_substrate.export import to_kicad_footprint

    text = to_kicad_footprint(component)
    Path(f"{component.footprint_name()}.kicad_mod").write_text(text)
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..board.elements import FpText, GraphicElement, GraphicLine, Model3D, PadDescriptor
from ..board.interface import BoardComposableObject
from ..config import FootprintConfig
from ..core.types import LayerType, PadType
from ..sexp import builders
from ..sexp.node import SExp, render_document

logger = logging.getLogger(__name__)

BOARD_LAYER = LayerType.COPPER


def to_kicad_footprint(
    component: BoardComposableObject, config: Optional[FootprintConfig] = None
) -> str:
    """Serialize a component as the text of a ``.kicad_mod`` file.

    Args:
        component: Component to serialize
        config: Header tokens and number precision (built-in defaults if None)

    Returns:
        Complete footprint document, terminated by a newline
    """
    config = config or FootprintConfig()
    root = build_footprint_tree(component, config)
    return render_document(root, precision=config.precision)


def build_footprint_tree(
    component: BoardComposableObject, config: Optional[FootprintConfig] = None
) -> SExp:
    """Build the footprint document tree for a component.

    Each child of the returned ``footprint`` node is one entry of the fixed
    section order described in the module docstring.
    """
    config = config or FootprintConfig()
    name = component.footprint_name()
    logger.debug(f"Serializing footprint {name}")

    root = SExp.block("footprint", name, head=1)
    root.extend(header_nodes(config))

    description = component.description()
    if description is not None:
        root.append(SExp.list("descr", description))

    tags = component.tags()
    if tags is not None:
        root.append(SExp.list("tags", tags))

    pads = component.pad_descriptors()
    if any(pad.pad_type is PadType.SMD for pad in pads):
        root.append(SExp.list("attr", PadType.SMD))
    root.append(SExp.list("duplicate_pad_numbers_are_jumpers", SExp.symbol("no")))

    for text in component.fp_text_elements():
        root.append(fp_text_node(text))

    root.extend(graphic_nodes(all_graphics(component)))

    for pad in pads:
        root.append(pad_node(pad))

    model = component.model_3d()
    if model is not None:
        root.append(model_node(model))

    root.append(SExp.list("embedded_fonts", SExp.symbol("no")))
    return root


def header_nodes(config: FootprintConfig) -> list[SExp]:
    """Version, generator and board layer nodes following the footprint name."""
    return [
        SExp.list("version", config.format_version),
        SExp.list("generator", config.generator),
        SExp.list("generator_version", config.generator_version),
        builders.layer(BOARD_LAYER.kicad_name),
    ]


def all_graphics(component: BoardComposableObject) -> list[GraphicElement]:
    """Component graphics followed by the generated courtyard lines."""
    graphics = list(component.graphic_elements())
    graphics.extend(component.generate_courtyard().to_graphic_elements())
    return graphics


def graphic_nodes(graphics: Iterable[GraphicElement]) -> list[SExp]:
    """Render the graphics that have a footprint representation.

    Only lines are written. Other graphic variants are skipped without error.
    """
    nodes = []
    for graphic in graphics:
        if isinstance(graphic, GraphicLine):
            nodes.append(fp_line_node(graphic))
        else:
            logger.debug(
                f"Skipping {type(graphic).__name__} {graphic.uuid}: no footprint representation"
            )
    return nodes


def fp_text_node(text: FpText) -> SExp:
    """``(fp_text TYPE "TEXT" (at X Y [R]) (layer "L")`` block."""
    x, y = text.position
    return SExp.block(
        "fp_text",
        text.text_type,
        text.text,
        builders.at(x, y, text.rotation),
        builders.layer(text.layer),
        builders.effects(text.font.size, text.font.thickness),
        builders.tstamp(text.uuid),
        head=4,
    )


def fp_line_node(line: GraphicLine) -> SExp:
    """``(fp_line`` block with start, end, stroke, layer and tstamp."""
    return SExp.block(
        "fp_line",
        builders.xy(*line.start, name="start"),
        builders.xy(*line.end, name="end"),
        builders.stroke(line.stroke.width, line.stroke.stroke_type),
        builders.layer(line.layer.kicad_name),
        builders.tstamp(line.uuid),
    )


def pad_node(pad: PadDescriptor) -> SExp:
    """``(pad "N" TYPE SHAPE`` block.

    The roundrect ratio line is present only when the pad defines one.
    """
    node = SExp.block(
        "pad",
        pad.number,
        pad.pad_type,
        pad.shape,
        builders.at(*pad.position),
        SExp.list("size", *pad.size),
        builders.layers(pad.layers),
    )
    if pad.roundrect_ratio is not None:
        node.append(SExp.list("roundrect_rratio", pad.roundrect_ratio))
    node.append(builders.tstamp(pad.uuid))
    return node


def model_node(model: Model3D) -> SExp:
    """``(model "PATH"`` block with offset, scale and rotate sub-blocks."""
    return SExp.block(
        "model",
        model.path,
        SExp.block("offset", builders.xyz(model.offset)),
        SExp.block("scale", builders.xyz(model.scale)),
        SExp.block("rotate", builders.xyz(model.rotation)),
    )
