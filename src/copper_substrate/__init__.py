"""
copper-substrate: PCB component descriptions and KiCad footprint export.

This package describes placeable PCB components (pads, text, graphics, 3-D
model reference) through a common capability interface and serializes them
as KiCad ``.kicad_mod`` footprint files, byte-for-byte reproducibly.

Modules:
    core: Geometry primitives, taxonomy enums, component classification
    board: Component descriptor interface, footprint elements, courtyard
    sexp: Write-only S-expression tree and number formatting
    export: Footprint serializers
    components: Ready-made components (chip passives, data-driven records)
    config: TOML configuration for generator header tokens

Quick Start::

    from copper_substrate import create_chip_resistor, to_kicad_footprint

    r = create_chip_resistor("0805", value="10k")
    text = to_kicad_footprint(r)
    Path("R_0805_2012Metric.kicad_mod").write_text(text)
"""

__version__ = "0.1.0"

from copper_substrate.board import (
    BoardComposableObject,
    Courtyard,
    DescriptorValidator,
    FpText,
    GraphicCircle,
    GraphicElement,
    GraphicLine,
    GraphicRectangle,
    Model3D,
    PadDescriptor,
    TentingSettings,
    validate_component,
)
from copper_substrate.components import (
    ChipComponent,
    RecordComponent,
    create_chip,
    create_chip_capacitor,
    create_chip_resistor,
)
from copper_substrate.config import Config, FootprintConfig
from copper_substrate.core import (
    FontSettings,
    FpTextType,
    FunctionalKind,
    FunctionalType,
    LayerType,
    PadShape,
    PadType,
    Rectangle,
    Stroke,
    StrokeType,
    TentingType,
)
from copper_substrate.export import build_footprint_tree, to_kicad_footprint

__all__ = [
    # Version
    "__version__",
    # Interface and elements
    "BoardComposableObject",
    "PadDescriptor",
    "TentingSettings",
    "FpText",
    "GraphicElement",
    "GraphicLine",
    "GraphicRectangle",
    "GraphicCircle",
    "Model3D",
    "Courtyard",
    # Value objects
    "Rectangle",
    "FontSettings",
    "Stroke",
    "LayerType",
    "PadType",
    "PadShape",
    "TentingType",
    "FpTextType",
    "StrokeType",
    "FunctionalKind",
    "FunctionalType",
    # Export
    "to_kicad_footprint",
    "build_footprint_tree",
    # Components
    "ChipComponent",
    "RecordComponent",
    "create_chip",
    "create_chip_resistor",
    "create_chip_capacitor",
    # Validation and config
    "DescriptorValidator",
    "validate_component",
    "Config",
    "FootprintConfig",
]
