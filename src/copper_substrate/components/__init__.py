"""
Concrete component implementations.

Usage:
    from copper_substrate.components import create_chip_resistor

    r = create_chip_resistor("0805", value="10k")
    text = r.to_kicad_footprint()
"""

from .chip import (
    ChipComponent,
    create_chip,
    create_chip_capacitor,
    create_chip_resistor,
)
from .record import RecordComponent
from .standards import CHIP_SIZES

__all__ = [
    "ChipComponent",
    "RecordComponent",
    "CHIP_SIZES",
    "create_chip",
    "create_chip_resistor",
    "create_chip_capacitor",
]
