"""Component classification: functional role and physical package.

A component's functional type says what it does electrically (a resistor, an
MCU); its package says how it is physically mounted. Both are closed sets that
carry a free-form part identifier, e.g. ``FunctionalType.fpga("Artix7")`` or
``FunctionalType.mcu("Pico2")``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class FunctionalKind(str, Enum):
    """Electrical role of a component."""

    RESISTOR = "resistor"
    CAPACITOR = "capacitor"
    INDUCTOR = "inductor"
    CONNECTOR = "connector"
    FUSE = "fuse"
    PROTECTION = "protection"
    INTEGRATED_CIRCUIT = "integrated_circuit"
    ADC = "adc"
    DAC = "dac"
    FPGA = "fpga"
    MCU = "mcu"
    LED = "led"
    LCD = "lcd"
    ISOLATION_IC = "isolation_ic"
    OPAMP = "opamp"
    TIMER = "timer"

    def __str__(self) -> str:
        return self.value

    @property
    def is_passive(self) -> bool:
        return self in _PASSIVE_KINDS


_PASSIVE_KINDS = frozenset(
    {FunctionalKind.RESISTOR, FunctionalKind.CAPACITOR, FunctionalKind.INDUCTOR}
)


@dataclass(frozen=True)
class FunctionalType:
    """A functional kind plus the part it refers to (value, family, MPN)."""

    kind: FunctionalKind
    part: str = ""

    def __str__(self) -> str:
        return f"{self.kind.value}({self.part})" if self.part else self.kind.value

    @classmethod
    def resistor(cls, part: str = "") -> FunctionalType:
        return cls(FunctionalKind.RESISTOR, part)

    @classmethod
    def capacitor(cls, part: str = "") -> FunctionalType:
        return cls(FunctionalKind.CAPACITOR, part)

    @classmethod
    def inductor(cls, part: str = "") -> FunctionalType:
        return cls(FunctionalKind.INDUCTOR, part)

    @classmethod
    def fpga(cls, part: str = "") -> FunctionalType:
        return cls(FunctionalKind.FPGA, part)

    @classmethod
    def mcu(cls, part: str = "") -> FunctionalType:
        return cls(FunctionalKind.MCU, part)


class PackageFamily(str, Enum):
    """Physical mounting family."""

    SMT = "smt"
    THROUGH_HOLE = "through_hole"
    BGA = "bga"
    QFP = "qfp"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Package:
    """Base for package descriptions; ``part`` is e.g. "0805" or "LQFP-64"."""

    family: ClassVar[PackageFamily]

    part: str = ""

    @property
    def is_surface_mount(self) -> bool:
        return self.family is not PackageFamily.THROUGH_HOLE


@dataclass(frozen=True)
class SMTPackage(Package):
    """Surface-mount chip package (0603, 0805, ...)."""

    family: ClassVar[PackageFamily] = PackageFamily.SMT

    size: tuple[float, float] = (0.0, 0.0)
    pitch: float | None = None


@dataclass(frozen=True)
class ThroughHolePackage(Package):
    family: ClassVar[PackageFamily] = PackageFamily.THROUGH_HOLE

    spacing: float = 0.0
    drill_size: float = 0.0


@dataclass(frozen=True)
class BGAPackage(Package):
    family: ClassVar[PackageFamily] = PackageFamily.BGA

    pitch: float = 0.0
    array_size: tuple[int, int] = (0, 0)


@dataclass(frozen=True)
class QFPPackage(Package):
    family: ClassVar[PackageFamily] = PackageFamily.QFP

    pitch: float = 0.0
    pin_count: int = 0
