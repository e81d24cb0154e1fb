"""
Board composable object: the capability interface for placeable components.

Anything that can be placed on a printed circuit board, from a chip resistor
to a BGA FPGA or a mounting hole, implements ``BoardComposableObject``. The
interface is a fixed set of read-only accessors covering classification,
identity, geometry and footprint content. Serializers such as
``copper_substrate.export.kicad_mod`` only ever talk to a component through
these accessors.

Implementations are expected to be flat classes that implement the interface
directly, and must return equal values from repeated calls: a serializer may
call any accessor more than once during a single pass.

Example::

    class MyResistor(BoardComposableObject):
        def is_smt(self) -> bool:
            return True
        ...

    text = MyResistor().to_kicad_footprint()
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, final

from ..core.classification import FunctionalType
from ..core.geometry import Rectangle
from .courtyard import DEFAULT_COURTYARD_MARGIN, Courtyard
from .elements import FpText, GraphicElement, Model3D, PadDescriptor

if TYPE_CHECKING:
    from ..config import FootprintConfig


class BoardComposableObject(ABC):
    """A component that can be placed on a PCB and exported as a footprint."""

    # Classification

    @abstractmethod
    def is_smt(self) -> bool:
        """True for surface-mount components."""

    @abstractmethod
    def is_electrical(self) -> bool:
        """True if the component has electrical terminals."""

    def is_passive(self) -> bool:
        return False

    @abstractmethod
    def terminal_count(self) -> int:
        """Number of electrical terminals."""

    # Identity

    @abstractmethod
    def functional_type(self) -> FunctionalType:
        """Electrical role and part identifier."""

    @abstractmethod
    def footprint_name(self) -> str:
        """Footprint name, e.g. ``R_0805_2012Metric``."""

    @abstractmethod
    def library_name(self) -> str:
        """Footprint library the footprint belongs to, e.g. ``Resistor_SMD``."""

    # Geometry

    @abstractmethod
    def bounding_box(self) -> Rectangle:
        """Axis-aligned body extent in component-local coordinates."""

    # Footprint content

    @abstractmethod
    def pad_descriptors(self) -> list[PadDescriptor]:
        """Pads in emission order."""

    @abstractmethod
    def description(self) -> str | None:
        """Free-text footprint description, if any."""

    @abstractmethod
    def tags(self) -> str | None:
        """Space separated search keywords, if any."""

    @abstractmethod
    def fp_text_elements(self) -> list[FpText]:
        """Text items in emission order."""

    @abstractmethod
    def graphic_elements(self) -> list[GraphicElement]:
        """Graphics in emission order, not including the courtyard."""

    @abstractmethod
    def model_3d(self) -> Model3D | None:
        """3-D model reference, if any."""

    # Courtyard

    def courtyard_margin(self) -> float:
        return DEFAULT_COURTYARD_MARGIN

    @final
    def generate_courtyard(self) -> Courtyard:
        """Derive the courtyard from ``bounding_box`` and ``courtyard_margin``."""
        return Courtyard.from_bounding_box(
            self.bounding_box(), self.courtyard_margin(), owner=self.footprint_name()
        )

    # Export

    def to_kicad_footprint(self, config: FootprintConfig | None = None) -> str:
        """Serialize this component as ``.kicad_mod`` text."""
        from ..export.kicad_mod import to_kicad_footprint

        return to_kicad_footprint(self, config)
