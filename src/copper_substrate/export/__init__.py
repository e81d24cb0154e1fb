"""
Footprint export.

Serializers that turn a ``BoardComposableObject`` into an external file
format. They return text; writing it to disk is left to the caller.
"""

from .kicad_mod import build_footprint_tree, to_kicad_footprint

__all__ = [
    "build_footprint_tree",
    "to_kicad_footprint",
]
