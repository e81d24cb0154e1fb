"""
Write-only S-expression tree and renderer.

Usage:
    from copper_substrate.sexp import SExp, render_document

    root = SExp.block("footprint", "R_0805", SExp.list("version", 20250401))
    text = render_document(root)
"""

from .builders import at, effects, layer, layers, stroke, tstamp, xy, xyz
from .node import DEFAULT_PRECISION, SExp, format_number, quote, render_document

__all__ = [
    "SExp",
    "DEFAULT_PRECISION",
    "format_number",
    "quote",
    "render_document",
    # Builders
    "at",
    "xy",
    "xyz",
    "layer",
    "layers",
    "stroke",
    "effects",
    "tstamp",
]
