"""
S-expression document tree for KiCad output.

A write-only node model: builders assemble a tree of ``SExp`` nodes that
mirrors the structure of the target file, and ``to_string`` renders it in a
separate pass. Layout is explicit rather than guessed: every list node is
either inline (rendered on one line) or a block (opener line, one child per
line, closing paren on its own line), and blocks say how many leading
children stay on the opener line.

Example::

    pad = SExp.block(
        "pad", "1", PadType.SMD, PadShape.ROUNDRECT,
        SExp.list("at", -0.95, 0),
        SExp.list("size", 1, 1.45),
        head=3,
    )
    print(pad.to_string())
    # (pad "1" smd roundrect
    # 	(at -0.95 0)
    # 	(size 1 1.45)
    # )

Atoms follow fixed rules: Python strings are always double-quoted, enum
members and ``SExp.symbol`` atoms are bare keywords, and numbers go through
``format_number``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional, Union

INDENT = "\t"

# KiCad stores coordinates as integer nanometres, i.e. 6 decimals in mm
DEFAULT_PRECISION = 6

AtomValue = Union[str, int, float]


def format_number(value: Union[int, float], precision: int = DEFAULT_PRECISION) -> str:
    """Format a number the single canonical way used across a document.

    Rounds to ``precision`` decimal places in fixed-point notation, then drops
    trailing zeros and a trailing dot. Never uses scientific notation or the
    process locale, and never emits ``-0``.

    Examples:
        >>> format_number(1.0)
        '1'
        >>> format_number(-0.95)
        '-0.95'
        >>> format_number(0.1 + 0.2)
        '0.3'
        >>> format_number(-1e-9)
        '0'
    """
    if isinstance(value, int):
        return str(value)
    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text


def quote(text: str) -> str:
    """Double-quote a string, escaping backslashes, quotes and control characters."""
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    escaped = escaped.replace("\n", "\\n").replace("\r", "\\r").replace("\t", "\\t")
    return f'"{escaped}"'


@dataclass
class SExp:
    """
    S-expression node.

    Can be either:
    - An atom (quoted string, bare keyword, or number)
    - A list starting with a name followed by children

    Examples:
        (layer "F.Cu")
        → SExp(name="layer", children=[SExp(value="F.Cu")])

        smd
        → SExp(value="smd", _bare=True)
    """

    name: Optional[str] = None
    children: list[SExp] = field(default_factory=list)
    value: Optional[AtomValue] = None

    _bare: bool = False  # Keyword atom, rendered without quotes
    _block: bool = False  # Render over multiple lines
    _head: int = 0  # Children kept on the opener line of a block

    def __post_init__(self):
        if self.name is not None and self.value is not None:
            raise ValueError("SExp cannot have both name and value")

    @property
    def is_atom(self) -> bool:
        """True if this is a leaf node (string, number, or keyword)."""
        return self.name is None and not self.children

    @property
    def is_list(self) -> bool:
        """True if this is a list node."""
        return self.name is not None

    @property
    def is_block(self) -> bool:
        return self._block

    def __getitem__(self, key: Union[str, int]) -> SExp:
        """Access children by index or by name (first match)."""
        if isinstance(key, int):
            return self.children[key]
        for child in self.children:
            if child.name == key:
                return child
        node_desc = f"'{self.name}'" if self.name else "root"
        raise KeyError(f"No child named '{key}' in {node_desc}")

    def get(self, key: str, default: Optional[SExp] = None) -> Optional[SExp]:
        """Get child by name, returning default if not found."""
        try:
            return self[key]
        except KeyError:
            return default

    def find_all(self, name: str) -> list[SExp]:
        """Find all descendants with the given name, in document order."""
        return [node for node in self.iter_all() if node.name == name]

    def iter_all(self) -> Iterator[SExp]:
        """Iterate over this node and all descendants."""
        yield self
        for child in self.children:
            yield from child.iter_all()

    def get_atoms(self) -> list[AtomValue]:
        """Get all atom values from direct children."""
        return [c.value for c in self.children if c.is_atom]

    def append(self, child: SExp) -> SExp:
        """Add a child node."""
        self.children.append(child)
        return child

    def extend(self, children) -> None:
        for child in children:
            self.append(child)

    def to_string(self, indent: int = 0, precision: int = DEFAULT_PRECISION) -> str:
        """
        Serialize to an S-expression string in KiCad's tab-indented layout.

        Args:
            indent: Nesting level of this node (one tab per level)
            precision: Decimal places for numbers
        """
        if self.is_atom:
            return self._format_atom(precision)
        if not self._block:
            return self._format_inline(precision)

        tabs = INDENT * indent
        opener = [f"({self.name}"]
        opener.extend(c._format_inline(precision) for c in self.children[: self._head])
        lines = [tabs + " ".join(opener)]

        for child in self.children[self._head :]:
            if child._block:
                lines.append(child.to_string(indent + 1, precision))
            else:
                lines.append(INDENT * (indent + 1) + child._format_inline(precision))

        lines.append(f"{tabs})")
        return "\n".join(lines)

    def _format_inline(self, precision: int) -> str:
        if self.is_atom:
            return self._format_atom(precision)
        parts = [self.name]
        parts.extend(c._format_inline(precision) for c in self.children)
        return "(" + " ".join(parts) + ")"

    def _format_atom(self, precision: int) -> str:
        if self.value is None:
            return ""
        if isinstance(self.value, str):
            return self.value if self._bare else quote(self.value)
        return format_number(self.value, precision)

    def __repr__(self) -> str:
        if self.is_atom:
            return f"SExp(value={self.value!r})"
        return f"SExp(name={self.name!r}, children=[{len(self.children)} items])"

    # Convenience constructors
    @classmethod
    def atom(cls, value: AtomValue) -> SExp:
        """Create an atom node. Strings become quoted strings."""
        return cls(value=value)

    @classmethod
    def symbol(cls, keyword: str) -> SExp:
        """Create a bare keyword atom such as ``smd`` or ``no``."""
        return cls(value=keyword, _bare=True)

    @classmethod
    def list(cls, name: str, *children: Union[SExp, Enum, AtomValue]) -> SExp:
        """Create an inline list node."""
        node = cls(name=name)
        for child in children:
            node.children.append(cls._coerce(child))
        return node

    @classmethod
    def block(
        cls, name: str, *children: Union[SExp, Enum, AtomValue], head: Optional[int] = None
    ) -> SExp:
        """Create a multi-line list node.

        Args:
            name: Node name
            children: Child nodes or atom values
            head: Number of leading children rendered on the opener line.
                Defaults to the run of leading atoms.
        """
        node = cls.list(name, *children)
        node._block = True
        if head is None:
            head = 0
            for child in node.children:
                if not child.is_atom:
                    break
                head += 1
        node._head = head
        return node

    @classmethod
    def _coerce(cls, child: Union[SExp, Enum, AtomValue]) -> SExp:
        if isinstance(child, SExp):
            return child
        if isinstance(child, Enum):
            return cls.symbol(str(child.value))
        return cls(value=child)


def render_document(root: SExp, precision: int = DEFAULT_PRECISION) -> str:
    """Render a top-level node as file content, terminated by a newline."""
    return root.to_string(precision=precision) + "\n"
