"""
Style Fragments
===============

The unit every mixin produces: an ordered sequence of declarations,
nested rules and opaque caller content.

Usage:
    >>> frag = StyleFragment.of(Declaration("width", "10px"))
    >>> frag += StyleFragment.of(Rule("&:hover", [Declaration("color", "red")]))
    >>> print(frag.render())
    width: 10px;
    &:hover {
      color: red;
    }
"""

from __future__ import annotations

import textwrap
from collections import abc
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Iterator, List, Optional, Tuple, Union

INDENT = "  "


class _Absent:
    """Marker for a value that was never supplied."""

    _instance: Optional["_Absent"] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT = _Absent()


@dataclass(frozen=True)
class Declaration:
    property: str
    value: Any

    def __post_init__(self):
        if self.value is not ABSENT and not isinstance(self.value, str):
            object.__setattr__(self, "value", str(self.value))

    @property
    def is_absent(self) -> bool:
        return self.value is ABSENT


@dataclass(frozen=True)
class Rule:
    """A nested block: selector (``&:hover``) or at-rule (``@media ...``)."""

    prelude: str
    children: Tuple["Node", ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "children", tuple(_coerce_nodes(self.children)))


@dataclass(frozen=True)
class Raw:
    """Caller-supplied text spliced in verbatim."""

    text: str


Node = Union[Declaration, Rule, Raw]
Content = Union[None, str, Node, "StyleFragment", Iterable[Any], Callable[[], Any]]


class StyleFragment:
    """Immutable ordered sequence of style nodes."""

    __slots__ = ("_nodes",)

    def __init__(self, nodes: Iterable[Any] = ()):
        self._nodes: Tuple[Node, ...] = tuple(_coerce_nodes(nodes))

    @classmethod
    def of(cls, *nodes: Any) -> "StyleFragment":
        return cls(nodes)

    # ------------------------------------------------------------------
    # Sequence protocol
    # ------------------------------------------------------------------
    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __getitem__(self, index):
        return self._nodes[index]

    def __bool__(self) -> bool:
        return bool(self._nodes)

    def __add__(self, other: Any) -> "StyleFragment":
        return StyleFragment(self._nodes + tuple(_coerce_nodes([other])))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, StyleFragment):
            return self._nodes == other._nodes
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._nodes)

    def __repr__(self) -> str:
        return f"StyleFragment({list(self._nodes)!r})"

    def __str__(self) -> str:
        return self.render()

    # ------------------------------------------------------------------
    # Lookup helpers
    # ------------------------------------------------------------------
    @property
    def declarations(self) -> List[Declaration]:
        """Top-level declarations, in order."""
        return [n for n in self._nodes if isinstance(n, Declaration)]

    @property
    def rules(self) -> List[Rule]:
        """Top-level nested rules, in order."""
        return [n for n in self._nodes if isinstance(n, Rule)]

    def values(self, prop: str) -> List[Any]:
        """All top-level values for ``prop`` (a property may repeat)."""
        return [d.value for d in self.declarations if d.property == prop]

    def get(self, prop: str, default: Any = None) -> Any:
        """Last top-level value for ``prop``, as a renderer would apply it."""
        found = self.values(prop)
        return found[-1] if found else default

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def render(self, level: int = 0) -> str:
        return "\n".join(_render_nodes(self._nodes, level))


def _render_nodes(nodes: Iterable[Node], level: int) -> List[str]:
    pad = INDENT * level
    lines: List[str] = []

    for node in nodes:
        if isinstance(node, Declaration):
            # null-valued declarations are dropped from output
            if not node.is_absent:
                lines.append(f"{pad}{node.property}: {node.value};")
        elif isinstance(node, Rule):
            lines.append(f"{pad}{node.prelude} {{")
            lines.extend(_render_nodes(node.children, level + 1))
            lines.append(f"{pad}}}")
        else:
            text = textwrap.dedent(node.text).strip("\n")
            lines.extend(f"{pad}{line}" for line in text.splitlines() if line.strip())

    return lines


def _coerce_nodes(items: Iterable[Any]) -> Iterator[Node]:
    for item in items:
        if isinstance(item, (Declaration, Rule, Raw)):
            yield item
        elif isinstance(item, StyleFragment):
            yield from item
        elif isinstance(item, str):
            if item.strip():
                yield Raw(item)
        elif item is None:
            continue
        elif isinstance(item, abc.Iterable):
            yield from _coerce_nodes(item)
        else:
            raise TypeError(f"Cannot use {type(item).__name__} as style content")


def as_fragment(content: Content) -> StyleFragment:
    """
    Resolve nested content into a fragment.

    Accepts a callback returning content, a fragment, a node,
    an iterable of nodes, or a plain string (kept verbatim).
    """
    if callable(content):
        content = content()
    if isinstance(content, StyleFragment):
        return content
    return StyleFragment([content])


def declarations(*pairs: Tuple[str, Any]) -> StyleFragment:
    """Shorthand: ``declarations(("width", "10px"), ("height", "10px"))``."""
    return StyleFragment(Declaration(prop, value) for prop, value in pairs)
