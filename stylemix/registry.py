"""
Mixin Registry
==============

Expand a mixin by name. Every mixin is reachable under its Python
name and under its stylesheet name (``cssTriangle``, ``background-gradient``).

Usage:
    >>> expand(MixinInvocation("dimensions", ("10px",))).get("height")
    '10px'
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from . import mixins
from .exceptions import MixinNotFoundError
from .fragment import Content, StyleFragment

MIXINS: Dict[str, Callable[..., StyleFragment]] = {
    # ── Geometry & layout ─────────────────────────────────────────────────────
    "dimensions":           mixins.dimensions,
    "margin_auto":          mixins.margin_auto,
    "marginAuto":           mixins.margin_auto,
    "centered":             mixins.centered,
    "pseudo":               mixins.pseudo,
    "css_triangle":         mixins.css_triangle,
    "cssTriangle":          mixins.css_triangle,

    # ── Forms ─────────────────────────────────────────────────────────────────
    "input_placeholder":    mixins.input_placeholder,
    "inputPlaceholder":     mixins.input_placeholder,

    # ── Animation ─────────────────────────────────────────────────────────────
    "keyframes":            mixins.keyframes,
    "transition":           mixins.transition,

    # ── Fluid scaling ─────────────────────────────────────────────────────────
    "fluid":                mixins.fluid,
    "fluid_dep_height":     mixins.fluid_dep_height,
    "fluidDepHeight":       mixins.fluid_dep_height,

    # ── Gradients ─────────────────────────────────────────────────────────────
    "background_gradient":  mixins.background_gradient,
    "background-gradient":  mixins.background_gradient,

    # ── Responsive ────────────────────────────────────────────────────────────
    "respond":              mixins.respond,
    "respond_custom":       mixins.respond_custom,
    "respondCustom":        mixins.respond_custom,
    "adaptive":             mixins.adaptive,

    # ── Typography ────────────────────────────────────────────────────────────
    "font_size":            mixins.font_size,
    "font-size":            mixins.font_size,
}

# mixins whose last positional parameter is the nested content block
CONTENT_MIXINS = frozenset({
    mixins.input_placeholder,
    mixins.respond,
    mixins.respond_custom,
    mixins.adaptive,
})


@dataclass(frozen=True)
class MixinInvocation:
    name: str
    args: Tuple[Any, ...] = ()
    kwargs: Mapping[str, Any] = field(default_factory=dict)
    content: Optional[Content] = None


def resolve_mixin(name: str) -> Callable[..., StyleFragment]:
    try:
        return MIXINS[name]
    except KeyError:
        raise MixinNotFoundError(name) from None


def takes_content(name: str) -> bool:
    return resolve_mixin(name) in CONTENT_MIXINS


def expand(invocation: MixinInvocation) -> StyleFragment:
    """Run the named mixin; a content block (if any) is passed as ``content=``."""
    func = resolve_mixin(invocation.name)
    kwargs = dict(invocation.kwargs)
    if invocation.content is not None and func in CONTENT_MIXINS:
        kwargs["content"] = invocation.content
    return func(*invocation.args, **kwargs)


def include(name: str, *args, content: Optional[Content] = None, **kwargs) -> StyleFragment:
    """Shorthand for ``expand(MixinInvocation(name, args, kwargs, content))``."""
    return expand(MixinInvocation(name, args, kwargs, content))
