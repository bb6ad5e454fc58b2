"""
STYLEMIX
========

Reusable style-generation mixins. Each mixin is a pure function
returning a StyleFragment that renders to CSS.

Quick Start:
    >>> from stylemix import mixins
    >>> print(mixins.dimensions("40px").render())
    width: 40px;
    height: 40px;

Or from a Jinja2 stylesheet template:
    >>> from stylemix import render_stylesheet_string
    >>> css = render_stylesheet_string(".box { {{ centered() }} }")
"""

from . import mixins
from .breakpoints import BreakpointTable, configure_breakpoints, get_breakpoints, reset_breakpoints
from .fragment import ABSENT, Declaration, Raw, Rule, StyleFragment
from .registry import MixinInvocation, expand, include
from .services.stylesheet_engine import render_stylesheet, render_stylesheet_string
from .units import Dimension, rem, strip_unit
from .version import VERSION

__all__ = [
    "mixins",
    "BreakpointTable",
    "configure_breakpoints",
    "get_breakpoints",
    "reset_breakpoints",
    "ABSENT",
    "Declaration",
    "Raw",
    "Rule",
    "StyleFragment",
    "MixinInvocation",
    "expand",
    "include",
    "render_stylesheet",
    "render_stylesheet_string",
    "Dimension",
    "rem",
    "strip_unit",
]

__version__ = VERSION
