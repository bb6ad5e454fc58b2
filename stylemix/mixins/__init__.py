"""
Mixins Package
==============

Every style macro shipped with STYLEMIX. Each one returns a
StyleFragment; none keeps state between calls.
"""

from .geometry import dimensions, margin_auto, centered, pseudo, css_triangle
from .forms import input_placeholder
from .animation import keyframes, transition, TransitionEntry
from .fluid import fluid, fluid_dep_height, fluid_scale
from .gradients import background_gradient
from .responsive import respond, respond_custom, adaptive
from .typography import font_size

__all__ = [
    "dimensions",
    "margin_auto",
    "centered",
    "pseudo",
    "css_triangle",
    "input_placeholder",
    "keyframes",
    "transition",
    "TransitionEntry",
    "fluid",
    "fluid_dep_height",
    "fluid_scale",
    "background_gradient",
    "respond",
    "respond_custom",
    "adaptive",
    "font_size",
]
