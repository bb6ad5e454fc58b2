"""
Gradient Mixins
===============

Background gradients with a flat-color fallback.
"""

from ..fragment import Declaration, StyleFragment

GRADIENT_ORIENTATIONS = ("vertical", "horizontal")


def background_gradient(start_color, end_color, orientation: str = "vertical") -> StyleFragment:
    """
    Flat ``start_color`` fallback, then a gradient.

    'vertical' runs top to bottom, 'horizontal' left to right; any
    other orientation gives a radial gradient from the center.
    """
    nodes = [Declaration("background", start_color)]

    if orientation == "vertical":
        nodes.append(Declaration("background", f"linear-gradient(to bottom, {start_color}, {end_color})"))
    elif orientation == "horizontal":
        nodes.append(Declaration("background", f"linear-gradient(to right, {start_color}, {end_color})"))
    else:
        nodes.append(Declaration("background", f"radial-gradient(ellipse at center, {start_color}, {end_color})"))

    return StyleFragment(nodes)
