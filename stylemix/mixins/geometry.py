"""
Geometry & Layout Mixins
========================

Box sizing, centering and pure-CSS triangle helpers.
"""

from ..fragment import Declaration, StyleFragment
from ..units import Dimension, css_round

CENTER_AXES = ("both", "vertical", "horizontal")
TRIANGLE_DIRECTIONS = ("down", "up", "right", "left")


def dimensions(width, height=None) -> StyleFragment:
    """
    Set width and height; a missing height reuses the width.

    Example:
        >>> dimensions("40px").get("height")
        '40px'
    """
    if height is None:
        height = width
    return StyleFragment.of(
        Declaration("width", width),
        Declaration("height", height),
    )


def margin_auto() -> StyleFragment:
    """Horizontal auto margins."""
    return StyleFragment.of(
        Declaration("margin-left", "auto"),
        Declaration("margin-right", "auto"),
    )


def centered(position: str = "absolute", axis: str = "both") -> StyleFragment:
    """
    Center an element inside its positioned parent.

    Args:
        position: CSS position mode
        axis: 'both', 'vertical' or 'horizontal'; anything else emits
            the position declaration only
    """
    nodes = [Declaration("position", position)]

    if axis == "both":
        nodes += [
            Declaration("top", "50%"),
            Declaration("left", "50%"),
            Declaration("transform", "translate(-50%, -50%)"),
        ]
    elif axis == "vertical":
        nodes += [
            Declaration("top", "50%"),
            Declaration("transform", "translateY(-50%)"),
        ]
    elif axis == "horizontal":
        nodes += [
            Declaration("left", "50%"),
            Declaration("transform", "translateX(-50%)"),
        ]

    return StyleFragment(nodes)


def pseudo(display: str = "block", position: str = "absolute", content: str = "''") -> StyleFragment:
    """Base declarations for a ::before / ::after box."""
    return StyleFragment.of(
        Declaration("content", content),
        Declaration("display", display),
        Declaration("position", position),
    )


def css_triangle(color, direction: str, size="6px", position: str = "absolute", round: bool = False) -> StyleFragment:
    """
    Draw a triangle out of borders on a pseudo element.

    Args:
        color: Fill color of the triangle
        direction: 'down', 'up', 'right' or 'left'; anything else
            leaves the empty base box
        size: Border width (half the base of the triangle)
        position: CSS position of the pseudo element
        round: Add a small border radius

    Example:
        >>> css_triangle("#333", "down").get("margin-top")
        '-2px'
    """
    size = Dimension.parse(size)
    solid = f"{size} solid {color}"
    clear = f"{size} solid transparent"

    nodes = list(pseudo(position=position))
    nodes += [Declaration("width", "0"), Declaration("height", "0")]
    if round:
        nodes.append(Declaration("border-radius", "3px"))

    if direction == "down":
        nodes += [
            Declaration("border-left", clear),
            Declaration("border-right", clear),
            Declaration("border-top", solid),
            Declaration("margin-top", -css_round(size / 2.5)),
        ]
    elif direction == "up":
        nodes += [
            Declaration("border-left", clear),
            Declaration("border-right", clear),
            Declaration("border-bottom", solid),
            Declaration("margin-bottom", -css_round(size / 2.5)),
        ]
    elif direction == "right":
        nodes += [
            Declaration("border-top", clear),
            Declaration("border-bottom", clear),
            Declaration("border-left", solid),
            Declaration("margin-right", -size),
        ]
    elif direction == "left":
        nodes += [
            Declaration("border-top", clear),
            Declaration("border-bottom", clear),
            Declaration("border-right", solid),
            Declaration("margin-left", -size),
        ]

    return StyleFragment(nodes)
