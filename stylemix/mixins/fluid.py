"""
Fluid Scaling Mixins
====================

Linear interpolation of a property between two viewport sizes:

    min_value + (max_value - min_value) * (viewport - min_bound) / (max_bound - min_bound)

The expression is emitted as ``calc()`` and evaluated by the browser.
"""

from typing import Iterable, Union

from ..exceptions import InvalidValueError
from ..fragment import Declaration, Rule, StyleFragment
from ..units import Dimension, format_number

# axis → (media feature, viewport unit)
FLUID_AXES = {
    "width": ("min-width", "100vw"),
    "height": ("min-height", "100vh"),
}

Properties = Union[str, Iterable[str]]


def _properties(properties: Properties) -> list:
    if isinstance(properties, str):
        return properties.split()
    return list(properties)


def fluid_scale(properties: Properties, min_bound, max_bound, min_value, max_value,
                axis: str = "width") -> StyleFragment:
    """
    Scale properties linearly between two viewport sizes.

    Args:
        properties: One property name, a space separated string or a list
        min_bound: Viewport size where scaling starts
        max_bound: Viewport size where scaling stops
        min_value: Value at and below ``min_bound``
        max_value: Value at and above ``max_bound``
        axis: 'width' (viewport width) or 'height' (viewport height)

    Raises:
        InvalidValueError: Unknown axis, or equal bounds
        UnitMismatchError: Bounds or values mixing different units

    Example:
        >>> frag = fluid_scale("font-size", "320px", "1366px", "14px", "22px")
        >>> frag.get("font-size")
        '14px'
    """
    if axis not in FLUID_AXES:
        raise InvalidValueError("axis", axis, "expected 'width' or 'height'")
    feature, viewport = FLUID_AXES[axis]

    lo_bound, hi_bound = Dimension.parse(min_bound), Dimension.parse(max_bound)
    lo_value, hi_value = Dimension.parse(min_value), Dimension.parse(max_value)
    if (hi_bound - lo_bound).value == 0:
        raise InvalidValueError("max_bound", max_bound, "must differ from min_bound")

    value_span = format_number((hi_value - lo_value).value)
    bound_span = format_number((hi_bound - lo_bound).value)
    expression = f"calc({lo_value} + {value_span} * (({viewport} - {lo_bound}) / {bound_span}))"

    props = _properties(properties)
    return StyleFragment([
        [Declaration(prop, lo_value) for prop in props],
        Rule(f"@media screen and ({feature}: {lo_bound})",
             [Declaration(prop, expression) for prop in props]),
        Rule(f"@media screen and ({feature}: {hi_bound})",
             [Declaration(prop, hi_value) for prop in props]),
    ])


def fluid(properties: Properties, min_vw, max_vw, min_value, max_value) -> StyleFragment:
    """Fluid scaling keyed off the viewport width."""
    return fluid_scale(properties, min_vw, max_vw, min_value, max_value, axis="width")


def fluid_dep_height(properties: Properties, min_vh, max_vh, min_value, max_value) -> StyleFragment:
    """Fluid scaling keyed off the viewport height."""
    return fluid_scale(properties, min_vh, max_vh, min_value, max_value, axis="height")
