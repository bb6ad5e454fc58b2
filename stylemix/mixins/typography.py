"""
Typography Mixins
=================
"""

from typing import Optional

from ..core.config import get_base_font_size
from ..fragment import Declaration, StyleFragment
from ..units import Dimension, rem


def font_size(size, base: Optional[float] = None) -> StyleFragment:
    """
    Pixel font size followed by its ``rem`` equivalent.

    Renderers without rem support keep the first declaration.

    Args:
        size: Size in ``px``
        base: Root font size in pixels (default STYLEMIX_BASE_FONT_SIZE)

    Example:
        >>> font_size("24px").values("font-size")
        ['24px', '1.5rem']
    """
    size = Dimension.parse(size)
    if size.unitless:
        size = Dimension(size.value, "px")
    base = base if base is not None else get_base_font_size()

    return StyleFragment.of(
        Declaration("font-size", size),
        Declaration("font-size", rem(size, base)),
    )
