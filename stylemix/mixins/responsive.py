"""
Responsive Mixins
=================

Wrap caller content in media queries, either by breakpoint name
(see breakpoints.py) or from a raw predicate.
"""

import logging

from ..breakpoints import get_breakpoints
from ..fragment import Content, Rule, StyleFragment, as_fragment
from ..units import ensure_unit

logger = logging.getLogger(__name__)


def respond_custom(predicate: str, content: Content) -> StyleFragment:
    """Wrap content in ``@media <predicate>``, bypassing the breakpoint table."""
    return StyleFragment.of(Rule(f"@media {predicate}", as_fragment(content)))


def respond(name: str, content: Content) -> StyleFragment:
    """
    Wrap content in the media query configured for breakpoint ``name``.

    An unknown name logs a warning and produces no output.

    Example:
        >>> print(respond("small", lambda: "color: red;").render())
        @media (min-width: 576px) {
          color: red;
        }
    """
    table = get_breakpoints()
    if name not in table:
        logger.warning(
            f"Invalid breakpoint: '{name}'. Available breakpoints: {', '.join(table)}"
        )
        return StyleFragment()

    return respond_custom(table[name], content)


def adaptive(max_width, content: Content) -> StyleFragment:
    """Wrap content in a ``max-width`` query; bare numbers are pixels."""
    return respond_custom(f"(max-width: {ensure_unit(max_width, 'px')})", content)
