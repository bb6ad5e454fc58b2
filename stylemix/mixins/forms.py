"""
Form Control Mixins
===================

Wrappers that inject caller declarations into vendor state selectors.
"""

from ..fragment import Content, Rule, StyleFragment, as_fragment

# Emitted in this order; each engine ignores the selectors it does not know
PLACEHOLDER_SELECTORS = (
    "&.placeholder",
    "&:-moz-placeholder",
    "&::-moz-placeholder",
    "&:-ms-input-placeholder",
    "&::-webkit-input-placeholder",
)


def input_placeholder(content: Content) -> StyleFragment:
    """
    Style an input's placeholder text.

    Example:
        >>> frag = input_placeholder(lambda: "color: #999;")
        >>> [rule.prelude for rule in frag.rules][0]
        '&.placeholder'
    """
    body = as_fragment(content)
    return StyleFragment(Rule(selector, body) for selector in PLACEHOLDER_SELECTORS)
