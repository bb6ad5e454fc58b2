"""
Animation Mixins
================

Two-stop keyframe blocks and transition lists.
"""

import logging
import re
from dataclasses import dataclass
from typing import Mapping, Optional, Union

from ..core.config import get_config
from ..fragment import ABSENT, Declaration, Rule, StyleFragment
from ..exceptions import InvalidValueError

logger = logging.getLogger(__name__)

KEYFRAME_KEYS = ("opacityStart", "opacityEnd", "transformStart", "transformEnd")

_TIME_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)m?s$", re.IGNORECASE)


def keyframes(name: str, spec: Optional[Mapping[str, str]] = None, **overrides) -> StyleFragment:
    """
    Build a ``@keyframes`` block with a ``from`` and a ``to`` stop.

    ``spec`` and then ``overrides`` are merged over an empty base, later
    keys winning. Missing stage keys resolve to ABSENT, which renders
    as no declaration.

    Example:
        >>> print(keyframes("fade", {"opacityStart": 0, "opacityEnd": 1}).render())
        @keyframes fade {
          from {
            opacity: 0;
          }
          to {
            opacity: 1;
          }
        }
    """
    stages = {}
    stages.update(spec or {})
    stages.update(overrides)

    unknown = set(stages) - set(KEYFRAME_KEYS)
    if unknown:
        logger.debug(f"keyframes '{name}': ignoring unknown stage keys {sorted(unknown)}")

    def stage(key):
        return stages.get(key, ABSENT)

    return StyleFragment.of(
        Rule(f"@keyframes {name}", [
            Rule("from", [
                Declaration("opacity", stage("opacityStart")),
                Declaration("transform", stage("transformStart")),
            ]),
            Rule("to", [
                Declaration("opacity", stage("opacityEnd")),
                Declaration("transform", stage("transformEnd")),
            ]),
        ])
    )


@dataclass(frozen=True)
class TransitionEntry:
    """One transitioned property with an optional explicit duration."""

    property: str
    duration: Optional[str] = None

    @classmethod
    def parse(cls, token: str) -> "TransitionEntry":
        """
        Split a token such as ``"width 0.5s"`` into property and duration.

        Only a separate word that is a CSS time counts as the duration.
        """
        words = token.split()
        if not words:
            raise InvalidValueError("transition", token, "empty transition entry")

        prop, rest = words[0], words[1:]
        if any(_TIME_RE.match(word) for word in rest):
            # duration keeps the timing words as written, e.g. "0.5s 0.1s"
            return cls(prop, " ".join(rest))
        return cls(" ".join(words))


def transition(*entries: Union[str, TransitionEntry], duration: Optional[str] = None,
               easing: Optional[str] = None) -> StyleFragment:
    """
    Emit a single ``transition`` declaration for several properties.

    Args:
        *entries: Property tokens (``"color"``, ``"width 0.5s"``) or TransitionEntry
        duration: Used for entries without one (default STYLEMIX_DEFAULT_DURATION)
        easing: Timing function for every entry (default STYLEMIX_DEFAULT_EASING)

    Example:
        >>> transition("color", "width 0.5s").get("transition")
        'color 0.3s ease-in-out, width 0.5s ease-in-out'
    """
    config = get_config()
    duration = duration or config.get("STYLEMIX_DEFAULT_DURATION")
    easing = easing or config.get("STYLEMIX_DEFAULT_EASING")

    parts = []
    for entry in entries:
        if not isinstance(entry, TransitionEntry):
            entry = TransitionEntry.parse(str(entry))
        parts.append(f"{entry.property} {entry.duration or duration} {easing}")

    if not parts:
        return StyleFragment()
    return StyleFragment.of(Declaration("transition", ", ".join(parts)))
