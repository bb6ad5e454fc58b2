"""
Units & Dimensioned Numbers
===========================

Arithmetic on CSS values such as ``14px`` or ``0.5rem``.

Usage:
    >>> Dimension.parse("22px") - Dimension.parse("14px")
    Dimension(value=8.0, unit='px')
    >>> strip_unit("1046px")
    1046.0
    >>> str(rem("24px"))
    '1.5rem'
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Union

from .exceptions import UnitMismatchError, UnitParseError

_NUMBER_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+))([a-zA-Z%]*)\s*$")

# Sass prints numbers with ten digits of precision
PRECISION = 10

Number = Union[int, float]


def format_number(value: float) -> str:
    """
    Print a number the way it appears in a stylesheet.

    Example:
        >>> format_number(8.0), format_number(0.5), format_number(-2.40)
        ('8', '0.5', '-2.4')
    """
    text = f"{value:.{PRECISION}f}".rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text


@dataclass(frozen=True)
class Dimension:
    """A number with an optional single unit (``px``, ``rem``, ``%`` ...)."""

    value: float
    unit: str = ""

    @classmethod
    def parse(cls, raw: Union[str, Number, "Dimension"]) -> "Dimension":
        if isinstance(raw, Dimension):
            return raw
        if isinstance(raw, bool):
            raise UnitParseError(raw)
        if isinstance(raw, (int, float)):
            return cls(float(raw))
        if not isinstance(raw, str):
            raise UnitParseError(raw)

        match = _NUMBER_RE.match(raw)
        if not match:
            raise UnitParseError(raw)
        return cls(float(match.group(1)), match.group(2).lower())

    @property
    def unitless(self) -> bool:
        return not self.unit

    def _unit_with(self, other: "Dimension") -> str:
        if self.unit == other.unit or other.unitless:
            return self.unit
        if self.unitless:
            return other.unit
        raise UnitMismatchError(str(self), str(other))

    def __add__(self, other) -> "Dimension":
        other = Dimension.parse(other)
        return Dimension(self.value + other.value, self._unit_with(other))

    def __sub__(self, other) -> "Dimension":
        other = Dimension.parse(other)
        return Dimension(self.value - other.value, self._unit_with(other))

    def __mul__(self, factor: Number) -> "Dimension":
        return Dimension(self.value * factor, self.unit)

    __rmul__ = __mul__

    def __truediv__(self, divisor: Number) -> "Dimension":
        return Dimension(self.value / divisor, self.unit)

    def __neg__(self) -> "Dimension":
        return Dimension(-self.value, self.unit)

    def __str__(self) -> str:
        return f"{format_number(self.value)}{self.unit}"


def strip_unit(value: Union[str, Number, Dimension]) -> float:
    """Drop the unit of a single-unit value and return the bare number."""
    return Dimension.parse(value).value


def css_round(value: Union[str, Number, Dimension]) -> Dimension:
    """Round to the nearest integer, halves away from zero, keeping the unit."""
    dim = Dimension.parse(value)
    rounded = Decimal(repr(dim.value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return Dimension(float(rounded), dim.unit)


def rem(value: Union[str, Number, Dimension], base: Union[str, Number] = 16) -> Dimension:
    """
    Convert a pixel value to root-relative ``rem`` units.

    Args:
        value: Size in ``px`` (or a bare number of pixels)
        base: Root font size in pixels

    Raises:
        UnitMismatchError: If ``value`` carries a unit other than ``px``
    """
    dim = Dimension.parse(value)
    if dim.unit not in ("", "px"):
        raise UnitMismatchError(str(dim), "px")
    return Dimension(dim.value / strip_unit(base), "rem")


def ensure_unit(value: Union[str, Number, Dimension], unit: str) -> str:
    """Attach ``unit`` to a bare number; dimensioned values pass through."""
    dim = Dimension.parse(value)
    if dim.unitless:
        return f"{format_number(dim.value)}{unit}"
    return str(dim)
