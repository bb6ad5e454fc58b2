"""
tests/test_units.py
===================
Covers units.py: parsing, arithmetic, rounding and conversions.
"""
import pytest

from stylemix.exceptions import UnitMismatchError, UnitParseError
from stylemix.units import Dimension, css_round, ensure_unit, format_number, rem, strip_unit


# ══════════════════════════════════════════════════════════════════════════════
# Dimension.parse()
# ══════════════════════════════════════════════════════════════════════════════

class TestParse:

    def test_pixels(self):
        assert Dimension.parse("14px") == Dimension(14.0, "px")

    def test_negative_fraction(self):
        assert Dimension.parse("-0.5rem") == Dimension(-0.5, "rem")

    def test_leading_dot(self):
        assert Dimension.parse(".5em") == Dimension(0.5, "em")

    def test_percent(self):
        assert Dimension.parse("50%") == Dimension(50.0, "%")

    def test_bare_numbers(self):
        assert Dimension.parse(0).unitless
        assert Dimension.parse("1046") == Dimension(1046.0)

    def test_unit_is_lowercased(self):
        assert Dimension.parse("10PX").unit == "px"

    @pytest.mark.parametrize("raw", ["big", "10px 20px", "", "px", True, None])
    def test_malformed(self, raw):
        with pytest.raises(UnitParseError):
            Dimension.parse(raw)


# ══════════════════════════════════════════════════════════════════════════════
# Arithmetic
# ══════════════════════════════════════════════════════════════════════════════

class TestArithmetic:

    def test_subtract_same_unit(self):
        assert Dimension.parse("22px") - "14px" == Dimension(8.0, "px")

    def test_unitless_operand_adopts_unit(self):
        assert Dimension.parse("10px") + 5 == Dimension(15.0, "px")
        assert Dimension.parse(5) + "10px" == Dimension(15.0, "px")

    def test_mixed_units_rejected(self):
        with pytest.raises(UnitMismatchError):
            Dimension.parse("14px") - "1rem"

    def test_scale(self):
        assert str(Dimension.parse("6px") / 2.5) == "2.4px"
        assert str(2 * Dimension.parse("3em")) == "6em"

    def test_negate(self):
        assert str(-Dimension.parse("6px")) == "-6px"


# ══════════════════════════════════════════════════════════════════════════════
# Helpers
# ══════════════════════════════════════════════════════════════════════════════

class TestFormatNumber:

    def test_integral_float(self):
        assert format_number(8.0) == "8"

    def test_fraction(self):
        assert format_number(0.5) == "0.5"

    def test_float_noise_removed(self):
        assert format_number(0.1 + 0.2) == "0.3"

    def test_negative_zero(self):
        assert format_number(-0.0) == "0"


class TestRounding:

    def test_rounds_down(self):
        assert str(css_round("2.4px")) == "2px"

    def test_half_rounds_away_from_zero(self):
        assert str(css_round("2.5px")) == "3px"
        assert str(css_round("-2.5px")) == "-3px"


class TestConversions:

    def test_strip_unit(self):
        assert strip_unit("1046px") == 1046.0
        assert strip_unit(Dimension(3.0, "rem")) == 3.0

    def test_strip_unit_malformed(self):
        with pytest.raises(UnitParseError):
            strip_unit("wide")

    def test_rem_default_base(self):
        assert str(rem("24px")) == "1.5rem"

    def test_rem_custom_base(self):
        assert str(rem("24px", "12px")) == "2rem"

    def test_rem_rejects_other_units(self):
        with pytest.raises(UnitMismatchError):
            rem("2em")

    def test_ensure_unit(self):
        assert ensure_unit(768, "px") == "768px"
        assert ensure_unit("40em", "px") == "40em"
