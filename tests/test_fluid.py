"""
tests/test_fluid.py
===================
Covers mixins/fluid.py: fluid(), fluid_dep_height(), fluid_scale().
"""
import pytest

from stylemix.exceptions import InvalidValueError, UnitMismatchError
from stylemix.mixins import fluid, fluid_dep_height, fluid_scale


class TestFluid:

    def test_baseline_is_min_value(self):
        frag = fluid("font-size", "320px", "1366px", "14px", "22px")
        assert frag.declarations[0].property == "font-size"
        assert frag.get("font-size") == "14px"

    def test_interpolation_at_lower_bound(self):
        frag = fluid("font-size", "320px", "1366px", "14px", "22px")
        lower = frag.rules[0]
        assert lower.prelude == "@media screen and (min-width: 320px)"
        assert lower.children[0].value == "calc(14px + 8 * ((100vw - 320px) / 1046))"

    def test_clamped_at_upper_bound(self):
        frag = fluid("font-size", "320px", "1366px", "14px", "22px")
        upper = frag.rules[1]
        assert upper.prelude == "@media screen and (min-width: 1366px)"
        assert [(d.property, d.value) for d in upper.children] == [("font-size", "22px")]

    def test_render(self):
        frag = fluid("font-size", "320px", "1366px", "14px", "22px")
        assert frag.render() == (
            "font-size: 14px;\n"
            "@media screen and (min-width: 320px) {\n"
            "  font-size: calc(14px + 8 * ((100vw - 320px) / 1046));\n"
            "}\n"
            "@media screen and (min-width: 1366px) {\n"
            "  font-size: 22px;\n"
            "}"
        )

    def test_several_properties(self):
        frag = fluid(["padding-top", "padding-bottom"], "320px", "1200px", "10px", "30px")
        assert [d.property for d in frag.declarations] == ["padding-top", "padding-bottom"]
        for rule in frag.rules:
            assert [d.property for d in rule.children] == ["padding-top", "padding-bottom"]

    def test_space_separated_properties(self):
        frag = fluid("margin-left margin-right", "320px", "1200px", "0px", "40px")
        assert len(frag.declarations) == 2

    def test_rem_units(self):
        frag = fluid("font-size", "20rem", "80rem", "1rem", "1.5rem")
        assert frag.rules[0].children[0].value == "calc(1rem + 0.5 * ((100vw - 20rem) / 60))"

    def test_shrinking_values(self):
        frag = fluid("gap", "320px", "1000px", "40px", "20px")
        assert frag.rules[0].children[0].value == "calc(40px + -20 * ((100vw - 320px) / 680))"


class TestFluidDepHeight:

    def test_keyed_off_viewport_height(self):
        frag = fluid_dep_height("padding-top", "500px", "1000px", "20px", "60px")
        lower, upper = frag.rules
        assert lower.prelude == "@media screen and (min-height: 500px)"
        assert lower.children[0].value == "calc(20px + 40 * ((100vh - 500px) / 500))"
        assert upper.prelude == "@media screen and (min-height: 1000px)"

    def test_same_algorithm_as_width(self):
        by_height = fluid_dep_height("top", "1px", "3px", "0px", "2px")
        by_axis = fluid_scale("top", "1px", "3px", "0px", "2px", axis="height")
        assert by_height == by_axis


class TestFluidErrors:

    def test_unknown_axis(self):
        with pytest.raises(InvalidValueError):
            fluid_scale("top", "1px", "3px", "0px", "2px", axis="depth")

    def test_mixed_value_units(self):
        with pytest.raises(UnitMismatchError):
            fluid("font-size", "320px", "1366px", "14px", "2rem")

    def test_mixed_bound_units(self):
        with pytest.raises(UnitMismatchError):
            fluid("font-size", "20em", "1366px", "14px", "22px")

    def test_equal_bounds(self):
        with pytest.raises(InvalidValueError) as exc:
            fluid("font-size", "768px", "768px", "14px", "22px")
        assert exc.value.field == "max_bound"
