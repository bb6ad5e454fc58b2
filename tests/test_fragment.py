"""
tests/test_fragment.py
======================
Covers fragment.py: node model, content coercion and rendering.
"""
import pytest

from stylemix.fragment import ABSENT, Declaration, Raw, Rule, StyleFragment, as_fragment, declarations


class TestDeclaration:

    def test_values_become_strings(self):
        assert Declaration("opacity", 0.5).value == "0.5"
        assert Declaration("z-index", 10).value == "10"

    def test_absent_is_kept(self):
        decl = Declaration("transform", ABSENT)
        assert decl.value is ABSENT
        assert decl.is_absent

    def test_absent_is_falsy_singleton(self):
        assert not ABSENT
        assert repr(ABSENT) == "ABSENT"


class TestStyleFragment:

    def test_concatenation_keeps_order(self):
        frag = declarations(("width", "1px")) + declarations(("height", "2px"))
        assert [d.property for d in frag.declarations] == ["width", "height"]

    def test_get_returns_last_value(self):
        frag = declarations(("background", "#fff"), ("background", "linear-gradient(#fff, #000)"))
        assert frag.values("background") == ["#fff", "linear-gradient(#fff, #000)"]
        assert frag.get("background") == "linear-gradient(#fff, #000)"
        assert frag.get("color") is None

    def test_nested_iterables_are_flattened(self):
        frag = StyleFragment([[Declaration("a", "1"), None], StyleFragment.of(Declaration("b", "2"))])
        assert len(frag) == 2

    def test_equality(self):
        assert declarations(("a", "1")) == declarations(("a", "1"))
        assert declarations(("a", "1")) != declarations(("a", "2"))

    def test_unsupported_content(self):
        with pytest.raises(TypeError):
            StyleFragment([object()])


class TestRender:

    def test_nested_rule(self):
        frag = StyleFragment.of(
            Declaration("width", "10px"),
            Rule("&:hover", [Declaration("color", "red")]),
        )
        assert frag.render() == "width: 10px;\n&:hover {\n  color: red;\n}"

    def test_absent_declaration_omitted(self):
        frag = StyleFragment.of(Declaration("opacity", "1"), Declaration("transform", ABSENT))
        assert frag.render() == "opacity: 1;"

    def test_raw_text_is_reindented(self):
        rule = Rule("@media print", [Raw("\n        color: black;\n        background: none;\n")])
        assert StyleFragment.of(rule).render() == (
            "@media print {\n  color: black;\n  background: none;\n}"
        )

    def test_str_is_render(self):
        frag = declarations(("width", "1px"))
        assert str(frag) == frag.render()


class TestAsFragment:

    def test_callback(self):
        assert as_fragment(lambda: "color: red;") == StyleFragment.of(Raw("color: red;"))

    def test_fragment_passthrough(self):
        frag = declarations(("a", "1"))
        assert as_fragment(frag) is frag

    def test_none_is_empty(self):
        assert len(as_fragment(None)) == 0

    def test_blank_string_is_empty(self):
        assert len(as_fragment("   ")) == 0
