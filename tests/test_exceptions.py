# -*- coding: utf-8 -*-
"""
tests/test_exceptions.py
==========================
Tests for the STYLEMIX hierarchical exception system.
"""
import pytest
from stylemix.exceptions import (
    StylemixError,
    ValidationError, InvalidValueError,
    UnitError, UnitParseError, UnitMismatchError,
    ConfigurationError, BreakpointConfigError,
    MixinNotFoundError,
    RenderError, TemplateNotFoundError, StylesheetRenderError,
)


# ── inheritance hierarchy ─────────────────────────────────────────────────────

class TestInheritance:

    def test_all_inherit_from_stylemix_error(self):
        errs = [
            ValidationError, InvalidValueError,
            UnitError, UnitParseError, UnitMismatchError,
            ConfigurationError, BreakpointConfigError,
            MixinNotFoundError,
            RenderError, TemplateNotFoundError, StylesheetRenderError,
        ]
        for err_cls in errs:
            assert issubclass(err_cls, StylemixError), f"{err_cls} must inherit StylemixError"

    def test_unit_errors_chain(self):
        assert issubclass(UnitParseError, UnitError)
        assert issubclass(UnitMismatchError, UnitError)
        assert issubclass(UnitError, ValidationError)

    def test_configuration_errors_chain(self):
        assert issubclass(BreakpointConfigError, ConfigurationError)

    def test_render_errors_chain(self):
        assert issubclass(TemplateNotFoundError, RenderError)
        assert issubclass(StylesheetRenderError, RenderError)


# ── StylemixError attributes ──────────────────────────────────────────────────

class TestStylemixError:

    def test_message_stored(self):
        e = StylemixError("test message")
        assert e.message == "test message"
        assert str(e) == "test message"

    def test_code_and_detail(self):
        e = StylemixError("msg", code="ERR_001", detail="extra info")
        assert e.code == "ERR_001"
        assert str(e) == "msg | extra info"

    def test_defaults(self):
        e = StylemixError()
        assert e.message == ""
        assert e.code == ""
        assert e.detail == ""


# ── concrete error types ───────────────────────────────────────────────────────

class TestConcreteErrors:

    def test_invalid_value_message(self):
        e = InvalidValueError("axis", "diagonal", "expected 'width' or 'height'")
        assert e.field == "axis"
        assert e.value == "diagonal"
        assert "'diagonal'" in str(e)
        assert "expected" in str(e)

    def test_unit_parse_error(self):
        e = UnitParseError("big")
        assert e.code == "UNIT_PARSE"
        assert "'big'" in str(e)

    def test_unit_mismatch_error(self):
        e = UnitMismatchError("14px", "2rem")
        assert e.left == "14px"
        assert e.right == "2rem"
        assert "14px" in str(e) and "2rem" in str(e)

    def test_mixin_not_found(self):
        e = MixinNotFoundError("wobble")
        assert e.name == "wobble"
        assert "wobble" in str(e)

    def test_template_not_found_caught_as_render_error(self):
        with pytest.raises(RenderError):
            raise TemplateNotFoundError("main.css.j2")
