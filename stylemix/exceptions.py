"""
exceptions.py
=============
STYLEMIX — Hierarchical Exception System

All library exceptions inherit from StylemixError so callers
can catch the full hierarchy with a single except clause when needed.

Structure
---------
StylemixError
├── ValidationError
│   ├── InvalidValueError
│   └── UnitError
│       ├── UnitParseError
│       └── UnitMismatchError
├── ConfigurationError
│   └── BreakpointConfigError
├── MixinNotFoundError
└── RenderError
    ├── TemplateNotFoundError
    └── StylesheetRenderError
"""


# ─── Root ────────────────────────────────────────────────────────────────────

class StylemixError(Exception):
    """Base exception for all STYLEMIX errors."""

    def __init__(self, message: str = "", *, code: str = "", detail: str = ""):
        super().__init__(message)
        self.message = message
        self.code = code          # machine-readable code e.g. "UNIT_PARSE"
        self.detail = detail      # extra context for logging

    def __str__(self) -> str:
        if self.detail:
            return f"{self.message} | {self.detail}"
        return self.message


# ─── Validation ──────────────────────────────────────────────────────────────

class ValidationError(StylemixError):
    """Raised when a mixin parameter fails validation."""

    def __init__(self, message: str = "", *, field: str = "", **kwargs):
        super().__init__(message, **kwargs)
        self.field = field


class InvalidValueError(ValidationError):
    """Raised when a parameter value is outside the accepted set."""

    def __init__(self, field: str, value=None, reason: str = "", **kwargs):
        msg = f"Invalid value for parameter '{field}'"
        if value is not None:
            msg += f": {value!r}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg, field=field, **kwargs)
        self.value = value
        self.reason = reason


class UnitError(ValidationError):
    """Base for dimensioned-value arithmetic failures."""


class UnitParseError(UnitError):
    """Raised when a string is not a single-unit numeric value."""

    def __init__(self, value=None, **kwargs):
        super().__init__(f"Not a dimensioned number: {value!r}", code="UNIT_PARSE", **kwargs)
        self.value = value


class UnitMismatchError(UnitError):
    """Raised when two values with incompatible units are combined."""

    def __init__(self, left: str = "", right: str = "", **kwargs):
        super().__init__(
            f"Incompatible units: '{left}' and '{right}'",
            code="UNIT_MISMATCH",
            **kwargs,
        )
        self.left = left
        self.right = right


# ─── Configuration ───────────────────────────────────────────────────────────

class ConfigurationError(StylemixError):
    """Raised when the library configuration is invalid or incomplete."""


class BreakpointConfigError(ConfigurationError):
    """Raised when the breakpoint table cannot be replaced or is malformed."""


# ─── Expansion ───────────────────────────────────────────────────────────────

class MixinNotFoundError(StylemixError):
    """Raised when no mixin is registered under a given name."""

    def __init__(self, name: str = "", **kwargs):
        super().__init__(f"No mixin registered under name='{name}'", code="MIXIN_NOT_FOUND", **kwargs)
        self.name = name


# ─── Rendering ───────────────────────────────────────────────────────────────

class RenderError(StylemixError):
    """Base for errors raised while rendering stylesheet templates."""


class TemplateNotFoundError(RenderError):
    """Raised when a stylesheet template file cannot be located."""

    def __init__(self, template: str = "", **kwargs):
        super().__init__(f"Stylesheet template not found: '{template}'", **kwargs)
        self.template = template


class StylesheetRenderError(RenderError):
    """Raised when Jinja2 template rendering fails."""
