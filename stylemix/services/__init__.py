"""Services layer: template rendering on top of the mixin registry."""

from .stylesheet_engine import build_environment, render_stylesheet, render_stylesheet_string

__all__ = ["build_environment", "render_stylesheet", "render_stylesheet_string"]
