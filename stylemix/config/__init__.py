"""Static defaults for STYLEMIX (see core/config.py for the live values)."""

from .settings import DEFAULT_SETTINGS, DEFAULT_BREAKPOINTS

__all__ = ["DEFAULT_SETTINGS", "DEFAULT_BREAKPOINTS"]
