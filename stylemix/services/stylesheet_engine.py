# services/stylesheet_engine.py
"""
Jinja2 front end: every registered mixin is a template global, so
stylesheet templates can include mixins the way a preprocessor would.

    .arrow::after {
      {{ cssTriangle("#333", "down") }}
    }
    .title {
      {% call respond("small") %}
        font-size: 2rem;
      {% endcall %}
    }
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Union

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError, TemplateNotFound

from ..exceptions import StylemixError, StylesheetRenderError, TemplateNotFoundError
from ..registry import CONTENT_MIXINS, MIXINS, resolve_mixin
from ..units import rem, strip_unit

logger = logging.getLogger(__name__)


def _template_mixin(func: Callable) -> Callable[..., str]:
    """Adapt a mixin so a template can call it, with or without {% call %}."""

    def call(*args, caller=None, **kwargs):
        if caller is not None:
            if func not in CONTENT_MIXINS:
                raise TypeError(f"{func.__name__}() does not take a content block")
            kwargs["content"] = caller
        return func(*args, **kwargs).render()

    call.__name__ = func.__name__
    return call


def _mixin_by_name(name: str, *args, caller=None, **kwargs) -> str:
    return _template_mixin(resolve_mixin(name))(*args, caller=caller, **kwargs)


def template_globals() -> Dict[str, Any]:
    """Names exposed to every stylesheet template."""
    names = {
        name: _template_mixin(func)
        for name, func in MIXINS.items()
        if name.isidentifier()
    }
    names["mixin"] = _mixin_by_name
    return names


def build_environment(template_dir: Optional[Union[str, Path]] = None) -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(template_dir)) if template_dir else None,
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
        keep_trailing_newline=True,
    )
    env.globals.update(template_globals())
    env.filters["rem"] = lambda value, base=16: str(rem(value, base))
    env.filters["strip_unit"] = strip_unit
    return env


def render_stylesheet_string(source: str, **ctx) -> str:
    """Render stylesheet template text."""
    try:
        return build_environment().from_string(source).render(**ctx)
    except StylemixError:
        raise
    except (TemplateError, TypeError, ValueError) as e:
        raise StylesheetRenderError(f"Jinja2 render failed for <string>: {e}") from e


def render_stylesheet(path: Union[str, Path], template_dir: Optional[Union[str, Path]] = None, **ctx) -> str:
    """
    Render a stylesheet template file.

    Args:
        path: Template file, absolute or relative to ``template_dir``
        template_dir: Search directory (default: the file's own directory)
    """
    path = Path(path)
    if template_dir is None:
        template_dir, name = path.parent, path.name
    else:
        name = path.as_posix()

    env = build_environment(template_dir)
    try:
        tpl = env.get_template(name)
    except TemplateNotFound as e:
        raise TemplateNotFoundError(str(path)) from e
    except TemplateError as e:
        raise StylesheetRenderError(f"Jinja2 could not load {path}: {e}") from e

    logger.debug(f"Rendering stylesheet {path}")
    try:
        return tpl.render(**ctx)
    except StylemixError:
        raise
    except (TemplateError, TypeError, ValueError) as e:
        raise StylesheetRenderError(f"Jinja2 render failed for {path}: {e}") from e
