"""
Breakpoint Table
================

Named viewport thresholds consulted by the responsive mixins.

The table is process-wide configuration: it may be replaced until
the first expansion reads it, after which it is sealed.

Usage:
    >>> configure_breakpoints({"tablet": "(min-width: 800px)"}, extend=True)
    >>> get_breakpoints()["tablet"]
    '(min-width: 800px)'
"""

from __future__ import annotations

import json
import logging
import re
import threading
from pathlib import Path
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Union

from .config.settings import DEFAULT_BREAKPOINTS
from .exceptions import BreakpointConfigError

logger = logging.getLogger(__name__)

_FEATURE = r"\(\s*[a-z][a-z-]*\s*(?::\s*[^()\s][^()]*?)?\s*\)"
_PREDICATE_RE = re.compile(rf"^{_FEATURE}(?:\s+and\s+{_FEATURE})*$", re.IGNORECASE)


class BreakpointTable(Mapping):
    """Immutable ordered mapping of breakpoint name → media predicate."""

    def __init__(self, entries: Mapping[str, str]):
        checked = {}
        for name, predicate in entries.items():
            if not isinstance(name, str) or not name.strip():
                raise BreakpointConfigError(f"Breakpoint name must be a non-empty string, got {name!r}")
            if not isinstance(predicate, str) or not _PREDICATE_RE.match(predicate.strip()):
                raise BreakpointConfigError(
                    f"Breakpoint '{name}' is not a media-feature expression",
                    detail=repr(predicate),
                )
            checked[name] = predicate.strip()
        self._entries = MappingProxyType(checked)

    def __getitem__(self, name: str) -> str:
        return self._entries[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"BreakpointTable({dict(self._entries)!r})"


_lock = threading.Lock()
_table = BreakpointTable(DEFAULT_BREAKPOINTS)
_configured = False
_sealed = False


def load_breakpoints_file(path: Union[str, Path]) -> dict:
    """Read a JSON object of ``name: predicate`` pairs."""
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise BreakpointConfigError(f"Cannot read breakpoints file {path}", detail=str(e)) from e

    if not isinstance(data, dict):
        raise BreakpointConfigError(f"Breakpoints file {path} must contain a JSON object")
    return data


def configure_breakpoints(entries: Mapping[str, str], extend: bool = False) -> BreakpointTable:
    """
    Replace the process-wide breakpoint table.

    Args:
        entries: Breakpoint name → media predicate
        extend: Overlay ``entries`` on the current table instead of replacing it

    Raises:
        BreakpointConfigError: If the table was already read, or an entry is malformed
    """
    global _table, _configured

    with _lock:
        if _sealed:
            raise BreakpointConfigError(
                "Breakpoint table is already in use and can no longer be replaced",
                code="BREAKPOINTS_SEALED",
            )
        merged = {**_table, **entries} if extend else dict(entries)
        _table = BreakpointTable(merged)
        _configured = True

    logger.debug(f"Breakpoint table configured: {list(_table)}")
    return _table


def get_breakpoints() -> BreakpointTable:
    """
    Return the active table, sealing it against further changes.

    On first use, a table named by STYLEMIX_BREAKPOINTS_FILE is loaded
    unless one was configured explicitly.
    """
    global _table, _sealed

    if _sealed:
        return _table

    with _lock:
        if not _sealed:
            if not _configured:
                path = _configured_file()
                if path is not None:
                    _table = BreakpointTable(load_breakpoints_file(path))
                    logger.info(f"Breakpoints loaded from {path}")
            _sealed = True
    return _table


def is_sealed() -> bool:
    return _sealed


def reset_breakpoints() -> None:
    """Restore the default table and unseal it (tests only)."""
    global _table, _configured, _sealed

    with _lock:
        _table = BreakpointTable(DEFAULT_BREAKPOINTS)
        _configured = False
        _sealed = False


def _configured_file() -> Optional[Path]:
    from .core.config import get_config

    return get_config().get_path("STYLEMIX_BREAKPOINTS_FILE")
