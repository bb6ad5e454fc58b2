"""
tests/conftest.py
=================
Shared pytest fixtures: every test starts from default settings
and an unsealed default breakpoint table.
"""
import pytest

from stylemix.breakpoints import reset_breakpoints
from stylemix.config.settings import DEFAULT_SETTINGS
from stylemix.core.config import Config


# ─── Isolation (autouse) ─────────────────────────────────────────────────────

@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """No .env, no stylemix.json, no STYLEMIX_* variables from the host."""
    for key in DEFAULT_SETTINGS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)

    Config.clear_instance()
    reset_breakpoints()
    yield
    Config.clear_instance()
    reset_breakpoints()


# ─── Helpers ─────────────────────────────────────────────────────────────────

@pytest.fixture
def red_text():
    """Nested content callback that records how often it was expanded."""
    calls = []

    def content():
        calls.append(1)
        return "color: red;"

    content.calls = calls
    return content
