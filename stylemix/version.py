"""
version.py — STYLEMIX
======================
Single source of truth for the release number.
Used by:
  - pyproject.toml (dynamic version)
  - the CLI --version flag
"""

APP_NAME = "STYLEMIX"
VERSION = "1.0.0"
