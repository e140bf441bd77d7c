"""Partial calendar dates with clamping, field arithmetic and nil-safe comparisons."""

from __future__ import annotations

from importlib import metadata

try:
    __version__ = metadata.version("partialdate")
except metadata.PackageNotFoundError:
    __version__ = "0.0.0+local"

__all__ = ["__version__"]
