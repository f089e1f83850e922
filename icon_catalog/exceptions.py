"""
Custom exceptions for the icon catalog generator.
"""

from __future__ import annotations

from pathlib import Path


class CatalogError(Exception):
    """Base exception for catalog generation errors."""

    pass


class EnumNotFoundError(CatalogError):
    """The icon enum source could not be found in any known location."""

    def __init__(self, attempted: list[Path]) -> None:
        self.attempted = attempted
        tried = ", ".join(str(p) for p in attempted)
        super().__init__(f"Could not find icon enum source (tried: {tried})")


class ExternalClassifierError(CatalogError):
    """The external classifier failed this round (timeout, exit status, missing binary)."""

    pass
