"""
Repository-level path configuration.

Uses a class-based approach so the CLI override (``--common-path``) and
tests can redirect where the design-system checkout and the catalog live.

Usage:
    # Default paths
    from icon_catalog.paths import Paths

    common = Paths.collaborator_root()
    catalog = Paths.catalog_path()

    # Custom paths (for testing or alternative checkouts)
    Paths.configure(collaborator_root="/src/common-react", catalog_path="/tmp/icons.json")
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .constants import CATALOG_RELPATH, DEFAULT_COLLABORATOR_DIRNAME


def _default_repo_root() -> Path:
    """The source checkout when running from one, else the working directory."""
    checkout = Path(__file__).resolve().parent.parent
    if (checkout / "pyproject.toml").is_file():
        return checkout
    return Path.cwd()


@dataclass(frozen=True, slots=True)
class PathConfig:
    """Immutable path configuration."""

    repo_root: Path
    collaborator_root: Path
    catalog_path: Path


class Paths:
    """
    Path configuration manager.

    Holds class-level defaults and lets callers override them for one run.
    """

    _repo_root: Path = _default_repo_root()
    _collaborator_root: Path | None = None
    _catalog_path: Path | None = None

    @classmethod
    def configure(
        cls,
        collaborator_root: Path | str | None = None,
        catalog_path: Path | str | None = None,
        repo_root: Path | str | None = None,
    ) -> None:
        """
        Configure custom paths.

        Args:
            collaborator_root: Design-system checkout holding the icon sources
            catalog_path: Where the generated catalog JSON is written
            repo_root: Project root the default catalog and collaborator paths hang off
        """
        if collaborator_root is not None:
            cls._collaborator_root = Path(collaborator_root).resolve()
        if catalog_path is not None:
            cls._catalog_path = Path(catalog_path).resolve()
        if repo_root is not None:
            cls._repo_root = Path(repo_root).resolve()

    @classmethod
    def reset(cls) -> None:
        """Reset to default paths."""
        cls._repo_root = _default_repo_root()
        cls._collaborator_root = None
        cls._catalog_path = None

    @classmethod
    def repo_root(cls) -> Path:
        """Root directory of the repository."""
        return cls._repo_root

    @classmethod
    def collaborator_root(cls) -> Path:
        """Design-system checkout; a sibling of the repository by default."""
        if cls._collaborator_root is not None:
            return cls._collaborator_root
        return cls._repo_root.parent / DEFAULT_COLLABORATOR_DIRNAME

    @classmethod
    def catalog_path(cls) -> Path:
        """Generated catalog JSON."""
        if cls._catalog_path is not None:
            return cls._catalog_path
        return cls._repo_root / CATALOG_RELPATH

    @classmethod
    def get_config(cls) -> PathConfig:
        """Get current path configuration as an immutable dataclass."""
        return PathConfig(
            repo_root=cls.repo_root(),
            collaborator_root=cls.collaborator_root(),
            catalog_path=cls.catalog_path(),
        )
