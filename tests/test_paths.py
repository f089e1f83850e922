"""Tests for icon_catalog.paths module."""

from __future__ import annotations

from pathlib import Path

import pytest

from icon_catalog import paths as paths_module
from icon_catalog.paths import PathConfig, Paths


class TestPaths:
    """Test cases for the Paths configuration class."""

    def test_default_paths(self, repo_root: Path) -> None:
        paths = Paths.get_config()
        assert paths.repo_root == repo_root
        assert paths.collaborator_root == repo_root.parent / "common-react"
        assert paths.catalog_path == repo_root / "public" / "icons-metadata.json"

    def test_configure_collaborator_root(self, tmp_path: Path) -> None:
        Paths.configure(collaborator_root=tmp_path / "design-system")

        assert Paths.collaborator_root() == tmp_path / "design-system"

    def test_configure_accepts_strings(self, tmp_path: Path) -> None:
        Paths.configure(catalog_path=str(tmp_path / "out.json"))

        assert Paths.catalog_path() == tmp_path / "out.json"

    def test_reset_paths(self, repo_root: Path, tmp_path: Path) -> None:
        Paths.configure(collaborator_root=tmp_path, repo_root=tmp_path)
        Paths.reset()

        assert Paths.repo_root() == repo_root
        assert Paths.collaborator_root().name == "common-react"

    def test_installed_package_uses_working_directory(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        installed = tmp_path / "site-packages" / "icon_catalog" / "paths.py"
        workdir = tmp_path / "frontend"
        workdir.mkdir()
        workdir = workdir.resolve()
        monkeypatch.setattr(paths_module, "__file__", str(installed))
        monkeypatch.chdir(workdir)

        Paths.reset()

        assert Paths.repo_root() == workdir
        assert Paths.catalog_path() == workdir / "public" / "icons-metadata.json"
        assert Paths.collaborator_root() == workdir.parent / "common-react"

    def test_config_is_immutable(self) -> None:
        config = Paths.get_config()
        assert isinstance(config, PathConfig)
        with pytest.raises(AttributeError):
            config.catalog_path = Path("elsewhere.json")
