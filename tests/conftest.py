"""Pytest configuration and shared fixtures for the icon catalog."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make main.py and the icon_catalog package importable from a plain checkout
REPO_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(REPO_ROOT))

from icon_catalog.paths import Paths  # noqa: E402

ICON_ENUM_TS = """\
export enum IconEnum {
  WALLET_03 = 'WALLET_03',
  SEARCH_FILE = "SEARCH_FILE",
  ARROW_LEFT_01 = 'ARROW_LEFT_01',
  UNKNOWN_WIDGET_99 = 'UNKNOWN_WIDGET_99',
  // not an entry
  ALIAS = 'SOMETHING_ELSE',
}
"""

ICON_COMPONENT_TSX = """\
import React from 'react';
import {
  Wallet03Icon,
  ArrowLeft01Icon as ArrowLeftIcon,
} from 'hugeicons-react';
import SearchFileIcon from 'assets/icons/SearchFile';

const ICONS = {
  [IconEnum.WALLET_03]: Wallet03Icon,
  [IconEnum.ARROW_LEFT_01]: ArrowLeftIcon,
  [IconEnum.SEARCH_FILE]: SearchFileIcon,
};
"""


@pytest.fixture
def repo_root() -> Path:
    """Return the repository root path."""
    return REPO_ROOT


@pytest.fixture(autouse=True)
def reset_paths():
    """Keep Paths overrides from leaking between tests."""
    Paths.reset()
    yield
    Paths.reset()


@pytest.fixture
def collaborator_root(tmp_path: Path) -> Path:
    """A minimal design-system checkout with an enum and an Icon component."""
    root = tmp_path / "common-react"
    enum_file = root / "src" / "types" / "icon.ts"
    enum_file.parent.mkdir(parents=True)
    enum_file.write_text(ICON_ENUM_TS, encoding="utf-8")

    component = root / "src" / "components" / "Icon" / "index.tsx"
    component.parent.mkdir(parents=True)
    component.write_text(ICON_COMPONENT_TSX, encoding="utf-8")
    return root


@pytest.fixture
def configured_paths(tmp_path: Path, collaborator_root: Path):
    """Paths pointed at the fake checkout, with the catalog under tmp_path."""
    Paths.configure(
        collaborator_root=collaborator_root,
        catalog_path=tmp_path / "public" / "icons-metadata.json",
        repo_root=tmp_path / "repo",
    )
    return Paths.get_config()
