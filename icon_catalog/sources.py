"""
sources.py
--------------------
Reading the design-system sources that feed the catalog:
  - the icon enum   (ordered list of identifiers)
  - the Icon component (which identifiers render from the icon library
    and which from custom assets)

Parsing is tolerant: anything that does not look like an entry is
skipped, never reported as an error.
"""

from __future__ import annotations

import re

from .constants import (
    ASSETS_IMPORT_PREFIX,
    ENUM_PACKAGE_RELPATH,
    ENUM_SOURCE_RELPATH,
    ENUM_TYPE_NAME,
    ICON_COMPONENT_RELPATH,
    ICON_LIBRARY_PACKAGE,
    SOURCE_CUSTOM,
    SOURCE_LIBRARY,
)
from .exceptions import EnumNotFoundError
from .paths import PathConfig

# `  WALLET_03 = 'WALLET_03',`  or  `WALLET_03 = "WALLET_03"`
_ENUM_ENTRY_RE = re.compile(r"""^\s*(\w+)\s*=\s*(['"])(\w+)\2""")

# import { Home01Icon, Search01Icon as SearchIcon } from 'hugeicons-react';
_LIBRARY_IMPORT_RE = re.compile(
    r"""import\s*\{([^}]+)\}\s*from\s*(['"])"""
    + re.escape(ICON_LIBRARY_PACKAGE)
    + r"""\2"""
)

# import WalletIcon from 'assets/icons/Wallet';
_CUSTOM_IMPORT_RE = re.compile(
    r"""import\s+(\w+)\s+from\s+(['"])"""
    + re.escape(ASSETS_IMPORT_PREFIX)
    + r"""([^'"]+)\2"""
)

# [IconEnum.WALLET_03]: WalletIcon
_MAPPING_RE = re.compile(r"\[" + re.escape(ENUM_TYPE_NAME) + r"\.(\w+)\]\s*:\s*(\w+)")


def parse_icon_enum(content: str) -> list[str]:
    """Return self-named enum members (``NAME = "NAME"``) in file order."""
    entries: list[str] = []
    for line in content.splitlines():
        m = _ENUM_ENTRY_RE.match(line)
        if m and m.group(1) == m.group(3):
            entries.append(m.group(1))
    return entries


def _imported_names(clause: str) -> list[str]:
    """Local names bound by a named-import clause ('A, B as C' → ['A', 'C'])."""
    names: list[str] = []
    for part in clause.split(","):
        part = part.strip()
        if not part:
            continue
        if part.startswith("type "):
            part = part[len("type "):].strip()
        local = part.split(" as ")[-1].strip()
        if local:
            names.append(local)
    return names


def parse_icon_sources(content: str) -> dict[str, str]:
    """
    Map enum names to their rendering source ('library' or 'custom').

    Enum entries whose imported symbol comes from neither the icon library
    nor the assets folder are left out.
    """
    library: set[str] = set()
    for m in _LIBRARY_IMPORT_RE.finditer(content):
        library.update(_imported_names(m.group(1)))

    custom = {m.group(1) for m in _CUSTOM_IMPORT_RE.finditer(content)}

    source_map: dict[str, str] = {}
    for m in _MAPPING_RE.finditer(content):
        enum_name, symbol = m.group(1), m.group(2)
        if symbol in library:
            source_map[enum_name] = SOURCE_LIBRARY
        elif symbol in custom:
            source_map[enum_name] = SOURCE_CUSTOM
    return source_map


def load_icon_enum(config: PathConfig) -> list[str]:
    """
    Read the icon enum from the design-system checkout, falling back to the
    installed package's type declarations.

    Raises:
        EnumNotFoundError: neither location holds the enum file.
    """
    candidates = [
        config.collaborator_root / ENUM_SOURCE_RELPATH,
        config.repo_root / ENUM_PACKAGE_RELPATH,
    ]
    for path in candidates:
        if path.is_file():
            print(f"Reading enum from {path}")
            return parse_icon_enum(path.read_text(encoding="utf-8"))
    raise EnumNotFoundError(candidates)


def load_icon_sources(config: PathConfig) -> dict[str, str]:
    """Read the Icon component; a missing file yields an empty map."""
    path = config.collaborator_root / ICON_COMPONENT_RELPATH
    if not path.is_file():
        print(f"  [WARN] Icon component not found at {path}; all sources set to 'unknown'")
        return {}
    return parse_icon_sources(path.read_text(encoding="utf-8"))
