"""Tests for icon_catalog.sources module."""

from __future__ import annotations

from pathlib import Path

import pytest

from icon_catalog.exceptions import EnumNotFoundError
from icon_catalog.paths import Paths
from icon_catalog.sources import (
    load_icon_enum,
    load_icon_sources,
    parse_icon_enum,
    parse_icon_sources,
)


class TestParseIconEnum:
    """Test cases for parse_icon_enum function."""

    def test_single_and_double_quotes(self) -> None:
        content = "  WALLET_03 = 'WALLET_03',\n  VISA = \"VISA\",\n"
        assert parse_icon_enum(content) == ["WALLET_03", "VISA"]

    def test_file_order_preserved(self) -> None:
        content = "B = 'B',\nA = 'A',\nC = 'C'\n"
        assert parse_icon_enum(content) == ["B", "A", "C"]

    def test_mismatched_value_skipped(self) -> None:
        assert parse_icon_enum("ALIAS = 'OTHER',\n") == []

    def test_mixed_quotes_skipped(self) -> None:
        assert parse_icon_enum("NAME = 'NAME\",\n") == []

    def test_non_entries_ignored(self) -> None:
        content = (
            "export enum IconEnum {\n"
            "  // COMMENTED = 'COMMENTED'\n"
            "  HOME_01 = 'HOME_01',\n"
            "}\n"
        )
        assert parse_icon_enum(content) == ["HOME_01"]

    def test_declaration_file_format(self) -> None:
        content = 'export declare enum IconEnum {\n    MORE = "MORE",\n}\n'
        assert parse_icon_enum(content) == ["MORE"]


class TestParseIconSources:
    """Test cases for parse_icon_sources function."""

    def test_library_and_custom(self) -> None:
        content = (
            "import { Home01Icon, Wallet03Icon } from 'hugeicons-react';\n"
            "import ZydonLogo from 'assets/brand/ZydonLogo';\n"
            "const ICONS = {\n"
            "  [IconEnum.HOME_01]: Home01Icon,\n"
            "  [IconEnum.WALLET_03]: Wallet03Icon,\n"
            "  [IconEnum.ZYDON]: ZydonLogo,\n"
            "};\n"
        )
        assert parse_icon_sources(content) == {
            "HOME_01": "library",
            "WALLET_03": "library",
            "ZYDON": "custom",
        }

    def test_multiline_import_with_alias(self) -> None:
        content = (
            'import {\n  Search01Icon as SearchIcon,\n  StarIcon,\n} from "hugeicons-react";\n'
            "[IconEnum.SEARCH_USERS]: SearchIcon\n"
            "[IconEnum.STAR]: StarIcon\n"
        )
        assert parse_icon_sources(content) == {"SEARCH_USERS": "library", "STAR": "library"}

    def test_unknown_symbol_left_out(self) -> None:
        content = (
            "import Other from './local/Other';\n"
            "[IconEnum.OTHER]: Other\n"
        )
        assert parse_icon_sources(content) == {}

    def test_other_packages_ignored(self) -> None:
        content = (
            "import { Box } from '@mui/material';\n"
            "[IconEnum.BOX]: Box\n"
        )
        assert parse_icon_sources(content) == {}


class TestLoadSources:
    """Test cases for the file loaders."""

    def test_load_enum_from_checkout(self, configured_paths) -> None:
        assert load_icon_enum(configured_paths) == [
            "WALLET_03", "SEARCH_FILE", "ARROW_LEFT_01", "UNKNOWN_WIDGET_99",
        ]

    def test_load_enum_falls_back_to_package(self, tmp_path: Path) -> None:
        repo = tmp_path / "repo"
        dts = repo / "node_modules" / "@zydon" / "common" / "dist" / "types" / "icon.d.ts"
        dts.parent.mkdir(parents=True)
        dts.write_text('export declare enum IconEnum {\n    VISA = "VISA",\n}\n', encoding="utf-8")
        Paths.configure(collaborator_root=tmp_path / "missing", repo_root=repo)

        assert load_icon_enum(Paths.get_config()) == ["VISA"]

    def test_missing_enum_names_attempted_paths(self, tmp_path: Path) -> None:
        Paths.configure(collaborator_root=tmp_path / "missing", repo_root=tmp_path / "repo")

        with pytest.raises(EnumNotFoundError) as excinfo:
            load_icon_enum(Paths.get_config())

        assert len(excinfo.value.attempted) == 2
        assert "icon.ts" in str(excinfo.value)
        assert "icon.d.ts" in str(excinfo.value)

    def test_load_sources(self, configured_paths) -> None:
        assert load_icon_sources(configured_paths) == {
            "WALLET_03": "library",
            "ARROW_LEFT_01": "library",
            "SEARCH_FILE": "custom",
        }

    def test_missing_component_is_empty(self, tmp_path: Path) -> None:
        Paths.configure(collaborator_root=tmp_path / "missing")

        assert load_icon_sources(Paths.get_config()) == {}
