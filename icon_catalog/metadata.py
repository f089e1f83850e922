"""
metadata.py
--------------------
Catalog assembly: one IconRecord per enum identifier, rule classification,
external fallback for the residual set, summary and JSON output.
"""

from __future__ import annotations

import json
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

from .classifier import classify
from .constants import SOURCE_UNKNOWN, UNCATEGORIZED
from .external import ClassifierConfig, Runner, classify_pending, is_available
from .models import ExternalSuggestion, IconRecord
from .paths import PathConfig, Paths
from .sources import load_icon_enum, load_icon_sources
from .utils import _display_name, _merge_tags, _slugify, _tag_tokens


@dataclass(slots=True)
class CatalogResult:
    """Outcome of one generate_catalog() run."""

    records: list[IconRecord]
    applied: int
    catalog_path: Path


def asset_path_for(category: str, enum_name: str) -> str:
    """Layout: <category-slug>/<icon-slug>"""
    return f"{_slugify(category)}/{_slugify(enum_name)}"


def synthesize_tags(enum_name: str, category: str, category_tags: Iterable[str] = ()) -> list[str]:
    """Category tags, then name words, then the category name itself."""
    return _merge_tags(category_tags, _tag_tokens(enum_name), [category.lower()])


def build_metadata(enum_name: str, source_map: dict[str, str]) -> IconRecord:
    """Assemble the catalog record for one identifier."""
    rule = classify(enum_name)
    category = rule.name if rule else UNCATEGORIZED
    category_tags = rule.tags if rule else ()

    return IconRecord(
        enum_name=enum_name,
        display_name=_display_name(enum_name),
        category=category,
        tags=synthesize_tags(enum_name, category, category_tags),
        source=source_map.get(enum_name, SOURCE_UNKNOWN),
        asset_path=asset_path_for(category, enum_name),
    )


def build_catalog(enum_names: Iterable[str], source_map: dict[str, str]) -> list[IconRecord]:
    """Records in enumeration order; repeated identifiers keep their first entry."""
    records: list[IconRecord] = []
    seen: set[str] = set()
    for enum_name in enum_names:
        if enum_name in seen:
            print(f"  [WARN] Duplicate enum entry {enum_name} skipped")
            continue
        seen.add(enum_name)
        records.append(build_metadata(enum_name, source_map))
    return records


def pending_records(records: Iterable[IconRecord]) -> list[IconRecord]:
    """Icons no rule could place, in catalog order."""
    return [record for record in records if record.pending]


def apply_suggestions(records: Sequence[IconRecord], suggestions: Iterable[ExternalSuggestion]) -> int:
    """
    Apply validated suggestions to pending records in place.
    Records that already have a category are never overwritten.
    Returns the number of records updated.
    """
    by_name = {record.enum_name: record for record in records}
    applied = 0
    for suggestion in suggestions:
        record = by_name.get(suggestion.enum_name)
        if record is None or not record.pending:
            continue
        record.category = suggestion.category
        record.tags = synthesize_tags(record.enum_name, suggestion.category, suggestion.tags)
        record.asset_path = asset_path_for(suggestion.category, record.enum_name)
        applied += 1
    return applied


def resolve_pending(
    records: Sequence[IconRecord],
    config: ClassifierConfig | None = None,
    runner: Runner | None = None,
) -> int:
    """Send the residual set to the external classifier once; return updates applied."""
    pending = pending_records(records)
    if not pending:
        return 0

    config = config or ClassifierConfig()
    print(f"\n{len(pending)} uncategorized icon(s), requesting external categorization...")
    if not is_available(config):
        print(f"  [WARN] {config.command} not available, icons remain uncategorized")
        return 0

    suggestions = classify_pending(pending, config, runner)
    if not suggestions:
        print("  Classifier returned no valid suggestions")
        return 0

    applied = apply_suggestions(records, suggestions)
    print(f"  Applied {applied}/{len(pending)} classifier suggestions")
    return applied


def category_counts(records: Iterable[IconRecord]) -> list[tuple[str, int]]:
    """(category, count) pairs, largest first; ties by name."""
    counts = Counter(record.category for record in records)
    return sorted(counts.items(), key=lambda kv: (-kv[1], kv[0]))


def unresolved(records: Iterable[IconRecord]) -> list[IconRecord]:
    return [record for record in records if record.category == UNCATEGORIZED]


def write_catalog(records: Sequence[IconRecord], catalog_path: Path) -> None:
    """Write the catalog as a camelCase JSON array, in record order."""
    payload = [record.model_dump(by_alias=True) for record in records]
    catalog_path.parent.mkdir(parents=True, exist_ok=True)
    with open(catalog_path, "w", encoding="utf-8") as fh:
        json.dump(payload, fh, indent=2, ensure_ascii=False)
        fh.write("\n")


def generate_catalog(
    paths: PathConfig | None = None,
    config: ClassifierConfig | None = None,
    runner: Runner | None = None,
) -> CatalogResult:
    """
    Run the whole pipeline and write the catalog.

    Raises:
        EnumNotFoundError: the icon enum could not be located.
    """
    paths = paths or Paths.get_config()

    enum_names = load_icon_enum(paths)
    print(f"Found {len(enum_names)} icon enum entries")

    source_map = load_icon_sources(paths)
    print(f"Mapped {len(source_map)} icons to sources")

    records = build_catalog(enum_names, source_map)
    applied = resolve_pending(records, config, runner)

    write_catalog(records, paths.catalog_path)
    return CatalogResult(records=records, applied=applied, catalog_path=paths.catalog_path)


def print_summary(result: CatalogResult) -> None:
    """Per-category counts and the icons still uncategorized."""
    print(f"\n{'=' * 60}")
    print("  Categories:")
    for category, count in category_counts(result.records):
        print(f"    {category:<24} {count:>4}")

    remaining = unresolved(result.records)
    if remaining:
        print(f"\n  WARNING: {len(remaining)} icon(s) still uncategorized:")
        for record in remaining:
            print(f"    - {record.enum_name}")

    print(f"\n  Icons     : {len(result.records)}")
    print(f"  Catalog   : {result.catalog_path}")
    print(f"{'=' * 60}")
