"""
rules.py
--------------------
Building blocks of the category rule table.

A Matcher is an anchored test over the raw enum identifier
(e.g. ``WALLET_03``). Exclusions are identifier prefixes that veto a
match, so ``prefix("SEARCH_", exclude=("SEARCH_FILE",))`` matches
``SEARCH_USERS`` but not ``SEARCH_FILE``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

MatchKind = Literal["prefix", "suffix", "exact"]


@dataclass(frozen=True, slots=True)
class Matcher:
    """Case-sensitive anchored predicate over an enum identifier."""

    kind: MatchKind
    text: str
    exclude: tuple[str, ...] = ()

    def __call__(self, enum_name: str) -> bool:
        if self.kind == "prefix":
            hit = enum_name.startswith(self.text)
        elif self.kind == "suffix":
            hit = enum_name.endswith(self.text)
        else:
            hit = enum_name == self.text
        if not hit:
            return False
        return not any(enum_name.startswith(ex) for ex in self.exclude)


def prefix(text: str, exclude: tuple[str, ...] = ()) -> Matcher:
    return Matcher("prefix", text, exclude)


def suffix(text: str) -> Matcher:
    return Matcher("suffix", text)


def exact(*names: str) -> tuple[Matcher, ...]:
    """One exact matcher per name, in the given order."""
    return tuple(Matcher("exact", name) for name in names)


@dataclass(frozen=True, slots=True)
class CategoryRule:
    """A named category, its ordered matchers and its descriptive tags."""

    name: str
    patterns: tuple[Matcher, ...]
    tags: tuple[str, ...]

    def matches(self, enum_name: str) -> bool:
        return any(pattern(enum_name) for pattern in self.patterns)
