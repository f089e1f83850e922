"""
classifier.py
--------------------
Rule-based classification of icon enum identifiers.

Rules from CATEGORY_RULES are tried in declared order, and within a rule
its patterns in declared order. The first rule with a matching pattern
wins; no match means the icon is left for the external classifier.
"""

from __future__ import annotations

from .constants import CATEGORY_RULES
from .rules import CategoryRule


def classify(enum_name: str) -> CategoryRule | None:
    """Return the first matching rule, or None if no rule matches."""
    for rule in CATEGORY_RULES:
        if rule.matches(enum_name):
            return rule
    return None
