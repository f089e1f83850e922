"""
utils.py
--------------------
Pure helper utilities shared across modules.
No third-party dependencies, stdlib only.
"""

import re
from collections.abc import Iterable

_PADDED_DIGIT_RE = re.compile(r"\b0(\d)\b")


def _display_name(enum_name: str) -> str:
    """Convert SCREAMING_SNAKE_CASE to a Title Case display name.

      "WALLET_03"        -> "Wallet 3"
      "ARROW_LEFT_01"    -> "Arrow Left 1"
      "AI_CHAT_BUBBLE"   -> "Ai Chat Bubble"
    """
    words = enum_name.split("_")
    joined = " ".join(w[:1].upper() + w[1:].lower() for w in words)
    return _PADDED_DIGIT_RE.sub(r"\1", joined)


def _slugify(text: str) -> str:
    """Lowercase and turn underscores into hyphens: 'WALLET_03' → 'wallet-03'."""
    return text.lower().replace("_", "-")


def _tag_tokens(enum_name: str) -> list[str]:
    """Name-derived tags: lowercase words, minus one-letter and numeric ones."""
    return [
        word
        for word in enum_name.lower().split("_")
        if len(word) > 1 and not word.isdigit()
    ]


def _merge_tags(*groups: Iterable[str]) -> list[str]:
    """
    Ordered, case-insensitive union of tag groups.
      ["money", "Wallet"], ["wallet"], ["finance"] -> ["money", "wallet", "finance"]
    """
    seen: set[str] = set()
    tags: list[str] = []
    for group in groups:
        for tag in group:
            tag = tag.strip().lower()
            if tag and tag not in seen:
                seen.add(tag)
                tags.append(tag)
    return tags
