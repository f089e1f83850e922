"""models.py: Pydantic v2 models for catalog records and classifier suggestions."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .constants import UNCATEGORIZED, VALID_CATEGORIES


class IconRecord(BaseModel):
    """One catalog entry, serialized with camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
    )

    enum_name: str = Field(description="Identifier as declared in the icon enum")
    display_name: str = Field(description="Human readable name")
    category: str = Field(description="Closed-set category or the Uncategorized sentinel")
    tags: list[str] = Field(default_factory=list, description="Search tags")
    source: Literal["library", "custom", "unknown"] = Field(
        default="unknown", description="Where the icon is rendered from"
    )
    asset_path: str = Field(description="<category-slug>/<icon-slug>")

    @field_validator("category")
    @classmethod
    def check_category(cls, value: str) -> str:
        if value != UNCATEGORIZED and value not in VALID_CATEGORIES:
            raise ValueError(f"unknown category '{value}'")
        return value

    @property
    def pending(self) -> bool:
        """True while the icon still waits for a category."""
        return self.category == UNCATEGORIZED


class ExternalSuggestion(BaseModel):
    """A category suggestion parsed from the external classifier's reply.

    Strict: no coercion, so a tag list of numbers or a string where a list
    is expected fails validation instead of being patched up. Only the
    camelCase keys of the reply format are accepted.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        strict=True,
    )

    enum_name: str = Field(min_length=1)
    category: str
    tags: list[str]

    @field_validator("category")
    @classmethod
    def check_known_category(cls, value: str) -> str:
        if value not in VALID_CATEGORIES:
            raise ValueError(f"'{value}' is not one of the catalog categories")
        return value
