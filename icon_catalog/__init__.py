"""
icon_catalog package - icon metadata catalog generator.

Public API:
    classifier  - Rule-based category classification
    constants   - Category rule table and shared constants
    exceptions  - Error hierarchy
    external    - External LLM classifier fallback
    metadata    - Catalog assembly and output
    models      - Pydantic record / suggestion models
    paths       - Repository and collaborator path configuration
    rules       - Matcher predicates and CategoryRule
    sources     - Icon enum and Icon component parsing
    utils       - Name normalization and tag helpers
"""

from . import (
    classifier,
    constants,
    exceptions,
    external,
    metadata,
    models,
    paths,
    rules,
    sources,
    utils,
)

__all__ = [
    "classifier",
    "constants",
    "exceptions",
    "external",
    "metadata",
    "models",
    "paths",
    "rules",
    "sources",
    "utils",
]
