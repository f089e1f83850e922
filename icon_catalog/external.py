"""
external.py
--------------------
Fallback classification through an external LLM command-line tool.

Icons that no rule matches are sent in a single batch. The reply is free
text that should contain a JSON array; every element is validated against
the closed category set before it may touch the catalog. Failure at any
step (tool missing, timeout, bad exit status, unparsable reply) leaves the
icons uncategorized and the run continues.
"""

from __future__ import annotations

import json
import shutil
import subprocess
from collections.abc import Callable, Collection, Sequence
from dataclasses import dataclass

from pydantic import ValidationError

from .constants import (
    CATEGORY_RULES,
    CLASSIFIER_COMMAND,
    CLASSIFIER_MODEL,
    CLASSIFIER_TIMEOUT_S,
    FALLBACK_CATEGORY,
)
from .exceptions import ExternalClassifierError
from .models import ExternalSuggestion, IconRecord


@dataclass(frozen=True, slots=True)
class ClassifierConfig:
    """Command, model and wall-clock limit for the external classifier."""

    command: str = CLASSIFIER_COMMAND
    model: str = CLASSIFIER_MODEL
    timeout: float = CLASSIFIER_TIMEOUT_S

    def argv(self, prompt: str) -> list[str]:
        """Argument vector; the prompt travels as one opaque argument."""
        return [self.command, "-m", self.model, "-p", prompt, "-o", "text"]


Runner = Callable[[str, ClassifierConfig], str]


def is_available(config: ClassifierConfig) -> bool:
    """True if the classifier command is on PATH."""
    return shutil.which(config.command) is not None


def build_prompt(pending_names: Sequence[str]) -> str:
    """One prompt covering every pending icon and the full category list."""
    category_list = "\n".join(
        f"- {rule.name}: {', '.join(rule.tags)}" for rule in CATEGORY_RULES
    )
    return "\n".join([
        "You are categorizing design system icons for a searchable catalog.",
        "",
        f"Context: A React design system with {len(pending_names)} icon(s) to place,",
        "drawn from an open-source icon library and custom SVGs.",
        "Icons are named in SCREAMING_SNAKE_CASE.",
        "",
        "## Available Categories (use ONLY these, do NOT invent new ones)",
        "",
        category_list,
        "",
        "## Icons to Categorize",
        "",
        "These icons could not be matched by the naming rules. Based on the enum",
        "name, determine what the icon represents and assign the best category.",
        "",
        ", ".join(pending_names),
        "",
        "## Output",
        "",
        "Respond with ONLY a valid JSON array. No markdown fences, no explanation.",
        "",
        '[{"enumName":"ICON_NAME","category":"Category Name","tags":["tag1","tag2","tag3"]}]',
        "",
        "Rules:",
        "- Use ONLY categories from the list above",
        f'- If nothing fits well, use "{FALLBACK_CATEGORY}" as fallback',
        "- 3-5 tags per icon, lowercase, describing purpose and visual appearance",
        "- Every icon in the list MUST appear in the output",
    ])


def run_classifier(prompt: str, config: ClassifierConfig) -> str:
    """
    Invoke the classifier once and return its stdout.

    Raises:
        ExternalClassifierError: timeout, missing executable or non-zero exit.
    """
    try:
        result = subprocess.run(
            config.argv(prompt),
            capture_output=True,
            encoding="utf-8",
            errors="replace",
            timeout=config.timeout,
            check=False,
        )
    except subprocess.TimeoutExpired as exc:
        raise ExternalClassifierError(
            f"{config.command} timed out after {config.timeout:.0f}s"
        ) from exc
    except OSError as exc:
        raise ExternalClassifierError(f"{config.command} could not be started: {exc}") from exc

    if result.returncode != 0:
        stderr = result.stderr.strip()
        raise ExternalClassifierError(
            f"{config.command} exited with status {result.returncode}"
            + (f": {stderr}" if stderr else "")
        )
    return result.stdout


def extract_json_array(raw: str) -> list | None:
    """
    Return the first JSON array embedded in *raw*, ignoring surrounding prose
    or code fences. None if there is no parsable array, or if the reply nests
    deeper than the decoder can follow.
    """
    decoder = json.JSONDecoder()
    start = raw.find("[")
    while start != -1:
        try:
            value, _ = decoder.raw_decode(raw, start)
        except RecursionError:
            return None
        except ValueError:
            value = None
        if isinstance(value, list):
            return value
        start = raw.find("[", start + 1)
    return None


def _label(item: object) -> str:
    if isinstance(item, dict) and isinstance(item.get("enumName"), str):
        return item["enumName"]
    return repr(item)[:40]


def parse_suggestions(raw: str, pending_names: Collection[str]) -> list[ExternalSuggestion]:
    """
    Validate the classifier reply element by element.

    An element is kept only if it has a non-empty ``enumName`` naming a
    pending icon, a ``category`` from the closed set and a list of string
    ``tags``. Everything else is dropped; the first valid suggestion per
    icon wins.
    """
    items = extract_json_array(raw)
    if items is None:
        print("  [WARN] Could not extract a JSON array from the classifier response")
        return []

    pending = set(pending_names)
    accepted: dict[str, ExternalSuggestion] = {}
    for item in items:
        try:
            suggestion = ExternalSuggestion.model_validate(item)
        except ValidationError as exc:
            print(f"  [WARN] Dropped suggestion for {_label(item)}: "
                  f"{exc.error_count()} validation error(s)")
            continue
        if suggestion.enum_name not in pending:
            print(f"  [WARN] Dropped suggestion for {suggestion.enum_name}: not a pending icon")
            continue
        accepted.setdefault(suggestion.enum_name, suggestion)
    return list(accepted.values())


def classify_pending(
    pending: Sequence[IconRecord],
    config: ClassifierConfig | None = None,
    runner: Runner | None = None,
) -> list[ExternalSuggestion]:
    """Classify all pending icons with one external call; [] on any failure."""
    names = [record.enum_name for record in pending]
    if not names:
        return []
    config = config or ClassifierConfig()
    runner = runner or run_classifier

    try:
        raw = runner(build_prompt(names), config)
    except ExternalClassifierError as exc:
        print(f"  [WARN] Classifier call failed: {exc}")
        return []
    return parse_suggestions(raw, names)
