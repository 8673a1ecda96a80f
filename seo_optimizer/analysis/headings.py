"""
Heading Registry & Line Classifier

The registry is the fixed, ordered vocabulary of section titles the analysis
prompt asks the model to use. Order is display order; membership is what the
classifier recognizes.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, Dict, FrozenSet, Optional, Tuple
import logging
import re

import yaml

from seo_optimizer.ir import BlockKind

logger = logging.getLogger(__name__)

DEFAULT_HEADINGS: Tuple[str, ...] = (
    "Keyword Usage",
    "Meta Title Suggestion",
    "Meta Description Suggestion",
    "Readability Assessment",
    "LSI Keywords/Related Terms",
    "SEO Strengths",
    "SEO Weaknesses/Areas for Improvement",
)

DEFAULT_LIST_HEADINGS = frozenset({
    "LSI Keywords/Related Terms",
    "SEO Strengths",
    "SEO Weaknesses/Areas for Improvement",
})

DEFAULT_SUGGESTION_HEADINGS = frozenset({
    "Meta Title Suggestion",
    "Meta Description Suggestion",
})


@dataclass(frozen=True)
class HeadingRegistry:
    """Immutable heading vocabulary plus the presentation role of each label."""
    labels: Tuple[str, ...] = DEFAULT_HEADINGS
    list_headings: FrozenSet[str] = field(default_factory=lambda: DEFAULT_LIST_HEADINGS)
    suggestion_headings: FrozenSet[str] = field(default_factory=lambda: DEFAULT_SUGGESTION_HEADINGS)

    def role(self, label: str) -> BlockKind:
        if label in self.suggestion_headings:
            return "suggestion"
        if label in self.list_headings:
            return "list"
        return "prose"

    def __contains__(self, label: object) -> bool:
        return label in self.labels


DEFAULT_REGISTRY = HeadingRegistry()


@lru_cache(maxsize=256)
def _heading_pattern(label: str) -> re.Pattern:
    # Optional opening bold, the label, then a closing bold and/or colon.
    return re.compile(
        r"^(?:\*\*)?\s*" + re.escape(label) + r"\s*(?:\*\*\s*:?|:(?:\s*\*\*)?)",
        re.IGNORECASE,
    )


def match_heading(line: str, registry: HeadingRegistry = DEFAULT_REGISTRY) -> Optional[Tuple[str, str]]:
    """
    Classify one line.

    Returns (label, remainder) when the trimmed line opens a known section,
    where remainder is the trimmed text after the heading token. Labels are
    tried in registry order and the first match wins.
    """
    trimmed = line.strip()
    if not trimmed:
        return None
    for label in registry.labels:
        m = _heading_pattern(label).match(trimmed)
        if m:
            return label, trimmed[m.end():].strip()
    return None


def registry_from_dict(data: Dict[str, Any]) -> HeadingRegistry:
    labels = tuple(str(h).strip() for h in (data.get("headings") or []) if str(h).strip())
    if not labels:
        return DEFAULT_REGISTRY
    list_headings = frozenset(str(h).strip() for h in (data.get("list_headings") or []))
    suggestion_headings = frozenset(str(h).strip() for h in (data.get("suggestion_headings") or []))
    unknown = (list_headings | suggestion_headings) - set(labels)
    if unknown:
        logger.warning(f"Ignoring role entries for undeclared headings: {sorted(unknown)}")
    return HeadingRegistry(
        labels=labels,
        list_headings=list_headings & set(labels),
        suggestion_headings=suggestion_headings & set(labels),
    )


def load_heading_registry(path: str) -> HeadingRegistry:
    with open(path, "r", encoding="utf-8") as f:
        return registry_from_dict(yaml.safe_load(f) or {})
