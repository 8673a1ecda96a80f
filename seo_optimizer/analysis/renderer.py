"""
Section Renderer

Turns a parsed analysis into presentation-ready blocks, in registry order.
"""
from __future__ import annotations
from typing import List, Optional
import re

from seo_optimizer.analysis.headings import DEFAULT_REGISTRY, HeadingRegistry
from seo_optimizer.ir import (
    PREAMBLE_KEY,
    AnalysisView,
    ListBlock,
    ParseResult,
    ProseBlock,
    RenderedBlock,
    SectionBlock,
    StructuredAnalysis,
    SuggestionBox,
    Unstructured,
)

# "* item", "- item", "1. item" or a bold-led "**Term**: ..." line;
# stripping removes a single "*" only, never the bold markup
_LIST_START = re.compile(r"^\s*(?:\*|-|\d+\.)")
_LIST_MARKER = re.compile(r"^(?:\*(?!\*)|-|\d+\.|\d+(?=\s))\s*")


def looks_like_list(content: str) -> bool:
    return any(_LIST_START.match(line) for line in content.split("\n"))


def extract_list_items(content: str) -> List[str]:
    items = []
    for line in content.split("\n"):
        trimmed = line.strip()
        if not trimmed:
            continue
        items.append(_LIST_MARKER.sub("", trimmed, count=1))
    return items


def render_section(label: str, content: str, registry: HeadingRegistry = DEFAULT_REGISTRY) -> RenderedBlock:
    role = registry.role(label)
    if role == "suggestion":
        return SuggestionBox(text=content)
    if role == "list" and looks_like_list(content):
        items = [i for i in extract_list_items(content) if i]
        if items:
            return ListBlock(items=tuple(items))
    return ProseBlock(text=content)


def render_analysis(result: ParseResult, registry: HeadingRegistry = DEFAULT_REGISTRY) -> AnalysisView:
    if isinstance(result, Unstructured):
        return result

    preamble: Optional[str] = (result.sections.get(PREAMBLE_KEY) or "").strip() or None
    view = StructuredAnalysis(preamble=preamble)
    for label in registry.labels:
        content = (result.sections.get(label) or "").strip()
        if not content:
            continue
        view.blocks.append(SectionBlock(heading=label, block=render_section(label, content, registry)))
    return view
