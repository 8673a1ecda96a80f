"""
Analysis Result Parser & Renderer

Best-effort structural formatting of a model's SEO analysis:
1. Normalize line endings
2. Segment lines into known sections (fuzzy heading recognition)
3. Confidence gate - fall back to raw text when structure is weak
4. Render each section as a list, suggestion box, or prose
"""
from __future__ import annotations

from seo_optimizer.analysis.headings import (
    DEFAULT_REGISTRY,
    HeadingRegistry,
    load_heading_registry,
    match_heading,
)
from seo_optimizer.analysis.parser import (
    SectionAccumulator,
    normalize_line_endings,
    parse_analysis,
)
from seo_optimizer.analysis.renderer import (
    extract_list_items,
    render_analysis,
    render_section,
)
from seo_optimizer.ir import AnalysisView


def format_analysis(text: str, registry: HeadingRegistry = DEFAULT_REGISTRY) -> AnalysisView:
    """Normalize, parse and render a model response in one call."""
    return render_analysis(parse_analysis(text, registry), registry)


__all__ = [
    "DEFAULT_REGISTRY",
    "HeadingRegistry",
    "SectionAccumulator",
    "extract_list_items",
    "format_analysis",
    "load_heading_registry",
    "match_heading",
    "normalize_line_endings",
    "parse_analysis",
    "render_analysis",
    "render_section",
]
