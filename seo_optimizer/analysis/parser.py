"""
Analysis Parser

Segments a free-form model response into the sections named by a
HeadingRegistry, then applies the confidence gate that decides whether the
segmentation is trusted or the raw text is shown instead.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set
import logging

from seo_optimizer.analysis.headings import DEFAULT_REGISTRY, HeadingRegistry, match_heading
from seo_optimizer.ir import PREAMBLE_KEY, ParseResult, Structured, Unstructured

logger = logging.getLogger(__name__)

# Distinct headings required before the segmentation is trusted
MIN_HEADINGS = 2


def normalize_line_endings(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


@dataclass
class OpenSection:
    key: str
    buffer: List[str] = field(default_factory=list)


class SectionAccumulator:
    """
    Two-state line scanner.

    `state` is None while no section is open (lines go to the preamble) and an
    OpenSection once a heading has been seen. All writes into `sections` go
    through _flush().
    """

    def __init__(self, registry: HeadingRegistry = DEFAULT_REGISTRY):
        self.registry = registry
        self.state: Optional[OpenSection] = None
        self.sections: Dict[str, str] = {}
        self.matched: Set[str] = set()
        self._preamble: List[str] = []

    def _flush(self, key: str, buffer: List[str]) -> None:
        content = "".join(buffer) if key == PREAMBLE_KEY else "\n".join(buffer)
        content = content.strip()
        if not content:
            return
        # A repeated heading replaces the earlier content
        self.sections[key] = content

    def feed(self, line: str) -> None:
        hit = match_heading(line, self.registry)
        if hit is not None:
            label, remainder = hit
            if self.state is None:
                self._flush(PREAMBLE_KEY, self._preamble)
            else:
                self._flush(self.state.key, self.state.buffer)
            self.state = OpenSection(key=label, buffer=[remainder])
            self.matched.add(label)
        elif self.state is not None:
            self.state.buffer.append(line)
        else:
            self._preamble.append(line + "\n")

    def finish(self) -> Dict[str, str]:
        if self.state is None:
            self._flush(PREAMBLE_KEY, self._preamble)
        else:
            self._flush(self.state.key, self.state.buffer)
        return self.sections


def segment(text: str, registry: HeadingRegistry = DEFAULT_REGISTRY) -> SectionAccumulator:
    acc = SectionAccumulator(registry)
    for line in text.split("\n"):
        acc.feed(line)
    acc.finish()
    return acc


def parse_analysis(text: str, registry: HeadingRegistry = DEFAULT_REGISTRY) -> ParseResult:
    """
    Parse a model response into sections.

    Returns Structured when at least MIN_HEADINGS distinct headings were found
    and something non-blank was collected, Unstructured (the normalized text,
    verbatim) otherwise. Never raises.

    A blank preamble is never stored, so it cannot keep an otherwise empty
    result structured.
    """
    normalized = normalize_line_endings(text or "")
    acc = segment(normalized, registry)
    found = len(acc.matched)
    if found < MIN_HEADINGS or not acc.sections:
        logger.debug(f"Falling back to raw output ({found} heading(s) matched)")
        return Unstructured(raw_text=normalized)
    logger.debug(f"Parsed {len(acc.sections)} section(s) from {found} heading(s)")
    return Structured(sections=dict(acc.sections), headings_found=found)
