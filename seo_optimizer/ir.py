from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Literal, Optional, Tuple, Union

PREAMBLE_KEY = "Preamble"

RAW_OUTPUT_NOTICE = "Could not parse the analysis into sections. Displaying raw output:"

BlockKind = Literal["list", "suggestion", "prose"]

@dataclass(frozen=True)
class Structured:
    sections: Dict[str, str]   # heading label (or PREAMBLE_KEY) -> trimmed content
    headings_found: int        # distinct headings matched during the scan

@dataclass(frozen=True)
class Unstructured:
    raw_text: str              # normalized document, verbatim
    notice: str = RAW_OUTPUT_NOTICE

ParseResult = Union[Structured, Unstructured]

@dataclass(frozen=True)
class ListBlock:
    items: Tuple[str, ...]
    kind: BlockKind = "list"

@dataclass(frozen=True)
class SuggestionBox:
    text: str
    kind: BlockKind = "suggestion"

@dataclass(frozen=True)
class ProseBlock:
    text: str                  # line breaks preserved
    kind: BlockKind = "prose"

RenderedBlock = Union[ListBlock, SuggestionBox, ProseBlock]

@dataclass(frozen=True)
class SectionBlock:
    heading: str
    block: RenderedBlock

@dataclass
class StructuredAnalysis:
    preamble: Optional[str] = None
    blocks: List[SectionBlock] = field(default_factory=list)

    def headings(self) -> List[str]:
        return [b.heading for b in self.blocks]

AnalysisView = Union[StructuredAnalysis, Unstructured]
