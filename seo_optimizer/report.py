from __future__ import annotations
from dataclasses import asdict
from typing import Any, Dict, List
import html
import json

from seo_optimizer.ir import AnalysisView, ListBlock, SuggestionBox, Unstructured

RESULT_CSS = """
.ai-seo-result-section { margin-bottom: 20px; padding: 15px; background-color: #fff; border: 1px solid #e0e0e0; border-radius: 4px; }
.ai-seo-result-section h4 { margin-top: 0; margin-bottom: 10px; font-size: 1.1em; color: #2c3338; }
.ai-seo-result-section ul { margin-left: 20px; }
.ai-seo-result-section ul li { margin-bottom: 5px; }
.ai-seo-suggestion-box { padding: 10px; background-color: #f9f9f9; border: 1px dashed #ccc; border-radius: 3px; }
"""

def nl2br(text: str) -> str:
    return "<br />\n".join(html.escape(line) for line in text.split("\n"))

def to_dict(view: AnalysisView) -> Dict[str, Any]:
    if isinstance(view, Unstructured):
        return {"structured": False, "notice": view.notice, "raw_text": view.raw_text}
    return {
        "structured": True,
        "preamble": view.preamble,
        "blocks": [
            {"heading": b.heading, **{k: list(v) if isinstance(v, tuple) else v for k, v in asdict(b.block).items()}}
            for b in view.blocks
        ],
    }

def write_json(path: str, view: AnalysisView) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(to_dict(view), f, ensure_ascii=False, indent=2)

def render_html(view: AnalysisView, include_css: bool = False) -> str:
    parts: List[str] = []
    if include_css:
        parts.append(f"<style>{RESULT_CSS}</style>")
    if isinstance(view, Unstructured):
        parts.append("<h3>Raw Analysis Output</h3>")
        parts.append(f"<p>{html.escape(view.notice)}</p>")
        parts.append(
            '<pre style="white-space: pre-wrap; word-wrap: break-word;">'
            f"{html.escape(view.raw_text)}</pre>"
        )
        return "\n".join(parts)

    if view.preamble:
        parts.append(f"<div>{nl2br(view.preamble)}</div>")
    for section in view.blocks:
        parts.append('<div class="ai-seo-result-section">')
        parts.append(f"<h4>{html.escape(section.heading)}</h4>")
        block = section.block
        if isinstance(block, ListBlock):
            parts.append("<ul>")
            for item in block.items:
                parts.append(f"<li>{nl2br(item)}</li>")
            parts.append("</ul>")
        elif isinstance(block, SuggestionBox):
            parts.append(f'<div class="ai-seo-suggestion-box">{nl2br(block.text)}</div>')
        else:
            parts.append(f"<div>{nl2br(block.text)}</div>")
        parts.append("</div>")
    return "\n".join(parts)

def render_markdown(view: AnalysisView) -> str:
    lines: List[str] = []
    if isinstance(view, Unstructured):
        lines.append("## Raw Analysis Output")
        lines.append("")
        lines.append(f"_{view.notice}_")
        lines.append("")
        lines.append("```")
        lines.append(view.raw_text)
        lines.append("```")
        return "\n".join(lines)

    if view.preamble:
        lines.append(view.preamble)
        lines.append("")
    for section in view.blocks:
        lines.append(f"### {section.heading}")
        lines.append("")
        block = section.block
        if isinstance(block, ListBlock):
            for item in block.items:
                lines.append(f"- {item}")
        elif isinstance(block, SuggestionBox):
            for line in block.text.split("\n"):
                lines.append(f"> {line}")
        else:
            # Two trailing spaces keep single line breaks in markdown
            lines.append("  \n".join(block.text.split("\n")))
        lines.append("")
    return "\n".join(lines).rstrip() + "\n"
