"""
Blog Generator

Builds the generation prompt from the form fields, and turns an accepted
result into a draft post (HTML body + tags) ready to persist.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Tuple
import html
import logging
import re

from seo_optimizer.llm.client import ApiResult, LLMClient
from seo_optimizer.llm.prompts import build_blog_prompt

logger = logging.getLogger(__name__)

TONES = {
    "professional": "Professional",
    "casual": "Casual",
    "formal": "Formal",
    "friendly": "Friendly",
    "witty": "Witty",
    "informative": "Informative",
    "persuasive": "Persuasive",
}

_H2 = re.compile(r"^##\s+(.*)$")
_H3 = re.compile(r"^###\s+(.*)$")


class DraftError(ValueError):
    """Raised when a draft post cannot be created from the given fields."""


@dataclass
class BlogRequest:
    topic: str
    keywords: str = ""
    tone: str = "professional"
    language: str = "en"
    outline: str = ""


@dataclass
class DraftPost:
    title: str
    content: str                 # markdown as generated
    content_html: str
    language: str = "en"
    tags: List[str] = field(default_factory=list)
    status: str = "draft"


def generate_blog_post(request: BlogRequest, client: LLMClient) -> ApiResult:
    if not request.topic.strip():
        return ApiResult(success=False, error="Blog post topic cannot be empty.")
    tone = request.tone if request.tone in TONES else "professional"
    prompt = build_blog_prompt(
        topic=request.topic.strip(),
        keywords=request.keywords.strip(),
        tone=tone,
        language=request.language,
        outline=request.outline,
    )
    logger.info(f"Generating {tone} blog post on '{request.topic.strip()}'")
    return client.send_prompt(prompt)


def parse_tags(keywords: str) -> List[str]:
    return [t.strip() for t in (keywords or "").split(",") if t.strip()]


def iter_markdown_blocks(content: str) -> List[Tuple[str, str]]:
    """
    Split generated markdown into ("h2"|"h3"|"p", text) blocks.

    Headings stand alone; consecutive non-blank lines form one paragraph with
    their line breaks kept.
    """
    blocks: List[Tuple[str, str]] = []
    para: List[str] = []

    def close_para():
        if para:
            blocks.append(("p", "\n".join(para)))
            para.clear()

    for line in content.replace("\r\n", "\n").replace("\r", "\n").split("\n"):
        m3 = _H3.match(line)
        m2 = None if m3 else _H2.match(line)
        if m2 or m3:
            close_para()
            blocks.append(("h3" if m3 else "h2", (m3 or m2).group(1).strip()))
        elif not line.strip():
            close_para()
        else:
            para.append(line.strip())
    close_para()
    return blocks


def markdown_to_html(content: str) -> str:
    out = []
    for kind, text in iter_markdown_blocks(content):
        if kind == "p":
            out.append("<p>" + "<br />\n".join(html.escape(l) for l in text.split("\n")) + "</p>")
        else:
            out.append(f"<{kind}>{html.escape(text)}</{kind}>")
    return "\n".join(out)


def create_draft(title: str, content: str, language: str = "en", keywords: str = "") -> DraftPost:
    title = (title or "").strip()
    if not title:
        raise DraftError("Post title cannot be empty.")
    if not (content or "").strip():
        raise DraftError("Post content cannot be empty.")
    return DraftPost(
        title=title,
        content=content,
        content_html=markdown_to_html(content),
        language=(language or "en").strip(),
        tags=parse_tags(keywords),
    )


def suggest_title(request: BlogRequest, content: Optional[str] = None) -> str:
    """First H2 of the generated post if any, else the requested topic."""
    for kind, text in iter_markdown_blocks(content or ""):
        if kind == "h2":
            return text
    return request.topic.strip()
