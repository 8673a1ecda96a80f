"""
Content Analyzer

Collects the content to analyze (pasted text or a fetched URL), asks the model
for a sectioned SEO analysis, and formats the response.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Literal, Optional
import logging

from seo_optimizer.adapters.web_adapter import FetchError, PageContent, fetch_page
from seo_optimizer.analysis import DEFAULT_REGISTRY, HeadingRegistry, format_analysis
from seo_optimizer.ir import AnalysisView
from seo_optimizer.llm.client import LLMClient
from seo_optimizer.llm.prompts import build_analysis_prompt

logger = logging.getLogger(__name__)

ContentSource = Literal["url", "text"]


@dataclass
class AnalysisRequest:
    source: ContentSource = "text"
    url: str = ""
    text: str = ""
    language: str = "en"
    keyword: str = ""
    title: str = ""


@dataclass
class AnalysisOutcome:
    success: bool
    error: Optional[str] = None
    raw_text: str = ""
    view: Optional[AnalysisView] = None


def validate_request(request: AnalysisRequest) -> Optional[str]:
    """Check the form fields that do not need a fetch. Returns an error message or None."""
    if request.source == "url":
        if not request.url.strip():
            return "Please enter a URL."
    elif request.source == "text":
        if not request.text.strip():
            return "Please enter text."
    else:
        return "Invalid source."
    return None


def resolve_content(
    request: AnalysisRequest,
    fetcher: Callable[[str], PageContent] = fetch_page,
) -> PageContent:
    if request.source == "url":
        page = fetcher(request.url.strip())
        if request.title.strip():
            return PageContent(url=page.url, title=request.title.strip(), text=page.text)
        return page
    return PageContent(url="", title=request.title.strip(), text=request.text)


def run_analysis(
    request: AnalysisRequest,
    client: LLMClient,
    registry: HeadingRegistry = DEFAULT_REGISTRY,
    fetcher: Callable[[str], PageContent] = fetch_page,
) -> AnalysisOutcome:
    error = validate_request(request)
    if error:
        return AnalysisOutcome(success=False, error=error)

    try:
        page = resolve_content(request, fetcher)
    except FetchError as e:
        return AnalysisOutcome(success=False, error=str(e))

    if not page.text.strip():
        return AnalysisOutcome(success=False, error="No content to analyze.")
    if not request.keyword.strip():
        return AnalysisOutcome(success=False, error="Please enter a keyword.")

    prompt = build_analysis_prompt(
        language=request.language,
        keyword=request.keyword.strip(),
        title=page.title,
        content=page.text,
    )
    logger.info(f"Requesting SEO analysis for keyword '{request.keyword.strip()}' ({len(page.text)} chars)")
    result = client.send_prompt(prompt)
    if not result.success:
        return AnalysisOutcome(success=False, error=result.error)

    return AnalysisOutcome(
        success=True,
        raw_text=result.data,
        view=format_analysis(result.data, registry),
    )
