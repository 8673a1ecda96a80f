from __future__ import annotations
from dataclasses import dataclass
import logging

import requests
from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "AI-SEO-Optimizer/0.1.0"


class FetchError(ValueError):
    """Raised when a content URL cannot be retrieved."""


@dataclass
class PageContent:
    url: str
    title: str
    text: str


def html_to_text(html: str) -> str:
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(["script", "style", "noscript"]):
        tag.decompose()
    lines = [line.strip() for line in soup.get_text("\n").split("\n")]
    return "\n".join(line for line in lines if line)


def extract_title(html: str) -> str:
    soup = BeautifulSoup(html, "html.parser")
    if soup.title and soup.title.string:
        return soup.title.string.strip()
    return ""


def fetch_page(url: str, timeout: float = 30.0) -> PageContent:
    try:
        response = requests.get(url, headers={"User-Agent": DEFAULT_USER_AGENT}, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        logger.warning(f"Fetch failed for {url}: {e}")
        raise FetchError(f"Failed to fetch URL: {e}") from e

    body = response.text
    return PageContent(url=url, title=extract_title(body), text=html_to_text(body))
