from __future__ import annotations
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional
import logging
import os

import yaml

from seo_optimizer.analysis.headings import DEFAULT_REGISTRY, HeadingRegistry, load_heading_registry
from seo_optimizer.llm.client import LLMConfig

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_PATH = "seo_optimizer.yml"


@dataclass
class Settings:
    api_key: str = ""
    model: str = "claude-sonnet-4-20250514"
    max_tokens: int = 2048
    temperature: float = 0.7
    timeout: float = 60.0
    default_language: str = "en"
    headings_path: Optional[str] = None
    drafts_dir: str = "./drafts"

    def llm_config(self) -> LLMConfig:
        return LLMConfig(
            api_key=self.api_key,
            model=self.model,
            max_tokens=self.max_tokens,
            temperature=self.temperature,
            timeout=self.timeout,
        )

    def heading_registry(self) -> HeadingRegistry:
        if self.headings_path:
            return load_heading_registry(self.headings_path)
        return DEFAULT_REGISTRY


def settings_from_dict(data: Dict[str, Any]) -> Settings:
    known = {f.name for f in fields(Settings)}
    unknown = set(data) - known
    if unknown:
        logger.warning(f"Ignoring unknown settings: {sorted(unknown)}")
    settings = Settings(**{k: v for k, v in data.items() if k in known})
    settings.api_key = str(settings.api_key or "").strip()
    return settings


def load_settings(path: Optional[str] = None) -> Settings:
    """
    Load settings from YAML, then apply environment overrides.

    A missing file is not an error; defaults apply.
    """
    path = path or os.environ.get("SEO_OPTIMIZER_SETTINGS", DEFAULT_SETTINGS_PATH)
    data: Dict[str, Any] = {}
    if Path(path).exists():
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    settings = settings_from_dict(data)

    if os.environ.get("ANTHROPIC_API_KEY"):
        settings.api_key = os.environ["ANTHROPIC_API_KEY"].strip()
    if os.environ.get("SEO_OPTIMIZER_MODEL"):
        settings.model = os.environ["SEO_OPTIMIZER_MODEL"].strip()
    return settings


def save_settings(settings: Settings, path: str = DEFAULT_SETTINGS_PATH) -> None:
    payload = {f.name: getattr(settings, f.name) for f in fields(Settings)}
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(payload, f, sort_keys=False, allow_unicode=True)
