from __future__ import annotations

from seo_optimizer.llm.client import ApiResult, LLMClient, LLMConfig

__all__ = ["ApiResult", "LLMClient", "LLMConfig"]
