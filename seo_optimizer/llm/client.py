from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional, TYPE_CHECKING
import time
import logging

from seo_optimizer.llm.prompts import SYSTEM_PROMPT

if TYPE_CHECKING:
    import anthropic

logger = logging.getLogger(__name__)

API_KEY_MISSING = "API Key is not configured."
EMPTY_RESPONSE = (
    "Content generation failed or response was empty. "
    "This might be due to safety filters or other restrictions."
)

# generation_config keys forwarded to messages.create()
_GENERATION_KEYS = ("temperature", "max_tokens", "top_p", "top_k")


@dataclass
class LLMConfig:
    """Configuration for the generative-AI client."""
    api_key: str
    model: str = "claude-sonnet-4-20250514"
    max_tokens: int = 2048
    temperature: float = 0.7
    timeout: float = 60.0  # Seconds per request
    max_retries: int = 3  # Max retries for rate limit errors


@dataclass
class ApiResult:
    """Outcome of one prompt: data on success, error message otherwise."""
    success: bool
    data: str = ""
    error: Optional[str] = None


def _is_rate_limit(error: Exception) -> bool:
    error_str = str(error).lower()
    return (
        "rate" in error_str or
        "429" in error_str or
        "too many requests" in error_str or
        "overloaded" in error_str
    )


def _error_details(error: Exception) -> str:
    body = getattr(error, "body", None)
    if isinstance(body, dict):
        message = (body.get("error") or {}).get("message")
        if message:
            return str(message)
    status_code = getattr(error, "status_code", None)
    if isinstance(status_code, int) and not str(error):
        return f"Server responded with code {status_code}."
    return str(error)


class LLMClient:
    """Thin wrapper around Anthropic's Messages API returning ApiResult values."""

    def __init__(self, config: LLMConfig):
        self.config = config
        self._client: Optional["anthropic.Anthropic"] = None

    @property
    def client(self) -> "anthropic.Anthropic":
        """Lazy initialization of Anthropic client."""
        if self._client is None:
            try:
                import anthropic
                self._client = anthropic.Anthropic(
                    api_key=self.config.api_key,
                    timeout=self.config.timeout,
                )
            except ImportError:
                raise ImportError(
                    "anthropic library not installed. "
                    "Run: pip install anthropic"
                )
        return self._client

    def _request_args(self, prompt: str, generation_config: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        args: Dict[str, Any] = {
            "model": self.config.model,
            "max_tokens": self.config.max_tokens,
            "temperature": self.config.temperature,
            "system": SYSTEM_PROMPT,
            "messages": [{"role": "user", "content": prompt}],
        }
        for key in _GENERATION_KEYS:
            if generation_config and generation_config.get(key) is not None:
                args[key] = generation_config[key]
        return args

    def send_prompt(self, prompt: str, generation_config: Optional[Dict[str, Any]] = None) -> ApiResult:
        """
        Send a single prompt.

        Never raises for provider errors: failures come back as
        ApiResult(success=False, error=...).
        """
        if not (self.config.api_key or "").strip():
            return ApiResult(success=False, error=API_KEY_MISSING)

        args = self._request_args(prompt, generation_config)
        last_error: Optional[Exception] = None
        for attempt in range(self.config.max_retries + 1):
            try:
                message = self.client.messages.create(**args)
            except ImportError:
                raise
            except Exception as e:
                last_error = e
                if _is_rate_limit(e) and attempt < self.config.max_retries:
                    # Exponential backoff: 2s, 4s, 8s
                    backoff = 2 ** (attempt + 1)
                    logger.warning(f"Rate limit hit, retry {attempt+1}/{self.config.max_retries} in {backoff}s")
                    time.sleep(backoff)
                    continue
                break

            if getattr(message, "stop_reason", None) == "refusal":
                return ApiResult(
                    success=False,
                    error="Content blocked due to safety settings. Reason: refusal",
                )

            text = ""
            for block in message.content or []:
                if hasattr(block, "text"):
                    text += block.text
            if not text.strip():
                return ApiResult(success=False, error=EMPTY_RESPONSE)
            return ApiResult(success=True, data=text)

        logger.warning(f"Prompt failed: {type(last_error).__name__}: {last_error}")
        return ApiResult(
            success=False,
            error=f"API request failed. Details: {_error_details(last_error)}",
        )
