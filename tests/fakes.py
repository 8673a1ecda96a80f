from types import SimpleNamespace
from typing import List, Optional

from seo_optimizer.llm.client import ApiResult


class FakeLLM:
    """Stands in for LLMClient: records prompts, replays canned results."""

    def __init__(self, *results: ApiResult):
        self.results: List[ApiResult] = list(results)
        self.prompts: List[str] = []

    def send_prompt(self, prompt, generation_config=None):
        self.prompts.append(prompt)
        return self.results.pop(0)


class FakeMessages:
    def __init__(self, responses):
        self.responses = list(responses)
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        item = self.responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


def fake_anthropic(*responses):
    return SimpleNamespace(messages=FakeMessages(responses))


def message(text: str, stop_reason: Optional[str] = "end_turn"):
    return SimpleNamespace(content=[SimpleNamespace(type="text", text=text)], stop_reason=stop_reason)
