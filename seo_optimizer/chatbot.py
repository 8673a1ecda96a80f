from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Literal, Tuple
import logging

from seo_optimizer.llm.client import LLMClient
from seo_optimizer.llm.prompts import build_chat_prompt

logger = logging.getLogger(__name__)

GREETING = (
    "Hello! I'm your AI SEO Assistant.\n"
    "How can I help you with your SEO strategy, keyword research, "
    "content optimization, or technical SEO questions today?"
)

UNKNOWN_ERROR = "An unknown error occurred with the AI."

Role = Literal["user", "bot"]


@dataclass
class ChatReply:
    success: bool
    reply: str


@dataclass
class ChatSession:
    """Display history only; each prompt is sent without earlier turns."""
    language: str = "en"
    turns: List[Tuple[Role, str]] = field(default_factory=lambda: [("bot", GREETING)])

    def ask(self, client: LLMClient, message: str) -> ChatReply:
        reply = send_chat_message(client, message, self.language)
        if message.strip():
            self.turns.append(("user", message.strip()))
        self.turns.append(("bot", reply.reply))
        return reply


def send_chat_message(client: LLMClient, message: str, language: str = "en") -> ChatReply:
    message = (message or "").strip()
    if not message:
        return ChatReply(success=False, reply="Message cannot be empty.")

    result = client.send_prompt(build_chat_prompt(message, language))
    if result.success and result.data:
        return ChatReply(success=True, reply=result.data)
    logger.warning(f"Chat request failed: {result.error}")
    return ChatReply(success=False, reply=result.error or UNKNOWN_ERROR)
