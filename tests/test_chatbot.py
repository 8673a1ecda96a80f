from seo_optimizer.chatbot import GREETING, UNKNOWN_ERROR, ChatSession, send_chat_message
from seo_optimizer.llm.client import ApiResult
from tests.fakes import FakeLLM


def test_empty_message():
    llm = FakeLLM()
    reply = send_chat_message(llm, "   ")
    assert not reply.success
    assert reply.reply == "Message cannot be empty."
    assert llm.prompts == []


def test_reply_and_prompt_language():
    llm = FakeLLM(ApiResult(success=True, data="Use descriptive titles."))
    reply = send_chat_message(llm, " How long should titles be? ", "th")
    assert reply.success
    assert reply.reply == "Use descriptive titles."
    assert llm.prompts[0] == (
        "You are a helpful and concise SEO Chatbot Assistant. "
        "The user is interacting in Thai. Please respond in Thai. "
        "User's question: \"How long should titles be?\""
    )


def test_api_error_is_surfaced():
    llm = FakeLLM(ApiResult(success=False, error="API Key is not configured."))
    assert send_chat_message(llm, "hi").reply == "API Key is not configured."


def test_empty_data_without_error_is_unknown_error():
    llm = FakeLLM(ApiResult(success=True, data=""))
    reply = send_chat_message(llm, "hi")
    assert not reply.success
    assert reply.reply == UNKNOWN_ERROR


def test_session_history():
    llm = FakeLLM(ApiResult(success=True, data="Hello!"))
    session = ChatSession()
    assert session.turns == [("bot", GREETING)]
    session.ask(llm, "hi")
    assert session.turns[1:] == [("user", "hi"), ("bot", "Hello!")]
