from __future__ import annotations
from typing import Optional

SYSTEM_PROMPT = """You are an AI assistant inside a content-management admin tool.
You help site editors with search engine optimization (SEO) and content writing.

Rules:
1. Follow the requested output structure exactly
2. Respond in the language the user asks for
3. Do not invent facts about the user's site"""

LANGUAGE_NAMES = {
    "en": "English",
    "th": "Thai",
}


def language_name(code: Optional[str]) -> str:
    return LANGUAGE_NAMES.get((code or "").strip().lower(), "English")


ANALYSIS_PROMPT_TEMPLATE = """You are an expert SEO content analyst. Analyze the following text which is in {language}. The primary target keyword for this content is: "{keyword}".

Content Title (if available): "{title}"
Content Text to Analyze:
"{content}"

Based on this, provide a comprehensive SEO analysis including the following sections. Ensure each section starts with its title in bold (e.g., **Keyword Usage:** or **Meta Title Suggestion:**):
1. Keyword Usage: Analyze how well the primary keyword "{keyword}" is used. Discuss its placement (title, headings, body, start/end of content), density, and semantic relevance. Suggest improvements.
2. Meta Title Suggestion: Provide an optimized meta title (around 50-60 characters) incorporating the primary keyword "{keyword}".
3. Meta Description Suggestion: Provide an optimized meta description (around 150-160 characters) incorporating the primary keyword "{keyword}" and a compelling call to action if appropriate.
4. Readability Assessment: Evaluate the content's readability for the target language ({language}). Provide a score or general assessment and suggest 2-3 specific ways to improve it.
5. LSI Keywords/Related Terms: Suggest 3-5 LSI keywords or related terms that could enhance the content's SEO value for the primary keyword "{keyword}". List them clearly.
6. SEO Strengths: List 2-3 key SEO strengths of the current content. List them clearly.
7. SEO Weaknesses/Areas for Improvement: List 2-3 key SEO weaknesses and actionable recommendations to improve them, beyond what's already covered. List them clearly.
Present your analysis clearly."""

CHAT_PROMPT_TEMPLATE = (
    "You are a helpful and concise SEO Chatbot Assistant. "
    "The user is interacting in {language}. Please respond in {language}. "
    "User's question: \"{message}\""
)


def build_analysis_prompt(language: str, keyword: str, title: str, content: str) -> str:
    return ANALYSIS_PROMPT_TEMPLATE.format(
        language=language_name(language),
        keyword=keyword,
        title=title,
        content=content,
    )


def build_blog_prompt(
    topic: str,
    keywords: str,
    tone: str,
    language: str,
    outline: str = "",
) -> str:
    """Assemble the blog generation prompt; optional parts are skipped when empty."""
    parts = [
        f"You are an expert blog post writer. Your task is to generate a comprehensive and engaging blog post in {language_name(language)}.",
        f"The main topic or title idea for the blog post is: \"{topic}\".",
    ]
    if keywords.strip():
        parts.append(f"Please incorporate the following primary keywords naturally: {keywords}.")
    parts.append(f"The desired tone of voice is: {tone}.")
    if outline.strip():
        parts.append("Please follow this outline or include these key points:\n" + outline)
    parts.append("Structure: clear introduction, well-structured body paragraphs, and a concluding summary.")
    parts.append(
        "Generate only the blog post content itself, without any surrounding text. "
        "Use appropriate paragraph breaks. For subheadings, use markdown '##' for H2 and '###' for H3."
    )
    return "\n\n".join(parts)


def build_chat_prompt(message: str, language: str) -> str:
    return CHAT_PROMPT_TEMPLATE.format(language=language_name(language), message=message)
