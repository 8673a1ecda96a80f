import pytest
from docx import Document

from seo_optimizer.adapters.docx_adapter import emit_draft_docx
from seo_optimizer.blog import (
    BlogRequest,
    DraftError,
    create_draft,
    generate_blog_post,
    markdown_to_html,
    parse_tags,
    suggest_title,
)
from seo_optimizer.llm.client import ApiResult
from tests.fakes import FakeLLM

POST = """Widgets make life easier.
They are cheap & durable.

## Why widgets
Because they work.

### Choosing one
Look for <quality>.
"""


def test_empty_topic_is_rejected_without_api_call():
    llm = FakeLLM()
    result = generate_blog_post(BlogRequest(topic="  "), llm)
    assert not result.success
    assert result.error == "Blog post topic cannot be empty."
    assert llm.prompts == []


def test_prompt_includes_optional_parts_only_when_given():
    llm = FakeLLM(ApiResult(success=True, data=POST), ApiResult(success=True, data=POST))
    generate_blog_post(BlogRequest(topic="Widgets", tone="witty", language="th", outline="- price\n- quality"), llm)
    generate_blog_post(BlogRequest(topic="Widgets", keywords="widgets, gadgets"), llm)

    first, second = llm.prompts
    assert "blog post in Thai" in first
    assert "The desired tone of voice is: witty." in first
    assert "Please follow this outline or include these key points:\n- price\n- quality" in first
    assert "incorporate the following primary keywords" not in first
    assert "Please incorporate the following primary keywords naturally: widgets, gadgets." in second
    assert "outline" not in second


def test_unknown_tone_falls_back_to_professional():
    llm = FakeLLM(ApiResult(success=True, data=POST))
    generate_blog_post(BlogRequest(topic="Widgets", tone="angry"), llm)
    assert "The desired tone of voice is: professional." in llm.prompts[0]


def test_parse_tags():
    assert parse_tags(" widgets, , cheap gadgets ,") == ["widgets", "cheap gadgets"]
    assert parse_tags("") == []


def test_markdown_to_html():
    assert markdown_to_html(POST) == (
        "<p>Widgets make life easier.<br />\nThey are cheap &amp; durable.</p>\n"
        "<h2>Why widgets</h2>\n"
        "<p>Because they work.</p>\n"
        "<h3>Choosing one</h3>\n"
        "<p>Look for &lt;quality&gt;.</p>"
    )


def test_create_draft_validation():
    with pytest.raises(DraftError, match="Post title cannot be empty."):
        create_draft("  ", POST)
    with pytest.raises(DraftError, match="Post content cannot be empty."):
        create_draft("Title", "\n\n")


def test_create_draft():
    draft = create_draft(" Widgets 101 ", POST, language="th", keywords="widgets, gadgets")
    assert draft.title == "Widgets 101"
    assert draft.status == "draft"
    assert draft.tags == ["widgets", "gadgets"]
    assert draft.language == "th"
    assert draft.content_html.startswith("<p>Widgets make life easier.")


def test_suggest_title():
    request = BlogRequest(topic=" Widgets ")
    assert suggest_title(request, POST) == "Why widgets"
    assert suggest_title(request, "no headings") == "Widgets"


def test_emit_draft_docx(tmp_path):
    draft = create_draft("Widgets 101", POST, language="en", keywords="widgets, gadgets")
    out = emit_draft_docx(draft, str(tmp_path / "drafts" / "widgets.docx"))

    doc = Document(out)
    styled = [(p.style.name, p.text) for p in doc.paragraphs]
    assert styled[0] == ("Title", "Widgets 101")
    assert ("Heading 2", "Why widgets") in styled
    assert ("Heading 3", "Choosing one") in styled
    assert ("Normal", "Widgets make life easier.\nThey are cheap & durable.") in styled
    props = doc.core_properties
    assert props.title == "Widgets 101"
    assert props.keywords == "widgets, gadgets"
    assert props.language == "en"
    assert props.category == "draft"
