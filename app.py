"""
AI SEO Optimizer - Streamlit GUI

Content analyzer, blog generator and SEO chatbot in one admin screen.
Run with: streamlit run app.py
"""
import streamlit as st
import tempfile
import os
from pathlib import Path

from seo_optimizer.config import load_settings, save_settings, DEFAULT_SETTINGS_PATH
from seo_optimizer.llm.client import LLMClient
from seo_optimizer.report import render_html, RESULT_CSS

st.set_page_config(
    page_title="AI SEO Optimizer",
    page_icon="🔎",
    layout="centered",
)

settings = load_settings()

LANGUAGES = {"en": "English", "th": "Thai"}

page = st.sidebar.radio(
    "AI SEO Optimizer",
    options=["analyzer", "blog", "chatbot", "settings"],
    format_func=lambda x: {
        "analyzer": "Content Analyzer",
        "blog": "Blog Generator",
        "chatbot": "SEO Chatbot",
        "settings": "Settings",
    }[x],
)


def _client() -> LLMClient:
    return LLMClient(settings.llm_config())


# --- Content Analyzer ---
if page == "analyzer":
    st.title("🔎 AI SEO Content Analyzer")
    st.markdown("Analyze your content with AI to get SEO suggestions. Supports English and Thai content.")

    source = st.selectbox(
        "Content Source",
        options=["url", "text"],
        format_func=lambda x: {"url": "Post/Page URL", "text": "Direct Text Input"}[x],
    )
    if source == "url":
        url = st.text_input("Post/Page URL", placeholder="Enter URL of a post or page")
        text = ""
    else:
        url = ""
        text = st.text_area("Content Text", height=250, placeholder="Paste your content here for analysis")

    language = st.selectbox(
        "Content Language",
        options=list(LANGUAGES),
        index=list(LANGUAGES).index(settings.default_language) if settings.default_language in LANGUAGES else 0,
        format_func=LANGUAGES.get,
    )
    keyword = st.text_input("Primary Target Keyword", placeholder="Enter your main keyword")

    if st.button("Analyze Content", type="primary", use_container_width=True):
        from seo_optimizer.analyzer import AnalysisRequest, run_analysis

        request = AnalysisRequest(source=source, url=url, text=text, language=language, keyword=keyword)
        with st.spinner("Analyzing..."):
            outcome = run_analysis(request, _client(), settings.heading_registry())
        st.session_state["analysis_outcome"] = outcome

    st.markdown("---")
    st.markdown("### Analysis Results")
    outcome = st.session_state.get("analysis_outcome")
    if outcome is None:
        st.info("Submit the form above to see analysis results.")
    elif not outcome.success:
        st.error(outcome.error)
    else:
        st.success("Analysis successful!")
        st.markdown(render_html(outcome.view, include_css=True), unsafe_allow_html=True)
        with st.expander("Raw model response", expanded=False):
            st.text(outcome.raw_text)

# --- Blog Generator ---
elif page == "blog":
    from seo_optimizer.blog import TONES, BlogRequest, DraftError, create_draft, generate_blog_post, suggest_title

    st.title("✍️ AI Blog Post Generator")
    st.markdown("Generate engaging blog posts using AI. Supports English and Thai languages.")

    topic = st.text_input("Blog Post Topic/Title Idea")
    keywords = st.text_input("Primary Keywords", help="Comma separated; also used as draft tags")
    tone = st.selectbox("Tone of Voice", options=list(TONES), format_func=TONES.get)
    language = st.selectbox("Language", options=list(LANGUAGES), format_func=LANGUAGES.get)
    outline = st.text_area("Outline / Key Points (optional)", height=120)

    if st.button("Generate Blog Post", type="primary", use_container_width=True):
        request = BlogRequest(topic=topic, keywords=keywords, tone=tone, language=language, outline=outline)
        with st.spinner("Writing..."):
            result = generate_blog_post(request, _client())
        if result.success:
            st.session_state["blog_content"] = result.data
            st.session_state["blog_request"] = request
        else:
            st.error(result.error)

    if "blog_content" in st.session_state:
        request = st.session_state["blog_request"]
        st.success("Blog post generated successfully! Review below.")
        content = st.text_area("Blog Post Content", st.session_state["blog_content"], height=400)
        title = st.text_input("Draft Title", value=suggest_title(request, content))

        if st.button("Create Draft"):
            from seo_optimizer.adapters.docx_adapter import emit_draft_docx

            try:
                draft = create_draft(title, content, request.language, request.keywords)
            except DraftError as e:
                st.error(str(e))
            else:
                with tempfile.TemporaryDirectory() as tmpdir:
                    out_path = Path(tmpdir) / "draft.docx"
                    emit_draft_docx(draft, str(out_path))
                    st.session_state["draft_data"] = out_path.read_bytes()
                st.session_state["draft_name"] = f"{draft.title}.docx"
                st.success("Draft post created successfully!")

        if "draft_data" in st.session_state:
            st.download_button(
                "📄 Download Draft",
                st.session_state["draft_data"],
                file_name=st.session_state["draft_name"],
                mime="application/vnd.openxmlformats-officedocument.wordprocessingml.document",
            )

        if st.button("Generate Another Post"):
            for key in ["blog_content", "blog_request", "draft_data", "draft_name"]:
                if key in st.session_state:
                    del st.session_state[key]
            st.rerun()

# --- SEO Chatbot ---
elif page == "chatbot":
    from seo_optimizer.chatbot import ChatSession

    st.title("💬 SEO Chatbot Assistant")
    st.markdown("Ask SEO-related questions and get insights from our AI assistant. Supports English and Thai.")

    language = st.selectbox("Chat Language", options=list(LANGUAGES), format_func=LANGUAGES.get)
    if "chat_session" not in st.session_state:
        st.session_state["chat_session"] = ChatSession(language=language)
    session = st.session_state["chat_session"]
    session.language = language

    for role, text in session.turns:
        with st.chat_message("user" if role == "user" else "assistant"):
            st.text(text)

    message = st.chat_input("Type your SEO question here...")
    if message:
        with st.spinner("AI is typing..."):
            session.ask(_client(), message)
        st.rerun()

# --- Settings ---
else:
    st.title("⚙️ Settings")
    with st.form("settings"):
        api_key = st.text_input(
            "Anthropic API Key",
            type="password",
            value=settings.api_key or os.environ.get("ANTHROPIC_API_KEY", ""),
        )
        model = st.text_input("Model", value=settings.model)
        default_language = st.selectbox("Default Language", options=list(LANGUAGES), format_func=LANGUAGES.get)
        headings_path = st.text_input(
            "Heading vocabulary (YAML, optional)",
            value=settings.headings_path or "",
        )
        if st.form_submit_button("Save Changes"):
            settings.api_key = api_key.strip()
            settings.model = model.strip() or settings.model
            settings.default_language = default_language
            settings.headings_path = headings_path.strip() or None
            save_settings(settings, os.environ.get("SEO_OPTIMIZER_SETTINGS", DEFAULT_SETTINGS_PATH))
            st.success("Settings saved.")

    st.markdown("---")
    with st.expander("Result styles", expanded=False):
        st.code(RESULT_CSS.strip(), language="css")

# Footer
st.markdown("---")
st.markdown("*Powered by Claude AI*")
