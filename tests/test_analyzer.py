from seo_optimizer.adapters.web_adapter import FetchError, PageContent
from seo_optimizer.analyzer import AnalysisRequest, run_analysis, validate_request
from seo_optimizer.ir import StructuredAnalysis, Unstructured
from seo_optimizer.llm.client import ApiResult
from tests.fakes import FakeLLM

RESPONSE = "**Keyword Usage:** Good density.\n**Meta Title Suggestion:** Buy Widgets Now"


def test_validation_messages():
    assert validate_request(AnalysisRequest(source="url", url=" ")) == "Please enter a URL."
    assert validate_request(AnalysisRequest(source="text", text="")) == "Please enter text."
    assert validate_request(AnalysisRequest(source="ftp")) == "Invalid source."
    assert validate_request(AnalysisRequest(source="text", text="hello")) is None


def test_missing_keyword_does_not_call_api():
    llm = FakeLLM()
    outcome = run_analysis(AnalysisRequest(source="text", text="Some content"), llm)
    assert outcome.error == "Please enter a keyword."
    assert llm.prompts == []


def test_text_analysis_is_parsed():
    llm = FakeLLM(ApiResult(success=True, data=RESPONSE))
    request = AnalysisRequest(source="text", text="Widgets are great.", keyword="widgets", language="th")
    outcome = run_analysis(request, llm)
    assert outcome.success
    assert outcome.raw_text == RESPONSE
    assert isinstance(outcome.view, StructuredAnalysis)
    assert outcome.view.headings() == ["Keyword Usage", "Meta Title Suggestion"]
    prompt = llm.prompts[0]
    assert 'primary target keyword for this content is: "widgets"' in prompt
    assert "which is in Thai" in prompt
    assert '"Widgets are great."' in prompt


def test_unstructured_response_is_still_a_success():
    llm = FakeLLM(ApiResult(success=True, data="I can't follow the template."))
    outcome = run_analysis(AnalysisRequest(source="text", text="x", keyword="k"), llm)
    assert outcome.success
    assert outcome.view == Unstructured(raw_text="I can't follow the template.")


def test_api_failure_bypasses_parser():
    llm = FakeLLM(ApiResult(success=False, error="API Key is not configured."))
    outcome = run_analysis(AnalysisRequest(source="text", text="x", keyword="k"), llm)
    assert not outcome.success
    assert outcome.error == "API Key is not configured."
    assert outcome.view is None


def test_url_source_uses_fetched_title_and_text():
    def fetcher(url):
        assert url == "https://example.com/post"
        return PageContent(url=url, title="Widget Guide", text="All about widgets.")

    llm = FakeLLM(ApiResult(success=True, data=RESPONSE))
    request = AnalysisRequest(source="url", url=" https://example.com/post ", keyword="widgets")
    outcome = run_analysis(request, llm, fetcher=fetcher)
    assert outcome.success
    assert 'Content Title (if available): "Widget Guide"' in llm.prompts[0]


def test_url_source_title_overrides_fetched_title():
    def fetcher(url):
        return PageContent(url=url, title="Widget Guide", text="All about widgets.")

    llm = FakeLLM(ApiResult(success=True, data=RESPONSE))
    request = AnalysisRequest(source="url", url="https://example.com/post", keyword="widgets", title=" Widgets 101 ")
    outcome = run_analysis(request, llm, fetcher=fetcher)
    assert outcome.success
    assert 'Content Title (if available): "Widgets 101"' in llm.prompts[0]
    assert "All about widgets." in llm.prompts[0]


def test_fetch_failure_and_empty_page():
    def failing(url):
        raise FetchError("Failed to fetch URL: timeout")

    outcome = run_analysis(AnalysisRequest(source="url", url="https://x", keyword="k"), FakeLLM(), fetcher=failing)
    assert outcome.error == "Failed to fetch URL: timeout"

    outcome = run_analysis(
        AnalysisRequest(source="url", url="https://x", keyword="k"),
        FakeLLM(),
        fetcher=lambda url: PageContent(url=url, title="", text="  "),
    )
    assert outcome.error == "No content to analyze."
