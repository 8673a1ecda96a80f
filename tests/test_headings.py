from seo_optimizer.analysis.headings import (
    DEFAULT_REGISTRY,
    HeadingRegistry,
    load_heading_registry,
    match_heading,
    registry_from_dict,
)

def test_bold_heading_with_colon_inside():
    assert match_heading("**Keyword Usage:** Good density.") == ("Keyword Usage", "Good density.")

def test_bold_heading_with_colon_outside():
    assert match_heading("**SEO Strengths**: solid") == ("SEO Strengths", "solid")

def test_plain_heading_with_colon():
    assert match_heading("Meta Title Suggestion: Buy Widgets Now") == ("Meta Title Suggestion", "Buy Widgets Now")

def test_bold_heading_without_colon():
    assert match_heading("**Readability Assessment**") == ("Readability Assessment", "")

def test_case_insensitive_and_whitespace_tolerant():
    assert match_heading("   **  keyword usage  :** ok  ") == ("Keyword Usage", "ok")

def test_label_with_slash():
    hit = match_heading("**SEO Weaknesses/Areas for Improvement:**")
    assert hit == ("SEO Weaknesses/Areas for Improvement", "")

def test_non_headings():
    assert match_heading("") is None
    assert match_heading("Keyword Usage is fine here") is None
    assert match_heading("The Keyword Usage: mentioned mid-line") is None
    assert match_heading("1. Keyword Usage: numbered") is None

def test_first_declared_label_wins():
    reg = HeadingRegistry(labels=("SEO", "SEO Strengths"))
    assert match_heading("SEO: x", reg) == ("SEO", "x")
    reg2 = HeadingRegistry(labels=("Meta", "Meta Title"))
    # "Meta" needs a closing marker right after the label, so the longer label matches
    assert match_heading("Meta Title: x", reg2) == ("Meta Title", "x")

def test_roles():
    assert DEFAULT_REGISTRY.role("SEO Strengths") == "list"
    assert DEFAULT_REGISTRY.role("Meta Description Suggestion") == "suggestion"
    assert DEFAULT_REGISTRY.role("Keyword Usage") == "prose"
    assert "Keyword Usage" in DEFAULT_REGISTRY

def test_load_packaged_vocabulary_matches_default():
    reg = load_heading_registry("seo_optimizer/rules/analysis_headings.yml")
    assert reg == DEFAULT_REGISTRY

def test_registry_from_dict_drops_undeclared_roles():
    reg = registry_from_dict({
        "headings": ["Summary", "Pros"],
        "list_headings": ["Pros", "Cons"],
    })
    assert reg.labels == ("Summary", "Pros")
    assert reg.list_headings == frozenset({"Pros"})
    assert reg.role("Summary") == "prose"

def test_registry_from_empty_dict_is_default():
    assert registry_from_dict({}) is DEFAULT_REGISTRY
