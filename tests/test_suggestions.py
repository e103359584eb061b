"""Tests for suggestion application and keyword highlighting."""

from jobmatch.models import ImprovementSuggestion
from jobmatch.suggestions import apply_suggestion, highlight_keywords, is_applicable


def _suggestion(original: str, rewrite: str) -> ImprovementSuggestion:
    return ImprovementSuggestion(original_text=original, suggested_rewrite=rewrite, suggestion_type="Add Metrics")


def test_replaces_first_occurrence_only():
    text = "Led team. Led team."
    result = apply_suggestion(text, _suggestion("Led team.", "Led a team of 8."))
    assert result == "Led a team of 8. Led team."


def test_result_length_matches_replacement():
    text = "EXPERIENCE\n- Managed inbound calls.\n- Kept CRM records."
    s = _suggestion("Managed inbound calls.", "Managed 50+ inbound calls daily.")
    result = apply_suggestion(text, s)
    assert len(result) == len(text) - len(s.original_text) + len(s.suggested_rewrite)


def test_missing_original_is_noop():
    text = "Built dashboards."
    assert apply_suggestion(text, _suggestion("Managed inbound calls.", "Managed 50+ calls.")) == text


def test_second_application_is_noop():
    s = _suggestion("Managed inbound calls.", "Managed 50+ inbound calls daily.")
    once = apply_suggestion("Managed inbound calls.", s)
    assert apply_suggestion(once, s) == once == "Managed 50+ inbound calls daily."


def test_empty_original_is_noop():
    assert apply_suggestion("abc", _suggestion("", "x")) == "abc"
    assert not is_applicable("abc", _suggestion("", "x"))


def test_highlight_is_case_insensitive_and_lossless():
    text = "Used crm daily. CRM records kept. Python too."
    segments = highlight_keywords(text, ["CRM", "python"])
    assert "".join(s for s, _ in segments) == text
    assert [s for s, hit in segments if hit] == ["crm", "CRM", "Python"]


def test_highlight_escapes_regex_characters():
    segments = highlight_keywords("Knows C++ and C#.", ["C++", "C#"])
    assert [s for s, hit in segments if hit] == ["C++", "C#"]


def test_highlight_prefers_longer_keyword():
    segments = highlight_keywords("Salesforce admin", ["Sales", "Salesforce"])
    assert segments[0] == ("Salesforce", True)


def test_highlight_without_keywords():
    assert highlight_keywords("plain", []) == [("plain", False)]
    assert highlight_keywords("", ["x"]) == []
