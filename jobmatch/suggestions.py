"""
Applying accepted rewrite suggestions and highlighting keywords in a resume.
"""

import re

from jobmatch.models import ImprovementSuggestion


def apply_suggestion(resume_text: str, suggestion: ImprovementSuggestion) -> str:
    """
    Replace the first occurrence of the suggestion's original text.

    Returns the text unchanged when the original text does not occur
    (including when it was already replaced by an earlier application).
    An empty original text is never applied, although it trivially occurs.
    """
    if not suggestion.original_text:
        return resume_text
    return resume_text.replace(suggestion.original_text, suggestion.suggested_rewrite, 1)


def is_applicable(resume_text: str, suggestion: ImprovementSuggestion) -> bool:
    return bool(suggestion.original_text) and suggestion.original_text in resume_text


def highlight_keywords(text: str, keywords: list[str]) -> list[tuple[str, bool]]:
    """
    Split text into (segment, is_match) pairs for keyword highlighting.

    Matching is case-insensitive and keywords are treated literally. Longer
    keywords win over shorter ones that share a prefix. Joining the segments
    gives back the original text.
    """
    terms = sorted({k for k in keywords if k and k.strip()}, key=len, reverse=True)
    if not terms or not text:
        return [(text, False)] if text else []

    pattern = re.compile("|".join(re.escape(t) for t in terms), re.IGNORECASE)
    segments: list[tuple[str, bool]] = []
    pos = 0
    for match in pattern.finditer(text):
        if match.start() > pos:
            segments.append((text[pos:match.start()], False))
        segments.append((match.group(0), True))
        pos = match.end()
    if pos < len(text):
        segments.append((text[pos:], False))
    return segments
