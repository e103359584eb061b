"""
Lenient JSON extraction for model replies.

Schema-constrained replies are usually clean JSON, but grounded (tool-using)
calls cannot request a response schema and come back as prose around:
- Clean JSON
- JSON in ```json blocks
- JSON in ``` blocks (no language tag)
- JSON embedded in text
- Markdown links (listings fallback)
"""

import json
import re
from typing import Any


def extract_json(text: str, expect_array: bool = False) -> dict | list | None:
    """
    Extract JSON from a model reply, trying strategies from strictest to loosest.

    Args:
        text: Raw model reply
        expect_array: Prefer a JSON array over an object

    Returns:
        Parsed JSON (dict or list) or None if nothing parses
    """
    if not text or not text.strip():
        return None

    fallback = None
    for strategy in (_try_clean_json, _try_fenced, _try_balanced):
        result = strategy(text, expect_array)
        if result is None:
            continue
        if isinstance(result, list) == expect_array:
            return result
        # Valid JSON of the other shape: keep looking, remember it
        if fallback is None:
            fallback = result

    return fallback


def _try_clean_json(text: str, expect_array: bool) -> Any:
    """Parse the whole reply."""
    try:
        return json.loads(text.strip())
    except json.JSONDecodeError:
        return None


def _try_fenced(text: str, expect_array: bool) -> Any:
    """Parse the first fenced code block that holds valid JSON."""
    for match in re.findall(r"```(?:json|JSON)?\s*([\s\S]*?)\s*```", text):
        try:
            return json.loads(match)
        except json.JSONDecodeError:
            continue
    return None


def _try_balanced(text: str, expect_array: bool) -> Any:
    """Find the first balanced [...] or {...} span that parses."""
    pairs = [("[", "]"), ("{", "}")]
    if not expect_array:
        pairs.reverse()

    for open_char, close_char in pairs:
        start = text.find(open_char)
        while start != -1:
            span = _balanced_span(text, start, open_char, close_char)
            if span:
                try:
                    return json.loads(span)
                except json.JSONDecodeError:
                    pass
            start = text.find(open_char, start + 1)
    return None


def _balanced_span(text: str, start: int, open_char: str, close_char: str) -> str | None:
    """Return text[start:end] where the bracket opened at start closes, ignoring strings."""
    depth = 0
    in_string = False
    escaped = False

    for i in range(start, len(text)):
        char = text[i]
        if escaped:
            escaped = False
            continue
        if in_string:
            if char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue
        if char == '"':
            in_string = True
        elif char == open_char:
            depth += 1
        elif char == close_char:
            depth -= 1
            if depth == 0:
                return text[start:i + 1]

    return None


def parse_listings_response(text: str) -> list[dict]:
    """
    Parse job search results from a model reply.

    Returns list of dicts with: title, company, url, snippet. Entries without
    a URL are dropped since they cannot be fetched or opened.
    """
    result = extract_json(text, expect_array=True)
    if isinstance(result, dict):
        result = result.get("jobs") or result.get("results") or []

    if isinstance(result, list):
        listings = [_normalize_listing(item) for item in result if isinstance(item, dict)]
    else:
        listings = _parse_listings_markdown(text)

    return [item for item in listings if item["url"]]


def _normalize_listing(data: dict) -> dict:
    """Normalize the key spellings models tend to use."""
    return {
        "title": str(data.get("title") or data.get("job_title") or data.get("position") or "").strip(),
        "company": str(data.get("company") or data.get("company_name") or data.get("employer") or "").strip(),
        "url": str(data.get("url") or data.get("link") or data.get("posting_url") or "").strip(),
        "snippet": str(data.get("snippet") or data.get("description") or data.get("summary") or "").strip(),
    }


def _parse_listings_markdown(text: str) -> list[dict]:
    """Fallback: one listing per markdown link, e.g. `- [Title - Company](url): snippet`."""
    listings = []
    for line in text.splitlines():
        m = re.search(r"\[([^\]]+)\]\((https?://[^)\s]+)\)\s*[:\-–]?\s*(.*)", line)
        if not m:
            continue
        label, url, snippet = m.group(1).strip(), m.group(2), m.group(3).strip()
        title, _, company = label.partition(" - ")
        if not company:
            title, _, company = label.partition(" at ")
        listings.append({"title": title.strip(), "company": company.strip(), "url": url, "snippet": snippet})
    return listings


def parse_distance_response(text: str) -> dict | None:
    """
    Parse a driving distance reply.

    Returns dict with: distance, unit, originAddress, destinationAddress,
    or None when no usable distance is present.
    """
    data = extract_json(text)
    if not isinstance(data, dict):
        return None

    distance = data.get("distance")
    if isinstance(distance, str):
        m = re.search(r"\d+(?:\.\d+)?", distance.replace(",", ""))
        distance = float(m.group()) if m else None
    if not isinstance(distance, (int, float)) or isinstance(distance, bool):
        return None

    return {
        "distance": float(distance),
        "unit": str(data.get("unit") or "miles"),
        "originAddress": str(data.get("originAddress") or data.get("origin_address") or data.get("origin") or ""),
        "destinationAddress": str(
            data.get("destinationAddress") or data.get("destination_address") or data.get("destination") or ""
        ),
    }
