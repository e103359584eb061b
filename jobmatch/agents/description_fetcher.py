"""
Description fetcher.

Asks the model, with Google Search grounding, to read a job posting URL and
return just the description body.
"""

from urllib.parse import urlparse

from jobmatch.agents.model import GOOGLE_SEARCH, ModelService
from jobmatch.errors import UpstreamError, ValidationError

FETCH_PROMPT = """You are an expert web scraping assistant.
Open the job posting at the URL below and extract the job description.

## Rules
- Return ONLY the job description text: role summary, responsibilities, requirements, benefits
- No navigation, ads, cookie banners, related jobs, or commentary of your own
- Do not wrap the text in quotes or code fences
- If the page cannot be read, return nothing

URL: {url}"""


def validate_url(url: str) -> str:
    """Return the stripped URL, or raise ValidationError if it is not http(s)."""
    url = (url or "").strip()
    if not url:
        raise ValidationError("Missing url")
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValidationError(f"Invalid URL: {url}")
    return url


async def fetch_job_description(model: ModelService, url: str) -> str:
    """
    Extract plain job description text from a posting URL.

    Raises:
        ValidationError: URL missing or malformed
        UpstreamError: The model returned no usable text
    """
    url = validate_url(url)
    text = await model.generate(FETCH_PROMPT.format(url=url), tools=[GOOGLE_SEARCH])
    if not text:
        raise UpstreamError(
            f"Could not extract a job description from {url}. Please paste the description manually."
        )
    return text
