"""
Job finder.

Searches one job site through Google Search grounding and returns listings.
Grounded calls cannot use a response schema, so the JSON is extracted
leniently from the reply.
"""

import logging

from jobmatch.agents.model import GOOGLE_SEARCH, ModelService
from jobmatch.errors import UpstreamError, ValidationError
from jobmatch.models import JobListing
from jobmatch.utils.parser import parse_listings_response

logger = logging.getLogger(__name__)

JOB_SITES = ("linkedin.com/jobs", "indeed.com", "myworkdayjobs.com")

SEARCH_PROMPT = """You are a job search assistant.
Search for current job postings matching "{query}" on the site {site}
(use the search operator site:{site}).

## Output Format (JSON only, no explanation)
```json
[
    {{"title": "Job title", "company": "Company", "url": "https://...", "snippet": "One-sentence summary"}}
]
```

## Rules
- Up to 10 postings, most relevant first
- url must be the direct link to the posting on {site}
- Return ONLY the JSON array"""


async def search_jobs(model: ModelService, query: str, site: str = JOB_SITES[0]) -> list[JobListing]:
    """
    Search a job site for postings.

    Raises:
        ValidationError: Blank query or unsupported site
        UpstreamError: The model returned nothing
    """
    query = (query or "").strip()
    if not query:
        raise ValidationError("Missing query")
    if site not in JOB_SITES:
        raise ValidationError(f"Unsupported job site: {site}. Choose one of: {', '.join(JOB_SITES)}")

    text = await model.generate(SEARCH_PROMPT.format(query=query, site=site), tools=[GOOGLE_SEARCH])
    if not text:
        raise UpstreamError("Empty response from model")

    listings = [JobListing.model_validate(item) for item in parse_listings_response(text)]
    logger.info("Search %r on %s: %d listings", query, site, len(listings))
    return listings
