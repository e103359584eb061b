"""
Upstream helpers that do not go through the model.

- pdf_parser: Extract text from uploaded resumes
- hiring_cafe: Cached proxy for hiring.cafe listings
"""

from jobmatch.tools.hiring_cafe import fetch_hiring_cafe_jobs
from jobmatch.tools.pdf_parser import extract_resume_text, parse_pdf

__all__ = ["parse_pdf", "extract_resume_text", "fetch_hiring_cafe_jobs"]
