"""
Model-backed operations.

- analyzer: Resume vs. job description analysis
- description_fetcher: Job description extraction from a URL
- job_finder: Job site search
- screening: Screening question answers
- locator: Driving distance and reverse geocoding
"""

from jobmatch.agents.analyzer import analyze_job_fit
from jobmatch.agents.description_fetcher import fetch_job_description
from jobmatch.agents.model import ModelService, get_model_service

__all__ = ["ModelService", "get_model_service", "analyze_job_fit", "fetch_job_description"]
