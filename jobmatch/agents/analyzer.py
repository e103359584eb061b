"""
Job fit analyzer.

Compares a resume with a job description and returns a JobAnalysis.
The reply is constrained to ANALYSIS_SCHEMA with every field required.
"""

import logging

from google.genai import types
from pydantic import ValidationError as PydanticValidationError

from jobmatch.agents.model import ModelService
from jobmatch.config import settings
from jobmatch.errors import UpstreamError, ValidationError
from jobmatch.models import JobAnalysis
from jobmatch.utils.parser import extract_json

logger = logging.getLogger(__name__)

ANALYSIS_PROMPT = """You are an expert career coach and professional resume writer.
Analyze the candidate's resume against the job description.

## Tasks
1. matchedKeywords: important keywords and skills that appear in BOTH texts.
   Give each a one-sentence definition in the context of this job.
2. missingKeywords: important keywords from the job description that are
   ABSENT from the resume, each with a one-sentence definition.
3. improvementSuggestions: 2-3 concrete rewrites. For each:
   - originalText: an EXACT substring copied verbatim from the resume
   - suggestedRewrite: the rewritten text that replaces it
   - suggestionType: a short category label (e.g. "Add Metrics", "Use Keywords", "Stronger Verb")
4. matchScore: integer from 0 to 100; summary: 2-3 sentences;
   strengths and gaps: short bullet phrases.
5. coverLetterDraft: a complete, professional cover letter tailored to this job.

## Candidate Resume
---
{resume}
---

## Job Description
---
{job_description}
---

Respond ONLY with JSON matching the schema."""


def _keyword_list() -> types.Schema:
    return types.Schema(
        type=types.Type.ARRAY,
        items=types.Schema(
            type=types.Type.OBJECT,
            properties={
                "keyword": types.Schema(type=types.Type.STRING),
                "definition": types.Schema(type=types.Type.STRING),
            },
            required=["keyword", "definition"],
        ),
    )


ANALYSIS_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "matchScore": types.Schema(type=types.Type.INTEGER, minimum=0, maximum=100),
        "summary": types.Schema(type=types.Type.STRING),
        "strengths": types.Schema(type=types.Type.ARRAY, items=types.Schema(type=types.Type.STRING)),
        "gaps": types.Schema(type=types.Type.ARRAY, items=types.Schema(type=types.Type.STRING)),
        "matchedKeywords": _keyword_list(),
        "missingKeywords": _keyword_list(),
        "improvementSuggestions": types.Schema(
            type=types.Type.ARRAY,
            items=types.Schema(
                type=types.Type.OBJECT,
                properties={
                    "originalText": types.Schema(type=types.Type.STRING),
                    "suggestedRewrite": types.Schema(type=types.Type.STRING),
                    "suggestionType": types.Schema(type=types.Type.STRING),
                },
                required=["originalText", "suggestedRewrite", "suggestionType"],
            ),
        ),
        "coverLetterDraft": types.Schema(type=types.Type.STRING),
    },
    required=[
        "matchScore",
        "summary",
        "strengths",
        "gaps",
        "matchedKeywords",
        "missingKeywords",
        "improvementSuggestions",
        "coverLetterDraft",
    ],
)


def build_analysis_prompt(resume: str, job_description: str) -> str:
    return ANALYSIS_PROMPT.format(resume=resume.strip(), job_description=job_description.strip())


async def analyze_job_fit(model: ModelService, resume: str, job_description: str) -> JobAnalysis:
    """
    Analyze how well a resume fits a job description.

    Raises:
        ValidationError: Either text is blank
        UpstreamError: Empty, unparseable, or off-schema reply
    """
    if not resume.strip() or not job_description.strip():
        raise ValidationError("Missing resume or jobDescription")

    text = await model.generate(
        build_analysis_prompt(resume, job_description),
        temperature=settings.analysis_temperature,
        response_schema=ANALYSIS_SCHEMA,
    )
    if not text:
        raise UpstreamError("Empty response from model")

    data = extract_json(text)
    if not isinstance(data, dict):
        logger.error("Unparseable analysis reply: %s", text[:200])
        raise UpstreamError("The model returned an analysis that could not be read. Please try again.")

    try:
        return JobAnalysis.model_validate(data)
    except PydanticValidationError as e:
        logger.error("Analysis reply does not match schema: %s", e)
        raise UpstreamError("The model returned an incomplete analysis. Please try again.") from e
