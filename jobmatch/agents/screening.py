"""
Screening question answers drafted from the candidate's resume.
"""

from jobmatch.agents.model import ModelService
from jobmatch.errors import UpstreamError, ValidationError

SCREENING_PROMPT = """You are helping a candidate fill in a job application.
Draft an answer to the screening question below, in the first person, using
only facts supported by the resume. Keep it under 150 words. If the resume
does not cover the question, say what the candidate could truthfully add.

## Resume
---
{resume}
---

## Question
{question}"""


async def answer_question(model: ModelService, resume: str, question: str) -> str:
    """Draft an answer to a screening question."""
    if not resume.strip() or not question.strip():
        raise ValidationError("Missing resume or question")

    text = await model.generate(
        SCREENING_PROMPT.format(resume=resume.strip(), question=question.strip()),
        temperature=0.7,
    )
    if not text:
        raise UpstreamError("Empty response from model")
    return text
