"""Model-backed endpoints: analysis, description fetch, job search, screening answers."""

import logging

from fastapi import APIRouter, Depends, File, Request, UploadFile

from jobmatch.agents import analyzer, description_fetcher, job_finder, screening
from jobmatch.agents.model import ModelService, get_model_service
from jobmatch.api.limiter import limiter
from jobmatch.api.schemas import (
    AnalyzeRequest,
    AnswerQuestionRequest,
    AnswerQuestionResponse,
    ExtractTextResponse,
    FetchDescriptionRequest,
    FetchDescriptionResponse,
    SearchJobsRequest,
)
from jobmatch.errors import ValidationError
from jobmatch.models import JobAnalysis, JobListing
from jobmatch.tools.pdf_parser import extract_resume_text

MAX_UPLOAD_SIZE = 5 * 1024 * 1024  # 5 MB

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/analyze", response_model=JobAnalysis)
@limiter.limit("10/minute")
async def analyze(
    request: Request,
    data: AnalyzeRequest,
    model: ModelService = Depends(get_model_service),
):
    """Analyze a resume against a job description."""
    result = await analyzer.analyze_job_fit(model, data.resume, data.job_description)
    logger.info("Analysis complete: score %d", result.match_score)
    return result


@router.post("/fetch-description", response_model=FetchDescriptionResponse)
@limiter.limit("20/minute")
async def fetch_description(
    request: Request,
    data: FetchDescriptionRequest,
    model: ModelService = Depends(get_model_service),
):
    """Extract the job description text from a posting URL."""
    text = await description_fetcher.fetch_job_description(model, data.url)
    return FetchDescriptionResponse(text=text)


@router.post("/search-jobs", response_model=list[JobListing])
@limiter.limit("20/minute")
async def search_jobs(
    request: Request,
    data: SearchJobsRequest,
    model: ModelService = Depends(get_model_service),
):
    """Search a job site for postings."""
    return await job_finder.search_jobs(model, data.query, data.site)


@router.post("/answer-question", response_model=AnswerQuestionResponse)
@limiter.limit("20/minute")
async def answer_question(
    request: Request,
    data: AnswerQuestionRequest,
    model: ModelService = Depends(get_model_service),
):
    """Draft an answer to a screening question from the resume."""
    answer = await screening.answer_question(model, data.resume, data.question)
    return AnswerQuestionResponse(answer=answer)


@router.post("/extract-text", response_model=ExtractTextResponse)
async def extract_text(file: UploadFile = File(...)):
    """Extract resume text from an uploaded PDF or text file."""
    content = await file.read()
    if len(content) > MAX_UPLOAD_SIZE:
        raise ValidationError("File too large (max 5 MB)")

    text = extract_resume_text(content, file.filename or "", file.content_type)
    return ExtractTextResponse(text=text, filename=file.filename or "")
