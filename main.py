"""
Job Match Assistant - CLI Entry Point.

    python main.py                          Run the API proxy
    python main.py <resume> <job>           Analyze a resume file against a
                                            job description file or URL
"""

import asyncio
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

from jobmatch.agents.analyzer import analyze_job_fit  # noqa: E402
from jobmatch.agents.description_fetcher import fetch_job_description  # noqa: E402
from jobmatch.agents.model import ModelService  # noqa: E402
from jobmatch.config import settings  # noqa: E402
from jobmatch.errors import JobMatchError  # noqa: E402
from jobmatch.suggestions import apply_suggestion, is_applicable  # noqa: E402
from jobmatch.tools.pdf_parser import extract_resume_text  # noqa: E402

logger = logging.getLogger("jobmatch")


def serve():
    """Run the API proxy with uvicorn."""
    import uvicorn

    uvicorn.run("jobmatch.api.app:app", host="0.0.0.0", port=settings.port, log_level=settings.log_level.lower())


def read_resume(path: Path) -> str:
    return extract_resume_text(path.read_bytes(), path.name)


async def analyze(resume_path: Path, job_source: str) -> int:
    """Analyze, print the result, then offer each rewrite suggestion."""
    model = ModelService(api_key=settings.gemini_api_key)
    resume = read_resume(resume_path)
    print(f"Loaded resume: {resume_path} ({len(resume)} chars)")

    if job_source.startswith(("http://", "https://")):
        print(f"Fetching job description: {job_source}")
        job_description = await fetch_job_description(model, job_source)
    else:
        job_description = Path(job_source).read_text(encoding="utf-8")
    print(f"Job description: {len(job_description)} chars")

    print("\nAnalyzing...")
    analysis = await analyze_job_fit(model, resume, job_description)

    print(f"\nMatch score: {analysis.match_score}%")
    print(analysis.summary)
    print("\nStrengths:")
    for item in analysis.strengths:
        print(f"  + {item}")
    print("Gaps:")
    for item in analysis.gaps:
        print(f"  - {item}")
    print("Matched keywords: " + ", ".join(k.keyword for k in analysis.matched_keywords))
    print("Missing keywords:")
    for k in analysis.missing_keywords:
        print(f"  {k.keyword}: {k.definition}")

    changed = False
    for suggestion in analysis.improvement_suggestions:
        print(f"\n[{suggestion.suggestion_type}]")
        print(f"  Before: {suggestion.original_text}")
        print(f"  After:  {suggestion.suggested_rewrite}")
        if not is_applicable(resume, suggestion):
            print("  (original text not found in resume, skipping)")
            continue
        while True:
            choice = input("Apply? (y/n): ").strip().lower()
            if choice in ("y", "yes"):
                resume = apply_suggestion(resume, suggestion)
                changed = True
                break
            if choice in ("n", "no"):
                break
            print("Please enter 'y' or 'n'")

    if changed:
        out = resume_path.with_name(resume_path.stem + ".improved.txt")
        out.write_text(resume, encoding="utf-8")
        print(f"\nUpdated resume written to {out}")

    print("\n--- Cover letter draft ---\n")
    print(analysis.cover_letter_draft)
    return 0


def main() -> int:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not settings.gemini_api_key:
        logger.error("GEMINI_API_KEY (or API_KEY) environment variable not set.")
        return 1

    args = sys.argv[1:]
    if not args:
        serve()
        return 0

    if len(args) != 2:
        print(__doc__)
        return 2

    resume_path = Path(args[0])
    if not resume_path.exists():
        print(f"Not found: {resume_path}")
        return 2

    try:
        return asyncio.run(analyze(resume_path, args[1]))
    except JobMatchError as e:
        print(f"Error: {e.message}")
        return 1
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    sys.exit(main())
