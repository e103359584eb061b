"""FastAPI application."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded

from jobmatch.api.limiter import limiter
from jobmatch.config import settings
from jobmatch.db.base import init_db
from jobmatch.errors import JobMatchError, StoreNotConfiguredError

logger = logging.getLogger(__name__)

ALLOWED_ORIGINS = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Check credentials and initialize the database on startup."""
    if not settings.gemini_api_key:
        raise RuntimeError("GEMINI_API_KEY (or API_KEY) environment variable not set")
    try:
        init_db()
    except StoreNotConfiguredError:
        logger.warning("DATABASE_URL not set; resume endpoints will answer 503")
    yield


app = FastAPI(
    title="Job Match Assistant API",
    description="Resume vs. job description analysis backed by Gemini",
    version="0.1.0",
    lifespan=lifespan,
)

app.state.limiter = limiter


@app.exception_handler(JobMatchError)
async def job_match_error_handler(request: Request, exc: JobMatchError):
    """Render domain errors as {"error": message}."""
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Return 400 naming the missing or invalid fields."""
    fields = sorted({str(err["loc"][-1]) for err in exc.errors() if err.get("loc")})
    message = f"Missing or invalid fields: {', '.join(fields)}" if fields else "Invalid request payload"
    return JSONResponse(status_code=400, content={"error": message})


@app.exception_handler(RateLimitExceeded)
async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
    """Return 429 with a clear message when rate limit is exceeded."""
    return JSONResponse(
        status_code=429,
        content={"error": f"Rate limit exceeded: {exc.detail}"},
    )


app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Content-Type", "Authorization"],
)


# Import and include routers
from jobmatch.api.routes import analysis, listings, location, resumes  # noqa: E402

app.include_router(analysis.router, prefix="/api", tags=["Analysis"])
app.include_router(location.router, prefix="/api", tags=["Location"])
app.include_router(listings.router, prefix="/api", tags=["Listings"])
app.include_router(resumes.router, prefix="/api/resumes", tags=["Resumes"])


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
