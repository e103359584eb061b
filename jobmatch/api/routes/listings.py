"""Job listing proxy endpoints."""

from fastapi import APIRouter

from jobmatch.tools.hiring_cafe import fetch_hiring_cafe_jobs

router = APIRouter()


@router.get("/hiring-cafe")
async def hiring_cafe():
    """Proxy the latest hiring.cafe listings."""
    return await fetch_hiring_cafe_jobs()
