"""Commute endpoints."""

from fastapi import APIRouter, Depends, Request

from jobmatch.agents import locator
from jobmatch.agents.model import ModelService, get_model_service
from jobmatch.api.limiter import limiter
from jobmatch.api.schemas import AddressResponse, DistanceRequest, ReverseGeocodeRequest
from jobmatch.models import DistanceResult

router = APIRouter()


@router.post("/distance", response_model=DistanceResult)
@limiter.limit("20/minute")
async def distance(
    request: Request,
    data: DistanceRequest,
    model: ModelService = Depends(get_model_service),
):
    """Driving distance between two locations."""
    return await locator.calculate_distance(model, data.origin, data.destination)


@router.post("/reverse-geocode", response_model=AddressResponse)
@limiter.limit("20/minute")
async def reverse_geocode(
    request: Request,
    data: ReverseGeocodeRequest,
    model: ModelService = Depends(get_model_service),
):
    """Street address for the given coordinates."""
    address = await locator.reverse_geocode(model, data.lat, data.lon)
    return AddressResponse(address=address)
