"""
Commute helpers grounded on Google Maps: driving distance and reverse geocoding.
"""

from google.genai import types

from jobmatch.agents.model import GOOGLE_MAPS, ModelService
from jobmatch.errors import UpstreamError, ValidationError
from jobmatch.models import DistanceResult
from jobmatch.utils.parser import parse_distance_response

DISTANCE_PROMPT = """You are a mapping assistant.
Calculate the driving distance in miles between:
Origin: {origin}
Destination: {destination}

Return ONLY this JSON:
{{"distance": <number>, "unit": "miles", "originAddress": "<resolved origin address>", "destinationAddress": "<resolved destination address>"}}"""

ADDRESS_PROMPT = """What is the full street address for latitude {lat}, longitude {lon}?
Return only the address on a single line."""


async def calculate_distance(model: ModelService, origin: str, destination: str) -> DistanceResult:
    """Driving distance between two free-text locations."""
    if not (origin or "").strip() or not (destination or "").strip():
        raise ValidationError("Missing origin or destination")

    text = await model.generate(
        DISTANCE_PROMPT.format(origin=origin.strip(), destination=destination.strip()),
        tools=[GOOGLE_MAPS],
    )
    data = parse_distance_response(text)
    if data is None:
        raise UpstreamError("Could not calculate the distance between these locations.")
    return DistanceResult.model_validate(data)


async def reverse_geocode(model: ModelService, lat: float, lon: float) -> str:
    """Street address for a coordinate pair."""
    if not -90 <= lat <= 90 or not -180 <= lon <= 180:
        raise ValidationError("Coordinates out of range")

    tool_config = types.ToolConfig(
        retrieval_config=types.RetrievalConfig(lat_lng=types.LatLng(latitude=lat, longitude=lon))
    )
    text = await model.generate(ADDRESS_PROMPT.format(lat=lat, lon=lon), tools=[GOOGLE_MAPS], tool_config=tool_config)
    if not text:
        raise UpstreamError("Could not determine an address for these coordinates.")
    return text
