"""
Gemini model service.

Thin async wrapper over google-genai that turns SDK failures, timeouts and
empty replies into the error classes the API reports.
"""

import asyncio
import logging

from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from jobmatch.config import settings
from jobmatch.errors import UpstreamError, UpstreamTimeoutError

logger = logging.getLogger(__name__)

GOOGLE_SEARCH = types.Tool(google_search=types.GoogleSearch())
GOOGLE_MAPS = types.Tool(google_maps=types.GoogleMaps())


class ModelService:
    """Sends prompts to the model and returns the reply text."""

    def __init__(
        self,
        api_key: str,
        model: str | None = None,
        timeout: float | None = None,
    ):
        if not api_key:
            raise ValueError("GEMINI_API_KEY not set")
        self.model = model or settings.gemini_model
        self.timeout = timeout or settings.upstream_timeout
        self._client = genai.Client(api_key=api_key)

    async def generate(
        self,
        prompt: str,
        *,
        temperature: float | None = None,
        response_schema: types.Schema | None = None,
        tools: list[types.Tool] | None = None,
        tool_config: types.ToolConfig | None = None,
    ) -> str:
        """
        Run one generate call.

        Args:
            prompt: Full prompt text
            temperature: Sampling temperature (None = model default)
            response_schema: Constrain the reply to JSON matching this schema
            tools: Grounding tools (search, maps)
            tool_config: Tool configuration, e.g. a lat/lng retrieval hint

        Returns:
            Stripped reply text (may be empty)

        Raises:
            UpstreamTimeoutError: The call exceeded the configured ceiling
            UpstreamError: The SDK reported an API error
        """
        json_mode = {}
        if response_schema is not None:
            json_mode = {"response_mime_type": "application/json", "response_schema": response_schema}
        config = types.GenerateContentConfig(
            temperature=temperature,
            tools=tools,
            tool_config=tool_config,
            **json_mode,
        )

        try:
            response = await asyncio.wait_for(
                self._client.aio.models.generate_content(model=self.model, contents=prompt, config=config),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError as e:
            logger.error("Model call timed out after %.0fs", self.timeout)
            raise UpstreamTimeoutError(
                f"The model service did not respond within {self.timeout:.0f} seconds. Please try again."
            ) from e
        except genai_errors.APIError as e:
            logger.error("Model API error %s: %s", e.code, e.message)
            raise UpstreamError(f"Model service error ({e.code}): {e.message}") from e

        return (response.text or "").strip()


_service: ModelService | None = None


def get_model_service() -> ModelService:
    """Get or create the shared model service (FastAPI dependency)."""
    global _service
    if _service is None:
        try:
            _service = ModelService(api_key=settings.gemini_api_key)
        except ValueError as e:
            raise UpstreamError("The model service is not configured on this server") from e
    return _service
