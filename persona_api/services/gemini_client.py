"""
Gemini calls used by persona generation
- persona: structured JSON constrained by PERSONA_SCHEMA
- headshot: image model, first inline image part becomes a data URI

One round trip each; no retries and no timeout beyond the SDK defaults.
"""

from __future__ import annotations

import base64
import json
import logging
from typing import Any, Optional

from google import genai
from google.genai import types

from persona_api.core.config import Settings
from persona_api.services.persona_prompt import HEADSHOT_PROMPT
from persona_api.services.persona_schema import PERSONA_SCHEMA

logger = logging.getLogger(__name__)

PHOTO_DATA_URI_PREFIX = "data:image/png;base64,"


def parse_persona_json(text: Optional[str]) -> Any:
    """Parse model text as JSON. Empty text counts as an empty object.

    A surrounding ``` / ```json fence is tolerated; anything else that is not
    valid JSON raises json.JSONDecodeError.
    """
    cleaned = (text or "").strip()
    if cleaned.startswith("```"):
        if "```json" in cleaned:
            cleaned = cleaned.split("```json", 1)[1]
        else:
            cleaned = cleaned.split("```", 1)[1]
        cleaned = cleaned.split("```", 1)[0].strip()
    if not cleaned:
        cleaned = "{}"
    return json.loads(cleaned)


def _inline_image_data(response: Any) -> Optional[str]:
    """Return base64 data of the first inline image part of the first candidate."""
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return None
    content = getattr(candidates[0], "content", None)
    if content is None:
        return None
    for part in getattr(content, "parts", None) or []:
        inline = getattr(part, "inline_data", None)
        if inline is None:
            continue
        blob = getattr(inline, "data", None)
        if not blob:
            continue
        # google-genai returns raw bytes; a base64 string is used as-is
        if isinstance(blob, (bytes, bytearray)):
            return base64.b64encode(bytes(blob)).decode("ascii")
        return str(blob)
    return None


class GeminiGenerationClient:
    """Shared, read-only wrapper around a genai.Client."""

    def __init__(
        self,
        client: genai.Client,
        persona_model: str,
        image_model: str,
        temperature: float = 0.9,
    ) -> None:
        self._client = client
        self.persona_model = persona_model
        self.image_model = image_model
        self.temperature = temperature

    @classmethod
    def from_settings(cls, settings: Settings) -> "GeminiGenerationClient":
        return cls(
            client=genai.Client(api_key=settings.GEMINI_API_KEY),
            persona_model=settings.PERSONA_MODEL,
            image_model=settings.IMAGE_MODEL,
            temperature=settings.PERSONA_TEMPERATURE,
        )

    async def generate_persona_text(self, prompt: str) -> str:
        response = await self._client.aio.models.generate_content(
            model=self.persona_model,
            contents=prompt,
            config=types.GenerateContentConfig(
                temperature=self.temperature,
                response_mime_type="application/json",
                response_schema=PERSONA_SCHEMA,
            ),
        )
        return response.text or "{}"

    async def generate_headshot(self) -> str:
        """Return a data URI for the headshot, or "" when no image came back."""
        response = await self._client.aio.models.generate_content(
            model=self.image_model,
            contents=[types.Content(role="user", parts=[types.Part(text=HEADSHOT_PROMPT)])],
        )
        data = _inline_image_data(response)
        if not data:
            logger.warning(f"[persona] image model {self.image_model} returned no inline image")
            return ""
        return f"{PHOTO_DATA_URI_PREFIX}{data}"
