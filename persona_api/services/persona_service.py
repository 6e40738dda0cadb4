"""
Persona generation service

Flow: sanitize request -> persona JSON -> normalize -> headshot -> result.
Provider and parse errors are caught here, once, and returned as a failed
GenerationResult; the API layer only maps the result to HTTP.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from persona_api.schemas.persona import PersonaRequest
from persona_api.services.gemini_client import GeminiGenerationClient, parse_persona_json
from persona_api.services.persona_normalizer import normalize_persona
from persona_api.services.persona_prompt import build_persona_prompt, sanitize_request

logger = logging.getLogger(__name__)

INVALID_PERSONA_MESSAGE = "Model returned invalid persona"
UNKNOWN_ERROR_MESSAGE = "Unknown error"


class FailureReason(str, Enum):
    INVALID_PERSONA = "invalid_persona"
    UPSTREAM_ERROR = "upstream_error"


@dataclass(frozen=True)
class GenerationResult:
    persona: Optional[Dict[str, Any]] = None
    photo_url: str = ""
    failure: Optional[FailureReason] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, persona: Dict[str, Any], photo_url: str) -> "GenerationResult":
        return cls(persona=persona, photo_url=photo_url)

    @classmethod
    def failed(cls, reason: FailureReason, error: str) -> "GenerationResult":
        return cls(failure=reason, error=error or UNKNOWN_ERROR_MESSAGE)


async def generate_persona_bundle(
    req: PersonaRequest,
    client: GeminiGenerationClient,
) -> GenerationResult:
    """Generate a normalized persona plus headshot data URI."""
    region, gender, archetype = sanitize_request(req)
    prompt = build_persona_prompt(region, gender, archetype)

    try:
        raw_text = await client.generate_persona_text(prompt)
        raw = parse_persona_json(raw_text)
        persona = normalize_persona(raw)
        if persona is None:
            logger.warning(f"[persona] model returned a non-object persona ({type(raw).__name__})")
            return GenerationResult.failed(FailureReason.INVALID_PERSONA, INVALID_PERSONA_MESSAGE)

        photo_url = await client.generate_headshot()
    except Exception as e:
        logger.error(f"[persona] generation failed: {type(e).__name__}: {e}")
        return GenerationResult.failed(FailureReason.UPSTREAM_ERROR, str(e))

    # inputs end up in the prompt; log sizes only
    logger.info(
        f"[persona] generated region_len={len(region)} gender_len={len(gender)} "
        f"archetype_len={len(archetype)} photo={'yes' if photo_url else 'no'}"
    )
    return GenerationResult.success(persona, photo_url)
