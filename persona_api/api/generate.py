"""
Persona generation API endpoint
"""

from typing import Optional

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from persona_api.dependencies import get_generation_client
from persona_api.schemas.persona import ErrorResponse, PersonaGenerateResponse, PersonaRequest
from persona_api.services.gemini_client import GeminiGenerationClient
from persona_api.services.persona_service import generate_persona_bundle

router = APIRouter()


@router.post(
    "/generate",
    responses={
        200: {"model": PersonaGenerateResponse},
        500: {"model": ErrorResponse},
    },
)
async def generate_persona_api(
    persona_request: Optional[PersonaRequest] = None,
    client: GeminiGenerationClient = Depends(get_generation_client),
):
    """Generate a fictional persona and headshot"""
    # an empty body means "all defaults"
    result = await generate_persona_bundle(persona_request or PersonaRequest(), client)
    if not result.ok:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": result.error},
        )
    return JSONResponse(content={"persona": result.persona, "actionPhotoUrl": result.photo_url})
