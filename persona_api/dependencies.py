from fastapi import Request

from persona_api.services.gemini_client import GeminiGenerationClient

# Shared objects are built once in create_app() and parked on app.state.


def get_generation_client(request: Request) -> GeminiGenerationClient:
    return request.app.state.generation_client


__all__ = ["get_generation_client"]
