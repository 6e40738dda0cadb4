"""
Persona generator - FastAPI main application
Fictional persona + headshot for UI testing, generated by Gemini
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from typing import Optional
import logging

from persona_api.core.body_limit import BodySizeLimitMiddleware, RequestBodyTooLarge, body_too_large_response
from persona_api.core.config import Settings, get_settings, validate_settings
from persona_api.services.gemini_client import GeminiGenerationClient

from persona_api.api.generate import router as generate_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Runs on application startup/shutdown"""
    settings: Settings = app.state.settings
    logger.info(
        f"🚀 Persona API starting (persona_model={settings.PERSONA_MODEL}, image_model={settings.IMAGE_MODEL})"
    )
    yield
    logger.info("👋 Persona API stopped")


def create_app(
    settings: Optional[Settings] = None,
    generation_client: Optional[GeminiGenerationClient] = None,
) -> FastAPI:
    """Build the application. Raises before serving if the credential is missing."""
    settings = settings or get_settings()
    validate_settings(settings)

    logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))

    app = FastAPI(
        title="Persona Generator API",
        description="Fictional personas and headshots for UI testing",
        version="1.0.0",
        docs_url="/docs" if settings.ENVIRONMENT == "development" else None,
        redoc_url="/redoc" if settings.ENVIRONMENT == "development" else None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.generation_client = generation_client or GeminiGenerationClient.from_settings(settings)

    # must be added before CORSMiddleware so 413s carry CORS headers
    app.add_middleware(BodySizeLimitMiddleware, max_bytes=settings.MAX_BODY_BYTES)

    # CORS: any origin, no credentials
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestBodyTooLarge)
    async def body_too_large_handler(request: Request, exc: RequestBodyTooLarge):
        return body_too_large_response()

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Invalid request body"},
        )

    @app.exception_handler(Exception)
    async def internal_error_handler(request: Request, exc: Exception):
        logger.error(f"Internal server error: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": str(exc) or "Unknown error"},
        )

    app.include_router(generate_router, prefix="/api", tags=["persona"])

    @app.get("/")
    async def root():
        """Root endpoint"""
        return {
            "message": "Persona Generator API",
            "version": "1.0.0",
            "docs": "/docs",
            "status": "running",
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {
            "status": "healthy",
            "environment": settings.ENVIRONMENT,
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    _settings = app.state.settings
    uvicorn.run(
        "persona_api.main:app",
        host=_settings.HOST,
        port=_settings.PORT,
        reload=True if _settings.ENVIRONMENT == "development" else False
    )
