"""
Application settings
"""

from pydantic_settings import BaseSettings
from pathlib import Path
from dotenv import load_dotenv


"""env loading order
1) OS environment variables
2) .env at the project root
"""

# Pre-load .env (OS environment wins, override=False)
_here = Path(__file__).resolve()
_project_env = _here.parents[2] / ".env"
try:
    if _project_env.exists():
        load_dotenv(dotenv_path=str(_project_env), override=False)
except OSError:
    pass


class Settings(BaseSettings):
    """Application settings"""
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # Optional here so the object can be built; validate_settings() enforces it
    GEMINI_API_KEY: str | None = None

    PERSONA_MODEL: str = "gemini-3-flash-preview"
    IMAGE_MODEL: str = "gemini-2.5-flash-image"
    PERSONA_TEMPERATURE: float = 0.9

    HOST: str = "0.0.0.0"
    PORT: int = 8787
    MAX_BODY_BYTES: int = 2 * 1024 * 1024

    class Config:
        env_file = ".env"
        env_file_encoding = 'utf-8'
        extra = 'ignore'


def get_settings() -> Settings:
    return Settings()


def validate_settings(settings: Settings) -> bool:
    """Refuse to start without a provider credential."""
    if not (settings.GEMINI_API_KEY or "").strip():
        raise RuntimeError("Missing GEMINI_API_KEY in environment")
    return True
