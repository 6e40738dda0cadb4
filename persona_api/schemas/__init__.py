"""
Pydantic schema package
"""

from .persona import (
    PersonaRequest,
    Persona,
    Skill,
    Education,
    TechnicalMetadata,
    PersonaGenerateResponse,
    ErrorResponse,
)

__all__ = [
    "PersonaRequest",
    "Persona",
    "Skill",
    "Education",
    "TechnicalMetadata",
    "PersonaGenerateResponse",
    "ErrorResponse",
]
