"""
Persona schemas - API request/response models

The generate endpoint returns the normalized persona as plain JSON, so the
response models below document the contract rather than re-validate it.
"""

from pydantic import BaseModel, Field
from typing import Any, List, Literal, Optional


class PersonaRequest(BaseModel):
    """Persona generation request

    Values are accepted as-is and bounded server-side; anything that is not
    a string is treated as empty.
    """
    region: Optional[Any] = Field(None, description="Region or country the persona lives in")
    gender: Optional[Any] = Field(None, description="Gender preference")
    archetype: Optional[Any] = Field(None, description="Profession archetype")

    class Config:
        extra = 'ignore'


class Skill(BaseModel):
    name: str = Field(..., max_length=28)
    value: int = Field(..., ge=0, le=100)


class Education(BaseModel):
    degree: str
    institution: str
    fieldOfStudy: str


class TechnicalMetadata(BaseModel):
    email: str = Field(..., max_length=64)
    username: str = Field(..., max_length=32)
    userAgent: str = Field(..., max_length=120)
    browser: str = Field(..., max_length=32)
    platform: Literal["Desktop", "Mobile", "Tablet"]
    paymentPreference: str = Field(..., max_length=24)


class Persona(BaseModel):
    """Fictional persona profile"""
    id: Optional[str] = Field(None, description="Client-assigned id, never set by this service")
    fullName: str = Field(..., max_length=60)
    dateOfBirth: str
    age: int
    gender: Literal["Male", "Female", "Non-binary", "Other"]
    maritalStatus: Literal["Single", "Married", "Divorced", "Widowed", "In a relationship"]
    region: str = Field(..., max_length=60)
    occupation: str = Field(..., max_length=60)
    ethnicity: str
    primaryLanguage: str
    education: Education
    shortBiography: str = Field(..., max_length=420)
    biography: str = Field(..., max_length=4000)
    interests: List[str] = Field(default_factory=list, max_length=12)
    personalityTraits: List[str] = Field(default_factory=list, max_length=12)
    skills: List[Skill] = Field(default_factory=list, max_length=12)
    technicalMetadata: TechnicalMetadata


class PersonaGenerateResponse(BaseModel):
    """Persona generation response"""
    persona: Persona
    actionPhotoUrl: str = ""


class ErrorResponse(BaseModel):
    error: str
