"""
Response schema handed to Gemini for structured persona output.

Every field the normalizer or the frontend reads must be listed here with the
matching type, otherwise the provider is free to leave it out.
"""

from google.genai import types

GENDERS = ["Male", "Female", "Non-binary", "Other"]
MARITAL_STATUSES = ["Single", "Married", "Divorced", "Widowed", "In a relationship"]
PLATFORMS = ["Desktop", "Mobile", "Tablet"]


def _string(enum: list[str] | None = None) -> types.Schema:
    if enum:
        return types.Schema(type=types.Type.STRING, enum=list(enum))
    return types.Schema(type=types.Type.STRING)


EDUCATION_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "degree": _string(),
        "institution": _string(),
        "fieldOfStudy": _string(),
    },
    required=["degree", "institution", "fieldOfStudy"],
)

SKILL_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "name": _string(),
        "value": types.Schema(type=types.Type.INTEGER),
    },
    required=["name", "value"],
)

TECHNICAL_METADATA_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "email": _string(),
        "username": _string(),
        "userAgent": _string(),
        "browser": _string(),
        "platform": _string(PLATFORMS),
        "paymentPreference": _string(),
    },
    required=["email", "username", "userAgent", "browser", "platform", "paymentPreference"],
)

PERSONA_REQUIRED_FIELDS = [
    "fullName",
    "dateOfBirth",
    "age",
    "gender",
    "maritalStatus",
    "region",
    "occupation",
    "ethnicity",
    "primaryLanguage",
    "education",
    "shortBiography",
    "biography",
    "interests",
    "personalityTraits",
    "skills",
    "technicalMetadata",
]

PERSONA_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "fullName": _string(),
        "dateOfBirth": _string(),
        "age": types.Schema(type=types.Type.INTEGER),
        "gender": _string(GENDERS),
        "maritalStatus": _string(MARITAL_STATUSES),
        "region": _string(),
        "occupation": _string(),
        "ethnicity": _string(),
        "primaryLanguage": _string(),
        "education": EDUCATION_SCHEMA,
        "shortBiography": _string(),
        "biography": _string(),
        "interests": types.Schema(type=types.Type.ARRAY, items=_string()),
        "personalityTraits": types.Schema(type=types.Type.ARRAY, items=_string()),
        "skills": types.Schema(type=types.Type.ARRAY, items=SKILL_SCHEMA),
        "technicalMetadata": TECHNICAL_METADATA_SCHEMA,
    },
    required=PERSONA_REQUIRED_FIELDS,
)
