"""
Request sanitization and prompt templates for persona generation.

Side-effect free: given the same inputs the rendered prompt is identical.
"""

from __future__ import annotations

from typing import Tuple

from persona_api.schemas.persona import PersonaRequest
from persona_api.services.persona_normalizer import safe_string


# -----------------------------
# Request bounds and defaults
# -----------------------------
REGION_MAX = 60
GENDER_MAX = 16
ARCHETYPE_MAX = 60

DEFAULT_REGION = "Nigeria"
DEFAULT_GENDER = "Balanced"
DEFAULT_ARCHETYPE = "Software Developer"


def sanitize_request(req: PersonaRequest) -> Tuple[str, str, str]:
    """Bound region/gender/archetype and fall back to defaults when empty."""
    region = safe_string(req.region, REGION_MAX) or DEFAULT_REGION
    gender = safe_string(req.gender, GENDER_MAX) or DEFAULT_GENDER
    archetype = safe_string(req.archetype, ARCHETYPE_MAX) or DEFAULT_ARCHETYPE
    return region, gender, archetype


# -----------------------------
# Prompts
# -----------------------------
SAFETY_RULES = (
    "1. Do not generate real addresses, phone numbers, account numbers, IBAN, SSN, BVN, NIN, "
    "passport numbers, card numbers, or anything that looks like a real identifier.",
    "2. Do not generate passwords. Never include any password fields.",
    "3. Email must use example domains only, such as example.com or example.org.",
    "4. The persona must be plausible and culturally respectful for the region.",
    "5. Provide realistic but clearly fictional details.",
)

HEADSHOT_PROMPT = (
    "Photorealistic headshot of a fictional person. Studio lighting. Neutral background. High detail."
)


def build_persona_prompt(region: str, gender: str, archetype: str) -> str:
    rules = "\n".join(SAFETY_RULES)
    return f"""
Create a fictional persona for UI testing.

Hard rules:
{rules}

Inputs:
Region: {region}
Gender preference: {gender}
Profession archetype: {archetype}

Output JSON matching the schema exactly.
""".strip()
