"""
Bounds untrusted model output before it reaches a caller.

Core rules:
- Whatever shape the model returns (wrong types, long strings, huge lists),
  this module never raises and always produces bounded values.
- This is the only place persona fields are checked; callers trust its output.
- normalize_persona(normalize_persona(x)) == normalize_persona(x)
"""

from __future__ import annotations

import math
from typing import Any, Dict, List, Optional

MAX_LIST_ITEMS = 12
DEFAULT_SKILL_VALUE = 50

# top-level string fields -> max length
PERSONA_STRING_LIMITS = {
    "fullName": 60,
    "region": 60,
    "occupation": 60,
    "shortBiography": 420,
    "biography": 4000,
}

TECHNICAL_METADATA_LIMITS = {
    "email": 64,
    "username": 32,
    "userAgent": 120,
    "browser": 32,
    "paymentPreference": 24,
}

SKILL_NAME_MAX = 28
LIST_ITEM_MAX = 32


def safe_string(value: Any, max_len: int) -> str:
    """Return value truncated to max_len, or "" when it is not a string."""
    if not isinstance(value, str):
        return ""
    return value[:max(0, max_len)]


# stands in for an absent "value" key (JS undefined), which is not the same as null
MISSING = object()


def clamp_skill_value(value: Any = MISSING) -> int:
    """Coerce a skill score into an integer in [0, 100] with JS Number() rules.

    null, booleans and blank strings coerce to numbers (0, 1/0, 0); a missing
    value, non-numeric strings, containers and non-finite numbers give 50.
    """
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        # arbitrarily large JSON integers would overflow float()
        return max(0, min(100, value))
    if isinstance(value, float):
        n = value
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return 0
        try:
            n = float(text)
        except ValueError:
            return DEFAULT_SKILL_VALUE
    else:
        return DEFAULT_SKILL_VALUE

    if not math.isfinite(n):
        return DEFAULT_SKILL_VALUE
    if n < 0:
        return 0
    if n > 100:
        return 100
    # round half up
    return int(math.floor(n + 0.5))


def _clean_skills(v: Any) -> List[Dict[str, Any]]:
    if not isinstance(v, list):
        return []
    named = [x for x in v if isinstance(x, dict) and isinstance(x.get("name"), str)]
    return [
        {"name": safe_string(x["name"], SKILL_NAME_MAX), "value": clamp_skill_value(x.get("value", MISSING))}
        for x in named[:MAX_LIST_ITEMS]
    ]


def _clean_list_str(v: Any, max_len_each: int) -> List[str]:
    if not isinstance(v, list):
        return []
    return [safe_string(item, max_len_each) for item in v[:MAX_LIST_ITEMS]]


def _clean_technical_metadata(v: Dict[str, Any]) -> Dict[str, Any]:
    # platform and unknown keys pass through
    tm = dict(v)
    for key, max_len in TECHNICAL_METADATA_LIMITS.items():
        tm[key] = safe_string(tm.get(key), max_len)
    return tm


def normalize_persona(data: Any) -> Optional[Dict[str, Any]]:
    """
    Return a bounded copy of a parsed persona, or None if it is not a JSON object.

    dateOfBirth, age, gender, maritalStatus, ethnicity, primaryLanguage,
    education and technicalMetadata.platform are passed through unchecked.
    """
    if not isinstance(data, dict):
        return None

    persona = dict(data)

    persona["skills"] = _clean_skills(persona.get("skills"))
    persona["interests"] = _clean_list_str(persona.get("interests"), LIST_ITEM_MAX)
    persona["personalityTraits"] = _clean_list_str(persona.get("personalityTraits"), LIST_ITEM_MAX)

    tm = persona.get("technicalMetadata")
    if isinstance(tm, dict):
        persona["technicalMetadata"] = _clean_technical_metadata(tm)
    elif "technicalMetadata" in persona:
        # present but not an object: treat as absent
        del persona["technicalMetadata"]

    for key, max_len in PERSONA_STRING_LIMITS.items():
        persona[key] = safe_string(persona.get(key), max_len)

    return persona
