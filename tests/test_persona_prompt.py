import pytest

from persona_api.schemas.persona import PersonaRequest
from persona_api.services.persona_prompt import (
    DEFAULT_ARCHETYPE,
    DEFAULT_GENDER,
    DEFAULT_REGION,
    SAFETY_RULES,
    build_persona_prompt,
    sanitize_request,
)


def test_sanitize_request_defaults_when_missing():
    assert sanitize_request(PersonaRequest()) == (DEFAULT_REGION, DEFAULT_GENDER, DEFAULT_ARCHETYPE)
    assert sanitize_request(PersonaRequest()) == ("Nigeria", "Balanced", "Software Developer")


@pytest.mark.parametrize("bad", ["", 7, None, ["Japan"], {"name": "Japan"}])
def test_sanitize_request_defaults_for_empty_or_non_string(bad):
    region, gender, archetype = sanitize_request(PersonaRequest(region=bad, gender=bad, archetype=bad))
    assert (region, gender, archetype) == (DEFAULT_REGION, DEFAULT_GENDER, DEFAULT_ARCHETYPE)


def test_sanitize_request_truncates():
    region, gender, archetype = sanitize_request(
        PersonaRequest(region="R" * 100, gender="G" * 100, archetype="A" * 100)
    )
    assert region == "R" * 60
    assert gender == "G" * 16
    assert archetype == "A" * 60


def test_prompt_embeds_inputs_and_rules():
    prompt = build_persona_prompt("Japan", "Female", "Teacher")
    assert "Region: Japan" in prompt
    assert "Gender preference: Female" in prompt
    assert "Profession archetype: Teacher" in prompt
    for rule in SAFETY_RULES:
        assert rule in prompt
    assert prompt.endswith("Output JSON matching the schema exactly.")


def test_prompt_is_deterministic():
    assert build_persona_prompt("Kenya", "Male", "Nurse") == build_persona_prompt("Kenya", "Male", "Nurse")
    assert build_persona_prompt("Kenya", "Male", "Nurse") != build_persona_prompt("Peru", "Male", "Nurse")
