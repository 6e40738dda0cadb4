import base64
import json
import os
from types import SimpleNamespace

import pytest

# persona_api.main builds the app at import time and refuses to start without a key
os.environ.setdefault("GEMINI_API_KEY", "test-key")

from fastapi.testclient import TestClient  # noqa: E402

from persona_api.core.config import Settings  # noqa: E402
from persona_api.main import create_app  # noqa: E402
from persona_api.services.gemini_client import GeminiGenerationClient  # noqa: E402

IMAGE_BYTES = b"\x89PNG\r\n\x1a\nfake-image"


def sample_persona(**overrides):
    persona = {
        "fullName": "Aiko Tanaka",
        "dateOfBirth": "1990-04-12",
        "age": 34,
        "gender": "Female",
        "maritalStatus": "Married",
        "region": "Japan",
        "occupation": "Teacher",
        "ethnicity": "Japanese",
        "primaryLanguage": "Japanese",
        "education": {
            "degree": "B.Ed.",
            "institution": "Example University",
            "fieldOfStudy": "Education",
        },
        "shortBiography": "Primary school teacher in Osaka.",
        "biography": "Aiko has taught for ten years and runs the school garden club.",
        "interests": ["Gardening", "Calligraphy"],
        "personalityTraits": ["Patient", "Organized"],
        "skills": [{"name": "Classroom management", "value": 88}],
        "technicalMetadata": {
            "email": "aiko.tanaka@example.com",
            "username": "aiko_t",
            "userAgent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64)",
            "browser": "Chrome",
            "platform": "Desktop",
            "paymentPreference": "Credit card",
        },
    }
    persona.update(overrides)
    return persona


def text_response(text):
    return SimpleNamespace(text=text, candidates=[])


def image_response(*parts):
    return SimpleNamespace(
        text=None,
        candidates=[SimpleNamespace(content=SimpleNamespace(parts=list(parts)))],
    )


def image_part(data=IMAGE_BYTES, mime_type="image/png"):
    return SimpleNamespace(text=None, inline_data=SimpleNamespace(data=data, mime_type=mime_type))


def text_part(text):
    return SimpleNamespace(text=text, inline_data=None)


class _FakeModels:
    """Stands in for genai.Client().aio.models; replays queued responses or raises."""

    def __init__(self, responses):
        self._responses = list(responses)
        self.calls = []

    async def generate_content(self, *, model, contents, config=None):
        self.calls.append({"model": model, "contents": contents, "config": config})
        if not self._responses:
            raise AssertionError("unexpected generate_content call")
        nxt = self._responses.pop(0)
        if isinstance(nxt, Exception):
            raise nxt
        return nxt


class FakeGenaiClient:
    def __init__(self, *responses):
        self.models = _FakeModels(responses)
        self.aio = SimpleNamespace(models=self.models)


def make_generation_client(*responses):
    fake = FakeGenaiClient(*responses)
    client = GeminiGenerationClient(
        client=fake,
        persona_model="persona-model",
        image_model="image-model",
        temperature=0.9,
    )
    return client, fake


@pytest.fixture
def settings():
    return Settings(GEMINI_API_KEY="test-key", ENVIRONMENT="test")


@pytest.fixture
def app_factory(settings):
    """Build a TestClient whose Gemini calls replay the given responses."""

    def _factory(*responses, **client_kwargs):
        generation_client, fake = make_generation_client(*responses)
        app = create_app(settings=settings, generation_client=generation_client)
        return TestClient(app, **client_kwargs), fake

    return _factory


@pytest.fixture
def persona_json():
    return json.dumps(sample_persona())


@pytest.fixture
def encoded_image():
    return base64.b64encode(IMAGE_BYTES).decode("ascii")
