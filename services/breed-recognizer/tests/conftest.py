"""Shared test fixtures for breed recognizer tests."""

import base64
import json
import sys
from pathlib import Path

import pytest

# Add parent directory to path so we can import the modules
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture
def gemini_reply():
    """Wrap model output text in a generateContent response body."""

    def _wrap(text: str) -> dict:
        return {
            "candidates": [
                {
                    "content": {"role": "model", "parts": [{"text": text}]},
                    "finishReason": "STOP",
                },
            ],
        }

    return _wrap


@pytest.fixture
def image_b64() -> str:
    """A few bytes standing in for a JPEG, base64-encoded."""
    return base64.b64encode(b"\xff\xd8\xff\xe0fake-jpeg").decode()


@pytest.fixture
def holstein_response() -> str:
    """Mock Gemini output for a clear Holstein Friesian photo."""
    return json.dumps({
        "breed": "Holstein Friesian",
        "description": "A black-and-white dairy breed from the Netherlands, found worldwide.",
        "confidence": 0.92,
    })


@pytest.fixture
def no_cow_response() -> str:
    """Mock Gemini output for a photo of a dog."""
    return json.dumps({"error": "No cow was detected in the provided image."})


@pytest.fixture
def empty_object_response() -> str:
    return "{}"
