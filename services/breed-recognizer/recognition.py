"""Recognition adapter: image in, exactly one BreedResult out.

Calls Gemini once with the fixed prompt and schema, decodes the JSON reply
and collapses it into either a BreedIdentification or a RecognitionFailure.
Per-request faults never escape as exceptions.
"""

import json
import logging

from gemini_client import GeminiClient
from models import BreedIdentification, BreedInfo, BreedResult, RecognitionFailure
from prompts import BREED_INFO_SCHEMA, RECOGNITION_PROMPT

logger = logging.getLogger(__name__)

UNDETERMINED_BREED_MESSAGE = "Could not determine the breed. The image may not contain a cow."
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred during breed recognition."


def recognize(image_data: str, mime_type: str, client: GeminiClient) -> BreedResult:
    """Identify the cow breed in a base64-encoded image."""
    # Log size and type only, never image content
    logger.info("Recognizing breed: type=%s size=%d b64 chars", mime_type, len(image_data))

    try:
        raw = client.generate(RECOGNITION_PROMPT, image_data, mime_type, BREED_INFO_SCHEMA)
        return to_breed_result(decode_reply(raw))
    except Exception as e:
        logger.exception("Error calling Gemini API")
        message = str(e)
        if message:
            return RecognitionFailure(error=f"API Error: {message}")
        return RecognitionFailure(error=UNEXPECTED_ERROR_MESSAGE)


def decode_reply(raw: str) -> dict:
    """Strictly decode the model reply. Raises on anything but a JSON object."""
    parsed = json.loads(raw.strip())
    if not isinstance(parsed, dict):
        raise ValueError(f"Expected a JSON object, got {type(parsed).__name__}")
    return parsed


def to_breed_result(reply: dict) -> BreedResult:
    """Pick exactly one arm: explicit error, then missing breed, then success.

    The error and breed checks look at the raw reply so that a model-reported
    error survives whatever else the reply carries. Field types are validated
    only for the success arm; a mismatch raises pydantic.ValidationError.
    """
    error = reply.get("error")
    if isinstance(error, str) and error:
        return RecognitionFailure(error=error)

    if not reply.get("breed"):
        return RecognitionFailure(error=UNDETERMINED_BREED_MESSAGE)

    info = BreedInfo.model_validate(reply)
    return BreedIdentification(
        breed=info.breed,
        description=info.description,
        confidence=info.confidence,
    )
