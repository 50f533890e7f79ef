"""Pydantic models for the decoded Gemini reply and the recognition result."""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class BreedInfo(BaseModel):
    """Decoded model reply. The response schema requires nothing, so neither do we."""

    breed: str | None = None
    description: str | None = None
    # Strict: a string like "0.9" is rejected, not converted. Non-finite values
    # (1e999 decodes to inf) have no JSON form and are rejected too.
    confidence: float | None = Field(default=None, strict=True, allow_inf_nan=False)
    error: str | None = None


class BreedIdentification(BaseModel):
    status: Literal["ok"] = "ok"
    breed: str
    description: str | None = None
    # Passed through as returned, nominally 0.0-1.0 but never clamped
    confidence: float | None = Field(default=None, strict=True, allow_inf_nan=False)


class RecognitionFailure(BaseModel):
    status: Literal["error"] = "error"
    error: str


BreedResult = Annotated[
    Union[BreedIdentification, RecognitionFailure],
    Field(discriminator="status"),
]
