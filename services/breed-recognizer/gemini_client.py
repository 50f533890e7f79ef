"""HTTP client for the Gemini generateContent REST API.

Uses httpx with configurable timeouts. One request per call: failures are
raised to the caller, never retried here.
"""

import logging

import httpx

from config import settings

logger = logging.getLogger(__name__)


class MissingCredentialError(RuntimeError):
    """No API key configured. The client cannot be constructed without one."""


class GeminiServiceError(Exception):
    """Gemini request failed or returned an unusable response."""


class GeminiClient:
    """Synchronous client for structured (JSON) generation with one inline image."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        base_url: str | None = None,
        timeout: int | None = None,
        connect_timeout: int | None = None,
    ):
        key = api_key if api_key is not None else settings.API_KEY
        if not key:
            raise MissingCredentialError("API_KEY environment variable is not set.")

        self._model = model or settings.GEMINI_MODEL
        self._base_url = (base_url or settings.GEMINI_BASE_URL).rstrip("/")

        read_timeout = timeout if timeout is not None else settings.GEMINI_TIMEOUT_SECONDS
        conn_timeout = connect_timeout if connect_timeout is not None else settings.GEMINI_CONNECT_TIMEOUT

        self._client = httpx.Client(
            base_url=self._base_url,
            headers={"x-goog-api-key": key},
            timeout=httpx.Timeout(
                connect=float(conn_timeout),
                read=float(read_timeout),
                write=30.0,
                pool=30.0,
            ),
        )

    @property
    def model(self) -> str:
        return self._model

    def close(self):
        self._client.close()

    def generate(self, prompt: str, image_b64: str, mime_type: str, response_schema: dict) -> str:
        """Send prompt + inline image, constrained to a JSON response schema.

        Returns the raw text of the first candidate.
        Raises GeminiServiceError on transport errors, HTTP errors and empty replies.
        """
        payload = {
            "contents": [
                {
                    "parts": [
                        {"text": prompt},
                        {"inline_data": {"mime_type": mime_type, "data": image_b64}},
                    ],
                },
            ],
            "generationConfig": {
                "responseMimeType": "application/json",
                "responseSchema": response_schema,
            },
        }

        try:
            resp = self._client.post(f"/models/{self._model}:generateContent", json=payload)
        except httpx.HTTPError as e:
            logger.error("Gemini request failed: %s", e)
            raise GeminiServiceError(f"Gemini request failed: {e}") from e

        if resp.status_code != 200:
            detail = _error_detail(resp)
            logger.error("Gemini returned %d: %s", resp.status_code, detail)
            raise GeminiServiceError(detail)

        return _candidate_text(resp.json())

    def health(self) -> dict:
        """Check that the configured model is reachable. Never raises."""
        try:
            resp = self._client.get(f"/models/{self._model}", timeout=10.0)
        except Exception as e:
            logger.warning("Gemini health check failed: %s", e)
            return {"status": "unreachable", "error": str(e)}

        if resp.status_code != 200:
            return {"status": "unreachable", "error": _error_detail(resp)}
        return {"status": "reachable", "model": self._model}


def _error_detail(resp: httpx.Response) -> str:
    """Pull the human-readable message out of a Gemini error body."""
    try:
        body = resp.json()
    except ValueError:
        return f"HTTP {resp.status_code}"

    error = body.get("error") if isinstance(body, dict) else None
    if isinstance(error, dict) and error.get("message"):
        return error["message"]
    return f"HTTP {resp.status_code}"


def _candidate_text(data: dict) -> str:
    candidates = data.get("candidates") or []
    if not candidates:
        block_reason = (data.get("promptFeedback") or {}).get("blockReason")
        if block_reason:
            raise GeminiServiceError(f"Response blocked: {block_reason}")
        raise GeminiServiceError("Empty response from model")

    candidate = candidates[0]
    parts = (candidate.get("content") or {}).get("parts") or []
    text = "".join(part.get("text", "") for part in parts)

    if not text:
        finish_reason = candidate.get("finishReason")
        if finish_reason:
            raise GeminiServiceError(f"Empty response from model (finishReason={finish_reason})")
        raise GeminiServiceError("Empty response from model")

    return text
