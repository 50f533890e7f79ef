"""FastAPI breed recognizer — upload a cow photo, get its breed from Gemini.

Serves the single-page upload UI and a JSON recognition endpoint.
Images are processed in-memory only, never logged or written to disk.
"""

import base64
import logging
import mimetypes
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, File, Request, UploadFile
from fastapi.responses import FileResponse, JSONResponse

from config import settings
from gemini_client import GeminiClient
from models import BreedResult
from recognition import recognize

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).parent / "static"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the Gemini client on startup. A missing API_KEY aborts startup."""
    logger.info("Using Gemini model %s", settings.GEMINI_MODEL)
    app.state.gemini_client = GeminiClient()

    yield

    app.state.gemini_client.close()


app = FastAPI(title="Cow Breed Recognizer", version="1.0.0", lifespan=lifespan)


@app.get("/", include_in_schema=False)
async def index():
    return FileResponse(STATIC_DIR / "index.html")


@app.post("/api/v1/recognize", response_model=BreedResult)
def recognize_breed(request: Request, file: UploadFile = File(...)):
    """Identify the breed of the cow in the uploaded image."""
    image_bytes = file.file.read()

    if not image_bytes:
        return JSONResponse(
            status_code=400,
            content={"detail": "Please upload an image first."},
        )

    if len(image_bytes) > settings.MAX_UPLOAD_BYTES:
        return JSONResponse(
            status_code=413,
            content={"detail": f"Image exceeds the {settings.MAX_UPLOAD_BYTES} byte upload limit"},
        )

    mime_type = file.content_type or _guess_mime_type(file.filename)
    logger.info("Processing recognition: type=%s size=%d bytes", mime_type, len(image_bytes))

    image_b64 = base64.b64encode(image_bytes).decode()
    return recognize(image_b64, mime_type, request.app.state.gemini_client)


@app.get("/health")
async def health(request: Request):
    """Return service status and Gemini reachability."""
    gemini_client = request.app.state.gemini_client
    return {
        "status": "healthy",
        "model": gemini_client.model,
        "gemini": gemini_client.health(),
    }


def _guess_mime_type(filename: str | None) -> str:
    if filename:
        guessed, _ = mimetypes.guess_type(filename)
        if guessed:
            return guessed
    return "application/octet-stream"


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)
