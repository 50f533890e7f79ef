"""Environment-based configuration for the breed recognizer."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Breed recognizer settings, loaded from environment variables."""

    # Server
    PORT: int = 8092

    # Gemini credential (empty = not configured, service refuses to start)
    API_KEY: str = ""

    # Gemini model and endpoint
    GEMINI_MODEL: str = "gemini-2.5-flash"
    GEMINI_BASE_URL: str = "https://generativelanguage.googleapis.com/v1beta"

    # Transport timeouts (no retries, one request per recognition)
    GEMINI_TIMEOUT_SECONDS: int = 60
    GEMINI_CONNECT_TIMEOUT: int = 10

    # Upload limit
    MAX_UPLOAD_BYTES: int = 10 * 1024 * 1024

    model_config = {"env_prefix": "", "case_sensitive": True}


settings = Settings()
