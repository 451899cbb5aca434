"""Client configuration with environment variable loading.

Pydantic-based configuration for the chat client. Points the client at an
OpenAI-compatible completion service and a document-ingestion service.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, PositiveFloat, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_COMPLETION_BASE_URL = "http://localhost:8000"
DEFAULT_INGEST_BASE_URL = "https://ca14-14-139-109-7.ngrok-free.app"
DEFAULT_WELCOME_MESSAGE = "Welcome to CDAC-ChatBot application."


def _env_timeout() -> float | None:
    raw = os.getenv("REQUEST_TIMEOUT", "").strip()
    return float(raw) if raw else None


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


class ClientConfig(BaseModel):
    """Configuration for the chat client.

    Attributes:
        completion_base_url: Host serving /v1/chat/completions.
        ingest_base_url: Host serving /api/run_ingest.
        max_tokens: Response-length cap sent with every completion request.
        request_timeout: Seconds before a request is abandoned (None = wait forever).
        ingest_check_status: Report non-2xx ingestion responses as failures.
        welcome_message: Text of the synthetic first bot message.
        alert_duration: Seconds an upload notice stays visible.
    """

    completion_base_url: str = Field(
        default_factory=lambda: os.getenv("COMPLETION_BASE_URL", DEFAULT_COMPLETION_BASE_URL),
        validate_default=True,
        description="Base URL of the chat-completion service",
    )
    ingest_base_url: str = Field(
        default_factory=lambda: os.getenv("INGEST_BASE_URL", DEFAULT_INGEST_BASE_URL),
        validate_default=True,
        description="Base URL of the document-ingestion service",
    )
    max_tokens: int = Field(
        default=50,
        ge=1,
        le=128000,
        description="Maximum tokens in generated response",
    )
    request_timeout: PositiveFloat | None = Field(
        default_factory=_env_timeout,
        description="Network timeout in seconds (None disables timeouts)",
    )
    ingest_check_status: bool = Field(
        default_factory=lambda: _env_flag("INGEST_CHECK_STATUS", True),
        description="Treat non-2xx ingestion responses as failures",
    )
    welcome_message: str = Field(
        default_factory=lambda: os.getenv("WELCOME_MESSAGE", DEFAULT_WELCOME_MESSAGE),
        min_length=1,
        description="Synthetic bot message that opens every transcript",
    )
    alert_duration: float = Field(
        default=3.0,
        gt=0,
        description="Seconds before an upload notice is dismissed",
    )

    @field_validator("completion_base_url", "ingest_base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Require a non-empty URL and drop any trailing slash."""
        if not v or not v.strip():
            raise ValueError("Base URL required. Set COMPLETION_BASE_URL / INGEST_BASE_URL in .env")
        return v.strip().rstrip("/")


def get_client_config() -> ClientConfig:
    """Create client configuration from environment.

    Returns:
        Configured ClientConfig instance.

    Raises:
        ValueError: If a base URL is blank.
    """
    return ClientConfig()
