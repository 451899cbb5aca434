"""Client for an OpenAI-compatible chat-completion endpoint.

Sends the full conversation and returns the first choice's content. Expected
failures come back as ``Err`` values instead of raised exceptions, so callers
branch on the result type.
"""

import logging

import httpx
from pydantic import ValidationError

from chat_client.config import ClientConfig, get_client_config
from chat_client.errors import MalformedResponseError, NetworkError
from chat_client.models.schemas import (
    CompletionRequest,
    CompletionResponse,
    CompletionResult,
    Err,
    Ok,
)

logger = logging.getLogger(__name__)

COMPLETIONS_PATH = "/v1/chat/completions"


class CompletionClient:
    """Single-round-trip completion client built on HTTPX."""

    def __init__(
        self,
        config: ClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Optional client configuration.
                    Loads from environment if not provided.
            transport: Optional HTTPX transport (tests use ASGI or mock transports).
        """
        self._config = config or get_client_config()
        self._transport = transport

    @property
    def url(self) -> str:
        return f"{self._config.completion_base_url}{COMPLETIONS_PATH}"

    async def complete(self, request: CompletionRequest) -> CompletionResult:
        """POST the conversation and extract the reply text.

        Args:
            request: Messages plus the response-length cap.

        Returns:
            ``Ok`` with the reply text, or ``Err`` wrapping a NetworkError
            (transport failure, non-2xx status, non-JSON body) or a
            MalformedResponseError (missing choices/message/content).
        """
        payload = request.model_dump(mode="json")
        logger.debug(f"Requesting completion for {len(request.messages)} messages")

        async with httpx.AsyncClient(
            timeout=self._config.request_timeout,
            transport=self._transport,
        ) as client:
            try:
                response = await client.post(self.url, json=payload)
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                status = e.response.status_code
                return Err(error=NetworkError(f"HTTP {status}", status_code=status))
            except httpx.RequestError as e:
                return Err(error=NetworkError(f"Connection failed: {e}"))

        try:
            body = response.json()
        except ValueError as e:
            return Err(
                error=NetworkError(
                    f"Response is not JSON: {e}", status_code=response.status_code
                )
            )

        try:
            parsed = CompletionResponse.model_validate(body)
        except ValidationError as e:
            return Err(error=MalformedResponseError(f"Unexpected response shape: {e}"))

        if not parsed.choices:
            return Err(error=MalformedResponseError("Response contains no choices"))

        return Ok(value=parsed.choices[0].message.content)
