"""Document upload to the ingestion service."""

import logging

import httpx

from chat_client.config import ClientConfig, get_client_config
from chat_client.models.schemas import IngestionOutcome

logger = logging.getLogger(__name__)

INGEST_PATH = "/api/run_ingest"
DOCUMENT_FIELD = "document"


class IngestionClient:
    """Posts a file as multipart form data under the ``document`` field.

    The response body is never parsed. With ``ingest_check_status`` disabled,
    any completed exchange counts as success and only transport errors fail.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or get_client_config()
        self._transport = transport

    @property
    def url(self) -> str:
        return f"{self._config.ingest_base_url}{INGEST_PATH}"

    async def upload(
        self,
        filename: str,
        content: bytes,
        content_type: str | None = None,
    ) -> IngestionOutcome:
        """Upload a document.

        Args:
            filename: Name reported to the service.
            content: Raw file bytes.
            content_type: Optional MIME type of the file.

        Returns:
            IngestionOutcome.SUCCESS or IngestionOutcome.FAILURE.
        """
        file_spec = (
            (filename, content, content_type) if content_type else (filename, content)
        )

        async with httpx.AsyncClient(
            timeout=self._config.request_timeout,
            transport=self._transport,
        ) as client:
            try:
                response = await client.post(self.url, files={DOCUMENT_FIELD: file_spec})
            except httpx.RequestError as e:
                logger.error(f"Failed to upload {filename}: {e}")
                return IngestionOutcome.FAILURE

        if self._config.ingest_check_status and not response.is_success:
            logger.warning(
                f"Ingestion rejected {filename} with HTTP {response.status_code}"
            )
            return IngestionOutcome.FAILURE

        logger.info(f"Uploaded {filename} ({len(content)} bytes)")
        return IngestionOutcome.SUCCESS
