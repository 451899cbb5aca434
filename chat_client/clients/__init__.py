"""HTTP clients for the two external services.

Responsibilities:
    - Completion: send the transcript, return the assistant reply as a tagged result
    - Ingestion: upload a document as multipart form data, report success/failure

Both clients accept an optional HTTPX transport so tests can substitute an
in-process service.
"""

from chat_client.clients.completion import COMPLETIONS_PATH, CompletionClient
from chat_client.clients.ingestion import DOCUMENT_FIELD, INGEST_PATH, IngestionClient

__all__ = [
    "COMPLETIONS_PATH",
    "DOCUMENT_FIELD",
    "INGEST_PATH",
    "CompletionClient",
    "IngestionClient",
]
