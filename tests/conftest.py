"""Pytest fixtures and shared test configuration.

Fixtures:
    - client_config: Configuration pointing at the fake services
    - completion_service / ingest_service: In-process FastAPI fakes
    - completion_client / ingestion_client: Real clients wired to the fakes
    - recording_view: ConversationView that records every call
"""

from typing import Any

import httpx
import pytest
from fastapi import FastAPI, Response, UploadFile
from fastapi.responses import JSONResponse

from chat_client.clients.completion import COMPLETIONS_PATH, CompletionClient
from chat_client.clients.ingestion import INGEST_PATH, IngestionClient
from chat_client.config import ClientConfig

WELCOME = "Welcome to CDAC-ChatBot application."


def completion_body(*contents: str) -> dict[str, Any]:
    """Build an OpenAI-style completion response with one choice per content."""
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "choices": [
            {"index": i, "message": {"role": "assistant", "content": c}, "finish_reason": "stop"}
            for i, c in enumerate(contents)
        ],
    }


class FakeCompletionService:
    """Completion endpoint that records requests and returns a scripted body."""

    def __init__(self) -> None:
        self.requests: list[dict[str, Any]] = []
        self.body: dict[str, Any] | str = completion_body("Hi")
        self.status_code = 200
        self.app = FastAPI()

        @self.app.post(COMPLETIONS_PATH)
        async def completions(payload: dict[str, Any]) -> Response:
            self.requests.append(payload)
            if isinstance(self.body, str):
                return Response(self.body, status_code=self.status_code, media_type="text/plain")
            return JSONResponse(self.body, status_code=self.status_code)


class FakeIngestService:
    """Ingestion endpoint that records uploaded documents."""

    def __init__(self) -> None:
        self.uploads: list[tuple[str | None, bytes]] = []
        self.status_code = 200
        self.app = FastAPI()

        @self.app.post(INGEST_PATH)
        async def run_ingest(document: UploadFile) -> Response:
            self.uploads.append((document.filename, await document.read()))
            return Response('{"status": "queued"}', status_code=self.status_code)


class RecordingView:
    """ConversationView that records calls and state snapshots."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def render(self) -> None:
        self.calls.append("render")

    def scroll_to_latest(self) -> None:
        self.calls.append("scroll_to_latest")

    def clear_input(self) -> None:
        self.calls.append("clear_input")

    def focus_input(self) -> None:
        self.calls.append("focus_input")


@pytest.fixture
def client_config() -> ClientConfig:
    """Configuration pointing at the fake services with a short alert."""
    return ClientConfig(
        completion_base_url="http://completion.test",
        ingest_base_url="http://ingest.test",
        request_timeout=5.0,
        ingest_check_status=True,
        welcome_message=WELCOME,
        alert_duration=0.05,
    )


@pytest.fixture
def completion_service() -> FakeCompletionService:
    return FakeCompletionService()


@pytest.fixture
def ingest_service() -> FakeIngestService:
    return FakeIngestService()


@pytest.fixture
def completion_client(
    client_config: ClientConfig, completion_service: FakeCompletionService
) -> CompletionClient:
    return CompletionClient(
        client_config, transport=httpx.ASGITransport(app=completion_service.app)
    )


@pytest.fixture
def ingestion_client(
    client_config: ClientConfig, ingest_service: FakeIngestService
) -> IngestionClient:
    return IngestionClient(client_config, transport=httpx.ASGITransport(app=ingest_service.app))


@pytest.fixture
def recording_view() -> RecordingView:
    return RecordingView()
