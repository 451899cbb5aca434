"""Integration tests for CompletionClient against a fake completion service."""

import httpx
import pytest
import pytest_check as check

from chat_client.clients.completion import CompletionClient
from chat_client.config import ClientConfig
from chat_client.errors import MalformedResponseError, NetworkError
from chat_client.models.schemas import ChatMessage, CompletionRequest, Err, Ok, Role
from tests.conftest import FakeCompletionService, completion_body


def _request() -> CompletionRequest:
    return CompletionRequest(
        messages=[
            ChatMessage(role=Role.ASSISTANT, content="Welcome!"),
            ChatMessage(role=Role.USER, content="hi"),
        ],
        max_tokens=50,
    )


class TestCompletionSuccess:
    async def test_returns_first_choice_content(
        self, completion_client: CompletionClient, completion_service: FakeCompletionService
    ) -> None:
        completion_service.body = completion_body("first", "second")

        result = await completion_client.complete(_request())

        assert isinstance(result, Ok)
        assert result.value == "first"

    async def test_request_body_shape(
        self, completion_client: CompletionClient, completion_service: FakeCompletionService
    ) -> None:
        await completion_client.complete(_request())

        assert completion_service.requests == [
            {
                "messages": [
                    {"role": "assistant", "content": "Welcome!"},
                    {"role": "user", "content": "hi"},
                ],
                "max_tokens": 50,
            }
        ]

    async def test_posts_to_completions_path(self, client_config: ClientConfig) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=completion_body("ok"))

        client = CompletionClient(client_config, transport=httpx.MockTransport(handler))
        await client.complete(_request())

        check.equal(len(seen), 1)
        check.equal(seen[0].method, "POST")
        check.equal(str(seen[0].url), "http://completion.test/v1/chat/completions")
        check.equal(seen[0].headers["content-type"], "application/json")


class TestCompletionFailures:
    async def test_empty_choices_is_malformed(
        self, completion_client: CompletionClient, completion_service: FakeCompletionService
    ) -> None:
        completion_service.body = {"choices": []}

        result = await completion_client.complete(_request())

        assert isinstance(result, Err)
        assert isinstance(result.error, MalformedResponseError)

    @pytest.mark.parametrize(
        "body",
        [
            {},
            {"choices": [{}]},
            {"choices": [{"message": {}}]},
            {"choices": [{"message": {"content": None}}]},
            {"choices": "nope"},
        ],
    )
    async def test_missing_fields_are_malformed(
        self,
        completion_client: CompletionClient,
        completion_service: FakeCompletionService,
        body: dict,
    ) -> None:
        completion_service.body = body

        result = await completion_client.complete(_request())

        assert isinstance(result, Err)
        assert isinstance(result.error, MalformedResponseError)

    async def test_non_json_body_is_network_error(
        self, completion_client: CompletionClient, completion_service: FakeCompletionService
    ) -> None:
        completion_service.body = "<html>Bad Gateway</html>"

        result = await completion_client.complete(_request())

        assert isinstance(result, Err)
        assert isinstance(result.error, NetworkError)

    @pytest.mark.parametrize("status_code", [400, 404, 500, 503])
    async def test_non_2xx_is_network_error(
        self,
        completion_client: CompletionClient,
        completion_service: FakeCompletionService,
        status_code: int,
    ) -> None:
        completion_service.status_code = status_code

        result = await completion_client.complete(_request())

        assert isinstance(result, Err)
        check.is_instance(result.error, NetworkError)
        check.equal(result.error.status_code, status_code)

    async def test_transport_failure_is_network_error(self, client_config: ClientConfig) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = CompletionClient(client_config, transport=httpx.MockTransport(handler))

        result = await client.complete(_request())

        assert isinstance(result, Err)
        check.is_instance(result.error, NetworkError)
        check.is_none(result.error.status_code)
        check.is_in("Connection failed", str(result.error))
