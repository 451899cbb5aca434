"""Error types raised or returned at the service-client boundary."""


class ChatClientError(Exception):
    """Base class for service-client errors."""


class NetworkError(ChatClientError):
    """Transport failure, non-2xx status, or a body that is not JSON."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class MalformedResponseError(ChatClientError):
    """Completion response is JSON but lacks the expected fields."""
