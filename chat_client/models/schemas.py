from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from chat_client.errors import ChatClientError

T = TypeVar("T")


class Sender(str, Enum):
    """Author of a transcript message."""

    USER = "user"
    BOT = "bot"


class Role(str, Enum):
    """Role values understood by the completion endpoint."""

    USER = "user"
    ASSISTANT = "assistant"


class IngestionOutcome(str, Enum):
    """Binary result of a document upload."""

    SUCCESS = "success"
    FAILURE = "failure"


class SendOutcome(str, Enum):
    """What happened to a submitted user message."""

    IGNORED_EMPTY = "ignored_empty"
    BUSY = "busy"
    REPLIED = "replied"
    FAILED = "failed"


class Message(BaseModel):
    """A single transcript entry.

    Attributes:
        sender: Who wrote the message (user or bot).
        text: The message text.
    """

    model_config = ConfigDict(frozen=True)

    sender: Sender
    text: str

    @property
    def role(self) -> Role:
        """Completion-endpoint role for this sender."""
        return Role.USER if self.sender is Sender.USER else Role.ASSISTANT


class ChatMessage(BaseModel):
    """A role/content pair in a completion request.

    Attributes:
        role: The speaker identifier (user or assistant).
        content: The message text.
    """

    role: Role
    content: str


class CompletionRequest(BaseModel):
    """Request body for POST /v1/chat/completions.

    Attributes:
        messages: The entire conversation so far.
        max_tokens: Response-length cap.
    """

    messages: list[ChatMessage]
    max_tokens: int = Field(..., ge=1)


class ChoiceMessage(BaseModel):
    """Assistant message inside a completion choice.

    Attributes:
        content: The reply text.
    """

    content: str


class Choice(BaseModel):
    """One candidate reply from the completion endpoint.

    Attributes:
        message: The assistant message for this candidate.
    """

    message: ChoiceMessage


class CompletionResponse(BaseModel):
    """Response body of the completion endpoint.

    Only ``choices[0].message.content`` is consumed; other fields are ignored.
    """

    choices: list[Choice]


class AlertNotice(BaseModel):
    """Transient notice shown after an upload attempt."""

    message: str = ""
    visible: bool = False


class Ok(BaseModel, Generic[T]):
    """Successful result carrying a value."""

    model_config = ConfigDict(frozen=True)

    value: T


class Err(BaseModel):
    """Failed result carrying the error that caused it."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    error: ChatClientError


CompletionResult = Ok[str] | Err
