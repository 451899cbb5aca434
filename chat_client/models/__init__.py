"""Pydantic models for transcript entries, wire payloads and results.

Provides type safety and validation at the service-client boundary.

Models:
    - Message: Immutable transcript entry
    - ChatMessage / CompletionRequest: Completion request payload
    - CompletionResponse: Validated completion reply
    - AlertNotice: Upload notice state
    - Ok / Err: Tagged results returned by the completion client
"""

from chat_client.models.schemas import (
    AlertNotice,
    ChatMessage,
    Choice,
    ChoiceMessage,
    CompletionRequest,
    CompletionResponse,
    CompletionResult,
    Err,
    IngestionOutcome,
    Message,
    Ok,
    Role,
    Sender,
    SendOutcome,
)

__all__ = [
    "AlertNotice",
    "ChatMessage",
    "Choice",
    "ChoiceMessage",
    "CompletionRequest",
    "CompletionResponse",
    "CompletionResult",
    "Err",
    "IngestionOutcome",
    "Message",
    "Ok",
    "Role",
    "SendOutcome",
    "Sender",
]
