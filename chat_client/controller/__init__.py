"""Conversation state machine.

Owns the application state and orchestrates the transcript, the completion and
ingestion clients, and the export encoder. The rendering layer only sees the
state object and the ConversationView handle it registers.
"""

from chat_client.controller.conversation import (
    UPLOAD_FAILURE_MESSAGE,
    UPLOAD_SUCCESS_MESSAGE,
    AppState,
    ConversationController,
    ConversationView,
)

__all__ = [
    "UPLOAD_FAILURE_MESSAGE",
    "UPLOAD_SUCCESS_MESSAGE",
    "AppState",
    "ConversationController",
    "ConversationView",
]
