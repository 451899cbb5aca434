"""Conversation controller and application state.

One completion request may be outstanding at a time. A send issued while a
request is in flight is rejected with ``SendOutcome.BUSY``, so replies are
always appended in request order and the typing flag is cleared only by the
request that set it.
"""

import asyncio
import logging
from typing import Protocol

from chat_client.clients.completion import CompletionClient
from chat_client.clients.ingestion import IngestionClient
from chat_client.config import ClientConfig, get_client_config
from chat_client.export.spreadsheet import export_to_spreadsheet
from chat_client.models.schemas import (
    AlertNotice,
    CompletionRequest,
    Err,
    IngestionOutcome,
    Message,
    Sender,
    SendOutcome,
)
from chat_client.transcript.store import Transcript

logger = logging.getLogger(__name__)

UPLOAD_SUCCESS_MESSAGE = "Document uploaded successfully!"
UPLOAD_FAILURE_MESSAGE = "Error uploading document."


class ConversationView(Protocol):
    """Handles the controller uses to drive the rendering layer."""

    def render(self) -> None: ...

    def scroll_to_latest(self) -> None: ...

    def clear_input(self) -> None: ...

    def focus_input(self) -> None: ...


class AppState:
    """Mutable state for one page session."""

    def __init__(self, welcome_message: str, dark_theme: bool = True) -> None:
        self.transcript: Transcript = Transcript.initial(welcome_message)
        self.typing: bool = False
        self.dark_theme: bool = dark_theme
        self.alert: AlertNotice = AlertNotice()


class ConversationController:
    """Accepts user input and runs the completion round trip.

    Also exposes the side flows that read the same state: document upload
    (with a transient notice), spreadsheet export and the theme toggle.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        completion_client: CompletionClient | None = None,
        ingestion_client: IngestionClient | None = None,
        view: ConversationView | None = None,
    ) -> None:
        """Initialize the controller.

        Args:
            config: Optional client configuration.
                    Loads from environment if not provided.
            completion_client: Client for the completion endpoint.
            ingestion_client: Client for the ingestion endpoint.
            view: Rendering handle; can be attached later.
        """
        self._config = config or get_client_config()
        self._completion = completion_client or CompletionClient(self._config)
        self._ingestion = ingestion_client or IngestionClient(self._config)
        self._view = view
        self._alert_timer: asyncio.TimerHandle | None = None
        self.state = AppState(self._config.welcome_message)

    def attach_view(self, view: ConversationView) -> None:
        self._view = view

    def _append(self, message: Message) -> None:
        self.state.transcript = self.state.transcript.append(message)
        if self._view is not None:
            self._view.render()
            self._view.scroll_to_latest()

    def _set_typing(self, typing: bool) -> None:
        self.state.typing = typing
        if self._view is not None:
            self._view.render()

    async def send_user_message(self, text: str) -> SendOutcome:
        """Append the user's message and fetch the bot reply.

        Args:
            text: Raw input; surrounding whitespace is trimmed.

        Returns:
            IGNORED_EMPTY for blank input, BUSY while another request is in
            flight, REPLIED when a bot message was appended, FAILED when the
            completion failed (logged, nothing appended).
        """
        text = text.strip()
        if not text:
            return SendOutcome.IGNORED_EMPTY
        if self.state.typing:
            logger.info("Ignoring message while a reply is pending")
            return SendOutcome.BUSY

        self._append(Message(sender=Sender.USER, text=text))
        if self._view is not None:
            self._view.clear_input()
        self._set_typing(True)
        try:
            request = CompletionRequest(
                messages=self.state.transcript.to_chat_messages(),
                max_tokens=self._config.max_tokens,
            )
            result = await self._completion.complete(request)

            if isinstance(result, Err):
                logger.error(f"Completion failed: {result.error!r}")
                return SendOutcome.FAILED

            self._append(Message(sender=Sender.BOT, text=result.value))
            if self._view is not None:
                self._view.focus_input()
            return SendOutcome.REPLIED
        finally:
            self._set_typing(False)

    async def upload_document(
        self,
        filename: str,
        content: bytes,
        content_type: str | None = None,
    ) -> IngestionOutcome:
        """Upload a document and show the outcome as a transient notice."""
        outcome = await self._ingestion.upload(filename, content, content_type)
        message = (
            UPLOAD_SUCCESS_MESSAGE
            if outcome is IngestionOutcome.SUCCESS
            else UPLOAD_FAILURE_MESSAGE
        )
        self._show_alert(message)
        return outcome

    def _show_alert(self, message: str) -> None:
        if self._alert_timer is not None:
            self._alert_timer.cancel()
        self.state.alert = AlertNotice(message=message, visible=True)
        loop = asyncio.get_running_loop()
        self._alert_timer = loop.call_later(self._config.alert_duration, self.dismiss_alert)
        if self._view is not None:
            self._view.render()

    def dismiss_alert(self) -> None:
        if self._alert_timer is not None:
            self._alert_timer.cancel()
            self._alert_timer = None
        if not self.state.alert.visible:
            return
        self.state.alert = AlertNotice(message=self.state.alert.message, visible=False)
        if self._view is not None:
            self._view.render()

    def export_transcript(self) -> bytes:
        """Encode the current transcript as xlsx bytes."""
        return export_to_spreadsheet(self.state.transcript)

    def toggle_theme(self) -> bool:
        self.state.dark_theme = not self.state.dark_theme
        if self._view is not None:
            self._view.render()
        return self.state.dark_theme
