"""NiceGUI chat interface backed by the conversation controller."""

from nicegui import events, ui

from chat_client.config import get_client_config
from chat_client.controller.conversation import AppState, ConversationController
from chat_client.export.spreadsheet import EXPORT_FILENAME, XLSX_MEDIA_TYPE
from chat_client.models.schemas import Message, Sender

APP_TITLE = "CDAC-CHATBOT"

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    .app-container {
        border-radius: 10px;
        box-shadow: 0px 3px 6px #00000029;
        overflow: hidden;
    }

    .message-user {
        background: rgb(25, 118, 210);
        color: #ddd;
        border-radius: 8px;
    }

    .message-bot {
        background: #fff;
        color: rgb(25, 118, 210);
        border-radius: 8px;
        box-shadow: 0px 3px 6px #00000029;
    }
    .body--dark .message-bot { background: #999; color: #000; box-shadow: none; }

    .typing-dot {
        width: 6px; height: 6px;
        background: currentColor;
        border-radius: 50%;
        animation: blink 1.4s infinite both;
    }
    .typing-dot:nth-child(2) { animation-delay: 0.2s; }
    .typing-dot:nth-child(3) { animation-delay: 0.4s; }

    @keyframes blink {
        0%, 80%, 100% { opacity: 0; }
        40% { opacity: 1; }
    }
</style>
"""


class ChatPageView:
    """Rendering handles the controller drives after every state change."""

    def __init__(
        self,
        state: AppState,
        messages_container: ui.column,
        scroll_area: ui.scroll_area,
        input_field: ui.input,
        send_btn: ui.button,
        alert_banner: ui.label,
        dark_mode: ui.dark_mode,
    ) -> None:
        self._state = state
        self._messages_container = messages_container
        self._scroll_area = scroll_area
        self._input_field = input_field
        self._send_btn = send_btn
        self._alert_banner = alert_banner
        self._dark_mode = dark_mode

    def render(self) -> None:
        self._messages_container.clear()
        with self._messages_container:
            for msg in self._state.transcript:
                render_message(msg)
            if self._state.typing:
                render_typing_indicator()

        self._send_btn.set_enabled(not self._state.typing)
        self._alert_banner.set_text(self._state.alert.message)
        self._alert_banner.set_visibility(self._state.alert.visible)
        self._dark_mode.value = self._state.dark_theme

    def scroll_to_latest(self) -> None:
        self._scroll_area.scroll_to(percent=1.0)

    def clear_input(self) -> None:
        self._input_field.value = ""

    def focus_input(self) -> None:
        self._input_field.run_method("focus")


def render_message(msg: Message) -> None:
    is_user = msg.sender is Sender.USER
    align = "justify-end" if is_user else "justify-start"
    bubble = "message-user" if is_user else "message-bot"

    with ui.row().classes(f"w-full {align}"):
        with ui.element("div").classes(f"px-4 py-3 max-w-[80%] break-words {bubble}"):
            ui.label(msg.text).classes("text-base whitespace-pre-wrap")


def render_typing_indicator() -> None:
    with ui.row().classes("w-full justify-end items-center gap-2"):
        ui.label("Bot typing").classes("text-base")
        with ui.row().classes("gap-1"):
            for _ in range(3):
                ui.element("div").classes("typing-dot")


@ui.page("/")
def chat_page() -> None:
    """Main chat page."""
    ui.add_head_html(CUSTOM_CSS)
    controller = ConversationController(get_client_config())
    state = controller.state

    dark_mode = ui.dark_mode(value=state.dark_theme)

    async def send_message() -> None:
        await controller.send_user_message(input_field.value or "")

    async def handle_upload(e: events.UploadEventArguments) -> None:
        content = await e.file.read()
        await controller.upload_document(e.file.name, content, e.file.content_type or None)
        uploader.reset()

    def download_transcript() -> None:
        ui.download.content(controller.export_transcript(), EXPORT_FILENAME, XLSX_MEDIA_TYPE)

    # === UI Layout ===
    with ui.header().classes("items-center justify-between px-4"):
        ui.icon("smart_toy").classes("text-3xl")
        ui.label(APP_TITLE).classes("text-lg font-semibold flex-1 text-center")
        ui.button(icon="brightness_4", on_click=controller.toggle_theme).props(
            "flat round color=white"
        )

    with ui.column().classes("w-full max-w-4xl mx-auto p-4 mt-10 gap-4").style(
        "height: 580px"
    ):
        # Messages
        with ui.scroll_area().classes("flex-grow w-full app-container") as scroll_area:
            messages_container = ui.column().classes("w-full gap-2 p-2")

        # Input
        input_field = (
            ui.input(label="Type your message...")
            .props("outlined autofocus")
            .classes("w-full")
            .on("keydown.enter", send_message)
        )
        with ui.row().classes("w-full gap-2 no-wrap"):
            send_btn = ui.button("Send", on_click=send_message).classes("flex-1")
            ui.button(
                "Upload",
                icon="cloud_upload",
                on_click=lambda: uploader.run_method("pickFiles"),
            ).props("outline").classes("flex-1")
            ui.button("Download", on_click=download_transcript).props(
                "outline icon-right=cloud_download"
            ).classes("flex-1")

        uploader = ui.upload(on_upload=handle_upload, auto_upload=True).classes("hidden")

    alert_banner = ui.label().classes(
        "fixed bottom-4 left-4 bg-blue-100 text-blue-900 px-4 py-2 rounded shadow"
    )

    view = ChatPageView(
        state,
        messages_container,
        scroll_area,
        input_field,
        send_btn,
        alert_banner,
        dark_mode,
    )
    controller.attach_view(view)
    view.render()
