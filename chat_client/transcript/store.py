"""Immutable transcript of exchanged messages."""

from collections.abc import Iterator

from chat_client.models.schemas import ChatMessage, Message, Sender


class Transcript:
    """Ordered, append-only sequence of messages.

    ``append`` never mutates the receiver; it returns a new transcript with the
    message added at the end. Entries are never reordered or removed.
    """

    __slots__ = ("_messages",)

    def __init__(self, messages: tuple[Message, ...] = ()) -> None:
        self._messages = tuple(messages)

    @classmethod
    def initial(cls, welcome_text: str) -> "Transcript":
        """Create a transcript holding only the bot welcome message."""
        return cls((Message(sender=Sender.BOT, text=welcome_text),))

    def append(self, message: Message) -> "Transcript":
        return Transcript((*self._messages, message))

    @property
    def messages(self) -> tuple[Message, ...]:
        return self._messages

    @property
    def last(self) -> Message | None:
        return self._messages[-1] if self._messages else None

    def to_export_rows(self) -> list[dict[str, str]]:
        """Rows for the export encoder, in transcript order."""
        return [{"sender": m.sender.value, "text": m.text} for m in self._messages]

    def to_chat_messages(self) -> list[ChatMessage]:
        """Map the whole transcript to completion-endpoint role/content pairs."""
        return [ChatMessage(role=m.role, content=m.text) for m in self._messages]

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(self._messages)

    def __getitem__(self, index: int) -> Message:
        return self._messages[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Transcript):
            return NotImplemented
        return self._messages == other._messages

    def __hash__(self) -> int:
        return hash(self._messages)

    def __repr__(self) -> str:
        return f"Transcript({len(self._messages)} messages)"
