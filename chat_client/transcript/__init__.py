"""Append-only conversation history.

Single source of truth for rendering, completion requests and export.
"""

from chat_client.transcript.store import Transcript

__all__ = ["Transcript"]
