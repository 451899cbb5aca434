"""Host application for the chat page.

Endpoints:
    - GET /health: Service health status
    - GET /: Chat page (NiceGUI, mounted in main.py)
"""

from chat_client.api.app import create_app

__all__ = ["create_app"]
