"""Chat Client - browser chat front end for an OpenAI-compatible completion service.

Combines NiceGUI for the chat page, FastAPI as the hosting server, HTTPX for the
completion and ingestion services, openpyxl for transcript export, and Pydantic
for data validation.

Components:
    - controller: Conversation state machine and application state
    - transcript: Append-only message history
    - clients: Completion and document-ingestion HTTP clients
    - export: Spreadsheet encoding of the transcript
    - ui: Web interface for chat interactions
    - api: Host application and health endpoint
    - models: Messages, wire schemas and result types
"""

__version__ = "0.1.0"
