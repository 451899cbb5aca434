"""Unit tests for individual components in isolation.

Coverage:
    - config: Environment loading and validation
    - models/transcript: Message immutability and append-only history
    - export: Spreadsheet encoding
    - controller: Conversation state machine with stubbed clients

Uses stubs for the service clients. Leverages pytest-check for multiple
assertions per test.
"""
