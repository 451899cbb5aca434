"""Test package for Chat Client.

Provides coverage for all components with unit tests for isolated logic and
integration tests for the HTTP clients and the full conversation flow.

Structure:
    - unit/: Individual function and class tests
    - integration/: Real HTTPX clients against in-process fake services

Leverages pytest with pytest-asyncio and pytest-check for soft assertions.
"""
