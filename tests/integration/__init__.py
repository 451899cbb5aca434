"""Integration tests for components working together.

Drives the real HTTPX clients against fake completion and ingestion services
served in-process through ASGI transports. No network access required.
"""
