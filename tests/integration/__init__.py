"""Integration tests for the HTTP API working with the turn controller.

Requests go through the real FastAPI app via ASGITransport; only the
generation endpoint is stubbed.
"""
