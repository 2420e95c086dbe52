"""Test package for VChat.

Structure:
    - unit/: Individual function and class tests
    - integration/: HTTP API tests through the ASGI app

PDFs are built in memory by fixtures; the generation endpoint is replaced
by a stub client or an httpx MockTransport. No network access is needed.
Leverages pytest with pytest-check for soft assertions.
"""
