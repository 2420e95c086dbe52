"""Unit tests for individual components in isolation.

Coverage:
    - parsing/: PDF text extraction and validation
    - conversation/: store, prompt composition, turn controller
    - generation/: configuration, request body, reply decoding

Uses an httpx MockTransport in place of the Gemini API.
"""
