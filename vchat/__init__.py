"""VChat - a single-page assistant that chats with Gemini about an uploaded PDF.

Combines FastAPI for HTTP endpoints, NiceGUI for the chat page, pypdf for
text extraction, httpx for the Gemini API, and Pydantic for data validation.

Components:
    - parsing: PDF text extraction
    - conversation: message log, prompt composition, turn controller
    - generation: Gemini client and configuration
    - api: HTTP endpoints
    - ui: Web interface for chat interactions
    - models: Shared schemas
"""

__version__ = "0.1.0"
