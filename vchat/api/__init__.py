"""FastAPI endpoints for VChat.

Endpoints:
    - GET /health: Service health status
    - POST /chat: Send a message, receive the assistant turn
    - GET /chat/history: Conversation so far
    - POST /upload/pdf: Replace the document context with a PDF
"""

from vchat.api.app import create_app

__all__ = ["create_app"]
