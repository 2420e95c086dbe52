"""NiceGUI interface - thin visualization layer for the chat session.

Responsibilities:
    - Message display for user, assistant, file-notice and error turns
    - Typing indicator while a reply is pending
    - Single-file PDF upload

Holds no conversation state of its own; it renders the turn controller's
snapshot and re-renders when the controller reports a change.
"""
