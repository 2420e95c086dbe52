"""Prompt composition from user input and document context."""

PROMPT_SEPARATOR = "\n\n---\n\n"


def compose_prompt(user_input: str, document_text: str) -> str:
    """Combine the user's input with the retained document text.

    The separator is always present, even when no document was uploaded.
    No length limit is applied here.

    Args:
        user_input: Trimmed, non-empty user text.
        document_text: Extracted document text, possibly empty.

    Returns:
        The prompt sent to the generation endpoint.
    """
    return f"{user_input}{PROMPT_SEPARATOR}{document_text}"
