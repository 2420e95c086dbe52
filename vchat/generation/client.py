"""HTTP client for the Gemini generateContent endpoint.

A request either produces reply text or fails. The two are kept apart:

- ``success``: the service returned text at ``candidates[0].content.parts[0].text``.
- ``fallback``: the service answered but without usable text (no candidates,
  blocked prompt, unexpected shape, error body). The fixed fallback text is
  shown as a normal reply.
- ``error``: the request could not be completed or the body was not JSON.
  Carries a ``GenerationError`` chained to the underlying exception.
"""

import logging
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict

from vchat.generation.config import GenerationConfig, get_generation_config
from vchat.models.schemas import GenerationOutcome

logger = logging.getLogger(__name__)

FALLBACK_TEXT = "🤖 Sorry, I could not understand that."
SEARCH_TOOL = "googleSearch"


class GenerationError(Exception):
    """Raised when the generation endpoint cannot be reached or read."""


class GenerationResult(BaseModel):
    """Tagged result of one generation request.

    Attributes:
        outcome: success, fallback, or error.
        text: Reply text (empty for errors).
        error: The failure, for the error outcome only.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    outcome: GenerationOutcome
    text: str = ""
    error: GenerationError | None = None

    @property
    def ok(self) -> bool:
        """True when the service replied, with or without usable text."""
        return self.outcome is not GenerationOutcome.ERROR

    @classmethod
    def failed(cls, error: GenerationError) -> "GenerationResult":
        return cls(outcome=GenerationOutcome.ERROR, error=error)


def build_request_body(prompt: str, enable_search: bool = True) -> dict[str, Any]:
    """Build the JSON body carrying the prompt as the single user turn."""
    body: dict[str, Any] = {
        "contents": [
            {
                "role": "user",
                "parts": [{"text": prompt}],
            }
        ],
    }
    if enable_search:
        body["tools"] = [{SEARCH_TOOL: {}}]
    return body


def _first(value: Any) -> Any:
    if isinstance(value, list) and value:
        return value[0]
    return None


def decode_reply(payload: Any) -> GenerationResult:
    """Read the reply text out of a decoded response body.

    Only ``candidates[0].content.parts[0].text`` is used. Anything else,
    including whitespace-only text, maps to the fallback text.
    """
    candidate = _first(payload.get("candidates")) if isinstance(payload, dict) else None
    content = candidate.get("content") if isinstance(candidate, dict) else None
    part = _first(content.get("parts")) if isinstance(content, dict) else None
    text = part.get("text") if isinstance(part, dict) else None

    if isinstance(text, str) and text.strip():
        return GenerationResult(outcome=GenerationOutcome.SUCCESS, text=text.strip())

    if isinstance(payload, dict) and "promptFeedback" in payload:
        logger.info(f"Reply carried no text, prompt feedback: {payload['promptFeedback']}")
    else:
        logger.info("Reply carried no usable text, using fallback")
    return GenerationResult(outcome=GenerationOutcome.FALLBACK, text=FALLBACK_TEXT)


class GenerationClient:
    """Sends composed prompts to the generation endpoint.

    No retry, no caching. The request waits as long as the configured
    timeout allows (forever by default).
    """

    def __init__(
        self,
        config: GenerationConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Optional configuration. Loads from environment if not provided.
            http_client: Optional shared HTTP client. A short-lived client is
                opened per request when not provided.
        """
        self._config = config or get_generation_config()
        self._http_client = http_client

    @property
    def config(self) -> GenerationConfig:
        return self._config

    async def generate(self, prompt: str) -> GenerationResult:
        """Send a prompt and decode the reply. Never raises."""
        try:
            payload = await self._post(prompt)
        except GenerationError as e:
            logger.error(f"Generation request failed: {e}")
            return GenerationResult.failed(e)
        return decode_reply(payload)

    async def _post(self, prompt: str) -> Any:
        if self._http_client is not None:
            return await self._send(self._http_client, prompt)
        async with httpx.AsyncClient(timeout=self._config.request_timeout) as client:
            return await self._send(client, prompt)

    async def _send(self, client: httpx.AsyncClient, prompt: str) -> Any:
        body = build_request_body(prompt, enable_search=self._config.enable_search)
        logger.debug(f"Sending prompt of {len(prompt)} characters to {self._config.model_name}")

        try:
            response = await client.post(
                self._config.endpoint_url,
                params={"key": self._config.api_key},
                json=body,
                headers={"Content-Type": "application/json"},
            )
        except httpx.HTTPError as e:
            raise GenerationError(f"Connection failed: {e}") from e

        if response.is_error:
            logger.warning(f"Generation endpoint answered HTTP {response.status_code}")

        try:
            return response.json()
        except ValueError as e:
            raise GenerationError(
                f"Unreadable response body (HTTP {response.status_code})"
            ) from e
