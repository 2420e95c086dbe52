"""Remote text generation.

Responsibilities:
    - Endpoint configuration from the environment
    - Request body construction (prompt as a single user turn, search tool)
    - Reply decoding into a tagged success / fallback / error result

Keeps transport failures distinct from replies without usable text.
"""

from vchat.generation.client import (
    FALLBACK_TEXT,
    GenerationClient,
    GenerationError,
    GenerationResult,
    decode_reply,
)
from vchat.generation.config import GenerationConfig, get_generation_config

__all__ = [
    "FALLBACK_TEXT",
    "GenerationClient",
    "GenerationConfig",
    "GenerationError",
    "GenerationResult",
    "decode_reply",
    "get_generation_config",
]
