"""Chat completion - typed request/response structures and the HTTP client."""

from jp_en_translator.services.chat_completion.chat_types import ChatMessage, ChatRequest, ChatResponse, ChatRole
from jp_en_translator.services.chat_completion.chat_completion_client import ChatCompletionClient, DEFAULT_ENDPOINT

__all__ = [
    "ChatRole",
    "ChatMessage",
    "ChatRequest",
    "ChatResponse",
    "ChatCompletionClient",
    "DEFAULT_ENDPOINT",
]
