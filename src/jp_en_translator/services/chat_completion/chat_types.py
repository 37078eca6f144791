"""Typed request/response structures for the chat-completion endpoint."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Tuple

from jp_en_translator.services.exceptions import MalformedResponse


class ChatRole(str, Enum):
    SYSTEM = "system"
    USER = "user"


@dataclass(frozen=True)
class ChatMessage:
    role: ChatRole
    content: str

    def to_payload(self) -> Dict[str, str]:
        return {"role": self.role.value, "content": self.content}


@dataclass(frozen=True)
class ChatRequest:
    """A single chat-completion request. Built fresh for every call."""

    model: str
    messages: Tuple[ChatMessage, ...]

    @classmethod
    def with_system_prompt(cls, model: str, system_prompt: str, user_text: str) -> "ChatRequest":
        """Build the two-message (system, then user) request used by every call site."""
        return cls(
            model=model,
            messages=(
                ChatMessage(ChatRole.SYSTEM, system_prompt),
                ChatMessage(ChatRole.USER, user_text),
            ),
        )

    def to_payload(self) -> Dict[str, Any]:
        """JSON body for the endpoint."""
        return {
            "model": self.model,
            "messages": [message.to_payload() for message in self.messages],
        }


@dataclass(frozen=True)
class ChatResponse:
    """
    The part of a chat-completion response the application reads.

    Only choices[0].message.content is kept; every other field is ignored.
    """

    content: str

    @classmethod
    def from_payload(cls, payload: Any) -> "ChatResponse":
        """
        Validate a decoded JSON body step by step.

        Raises:
            MalformedResponse: If any step of choices[0].message.content
                is missing or has the wrong type.
        """
        if not isinstance(payload, dict):
            raise MalformedResponse("response body is not a JSON object")

        choices = payload.get("choices")
        if not isinstance(choices, list):
            raise MalformedResponse("'choices' is missing or not a list")
        if not choices:
            raise MalformedResponse("'choices' is empty")

        first_choice = choices[0]
        if not isinstance(first_choice, dict):
            raise MalformedResponse("choices[0] is not an object")

        message = first_choice.get("message")
        if not isinstance(message, dict):
            raise MalformedResponse("choices[0].message is missing")

        content = message.get("content")
        if not isinstance(content, str):
            raise MalformedResponse("choices[0].message.content is missing")

        return cls(content=content)

