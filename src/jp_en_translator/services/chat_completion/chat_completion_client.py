"""Chat Completion Client - one POST per call to an OpenAI-style endpoint."""

import logging
from typing import Optional

import requests

from jp_en_translator.services.chat_completion.chat_types import ChatRequest, ChatResponse
from jp_en_translator.services.exceptions import ConnectionFailure, HttpFailure, MalformedResponse

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "https://api.openai.com/v1/chat/completions"


class ChatCompletionClient:
    """
    Sends a system prompt and user text to a chat-completion endpoint.

    Used for both translation and grammar checking; only the system prompt
    differs. There are no retries, no streaming and no timeout override:
    each call is a single blocking round trip, so callers run it off the
    GUI thread.
    """

    def __init__(self, api_key: str, endpoint: str = DEFAULT_ENDPOINT):
        self._api_key = api_key
        self.endpoint = endpoint

    def complete(self, system_prompt: str, user_text: str, model: str) -> str:
        """
        Run one chat completion and return the assistant message.

        Args:
            system_prompt: Instructions for the model.
            user_text: The user's input, sent unchanged.
            model: Model identifier, e.g. "gpt-4o".

        Returns:
            choices[0].message.content from the response.

        Raises:
            HttpFailure: The endpoint returned a non-2xx status.
            MalformedResponse: The body is not JSON or lacks the content path.
            ConnectionFailure: No HTTP response was received.
        """
        request = ChatRequest.with_system_prompt(model, system_prompt, user_text)
        logger.debug("Chat completion request: model=%s, input=%d chars", model, len(user_text))

        try:
            response = requests.post(
                self.endpoint,
                json=request.to_payload(),
                headers=self._headers(),
            )
        except requests.RequestException as e:
            logger.warning("Chat completion transport error: %s", e)
            raise ConnectionFailure(str(e)) from e

        if not 200 <= response.status_code < 300:
            detail = _error_detail(response)
            logger.warning("Chat completion failed with HTTP %s", response.status_code)
            raise HttpFailure(response.status_code, detail)

        try:
            payload = response.json()
        except ValueError as e:
            raise MalformedResponse("response body is not valid JSON") from e

        content = ChatResponse.from_payload(payload).content
        logger.debug("Chat completion succeeded: %d chars", len(content))
        return content

    def _headers(self) -> dict:
        return {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }


def _error_detail(response: requests.Response) -> Optional[str]:
    """Best-effort error.message from an OpenAI-style error body."""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict) and isinstance(error.get("message"), str):
            return error["message"]
    return None
