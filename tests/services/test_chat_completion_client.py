"""Unit tests for ChatCompletionClient."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from jp_en_translator.services import (
    CallError,
    ChatCompletionClient,
    ConnectionFailure,
    HttpFailure,
    MalformedResponse,
)
from jp_en_translator.services.chat_completion import DEFAULT_ENDPOINT

POST_TARGET = "jp_en_translator.services.chat_completion.chat_completion_client.requests.post"


def make_response(status_code=200, json_body=None, json_error=None):
    """Build a fake requests.Response."""
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = json_body
    return response


def completion_body(content: str) -> dict:
    return {"choices": [{"index": 0, "message": {"role": "assistant", "content": content}}]}


@pytest.fixture
def client():
    return ChatCompletionClient(api_key="sk-test")


class TestChatCompletionClientRequest:
    """Tests for what is sent to the endpoint."""

    def test_posts_json_body_with_bearer_token(self, client):
        with patch(POST_TARGET, return_value=make_response(json_body=completion_body("Hello"))) as mock_post:
            client.complete(system_prompt="Translate.", user_text="こんにちは", model="gpt-4o")

        mock_post.assert_called_once()
        args, kwargs = mock_post.call_args
        assert args[0] == DEFAULT_ENDPOINT
        assert kwargs["headers"]["Authorization"] == "Bearer sk-test"
        assert kwargs["json"] == {
            "model": "gpt-4o",
            "messages": [
                {"role": "system", "content": "Translate."},
                {"role": "user", "content": "こんにちは"},
            ],
        }

    def test_no_timeout_override(self, client):
        with patch(POST_TARGET, return_value=make_response(json_body=completion_body("x"))) as mock_post:
            client.complete("s", "u", "gpt-4o")
        assert "timeout" not in mock_post.call_args.kwargs

    def test_custom_endpoint(self):
        client = ChatCompletionClient(api_key="k", endpoint="http://localhost:8080/v1/chat/completions")
        with patch(POST_TARGET, return_value=make_response(json_body=completion_body("x"))) as mock_post:
            client.complete("s", "u", "gpt-4o")
        assert mock_post.call_args.args[0] == "http://localhost:8080/v1/chat/completions"


class TestChatCompletionClientResponse:
    """Tests for response handling and error mapping."""

    def test_returns_first_choice_content(self, client):
        with patch(POST_TARGET, return_value=make_response(json_body=completion_body("Hello."))):
            assert client.complete("s", "u", "gpt-4o") == "Hello."

    def test_content_is_not_modified(self, client):
        content = "  【正しい英文】\nI am happy.\n  "
        with patch(POST_TARGET, return_value=make_response(json_body=completion_body(content))):
            assert client.complete("s", "u", "gpt-4o") == content

    def test_single_request_per_call(self, client):
        with patch(POST_TARGET, return_value=make_response(status_code=500, json_body={})) as mock_post:
            with pytest.raises(HttpFailure):
                client.complete("s", "u", "gpt-4o")
        assert mock_post.call_count == 1

    @pytest.mark.parametrize("status_code", [400, 401, 404, 429, 500, 503])
    def test_non_success_status_raises_http_failure(self, client, status_code):
        with patch(POST_TARGET, return_value=make_response(status_code=status_code, json_body={})):
            with pytest.raises(HttpFailure) as exc_info:
                client.complete("s", "u", "gpt-4o")
        assert exc_info.value.status_code == status_code
        assert isinstance(exc_info.value, CallError)

    def test_http_failure_includes_api_error_message(self, client):
        body = {"error": {"message": "Incorrect API key provided", "type": "invalid_request_error"}}
        with patch(POST_TARGET, return_value=make_response(status_code=401, json_body=body)):
            with pytest.raises(HttpFailure) as exc_info:
                client.complete("s", "u", "gpt-4o")
        assert exc_info.value.detail == "Incorrect API key provided"
        assert "401" in str(exc_info.value)

    def test_http_failure_without_json_body(self, client):
        with patch(POST_TARGET, return_value=make_response(status_code=502, json_error=ValueError("no json"))):
            with pytest.raises(HttpFailure) as exc_info:
                client.complete("s", "u", "gpt-4o")
        assert exc_info.value.detail is None

    def test_invalid_json_raises_malformed_response(self, client):
        with patch(POST_TARGET, return_value=make_response(json_error=ValueError("Expecting value"))):
            with pytest.raises(MalformedResponse):
                client.complete("s", "u", "gpt-4o")

    def test_missing_content_raises_malformed_response(self, client):
        with patch(POST_TARGET, return_value=make_response(json_body={"choices": []})):
            with pytest.raises(MalformedResponse):
                client.complete("s", "u", "gpt-4o")

    def test_transport_error_raises_connection_failure(self, client):
        with patch(POST_TARGET, side_effect=requests.ConnectionError("Name or service not known")):
            with pytest.raises(ConnectionFailure) as exc_info:
                client.complete("s", "u", "gpt-4o")
        assert "Name or service not known" in str(exc_info.value)
