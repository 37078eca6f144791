"""Exception types shared by the services and the coordinator."""

from typing import Optional


class TranslatorError(Exception):
    """Base class for every error the application reports to the user."""


class CredentialMissing(TranslatorError):
    """Raised when no API key is configured. Never fatal."""

    def __init__(self, variable_name: str):
        self.variable_name = variable_name
        super().__init__(
            "OpenAI APIキーが設定されていません。\n"
            f"環境変数 '{variable_name}' にAPIキーを設定してください。"
        )


class CallError(TranslatorError):
    """A chat-completion call did not produce assistant text."""


class HttpFailure(CallError):
    """The endpoint answered with a non-2xx status."""

    def __init__(self, status_code: int, detail: Optional[str] = None):
        self.status_code = status_code
        self.detail = detail
        message = f"HTTP {status_code}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class MalformedResponse(CallError):
    """The response body lacks choices[0].message.content."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Malformed response: {reason}")


class ConnectionFailure(CallError):
    """The request never got an HTTP answer (DNS, refused connection, TLS)."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Connection failed: {reason}")


class ClipboardFailure(TranslatorError):
    """The OS clipboard could not be written."""
