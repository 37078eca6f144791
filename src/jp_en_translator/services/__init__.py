"""Services layer - business logic and external integrations."""

from jp_en_translator.services.exceptions import (
	CallError,
	ClipboardFailure,
	ConnectionFailure,
	CredentialMissing,
	HttpFailure,
	MalformedResponse,
	TranslatorError,
)
from jp_en_translator.services.settings_manager import PLACEHOLDER_API_KEY, SettingsManager
from jp_en_translator.services.clipboard_service import ClipboardService
from jp_en_translator.services.api_workers import CompletionWorker, WorkerSignals

# Text processing services
from jp_en_translator.services.text_processing import contains_japanese, extract_corrected

# Chat completion services
from jp_en_translator.services.chat_completion import ChatCompletionClient, ChatRequest, ChatResponse

# Prompts
from jp_en_translator.services.prompts import GRAMMAR_CHECK_PROMPT, TranslationDirection

__all__ = [
	"TranslatorError",
	"CredentialMissing",
	"CallError",
	"HttpFailure",
	"MalformedResponse",
	"ConnectionFailure",
	"ClipboardFailure",
	"SettingsManager",
	"PLACEHOLDER_API_KEY",
	"ClipboardService",
	"CompletionWorker",
	"WorkerSignals",
	"contains_japanese",
	"extract_corrected",
	"ChatCompletionClient",
	"ChatRequest",
	"ChatResponse",
	"GRAMMAR_CHECK_PROMPT",
	"TranslationDirection",
]
