"""
JP-EN Translator - A Japanese ⇄ English desktop translator backed by a chat-completion API.

This package provides a desktop application with:
- Automatic translation direction from the input script
- English grammar checking with an extracted corrected sentence
- An in-memory history with copy-to-clipboard
"""

__version__ = "0.1.0"

# Make key components available at package level
from jp_en_translator.core import GrammarCheckRecord, TranslationHistory, TranslationRecord
from jp_en_translator.services.text_processing import contains_japanese, extract_corrected
from jp_en_translator.services.chat_completion import ChatCompletionClient

__all__ = [
    "TranslationRecord",
    "GrammarCheckRecord",
    "TranslationHistory",
    "contains_japanese",
    "extract_corrected",
    "ChatCompletionClient",
]
