"""Text processing services - script detection and grammar reply parsing."""

from jp_en_translator.services.text_processing.script_classifier import contains_japanese, is_japanese_char
from jp_en_translator.services.text_processing.correction_extractor import (
    CORRECT_SENTENCE_HEADER,
    SUGGESTED_FIX_HEADER,
    extract_corrected,
    extract_section,
)

__all__ = [
    "contains_japanese",
    "is_japanese_char",
    "extract_corrected",
    "extract_section",
    "CORRECT_SENTENCE_HEADER",
    "SUGGESTED_FIX_HEADER",
]
