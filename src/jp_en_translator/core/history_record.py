"""History record entities - one immutable entry per completed action."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class TranslationRecord:
    """A finished translation, as shown in the history list."""

    original_text: str
    translated_text: str
    source_language_label: str
    target_language_label: str
    timestamp: datetime


@dataclass(frozen=True)
class GrammarCheckRecord:
    """A finished grammar check with the extracted corrected sentence."""

    original_text: str
    check_result_text: str
    corrected_text: str
    timestamp: datetime
