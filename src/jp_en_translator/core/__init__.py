"""Domain layer - Pure entities for history records and model selection."""

from .history_record import GrammarCheckRecord, TranslationRecord
from .model_catalog import AVAILABLE_MODELS, DEFAULT_MODEL, ModelOption, find_model
from .translation_history import HistoryRecord, TranslationHistory

__all__ = [
    "TranslationRecord",
    "GrammarCheckRecord",
    "HistoryRecord",
    "TranslationHistory",
    "ModelOption",
    "AVAILABLE_MODELS",
    "DEFAULT_MODEL",
    "find_model",
]
