"""Model catalogue - the fixed set of chat models offered in the UI."""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class ModelOption:
    """A selectable chat-completion model."""

    model_id: str
    display_name: str
    description: str


AVAILABLE_MODELS: Tuple[ModelOption, ...] = (
    ModelOption("gpt-4o", "GPT-4o", "高精度・多機能モデル"),
    ModelOption("gpt-4o-mini", "GPT-4o mini", "高速・コスト効率モデル"),
    ModelOption("gpt-4-turbo", "GPT-4 Turbo", "バランス型高性能モデル"),
    ModelOption("gpt-3.5-turbo", "GPT-3.5 Turbo", "軽量・高速モデル"),
)

DEFAULT_MODEL = AVAILABLE_MODELS[0]

GENERIC_MODEL_DESCRIPTION = "AI翻訳モデル"


def find_model(model_id: str) -> Optional[ModelOption]:
    """Look up a catalogue entry by its API identifier."""
    for option in AVAILABLE_MODELS:
        if option.model_id == model_id:
            return option
    return None
