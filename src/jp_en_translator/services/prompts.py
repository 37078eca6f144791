"""System prompts and translation direction selection."""

from dataclasses import dataclass

from jp_en_translator.services.text_processing import contains_japanese

JAPANESE_LABEL = "日本語"
ENGLISH_LABEL = "English"

JA_TO_EN_PROMPT = (
    "あなたは日本語から英語への翻訳者です。"
    "入力された日本語を自然で正確な英語に翻訳してください。"
    "翻訳結果のみを返してください。"
)

EN_TO_JA_PROMPT = (
    "あなたは英語から日本語への翻訳者です。"
    "入力された英語を自然で正確な日本語に翻訳してください。"
    "翻訳結果のみを返してください。"
)

GRAMMAR_CHECK_PROMPT = """あなたは英語の文法チェッカーです。入力された英語文を分析し、以下の形式で回答してください：

【文法チェック結果】
✅ 文法的に正しい場合: 「正しい英語です」
❌ 誤りがある場合: 誤りの内容を指摘

【修正提案】
修正版の文章（誤りがある場合のみ）

【説明】
誤りの理由や改善点の説明

【正しい英文】
最終的に正しい英文（修正がある場合は修正版、正しい場合は元の文章）

簡潔で分かりやすく回答してください。"""


@dataclass(frozen=True)
class TranslationDirection:
    """Which way a translation goes, with the labels shown in the history."""

    source_label: str
    target_label: str
    system_prompt: str

    @classmethod
    def for_text(cls, text: str) -> "TranslationDirection":
        """Japanese input is translated to English, anything else to Japanese."""
        if contains_japanese(text):
            return JA_TO_EN
        return EN_TO_JA


JA_TO_EN = TranslationDirection(JAPANESE_LABEL, ENGLISH_LABEL, JA_TO_EN_PROMPT)
EN_TO_JA = TranslationDirection(ENGLISH_LABEL, JAPANESE_LABEL, EN_TO_JA_PROMPT)
