#!/usr/bin/env python3
"""
Tests for HistoryPanel - validates card order, content and copy buttons.
"""

import os
from datetime import datetime, timedelta
from unittest.mock import MagicMock

from PySide6.QtWidgets import QApplication, QLabel, QPushButton

from jp_en_translator.core import GrammarCheckRecord, TranslationRecord
from jp_en_translator.ui import HistoryPanel


def ensure_qt_app():
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    if QApplication.instance() is None:
        QApplication([])


T0 = datetime(2024, 5, 1, 9, 30, 0)


def translation(original="こんにちは", translated="Hello", timestamp=T0):
    return TranslationRecord(
        original_text=original,
        translated_text=translated,
        source_language_label="日本語",
        target_language_label="English",
        timestamp=timestamp,
    )


def grammar_check(timestamp=T0):
    return GrammarCheckRecord(
        original_text="I are happy",
        check_result_text="【正しい英文】\nI am happy.",
        corrected_text="I am happy.",
        timestamp=timestamp,
    )


def label_texts(card):
    return [label.text() for label in card.findChildren(QLabel)]


def test_history_panel_starts_empty():
    ensure_qt_app()

    panel = HistoryPanel()

    assert panel.card_count == 0


def test_newest_record_is_shown_first():
    ensure_qt_app()

    panel = HistoryPanel()
    panel.add_record(translation(original="一", translated="One", timestamp=T0))
    panel.add_record(translation(original="二", translated="Two", timestamp=T0 + timedelta(seconds=1)))

    assert panel.card_count == 2
    assert "Two" in label_texts(panel.card_at(0))
    assert "One" in label_texts(panel.card_at(1))


def test_translation_card_content():
    ensure_qt_app()

    panel = HistoryPanel()
    panel.add_record(translation())

    texts = label_texts(panel.card_at(0))
    assert "🕒 2024/05/01 09:30:00" in texts
    assert "🇯🇵 日本語:" in texts
    assert "🇺🇸 English:" in texts
    assert "こんにちは" in texts
    assert "Hello" in texts


def test_translation_copy_button_emits_translated_text():
    ensure_qt_app()

    panel = HistoryPanel()
    copy_spy = MagicMock()
    panel.copy_requested.connect(copy_spy)
    panel.add_record(translation())

    button = panel.card_at(0).findChild(QPushButton, "copyTranslationButton")
    assert button.text() == "📋 コピー"
    button.click()

    copy_spy.assert_called_once_with("Hello")


def test_grammar_card_has_two_copy_buttons():
    ensure_qt_app()

    panel = HistoryPanel()
    copy_spy = MagicMock()
    panel.copy_requested.connect(copy_spy)
    panel.add_record(grammar_check())

    card = panel.card_at(0)
    card.findChild(QPushButton, "copyResultButton").click()
    card.findChild(QPushButton, "copyCorrectedButton").click()

    assert [c.args[0] for c in copy_spy.call_args_list] == [
        "【正しい英文】\nI am happy.",
        "I am happy.",
    ]
    assert "✅ 正しい英文:" in label_texts(card)
