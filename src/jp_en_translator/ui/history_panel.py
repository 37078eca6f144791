"""History Panel - Scrollable list of translation and grammar check cards."""

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from jp_en_translator.core import GrammarCheckRecord, HistoryRecord, TranslationRecord
from jp_en_translator.services.prompts import JAPANESE_LABEL

TIMESTAMP_FORMAT = "%Y/%m/%d %H:%M:%S"

TRANSLATION_CARD_STYLE = (
    "QFrame#historyCard { border: 1px solid #e1e8ed; border-radius: 12px;"
    " background: qlineargradient(x1:0, y1:0, x2:0, y2:1, stop:0 #f8f9fa, stop:1 #ffffff); }"
)
GRAMMAR_CARD_STYLE = (
    "QFrame#historyCard { border: 2px solid #ff6b35; border-radius: 12px;"
    " background: qlineargradient(x1:0, y1:0, x2:0, y2:1, stop:0 #fff8f0, stop:1 #ffffff); }"
)
COPY_BUTTON_STYLE = (
    "QPushButton { background-color: %s; color: white; border: none;"
    " border-radius: 6px; font-weight: 600; padding: 6px 12px; }"
)

GREEN = "#27ae60"
ORANGE = "#ff6b35"


def language_flag(label: str) -> str:
    return "🇯🇵" if label == JAPANESE_LABEL else "🇺🇸"


class HistoryPanel(QScrollArea):
    """
    Shows session history newest first.

    The history itself stays chronological; each new card is inserted at the
    top of the layout. Copy buttons emit copy_requested with the text to copy.
    """

    copy_requested = Signal(str)

    def __init__(self):
        super().__init__()
        self.setWidgetResizable(True)
        self.setFrameShape(QFrame.Shape.NoFrame)

        container = QWidget()
        self.cards_layout = QVBoxLayout(container)
        self.cards_layout.setContentsMargins(8, 8, 8, 8)
        self.cards_layout.setSpacing(10)
        self.cards_layout.addStretch()
        self.setWidget(container)

    @property
    def card_count(self) -> int:
        # Last item is the stretch
        return self.cards_layout.count() - 1

    def card_at(self, index: int) -> QFrame:
        """Card at display position index (0 is the newest)."""
        return self.cards_layout.itemAt(index).widget()

    def add_record(self, record: HistoryRecord) -> None:
        if isinstance(record, GrammarCheckRecord):
            card = self._build_grammar_card(record)
        elif isinstance(record, TranslationRecord):
            card = self._build_translation_card(record)
        else:
            raise TypeError(f"Unsupported history record: {type(record).__name__}")

        self.cards_layout.insertWidget(0, card)
        self.verticalScrollBar().setValue(0)

    def _build_translation_card(self, record: TranslationRecord) -> QFrame:
        card, layout = self._new_card(TRANSLATION_CARD_STYLE, record)

        self._add_section(
            layout,
            f"{language_flag(record.source_language_label)} {record.source_language_label}:",
            record.original_text,
            label_color="#34495e",
        )
        self._add_section(
            layout,
            f"{language_flag(record.target_language_label)} {record.target_language_label}:",
            record.translated_text,
            label_color="#3498db",
            text_color="#2980b9",
            bold=True,
        )

        buttons = QHBoxLayout()
        copy_button = self._copy_button("📋 コピー", GREEN, record.translated_text)
        copy_button.setObjectName("copyTranslationButton")
        buttons.addWidget(copy_button)
        buttons.addStretch()
        layout.addLayout(buttons)
        return card

    def _build_grammar_card(self, record: GrammarCheckRecord) -> QFrame:
        card, layout = self._new_card(GRAMMAR_CARD_STYLE, record)

        self._add_section(layout, "📝 チェック対象文:", record.original_text, label_color=ORANGE)
        self._add_section(layout, "🔍 文法チェック結果:", record.check_result_text, label_color=ORANGE)
        self._add_section(
            layout,
            "✅ 正しい英文:",
            record.corrected_text,
            label_color=GREEN,
            text_color=GREEN,
            bold=True,
        )

        buttons = QHBoxLayout()
        copy_result_button = self._copy_button("📋 結果をコピー", ORANGE, record.check_result_text)
        copy_result_button.setObjectName("copyResultButton")
        copy_corrected_button = self._copy_button("📝 正しい英文をコピー", GREEN, record.corrected_text)
        copy_corrected_button.setObjectName("copyCorrectedButton")
        buttons.addWidget(copy_result_button)
        buttons.addWidget(copy_corrected_button)
        buttons.addStretch()
        layout.addLayout(buttons)
        return card

    def _new_card(self, style: str, record: HistoryRecord) -> tuple[QFrame, QVBoxLayout]:
        card = QFrame()
        card.setObjectName("historyCard")
        card.setStyleSheet(style)

        layout = QVBoxLayout(card)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(6)

        timestamp = QLabel(f"🕒 {record.timestamp.strftime(TIMESTAMP_FORMAT)}")
        timestamp.setObjectName("timestampLabel")
        timestamp.setStyleSheet("color: #95a5a6; font-size: 12px;")
        layout.addWidget(timestamp)
        return card, layout

    def _add_section(
        self,
        layout: QVBoxLayout,
        title: str,
        text: str,
        label_color: str,
        text_color: str = "#2c3e50",
        bold: bool = False,
    ) -> None:
        label = QLabel(title)
        label.setStyleSheet(f"color: {label_color}; font-size: 13px; font-weight: 600;")
        layout.addWidget(label)

        body = QLabel(text)
        body.setWordWrap(True)
        body.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        weight = "600" if bold else "normal"
        body.setStyleSheet(f"color: {text_color}; font-size: 15px; font-weight: {weight}; margin-left: 10px;")
        layout.addWidget(body)

    def _copy_button(self, caption: str, color: str, text: str) -> QPushButton:
        button = QPushButton(caption)
        button.setCursor(Qt.CursorShape.PointingHandCursor)
        button.setStyleSheet(COPY_BUTTON_STYLE % color)
        button.clicked.connect(lambda: self.copy_requested.emit(text))
        return button
