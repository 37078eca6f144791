"""Main Window - Input area, action buttons, model picker and history."""

from typing import override

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QCloseEvent, QKeyEvent
from PySide6.QtWidgets import (
    QComboBox,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QPlainTextEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from jp_en_translator.core import AVAILABLE_MODELS, GrammarCheckRecord, TranslationRecord
from jp_en_translator.ui.history_panel import HistoryPanel

GRAMMAR_ENABLED_STYLE = "QPushButton { background-color: #ff6b35; color: white; }"
GRAMMAR_DISABLED_STYLE = "QPushButton { background-color: #95a5a6; color: white; }"


class InputTextEdit(QPlainTextEdit):
    """Multi-line input where Enter submits and Shift+Enter inserts a newline."""

    submitted = Signal()

    @override
    def keyPressEvent(self, event: QKeyEvent):
        is_enter = event.key() in (Qt.Key.Key_Return, Qt.Key.Key_Enter)
        if is_enter and not event.modifiers() & Qt.KeyboardModifier.ShiftModifier:
            event.accept()
            self.submitted.emit()
        else:
            super().keyPressEvent(event)


class MainWindow(QMainWindow):
    """Provides the translator window; all decisions are delegated to the coordinator."""

    translate_requested = Signal(str)
    grammar_check_requested = Signal(str)
    model_selected = Signal(str)

    def __init__(self):
        super().__init__()
        self.setWindowTitle("日英翻訳ツール")
        self.setGeometry(100, 100, 960, 800)

        self._coordinator = None
        self.confirm_on_close = True

        self._setup_ui()

    def _setup_ui(self):
        """Initialize the main UI layout."""
        central_widget = QWidget()
        self.setCentralWidget(central_widget)

        self.main_layout = QVBoxLayout(central_widget)
        self.main_layout.setContentsMargins(16, 16, 16, 16)
        self.main_layout.setSpacing(10)

        # Model picker
        model_layout = QHBoxLayout()
        model_layout.addWidget(QLabel("🤖 モデル:"))
        self.model_combo = QComboBox()
        for option in AVAILABLE_MODELS:
            self.model_combo.addItem(option.display_name, option.model_id)
        self.model_combo.setCurrentIndex(0)
        self.model_combo.currentIndexChanged.connect(self._on_model_index_changed)
        model_layout.addWidget(self.model_combo)
        self.model_info_label = QLabel(AVAILABLE_MODELS[0].description)
        self.model_info_label.setStyleSheet("color: gray;")
        model_layout.addWidget(self.model_info_label)
        model_layout.addStretch()
        self.main_layout.addLayout(model_layout)

        # Input
        self.input_text = InputTextEdit()
        self.input_text.setPlaceholderText("翻訳したいテキストを入力してください（Enterで翻訳、Shift+Enterで改行）")
        self.input_text.setFixedHeight(120)
        self.input_text.submitted.connect(self._on_translate_clicked)
        self.input_text.textChanged.connect(self._on_input_changed)
        self.main_layout.addWidget(self.input_text)

        # Actions
        actions_layout = QHBoxLayout()
        self.translate_button = QPushButton("🌐 翻訳")
        self.translate_button.clicked.connect(self._on_translate_clicked)
        self.grammar_check_button = QPushButton("📝 文法チェック")
        self.grammar_check_button.clicked.connect(self._on_grammar_check_clicked)
        actions_layout.addWidget(self.translate_button)
        actions_layout.addWidget(self.grammar_check_button)
        actions_layout.addStretch()
        self.main_layout.addLayout(actions_layout)
        self._set_grammar_check_enabled(False)

        self.history_panel = HistoryPanel()
        self.main_layout.addWidget(self.history_panel, 1)

        self.status_label = QLabel("準備完了")
        self.status_label.setStyleSheet("color: gray;")
        self.main_layout.addWidget(self.status_label)

    def set_coordinator(self, coordinator):
        """Inject the coordinator and wire UI signals to its slots.

        The coordinator is expected to expose:
        - request_translation(str) / request_grammar_check(str)
        - select_model(str), model_description(str)
        - grammar_check_available(str)
        - copy_to_clipboard(str)
        and the started/completed/finished signals for both actions.
        """
        self._coordinator = coordinator

        self.translate_requested.connect(coordinator.request_translation)
        self.grammar_check_requested.connect(coordinator.request_grammar_check)
        self.model_selected.connect(coordinator.select_model)
        self.history_panel.copy_requested.connect(coordinator.copy_to_clipboard)

        coordinator.status_changed.connect(self.set_status)
        coordinator.model_changed.connect(self._on_model_changed)

        coordinator.translation_started.connect(lambda: self.translate_button.setEnabled(False))
        coordinator.translation_completed.connect(self._on_translation_completed)
        coordinator.translation_finished.connect(lambda: self.translate_button.setEnabled(True))

        coordinator.grammar_check_started.connect(lambda: self._set_grammar_check_enabled(False))
        coordinator.grammar_check_completed.connect(self._on_grammar_check_completed)
        coordinator.grammar_check_finished.connect(self._on_input_changed)

    def _on_translate_clicked(self):
        if self.translate_button.isEnabled():
            self.translate_requested.emit(self.input_text.toPlainText())

    def _on_grammar_check_clicked(self):
        self.grammar_check_requested.emit(self.input_text.toPlainText())

    def _on_model_index_changed(self, index: int):
        model_id = self.model_combo.itemData(index)
        if model_id:
            self.model_selected.emit(model_id)

    def _on_model_changed(self, model_id: str):
        if self._coordinator is not None:
            self.model_info_label.setText(self._coordinator.model_description(model_id))

    def _on_input_changed(self):
        """Offer grammar check only for English input."""
        if self._coordinator is None:
            return
        if self._coordinator.grammar_check_in_flight:
            return
        text = self.input_text.toPlainText()
        self._set_grammar_check_enabled(self._coordinator.grammar_check_available(text))

    def _set_grammar_check_enabled(self, enabled: bool):
        self.grammar_check_button.setEnabled(enabled)
        self.grammar_check_button.setStyleSheet(GRAMMAR_ENABLED_STYLE if enabled else GRAMMAR_DISABLED_STYLE)

    def _on_translation_completed(self, record: TranslationRecord):
        self.history_panel.add_record(record)
        self.input_text.clear()

    def _on_grammar_check_completed(self, record: GrammarCheckRecord):
        self.history_panel.add_record(record)
        self.input_text.clear()

    def set_status(self, message: str):
        self.status_label.setText(message)

    def show_error(self, title: str, message: str):
        """Display an error message to the user."""
        QMessageBox.critical(self, title, message)

    def show_warning(self, title: str, message: str):
        QMessageBox.warning(self, title, message)

    def show_info(self, title: str, message: str):
        """Display an information message to the user."""
        QMessageBox.information(self, title, message)

    @override
    def closeEvent(self, event: QCloseEvent):
        """Ask before quitting."""
        if not self.confirm_on_close:
            super().closeEvent(event)
            return

        answer = QMessageBox.question(
            self,
            "終了確認",
            "アプリケーションを終了しますか？",
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
        )
        if answer == QMessageBox.StandardButton.Yes:
            event.accept()
        else:
            event.ignore()
