"""Translator Coordinator - Owns the session and runs translate/grammar-check actions."""

import logging
from typing import Optional

from PySide6.QtCore import QObject, QThreadPool, Signal, Slot

from jp_en_translator.core import (
    DEFAULT_MODEL,
    GrammarCheckRecord,
    TranslationHistory,
    TranslationRecord,
    find_model,
)
from jp_en_translator.core.model_catalog import GENERIC_MODEL_DESCRIPTION
from jp_en_translator.services import (
    ChatCompletionClient,
    ClipboardFailure,
    ClipboardService,
    CompletionWorker,
    GRAMMAR_CHECK_PROMPT,
    TranslationDirection,
    contains_japanese,
    extract_corrected,
)

logger = logging.getLogger(__name__)

STATUS_TRANSLATING = "翻訳中..."
STATUS_TRANSLATED = "翻訳完了"
STATUS_TRANSLATION_ERROR = "翻訳エラー"
STATUS_CHECKING = "文法チェック中..."
STATUS_CHECKED = "文法チェック完了"
STATUS_CHECK_ERROR = "文法チェックエラー"
STATUS_CHECK_REFUSED = "文法チェックは英語のみ対応しています"
STATUS_COPIED = "クリップボードにコピーしました"


class _TranslationRequest(QObject):
    """Helper class to hold translation request context and handle results safely."""

    def __init__(self, original_text: str, direction: TranslationDirection, parent: "TranslatorCoordinator"):
        super().__init__()
        self.original_text = original_text
        self.direction = direction
        self.parent_ref = parent

    @Slot(str)
    def on_result(self, content: str):
        self.parent_ref._handle_translation_result(content, self.original_text, self.direction)

    @Slot(str)
    def on_error(self, error: str):
        self.parent_ref._handle_translation_error(error)

    @Slot()
    def on_finished(self):
        self.parent_ref._finish_translation()


class _GrammarCheckRequest(QObject):
    """Helper class to hold grammar check request context and handle results safely."""

    def __init__(self, original_text: str, parent: "TranslatorCoordinator"):
        super().__init__()
        self.original_text = original_text
        self.parent_ref = parent

    @Slot(str)
    def on_result(self, content: str):
        self.parent_ref._handle_grammar_check_result(content, self.original_text)

    @Slot(str)
    def on_error(self, error: str):
        self.parent_ref._handle_grammar_check_error(error)

    @Slot()
    def on_finished(self):
        self.parent_ref._finish_grammar_check()


class TranslatorCoordinator(QObject):
    """
    Session controller for the translator window.

    Responsibilities:
    - Own the session state: selected model and the in-memory history.
    - Decide translation direction and whether grammar check is allowed.
    - Run one chat-completion call per action off the GUI thread.
    - Append history records only after a call succeeds.
    - Report failures through the main window without changing state.
    """

    model_changed = Signal(str)
    status_changed = Signal(str)

    translation_started = Signal()
    translation_completed = Signal(object)  # TranslationRecord
    translation_failed = Signal(str)
    translation_finished = Signal()

    grammar_check_started = Signal()
    grammar_check_completed = Signal(object)  # GrammarCheckRecord
    grammar_check_failed = Signal(str)
    grammar_check_finished = Signal()
    grammar_check_refused = Signal(str)

    def __init__(
        self,
        main_window,
        client: ChatCompletionClient,
        clipboard_service: ClipboardService,
        history: Optional[TranslationHistory] = None,
    ):
        super().__init__()

        self.main_window = main_window
        self.client = client
        self.clipboard_service = clipboard_service
        self.history = history if history is not None else TranslationHistory()

        self._selected_model: str = DEFAULT_MODEL.model_id

        # Thread pool for async API calls
        self.thread_pool = QThreadPool.globalInstance()

        # One call per action at a time; the UI also disables the button
        self._translation_in_flight = False
        self._grammar_check_in_flight = False

        # Keep references to helper objects so they don't get garbage collected
        # while workers are running in background threads
        self._translation_request_helper: Optional[_TranslationRequest] = None
        self._grammar_check_request_helper: Optional[_GrammarCheckRequest] = None

    @property
    def selected_model(self) -> str:
        return self._selected_model

    def select_model(self, model_id: str) -> None:
        """
        Switch the model used for subsequent calls.

        Raises:
            ValueError: If model_id is not in the catalogue.
        """
        option = find_model(model_id)
        if option is None:
            raise ValueError(f"Unknown model: {model_id}")

        self._selected_model = option.model_id
        logger.info("Model changed to %s", option.model_id)
        self.model_changed.emit(option.model_id)
        self._set_status(f"✅ モデル変更: {option.display_name}")

    @staticmethod
    def model_description(model_id: str) -> str:
        option = find_model(model_id)
        return option.description if option else GENERIC_MODEL_DESCRIPTION

    @property
    def translation_in_flight(self) -> bool:
        return self._translation_in_flight

    def request_translation(self, text: str) -> None:
        """Translate text, choosing the direction from its script."""
        input_text = text.strip()
        if not input_text or self._translation_in_flight:
            return

        direction = TranslationDirection.for_text(input_text)
        logger.info(
            "Translation requested: %s -> %s (model=%s)",
            direction.source_label,
            direction.target_label,
            self._selected_model,
        )

        self._translation_in_flight = True
        self.translation_started.emit()
        self._set_status(STATUS_TRANSLATING)

        worker = CompletionWorker(
            client=self.client,
            system_prompt=direction.system_prompt,
            user_text=input_text,
            model=self._selected_model,
        )

        # IMPORTANT: Store reference so it doesn't get garbage collected while worker runs
        request_helper = _TranslationRequest(input_text, direction, self)
        self._translation_request_helper = request_helper

        worker.signals.completion_result.connect(request_helper.on_result)
        worker.signals.error.connect(request_helper.on_error)
        worker.signals.finished.connect(request_helper.on_finished)

        self.thread_pool.start(worker)

    def _handle_translation_result(self, content: str, original_text: str, direction: TranslationDirection) -> None:
        record = TranslationRecord(
            original_text=original_text,
            translated_text=content,
            source_language_label=direction.source_label,
            target_language_label=direction.target_label,
            timestamp=self.history.next_timestamp(),
        )
        self.history.append(record)

        self.translation_completed.emit(record)
        self._set_status(STATUS_TRANSLATED)

    def _handle_translation_error(self, error: str) -> None:
        logger.warning("Translation failed: %s", error)
        self.main_window.show_error("エラー", f"翻訳エラー: {error}")
        self.translation_failed.emit(error)
        self._set_status(STATUS_TRANSLATION_ERROR)

    def _finish_translation(self) -> None:
        self._translation_in_flight = False
        self.translation_finished.emit()

    @property
    def grammar_check_in_flight(self) -> bool:
        return self._grammar_check_in_flight

    @staticmethod
    def grammar_check_available(text: str) -> bool:
        """Grammar check is offered for non-empty English input only."""
        input_text = text.strip()
        return bool(input_text) and not contains_japanese(input_text)

    def request_grammar_check(self, text: str) -> None:
        """Check English grammar; Japanese input is refused without a call."""
        input_text = text.strip()
        if not input_text or self._grammar_check_in_flight:
            return

        if contains_japanese(input_text):
            logger.info("Grammar check refused for Japanese input")
            self.grammar_check_refused.emit(input_text)
            self._set_status(STATUS_CHECK_REFUSED)
            return

        logger.info("Grammar check requested (model=%s)", self._selected_model)

        self._grammar_check_in_flight = True
        self.grammar_check_started.emit()
        self._set_status(STATUS_CHECKING)

        worker = CompletionWorker(
            client=self.client,
            system_prompt=GRAMMAR_CHECK_PROMPT,
            user_text=input_text,
            model=self._selected_model,
        )

        request_helper = _GrammarCheckRequest(input_text, self)
        self._grammar_check_request_helper = request_helper

        worker.signals.completion_result.connect(request_helper.on_result)
        worker.signals.error.connect(request_helper.on_error)
        worker.signals.finished.connect(request_helper.on_finished)

        self.thread_pool.start(worker)

    def _handle_grammar_check_result(self, content: str, original_text: str) -> None:
        record = GrammarCheckRecord(
            original_text=original_text,
            check_result_text=content,
            corrected_text=extract_corrected(content, original_text),
            timestamp=self.history.next_timestamp(),
        )
        self.history.append(record)

        self.grammar_check_completed.emit(record)
        self._set_status(STATUS_CHECKED)

    def _handle_grammar_check_error(self, error: str) -> None:
        logger.warning("Grammar check failed: %s", error)
        self.main_window.show_error("エラー", f"文法チェックエラー: {error}")
        self.grammar_check_failed.emit(error)
        self._set_status(STATUS_CHECK_ERROR)

    def _finish_grammar_check(self) -> None:
        self._grammar_check_in_flight = False
        self.grammar_check_finished.emit()

    @Slot(str)
    def copy_to_clipboard(self, text: str) -> None:
        try:
            self.clipboard_service.copy_text(text)
        except ClipboardFailure as e:
            self.main_window.show_warning("エラー", f"コピーエラー: {e}")
            return
        self._set_status(STATUS_COPIED)

    def _set_status(self, message: str) -> None:
        self.status_changed.emit(message)
