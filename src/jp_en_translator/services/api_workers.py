"""Async workers for non-blocking API calls using Qt threading."""

from PySide6.QtCore import QObject, QRunnable, Signal, Slot

from jp_en_translator.services.chat_completion import ChatCompletionClient
from jp_en_translator.services.exceptions import CallError


class WorkerSignals(QObject):
    """
    Signals for communicating results from worker threads.

    QRunnable doesn't inherit from QObject, so we need a separate
    QObject to hold the signals.
    """
    finished = Signal()
    error = Signal(str)
    completion_result = Signal(str)


class CompletionWorker(QRunnable):
    """
    Worker that runs one chat-completion call in a background thread.

    Emits completion_result or error, then always finished.
    """

    def __init__(
        self,
        client: ChatCompletionClient,
        system_prompt: str,
        user_text: str,
        model: str,
    ):
        super().__init__()
        self.client = client
        self.system_prompt = system_prompt
        self.user_text = user_text
        self.model = model
        self.signals = WorkerSignals()
        self.setAutoDelete(True)

    @Slot()
    def run(self):
        """Execute the chat-completion call in background thread."""
        try:
            content = self.client.complete(
                system_prompt=self.system_prompt,
                user_text=self.user_text,
                model=self.model,
            )
            self.signals.completion_result.emit(content)
        except CallError as e:
            self.signals.error.emit(str(e))
        except Exception as e:
            # Catch any unexpected exceptions not handled by the client
            self.signals.error.emit(f"Unexpected error: {str(e)}")
        finally:
            self.signals.finished.emit()
