"""Clipboard Service - copies history text to the system clipboard."""

from typing import Callable, Optional

from PySide6.QtGui import QClipboard, QGuiApplication

from jp_en_translator.services.exceptions import ClipboardFailure


def _application_clipboard() -> Optional[QClipboard]:
    if QGuiApplication.instance() is None:
        return None
    return QGuiApplication.clipboard()


class ClipboardService:
    """Writes plain text to the clipboard and verifies it landed there."""

    def __init__(self, clipboard_provider: Callable[[], Optional[QClipboard]] = _application_clipboard):
        self._clipboard_provider = clipboard_provider

    def copy_text(self, text: str) -> None:
        """
        Place text on the clipboard.

        Raises:
            ClipboardFailure: If no clipboard is available or the OS
                refused the write.
        """
        clipboard = self._clipboard_provider()
        if clipboard is None:
            raise ClipboardFailure("クリップボードを利用できません")

        try:
            clipboard.setText(text)
        except RuntimeError as e:
            raise ClipboardFailure(str(e)) from e

        # Another process may hold the clipboard open; Qt does not report that.
        if clipboard.text() != text:
            raise ClipboardFailure("クリップボードへの書き込みが拒否されました")
