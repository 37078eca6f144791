"""Main entry point for the translator application."""

import logging
import sys

from PySide6.QtWidgets import QApplication

from jp_en_translator.coordinators import TranslatorCoordinator
from jp_en_translator.services import (
    PLACEHOLDER_API_KEY,
    ChatCompletionClient,
    ClipboardService,
    CredentialMissing,
    SettingsManager,
)
from jp_en_translator.ui import MainWindow

logger = logging.getLogger(__name__)


def main():
    """
    Bootstrap the application following the Composition Root pattern.
    This is the only place that knows how to instantiate and wire all components.
    """
    # 1. Configuration and logging
    settings_manager = SettingsManager()
    logging.basicConfig(
        level=settings_manager.get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # 2. Initialize Application
    app = QApplication(sys.argv)
    app.setApplicationName("JP-EN Translator")
    app.setOrganizationName("JpEnTranslator")

    # 3. Construct UI
    main_window = MainWindow()

    # 4. Initialize Infrastructure; a missing key is reported but never blocks launch
    try:
        api_key = settings_manager.require_openai_api_key()
    except CredentialMissing as e:
        logger.warning("No API key configured; calls will be rejected by the endpoint")
        main_window.show_warning("設定エラー", str(e))
        api_key = PLACEHOLDER_API_KEY

    client = ChatCompletionClient(
        api_key=api_key,
        endpoint=settings_manager.get_chat_completions_url(),
    )

    # 5. Instantiate Coordinator (Dependency Injection) and wire signals
    coordinator = TranslatorCoordinator(
        main_window=main_window,
        client=client,
        clipboard_service=ClipboardService(),
    )
    main_window.set_coordinator(coordinator)

    # 6. Show UI and start event loop
    main_window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
