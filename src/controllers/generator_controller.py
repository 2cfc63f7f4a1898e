import logging
from PyQt5.QtCore import QObject, pyqtSignal

# Project Imports
from config_manager import ConfigManager
from controllers.clipboard_writer import ClipboardWriter
from models.block_spec import FormState, ValidationError
from models.snippet_builder import generate_snippet

NOTHING_TO_COPY_MESSAGE = "Nothing to copy yet - generate a script first."


class GeneratorController(QObject):
    """
    Handles the two user actions of the helper: generating a script from the
    form state and copying the displayed script to the clipboard.
    Does NOT touch widgets; results are reported through signals so the
    window decides how to present them.
    """
    snippet_generated = pyqtSignal(str)   # Full script text
    validation_failed = pyqtSignal(str)   # User-facing message
    copy_rejected = pyqtSignal(str)       # User-facing message, clipboard untouched
    copy_finished = pyqtSignal(bool)      # Success flag as it should be shown

    def __init__(self, config_manager: ConfigManager, clipboard_writer: ClipboardWriter | None = None, parent=None):
        """
        Initializes the GeneratorController.

        Args:
            config_manager: The application's ConfigManager instance.
            clipboard_writer: Writer used by copy(); a default one is created if omitted.
            parent: Optional parent QObject.
        """
        super().__init__(parent)
        self.config = config_manager
        self.clipboard_writer = clipboard_writer if clipboard_writer is not None else ClipboardWriter()
        self.app_logger = logging.getLogger("block_helper.generator")
        self.app_logger.info(
            f"GeneratorController initialized. strict_hardness={self.strict_hardness}, "
            f"report_copy_failure={self.report_copy_failure}"
        )

    @property
    def strict_hardness(self) -> bool:
        """Only emit a standalone hardness when it is strictly positive."""
        return bool(self.config.get("generator.strict_hardness", False))

    @property
    def report_copy_failure(self) -> bool:
        """Show failed copies as failures; when off every copy is shown as a success."""
        return bool(self.config.get("clipboard.report_failure", True))

    @property
    def placeholder_text(self) -> str:
        return self.config.get("ui_settings.placeholder_text", "")

    def generate(self, state: FormState) -> str | None:
        """
        Builds the script for the given form state.
        Emits snippet_generated on success or validation_failed when the
        block ID is unusable (nothing is emitted for the output in that case).

        Returns:
            The script text, or None if validation failed.
        """
        try:
            snippet = generate_snippet(state, strict_hardness=self.strict_hardness)
        except ValidationError as e:
            self.app_logger.warning(f"Generation aborted for block ID {state.block_id!r}: {e}")
            self.validation_failed.emit(str(e))
            return None

        self.app_logger.info(f"Generated script for block '{state.block_id.strip()}'.")
        self.app_logger.debug(f"Script:\n{snippet}")
        self.snippet_generated.emit(snippet)
        return snippet

    def copy(self, text: str) -> bool | None:
        """
        Copies the displayed script to the clipboard.
        Empty output or the untouched placeholder is rejected without any
        clipboard access.

        Returns:
            The success flag reported to the UI, or None if the copy was rejected.
        """
        if not text or not text.strip() or text == self.placeholder_text:
            self.app_logger.warning("Copy requested with no generated script.")
            self.copy_rejected.emit(NOTHING_TO_COPY_MESSAGE)
            return None

        success = self.clipboard_writer.copy(text)
        if not success and not self.report_copy_failure:
            self.app_logger.debug("Copy failure not reported (clipboard.report_failure is off).")
            success = True
        self.copy_finished.emit(success)
        return success
