#!/usr/bin/env python3
"""Read-only pane showing the generated script, plus the *Copy Script* button.

Copy feedback is transient: after a copy the button switches to a success or
failure label/colour and reverts on its own after
``ui_settings.feedback_ms`` milliseconds.
"""

from __future__ import annotations

from PyQt5.QtWidgets import QWidget, QPlainTextEdit, QPushButton, QVBoxLayout, QHBoxLayout
from PyQt5.QtCore import pyqtSignal, pyqtSlot, QTimer
from PyQt5.QtGui import QFont

from config_manager import ConfigManager

__all__ = ["SnippetOutputWidget"]

COPY_LABEL = "Copy Script"
COPY_SUCCESS_LABEL = "Copied!"
COPY_FAILURE_LABEL = "Copy failed"
_IDLE_STYLE = "background-color: #27ae60; color: white;"
_FAILURE_STYLE = "background-color: #e74c3c; color: white;"


class SnippetOutputWidget(QWidget):
    """Output display and copy button."""

    copy_requested = pyqtSignal(str)

    def __init__(self, config_manager: ConfigManager, parent: QWidget | None = None):
        super().__init__(parent)
        self.config = config_manager
        self.placeholder_text: str = self.config.get("ui_settings.placeholder_text", "")
        self.feedback_ms: int = int(self.config.get("ui_settings.feedback_ms", 2000))

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.output_edit = QPlainTextEdit()
        self.output_edit.setReadOnly(True)
        self.output_edit.setPlaceholderText(self.placeholder_text)
        self.output_edit.setFont(QFont("Monospace"))
        self.output_edit.setLineWrapMode(QPlainTextEdit.NoWrap)
        layout.addWidget(self.output_edit, 1)

        button_row = QHBoxLayout()
        self.copy_button = QPushButton(COPY_LABEL)
        self.copy_button.setStyleSheet(_IDLE_STYLE)
        button_row.addStretch(1)
        button_row.addWidget(self.copy_button)
        layout.addLayout(button_row)

        self.copy_button.clicked.connect(lambda: self.copy_requested.emit(self.current_text()))

    # ------------------------------------------------------------------
    # Public helpers
    # ------------------------------------------------------------------
    def current_text(self) -> str:
        """Displayed script, or the placeholder while nothing was generated."""
        text = self.output_edit.toPlainText()
        return text if text else self.placeholder_text

    @pyqtSlot(str)
    def set_snippet(self, snippet: str) -> None:
        """Replace whatever was shown before."""
        self.output_edit.setPlainText(snippet)

    @pyqtSlot(bool)
    def show_copy_feedback(self, success: bool) -> None:
        if success:
            self.copy_button.setText(COPY_SUCCESS_LABEL)
            self.copy_button.setStyleSheet(_IDLE_STYLE)
        else:
            self.copy_button.setText(COPY_FAILURE_LABEL)
            self.copy_button.setStyleSheet(_FAILURE_STYLE)
        QTimer.singleShot(self.feedback_ms, self._reset_copy_button)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _reset_copy_button(self) -> None:
        self.copy_button.setText(COPY_LABEL)
        self.copy_button.setStyleSheet(_IDLE_STYLE)
