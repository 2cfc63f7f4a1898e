#!/usr/bin/env python3
from PyQt5.QtWidgets import (
    QMainWindow, QWidget, QHBoxLayout, QSplitter, QMessageBox, QAction
)
from PyQt5.QtCore import Qt

# Project Imports
from log_manager import LogManager
from config_manager import ConfigManager
from controllers.generator_controller import GeneratorController
from views.block_form_widget import BlockFormWidget
from views.snippet_output_widget import SnippetOutputWidget


class MainWindow(QMainWindow):
    """
    Main application window acting as an orchestrator.
    Sets up the form and output widgets and connects them to the GeneratorController.
    """

    def __init__(self, config: ConfigManager | None = None):
        super().__init__()
        self.config = config if config is not None else ConfigManager()
        self.app_logger = LogManager.get_app_logger()
        self.app_logger.info("Initializing MainWindow...")

        self.generator_controller = GeneratorController(self.config, parent=self)

        # --- UI Setup ---
        self.setWindowTitle("Block Script Helper")
        self.resize(
            int(self.config.get("ui_settings.window_width", 760)),
            int(self.config.get("ui_settings.window_height", 720)),
        )

        self.centralWidget_ = QWidget()
        self.setCentralWidget(self.centralWidget_)
        self.main_layout = QHBoxLayout(self.centralWidget_)

        self.form_widget = BlockFormWidget(self.config, parent=self)
        self.output_widget = SnippetOutputWidget(self.config, parent=self)

        self.splitter = QSplitter(Qt.Horizontal)
        self.splitter.addWidget(self.form_widget)
        self.splitter.addWidget(self.output_widget)
        self.splitter.setStretchFactor(0, 1)
        self.splitter.setStretchFactor(1, 1)
        self.main_layout.addWidget(self.splitter, 1)

        self._build_settings_menu()

        self.statusBar().showMessage("Ready.")

        self._connect_signals()

        self.app_logger.info("MainWindow initialization complete.")

    def _build_settings_menu(self):
        settings_menu = self.menuBar().addMenu("&Settings")

        self.strict_hardness_action = QAction("Only emit positive hardness", self, checkable=True)
        self.strict_hardness_action.setChecked(bool(self.config.get("generator.strict_hardness", False)))
        self.strict_hardness_action.toggled.connect(
            lambda checked: self._on_setting_toggled("generator.strict_hardness", checked)
        )

        self.report_failure_action = QAction("Report clipboard failures", self, checkable=True)
        self.report_failure_action.setChecked(bool(self.config.get("clipboard.report_failure", True)))
        self.report_failure_action.toggled.connect(
            lambda checked: self._on_setting_toggled("clipboard.report_failure", checked)
        )

        settings_menu.addAction(self.strict_hardness_action)
        settings_menu.addAction(self.report_failure_action)

    def _connect_signals(self):
        # Form / output -> controller
        self.form_widget.generate_requested.connect(self.generator_controller.generate)
        self.output_widget.copy_requested.connect(self.generator_controller.copy)

        # Controller -> UI updates
        self.generator_controller.snippet_generated.connect(self._on_snippet_generated)
        self.generator_controller.validation_failed.connect(self._show_error_message)
        self.generator_controller.copy_rejected.connect(self._show_error_message)
        self.generator_controller.copy_finished.connect(self._on_copy_finished)

    def _on_snippet_generated(self, snippet: str):
        self.output_widget.set_snippet(snippet)
        self.statusBar().showMessage("Script generated.", 5000)

    def _on_copy_finished(self, success: bool):
        self.output_widget.show_copy_feedback(success)
        self.statusBar().showMessage(
            "Script copied to clipboard." if success else "Copy failed.",
            self.output_widget.feedback_ms,
        )

    def _on_setting_toggled(self, key: str, value: bool):
        """Persist a Settings menu toggle."""
        self.config.set(key, value)
        self.app_logger.info(f"Setting '{key}' set to {value}")

    def _show_error_message(self, message: str):
        """Blocking notification for validation and copy errors."""
        self.app_logger.warning(f"MainWindow showing error: {message}")
        self.statusBar().showMessage(f"Error: {message}", 10000)
        QMessageBox.warning(self, "Block Script Helper", message)
