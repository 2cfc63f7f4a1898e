import logging
import sys
import os
from pathlib import Path
import datetime


class LogManager:
    """Manages application logging configuration, including log archiving."""

    APP_LOG_FILENAME = "app.log"
    ARCHIVE_FOLDER = "logs_archive"
    APP_LOGGER_NAME = "block_helper"

    _initialized = False

    @staticmethod
    def initialize(log_dir: Path | str = "logs"):
        """Sets up the app logger's handlers and archives the previous run's log."""
        if LogManager._initialized:
            return

        try:
            log_dir = Path(log_dir)
            log_dir.mkdir(exist_ok=True) # Ensure the logs directory exists
            archive_dir = log_dir / LogManager.ARCHIVE_FOLDER
            archive_dir.mkdir(exist_ok=True)

            app_log_file = log_dir / LogManager.APP_LOG_FILENAME

            # --- Archive existing log ---
            timestamp = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
            LogManager._archive_log(app_log_file, archive_dir, f"{LogManager.APP_LOG_FILENAME}_{timestamp}.log")

            app_logger = logging.getLogger(LogManager.APP_LOGGER_NAME)
            app_logger.handlers.clear()

            # --- Configure App Logger (file + console) ---
            app_logger.setLevel(logging.DEBUG)
            app_formatter = logging.Formatter(
                '%(asctime)s - %(levelname)s - %(name)s - %(message)s'
            )
            app_file_handler = logging.FileHandler(app_log_file, mode='w', encoding='utf-8')
            app_file_handler.setFormatter(app_formatter)
            app_logger.addHandler(app_file_handler)
            app_console_handler = logging.StreamHandler(sys.stderr)
            app_console_handler.setFormatter(app_formatter)
            app_console_handler.setLevel(logging.INFO)
            app_logger.addHandler(app_console_handler)
            app_logger.propagate = False

            LogManager._initialized = True
            app_logger.info("LogManager initialized. Logging started.")

        except OSError as e:
            print(f"[LogManager CRITICAL ERROR] Could not set up file logging: {e}", file=sys.stderr)
            LogManager._initialized = False

    @staticmethod
    def _archive_log(log_file_path: Path, archive_dir: Path, archive_name: str):
        """Helper method to archive a single log file."""
        if not log_file_path.exists():
            return
        try:
            os.rename(log_file_path, archive_dir / archive_name)
        except OSError as e:
            print(f"[LogManager CRITICAL ERROR] Error archiving {log_file_path.name}: {e}", file=sys.stderr)

    @staticmethod
    def get_app_logger():
        """Returns the configured application logger."""
        if not LogManager._initialized:
            LogManager.initialize()
        return logging.getLogger(LogManager.APP_LOGGER_NAME)
