import copy
import json
import os
from pathlib import Path
import logging
from typing import Any

# Configure logging for the config manager itself
config_logger = logging.getLogger("block_helper.config")

CONFIG_ENV_VAR = "BLOCK_HELPER_CONFIG"


class ConfigManager:
    """Manages loading, accessing, and saving application settings from/to config.json."""

    def __init__(self, config_filename=None):
        """Initializes the ConfigManager.

        Args:
            config_filename (str | Path | None): Config file relative to the working
                directory. Falls back to $BLOCK_HELPER_CONFIG, then "config.json".
        """
        if config_filename is None:
            config_filename = os.getenv(CONFIG_ENV_VAR, "config.json")
        self.config_path = Path(config_filename).resolve() # Store absolute path
        self.defaults = {
            "generator": {
                "strict_hardness": False
            },
            "clipboard": {
                "report_failure": True
            },
            "ui_settings": {
                "feedback_ms": 2000,
                "placeholder_text": "The generated script will appear here...",
                "default_material": "wood",
                "window_width": 760,
                "window_height": 720
            }
        }
        self.data = copy.deepcopy(self.defaults) # Start with defaults
        self.load()

    def load(self):
        """Reads the JSON file (if any) over a fresh copy of the defaults."""
        overrides = {}
        if self.config_path.is_file():
            config_logger.info(f"Loading configuration from: {self.config_path}")
            with open(self.config_path, 'r', encoding='utf-8') as f:
                overrides = json.load(f)
        else:
            config_logger.warning(f"Config file {self.config_path} not found. Using defaults.")

        self.data = _merge_dicts(copy.deepcopy(self.defaults), overrides)
        config_logger.info("Configuration loaded.")

    def save(self):
        """Writes the current settings back to the JSON file."""
        with open(self.config_path, 'w', encoding='utf-8') as f:
            json.dump(self.data, f, indent=4)
        config_logger.debug(f"Configuration saved to {self.config_path}.")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Looks up a dot-separated key such as "ui_settings.feedback_ms".

        Returns *default* when any part of the path is missing.
        """
        section_path, _, name = key.rpartition('.')
        section = self._section(section_path)
        if section is None or name not in section:
            config_logger.debug(f"Config key '{key}' not set. Using default: {default}")
            return default
        return section[name]

    def set(self, key: str, value: Any):
        """Updates an existing setting and saves immediately.

        Raises:
            KeyError: if the section named by *key* does not exist.
        """
        section_path, _, name = key.rpartition('.')
        section = self._section(section_path)
        if section is None:
            raise KeyError(f"Unknown config section in '{key}'")
        if name in section and section[name] == value:
            return
        section[name] = value
        config_logger.debug(f"Set config key '{key}' = {value}")
        self.save()

    def _section(self, path: str) -> dict | None:
        """Dict found at a dot-separated path ("" is the root), or None."""
        node = self.data
        for part in filter(None, path.split('.')):
            node = node.get(part) if isinstance(node, dict) else None
        return node if isinstance(node, dict) else None


def _merge_dicts(base: dict, updates: dict) -> dict:
    """Recursively copies *updates* into *base*, keeping keys *updates* lacks."""
    for key, value in updates.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge_dicts(base[key], value)
        else:
            base[key] = value
    return base
