import pytest

from config_manager import ConfigManager


@pytest.fixture
def config(tmp_path):
    """ConfigManager backed by a throwaway file (defaults only)."""
    return ConfigManager(tmp_path / "config.json")
