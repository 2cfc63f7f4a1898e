import json
import pytest

from config_manager import CONFIG_ENV_VAR, ConfigManager


def test_defaults_without_file(tmp_path):
    config = ConfigManager(tmp_path / "missing.json")

    assert config.get("ui_settings.feedback_ms") == 2000
    assert config.get("generator.strict_hardness") is False
    assert config.get("clipboard.report_failure") is True
    assert config.get("no.such.key", "fallback") == "fallback"


def test_file_values_merge_over_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"ui_settings": {"feedback_ms": 500}}), encoding="utf-8")

    config = ConfigManager(path)

    assert config.get("ui_settings.feedback_ms") == 500
    assert config.get("ui_settings.default_material") == "wood"


def test_set_saves_immediately(tmp_path):
    path = tmp_path / "config.json"
    config = ConfigManager(path)

    config.set("generator.strict_hardness", True)

    assert json.loads(path.read_text(encoding="utf-8"))["generator"]["strict_hardness"] is True
    assert ConfigManager(path).get("generator.strict_hardness") is True


def test_set_does_not_mutate_defaults(tmp_path):
    config = ConfigManager(tmp_path / "config.json")

    config.set("ui_settings.feedback_ms", 10)

    assert config.defaults["ui_settings"]["feedback_ms"] == 2000


def test_env_var_selects_config_file(tmp_path, monkeypatch):
    path = tmp_path / "env_config.json"
    path.write_text(json.dumps({"clipboard": {"report_failure": False}}), encoding="utf-8")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

    config = ConfigManager()

    assert config.config_path == path.resolve()
    assert config.get("clipboard.report_failure") is False


def test_set_unknown_section_raises(tmp_path):
    path = tmp_path / "config.json"
    config = ConfigManager(path)

    with pytest.raises(KeyError):
        config.set("no_such_section.flag", True)

    assert config.get("no_such_section.flag") is None
    assert not path.exists()


def test_set_new_key_in_existing_section(tmp_path):
    config = ConfigManager(tmp_path / "config.json")

    config.set("ui_settings.extra", None)

    assert "extra" in config.data["ui_settings"]


def test_get_through_non_dict_returns_default(tmp_path):
    config = ConfigManager(tmp_path / "config.json")

    assert config.get("ui_settings.feedback_ms.nested", "x") == "x"
    assert config.get("generator") == {"strict_hardness": False}
