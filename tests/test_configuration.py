import pytest
import yaml

from authflow.shared.core.configuration import (
    DEFAULT_CONFIG_DIR,
    ConfigManager,
    SystemConfig,
    ValidationLevel,
)


def test_defaults_without_files(tmp_path):
    config = ConfigManager(tmp_path).get_config()

    assert config.form.debounce_delay_ms == 500
    assert config.form.debounce_delay == pytest.approx(0.5)
    assert config.form.password_min_length == 7
    assert config.auth.storage_key == "isLoggedIn"
    assert config.auth.logged_in_marker == "1"


def test_shipped_defaults_match_model_defaults():
    config = ConfigManager(DEFAULT_CONFIG_DIR).get_config()

    assert config == SystemConfig()


def test_user_file_overrides_defaults(tmp_path):
    (tmp_path / "user.yaml").write_text(yaml.safe_dump({"form": {"debounce_delay_ms": 250}}))

    config = ConfigManager(tmp_path).get_config()

    assert config.form.debounce_delay_ms == 250
    assert config.form.password_min_length == 7


def test_env_overrides_user_file(tmp_path, monkeypatch):
    (tmp_path / "user.yaml").write_text(yaml.safe_dump({"form": {"debounce_delay_ms": 250}}))
    monkeypatch.setenv("FORM_DEBOUNCE_DELAY_MS", "100")
    monkeypatch.setenv("FLET_WEB_MODE", "yes")
    monkeypatch.setenv("AUTH_STORAGE_KEY", "flag")

    config = ConfigManager(tmp_path).get_config()

    assert config.form.debounce_delay_ms == 100
    assert config.ui.flet_web_mode is True
    assert config.auth.storage_key == "flag"


def test_unparseable_env_value_is_ignored(tmp_path, monkeypatch):
    monkeypatch.setenv("FLET_PORT", "not-a-port")

    assert ConfigManager(tmp_path).get_config().ui.flet_port == 8550


def test_invalid_values_strict_raises(tmp_path):
    (tmp_path / "user.yaml").write_text(yaml.safe_dump({"form": {"debounce_delay_ms": -5}}))

    with pytest.raises(ValueError):
        ConfigManager(tmp_path).get_config(ValidationLevel.STRICT)


def test_invalid_values_lenient_falls_back(tmp_path):
    (tmp_path / "user.yaml").write_text(yaml.safe_dump({"form": {"unknown_field": 1}}))

    config = ConfigManager(tmp_path).get_config(ValidationLevel.LENIENT)

    assert config == SystemConfig()


def test_broken_yaml_is_treated_as_empty(tmp_path):
    (tmp_path / "user.yaml").write_text("form: [unclosed")

    assert ConfigManager(tmp_path).get_config() == SystemConfig()


def test_save_user_config_round_trips(tmp_path):
    manager = ConfigManager(tmp_path)
    manager.get_config()

    assert manager.save_user_config({"ui": {"theme_mode": "light"}}) is True
    assert manager.get_config().ui.theme_mode == "light"
