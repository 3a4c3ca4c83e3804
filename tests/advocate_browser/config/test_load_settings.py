import json
from pathlib import Path

import pytest

from advocate_browser.config.loader import load_settings
from advocate_browser.config.model import AppSettings
from advocate_browser.core.exceptions import ConfigError


def _write_global(root: Path, data) -> None:
    root.mkdir(parents=True, exist_ok=True)
    (root / "global.json").write_text(json.dumps(data))


def test_load_settings_from_config_dir(tmp_path):
    config_root = tmp_path / "config"
    _write_global(
        config_root,
        {
            "ui_title": "Test Advocates",
            "api_base_url": "http://api.local",
            "advocates_path": "v1/advocates",
            "request_timeout": 3,
        },
    )

    settings = load_settings(config_root, env={})

    assert settings.ui_title == "Test Advocates"
    assert settings.request_timeout == 3.0
    assert settings.advocates_url == "http://api.local/v1/advocates"
    # Untouched keys keep defaults
    assert settings.timestamp_format == AppSettings().timestamp_format


def test_missing_global_json_uses_defaults(tmp_path):
    assert load_settings(tmp_path / "nowhere", env={}) == AppSettings()


def test_env_overrides_file(tmp_path):
    _write_global(tmp_path, {"api_base_url": "http://file", "request_timeout": 3})

    settings = load_settings(
        tmp_path,
        env={
            "ADVOCATE_BROWSER_API_BASE_URL": "http://env",
            "ADVOCATE_BROWSER_REQUEST_TIMEOUT": "0.5",
        },
    )

    assert settings.api_base_url == "http://env"
    assert settings.request_timeout == 0.5


def test_invalid_json_raises_config_error(tmp_path):
    (tmp_path / "global.json").write_text("{not json")
    with pytest.raises(ConfigError):
        load_settings(tmp_path, env={})


@pytest.mark.parametrize(
    "data",
    [
        ["not", "an", "object"],
        {"request_timeout": "soon"},
        {"request_timeout": 0},
        {"request_timeout": True},
        {"ui_title": ""},
        {"api_base_url": 5},
    ],
)
def test_invalid_values_raise_config_error(tmp_path, data):
    _write_global(tmp_path, data)
    with pytest.raises(ConfigError):
        load_settings(tmp_path, env={})
