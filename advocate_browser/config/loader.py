from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from advocate_browser.config.model import AppSettings
from advocate_browser.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

ENV_API_BASE_URL = "ADVOCATE_BROWSER_API_BASE_URL"
ENV_REQUEST_TIMEOUT = "ADVOCATE_BROWSER_REQUEST_TIMEOUT"

_STRING_KEYS = ("ui_title", "subtitle", "api_base_url", "advocates_path", "timestamp_format")


def load_settings(root: Path | str, env: Optional[Mapping[str, str]] = None) -> AppSettings:
    """
    Load application settings from a config directory.

    Expected structure:

        root/
            global.json

    Keys in global.json (all optional):

    - ui_title / subtitle: navbar text
    - api_base_url / advocates_path: where the advocates list is fetched from
    - request_timeout: seconds before the fetch is abandoned
    - timestamp_format: strftime pattern for timestamp cells

    Environment variables ADVOCATE_BROWSER_API_BASE_URL and
    ADVOCATE_BROWSER_REQUEST_TIMEOUT win over the file.

    :param root: Directory containing 'global.json'.
    :param env: Environment mapping, defaults to os.environ.
    :return: An AppSettings instance.
    :raises ConfigError: if global.json is unreadable or holds invalid values.
    """
    root = Path(root)
    env = os.environ if env is None else env

    logger.info("Loading global config", extra={"config_root": str(root)})

    raw = _read_global_json(root / "global.json")

    if env.get(ENV_API_BASE_URL):
        raw["api_base_url"] = env[ENV_API_BASE_URL]
    if env.get(ENV_REQUEST_TIMEOUT):
        raw["request_timeout"] = env[ENV_REQUEST_TIMEOUT]

    values: Dict[str, Any] = {}
    for key in _STRING_KEYS:
        if key in raw:
            if not isinstance(raw[key], str) or not raw[key].strip():
                raise ConfigError(f"'{key}' must be a non-empty string")
            values[key] = raw[key]

    if "request_timeout" in raw:
        values["request_timeout"] = _parse_timeout(raw["request_timeout"])

    settings = AppSettings(**values)
    logger.info(
        "Settings loaded",
        extra={"advocates_url": settings.advocates_url, "request_timeout": settings.request_timeout},
    )
    return settings


def _read_global_json(path: Path) -> Dict[str, Any]:
    if not path.is_file():
        logger.warning("No global.json found; using defaults", extra={"path": str(path)})
        return {}

    try:
        with path.open() as f:
            raw = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Could not read {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"{path} must contain a JSON object")
    return raw


def _parse_timeout(value: Any) -> float:
    if isinstance(value, bool):
        raise ConfigError("'request_timeout' must be a number")
    try:
        timeout = float(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"'request_timeout' must be a number, got {value!r}") from e
    if timeout <= 0:
        raise ConfigError(f"'request_timeout' must be positive, got {timeout}")
    return timeout
