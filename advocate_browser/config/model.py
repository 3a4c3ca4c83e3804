from __future__ import annotations

from dataclasses import dataclass

DEFAULT_UI_TITLE = "Solace Advocates"
DEFAULT_SUBTITLE = "Find an advocate by name, city, degree or specialty"
DEFAULT_API_BASE_URL = "http://localhost:3000"
DEFAULT_ADVOCATES_PATH = "/api/advocates"
DEFAULT_REQUEST_TIMEOUT = 10.0
DEFAULT_TIMESTAMP_FORMAT = "%c"


@dataclass(frozen=True)
class AppSettings:
    """
    Parsed global.json (plus environment overrides).
    """
    ui_title: str = DEFAULT_UI_TITLE
    subtitle: str = DEFAULT_SUBTITLE
    api_base_url: str = DEFAULT_API_BASE_URL
    advocates_path: str = DEFAULT_ADVOCATES_PATH
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT

    @property
    def advocates_url(self) -> str:
        return f"{self.api_base_url.rstrip('/')}/{self.advocates_path.lstrip('/')}"
