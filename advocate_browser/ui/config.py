from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple

from advocate_browser.config.model import AppSettings
from advocate_browser.core.columns import COLUMNS, ColumnDescriptor
from advocate_browser.services.advocate_service import AdvocateService


@dataclass
class AppConfig:
    config_root: Path
    settings: AppSettings = field(default_factory=AppSettings)
    columns: Tuple[ColumnDescriptor, ...] = COLUMNS
    advocate_service: Optional[AdvocateService] = None

    def validate(self) -> None:
        """Ensure all required services are attached before the app starts."""
        if self.advocate_service is None:
            raise RuntimeError("AppConfig.advocate_service must be initialized.")
        if not self.columns:
            raise RuntimeError("AppConfig.columns must not be empty.")
