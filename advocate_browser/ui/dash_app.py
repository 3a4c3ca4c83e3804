from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import dash_bootstrap_components as dbc
from dash import Dash

from .config import AppConfig
from advocate_browser.config.loader import load_settings
from advocate_browser.config.model import AppSettings
from advocate_browser.services.advocate_service import AdvocateService
from advocate_browser.ui.layout.build_layout import build_layout
from advocate_browser.ui.callbacks.callbacks_state import register_state_callbacks
from advocate_browser.ui.callbacks.callbacks_render import register_render_callbacks

logger = logging.getLogger(__name__)


def create_dash_app(
    config_root: Path | str = Path("config"),
    settings: Optional[AppSettings] = None,
    advocate_service: Optional[AdvocateService] = None,
) -> Dash:
    config_root = Path(config_root)

    # 1) Load Config
    if settings is None:
        settings = load_settings(config_root)

    # 2) Initialize Service Layer
    if advocate_service is None:
        advocate_service = AdvocateService(settings)

    # 3) App Context
    ctx = AppConfig(
        config_root=config_root,
        settings=settings,
        advocate_service=advocate_service,
    )
    ctx.validate()

    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        assets_folder=str(assets_path),
    )
    app.title = settings.ui_title
    app.layout = build_layout(ctx)

    # Register callbacks
    register_state_callbacks(app, ctx)
    register_render_callbacks(app, ctx)

    logger.info("Dash app created", extra={"advocates_url": settings.advocates_url})
    return app
