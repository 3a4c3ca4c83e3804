import os

from advocate_browser.logging_config import configure_logging
from advocate_browser.runtime import run_app
from advocate_browser.ui.dash_app import create_dash_app

configure_logging()

app = create_dash_app(os.getenv("ADVOCATE_BROWSER_CONFIG_ROOT", "config"))
server = app.server


if __name__ == "__main__":
    run_app(app)
