from __future__ import annotations

import logging
import os
import socket
from typing import Mapping, Optional

from dash import Dash

logger = logging.getLogger(__name__)

DEFAULT_PORT = 8050
PORT_SEARCH_RANGE = 100


def port_is_free(port: int, host: str = "127.0.0.1") -> bool:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        try:
            s.bind((host, port))
        except OSError:
            return False
    return True


def find_free_port(start_port: int, attempts: int = PORT_SEARCH_RANGE) -> int:
    """First free port in [start_port, start_port + attempts); start_port if none is."""
    for port in range(start_port, start_port + attempts):
        if port_is_free(port):
            return port
    return start_port


def run_app(app: Dash, env: Optional[Mapping[str, str]] = None) -> None:
    """
    Serve `app` on PORT (default 8050), moving to the next free port if it is taken.

    DEBUG=1 enables the Dash dev tools.
    """
    env = os.environ if env is None else env

    preferred_port = int(env.get("PORT", DEFAULT_PORT))
    port = find_free_port(preferred_port)
    if port != preferred_port:
        logger.warning(
            "Preferred port taken; using next free port",
            extra={"preferred_port": preferred_port, "port": port},
        )

    debug = env.get("DEBUG", "0") == "1"
    logger.info("Starting server", extra={"port": port, "debug": debug})
    app.run(host="0.0.0.0", port=port, debug=debug)
