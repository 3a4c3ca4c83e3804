from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

import requests

from advocate_browser.config.model import AppSettings
from advocate_browser.core.exceptions import AdvocateFetchError, RecordSchemaError
from advocate_browser.core.record import Advocate, parse_advocates
from advocate_browser.core.state import BrowserState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoadResult:
    """Outcome of one load attempt, used by the UI for the status banner."""
    ok: bool
    count: int = 0
    error: Optional[str] = None


class AdvocateService:
    """
    Reads the advocate list from the backend.

    One GET per call, no retries and no caching; the only copy of the
    records is the one held by BrowserState.
    """

    def __init__(self, settings: AppSettings, session: Optional[requests.Session] = None):
        self.settings = settings
        self._session = session or requests.Session()

    def fetch_advocates(self) -> List[Advocate]:
        """
        Fetch and parse `{ "data": [...] }` from the advocates endpoint.

        :raises AdvocateFetchError: on network errors, non-2xx responses,
            invalid JSON or a payload of the wrong shape.
        """
        url = self.settings.advocates_url
        logger.info("Fetching advocates", extra={"url": url})

        try:
            response = self._session.get(url, timeout=self.settings.request_timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise AdvocateFetchError(f"Request to {url} failed: {e}") from e

        try:
            payload = response.json()
        except ValueError as e:
            raise AdvocateFetchError(f"Response from {url} is not valid JSON") from e

        try:
            advocates = parse_advocates(payload)
        except RecordSchemaError as e:
            raise AdvocateFetchError(f"Unexpected payload from {url}: {e}") from e

        logger.info("Fetched advocates", extra={"url": url, "n_advocates": len(advocates)})
        return advocates

    def load_into(self, state: BrowserState) -> LoadResult:
        """
        Replace the state's lists with a fresh fetch.

        On failure the error is logged and `state` is left exactly as it was.
        """
        try:
            advocates = self.fetch_advocates()
        except AdvocateFetchError as e:
            logger.error(
                "Could not load advocates",
                extra={"url": self.settings.advocates_url, "error": str(e)},
            )
            return LoadResult(ok=False, count=len(state.advocates), error=str(e))

        state.load(advocates)
        return LoadResult(ok=True, count=len(advocates))
