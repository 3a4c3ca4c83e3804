from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

from advocate_browser.core.exceptions import RecordSchemaError
from advocate_browser.core.record import Advocate
from advocate_browser.core.search import filter_advocates


class Phase(str, Enum):
    IDLE = "idle"
    LOADED = "loaded"
    FILTERED = "filtered"


@dataclass
class BrowserState:
    """
    Owns the advocate lists and the current search for one page session.

    Fields:

    - advocates: the Full List, replaced wholesale on load, never edited in place.
    - search_term: the raw text the user typed.
    - phase: IDLE until the first successful load, then LOADED / FILTERED.
    - display: the Display List, always derived from advocates + search_term.

    All transitions go through load(), search() and reset().
    """

    advocates: List[Advocate] = field(default_factory=list)
    search_term: str = ""
    phase: Phase = Phase.IDLE
    display: List[Advocate] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        self.phase = Phase(self.phase)
        self._recompute()

    # ---- transitions ----

    def load(self, records: Sequence[Advocate]) -> None:
        self.advocates = list(records)
        self.search_term = ""
        self.phase = Phase.LOADED
        self._recompute()

    def search(self, term: str | None) -> None:
        self.search_term = term or ""
        if self.phase is not Phase.IDLE:
            self.phase = Phase.FILTERED
        self._recompute()

    def reset(self) -> None:
        self.search_term = ""
        if self.phase is not Phase.IDLE:
            self.phase = Phase.LOADED
        self._recompute()

    def _recompute(self) -> None:
        # Always derived from the Full List, never from the previous display
        self.display = filter_advocates(self.advocates, self.search_term)

    # ---- dcc.Store (de)serialization ----

    def advocates_to_store(self) -> Optional[List[Dict[str, Any]]]:
        """Full List in store shape; None until the first successful load."""
        if self.phase is Phase.IDLE:
            return None
        return [a.to_dict() for a in self.advocates]

    @classmethod
    def from_stores(
        cls,
        advocates_data: Optional[List[Dict[str, Any]]],
        search_term: Optional[str],
    ) -> BrowserState:
        """
        Rebuild the state from the two page stores.

        Only the load writes the advocates store; only search/reset write
        the term store. A term typed before the load finishes is applied
        once the records arrive.
        """
        state = cls()
        if advocates_data is not None:
            if not isinstance(advocates_data, list):
                raise RecordSchemaError("Stored advocates must be a list")
            state.load([Advocate.from_dict(raw) for raw in advocates_data])
        if search_term:
            state.search(search_term)
        return state
