from __future__ import annotations

import logging
import threading

from homeservices.application.dto.view_state import ViewState
from homeservices.application.ports.view_store import ViewStorePort


class MemoryViewStore(ViewStorePort):
    def __init__(self, view_limit: int = 1000) -> None:
        self._views: dict[str, ViewState] = {}
        self._view_limit = view_limit
        self._lock = threading.Lock()
        self._logger = logging.getLogger(__name__)

    def get(self, view_id: str) -> ViewState | None:
        with self._lock:
            return self._views.get(view_id)

    def put(self, state: ViewState) -> None:
        evicted: list[ViewState] = []
        with self._lock:
            self._views.pop(state.view_id, None)
            self._views[state.view_id] = state
            while len(self._views) > self._view_limit:
                oldest_id = next(iter(self._views))
                evicted.append(self._views.pop(oldest_id))
        for old in evicted:
            self._release(old)

    def close(self, view_id: str) -> bool:
        with self._lock:
            state = self._views.pop(view_id, None)
        if state is None:
            return False
        self._release(state)
        return True

    def _release(self, state: ViewState) -> None:
        state.lifetime.cancel()
        self._logger.info("View closed", extra={"view": state.view_id, "vertical": state.vertical.key})

    def __len__(self) -> int:
        with self._lock:
            return len(self._views)
