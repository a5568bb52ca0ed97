from __future__ import annotations

from abc import ABC, abstractmethod

from homeservices.application.dto.view_state import ViewState


class ViewStorePort(ABC):
    @abstractmethod
    def get(self, view_id: str) -> ViewState | None:
        raise NotImplementedError

    @abstractmethod
    def put(self, state: ViewState) -> None:
        raise NotImplementedError

    @abstractmethod
    def close(self, view_id: str) -> bool:
        """Cancel the view's lifetime and forget it. Returns False if it was unknown."""
        raise NotImplementedError
