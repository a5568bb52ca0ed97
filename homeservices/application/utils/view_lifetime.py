from __future__ import annotations

import logging
from typing import Callable, TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)


class ViewLifetime:
    """
    Cancellation token owned by the view that started a network call.
    Completions that arrive after cancel() are dropped instead of being
    applied to state nobody is looking at anymore.
    """

    def __init__(self, name: str = "view") -> None:
        self._name = name
        self._cancelled = False

    @property
    def name(self) -> str:
        return self._name

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True

    def guard(self, apply: Callable[[], T], default: T, reason: str = "completion") -> T:
        """Run apply() unless the view is gone; otherwise log and return default."""
        if self._cancelled:
            logger.info("Dropping completion for closed view", extra={"view": self._name, "reason": reason})
            return default
        return apply()
