from __future__ import annotations

from abc import ABC, abstractmethod

from homeservices.domain.entities.identity import Identity


class IdentityProviderPort(ABC):
    @abstractmethod
    def current_identity(self) -> Identity | None:
        """Return the signed-in user, or None when nobody is signed in."""
        raise NotImplementedError
