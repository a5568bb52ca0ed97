from __future__ import annotations

from typing import Mapping

from homeservices.application.ports.identity import IdentityProviderPort
from homeservices.domain.entities.identity import Identity


class HeaderIdentityProvider(IdentityProviderPort):
    """
    Identity handed over by the caller in request headers:
    Authorization: Bearer <token> plus X-User-Id / X-User-Name / X-User-Email / X-User-Phone.
    The token is passed through to the bookings backend untouched.
    """

    def __init__(self, headers: Mapping[str, str]) -> None:
        self._headers = {k.lower(): v for k, v in headers.items()}

    def current_identity(self) -> Identity | None:
        authorization = self._headers.get("authorization", "")
        scheme, _, token = authorization.partition(" ")
        user_id = self._headers.get("x-user-id", "").strip()
        if scheme.lower() != "bearer" or not token.strip() or not user_id:
            return None
        return Identity(
            user_id=user_id,
            name=self._headers.get("x-user-name", "").strip(),
            email=self._headers.get("x-user-email", "").strip(),
            phone=self._headers.get("x-user-phone", "").strip(),
            token=token.strip(),
        )
