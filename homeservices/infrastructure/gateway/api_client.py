from __future__ import annotations

import logging
from typing import Any

import httpx
from tenacity import Retrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from homeservices.application.exceptions import GatewayRejected, GatewayUnavailable
from homeservices.core.config import settings

# Safe to repeat: the request never reached the server.
CONNECT_ERRORS = (httpx.ConnectError, httpx.ConnectTimeout)


class ApiClient:
    """JSON client for the services/bookings backend with an explicit timeout and one retry."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        retry_attempts: int | None = None,
        retry_wait_seconds: float = 0.5,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._base_url = (base_url or settings.API_BASE_URL).rstrip("/")
        self._retry_attempts = max(1, retry_attempts or settings.HTTP_RETRY_ATTEMPTS)
        self._retry_wait_seconds = retry_wait_seconds
        self._client = httpx.Client(
            base_url=self._base_url,
            timeout=timeout or settings.HTTP_TIMEOUT_SECONDS,
            transport=transport,
        )
        self._logger = logging.getLogger(__name__)

    def get_json(self, path: str) -> dict[str, Any]:
        return self._send("GET", path, retry_on=(httpx.TransportError,))

    def post_json(
        self,
        path: str,
        payload: dict[str, Any],
        headers: dict[str, str] | None = None,
        retry_on: tuple[type[Exception], ...] = CONNECT_ERRORS,
    ) -> dict[str, Any]:
        return self._send("POST", path, json=payload, headers=headers, retry_on=retry_on)

    def close(self) -> None:
        self._client.close()

    def _send(
        self,
        method: str,
        path: str,
        retry_on: tuple[type[Exception], ...],
        **kwargs: Any,
    ) -> dict[str, Any]:
        retrying = Retrying(
            stop=stop_after_attempt(self._retry_attempts),
            wait=wait_exponential(multiplier=self._retry_wait_seconds, max=5),
            retry=retry_if_exception_type(retry_on),
            before_sleep=lambda retry_state: self._logger.warning(
                "Retrying backend request",
                extra={"path": path, "attempt": retry_state.attempt_number},
            ),
            reraise=True,
        )
        try:
            response = retrying(self._client.request, method, path, **kwargs)
        except httpx.HTTPError as e:
            # also covers DecodingError raised while reading the body
            self._logger.error("Backend request failed", extra={"path": path, "method": method, "reason": str(e)})
            raise GatewayUnavailable(f"{method} {path} failed: {e}") from e

        if response.status_code >= 500:
            self._logger.error(
                "Backend error response",
                extra={"path": path, "status": response.status_code, "reason": response.text[:200]},
            )
            raise GatewayUnavailable(f"{method} {path} returned {response.status_code}")

        try:
            body = response.json()
        except ValueError as e:
            raise GatewayUnavailable(f"{method} {path} returned invalid JSON") from e

        if response.status_code >= 400:
            message = body.get("message") if isinstance(body, dict) else None
            raise GatewayRejected(message or f"Request failed with status {response.status_code}", response.status_code)

        if not isinstance(body, dict):
            raise GatewayUnavailable(f"{method} {path} returned a non-object body")
        return body
