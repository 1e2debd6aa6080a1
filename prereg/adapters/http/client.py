"""
HTTP registration client adapter - Implements RegistrationClient protocol.

Posts the registration payload to the server endpoint with httpx.
Transport-level failures (connection refused, DNS, timeouts) become
SubmissionNetworkError; any HTTP response, including 4xx/5xx, is
returned to the caller as a SubmissionResponse.
"""

import logging
from typing import Any

import httpx

from prereg.domain.exceptions import SubmissionNetworkError
from prereg.domain.ports import SubmissionResponse

logger = logging.getLogger(__name__)

RESERVATION_PATH = "/api/reservation"


class HttpRegistrationClient:
    """Implements RegistrationClient protocol via httpx.AsyncClient."""

    def __init__(
        self,
        base_url: str = "",
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
        path: str = RESERVATION_PATH,
    ) -> None:
        """
        Args:
            base_url: Server origin, used when no client is supplied
            timeout: Request timeout in seconds
            client: Pre-configured client (tests inject mock/ASGI transports)
            path: Endpoint path relative to the client's base URL
        """
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(base_url=base_url, timeout=timeout)
        self.path = path

    async def submit(self, payload: dict[str, Any]) -> SubmissionResponse:
        try:
            response = await self._client.post(self.path, json=payload)
        except httpx.TransportError as error:
            logger.warning("Registration request failed before a response: %s", error)
            raise SubmissionNetworkError(str(error)) from error

        try:
            body = response.json()
        except ValueError:
            body = None

        return SubmissionResponse(
            status_code=response.status_code,
            body=body if isinstance(body, dict) else None,
        )

    async def aclose(self) -> None:
        """Close the underlying client if this adapter created it."""
        if self._owns_client:
            await self._client.aclose()
