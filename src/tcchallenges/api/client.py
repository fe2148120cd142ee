"""
Topcoder API Client

Async GET against one Topcoder API version. Non-2xx responses are returned
as-is; connection failures are retried per configuration and then raised.
"""

import logging

import httpx
from tenacity import AsyncRetrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from tcchallenges.api.base import ChallengesError
from tcchallenges.config import get_settings

logger = logging.getLogger(__name__)


class ApiClient:
    """
    Client for a single Topcoder API version.

    Each request opens its own httpx.AsyncClient; pass ``transport`` to route
    requests elsewhere (e.g. httpx.MockTransport).
    """

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.settings = get_settings()
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout if timeout is not None else self.settings.http_timeout
        self.transport = transport

    @property
    def headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    async def get(self, path: str) -> httpx.Response:
        """
        Issue a GET request.

        Args:
            path: Endpoint path with query string, e.g. "/challenges/?filter="

        Returns:
            The raw response, whatever its status code.

        Raises:
            ChallengesError: If the request could not be completed
        """
        url = f"{self.base_url}{path}"
        logger.debug(f"GET {url}")

        try:
            async for attempt in AsyncRetrying(
                stop=stop_after_attempt(self.settings.http_retry_attempts),
                wait=wait_exponential(multiplier=1, min=1, max=10),
                retry=retry_if_exception_type(httpx.TransportError),
                reraise=True,
            ):
                with attempt:
                    async with httpx.AsyncClient(
                        timeout=self.timeout,
                        headers=self.headers,
                        transport=self.transport,
                    ) as client:
                        response = await client.get(url)
                        return response

        except httpx.TimeoutException as e:
            raise ChallengesError(
                message="Request timeout",
                endpoint=path,
                error_type="TIMEOUT",
                details={"timeout_seconds": self.timeout}
            ) from e

        except httpx.TransportError as e:
            raise ChallengesError(
                message=str(e) or type(e).__name__,
                endpoint=path,
                error_type="TRANSPORT_ERROR",
                details={"url": url}
            ) from e


def get_api_v2(token: str | None = None, **kwargs) -> ApiClient:
    """Build a client for Topcoder API v2."""
    return ApiClient(get_settings().api_v2_base_url, token, **kwargs)


def get_api_v3(token: str | None = None, **kwargs) -> ApiClient:
    """Build a client for Topcoder API v3."""
    return ApiClient(get_settings().api_v3_base_url, token, **kwargs)
