"""
Challenges Service

Convenient access to Topcoder challenges via the TC API.

The listing methods (challenges, marathon matches, user challenges) and
tags return a ChallengesError instead of raising when the API answers with a
non-ok response or an error envelope. Subtracks and user marathon matches
raise instead.
"""

import asyncio
import logging
import threading
from collections.abc import Callable, Mapping
from typing import Any

import httpx

from tcchallenges.api.base import ChallengesError, is_error
from tcchallenges.api.client import ApiClient, get_api_v2, get_api_v3
from tcchallenges.models import ChallengeResult, Envelope
from tcchallenges.querystring import stringify

logger = logging.getLogger(__name__)


class ChallengesService:
    """
    Wraps the v3 (primary) and v2 (secondary) Topcoder API clients.

    Instances are not mutated after construction; get a new one through
    get_service() when the token changes.
    """

    SUBTRACK_ENDPOINTS = ("/design/challengetypes", "/develop/challengetypes")

    def __init__(
        self,
        token_v3: str | None = None,
        api: ApiClient | None = None,
        api_v2: ApiClient | None = None,
    ):
        """
        Args:
            token_v3: Optional auth token for Topcoder API v3.
            api: v3 client to use instead of one built from settings.
            api_v2: v2 client to use instead of one built from settings.
        """
        self.token_v3 = token_v3
        self.api = api if api is not None else get_api_v3(token_v3)
        self.api_v2 = api_v2 if api_v2 is not None else get_api_v2()

    def _unwrap(self, endpoint: str, response: httpx.Response) -> Envelope | ChallengesError:
        """Turn a v3 response into its envelope, or an error value."""
        if not response.is_success:
            logger.warning(
                f"{endpoint} responded {response.status_code} {response.reason_phrase}"
            )
            return ChallengesError(
                message=response.reason_phrase,
                endpoint=endpoint,
                error_type=f"HTTP_{response.status_code}",
                details={"url": str(response.request.url)}
            )

        try:
            envelope = Envelope.from_body(response.json())
        except ValueError as e:
            logger.warning(f"{endpoint} returned an unreadable body: {e}")
            return ChallengesError(
                message=str(e),
                endpoint=endpoint,
                error_type="PARSE_ERROR",
                details={"body": response.text[:500]}
            )

        if not envelope.ok:
            logger.warning(f"{endpoint} envelope status {envelope.status}: {envelope.content}")
            return ChallengesError(
                message=str(envelope.content),
                endpoint=endpoint,
                error_type="APPLICATION_ERROR",
                details={"status": envelope.status, "content": envelope.content}
            )

        return envelope

    async def _get_challenges(
        self,
        endpoint: str,
        filters: Mapping[str, Any] | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> ChallengeResult | ChallengesError:
        """
        Shared path of all challenge listings.

        Args:
            endpoint: API v3 endpoint the request is sent to.
            filters: Optional. Map of filters, sent stringified as the
                ``filter`` query parameter.
            params: Optional. Map of any other query parameters.

        Returns:
            ChallengeResult, or ChallengesError if the request failed.
        """
        query = {"filter": stringify(filters), **(params or {})}
        response = await self.api.get(f"{endpoint}?{stringify(query)}")

        envelope = self._unwrap(endpoint, response)
        if is_error(envelope):
            return envelope

        if envelope.metadata is None:
            return ChallengesError(
                message="Invalid response: missing 'metadata' field",
                endpoint=endpoint,
                error_type="PARSE_ERROR",
                details={"content": envelope.content}
            )

        content = envelope.content if envelope.content is not None else []
        if not isinstance(content, list):
            return ChallengesError(
                message="Invalid response: 'content' is not a list",
                endpoint=endpoint,
                error_type="PARSE_ERROR",
                details={"content": content}
            )

        result = ChallengeResult(
            challenges=content,
            total_count=envelope.metadata.total_count,
        )
        logger.info(
            f"{endpoint}: {len(result.challenges)} of {result.total_count} challenges"
        )
        return result

    async def _get_list(self, endpoint: str) -> list[Any]:
        response = await self.api_v2.get(endpoint)
        if not response.is_success:
            raise ChallengesError(
                message=response.reason_phrase,
                endpoint=endpoint,
                error_type=f"HTTP_{response.status_code}",
                details={"url": str(response.request.url)}
            )

        data = response.json()
        if not isinstance(data, list):
            raise ChallengesError(
                message="Invalid response: expected a list",
                endpoint=endpoint,
                error_type="PARSE_ERROR",
                details={"response": data}
            )
        return data

    async def get_challenge_subtracks(self) -> list[Any]:
        """
        Gets possible challenge subtracks.

        Both v2 endpoints are queried concurrently; design subtracks come
        first.

        Raises:
            ChallengesError: If either request fails
        """
        design, develop = await asyncio.gather(
            *(self._get_list(endpoint) for endpoint in self.SUBTRACK_ENDPOINTS)
        )
        return design + develop

    async def get_challenge_tags(self) -> list[str] | ChallengesError:
        """Gets possible challenge tags (technologies)."""
        endpoint = "/technologies"
        envelope = self._unwrap(endpoint, await self.api.get(endpoint))
        if is_error(envelope):
            return envelope
        return envelope.content

    async def get_challenges(
        self,
        filters: Mapping[str, Any] | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> ChallengeResult | ChallengesError:
        """Gets challenges."""
        return await self._get_challenges("/challenges/", filters, params)

    async def get_marathon_matches(
        self,
        filters: Mapping[str, Any] | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> ChallengeResult | ChallengesError:
        """Gets marathon matches."""
        return await self._get_challenges("/marathonMatches/", filters, params)

    async def get_user_challenges(
        self,
        username: str,
        filters: Mapping[str, Any] | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> ChallengeResult | ChallengesError:
        """
        Gets challenges of the specified user.

        Args:
            username: User whose challenges we want to fetch (case-insensitive).
            filters: Optional.
            params: Optional.
        """
        endpoint = f"/members/{username.lower()}/challenges/"
        return await self._get_challenges(endpoint, filters, params)

    async def get_user_marathon_matches(
        self,
        username: str,
        filters: Mapping[str, Any] | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> httpx.Response:
        """
        Gets marathon matches of the specified user.

        Returns the raw response: the envelope is not unwrapped, and filters
        and params are not sent.
        """
        endpoint = f"/members/{username.lower()}/mms/"
        if filters or params:
            logger.debug(f"{endpoint}: filters and params are not forwarded")
        return await self.api.get(endpoint)


class ServiceCache:
    """
    Single-slot holder of the last created ChallengesService.

    Asking for a different token replaces the held instance; only the last
    token is remembered.
    """

    def __init__(self, factory: Callable[[str | None], ChallengesService] = ChallengesService):
        self._factory = factory
        self._instance: ChallengesService | None = None
        self._lock = threading.Lock()

    @property
    def instance(self) -> ChallengesService | None:
        return self._instance

    def get(self, token_v3: str | None = None) -> ChallengesService:
        with self._lock:
            if self._instance is None or self._instance.token_v3 != token_v3:
                logger.debug("Creating new challenges service")
                self._instance = self._factory(token_v3)
            return self._instance

    def clear(self) -> None:
        with self._lock:
            self._instance = None


# Process-wide default cache
_cache = ServiceCache()


def get_service(
    token_v3: str | None = None,
    cache: ServiceCache | None = None,
) -> ChallengesService:
    """
    Returns a new or existing challenges service.

    Args:
        token_v3: Optional. Auth token for Topcoder API v3.
        cache: Cache to use instead of the process-wide one.
    """
    if cache is None:
        cache = _cache
    return cache.get(token_v3)
