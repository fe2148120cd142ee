"""
Shared fixtures for the Topcoder challenges client tests.
"""

import httpx
import pytest

from tcchallenges.api.client import ApiClient
from tcchallenges.config import get_settings
from tcchallenges.services.challenges import ChallengesService

V2_URL = "https://api.test/v2"
V3_URL = "https://api.test/v3"


@pytest.fixture(autouse=True)
def fresh_settings():
    """Re-read settings for every test so env overrides apply."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def make_service(handler, token: str | None = None) -> ChallengesService:
    """Build a service whose clients talk to ``handler`` instead of the network."""
    transport = httpx.MockTransport(handler)
    return ChallengesService(
        token,
        api=ApiClient(V3_URL, token, transport=transport),
        api_v2=ApiClient(V2_URL, transport=transport),
    )


def envelope(status: int = 200, content=None, total: int | None = None) -> dict:
    """A v3 response body."""
    result = {"success": status == 200, "status": status, "content": content}
    if total is not None:
        result["metadata"] = {"totalCount": total}
    return {"id": "-6f5bd7c1:15a3a0a3f5e:-7ffd", "result": result, "version": "v3"}
