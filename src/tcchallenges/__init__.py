"""
Topcoder Challenges Client

Async wrapper around the Topcoder challenge APIs (v2 and v3).
"""

__version__ = "1.0.0"

from tcchallenges.api import ChallengesError, is_error
from tcchallenges.models import ChallengeResult, OrderBy
from tcchallenges.services import ChallengesService, ServiceCache, get_service

__all__ = [
    "ChallengesError",
    "is_error",
    "ChallengeResult",
    "OrderBy",
    "ChallengesService",
    "ServiceCache",
    "get_service",
]
