"""
Topcoder API Transport Module
"""

from tcchallenges.api.base import ChallengesError, is_error
from tcchallenges.api.client import ApiClient, get_api_v2, get_api_v3

__all__ = [
    "ChallengesError",
    "is_error",
    "ApiClient",
    "get_api_v2",
    "get_api_v3",
]
