"""
Topcoder Services Module
"""

from tcchallenges.services.challenges import ChallengesService, ServiceCache, get_service

__all__ = [
    "ChallengesService",
    "ServiceCache",
    "get_service",
]
