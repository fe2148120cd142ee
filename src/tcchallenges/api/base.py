"""
Topcoder API Error Types

Filter-based service calls hand these back as values; the transport and the
raw endpoints raise them.
"""

from typing import Any


class ChallengesError(Exception):
    """Base exception for Topcoder API errors."""

    def __init__(
        self,
        message: str,
        endpoint: str = "",
        error_type: str = "UNKNOWN",
        details: dict[str, Any] | None = None
    ):
        super().__init__(message)
        self.message = message
        self.endpoint = endpoint
        self.error_type = error_type
        self.details = details or {}

    def __repr__(self) -> str:
        return (
            f"ChallengesError({self.message!r}, endpoint={self.endpoint!r}, "
            f"error_type={self.error_type!r})"
        )


def is_error(value: Any) -> bool:
    """Tell whether a value returned by the service is an error."""
    return isinstance(value, ChallengesError)
