"""
Topcoder Challenges Data Models

Response envelopes of the v3 API and the normalized results handed to callers.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# === Enums ===

class OrderBy(str, Enum):
    """Sort keys accepted by the challenge listing endpoints."""
    SUBMISSION_END_DATE = "submissionEndDate"


# === v3 Response Envelope ===

class EnvelopeMetadata(BaseModel):
    """Listing metadata attached to a successful envelope."""
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    total_count: int = Field(alias="totalCount")


class Envelope(BaseModel):
    """
    The ``result`` object of a v3 response body.

    Example body:
        {"result": {"status": 200, "content": [...], "metadata": {"totalCount": 2}}}
    """
    model_config = ConfigDict(extra="allow")

    status: int
    content: Any = None
    metadata: EnvelopeMetadata | None = None

    @property
    def ok(self) -> bool:
        return self.status == 200

    @classmethod
    def from_body(cls, body: Any) -> "Envelope":
        """
        Unwrap the envelope from a decoded response body.

        Raises:
            ValueError: If the body has no ``result`` object
            pydantic.ValidationError: If ``result`` is not a valid envelope
        """
        if not isinstance(body, dict) or not isinstance(body.get("result"), dict):
            raise ValueError("Invalid response: missing 'result' envelope")
        return cls.model_validate(body["result"])


# === Results ===

class ChallengeResult(BaseModel):
    """One page of challenges plus the total number of matches."""
    model_config = ConfigDict(populate_by_name=True)

    challenges: list[Any] = Field(default_factory=list)
    total_count: int = Field(alias="totalCount")
