"""
Voting Request and Result DTOs

Transient models exchanged with the voting workflow. Nothing here is
persisted.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from vote_service.domain.shared.types import (
    DescriptionStr,
    DocumentStr,
    EntityId,
    NonNegativeInt,
    SessionMinutes,
)


class VoteRequest(BaseModel):
    """Request to cast a vote, or to fetch a topic voting's result.

    The result path only needs ``topic_voting_id``.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    topic_voting_id: EntityId
    document: DocumentStr | None = None
    choice: bool | None = None

    @classmethod
    def for_result(cls, topic_voting_id: int) -> VoteRequest:
        return cls(topic_voting_id=topic_voting_id)


class VoteResult(BaseModel):
    """Outcome of a workflow call.

    Either an echo of the recorded choice (cast) or a tally (result).
    """

    model_config = ConfigDict(frozen=True, strict=True)

    choice: bool | None = None
    description: DescriptionStr | None = None
    yes_count: NonNegativeInt | None = None
    no_count: NonNegativeInt | None = None

    @property
    def total(self) -> int:
        return (self.yes_count or 0) + (self.no_count or 0)


class OpenSessionRequest(BaseModel):
    """Request to open a voting session on a topic voting."""

    model_config = ConfigDict(frozen=True, strict=True)

    topic_voting_id: EntityId
    duration_minutes: SessionMinutes | None = None
