"""Core domain entities for the voting bounded context."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from vote_service.domain.shared.datetime_utils import utcnow
from vote_service.domain.shared.types import (
    DescriptionStr,
    DocumentStr,
    EntityId,
    SessionMinutes,
    UtcDatetimeField,
)


class TopicVoting(BaseModel):
    """A votable proposition. Read-only once created."""

    model_config = ConfigDict(frozen=True)

    id: EntityId
    description: DescriptionStr


class Vote(BaseModel):
    """A single yes/no ballot cast against a topic voting.

    ``id`` is ``None`` until the vote store assigns one.
    """

    model_config = ConfigDict(frozen=True)

    id: EntityId | None = None
    topic_voting_id: EntityId
    document: DocumentStr
    choice: bool

    def with_id(self, vote_id: int) -> Vote:
        return self.model_copy(update={"id": vote_id})


class VotingSession(BaseModel):
    """Time window during which a topic voting accepts votes."""

    model_config = ConfigDict(frozen=True)

    DEFAULT_DURATION_MINUTES: ClassVar[int] = 1

    id: EntityId | None = None
    topic_voting_id: EntityId
    started_at: UtcDatetimeField = Field(default_factory=utcnow)
    duration_minutes: SessionMinutes = DEFAULT_DURATION_MINUTES

    @property
    def ends_at(self) -> datetime:
        return self.started_at + timedelta(minutes=self.duration_minutes)

    def is_open_at(self, moment: datetime) -> bool:
        return self.started_at <= moment < self.ends_at

    @property
    def is_open(self) -> bool:
        return self.is_open_at(utcnow())

    def with_id(self, session_id: int) -> VotingSession:
        return self.model_copy(update={"id": session_id})
