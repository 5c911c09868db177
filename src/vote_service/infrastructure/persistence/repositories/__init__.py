"""SQLite repository implementations."""

from vote_service.infrastructure.persistence.repositories.session_repository import (
    SQLiteVotingSessionRepository,
)
from vote_service.infrastructure.persistence.repositories.topic_voting_repository import (
    SQLiteTopicVotingRepository,
)
from vote_service.infrastructure.persistence.repositories.vote_repository import (
    SQLiteVoteRepository,
)

__all__ = [
    "SQLiteTopicVotingRepository",
    "SQLiteVoteRepository",
    "SQLiteVotingSessionRepository",
]
