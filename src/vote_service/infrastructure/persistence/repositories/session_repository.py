"""SQLite implementation of the voting session repository."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from vote_service.domain.shared.datetime_utils import UtcDateTime
from vote_service.domain.shared.messages import LogTemplates
from vote_service.domain.voting.entities import VotingSession
from vote_service.domain.voting.repository import VotingSessionRepository

if TYPE_CHECKING:
    from ..database import Database

logger = logging.getLogger(__name__)


class SQLiteVotingSessionRepository(VotingSessionRepository):
    def __init__(self, database: Database) -> None:
        self._db = database

    async def save(self, session: VotingSession) -> VotingSession:
        session_id = await self._db.insert(
            """
            INSERT INTO voting_sessions (topic_voting_id, started_at, duration_minutes)
            VALUES (?, ?, ?)
            """,
            (
                session.topic_voting_id,
                UtcDateTime(session.started_at).iso,
                session.duration_minutes,
            ),
        )
        logger.debug(LogTemplates.SESSION_SAVED, session_id, session.topic_voting_id)
        return session.with_id(session_id)

    async def get_latest_for_topic(self, topic_voting_id: int) -> VotingSession | None:
        # ISO 8601 strings with a fixed +00:00 offset sort chronologically.
        row = await self._db.fetch_one(
            """
            SELECT * FROM voting_sessions
            WHERE topic_voting_id = ?
            ORDER BY started_at DESC, id DESC
            LIMIT 1
            """,
            (topic_voting_id,),
        )
        if row is None:
            return None

        return VotingSession(
            id=row["id"],
            topic_voting_id=row["topic_voting_id"],
            started_at=UtcDateTime.from_iso(row["started_at"]).dt,
            duration_minutes=row["duration_minutes"],
        )
