"""SQLite implementation of the vote repository."""

from __future__ import annotations

from typing import TYPE_CHECKING

from vote_service.domain.voting.entities import TopicVoting, Vote
from vote_service.domain.voting.repository import VoteRepository

if TYPE_CHECKING:
    from ..database import Database


class SQLiteVoteRepository(VoteRepository):
    """Append-only vote store.

    Inserts are independent single-row transactions; nothing prevents the
    same document from voting twice on a topic voting.
    """

    def __init__(self, database: Database) -> None:
        self._db = database

    async def save(self, vote: Vote) -> Vote:
        vote_id = await self._db.insert(
            "INSERT INTO votes (topic_voting_id, document, choice) VALUES (?, ?, ?)",
            (vote.topic_voting_id, vote.document, int(vote.choice)),
        )
        return vote.with_id(vote_id)

    async def count_by_topic_and_choice(self, topic_voting: TopicVoting, choice: bool) -> int:
        row = await self._db.fetch_one(
            """
            SELECT COUNT(*) AS count FROM votes
            WHERE topic_voting_id = ? AND choice = ?
            """,
            (topic_voting.id, int(choice)),
        )
        return row["count"] if row else 0
