"""SQLite implementation of the topic voting repository."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import TypeAdapter

from vote_service.domain.shared.types import DescriptionStr
from vote_service.domain.voting.entities import TopicVoting
from vote_service.domain.voting.repository import TopicVotingRepository

if TYPE_CHECKING:
    from ..database import Database

_description_adapter: TypeAdapter[str] = TypeAdapter(DescriptionStr)


class SQLiteTopicVotingRepository(TopicVotingRepository):
    def __init__(self, database: Database) -> None:
        self._db = database

    async def get(self, topic_voting_id: int) -> TopicVoting | None:
        row = await self._db.fetch_one(
            "SELECT id, description FROM topic_votings WHERE id = ?",
            (topic_voting_id,),
        )
        if row is None:
            return None
        return TopicVoting(id=row["id"], description=row["description"])

    async def add(self, description: str) -> TopicVoting:
        description = _description_adapter.validate_python(description)
        topic_voting_id = await self._db.insert(
            "INSERT INTO topic_votings (description) VALUES (?)",
            (description,),
        )
        return TopicVoting(id=topic_voting_id, description=description)
