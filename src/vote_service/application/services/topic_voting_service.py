"""
Topic Voting Application Service

Resolves and creates topic votings. A thin read-through over the
topic voting repository.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from vote_service.domain.shared.messages import LogTemplates

if TYPE_CHECKING:
    from ...domain.voting.entities import TopicVoting
    from ...domain.voting.repository import TopicVotingRepository

logger = logging.getLogger(__name__)


class TopicVotingService:
    """Topic lookup used by the voting workflow."""

    def __init__(self, topic_voting_repository: TopicVotingRepository) -> None:
        self._topic_voting_repository = topic_voting_repository

    async def find_by_id(self, topic_voting_id: int) -> TopicVoting | None:
        """Return the topic voting, or None when it does not exist."""
        return await self._topic_voting_repository.get(topic_voting_id)

    async def create(self, description: str) -> TopicVoting:
        """Persist a new topic voting and return it with its id."""
        topic_voting = await self._topic_voting_repository.add(description)
        logger.info(LogTemplates.TOPIC_CREATED, topic_voting.id)
        return topic_voting
