"""
Session Application Service

Opens voting sessions and answers whether a topic voting is open.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from vote_service.application.interfaces.session_state import SessionState
from vote_service.domain.shared.messages import LogTemplates
from vote_service.domain.voting.entities import VotingSession
from vote_service.domain.voting.errors import VotingError, VotingErrorKind

if TYPE_CHECKING:
    from ...domain.voting.entities import TopicVoting
    from ...domain.voting.repository import VotingSessionRepository
    from ..dtos import OpenSessionRequest
    from .topic_voting_service import TopicVotingService

logger = logging.getLogger(__name__)


class SessionService(SessionState):
    """Storage-backed session state.

    A topic voting is open while its most recently started session has
    not run out. A topic voting that never had a session is closed.
    """

    def __init__(
        self,
        session_repository: VotingSessionRepository,
        topic_voting_service: TopicVotingService,
        default_duration_minutes: int = VotingSession.DEFAULT_DURATION_MINUTES,
    ) -> None:
        self._session_repository = session_repository
        self._topic_voting_service = topic_voting_service
        self._default_duration_minutes = default_duration_minutes

    async def is_open(self, topic_voting: TopicVoting) -> bool:
        session = await self._session_repository.get_latest_for_topic(topic_voting.id)
        return session is not None and session.is_open

    async def open_session(self, request: OpenSessionRequest) -> VotingSession:
        """Start a new session on an existing topic voting.

        Raises:
            VotingError: NOT_FOUND if the topic voting does not exist.
        """
        topic_voting = await self._topic_voting_service.find_by_id(request.topic_voting_id)
        if topic_voting is None:
            raise VotingError(VotingErrorKind.NOT_FOUND)

        duration = request.duration_minutes or self._default_duration_minutes
        session = await self._session_repository.save(
            VotingSession(topic_voting_id=topic_voting.id, duration_minutes=duration)
        )
        logger.info(LogTemplates.SESSION_OPENED, topic_voting.id, duration)
        return session
