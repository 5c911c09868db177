"""
Vote Application Service

Orchestrates vote casting and result tallying. Each precondition is
checked in a fixed order and the first failure is raised immediately;
nothing is retried and no partial state is written.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, NoReturn

from vote_service.application.converters import VoteConverter
from vote_service.domain.shared.messages import LogTemplates
from vote_service.domain.voting.errors import VotingError, VotingErrorKind

if TYPE_CHECKING:
    from ...domain.voting.entities import TopicVoting
    from ...domain.voting.repository import VoteRepository
    from ..dtos import VoteRequest, VoteResult
    from ..interfaces.document_validator import DocumentValidator
    from ..interfaces.session_state import SessionState
    from .topic_voting_service import TopicVotingService

logger = logging.getLogger(__name__)


class VoteService:
    """Vote casting and result workflow."""

    def __init__(
        self,
        topic_voting_service: TopicVotingService,
        session_state: SessionState,
        vote_repository: VoteRepository,
        document_validator: DocumentValidator,
        vote_converter: VoteConverter | None = None,
    ) -> None:
        self._topic_voting_service = topic_voting_service
        self._session_state = session_state
        self._vote_repository = vote_repository
        self._document_validator = document_validator
        self._vote_converter = vote_converter or VoteConverter()

    async def cast_vote(self, request: VoteRequest) -> VoteResult:
        """Record a vote and echo the stored choice.

        Raises:
            VotingError: INELIGIBLE, NOT_FOUND or SESSION_CLOSED, in that
                order of precedence.
            ValueError: the request lacks a document or a choice. Raised
                before any collaborator is called.
        """
        document, _ = self._vote_converter.cast_fields(request)
        if not await self._document_validator.validate(document):
            self._reject(LogTemplates.VOTE_REJECTED, request, VotingErrorKind.INELIGIBLE)

        topic_voting = await self._require_topic_voting(request, LogTemplates.VOTE_REJECTED)

        if not await self._session_state.is_open(topic_voting):
            self._reject(LogTemplates.VOTE_REJECTED, request, VotingErrorKind.SESSION_CLOSED)

        vote = self._vote_converter.entity_from_request(topic_voting, request)
        saved = await self._vote_repository.save(vote)
        logger.debug(LogTemplates.VOTE_RECORDED, saved.id, topic_voting.id)
        return self._vote_converter.cast_result(saved)

    async def get_result(self, request: VoteRequest) -> VoteResult:
        """Tally yes/no votes of a topic voting.

        Results are only served while the session is open; outside of it
        the call is refused with SESSION_NOT_CLOSED.

        Raises:
            VotingError: NOT_FOUND or SESSION_NOT_CLOSED.
        """
        topic_voting = await self._require_topic_voting(request, LogTemplates.RESULT_REJECTED)

        if not await self._session_state.is_open(topic_voting):
            self._reject(LogTemplates.RESULT_REJECTED, request, VotingErrorKind.SESSION_NOT_CLOSED)

        yes_count = await self._vote_repository.count_by_topic_and_choice(topic_voting, True)
        no_count = await self._vote_repository.count_by_topic_and_choice(topic_voting, False)
        logger.debug(LogTemplates.RESULT_COMPUTED, topic_voting.id, yes_count, no_count)
        return self._vote_converter.tally_result(topic_voting, yes_count, no_count)

    async def _require_topic_voting(self, request: VoteRequest, template: str) -> TopicVoting:
        topic_voting = await self._topic_voting_service.find_by_id(request.topic_voting_id)
        if topic_voting is None:
            self._reject(template, request, VotingErrorKind.NOT_FOUND)
        return topic_voting

    @staticmethod
    def _reject(template: str, request: VoteRequest, kind: VotingErrorKind) -> NoReturn:
        logger.warning(template, request.topic_voting_id, kind.name)
        raise VotingError(kind)
