"""Pure mapping between voting DTOs and domain entities."""

from __future__ import annotations

from vote_service.application.dtos import VoteRequest, VoteResult
from vote_service.domain.voting.entities import TopicVoting, Vote


class VoteConverter:
    """Converts vote requests into entities and entities into results."""

    @staticmethod
    def cast_fields(request: VoteRequest) -> tuple[str, bool]:
        """Return the document and choice of a cast request."""
        if request.document is None or request.choice is None:
            raise ValueError("A cast request needs both a document and a choice")
        return request.document, request.choice

    @staticmethod
    def entity_from_request(topic_voting: TopicVoting, request: VoteRequest) -> Vote:
        document, choice = VoteConverter.cast_fields(request)
        return Vote(
            topic_voting_id=topic_voting.id,
            document=document,
            choice=choice,
        )

    @staticmethod
    def cast_result(vote: Vote) -> VoteResult:
        return VoteResult(choice=vote.choice)

    @staticmethod
    def tally_result(topic_voting: TopicVoting, yes_count: int, no_count: int) -> VoteResult:
        return VoteResult(
            description=topic_voting.description,
            yes_count=yes_count,
            no_count=no_count,
        )
