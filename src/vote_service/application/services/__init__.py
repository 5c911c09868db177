"""Application services: topic lookup, session state and the vote workflow."""

from vote_service.application.services.session_service import SessionService
from vote_service.application.services.topic_voting_service import TopicVotingService
from vote_service.application.services.vote_service import VoteService

__all__ = [
    "SessionService",
    "TopicVotingService",
    "VoteService",
]
