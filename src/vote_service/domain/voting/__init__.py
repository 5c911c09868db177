"""
Voting Bounded Context

Topic votings, yes/no votes, voting sessions and the failure taxonomy.
"""

from vote_service.domain.voting.entities import TopicVoting, Vote, VotingSession
from vote_service.domain.voting.errors import VotingError, VotingErrorKind
from vote_service.domain.voting.repository import (
    TopicVotingRepository,
    VoteRepository,
    VotingSessionRepository,
)

__all__ = [
    # Entities
    "TopicVoting",
    "Vote",
    "VotingSession",
    # Errors
    "VotingError",
    "VotingErrorKind",
    # Repositories
    "TopicVotingRepository",
    "VoteRepository",
    "VotingSessionRepository",
]
