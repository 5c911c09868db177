"""
Domain Layer

Contains pure business logic organized by bounded contexts:
- shared/: Cross-cutting types, messages and exceptions
- voting/: Topic votings, votes, sessions and voting failures
"""

from vote_service.domain.shared.exceptions import DomainError
from vote_service.domain.voting.errors import VotingError, VotingErrorKind

__all__ = [
    "DomainError",
    "VotingError",
    "VotingErrorKind",
]
