"""
Voting Failure Taxonomy

The four ways a voting workflow call can be refused. The set is closed:
callers match on ``VotingError.kind`` rather than on exception subclasses.
"""

from __future__ import annotations

from enum import Enum

from vote_service.domain.shared.exceptions import DomainError
from vote_service.domain.shared.messages import ErrorMessages


class VotingErrorKind(Enum):
    """Kinds of voting workflow failures."""

    INELIGIBLE = "ineligible"  # Document refused by the validator
    NOT_FOUND = "not_found"  # Topic voting does not exist
    SESSION_CLOSED = "session_closed"  # Cast path: session not open
    SESSION_NOT_CLOSED = "session_not_closed"  # Result path: session state refused

    @property
    def message(self) -> str:
        """Fixed user-facing message for this kind."""
        return {
            VotingErrorKind.INELIGIBLE: ErrorMessages.UNABLE_TO_VOTE,
            VotingErrorKind.NOT_FOUND: ErrorMessages.TOPIC_VOTING_NOT_EXISTS,
            VotingErrorKind.SESSION_CLOSED: ErrorMessages.SESSION_IS_CLOSED,
            VotingErrorKind.SESSION_NOT_CLOSED: ErrorMessages.SESSION_IS_NOT_CLOSED,
        }[self]


class VotingError(DomainError):
    """Raised when a voting precondition fails."""

    def __init__(self, kind: VotingErrorKind) -> None:
        super().__init__(kind.message, code=kind.name)
        self.kind = kind

    def __repr__(self) -> str:
        return f"VotingError({self.kind.name})"
