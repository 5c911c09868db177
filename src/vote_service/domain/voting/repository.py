"""
Voting Domain Repository Interfaces

Abstract base classes defining the contracts for topic, vote and session
persistence. Storage failures are not translated; they propagate to the
caller unmodified.
"""

from abc import ABC, abstractmethod

from vote_service.domain.voting.entities import TopicVoting, Vote, VotingSession


class TopicVotingRepository(ABC):
    """Abstract repository for topic votings."""

    @abstractmethod
    async def get(self, topic_voting_id: int) -> TopicVoting | None:
        """Retrieve a topic voting by id.

        Args:
            topic_voting_id: The topic voting identifier.

        Returns:
            The topic voting if found, None otherwise.
        """
        ...

    @abstractmethod
    async def add(self, description: str) -> TopicVoting:
        """Insert a new topic voting.

        Args:
            description: Descriptive text of the proposition.

        Returns:
            The stored topic voting with its assigned id.
        """
        ...


class VoteRepository(ABC):
    """Abstract repository for votes (the vote store).

    Votes are append-only: there is no update or delete.
    """

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Insert a vote.

        Args:
            vote: The vote to insert, without an id.

        Returns:
            The stored vote with its assigned id.
        """
        ...

    @abstractmethod
    async def count_by_topic_and_choice(self, topic_voting: TopicVoting, choice: bool) -> int:
        """Count the votes for a topic voting with the given choice.

        Args:
            topic_voting: The topic voting to count for.
            choice: True counts "yes" votes, False counts "no" votes.

        Returns:
            Number of matching votes.
        """
        ...


class VotingSessionRepository(ABC):
    """Abstract repository for voting sessions."""

    @abstractmethod
    async def save(self, session: VotingSession) -> VotingSession:
        """Insert a voting session.

        Returns:
            The stored session with its assigned id.
        """
        ...

    @abstractmethod
    async def get_latest_for_topic(self, topic_voting_id: int) -> VotingSession | None:
        """Retrieve the most recently started session of a topic voting.

        Returns:
            The latest session, or None if the topic never had one.
        """
        ...
