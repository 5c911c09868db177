"""
Session State Interface

Port interface answering whether a topic voting's session is open.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...domain.voting.entities import TopicVoting


class SessionState(ABC):
    """Abstract interface for session open/closed lookups."""

    @abstractmethod
    async def is_open(self, topic_voting: TopicVoting) -> bool:
        """Check whether the voting window of a topic voting is open now.

        Args:
            topic_voting: The topic voting to check.

        Returns:
            True if the session is currently open.
        """
        ...
