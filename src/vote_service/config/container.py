"""Dependency Injection Container

Manages the application's dependency graph, providing lazy initialization
and lifecycle management for repositories, adapters and services.
Components are created on-demand and cached for reuse.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..domain.shared.messages import LogTemplates

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from ..application.interfaces.document_validator import DocumentValidator
    from ..application.services.session_service import SessionService
    from ..application.services.topic_voting_service import TopicVotingService
    from ..application.services.vote_service import VoteService
    from ..domain.voting.repository import (
        TopicVotingRepository,
        VoteRepository,
        VotingSessionRepository,
    )
    from ..infrastructure.persistence.database import Database
    from .settings import Settings


@dataclass
class Container:
    """Dependency injection container.

    Components are lazily initialized when first accessed.
    """

    settings: Settings

    # Persistence layer
    _database: Database | None = None
    _topic_voting_repository: TopicVotingRepository | None = None
    _vote_repository: VoteRepository | None = None
    _session_repository: VotingSessionRepository | None = None

    # Infrastructure adapters
    _document_validator: DocumentValidator | None = None

    # Application services
    _topic_voting_service: TopicVotingService | None = None
    _session_service: SessionService | None = None
    _vote_service: VoteService | None = None

    # === Database ===

    @property
    def database(self) -> Database:
        """Get the database connection manager."""
        if self._database is None:
            from ..infrastructure.persistence.database import Database

            self._database = Database(self.settings.database.url, settings=self.settings.database)
        return self._database

    # === Repositories ===

    @property
    def topic_voting_repository(self) -> TopicVotingRepository:
        """Get the topic voting repository."""
        if self._topic_voting_repository is None:
            from ..infrastructure.persistence.repositories.topic_voting_repository import (
                SQLiteTopicVotingRepository,
            )

            self._topic_voting_repository = SQLiteTopicVotingRepository(self.database)
        return self._topic_voting_repository

    @property
    def vote_repository(self) -> VoteRepository:
        """Get the vote repository."""
        if self._vote_repository is None:
            from ..infrastructure.persistence.repositories.vote_repository import (
                SQLiteVoteRepository,
            )

            self._vote_repository = SQLiteVoteRepository(self.database)
        return self._vote_repository

    @property
    def session_repository(self) -> VotingSessionRepository:
        """Get the voting session repository."""
        if self._session_repository is None:
            from ..infrastructure.persistence.repositories.session_repository import (
                SQLiteVotingSessionRepository,
            )

            self._session_repository = SQLiteVotingSessionRepository(self.database)
        return self._session_repository

    # === Infrastructure Adapters ===

    @property
    def document_validator(self) -> DocumentValidator:
        """Get the remote document validator."""
        if self._document_validator is None:
            from ..infrastructure.clients.document_client import HttpDocumentValidator

            self._document_validator = HttpDocumentValidator(self.settings.document_validator)
        return self._document_validator

    # === Application Services ===

    @property
    def topic_voting_service(self) -> TopicVotingService:
        """Get the topic lookup service."""
        if self._topic_voting_service is None:
            from ..application.services.topic_voting_service import TopicVotingService

            self._topic_voting_service = TopicVotingService(
                topic_voting_repository=self.topic_voting_repository,
            )
        return self._topic_voting_service

    @property
    def session_service(self) -> SessionService:
        """Get the session state service."""
        if self._session_service is None:
            from ..application.services.session_service import SessionService

            self._session_service = SessionService(
                session_repository=self.session_repository,
                topic_voting_service=self.topic_voting_service,
                default_duration_minutes=self.settings.voting.default_session_minutes,
            )
        return self._session_service

    @property
    def vote_service(self) -> VoteService:
        """Get the vote workflow service."""
        if self._vote_service is None:
            from ..application.services.vote_service import VoteService

            self._vote_service = VoteService(
                topic_voting_service=self.topic_voting_service,
                session_state=self.session_service,
                vote_repository=self.vote_repository,
                document_validator=self.document_validator,
            )
        return self._vote_service

    # === Lifecycle ===

    async def initialize(self) -> None:
        """Initialize all async resources."""
        await self.database.initialize()

    async def shutdown(self) -> None:
        """Shutdown and cleanup all resources."""
        try:
            if self._document_validator is not None:
                await self._document_validator.close()
        except Exception as exc:
            logger.warning(LogTemplates.CONTAINER_SHUTDOWN_ERROR, exc)

        if self._database is not None:
            await self._database.close()


def create_container(settings: Settings) -> Container:
    """Create a new dependency injection container."""
    return Container(settings)
