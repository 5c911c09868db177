from unittest.mock import AsyncMock

import pytest
import pytest_asyncio

# ============================================================================
# Database Fixtures
# ============================================================================


@pytest_asyncio.fixture
async def in_memory_database():
    """Create an in-memory SQLite database for testing."""
    from vote_service.infrastructure.persistence.database import Database

    db = Database(":memory:")
    await db.initialize()
    yield db
    await db.close()


@pytest_asyncio.fixture
async def topic_voting_repository(in_memory_database):
    """Create a topic voting repository with in-memory database."""
    from vote_service.infrastructure.persistence.repositories.topic_voting_repository import (
        SQLiteTopicVotingRepository,
    )

    return SQLiteTopicVotingRepository(in_memory_database)


@pytest_asyncio.fixture
async def vote_repository(in_memory_database):
    """Create a vote repository with in-memory database."""
    from vote_service.infrastructure.persistence.repositories.vote_repository import (
        SQLiteVoteRepository,
    )

    return SQLiteVoteRepository(in_memory_database)


@pytest_asyncio.fixture
async def session_repository(in_memory_database):
    """Create a voting session repository with in-memory database."""
    from vote_service.infrastructure.persistence.repositories.session_repository import (
        SQLiteVotingSessionRepository,
    )

    return SQLiteVotingSessionRepository(in_memory_database)


# ============================================================================
# Domain Entity Fixtures
# ============================================================================


@pytest.fixture
def sample_topic():
    """Create a sample topic voting."""
    from vote_service.domain.voting.entities import TopicVoting

    return TopicVoting(id=42, description="Vote of president")


# ============================================================================
# Collaborator Fakes
# ============================================================================


@pytest.fixture
def document_validator():
    """Document validator that accepts every document by default."""
    from vote_service.application.interfaces.document_validator import DocumentValidator

    validator = AsyncMock(spec=DocumentValidator)
    validator.validate.return_value = True
    return validator


@pytest.fixture
def topic_lookup(sample_topic):
    """Topic lookup that resolves the sample topic by default."""
    from vote_service.application.services.topic_voting_service import TopicVotingService

    lookup = AsyncMock(spec=TopicVotingService)
    lookup.find_by_id.return_value = sample_topic
    return lookup


@pytest.fixture
def session_state():
    """Session state that reports the session as open by default."""
    from vote_service.application.interfaces.session_state import SessionState

    state = AsyncMock(spec=SessionState)
    state.is_open.return_value = True
    return state


@pytest.fixture
def vote_store():
    """Vote store fake that echoes saved votes with an id."""
    from vote_service.domain.voting.repository import VoteRepository

    store = AsyncMock(spec=VoteRepository)
    store.save.side_effect = lambda vote: vote.with_id(1)
    return store
