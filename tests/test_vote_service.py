"""
Unit Tests for the Vote Workflow

Tests for:
- cast_vote precondition order and short-circuiting
- cast_vote persistence and echo
- get_result preconditions, tallies and repeatability
- Result path session polarity

Collaborators are AsyncMock fakes (see conftest.py).
"""

import pytest

from vote_service.application.dtos import VoteRequest, VoteResult
from vote_service.application.services.vote_service import VoteService
from vote_service.domain.shared.messages import ErrorMessages
from vote_service.domain.voting.entities import Vote
from vote_service.domain.voting.errors import VotingError, VotingErrorKind


@pytest.fixture
def service(topic_lookup, session_state, vote_store, document_validator):
    return VoteService(
        topic_voting_service=topic_lookup,
        session_state=session_state,
        vote_repository=vote_store,
        document_validator=document_validator,
    )


@pytest.fixture
def cast_request():
    return VoteRequest(topic_voting_id=42, document="12345678901", choice=True)


# =============================================================================
# cast_vote
# =============================================================================


class TestCastVote:
    """Tests for VoteService.cast_vote."""

    async def test_valid_vote_is_persisted_and_echoed(
        self, service, cast_request, sample_topic, session_state, vote_store, document_validator
    ):
        """Should save exactly one matching vote and echo its choice."""
        result = await service.cast_vote(cast_request)

        assert result == VoteResult(choice=True)
        document_validator.validate.assert_awaited_once_with("12345678901")
        session_state.is_open.assert_awaited_once_with(sample_topic)
        vote_store.save.assert_awaited_once_with(
            Vote(topic_voting_id=42, document="12345678901", choice=True)
        )

    async def test_no_vote_is_echoed(self, service, vote_store):
        """Should echo a 'no' choice."""
        request = VoteRequest(topic_voting_id=42, document="abc", choice=False)

        result = await service.cast_vote(request)

        assert result.choice is False
        saved = vote_store.save.await_args.args[0]
        assert saved.choice is False

    async def test_ineligible_document_short_circuits(
        self, service, cast_request, topic_lookup, session_state, vote_store, document_validator
    ):
        """Should raise INELIGIBLE and touch nothing else."""
        document_validator.validate.return_value = False

        with pytest.raises(VotingError) as exc_info:
            await service.cast_vote(cast_request)

        assert exc_info.value.kind is VotingErrorKind.INELIGIBLE
        assert exc_info.value.message == ErrorMessages.UNABLE_TO_VOTE
        topic_lookup.find_by_id.assert_not_awaited()
        session_state.is_open.assert_not_awaited()
        vote_store.save.assert_not_awaited()
        vote_store.count_by_topic_and_choice.assert_not_awaited()

    async def test_unknown_topic_raises_not_found(
        self, service, cast_request, topic_lookup, session_state, vote_store
    ):
        """Should raise NOT_FOUND without checking the session or saving."""
        topic_lookup.find_by_id.return_value = None

        with pytest.raises(VotingError) as exc_info:
            await service.cast_vote(cast_request)

        assert exc_info.value.kind is VotingErrorKind.NOT_FOUND
        assert str(exc_info.value) == ErrorMessages.TOPIC_VOTING_NOT_EXISTS
        topic_lookup.find_by_id.assert_awaited_once_with(42)
        session_state.is_open.assert_not_awaited()
        vote_store.save.assert_not_awaited()

    async def test_closed_session_raises_session_closed(
        self, service, cast_request, session_state, vote_store
    ):
        """Should raise SESSION_CLOSED and never save."""
        session_state.is_open.return_value = False

        with pytest.raises(VotingError) as exc_info:
            await service.cast_vote(cast_request)

        assert exc_info.value.kind is VotingErrorKind.SESSION_CLOSED
        assert exc_info.value.message == ErrorMessages.SESSION_IS_CLOSED
        session_state.is_open.assert_awaited_once()
        vote_store.save.assert_not_awaited()

    @pytest.mark.parametrize(
        "request_kwargs",
        [{"document": "123"}, {"choice": True}, {}],
    )
    async def test_incomplete_request_rejected_before_collaborators(
        self, service, request_kwargs, document_validator, topic_lookup, session_state, vote_store
    ):
        """A cast request without document or choice touches nothing."""
        request = VoteRequest(topic_voting_id=42, **request_kwargs)

        with pytest.raises(ValueError, match="document and a choice"):
            await service.cast_vote(request)

        document_validator.validate.assert_not_awaited()
        topic_lookup.find_by_id.assert_not_awaited()
        session_state.is_open.assert_not_awaited()
        vote_store.save.assert_not_awaited()

    async def test_same_document_can_vote_twice(self, service, cast_request, vote_store):
        """Votes are appended; there is no per-document deduplication."""
        await service.cast_vote(cast_request)
        await service.cast_vote(cast_request)

        assert vote_store.save.await_count == 2

    async def test_storage_failure_propagates(self, service, cast_request, vote_store):
        """Storage errors are not classified by the workflow."""
        vote_store.save.side_effect = RuntimeError("disk full")

        with pytest.raises(RuntimeError, match="disk full"):
            await service.cast_vote(cast_request)

    async def test_validator_failure_propagates(
        self, service, cast_request, document_validator, topic_lookup
    ):
        """Remote validator errors are not classified by the workflow."""
        document_validator.validate.side_effect = ConnectionError("unreachable")

        with pytest.raises(ConnectionError):
            await service.cast_vote(cast_request)
        topic_lookup.find_by_id.assert_not_awaited()


# =============================================================================
# get_result
# =============================================================================


class TestGetResult:
    """Tests for VoteService.get_result."""

    @pytest.fixture
    def counting_store(self, vote_store):
        vote_store.count_by_topic_and_choice.side_effect = lambda topic, choice: 10 if choice else 5
        return vote_store

    async def test_returns_description_and_counts(self, service, sample_topic, counting_store):
        """Should return exactly the triple from the two count queries."""
        result = await service.get_result(VoteRequest.for_result(42))

        assert result == VoteResult(description="Vote of president", yes_count=10, no_count=5)
        assert result.total == 15
        counting_store.count_by_topic_and_choice.assert_any_await(sample_topic, True)
        counting_store.count_by_topic_and_choice.assert_any_await(sample_topic, False)
        assert counting_store.count_by_topic_and_choice.await_count == 2

    async def test_unknown_topic_raises_not_found(self, service, topic_lookup, session_state, vote_store):
        """Should raise NOT_FOUND without querying counts."""
        topic_lookup.find_by_id.return_value = None

        with pytest.raises(VotingError) as exc_info:
            await service.get_result(VoteRequest.for_result(7))

        assert exc_info.value.kind is VotingErrorKind.NOT_FOUND
        session_state.is_open.assert_not_awaited()
        vote_store.count_by_topic_and_choice.assert_not_awaited()

    async def test_session_not_open_raises_session_not_closed(
        self, service, session_state, vote_store
    ):
        """Should raise SESSION_NOT_CLOSED without querying counts."""
        session_state.is_open.return_value = False

        with pytest.raises(VotingError) as exc_info:
            await service.get_result(VoteRequest.for_result(42))

        assert exc_info.value.kind is VotingErrorKind.SESSION_NOT_CLOSED
        assert exc_info.value.message == ErrorMessages.SESSION_IS_NOT_CLOSED
        vote_store.count_by_topic_and_choice.assert_not_awaited()

    async def test_result_does_not_call_document_validator(
        self, service, counting_store, document_validator
    ):
        """The result path never checks eligibility."""
        await service.get_result(VoteRequest.for_result(42))

        document_validator.validate.assert_not_awaited()

    async def test_repeated_reads_return_identical_counts(self, service, counting_store):
        """Two reads with no vote in between are identical."""
        first = await service.get_result(VoteRequest.for_result(42))
        second = await service.get_result(VoteRequest.for_result(42))

        assert first == second


class TestResultSessionPolarity:
    """Results are readable only while the session is open.

    The result path requires the same open flag as the cast path, so a
    closed session refuses both casting and reading results.
    """

    async def test_results_readable_while_open(self, service, session_state, vote_store):
        session_state.is_open.return_value = True
        vote_store.count_by_topic_and_choice.return_value = 0

        result = await service.get_result(VoteRequest.for_result(42))

        assert result.yes_count == 0
        assert result.no_count == 0

    async def test_results_refused_after_close(self, service, session_state):
        session_state.is_open.return_value = False

        with pytest.raises(VotingError) as exc_info:
            await service.get_result(VoteRequest.for_result(42))

        assert exc_info.value.kind is VotingErrorKind.SESSION_NOT_CLOSED
