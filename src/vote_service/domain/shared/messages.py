"""Centralized message constants for error messages and log templates."""

from __future__ import annotations

class ErrorMessages:
    """Error messages for exceptions and validation failures."""

    # Voting workflow failures
    UNABLE_TO_VOTE = "unable to vote"
    TOPIC_VOTING_NOT_EXISTS = "the topic voting does not exist"
    SESSION_IS_CLOSED = "the session is closed"
    SESSION_IS_NOT_CLOSED = "the session is not closed"

    # Time/Date Validation Errors
    TIMEZONE_REQUIRED_UTC_DATETIME = "UtcDateTime requires a timezone-aware datetime"

    # Configuration Errors
    INVALID_DATABASE_URL = "Database URL must start with sqlite://"
    INVALID_LOG_LEVEL = "Invalid log level: {level}. Must be one of {valid_levels}"
    INVALID_VALIDATOR_URL = "Document validator URL must start with http:// or https://"

    # Document validator errors
    UNEXPECTED_VALIDATOR_RESPONSE = "Unexpected document validator response: {payload!r}"

class LogTemplates:
    """Log message templates.

    Pass values as parameters to logger.info(), logger.error(), etc.
    rather than formatting them in place.
    """

    # Database Lifecycle
    DATABASE_INITIALIZED = "Database initialized at %s"
    DATABASE_CLOSED = "Database manager closed"

    # Topic / Session
    TOPIC_CREATED = "Created topic voting %s"
    SESSION_OPENED = "Opened session for topic voting %s (%s minutes)"
    SESSION_SAVED = "Saved session %s for topic voting %s"

    # Voting workflow
    VOTE_REJECTED = "Vote rejected for topic voting %s: %s"
    VOTE_RECORDED = "Recorded vote %s for topic voting %s"
    RESULT_REJECTED = "Result rejected for topic voting %s: %s"
    RESULT_COMPUTED = "Computed result for topic voting %s: yes=%s no=%s"

    # Document validator
    VALIDATOR_CLIENT_INITIALIZED = "Document validator client initialized (base_url=%s, timeout=%ss)"
    VALIDATOR_DOCUMENT_UNKNOWN = "Document validator does not know the document"
    VALIDATOR_ERROR_RETRY = "Document validator error attempt=%d/%d: %s"
    VALIDATOR_CLOSED = "Document validator client closed"

    # Application Lifecycle
    APP_STARTING = "Starting vote service in {environment} mode"
    APP_COMMAND_FAILED = "Command %s failed: %s"
    CONTAINER_SHUTDOWN_ERROR = "Error during container shutdown: %r"
