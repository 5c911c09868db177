"""Centralized constants for SQLite pragmas and remote status values."""

from __future__ import annotations


class SQLPragmas:
    """SQLite PRAGMA statements applied to each connection."""

    JOURNAL_MODE_WAL = "PRAGMA journal_mode=WAL"
    FOREIGN_KEYS_ON = "PRAGMA foreign_keys=ON"
    BUSY_TIMEOUT = "PRAGMA busy_timeout={timeout}"


class DocumentStatus:
    """Status values returned by the document validation service."""

    ABLE_TO_VOTE = "ABLE_TO_VOTE"
    UNABLE_TO_VOTE = "UNABLE_TO_VOTE"
