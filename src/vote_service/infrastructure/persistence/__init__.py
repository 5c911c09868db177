"""SQLite persistence for topic votings, votes and voting sessions."""

from vote_service.infrastructure.persistence.database import Database

__all__ = ["Database"]
