"""Clients for remote services."""

from vote_service.infrastructure.clients.document_client import HttpDocumentValidator

__all__ = ["HttpDocumentValidator"]
