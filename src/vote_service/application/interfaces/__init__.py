"""
Application Interfaces (Ports)

Abstract interfaces for external services the voting workflow depends on.
"""

from vote_service.application.interfaces.document_validator import DocumentValidator
from vote_service.application.interfaces.session_state import SessionState

__all__ = [
    "DocumentValidator",
    "SessionState",
]
