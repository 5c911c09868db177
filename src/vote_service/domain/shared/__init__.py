"""
Shared Domain Kernel

Contains value objects, messages and exceptions shared across the domain.
"""

from vote_service.domain.shared.exceptions import DomainError
from vote_service.domain.shared.messages import ErrorMessages, LogTemplates

__all__ = [
    "DomainError",
    "ErrorMessages",
    "LogTemplates",
]
