"""
Document Validator Interface

Port interface for the external voter eligibility check.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class DocumentValidator(ABC):
    """Abstract interface for voter document validation.

    The answer is treated as authoritative: the voting workflow never
    second-guesses or retries it. Transport failures are not part of the
    contract and propagate to the caller.
    """

    @abstractmethod
    async def validate(self, document: str) -> bool:
        """Check whether the holder of a document may vote.

        Args:
            document: Opaque voter document identifier.

        Returns:
            True if the document is eligible to vote.
        """
        ...

    async def close(self) -> None:
        """Release any resources held by the validator."""
        return None
