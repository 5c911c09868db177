"""Reusable Pydantic Annotated types for domain-wide validation.

Constrained types used across the project are defined here once,
so models can simply annotate their fields::

    from vote_service.domain.shared.types import DescriptionStr, EntityId

    class MyModel(BaseModel):
        topic_voting_id: EntityId
        description: DescriptionStr
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated

from pydantic import BeforeValidator, Field

# ── Numeric constraints ─────────────────────────────────────────────

EntityId = Annotated[int, Field(gt=0)]
"""Storage-assigned identifier (> 0)."""

NonNegativeInt = Annotated[int, Field(ge=0)]
"""Integer >= 0, used for vote counts."""

SessionMinutes = Annotated[int, Field(ge=1, le=10_080)]
"""Voting session length in minutes: 1 … 10 080 (one week)."""


# ── String constraints ──────────────────────────────────────────────

DocumentStr = Annotated[str, Field(min_length=1, max_length=64)]
"""Opaque voter document identifier: 1-64 characters."""

DescriptionStr = Annotated[str, Field(min_length=1, max_length=500)]
"""Topic description: 1-500 characters."""


# ── Datetime constraints ────────────────────────────────────────────

def _ensure_utc(v: datetime) -> datetime:
    """Validate that a datetime is timezone-aware and normalise to UTC."""
    if v.tzinfo is None:
        raise ValueError("datetime must be timezone-aware (UTC)")
    return v.astimezone(UTC)


UtcDatetimeField = Annotated[datetime, BeforeValidator(_ensure_utc)]
"""Timezone-aware datetime, normalised to UTC on input."""
