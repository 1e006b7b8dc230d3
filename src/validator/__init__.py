"""HN Sort Check — Validation Layer"""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class Verdict(str, Enum):
    """Outcome of one validation pass."""
    INSUFFICIENT = "insufficient"   # Ran out of pages before the target count
    SORTED = "sorted"
    NOT_SORTED = "not_sorted"


class ValidationReport(BaseModel):
    """Summary of one validation pass."""
    pages_visited: int
    articles_checked: int
    target_count: int
    verdict: Verdict
    first_violation_index: int | None = None
    timestamps: list[int] = Field(default_factory=list)
    checked_at: datetime
