"""Canonical participant model shared across ingestion, views and analysis."""

from __future__ import annotations

import math
from typing import Dict, Optional, Tuple

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class ParticipantRecord(BaseModel):
    """One standings row with numeric columns coerced to floats.

    Numeric values that failed coercion are ``nan`` and their attribute names
    are listed in ``invalid_fields``.
    """

    rank: float
    name: Optional[str] = None
    rating_mean: float
    rating_deviation: float
    wins: float
    draws: float
    losses: float
    games_played: float
    win_rate: float
    invalid_fields: Tuple[str, ...] = ()
    extra: Dict[str, Optional[str]] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    @property
    def is_complete(self) -> bool:
        return not self.invalid_fields

    def value(self, attribute: str) -> float | str | None:
        """Return a record attribute or, failing that, an extra text column."""

        if attribute in type(self).model_fields and attribute not in {"invalid_fields", "extra"}:
            return getattr(self, attribute)
        if attribute in self.extra:
            return self.extra[attribute]
        raise KeyError(attribute)


def is_missing(value: float | str | None) -> bool:
    """True for values that cannot be ordered: ``None`` and non-finite floats."""

    if value is None:
        return True
    if isinstance(value, float):
        return not math.isfinite(value)
    return False
