from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from pystandings.models import ParticipantRecord
from pystandings.view import SortState, ViewState


class ParticipantResponse(BaseModel):
    rank: Optional[float]
    name: Optional[str]
    rating_mean: Optional[float]
    rating_deviation: Optional[float]
    wins: Optional[float]
    draws: Optional[float]
    losses: Optional[float]
    games_played: Optional[float]
    win_rate: Optional[float]
    invalid_fields: List[str] = Field(default_factory=list)
    extra: Dict[str, Optional[str]] = Field(default_factory=dict)

    @classmethod
    def from_record(cls, record: ParticipantRecord) -> "ParticipantResponse":
        # JSON has no NaN, so invalid numeric fields are sent as null.
        invalid = set(record.invalid_fields)

        def numeric(attribute: str) -> Optional[float]:
            return None if attribute in invalid else getattr(record, attribute)

        return cls(
            rank=numeric("rank"),
            name=record.name,
            rating_mean=numeric("rating_mean"),
            rating_deviation=numeric("rating_deviation"),
            wins=numeric("wins"),
            draws=numeric("draws"),
            losses=numeric("losses"),
            games_played=numeric("games_played"),
            win_rate=numeric("win_rate"),
            invalid_fields=list(record.invalid_fields),
            extra=dict(record.extra),
        )


class SortStatePayload(BaseModel):
    column: str = "rank"
    ascending: bool = True


class ViewStatePayload(BaseModel):
    sort: SortStatePayload = Field(default_factory=SortStatePayload)
    query: str = ""

    def to_state(self) -> ViewState:
        return ViewState(
            sort=SortState(column=self.sort.column, ascending=self.sort.ascending),
            query=self.query,
        )

    @classmethod
    def from_state(cls, state: ViewState) -> "ViewStatePayload":
        return cls(
            sort=SortStatePayload(column=state.sort.column, ascending=state.sort.ascending),
            query=state.query,
        )


class ToggleSortRequest(BaseModel):
    view: ViewStatePayload = Field(default_factory=ViewStatePayload)
    column: str


class StandingsResponse(BaseModel):
    view: ViewStatePayload
    total_records: int
    records: List[ParticipantResponse]


class LoadResponse(BaseModel):
    source: str
    records: int
    incomplete_records: int
