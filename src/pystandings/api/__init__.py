"""REST API serving standings views and summaries."""

from __future__ import annotations

from fastapi import FastAPI, File, HTTPException, Query, UploadFile
from fastapi.responses import Response

from pystandings.analysis import (
    ParticipantNotFoundError,
    compare_players,
    find_record,
    game_totals,
    player_stats,
    rating_curve,
    top_records,
    win_rate_histogram,
)
from pystandings.api.schemas import (
    ComparisonResponse,
    HistogramResponse,
    LoadResponse,
    ParticipantResponse,
    PlayerStatsResponse,
    RatingPointResponse,
    StandingsResponse,
    ToggleSortRequest,
    TotalsResponse,
    ViewStatePayload,
)
from pystandings.config import Settings, load_settings
from pystandings.ingest import MalformedFieldError, StandingsLoadError
from pystandings.models import ParticipantRecord
from pystandings.store import StandingsStore
from pystandings.view import SortState, ViewState, serialize_records


def _apply_view(records: tuple[ParticipantRecord, ...], view: ViewState) -> list[ParticipantRecord]:
    try:
        return view.apply(records)
    except KeyError as exc:
        raise HTTPException(status_code=400, detail=str(exc.args[0]) if exc.args else "Unknown column") from exc


def _standings_response(records: tuple[ParticipantRecord, ...], view: ViewState) -> StandingsResponse:
    visible = _apply_view(records, view)
    return StandingsResponse(
        view=ViewStatePayload.from_state(view),
        total_records=len(records),
        records=[ParticipantResponse.from_record(record) for record in visible],
    )


def _load_response(store: StandingsStore) -> LoadResponse:
    return LoadResponse(
        source=store.source or "",
        records=len(store.records),
        incomplete_records=sum(1 for record in store.records if not record.is_complete),
    )


def create_app(settings: Settings | None = None, store: StandingsStore | None = None) -> FastAPI:
    settings = settings or load_settings()
    store = store or StandingsStore(strict=settings.strict_numeric)
    app = FastAPI(title="pystandings")
    app.state.settings = settings
    app.state.standings_store = store

    def _view_from_query(column: str, ascending: bool, query: str) -> ViewState:
        return ViewState(sort=SortState(column=column, ascending=ascending), query=query)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/standings", response_model=LoadResponse)
    async def upload_standings(file: UploadFile = File(...)) -> LoadResponse:
        contents = await file.read()
        if not contents.strip():
            raise HTTPException(status_code=400, detail="standings file is empty")
        try:
            text = contents.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise HTTPException(status_code=400, detail="standings file is not UTF-8 text") from exc
        try:
            store.load_text(text, source=file.filename or "<upload>")
        except MalformedFieldError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return _load_response(store)

    @app.post("/standings/reload", response_model=LoadResponse)
    async def reload_standings() -> LoadResponse:
        try:
            await store.reload(settings.source, timeout=settings.fetch_timeout)
        except StandingsLoadError as exc:
            raise HTTPException(status_code=502, detail=str(exc)) from exc
        except MalformedFieldError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return _load_response(store)

    @app.get("/standings", response_model=StandingsResponse)
    async def list_standings(
        column: str = Query("rank"),
        ascending: bool = Query(True),
        query: str = Query(""),
    ) -> StandingsResponse:
        return _standings_response(store.records, _view_from_query(column, ascending, query))

    @app.post("/standings/view", response_model=StandingsResponse)
    async def toggle_view(payload: ToggleSortRequest) -> StandingsResponse:
        view = payload.view.to_state().with_sort(payload.column)
        return _standings_response(store.records, view)

    @app.get("/standings/histogram", response_model=HistogramResponse)
    async def histogram() -> HistogramResponse:
        return HistogramResponse.from_histogram(win_rate_histogram(store.records))

    @app.get("/standings/totals", response_model=TotalsResponse)
    async def totals() -> TotalsResponse:
        return TotalsResponse.from_totals(game_totals(store.records))

    @app.get("/standings/top", response_model=list[ParticipantResponse])
    async def top(limit: int | None = Query(None, ge=0, le=500)) -> list[ParticipantResponse]:
        resolved = settings.top_n if limit is None else limit
        return [ParticipantResponse.from_record(record) for record in top_records(store.records, resolved)]

    @app.get("/standings/rating-curve", response_model=list[RatingPointResponse])
    async def ratings() -> list[RatingPointResponse]:
        return [RatingPointResponse.from_point(point) for point in rating_curve(store.records)]

    @app.get("/standings/players/{name}", response_model=PlayerStatsResponse)
    async def player_detail(name: str) -> PlayerStatsResponse:
        record = find_record(store.records, name)
        if record is None:
            raise HTTPException(status_code=404, detail="Player not found")
        return PlayerStatsResponse.from_stats(player_stats(record, field_size=len(store.records)))

    @app.get("/standings/compare", response_model=ComparisonResponse)
    async def compare(a: str = Query(""), b: str = Query("")) -> ComparisonResponse:
        try:
            result = compare_players(store.records, a, b)
        except ParticipantNotFoundError as exc:
            raise HTTPException(
                status_code=404,
                detail={"message": "Select two players to compare", "side": exc.side, "name": exc.name},
            ) from exc
        return ComparisonResponse(
            a=PlayerStatsResponse.from_stats(result.a),
            b=PlayerStatsResponse.from_stats(result.b),
        )

    @app.get("/standings/export.csv")
    async def export_csv(
        column: str = Query("rank"),
        ascending: bool = Query(True),
        query: str = Query(""),
    ):
        visible = _apply_view(store.records, _view_from_query(column, ascending, query))
        return Response(
            content=serialize_records(visible),
            media_type="text/csv",
            headers={"Content-Disposition": f"attachment; filename={settings.export_filename}"},
        )

    return app
